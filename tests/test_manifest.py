from __future__ import annotations

from pathlib import Path

import pytest

from cachecluster.errors import ConfigError
from cachecluster.manifest import load_cache_cluster

MANIFEST = """\
apiVersion: cache.cachecluster.io/v1alpha1
kind: CacheCluster
metadata:
  name: sessions
  annotations:
    cachecluster.io/external-name: sessions-prod
spec:
  providerConfigRef: production
  forProvider:
    region: eu-west-1
    cacheNodeType: cache.t3.small
    numCacheNodes: 2
    engine: redis
    engineVersion: "7.1"
    tags:
      team: platform
"""


def test_load_yaml_manifest(tmp_path: Path) -> None:
    path = tmp_path / "cluster.yaml"
    path.write_text(MANIFEST, encoding="utf-8")

    cr = load_cache_cluster(path)

    assert cr.external_name == "sessions-prod"
    assert cr.spec.provider_config_ref == "production"
    assert cr.spec.for_provider.cache_node_type == "cache.t3.small"
    assert cr.spec.for_provider.num_cache_nodes == 2
    assert cr.spec.for_provider.engine_version == "7.1"
    assert cr.spec.for_provider.tags == {"team": "platform"}
    assert cr.status.conditions == []
    assert not cr.deletion_requested


def test_load_mapping_manifest_with_deletion_timestamp() -> None:
    cr = load_cache_cluster(
        {
            "metadata": {"name": "sessions", "deletionTimestamp": "2024-05-01T12:00:00Z"},
            "spec": {"forProvider": {"cacheNodeType": "cache.t3.small"}},
        }
    )
    assert cr.external_name == "sessions"
    assert cr.spec.for_provider.num_cache_nodes == 1
    assert cr.deletion_requested


@pytest.mark.parametrize(
    "payload",
    [
        {"kind": "ReplicationGroup", "spec": {"forProvider": {"cacheNodeType": "cache.t3.small"}}},
        {"spec": {"forProvider": {"numCacheNodes": 2}}},
        {"spec": {"forProvider": {"cacheNodeType": "cache.t3.small", "numCacheNodes": 0}}},
    ],
)
def test_invalid_manifest_raises(payload: dict[str, object]) -> None:
    with pytest.raises(ConfigError):
        load_cache_cluster(payload)
