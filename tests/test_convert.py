from __future__ import annotations

import pytest

from cachecluster.controller.convert import (
    generate_create_request,
    generate_modify_request,
    generate_observation,
    is_up_to_date,
    select_record,
)
from cachecluster.models import CacheClusterObservation, CacheClusterParameters, CacheClusterRecord, Endpoint

DESIRED = CacheClusterParameters(cache_node_type="t2.small", num_cache_nodes=2)


@pytest.mark.parametrize(
    ("status", "node_type", "nodes", "expected"),
    [
        ("available", "t2.small", 2, True),
        ("available", "t2.medium", 2, False),
        ("available", "t2.small", 3, False),
        ("creating", "t2.small", 2, False),
        ("modifying", "t2.small", 2, False),
        (None, None, None, False),
    ],
)
def test_is_up_to_date(status: str | None, node_type: str | None, nodes: int | None, expected: bool) -> None:
    observation = CacheClusterObservation(
        cache_cluster_status=status,
        cache_node_type=node_type,
        num_cache_nodes=nodes,
    )
    assert is_up_to_date(DESIRED, observation) is expected


def test_generate_observation_maps_every_field() -> None:
    record = CacheClusterRecord.model_validate(
        {
            "cacheClusterId": "somecluster",
            "cacheClusterStatus": "available",
            "cacheNodeType": "t2.small",
            "numCacheNodes": 2,
            "engine": "redis",
            "engineVersion": "7.1",
            "configurationEndpoint": {"address": "somecluster.cache.local", "port": 6379},
            "arn": "ignored-extra",
        }
    )

    observation = generate_observation(record)

    assert observation == CacheClusterObservation(
        cache_cluster_id="somecluster",
        cache_cluster_status="available",
        cache_node_type="t2.small",
        num_cache_nodes=2,
        engine="redis",
        engine_version="7.1",
        configuration_endpoint=Endpoint(address="somecluster.cache.local", port=6379),
    )


def test_select_record_falls_back_to_first() -> None:
    first = CacheClusterRecord(cacheClusterStatus="creating")
    second = CacheClusterRecord(cacheClusterId="other")
    assert select_record([first, second], "somecluster") is first
    assert select_record([first, second], "other") is second
    assert select_record([], "somecluster") is None


def test_requests_carry_desired_parameters() -> None:
    params = CacheClusterParameters(
        cache_node_type="t2.small",
        num_cache_nodes=3,
        engine="memcached",
        port=11211,
        tags={"team": "cache"},
    )

    create = generate_create_request("somecluster", params)
    modify = generate_modify_request("somecluster", params)

    assert create.cache_cluster_id == "somecluster"
    assert (create.cache_node_type, create.num_cache_nodes, create.engine, create.port) == (
        "t2.small",
        3,
        "memcached",
        11211,
    )
    assert create.tags == {"team": "cache"}
    assert create.tags is not params.tags
    assert (modify.cache_node_type, modify.num_cache_nodes, modify.apply_immediately) == ("t2.small", 3, True)
