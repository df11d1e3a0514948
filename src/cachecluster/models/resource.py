from __future__ import annotations

from enum import StrEnum

from pydantic import AliasChoices, Field

from cachecluster.constants import EXTERNAL_NAME_ANNOTATION
from cachecluster.models.cache_clusters import Endpoint
from cachecluster.models.common import CacheModel, ObjectMeta
from cachecluster.models.conditions import ConditionedStatus


class ClusterStatus(StrEnum):
    """Status values reported by the provider.

    The provider may report other values; they are kept as opaque strings.
    """

    CREATING = "creating"
    AVAILABLE = "available"
    MODIFYING = "modifying"
    DELETING = "deleting"


class CacheClusterParameters(CacheModel):
    """Desired state of a cache cluster."""

    region: str | None = None
    cache_node_type: str = Field(validation_alias=AliasChoices("cache_node_type", "cacheNodeType"))
    num_cache_nodes: int = Field(
        default=1,
        ge=1,
        validation_alias=AliasChoices("num_cache_nodes", "numCacheNodes"),
    )
    engine: str | None = None
    engine_version: str | None = Field(
        default=None,
        validation_alias=AliasChoices("engine_version", "engineVersion"),
    )
    port: int | None = None
    preferred_availability_zone: str | None = Field(
        default=None,
        validation_alias=AliasChoices("preferred_availability_zone", "preferredAvailabilityZone"),
    )
    cache_parameter_group_name: str | None = Field(
        default=None,
        validation_alias=AliasChoices("cache_parameter_group_name", "cacheParameterGroupName"),
    )
    snapshot_retention_limit: int | None = Field(
        default=None,
        ge=0,
        validation_alias=AliasChoices("snapshot_retention_limit", "snapshotRetentionLimit"),
    )
    tags: dict[str, str] = Field(default_factory=dict)


class CacheClusterObservation(CacheModel):
    """Last observed remote state of a cache cluster."""

    cache_cluster_id: str | None = None
    cache_cluster_status: str | None = None
    cache_node_type: str | None = None
    num_cache_nodes: int | None = None
    engine: str | None = None
    engine_version: str | None = None
    configuration_endpoint: Endpoint | None = None


class CacheClusterSpec(CacheModel):
    for_provider: CacheClusterParameters = Field(validation_alias=AliasChoices("for_provider", "forProvider"))
    provider_config_ref: str | None = Field(
        default=None,
        validation_alias=AliasChoices("provider_config_ref", "providerConfigRef"),
    )


class CacheClusterStatus(ConditionedStatus):
    at_provider: CacheClusterObservation = Field(
        default_factory=CacheClusterObservation,
        validation_alias=AliasChoices("at_provider", "atProvider"),
    )


class CacheCluster(CacheModel):
    """A managed cache cluster: desired spec, external identity and observed status."""

    api_version: str = Field(
        default="cache.cachecluster.io/v1alpha1",
        validation_alias=AliasChoices("api_version", "apiVersion"),
    )
    kind: str = "CacheCluster"
    metadata: ObjectMeta = Field(default_factory=ObjectMeta)
    spec: CacheClusterSpec
    status: CacheClusterStatus = Field(default_factory=CacheClusterStatus)

    @property
    def external_name(self) -> str:
        return self.metadata.annotations.get(EXTERNAL_NAME_ANNOTATION) or self.metadata.name

    @property
    def deletion_requested(self) -> bool:
        return self.metadata.deletion_timestamp is not None


def set_external_name(cr: CacheCluster, name: str) -> None:
    cr.metadata.annotations[EXTERNAL_NAME_ANNOTATION] = name
