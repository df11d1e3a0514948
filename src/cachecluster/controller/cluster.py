"""Lifecycle management of a single cache cluster.

``ClusterConnector`` binds a provider client for a resource; ``ClusterExternal``
observes, creates, modifies and deletes the remote cluster. Every call makes
at most one remote round trip and never retries: failures are wrapped with an
operation-specific error and left to the scheduler.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from pathlib import Path

import httpx
from pydantic import ValidationError

from cachecluster.client.async_client import AsyncCacheClient
from cachecluster.client.protocol import CacheClusterAPI
from cachecluster.config import ConfigInput, ProfileConfig, load_config
from cachecluster.controller.convert import (
    generate_create_request,
    generate_modify_request,
    generate_observation,
    is_up_to_date,
    select_record,
)
from cachecluster.controller.managed import ExternalCreation, ExternalObservation, ExternalUpdate
from cachecluster.errors import (
    AuthError,
    ConfigError,
    ConnectError,
    CreateError,
    DeleteError,
    ObserveError,
    UpdateError,
    is_not_found,
)
from cachecluster.models.conditions import available, creating, deleting
from cachecluster.models.resource import CacheCluster, ClusterStatus
from cachecluster.settings import RuntimeSettings

logger = logging.getLogger(__name__)

ClientFactory = Callable[..., AsyncCacheClient]


class ClusterExternal:
    """External client for one cache cluster, bound to a provider API."""

    def __init__(
        self,
        client: CacheClusterAPI,
        *,
        closer: Callable[[], Awaitable[None]] | None = None,
    ) -> None:
        self.client = client
        self._closer = closer

    async def aclose(self) -> None:
        if self._closer is not None:
            await self._closer()

    async def observe(self, cr: CacheCluster) -> ExternalObservation:
        name = cr.external_name
        try:
            records = await self.client.describe(name)
        except Exception as exc:
            if is_not_found(exc):
                logger.debug("cache cluster %r not found", name)
                return ExternalObservation(resource_exists=False)
            logger.warning("describe of cache cluster %r failed: %s", name, exc)
            raise ObserveError(exc) from exc

        record = select_record(records, name)
        if record is None:
            logger.debug("cache cluster %r not found", name)
            return ExternalObservation(resource_exists=False)

        observation = generate_observation(record)
        status = observation.cache_cluster_status
        if status == ClusterStatus.CREATING:
            cr.status.set_conditions(creating())
        elif status == ClusterStatus.AVAILABLE:
            cr.status.set_conditions(available())

        up_to_date = is_up_to_date(cr.spec.for_provider, observation)
        cr.status.at_provider = observation
        logger.debug("cache cluster %r is %s (up to date: %s)", name, status, up_to_date)
        return ExternalObservation(resource_exists=True, resource_up_to_date=up_to_date)

    async def create(self, cr: CacheCluster) -> ExternalCreation:
        # Set before the call: a failed create may still have started remotely.
        cr.status.set_conditions(creating())
        name = cr.external_name
        try:
            await self.client.create(generate_create_request(name, cr.spec.for_provider))
        except Exception as exc:
            logger.warning("create of cache cluster %r failed: %s", name, exc)
            raise CreateError(exc) from exc
        logger.debug("create of cache cluster %r requested", name)
        return ExternalCreation()

    async def update(self, cr: CacheCluster) -> ExternalUpdate:
        name = cr.external_name
        status = cr.status.at_provider.cache_cluster_status
        if status != ClusterStatus.AVAILABLE:
            # The provider rejects modifications while a cluster is transitioning.
            logger.debug("skipping modify of cache cluster %r in status %r", name, status)
            return ExternalUpdate()

        try:
            await self.client.modify(generate_modify_request(name, cr.spec.for_provider))
        except Exception as exc:
            logger.warning("modify of cache cluster %r failed: %s", name, exc)
            raise UpdateError(exc) from exc
        logger.debug("modify of cache cluster %r requested", name)
        return ExternalUpdate()

    async def delete(self, cr: CacheCluster) -> None:
        cr.status.set_conditions(deleting())
        name = cr.external_name
        try:
            await self.client.delete(name)
        except Exception as exc:
            logger.warning("delete of cache cluster %r failed: %s", name, exc)
            raise DeleteError(exc) from exc
        logger.debug("delete of cache cluster %r requested", name)


class ClusterConnector:
    """Produce a ``ClusterExternal`` bound to the account and region a resource targets.

    The profile is ``spec.provider_config_ref``, else ``CACHECLUSTER_PROFILE``,
    else the configured default. Region is ``spec.for_provider.region``, else
    ``CACHECLUSTER_REGION``, else the profile's region. Environment variables
    override the remaining profile fields.
    """

    def __init__(
        self,
        config: ConfigInput | None = None,
        *,
        config_path: str | Path | None = None,
        http_client: httpx.AsyncClient | None = None,
        client_factory: ClientFactory | None = None,
    ) -> None:
        self._config = config
        self._config_path = config_path
        self._http_client = http_client
        self._client_factory = client_factory or AsyncCacheClient

    def resolve_profile(self, cr: CacheCluster) -> tuple[ProfileConfig, str]:
        try:
            runtime = RuntimeSettings()
        except ValidationError as exc:
            raise ConfigError(f"invalid environment overrides: {exc}") from exc

        resolved = load_config(self._config, config_path=self._config_path)
        selected, profile = resolved.data.get_profile(cr.spec.provider_config_ref or runtime.profile)
        if profile is None:
            raise ConfigError(f"profile '{selected}' not found")

        try:
            effective = ProfileConfig.model_validate({**profile.model_dump(), **runtime.profile_overrides()})
        except ValidationError as exc:
            raise ConfigError(f"invalid profile '{selected}' after environment overrides: {exc}") from exc
        region = cr.spec.for_provider.region or effective.region
        if not region:
            raise ConfigError(f"no region configured for cache cluster '{cr.metadata.name}'")
        return effective, region

    async def connect(self, cr: CacheCluster) -> ClusterExternal:
        try:
            profile, region = self.resolve_profile(cr)
            client = self._client_factory(profile, region=region, http_client=self._http_client)
        except (AuthError, ConfigError) as exc:
            logger.warning("cannot connect for cache cluster %r: %s", cr.metadata.name, exc)
            raise ConnectError(exc) from exc
        return ClusterExternal(client.cache_clusters, closer=client.aclose)
