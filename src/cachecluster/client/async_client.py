from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import httpx

from cachecluster.config.models import ProfileConfig
from cachecluster.errors import AuthError, ConfigError
from cachecluster.http import ProviderTransport
from cachecluster.services import CacheClustersService

JsonObject = dict[str, Any]
RequestParams = Mapping[str, str | int | float | bool]


def _secret_to_str(value: object) -> str | None:
    if value is None:
        return None
    getter = getattr(value, "get_secret_value", None)
    if callable(getter):
        secret = getter()
        return str(secret) if secret else None
    raw = str(value)
    return raw if raw else None


class AsyncCacheClient:
    """Async cache provider client bound to one account and region."""

    def __init__(
        self,
        profile: ProfileConfig,
        *,
        region: str | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.region = region or profile.region
        if not self.region:
            raise ConfigError("region is required")

        api_token = _secret_to_str(profile.api_token)
        if not api_token:
            raise AuthError("api_token is required to call the cache provider")

        self.account_id = profile.account_id
        self.base_url = profile.base_url
        self.request_timeout_seconds = profile.request_timeout_seconds
        self.verify_ssl = profile.verify_ssl

        self._transport = ProviderTransport(
            base_url=self.base_url,
            timeout=self.request_timeout_seconds,
            verify_tls=self.verify_ssl,
            api_token=api_token,
            account_id=self.account_id,
            http_client=http_client,
        )
        self._cache_clusters: CacheClustersService | None = None

    @property
    def cache_clusters(self) -> CacheClustersService:
        if self._cache_clusters is None:
            self._cache_clusters = CacheClustersService(self)
        return self._cache_clusters

    async def __aenter__(self) -> AsyncCacheClient:
        return self

    async def __aexit__(self, exc_type: object, exc: object, tb: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._transport.aclose()

    async def _request_json(
        self,
        method: str,
        path: str,
        *,
        params: RequestParams | None = None,
        json_data: Mapping[str, Any] | None = None,
        content_type: str = "application/json",
    ) -> JsonObject:
        return await self._transport.request_json(
            method,
            path,
            params=params,
            json_data=json_data,
            content_type=content_type,
        )
