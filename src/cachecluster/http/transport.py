"""HTTP transport for cache provider API calls."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import httpx

from cachecluster.constants import NOT_FOUND_ERROR_CODES
from cachecluster.errors import APIError, NotFoundError, RequestError

logger = logging.getLogger(__name__)


def _error_details(response: httpx.Response) -> tuple[str | None, str | None]:
    try:
        decoded = response.json()
    except ValueError:
        return None, None
    if not isinstance(decoded, dict):
        return None, None
    code = decoded.get("code") or decoded.get("errorCode")
    message = decoded.get("message")
    return (str(code) if code else None, str(message) if message else None)


class ProviderTransport:
    """Async transport issuing exactly one authenticated request per call.

    Retries are left to the caller; cancellation of the awaiting task aborts
    the in-flight request and propagates unchanged.
    """

    def __init__(
        self,
        *,
        base_url: str,
        timeout: float,
        verify_tls: bool,
        api_token: str,
        account_id: str | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._api_token = api_token
        self._account_id = account_id
        self._owns_http_client = http_client is None
        self._client = http_client or httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            timeout=httpx.Timeout(timeout),
            verify=verify_tls,
            follow_redirects=True,
        )

    async def aclose(self) -> None:
        if self._owns_http_client:
            await self._client.aclose()

    async def request_json(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, str | int | float | bool] | None = None,
        json_data: Mapping[str, Any] | None = None,
        content_type: str = "application/json",
    ) -> dict[str, Any]:
        method_upper = method.upper()
        headers = {
            "Accept": "application/json",
            "Authorization": f"Bearer {self._api_token}",
        }
        if content_type:
            headers["Content-Type"] = content_type
        if self._account_id:
            headers["X-Account-Id"] = self._account_id

        logger.debug("%s %s", method_upper, path)
        try:
            response = await self._client.request(
                method_upper,
                path,
                params=params,
                json=json_data,
                headers=headers,
            )
        except httpx.HTTPError as exc:
            raise RequestError(f"{method_upper} {path} failed: {exc}") from exc

        if response.status_code >= 400:
            code, message = _error_details(response)
            error_type = APIError
            if response.status_code == 404 or code in NOT_FOUND_ERROR_CODES:
                error_type = NotFoundError
            raise error_type(
                status_code=response.status_code,
                message=message or ("transient upstream error" if response.status_code >= 500 else "request failed"),
                code=code,
                body=response.text.strip() or None,
            )

        if response.status_code == 204 or not response.text.strip():
            return {}

        try:
            decoded = response.json()
        except ValueError as exc:
            raise RequestError("response was not valid JSON") from exc

        if not isinstance(decoded, dict):
            raise RequestError("response payload must be a JSON object")
        return decoded
