from __future__ import annotations

import logging

import pytest

from cachecluster.client.fake import MockCacheClusterAPI, raises
from cachecluster.controller import ClusterExternal
from cachecluster.errors import APIError, DeleteError
from cachecluster.models import CacheCluster


@pytest.mark.asyncio
async def test_failed_call_is_logged_with_operation(caplog: pytest.LogCaptureFixture) -> None:
    cr = CacheCluster.model_validate(
        {"metadata": {"name": "sessions"}, "spec": {"forProvider": {"cacheNodeType": "cache.t3.small"}}}
    )
    api = MockCacheClusterAPI(mock_delete=raises(APIError(status_code=500, message="boom")))

    with caplog.at_level(logging.WARNING, logger="cachecluster.controller.cluster"):
        with pytest.raises(DeleteError):
            await ClusterExternal(api).delete(cr)

    assert "delete of cache cluster 'sessions' failed" in caplog.text
