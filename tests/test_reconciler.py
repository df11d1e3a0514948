from __future__ import annotations

from datetime import UTC, datetime

import pytest

from cachecluster.client.fake import MockCacheClusterAPI, raises
from cachecluster.controller import (
    ClusterExternal,
    ExternalObservation,
    ReconcileAction,
    reconcile_once,
)
from cachecluster.errors import APIError, ConnectError, CreateError, ObserveError
from cachecluster.models import CacheCluster, CacheClusterRecord, ConditionReason, ConditionType

BOOM = APIError(status_code=500, message="boom")


class _Connecter:
    def __init__(self, api: MockCacheClusterAPI) -> None:
        self.api = api
        self.closed = 0

    async def _close(self) -> None:
        self.closed += 1

    async def connect(self, cr: CacheCluster) -> ClusterExternal:
        return ClusterExternal(self.api, closer=self._close)


class _FailingConnecter:
    async def connect(self, cr: CacheCluster) -> ClusterExternal:
        raise ConnectError(BOOM)


def _cluster(*, nodes: int = 2, deleting: bool = False) -> CacheCluster:
    cr = CacheCluster.model_validate(
        {
            "metadata": {"name": "somecluster"},
            "spec": {"forProvider": {"cacheNodeType": "t2.small", "numCacheNodes": nodes}},
        }
    )
    if deleting:
        cr.metadata.deletion_timestamp = datetime.now(UTC)
    return cr


def _record(status: str, nodes: int = 2) -> CacheClusterRecord:
    return CacheClusterRecord(
        cacheClusterId="somecluster",
        cacheClusterStatus=status,
        cacheNodeType="t2.small",
        numCacheNodes=nodes,
    )


@pytest.mark.asyncio
async def test_missing_cluster_is_created() -> None:
    api = MockCacheClusterAPI(mock_describe=lambda _name: [], mock_create=lambda _spec: None)
    connecter = _Connecter(api)
    cr = _cluster()

    result = await reconcile_once(connecter, cr)

    assert result.action == ReconcileAction.CREATE
    assert result.observation == ExternalObservation(resource_exists=False)
    assert cr.status.has_reason(ConditionType.READY, ConditionReason.CREATING)
    assert connecter.closed == 1


@pytest.mark.asyncio
async def test_drifted_cluster_is_updated() -> None:
    api = MockCacheClusterAPI(mock_describe=lambda _name: [_record("available")], mock_modify=lambda _spec: None)
    cr = _cluster(nodes=3)

    result = await reconcile_once(_Connecter(api), cr)

    assert result.action == ReconcileAction.UPDATE
    assert len(api.calls_to("modify")) == 1


@pytest.mark.asyncio
async def test_transitioning_cluster_update_makes_no_call() -> None:
    api = MockCacheClusterAPI(mock_describe=lambda _name: [_record("modifying", nodes=2)])
    cr = _cluster(nodes=3)

    result = await reconcile_once(_Connecter(api), cr)

    assert result.action == ReconcileAction.UPDATE
    assert api.calls_to("modify") == []


@pytest.mark.asyncio
async def test_up_to_date_cluster_is_left_alone() -> None:
    api = MockCacheClusterAPI(mock_describe=lambda _name: [_record("available")])
    cr = _cluster()

    result = await reconcile_once(_Connecter(api), cr)

    assert result.action == ReconcileAction.NONE
    assert result.observation.resource_up_to_date
    assert [name for name, _ in api.calls] == ["describe"]


@pytest.mark.asyncio
async def test_deletion_requested_deletes_existing_cluster() -> None:
    api = MockCacheClusterAPI(mock_describe=lambda _name: [_record("available")], mock_delete=lambda _name: None)
    cr = _cluster(deleting=True)

    result = await reconcile_once(_Connecter(api), cr)

    assert result.action == ReconcileAction.DELETE
    assert cr.status.has_reason(ConditionType.READY, ConditionReason.DELETING)


@pytest.mark.asyncio
async def test_deletion_requested_for_absent_cluster_is_noop() -> None:
    api = MockCacheClusterAPI(mock_describe=lambda _name: [])
    cr = _cluster(deleting=True)

    result = await reconcile_once(_Connecter(api), cr)

    assert result.action == ReconcileAction.NONE
    assert not result.observation.resource_exists


@pytest.mark.asyncio
async def test_errors_propagate_and_client_is_closed() -> None:
    connecter = _Connecter(MockCacheClusterAPI(mock_describe=raises(BOOM)))

    with pytest.raises(ObserveError):
        await reconcile_once(connecter, _cluster())
    assert connecter.closed == 1

    connecter = _Connecter(MockCacheClusterAPI(mock_describe=lambda _name: [], mock_create=raises(BOOM)))
    cr = _cluster()
    with pytest.raises(CreateError):
        await reconcile_once(connecter, cr)
    assert connecter.closed == 1
    assert cr.status.has_reason(ConditionType.READY, ConditionReason.CREATING)


@pytest.mark.asyncio
async def test_connect_failure_makes_no_remote_call() -> None:
    with pytest.raises(ConnectError):
        await reconcile_once(_FailingConnecter(), _cluster())
