from cachecluster.controller.cluster import ClusterConnector, ClusterExternal
from cachecluster.controller.managed import (
    ExternalClient,
    ExternalConnecter,
    ExternalCreation,
    ExternalObservation,
    ExternalUpdate,
)
from cachecluster.controller.reconciler import ReconcileAction, ReconcileResult, reconcile_once

__all__ = [
    "ClusterConnector",
    "ClusterExternal",
    "ExternalClient",
    "ExternalConnecter",
    "ExternalCreation",
    "ExternalObservation",
    "ExternalUpdate",
    "ReconcileAction",
    "ReconcileResult",
    "reconcile_once",
]
