from __future__ import annotations

from datetime import UTC, datetime

from cachecluster.models import (
    Condition,
    ConditionedStatus,
    ConditionReason,
    ConditionStatus,
    ConditionType,
    available,
    creating,
    deleting,
)


def test_lifecycle_conditions_share_ready_type() -> None:
    assert creating().type == available().type == deleting().type == ConditionType.READY
    assert available().status == ConditionStatus.TRUE
    assert creating().status == ConditionStatus.FALSE
    assert deleting().reason == ConditionReason.DELETING


def test_set_conditions_upserts_by_type_and_keeps_order() -> None:
    status = ConditionedStatus()
    synced = Condition(type="Synced", status=ConditionStatus.TRUE, reason="ReconcileSuccess")

    status.set_conditions(creating(), synced)
    status.set_conditions(available())
    status.set_conditions(deleting())

    assert [condition.type for condition in status.conditions] == ["Ready", "Synced"]
    assert status.get_condition(ConditionType.READY).equal(deleting())
    assert status.get_condition("Synced") is synced


def test_set_equal_condition_keeps_transition_time() -> None:
    original = creating()
    original.last_transition_time = datetime(2020, 1, 1, tzinfo=UTC)
    status = ConditionedStatus(conditions=[original])

    status.set_conditions(creating())

    assert status.conditions == [original]
    assert status.get_condition(ConditionType.READY).last_transition_time == datetime(2020, 1, 1, tzinfo=UTC)


def test_get_missing_condition_is_unknown() -> None:
    status = ConditionedStatus()
    condition = status.get_condition(ConditionType.READY)
    assert condition.status == ConditionStatus.UNKNOWN
    assert status.conditions == []
    assert not status.has_reason(ConditionType.READY, ConditionReason.AVAILABLE)


def test_conditions_parse_from_camel_case() -> None:
    status = ConditionedStatus.model_validate(
        {
            "conditions": [
                {
                    "type": "Ready",
                    "status": "True",
                    "reason": "Available",
                    "lastTransitionTime": "2024-05-01T12:00:00Z",
                }
            ]
        }
    )
    assert status.has_reason(ConditionType.READY, ConditionReason.AVAILABLE)
    assert status.conditions[0].last_transition_time.year == 2024
