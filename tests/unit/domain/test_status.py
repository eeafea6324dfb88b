"""Unit coverage for the maintenance status state machine."""

from __future__ import annotations

import pytest

from src.roadsign.domain.models import MaintenanceStatus
from src.roadsign.domain import status

pytestmark = pytest.mark.unit


@pytest.mark.parametrize(
    "current, target, allowed",
    [
        ("scheduled", "in_progress", True),
        ("scheduled", "cancelled", True),
        ("scheduled", "completed", False),
        ("in_progress", "completed", True),
        ("in_progress", "cancelled", True),
        ("in_progress", "scheduled", False),
        ("completed", "cancelled", False),
        ("cancelled", "scheduled", False),
    ],
)
def test_can_transition(current: str, target: str, allowed: bool) -> None:
    assert status.can_transition(current, target) is allowed


def test_terminal_states() -> None:
    assert status.is_terminal(MaintenanceStatus.COMPLETED)
    assert status.is_terminal(MaintenanceStatus.CANCELLED)
    assert not status.is_terminal(MaintenanceStatus.SCHEDULED)
    assert not status.is_terminal(MaintenanceStatus.IN_PROGRESS)


def test_quick_actions_only_offer_forward_steps() -> None:
    assert status.quick_action("scheduled") is MaintenanceStatus.IN_PROGRESS
    assert status.quick_action("in_progress") is MaintenanceStatus.COMPLETED
    assert status.quick_action("completed") is None
    assert status.quick_action("cancelled") is None


def test_unknown_status_is_rejected() -> None:
    with pytest.raises(ValueError):
        status.allowed_transitions("paused")
