"""Legal status transitions for scheduled maintenance.

The engine does not enforce these rules; records arrive with whatever status
the caller stored. The table is what calendar quick actions and any
replacement UI should offer.
"""

from __future__ import annotations

from .models import MaintenanceStatus

TRANSITIONS: dict[MaintenanceStatus, frozenset[MaintenanceStatus]] = {
    MaintenanceStatus.SCHEDULED: frozenset(
        {MaintenanceStatus.IN_PROGRESS, MaintenanceStatus.CANCELLED}
    ),
    MaintenanceStatus.IN_PROGRESS: frozenset(
        {MaintenanceStatus.COMPLETED, MaintenanceStatus.CANCELLED}
    ),
    MaintenanceStatus.COMPLETED: frozenset(),
    MaintenanceStatus.CANCELLED: frozenset(),
}

# Forward step offered as a one-click action on calendar cards.
QUICK_ACTIONS: dict[MaintenanceStatus, MaintenanceStatus] = {
    MaintenanceStatus.SCHEDULED: MaintenanceStatus.IN_PROGRESS,
    MaintenanceStatus.IN_PROGRESS: MaintenanceStatus.COMPLETED,
}


def allowed_transitions(status: MaintenanceStatus | str) -> frozenset[MaintenanceStatus]:
    return TRANSITIONS[MaintenanceStatus(status)]


def can_transition(current: MaintenanceStatus | str, target: MaintenanceStatus | str) -> bool:
    return MaintenanceStatus(target) in allowed_transitions(current)


def is_terminal(status: MaintenanceStatus | str) -> bool:
    return not allowed_transitions(status)


def quick_action(status: MaintenanceStatus | str) -> MaintenanceStatus | None:
    """Return the forward transition offered for ``status``, if any."""

    return QUICK_ACTIONS.get(MaintenanceStatus(status))


__all__ = [
    "QUICK_ACTIONS",
    "TRANSITIONS",
    "allowed_transitions",
    "can_transition",
    "is_terminal",
    "quick_action",
]
