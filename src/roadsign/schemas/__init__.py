"""JSON payloads handed to presentation code."""

from .payloads import (
    AreaGroupPayload,
    ExpiryInfoPayload,
    ExpiryStatisticsPayload,
    GeoPointPayload,
    NotificationPayload,
    ScheduledMaintenancePayload,
    SlotViewPayload,
)

__all__ = [
    "AreaGroupPayload",
    "ExpiryInfoPayload",
    "ExpiryStatisticsPayload",
    "GeoPointPayload",
    "NotificationPayload",
    "ScheduledMaintenancePayload",
    "SlotViewPayload",
]
