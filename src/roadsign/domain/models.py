"""Domain models for the road-signage maintenance engine.

Records are frozen dataclasses: the engine never mutates input and every
derived structure is freshly allocated. Enumerations use English canonical
values; translation from the Italian names used by the field apps lives in
:mod:`src.roadsign.mappers` only.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum


class FilmClass(str, Enum):
    """Canonical regulatory classes of retroreflective sheeting."""

    CLASS_1 = "class-1"
    CLASS_2 = "class-2"
    CLASS_IIS = "class-IIs"


class Priority(str, Enum):
    """Urgency tier of an expiring film, ordered from most to least urgent."""

    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def rank(self) -> int:
        """Sort position: ``critical`` first."""
        return _PRIORITY_RANK[self]

    @property
    def weight(self) -> int:
        """Numeric weight used for area averages (low=1 ... critical=4)."""
        return _PRIORITY_WEIGHT[self]


_PRIORITY_RANK = {
    Priority.CRITICAL: 0,
    Priority.HIGH: 1,
    Priority.MEDIUM: 2,
    Priority.LOW: 3,
}
_PRIORITY_WEIGHT = {
    Priority.LOW: 1,
    Priority.MEDIUM: 2,
    Priority.HIGH: 3,
    Priority.CRITICAL: 4,
}


class AlertStatus(str, Enum):
    """UI-facing alert bucket derived from the days remaining."""

    OK = "ok"
    WARNING = "warning"
    CRITICAL = "critical"
    EXPIRED = "expired"


class InterventionType(str, Enum):
    """Intervention recommended for an expiring film."""

    VERIFICATION = "verification"
    REPLACEMENT = "replacement"


class NotificationKind(str, Enum):
    REMINDER = "reminder"
    ALERT = "alert"
    CRITICAL = "critical"


class NotificationLevel(str, Enum):
    INFO = "info"
    WARNING = "warning"
    CRITICAL = "critical"


class NotificationAction(str, Enum):
    """Follow-up suggested to the planner alongside a notification."""

    SCHEDULE_MAINTENANCE = "schedule_maintenance"
    CHECK_STATUS = "check_status"
    REPLACE_FILM = "replace_film"


class MaintenanceType(str, Enum):
    INSTALLATION = "installation"
    MAINTENANCE = "maintenance"
    VERIFICATION = "verification"
    REPLACEMENT = "replacement"
    DECOMMISSION = "decommission"


class MaintenanceStatus(str, Enum):
    """Lifecycle of a scheduled intervention.

    ``scheduled`` moves to ``in_progress`` and then ``completed``; either of
    the first two may be ``cancelled``. Transition rules are described in
    :mod:`src.roadsign.domain.status`.
    """

    SCHEDULED = "scheduled"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class MaintenancePriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


class AreaStrategy(str, Enum):
    """How :func:`~src.roadsign.domain.planning.group_by_area` buckets points."""

    BUCKET = "bucket"
    GRID = "grid"


class WorkloadLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class CalendarView(str, Enum):
    DAY = "day"
    WEEK = "week"


@dataclass(frozen=True, slots=True)
class GeoPoint:
    lat: float
    lng: float


@dataclass(frozen=True, slots=True)
class ExpiryRecord:
    """Installed product as seen by the expiry engine.

    ``film_class`` keeps the raw upstream spelling (``class-I``, ``classe-2``
    and so on); the duration lookup normalizes it.
    """

    product_id: str
    qr_code: str
    installation_date: date
    film_class: str
    gps_lat: float | None = None
    gps_lng: float | None = None


@dataclass(frozen=True, slots=True)
class ExpiryInfo:
    """Derived expiry snapshot for a single product at a given instant."""

    product_id: str
    qr_code: str
    installation_date: date
    film_class: str
    expiry_date: date
    days_remaining: int
    priority: Priority
    alert_status: AlertStatus
    recommended_intervention: InterventionType
    film_class_known: bool = True
    gps_lat: float | None = None
    gps_lng: float | None = None

    @property
    def location(self) -> GeoPoint | None:
        """Return the GPS position when both coordinates are present."""
        if self.gps_lat is None or self.gps_lng is None:
            return None
        return GeoPoint(self.gps_lat, self.gps_lng)


@dataclass(frozen=True, slots=True)
class Notification:
    """Expiry notification ready to be handed to a delivery channel."""

    id: str
    product_id: str
    message: str
    level: NotificationLevel
    action: NotificationAction
    sent_at: datetime
    read: bool = False


@dataclass(frozen=True, slots=True)
class ExpiryStatistics:
    """Aggregated counters for the expiry dashboard."""

    total: int = 0
    expired_count: int = 0
    critical_count: int = 0
    warning_count: int = 0
    ok_count: int = 0
    due_within_30: int = 0
    due_within_31_to_90: int = 0
    percent_expired: str = "0.0"
    percent_critical_or_expired: str = "0.0"


@dataclass(frozen=True, slots=True)
class AreaGroup:
    """Products sharing a planning area."""

    area: str
    members: tuple[ExpiryInfo, ...]
    mean_priority: float
    centroid: GeoPoint
    estimated_days: int


@dataclass(frozen=True, slots=True)
class ScheduledMaintenance:
    """Intervention booked on the calendar for one employee and one day."""

    id: str
    employee_id: str
    employee_name: str
    product_id: str
    product_name: str
    product_location: str
    maintenance_type: MaintenanceType
    scheduled_date: date
    start_time: str
    end_time: str
    duration: int
    status: MaintenanceStatus = MaintenanceStatus.SCHEDULED
    priority: MaintenancePriority = MaintenancePriority.MEDIUM
    title: str | None = None
    notes: str | None = None
    gps_lat: float | None = None
    gps_lng: float | None = None


@dataclass(frozen=True, slots=True)
class SlotView:
    """One row of the day calendar."""

    time: str
    records: tuple[ScheduledMaintenance, ...]
    by_employee: tuple[tuple[ScheduledMaintenance, ...], ...]
    has_conflict: bool
    workload: float
    workload_level: WorkloadLevel
    is_current: bool = False

    @property
    def is_free(self) -> bool:
        return not self.records


__all__ = [
    "AlertStatus",
    "AreaGroup",
    "AreaStrategy",
    "CalendarView",
    "ExpiryInfo",
    "ExpiryRecord",
    "ExpiryStatistics",
    "FilmClass",
    "GeoPoint",
    "InterventionType",
    "MaintenancePriority",
    "MaintenanceStatus",
    "MaintenanceType",
    "Notification",
    "NotificationAction",
    "NotificationKind",
    "NotificationLevel",
    "Priority",
    "ScheduledMaintenance",
    "SlotView",
    "WorkloadLevel",
]
