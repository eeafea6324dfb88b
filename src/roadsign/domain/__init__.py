"""Pure domain logic: expiry computation, planning and the calendar grid."""

from .expiry import (
    classify_alert_status,
    classify_priority,
    compute_expiry_date,
    compute_expiry_info,
    compute_expiry_infos,
    days_remaining,
    film_class_duration,
    recommended_intervention,
)
from .models import (
    AlertStatus,
    AreaGroup,
    AreaStrategy,
    CalendarView,
    ExpiryInfo,
    ExpiryRecord,
    ExpiryStatistics,
    FilmClass,
    GeoPoint,
    InterventionType,
    MaintenancePriority,
    MaintenanceStatus,
    MaintenanceType,
    Notification,
    NotificationAction,
    NotificationKind,
    NotificationLevel,
    Priority,
    ScheduledMaintenance,
    SlotView,
    WorkloadLevel,
)
from .notifications import build_notification, format_notification
from .planning import group_by_area, rank_by_urgency, summarize
from .schedule import (
    day_view,
    detect_conflicts,
    group_by_employee,
    records_for_day,
    records_for_employee_day,
    slots_for_time,
    time_slots,
    week_days,
    workload_percentage,
)

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
    "build_notification",
    "classify_alert_status",
    "classify_priority",
    "compute_expiry_date",
    "compute_expiry_info",
    "compute_expiry_infos",
    "day_view",
    "days_remaining",
    "detect_conflicts",
    "film_class_duration",
    "format_notification",
    "group_by_area",
    "group_by_employee",
    "rank_by_urgency",
    "recommended_intervention",
    "records_for_day",
    "records_for_employee_day",
    "slots_for_time",
    "summarize",
    "time_slots",
    "week_days",
    "workload_percentage",
]
