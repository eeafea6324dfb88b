"""Pydantic schemas mirroring the engine's output structures.

``model_dump(mode="json")`` on any of these yields plain JSON data; dates are
rendered as ISO strings and enums as their values.
"""

from __future__ import annotations

from datetime import date, datetime

from pydantic import BaseModel, Field

from ..domain.models import (
    AlertStatus,
    AreaGroup,
    ExpiryInfo,
    ExpiryStatistics,
    GeoPoint,
    InterventionType,
    MaintenancePriority,
    MaintenanceStatus,
    MaintenanceType,
    Notification,
    NotificationAction,
    NotificationLevel,
    Priority,
    ScheduledMaintenance,
    SlotView,
    WorkloadLevel,
)


class GeoPointPayload(BaseModel):
    lat: float
    lng: float

    @classmethod
    def from_domain(cls, point: GeoPoint) -> "GeoPointPayload":
        return cls(lat=point.lat, lng=point.lng)


class ExpiryInfoPayload(BaseModel):
    product_id: str
    qr_code: str
    installation_date: date
    film_class: str
    film_class_known: bool = True
    expiry_date: date
    days_remaining: int
    priority: Priority
    alert_status: AlertStatus
    recommended_intervention: InterventionType
    gps_lat: float | None = None
    gps_lng: float | None = None

    @classmethod
    def from_domain(cls, info: ExpiryInfo) -> "ExpiryInfoPayload":
        return cls(
            product_id=info.product_id,
            qr_code=info.qr_code,
            installation_date=info.installation_date,
            film_class=info.film_class,
            film_class_known=info.film_class_known,
            expiry_date=info.expiry_date,
            days_remaining=info.days_remaining,
            priority=info.priority,
            alert_status=info.alert_status,
            recommended_intervention=info.recommended_intervention,
            gps_lat=info.gps_lat,
            gps_lng=info.gps_lng,
        )


class ExpiryStatisticsPayload(BaseModel):
    total: int = Field(default=0, ge=0)
    expired_count: int = Field(default=0, ge=0)
    critical_count: int = Field(default=0, ge=0)
    warning_count: int = Field(default=0, ge=0)
    ok_count: int = Field(default=0, ge=0)
    due_within_30: int = Field(default=0, ge=0)
    due_within_31_to_90: int = Field(default=0, ge=0)
    percent_expired: str = "0.0"
    percent_critical_or_expired: str = "0.0"

    @classmethod
    def from_domain(cls, stats: ExpiryStatistics) -> "ExpiryStatisticsPayload":
        return cls(
            total=stats.total,
            expired_count=stats.expired_count,
            critical_count=stats.critical_count,
            warning_count=stats.warning_count,
            ok_count=stats.ok_count,
            due_within_30=stats.due_within_30,
            due_within_31_to_90=stats.due_within_31_to_90,
            percent_expired=stats.percent_expired,
            percent_critical_or_expired=stats.percent_critical_or_expired,
        )


class AreaGroupPayload(BaseModel):
    area: str
    members: list[ExpiryInfoPayload]
    mean_priority: float
    centroid: GeoPointPayload
    estimated_days: int

    @classmethod
    def from_domain(cls, group: AreaGroup) -> "AreaGroupPayload":
        return cls(
            area=group.area,
            members=[ExpiryInfoPayload.from_domain(info) for info in group.members],
            mean_priority=group.mean_priority,
            centroid=GeoPointPayload.from_domain(group.centroid),
            estimated_days=group.estimated_days,
        )


class NotificationPayload(BaseModel):
    id: str
    product_id: str
    message: str
    level: NotificationLevel
    action: NotificationAction
    sent_at: datetime
    read: bool = False

    @classmethod
    def from_domain(cls, notification: Notification) -> "NotificationPayload":
        return cls(
            id=notification.id,
            product_id=notification.product_id,
            message=notification.message,
            level=notification.level,
            action=notification.action,
            sent_at=notification.sent_at,
            read=notification.read,
        )


class ScheduledMaintenancePayload(BaseModel):
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
    status: MaintenanceStatus
    priority: MaintenancePriority
    title: str | None = None
    notes: str | None = None
    gps_lat: float | None = None
    gps_lng: float | None = None

    @classmethod
    def from_domain(cls, record: ScheduledMaintenance) -> "ScheduledMaintenancePayload":
        return cls(
            id=record.id,
            employee_id=record.employee_id,
            employee_name=record.employee_name,
            product_id=record.product_id,
            product_name=record.product_name,
            product_location=record.product_location,
            maintenance_type=record.maintenance_type,
            scheduled_date=record.scheduled_date,
            start_time=record.start_time,
            end_time=record.end_time,
            duration=record.duration,
            status=record.status,
            priority=record.priority,
            title=record.title,
            notes=record.notes,
            gps_lat=record.gps_lat,
            gps_lng=record.gps_lng,
        )


class SlotViewPayload(BaseModel):
    time: str
    records: list[ScheduledMaintenancePayload]
    by_employee: list[list[ScheduledMaintenancePayload]]
    has_conflict: bool
    workload: float = Field(ge=0, le=100)
    workload_level: WorkloadLevel
    is_current: bool = False

    @classmethod
    def from_domain(cls, view: SlotView) -> "SlotViewPayload":
        return cls(
            time=view.time,
            records=[ScheduledMaintenancePayload.from_domain(record) for record in view.records],
            by_employee=[
                [ScheduledMaintenancePayload.from_domain(record) for record in group]
                for group in view.by_employee
            ],
            has_conflict=view.has_conflict,
            workload=view.workload,
            workload_level=view.workload_level,
            is_current=view.is_current,
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
