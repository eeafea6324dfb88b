"""Translate upstream API payloads into engine records.

The product/maintenance backend and the field apps disagree on naming: the
backend speaks English snake_case (``intervention_type: "maintenance"``),
the apps use camelCase and Italian enum values
(``tipo_intervento: "installazione"``). All of that is resolved here, once,
so the domain modules only ever see canonical English enums.
"""

from __future__ import annotations

import math
from typing import Any, Mapping

import structlog

from .domain.dates import to_date, to_minutes
from .domain.models import (
    ExpiryRecord,
    MaintenancePriority,
    MaintenanceStatus,
    MaintenanceType,
    ScheduledMaintenance,
)
from .exceptions import InvalidPayloadError, ensure_field

logger = structlog.get_logger(__name__)

MAINTENANCE_TYPE_ALIASES: dict[str, MaintenanceType] = {
    "installation": MaintenanceType.INSTALLATION,
    "installazione": MaintenanceType.INSTALLATION,
    "maintenance": MaintenanceType.MAINTENANCE,
    "manutenzione": MaintenanceType.MAINTENANCE,
    "verification": MaintenanceType.VERIFICATION,
    "verifica": MaintenanceType.VERIFICATION,
    "replacement": MaintenanceType.REPLACEMENT,
    "sostituzione": MaintenanceType.REPLACEMENT,
    "decommission": MaintenanceType.DECOMMISSION,
    "decommissioning": MaintenanceType.DECOMMISSION,
    "dismissione": MaintenanceType.DECOMMISSION,
    "remove": MaintenanceType.DECOMMISSION,
    "remove2": MaintenanceType.DECOMMISSION,
}

MAINTENANCE_TYPE_LABELS_IT: dict[MaintenanceType, str] = {
    MaintenanceType.INSTALLATION: "installazione",
    MaintenanceType.MAINTENANCE: "manutenzione",
    MaintenanceType.VERIFICATION: "verifica",
    MaintenanceType.REPLACEMENT: "sostituzione",
    MaintenanceType.DECOMMISSION: "dismissione",
}

MAINTENANCE_PRIORITY_ALIASES: dict[str, MaintenancePriority] = {
    "low": MaintenancePriority.LOW,
    "bassa": MaintenancePriority.LOW,
    "medium": MaintenancePriority.MEDIUM,
    "media": MaintenancePriority.MEDIUM,
    "high": MaintenancePriority.HIGH,
    "alta": MaintenancePriority.HIGH,
    "urgent": MaintenancePriority.URGENT,
    "urgente": MaintenancePriority.URGENT,
}


def parse_gps(value: Any) -> float | None:
    """Parse a GPS coordinate sent either as a number or as a string."""

    if value is None or value == "":
        return None
    try:
        parsed = float(value)
    except (TypeError, ValueError):
        logger.warning("mappers.gps.invalid", value=value)
        return None
    return None if math.isnan(parsed) else parsed


def map_maintenance_type(value: str | None) -> MaintenanceType:
    """Resolve an English or Italian intervention type; unknown means maintenance."""

    if value:
        resolved = MAINTENANCE_TYPE_ALIASES.get(value.strip().lower())
        if resolved is not None:
            return resolved
    logger.warning("mappers.maintenance_type.unknown", value=value)
    return MaintenanceType.MAINTENANCE


def maintenance_type_label(value: MaintenanceType, locale: str = "it") -> str:
    """Return the field-app label for ``value`` (Italian) or its English value."""

    if locale == "it":
        return MAINTENANCE_TYPE_LABELS_IT[value]
    return value.value


def map_maintenance_priority(value: str | None) -> MaintenancePriority:
    if value:
        resolved = MAINTENANCE_PRIORITY_ALIASES.get(value.strip().lower())
        if resolved is not None:
            return resolved
    logger.warning("mappers.priority.unknown", value=value)
    return MaintenancePriority.MEDIUM


def map_maintenance_status(value: str | None) -> MaintenanceStatus:
    if value:
        try:
            return MaintenanceStatus(value.strip().lower())
        except ValueError:
            pass
    logger.warning("mappers.status.unknown", value=value)
    return MaintenanceStatus.SCHEDULED


def _optional(payload: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        value = payload.get(key)
        if value is not None and value != "":
            return value
    return None


def expiry_record_from_payload(payload: Mapping[str, Any]) -> ExpiryRecord:
    """Build an :class:`ExpiryRecord` from a product payload.

    A missing film class is kept as an empty string; the expiry engine then
    applies its default duration and reports it.
    """

    film_class = _optional(payload, "film_class", "filmClass", "classPellicola", "classe_pellicola")
    return ExpiryRecord(
        product_id=str(ensure_field(payload, "product_id", "productId", "uuid", "id", entity="product")),
        qr_code=str(ensure_field(payload, "qr_code", "qrCode", entity="product")),
        installation_date=to_date(
            ensure_field(
                payload,
                "installation_date",
                "installationDate",
                "data_installazione",
                "dataInstallazione",
                entity="product",
            )
        ),
        film_class=str(film_class or ""),
        gps_lat=parse_gps(_optional(payload, "gps_lat", "gpsLat")),
        gps_lng=parse_gps(_optional(payload, "gps_lng", "gpsLng")),
    )


def scheduled_maintenance_from_payload(payload: Mapping[str, Any]) -> ScheduledMaintenance:
    """Build a :class:`ScheduledMaintenance` from a calendar payload.

    ``duration`` defaults to the span between start and end time.
    """

    entity = "scheduled_maintenance"
    start_time = str(ensure_field(payload, "start_time", "startTime", entity=entity))
    end_time = str(ensure_field(payload, "end_time", "endTime", entity=entity))
    duration = _optional(payload, "duration")
    if duration is None:
        duration = to_minutes(end_time) - to_minutes(start_time)
    try:
        duration = int(duration)
    except (TypeError, ValueError) as exc:
        raise InvalidPayloadError(f"{entity}: invalid duration {duration!r}") from exc

    return ScheduledMaintenance(
        id=str(ensure_field(payload, "id", "uuid", entity=entity)),
        employee_id=str(ensure_field(payload, "employee_id", "employeeId", entity=entity)),
        employee_name=str(_optional(payload, "employee_name", "employeeName") or ""),
        product_id=str(ensure_field(payload, "product_id", "productId", "product_uuid", entity=entity)),
        product_name=str(_optional(payload, "product_name", "productName") or ""),
        product_location=str(_optional(payload, "product_location", "productLocation") or ""),
        maintenance_type=map_maintenance_type(
            _optional(payload, "maintenance_type", "maintenanceType", "intervention_type", "tipo_intervento")
        ),
        scheduled_date=to_date(
            ensure_field(payload, "scheduled_date", "scheduledDate", entity=entity)
        ),
        start_time=start_time,
        end_time=end_time,
        duration=duration,
        status=map_maintenance_status(_optional(payload, "status")),
        priority=map_maintenance_priority(_optional(payload, "priority")),
        title=_optional(payload, "title"),
        notes=_optional(payload, "notes", "note"),
        gps_lat=parse_gps(_optional(payload, "gps_lat", "gpsLat")),
        gps_lng=parse_gps(_optional(payload, "gps_lng", "gpsLng")),
    )


__all__ = [
    "MAINTENANCE_PRIORITY_ALIASES",
    "MAINTENANCE_TYPE_ALIASES",
    "MAINTENANCE_TYPE_LABELS_IT",
    "expiry_record_from_payload",
    "maintenance_type_label",
    "map_maintenance_priority",
    "map_maintenance_status",
    "map_maintenance_type",
    "parse_gps",
    "scheduled_maintenance_from_payload",
]
