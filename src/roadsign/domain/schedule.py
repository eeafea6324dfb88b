"""Calendar slot grid for scheduled maintenance.

The grid answers occupancy questions over a list of
:class:`~src.roadsign.domain.models.ScheduledMaintenance` records supplied by
the caller: which records fall on a day, which slot a record sits in, whether
records overlap and how busy an hour is. A record is laid out in the single
slot containing its start time, whatever its duration.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Iterable, Sequence

from ..core.config import EngineConfig, resolve_config
from .dates import DateLike, format_minutes, to_date, to_minutes
from .models import CalendarView, ScheduledMaintenance, SlotView, WorkloadLevel

WORKLOAD_WINDOW_MINUTES = 60
WORKLOAD_HIGH_THRESHOLD = 80
WORKLOAD_MEDIUM_THRESHOLD = 60


def records_for_day(
    records: Iterable[ScheduledMaintenance], day: DateLike
) -> list[ScheduledMaintenance]:
    target = to_date(day)
    return [record for record in records if to_date(record.scheduled_date) == target]


def records_for_employee_day(
    records: Iterable[ScheduledMaintenance], day: DateLike, employee_id: str
) -> list[ScheduledMaintenance]:
    return [
        record
        for record in records_for_day(records, day)
        if record.employee_id == employee_id
    ]


def week_days(anchor: DateLike) -> list[date]:
    """Return the Monday-to-Sunday week containing ``anchor``.

    A Sunday belongs to the week that started six days earlier.
    """

    day = to_date(anchor)
    monday = day - timedelta(days=day.weekday())
    return [monday + timedelta(days=offset) for offset in range(7)]


def _check_step(step_minutes: int) -> None:
    # Slots are matched by hour, so every hour must start a slot.
    if step_minutes <= 0 or 60 % step_minutes:
        raise ValueError("step_minutes must be a positive divisor of 60")


def time_slots(start_hour: int = 8, end_hour: int = 18, step_minutes: int = 30) -> list[str]:
    """Return slot labels from ``start_hour:00`` to ``end_hour:00`` inclusive."""

    _check_step(step_minutes)
    if start_hour > end_hour:
        raise ValueError("start_hour must not exceed end_hour")
    return [
        format_minutes(minute)
        for minute in range(start_hour * 60, end_hour * 60 + 1, step_minutes)
    ]


def _starts_in_slot(start_time: str, slot: str, step_minutes: int) -> bool:
    start_hour, start_minute = divmod(to_minutes(start_time), 60)
    slot_hour, slot_minute = divmod(to_minutes(slot), 60)
    return start_hour == slot_hour and slot_minute <= start_minute < slot_minute + step_minutes


def slots_for_time(
    records: Iterable[ScheduledMaintenance], time: str, step_minutes: int = 30
) -> list[ScheduledMaintenance]:
    """Return the records whose start time falls in the slot ``time``."""

    _check_step(step_minutes)
    return [record for record in records if _starts_in_slot(record.start_time, time, step_minutes)]


def detect_conflicts(records: Sequence[ScheduledMaintenance]) -> bool:
    """Return ``True`` when two consecutive records overlap.

    Records are expected to share one employee and one day. Touching windows
    (one ends when the next starts) do not conflict.
    """

    if len(records) <= 1:
        return False
    ordered = sorted(records, key=lambda record: to_minutes(record.start_time))
    return any(
        to_minutes(current.end_time) > to_minutes(following.start_time)
        for current, following in zip(ordered, ordered[1:])
    )


def workload_percentage(time: str, records: Iterable[ScheduledMaintenance]) -> float:
    """Share of the hour starting at ``time`` covered by ``records`` (0-100).

    Overlaps of different records are summed, so two parallel half-hour jobs
    fill the hour.
    """

    window_start = to_minutes(time)
    window_end = window_start + WORKLOAD_WINDOW_MINUTES
    covered = 0
    for record in records:
        overlap_start = max(window_start, to_minutes(record.start_time))
        overlap_end = min(window_end, to_minutes(record.end_time))
        if overlap_start < overlap_end:
            covered += overlap_end - overlap_start
    return min(100.0, covered / WORKLOAD_WINDOW_MINUTES * 100)


def workload_level(percentage: float) -> WorkloadLevel:
    if percentage > WORKLOAD_HIGH_THRESHOLD:
        return WorkloadLevel.HIGH
    if percentage > WORKLOAD_MEDIUM_THRESHOLD:
        return WorkloadLevel.MEDIUM
    return WorkloadLevel.LOW


def group_by_employee(
    records: Iterable[ScheduledMaintenance],
) -> list[list[ScheduledMaintenance]]:
    """Group records per employee in first-seen order."""

    groups: dict[str, list[ScheduledMaintenance]] = {}
    for record in records:
        groups.setdefault(record.employee_id, []).append(record)
    return list(groups.values())


def unique_employees(records: Iterable[ScheduledMaintenance]) -> list[tuple[str, str]]:
    """Return ``(employee_id, employee_name)`` pairs in first-seen order."""

    seen: dict[str, str] = {}
    for record in records:
        seen.setdefault(record.employee_id, record.employee_name)
    return list(seen.items())


def is_current_slot(
    time: str,
    now: datetime,
    *,
    day: DateLike | None = None,
    step_minutes: int = 30,
) -> bool:
    """Return ``True`` when ``now`` falls inside the slot ``time``.

    With ``day`` given the slot only counts as current on that calendar day.
    """

    if day is not None and now.date() != to_date(day):
        return False
    return _starts_in_slot(format_minutes(now.hour * 60 + now.minute), time, step_minutes)


def day_view(
    records: Iterable[ScheduledMaintenance],
    day: DateLike,
    *,
    employee_id: str | None = None,
    now: datetime | None = None,
    config: EngineConfig | None = None,
) -> list[SlotView]:
    """Lay out one day of the calendar as slot rows.

    A slot is flagged as conflicting when two records of the same employee
    starting in it overlap.
    """

    cfg = resolve_config(config)
    if employee_id is None:
        day_records = records_for_day(records, day)
    else:
        day_records = records_for_employee_day(records, day, employee_id)

    rows = []
    for slot in time_slots(cfg.calendar_start_hour, cfg.calendar_end_hour, cfg.slot_step_minutes):
        slot_records = slots_for_time(day_records, slot, cfg.slot_step_minutes)
        by_employee = group_by_employee(slot_records)
        workload = workload_percentage(slot, slot_records)
        rows.append(
            SlotView(
                time=slot,
                records=tuple(slot_records),
                by_employee=tuple(tuple(group) for group in by_employee),
                has_conflict=any(detect_conflicts(group) for group in by_employee),
                workload=workload,
                workload_level=workload_level(workload),
                is_current=(
                    now is not None
                    and is_current_slot(slot, now, day=day, step_minutes=cfg.slot_step_minutes)
                ),
            )
        )
    return rows


def week_view(
    records: Iterable[ScheduledMaintenance],
    anchor: DateLike,
    *,
    employee_id: str | None = None,
    now: datetime | None = None,
    config: EngineConfig | None = None,
) -> list[tuple[date, list[SlotView]]]:
    """Return :func:`day_view` rows for every day of the week of ``anchor``."""

    snapshot = list(records)
    return [
        (day, day_view(snapshot, day, employee_id=employee_id, now=now, config=config))
        for day in week_days(anchor)
    ]


def shift_anchor(anchor: DateLike, view: CalendarView | str, direction: str) -> date:
    """Move the calendar anchor one page ``"next"`` or ``"prev"``."""

    if direction not in ("next", "prev"):
        raise ValueError("direction must be 'next' or 'prev'")
    step = 7 if CalendarView(view) is CalendarView.WEEK else 1
    return to_date(anchor) + timedelta(days=step if direction == "next" else -step)


__all__ = [
    "day_view",
    "detect_conflicts",
    "group_by_employee",
    "is_current_slot",
    "records_for_day",
    "records_for_employee_day",
    "shift_anchor",
    "slots_for_time",
    "time_slots",
    "unique_employees",
    "week_days",
    "week_view",
    "workload_level",
    "workload_percentage",
]
