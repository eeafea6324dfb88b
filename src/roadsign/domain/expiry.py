"""Expiry computation for retroreflective films.

Regulatory durations from the installation date:

* class 1 (``class-1``/``class-I``): 7 years
* class 2 (``class-2``/``class-II``): 10 years
* class 2 high performance (``class-IIs``): 12 years

Every helper is a pure function of its arguments. The evaluation instant is
always passed in explicitly, so the same call is reproducible.
"""

from __future__ import annotations

import math
from datetime import date, datetime, time
from typing import Iterable

import structlog

from ..core.config import EngineConfig, resolve_config
from .dates import DateLike, add_years, to_date, to_moment, wall_clock
from .models import AlertStatus, ExpiryInfo, ExpiryRecord, FilmClass, InterventionType, Priority

logger = structlog.get_logger(__name__)

FILM_CLASS_DURATION_YEARS: dict[FilmClass, int] = {
    FilmClass.CLASS_1: 7,
    FilmClass.CLASS_2: 10,
    FilmClass.CLASS_IIS: 12,
}

FILM_CLASS_ALIASES: dict[str, FilmClass] = {
    "class-1": FilmClass.CLASS_1,
    "class-I": FilmClass.CLASS_1,
    "class-2": FilmClass.CLASS_2,
    "class-II": FilmClass.CLASS_2,
    "class-IIs": FilmClass.CLASS_IIS,
    "classe-1": FilmClass.CLASS_1,
    "classe-I": FilmClass.CLASS_1,
    "classe-2": FilmClass.CLASS_2,
    "classe-II": FilmClass.CLASS_2,
    "classe-IIs": FilmClass.CLASS_IIS,
}

_SECONDS_PER_DAY = 86_400


def _class_label(film_class: str) -> str:
    if isinstance(film_class, FilmClass):
        return film_class.value
    return str(film_class)


def normalize_film_class(film_class: str) -> FilmClass | None:
    """Return the canonical class for ``film_class`` or ``None`` if unknown."""

    return FILM_CLASS_ALIASES.get(_class_label(film_class).strip())


def film_class_duration(
    film_class: str, *, config: EngineConfig | None = None
) -> tuple[int, bool]:
    """Return ``(years, known)`` for ``film_class``.

    Unknown classes use ``default_film_duration_years`` and report
    ``known=False``; the fallback is also logged so it never goes unnoticed.
    """

    canonical = normalize_film_class(film_class)
    if canonical is not None:
        return FILM_CLASS_DURATION_YEARS[canonical], True

    years = resolve_config(config).default_film_duration_years
    logger.warning(
        "expiry.film_class.unknown",
        film_class=film_class,
        default_years=years,
    )
    return years, False


def compute_expiry_date(
    installation_date: DateLike,
    film_class: str,
    *,
    config: EngineConfig | None = None,
) -> date:
    """Return the installation date advanced by the class duration."""

    years, _ = film_class_duration(film_class, config=config)
    return add_years(to_date(installation_date), years)


def days_remaining(expiry_date: DateLike, now: DateLike) -> int:
    """Return ``ceil((expiry_date - now) / 1 day)``.

    Days are civil-calendar days: a ``date`` ``now`` gives the exact day
    difference, a ``datetime`` ``now`` is read as wall-clock time in its own
    zone and compared with the start of the expiry day. Daylight-saving
    transitions therefore never shift the count.
    """

    expiry = to_date(expiry_date)
    moment = to_moment(now)
    if not isinstance(moment, datetime):
        return (expiry - moment).days

    delta = datetime.combine(expiry, time.min) - wall_clock(moment)
    return math.ceil(delta.total_seconds() / _SECONDS_PER_DAY)


def classify_priority(days: int, *, config: EngineConfig | None = None) -> Priority:
    cfg = resolve_config(config)
    if days < 0:
        return Priority.CRITICAL
    if days <= cfg.critical_threshold_days:
        return Priority.HIGH
    if days <= cfg.warning_threshold_days:
        return Priority.MEDIUM
    return Priority.LOW


def classify_alert_status(days: int, *, config: EngineConfig | None = None) -> AlertStatus:
    # Same partition as classify_priority; the UI switches on both names.
    cfg = resolve_config(config)
    if days < 0:
        return AlertStatus.EXPIRED
    if days <= cfg.critical_threshold_days:
        return AlertStatus.CRITICAL
    if days <= cfg.warning_threshold_days:
        return AlertStatus.WARNING
    return AlertStatus.OK


def recommended_intervention(
    days: int,
    film_class: str,
    *,
    config: EngineConfig | None = None,
) -> InterventionType:
    """Pick the intervention to plan. Rules are evaluated top-down."""

    cfg = resolve_config(config)
    if days <= cfg.critical_threshold_days:
        return InterventionType.REPLACEMENT
    if "IIs" in _class_label(film_class) and days <= cfg.verification_window_days:
        return InterventionType.VERIFICATION
    return InterventionType.VERIFICATION


def compute_expiry_info(
    record: ExpiryRecord,
    now: DateLike,
    *,
    config: EngineConfig | None = None,
) -> ExpiryInfo:
    """Derive the full expiry snapshot of ``record`` at ``now``."""

    installation = to_date(record.installation_date)
    years, known = film_class_duration(record.film_class, config=config)
    expiry = add_years(installation, years)
    remaining = days_remaining(expiry, now)

    return ExpiryInfo(
        product_id=record.product_id,
        qr_code=record.qr_code,
        installation_date=installation,
        film_class=record.film_class,
        expiry_date=expiry,
        days_remaining=remaining,
        priority=classify_priority(remaining, config=config),
        alert_status=classify_alert_status(remaining, config=config),
        recommended_intervention=recommended_intervention(
            remaining, record.film_class, config=config
        ),
        film_class_known=known,
        gps_lat=record.gps_lat,
        gps_lng=record.gps_lng,
    )


def compute_expiry_infos(
    records: Iterable[ExpiryRecord],
    now: DateLike,
    *,
    config: EngineConfig | None = None,
) -> list[ExpiryInfo]:
    """Batch variant of :func:`compute_expiry_info` sharing one ``now``."""

    return [compute_expiry_info(record, now, config=config) for record in records]


__all__ = [
    "FILM_CLASS_ALIASES",
    "FILM_CLASS_DURATION_YEARS",
    "classify_alert_status",
    "classify_priority",
    "compute_expiry_date",
    "compute_expiry_info",
    "compute_expiry_infos",
    "days_remaining",
    "film_class_duration",
    "normalize_film_class",
    "recommended_intervention",
]
