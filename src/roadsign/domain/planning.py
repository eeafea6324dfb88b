"""Dashboard aggregates and territorial planning over expiry snapshots."""

from __future__ import annotations

import math
from typing import Iterable, Sequence

from ..core.config import EngineConfig, resolve_config
from .models import AlertStatus, AreaGroup, AreaStrategy, ExpiryInfo, ExpiryStatistics, GeoPoint

UNKNOWN_AREA = "Area_Unknown"
_KM_PER_DEGREE_LAT = 111.32


def rank_by_urgency(
    infos: Iterable[ExpiryInfo],
    alert_filter: AlertStatus | str | None = None,
) -> list[ExpiryInfo]:
    """Return ``infos`` ordered by priority tier, then by days remaining.

    The sort is stable, so equal entries keep their input order. When
    ``alert_filter`` is given only snapshots with that alert status are kept.
    """

    selected = list(infos)
    if alert_filter is not None:
        wanted = AlertStatus(alert_filter)
        selected = [info for info in selected if info.alert_status is wanted]
    return sorted(selected, key=lambda info: (info.priority.rank, info.days_remaining))


def _percentage(count: int, total: int) -> str:
    if total == 0:
        return "0.0"
    return f"{count / total * 100:.1f}"


def summarize(
    infos: Sequence[ExpiryInfo], *, config: EngineConfig | None = None
) -> ExpiryStatistics:
    """Aggregate counters for the expiry dashboard. Empty input is valid.

    The due-soon counters follow the configured critical and warning
    thresholds, so they agree with the alert status of each snapshot.
    ``due_within_30``/``due_within_31_to_90`` keep their names for the
    default 30/90 day thresholds.
    """

    cfg = resolve_config(config)
    total = len(infos)
    counts = {status: 0 for status in AlertStatus}
    due_within_30 = 0
    due_within_31_to_90 = 0
    for info in infos:
        counts[info.alert_status] += 1
        if 0 <= info.days_remaining <= cfg.critical_threshold_days:
            due_within_30 += 1
        elif cfg.critical_threshold_days < info.days_remaining <= cfg.warning_threshold_days:
            due_within_31_to_90 += 1

    expired = counts[AlertStatus.EXPIRED]
    critical = counts[AlertStatus.CRITICAL]
    return ExpiryStatistics(
        total=total,
        expired_count=expired,
        critical_count=critical,
        warning_count=counts[AlertStatus.WARNING],
        ok_count=counts[AlertStatus.OK],
        due_within_30=due_within_30,
        due_within_31_to_90=due_within_31_to_90,
        percent_expired=_percentage(expired, total),
        percent_critical_or_expired=_percentage(expired + critical, total),
    )


def _bucket_key(info: ExpiryInfo, precision: int) -> str:
    point = info.location
    if point is None:
        return UNKNOWN_AREA
    return f"Area {point.lat:.{precision}f}_{point.lng:.{precision}f}"


def _grid_key(info: ExpiryInfo, cell_km: float) -> str:
    point = info.location
    if point is None:
        return UNKNOWN_AREA
    lat_step = cell_km / _KM_PER_DEGREE_LAT
    row = math.floor(point.lat / lat_step)
    # Longitude degrees shrink towards the poles; size columns at the row centre.
    centre_lat = (row + 0.5) * lat_step
    lng_step = cell_km / (_KM_PER_DEGREE_LAT * max(math.cos(math.radians(centre_lat)), 1e-6))
    col = math.floor(point.lng / lng_step)
    return f"Grid {row}_{col}"


def _centroid(members: Sequence[ExpiryInfo]) -> GeoPoint:
    points = [info.location for info in members if info.location is not None]
    if not points:
        return GeoPoint(0.0, 0.0)
    return GeoPoint(
        sum(point.lat for point in points) / len(points),
        sum(point.lng for point in points) / len(points),
    )


def group_by_area(
    infos: Iterable[ExpiryInfo],
    max_distance_km: float = 5,
    *,
    strategy: AreaStrategy | str = AreaStrategy.BUCKET,
    config: EngineConfig | None = None,
) -> list[AreaGroup]:
    """Group snapshots into planning areas, most urgent area first.

    The default ``bucket`` strategy rounds coordinates to
    ``area_bucket_precision`` decimals and ignores ``max_distance_km``. The
    ``grid`` strategy snaps points to square cells of ``max_distance_km``.
    Products without both coordinates share the ``Area_Unknown`` group.
    """

    cfg = resolve_config(config)
    strategy = AreaStrategy(strategy)
    if strategy is AreaStrategy.GRID and max_distance_km <= 0:
        raise ValueError("max_distance_km must be positive for the grid strategy")

    buckets: dict[str, list[ExpiryInfo]] = {}
    for info in infos:
        if strategy is AreaStrategy.GRID:
            key = _grid_key(info, max_distance_km)
        else:
            key = _bucket_key(info, cfg.area_bucket_precision)
        buckets.setdefault(key, []).append(info)

    groups = [
        AreaGroup(
            area=area,
            members=tuple(members),
            mean_priority=sum(info.priority.weight for info in members) / len(members),
            centroid=_centroid(members),
            estimated_days=math.ceil(len(members) / cfg.interventions_per_day),
        )
        for area, members in buckets.items()
    ]
    return sorted(groups, key=lambda group: group.mean_priority, reverse=True)


__all__ = ["UNKNOWN_AREA", "group_by_area", "rank_by_urgency", "summarize"]
