"""Unit coverage for film expiry computation."""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest
from structlog.testing import capture_logs

from src.roadsign.core.config import EngineConfig
from src.roadsign.domain import expiry
from src.roadsign.domain.models import (
    AlertStatus,
    ExpiryRecord,
    FilmClass,
    InterventionType,
    Priority,
)
from src.roadsign.exceptions import InvalidDateError

pytestmark = pytest.mark.unit


@pytest.mark.parametrize(
    "film_class, expected",
    [
        ("class-1", date(2027, 3, 10)),
        ("class-I", date(2027, 3, 10)),
        ("class-2", date(2030, 3, 10)),
        ("class-II", date(2030, 3, 10)),
        ("class-IIs", date(2032, 3, 10)),
        ("classe-2", date(2030, 3, 10)),
    ],
)
def test_compute_expiry_date_uses_regulatory_durations(film_class: str, expected: date) -> None:
    assert expiry.compute_expiry_date(date(2020, 3, 10), film_class) == expected


def test_compute_expiry_date_rolls_leap_day_to_feb_28() -> None:
    assert expiry.compute_expiry_date(date(2020, 2, 29), "class-1") == date(2027, 2, 28)
    assert expiry.compute_expiry_date(date(2020, 2, 29), "class-IIs") == date(2032, 2, 29)


def test_compute_expiry_date_accepts_iso_strings_and_datetimes() -> None:
    assert expiry.compute_expiry_date("2020-01-15", "class-2") == date(2030, 1, 15)
    assert expiry.compute_expiry_date("2020-01-15T00:00:00.000Z", "class-2") == date(2030, 1, 15)
    assert expiry.compute_expiry_date(datetime(2020, 1, 15, 18, 30), "class-2") == date(2030, 1, 15)


def test_unknown_film_class_defaults_to_ten_years_and_is_logged() -> None:
    with capture_logs() as logs:
        years, known = expiry.film_class_duration("class-X")

    assert (years, known) == (10, False)
    assert logs[0]["event"] == "expiry.film_class.unknown"
    assert logs[0]["log_level"] == "warning"
    assert logs[0]["film_class"] == "class-X"


def test_default_duration_is_configurable() -> None:
    config = EngineConfig(default_film_duration_years=8)

    assert expiry.compute_expiry_date(date(2020, 1, 1), "mystery", config=config) == date(2028, 1, 1)


@pytest.mark.parametrize("bad_value", ["not-a-date", "2020-13-01", "", 12345, None])
def test_malformed_installation_date_raises(bad_value: object) -> None:
    with pytest.raises(InvalidDateError):
        expiry.compute_expiry_date(bad_value, "class-1")  # type: ignore[arg-type]


def test_invalid_date_error_is_a_value_error() -> None:
    with pytest.raises(ValueError, match="invalid date value"):
        expiry.days_remaining("soon", date(2025, 1, 1))


def test_days_remaining_counts_calendar_days() -> None:
    expiry_date = date(2025, 1, 10)

    assert expiry.days_remaining(expiry_date, date(2025, 1, 1)) == 9
    assert expiry.days_remaining(expiry_date, date(2025, 1, 10)) == 0
    assert expiry.days_remaining(expiry_date, date(2025, 1, 11)) == -1
    assert expiry.days_remaining(expiry_date, "2025-01-01") == 9


def test_days_remaining_rounds_partial_days_up() -> None:
    expiry_date = date(2025, 1, 10)

    assert expiry.days_remaining(expiry_date, datetime(2025, 1, 1, 12, 0)) == 9
    assert expiry.days_remaining(expiry_date, "2025-01-01T12:00:00") == 9
    assert expiry.days_remaining(expiry_date, datetime(2025, 1, 10, 8, 0)) == 0
    assert expiry.days_remaining(
        expiry_date, datetime(2025, 1, 9, 23, 0, tzinfo=timezone.utc)
    ) == 1


def test_days_remaining_ignores_daylight_saving_shift() -> None:
    # 2025-10-26 lasts 25 hours in Rome; the civil count is still one day.
    now = datetime(2025, 10, 26, 0, 0, tzinfo=ZoneInfo("Europe/Rome"))

    assert expiry.days_remaining(date(2025, 10, 27), now) == 1


def test_days_remaining_decreases_monotonically() -> None:
    expiry_date = date(2025, 1, 1)
    start = date(2024, 11, 1)

    values = [expiry.days_remaining(expiry_date, start + timedelta(days=offset)) for offset in range(90)]

    assert all(later == earlier - 1 for earlier, later in zip(values, values[1:]))


@pytest.mark.parametrize(
    "days, priority, status",
    [
        (-1, Priority.CRITICAL, AlertStatus.EXPIRED),
        (0, Priority.HIGH, AlertStatus.CRITICAL),
        (30, Priority.HIGH, AlertStatus.CRITICAL),
        (31, Priority.MEDIUM, AlertStatus.WARNING),
        (90, Priority.MEDIUM, AlertStatus.WARNING),
        (91, Priority.LOW, AlertStatus.OK),
    ],
)
def test_classifiers_partition_days_at_boundaries(
    days: int, priority: Priority, status: AlertStatus
) -> None:
    assert expiry.classify_priority(days) is priority
    assert expiry.classify_alert_status(days) is status


@pytest.mark.parametrize(
    "days, film_class, expected",
    [
        (30, "class-1", InterventionType.REPLACEMENT),
        (-5, "class-IIs", InterventionType.REPLACEMENT),
        (31, "class-IIs", InterventionType.VERIFICATION),
        (181, "class-IIs", InterventionType.VERIFICATION),
        (100, "class-2", InterventionType.VERIFICATION),
    ],
)
def test_recommended_intervention_table(
    days: int, film_class: str, expected: InterventionType
) -> None:
    assert expiry.recommended_intervention(days, film_class) is expected


def test_compute_expiry_info_high_performance_film_far_from_expiry() -> None:
    record = ExpiryRecord(
        product_id="P1",
        qr_code="QR-P1",
        installation_date=date(2020, 1, 15),
        film_class="class-IIs",
        gps_lat=45.46,
        gps_lng=9.19,
    )

    info = expiry.compute_expiry_info(record, date(2031, 6, 1))

    assert info.expiry_date == date(2032, 1, 15)
    assert info.days_remaining == 228
    assert info.priority is Priority.LOW
    assert info.alert_status is AlertStatus.OK
    assert info.recommended_intervention is InterventionType.VERIFICATION
    assert info.film_class_known is True
    assert (info.gps_lat, info.gps_lng) == (45.46, 9.19)


def test_compute_expiry_info_already_expired_film() -> None:
    record = ExpiryRecord(
        product_id="P2",
        qr_code="QR-P2",
        installation_date=date(2018, 1, 1),
        film_class="class-1",
    )

    info = expiry.compute_expiry_info(record, date(2025, 6, 1))

    assert info.expiry_date == date(2025, 1, 1)
    assert info.days_remaining == -151
    assert info.priority is Priority.CRITICAL
    assert info.alert_status is AlertStatus.EXPIRED
    assert info.recommended_intervention is InterventionType.REPLACEMENT
    assert info.location is None


def test_compute_expiry_info_flags_default_duration() -> None:
    record = ExpiryRecord(
        product_id="P3",
        qr_code="QR-P3",
        installation_date=date(2020, 1, 1),
        film_class="",
    )

    info = expiry.compute_expiry_info(record, date(2025, 1, 1))

    assert info.expiry_date == date(2030, 1, 1)
    assert info.film_class_known is False


def test_compute_expiry_infos_is_deterministic() -> None:
    records = [
        ExpiryRecord("P1", "QR-P1", date(2020, 1, 15), "class-IIs"),
        ExpiryRecord("P2", "QR-P2", date(2018, 1, 1), "class-1"),
    ]
    now = date(2025, 6, 1)

    assert expiry.compute_expiry_infos(records, now) == expiry.compute_expiry_infos(records, now)
    assert [info.product_id for info in expiry.compute_expiry_infos(records, now)] == ["P1", "P2"]


def test_canonical_enum_members_are_accepted() -> None:
    assert expiry.compute_expiry_date(date(2020, 1, 1), FilmClass.CLASS_IIS) == date(2032, 1, 1)
    assert expiry.normalize_film_class(FilmClass.CLASS_1) is FilmClass.CLASS_1
    assert expiry.normalize_film_class("class-III") is None
