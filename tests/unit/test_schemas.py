"""Unit coverage for JSON payload schemas."""

from __future__ import annotations

import json
from datetime import date, datetime, timezone

import pytest

from src.roadsign.domain.expiry import compute_expiry_info
from src.roadsign.domain.models import ExpiryRecord
from src.roadsign.domain.notifications import build_notification
from src.roadsign.domain.planning import group_by_area, summarize
from src.roadsign.domain.schedule import day_view
from src.roadsign.schemas import (
    AreaGroupPayload,
    ExpiryInfoPayload,
    ExpiryStatisticsPayload,
    NotificationPayload,
    SlotViewPayload,
)

pytestmark = pytest.mark.unit


def _info():
    record = ExpiryRecord("P1", "QR-P1", date(2020, 1, 15), "class-IIs", 45.46, 9.19)
    return compute_expiry_info(record, date(2031, 6, 1))


def test_expiry_info_payload_is_json_ready() -> None:
    data = ExpiryInfoPayload.from_domain(_info()).model_dump(mode="json")

    assert data["expiry_date"] == "2032-01-15"
    assert data["days_remaining"] == 228
    assert data["priority"] == "low"
    assert data["alert_status"] == "ok"
    assert data["recommended_intervention"] == "verification"
    json.dumps(data)


def test_statistics_payload_for_empty_input() -> None:
    data = ExpiryStatisticsPayload.from_domain(summarize([])).model_dump(mode="json")

    assert data["total"] == 0
    assert data["percent_expired"] == "0.0"
    assert data["percent_critical_or_expired"] == "0.0"


def test_area_group_payload_nests_members() -> None:
    (group,) = group_by_area([_info()])

    data = AreaGroupPayload.from_domain(group).model_dump(mode="json")

    assert data["area"] == "Area 45.46_9.19"
    assert data["centroid"] == {"lat": 45.46, "lng": 9.19}
    assert data["members"][0]["product_id"] == "P1"


def test_notification_payload() -> None:
    sent_at = datetime(2031, 6, 1, 8, 0, tzinfo=timezone.utc)
    notification = build_notification(_info(), sent_at=sent_at)

    data = NotificationPayload.from_domain(notification).model_dump(mode="json")

    assert data["level"] == "info"
    assert data["action"] == "check_status"
    assert data["sent_at"].startswith("2031-06-01T08:00:00")


def test_slot_view_payload(make_maintenance) -> None:
    records = [make_maintenance("m1", "09:00", "09:30"), make_maintenance("m2", "09:15", "09:45")]
    nine = next(row for row in day_view(records, date(2025, 3, 12)) if row.time == "09:00")

    data = SlotViewPayload.from_domain(nine).model_dump(mode="json")

    assert data["has_conflict"] is True
    assert data["workload"] == 100.0
    assert data["workload_level"] == "high"
    assert [record["id"] for record in data["records"]] == ["m1", "m2"]
    assert data["records"][0]["scheduled_date"] == "2025-03-12"
    assert data["records"][0]["maintenance_type"] == "verification"
    json.dumps(data)
