from __future__ import annotations

from datetime import date

import pytest

from src.roadsign.core.config import get_config
from src.roadsign.domain.models import (
    MaintenancePriority,
    MaintenanceStatus,
    MaintenanceType,
    ScheduledMaintenance,
)


@pytest.fixture(autouse=True)
def _fresh_config():
    get_config.cache_clear()
    yield
    get_config.cache_clear()


@pytest.fixture
def make_maintenance():
    """Factory for calendar records; only the timing fields vary per test."""

    def _make(
        record_id: str,
        start_time: str,
        end_time: str,
        *,
        employee_id: str = "E1",
        scheduled_date: date = date(2025, 3, 12),
        status: MaintenanceStatus = MaintenanceStatus.SCHEDULED,
    ) -> ScheduledMaintenance:
        return ScheduledMaintenance(
            id=record_id,
            employee_id=employee_id,
            employee_name=f"Employee {employee_id}",
            product_id=f"product-{record_id}",
            product_name="Stop sign",
            product_location="Via Roma 1, Milano",
            maintenance_type=MaintenanceType.VERIFICATION,
            scheduled_date=scheduled_date,
            start_time=start_time,
            end_time=end_time,
            duration=60,
            status=status,
            priority=MaintenancePriority.MEDIUM,
        )

    return _make
