"""Engine configuration.

Defaults mirror the regulatory tables used by the maintenance planners:
an unrecognised film class falls back to a 10 year duration, alerts start
90 days before expiry and become critical 30 days before. Values can be
overridden through ``ROADSIGN_*`` environment variables.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class EngineConfig(BaseSettings):
    """Pydantic settings container for expiry and calendar computations."""

    model_config = SettingsConfigDict(env_prefix="ROADSIGN_", frozen=True)

    default_film_duration_years: int = Field(
        default=10,
        ge=1,
        description="Duration applied when the film class is not in the regulatory table.",
    )
    critical_threshold_days: int = Field(
        default=30,
        ge=0,
        description="Days remaining at or below which an expiry is critical.",
    )
    warning_threshold_days: int = Field(
        default=90,
        ge=0,
        description="Days remaining at or below which an expiry raises a warning.",
    )
    verification_window_days: int = Field(
        default=180,
        ge=0,
        description="Window in which high-performance (IIs) films get a verification visit.",
    )
    interventions_per_day: int = Field(
        default=2,
        ge=1,
        description="Interventions a crew completes per day when estimating area workload.",
    )
    area_bucket_precision: int = Field(
        default=2,
        ge=0,
        le=6,
        description="Decimal places used to bucket GPS coordinates into planning areas.",
    )
    calendar_start_hour: int = Field(default=8, ge=0, le=23)
    calendar_end_hour: int = Field(default=18, ge=0, le=23)
    slot_step_minutes: int = Field(default=30, ge=1, le=60)
    notification_locale: str = Field(
        default="it",
        pattern="^(it|en)$",
        description="Language of generated notification messages.",
    )
    log_level: str = Field(
        default="INFO",
        pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
        description="Level applied to the engine loggers by configure_logging.",
    )

    @model_validator(mode="after")
    def _check_ranges(self) -> "EngineConfig":
        if self.critical_threshold_days > self.warning_threshold_days:
            raise ValueError("critical_threshold_days must not exceed warning_threshold_days")
        if self.calendar_start_hour > self.calendar_end_hour:
            raise ValueError("calendar_start_hour must not exceed calendar_end_hour")
        if 60 % self.slot_step_minutes:
            raise ValueError("slot_step_minutes must divide an hour evenly")
        return self

    @classmethod
    def build_default(cls) -> "EngineConfig":
        """Construct configuration from the environment and defaults."""

        return cls()


@lru_cache(maxsize=1)
def get_config() -> EngineConfig:
    """Return the process-wide configuration (read once from the environment)."""

    return EngineConfig.build_default()


def resolve_config(config: EngineConfig | None) -> EngineConfig:
    """Return ``config`` or the process-wide default."""

    return config if config is not None else get_config()


__all__ = ["EngineConfig", "get_config", "resolve_config"]
