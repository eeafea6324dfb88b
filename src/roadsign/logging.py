"""Logging configuration for the road-signage engine.

Every entry is rendered as one JSON object carrying ``component="roadsign"``
and the emitting module, so engine events (``expiry.film_class.unknown``,
``mappers.status.unknown``...) can be filtered out of a host application's
log stream. The level comes from :class:`EngineConfig` (``ROADSIGN_LOG_LEVEL``).
"""

from __future__ import annotations

import logging
from typing import Any, MutableMapping

import structlog

from .core.config import EngineConfig, resolve_config

COMPONENT = "roadsign"
_PACKAGE_LOGGER = __name__.rpartition(".")[0]


def add_component(
    _logger: Any, _method_name: str, event_dict: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    event_dict.setdefault("component", COMPONENT)
    return event_dict


def configure_logging(config: EngineConfig | None = None) -> None:
    """Configure stdlib logging and route structlog through it as JSON."""
    level = logging.getLevelName(resolve_config(config).log_level)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(message)s",
    )
    logging.getLogger(_PACKAGE_LOGGER).setLevel(level)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            add_component,
            structlog.stdlib.add_logger_name,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


__all__ = ["COMPONENT", "add_component", "configure_logging"]
