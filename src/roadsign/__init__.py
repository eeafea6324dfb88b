"""Maintenance scheduling engine for certified road-signage products.

The package exposes two independent pure engines: expiry computation for
retroreflective films (:mod:`src.roadsign.domain.expiry` and friends) and the
calendar slot grid (:mod:`src.roadsign.domain.schedule`). Neither performs I/O;
callers pass plain records in and receive derived structures back.
"""

from .core.config import EngineConfig
from .exceptions import EngineError, InvalidDateError, InvalidPayloadError, InvalidTimeError

__all__ = [
    "EngineConfig",
    "EngineError",
    "InvalidDateError",
    "InvalidPayloadError",
    "InvalidTimeError",
]
