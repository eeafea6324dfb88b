"""Shared infrastructure: configuration for the engine."""

from .config import EngineConfig, get_config

__all__ = ["EngineConfig", "get_config"]
