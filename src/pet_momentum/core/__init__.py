"""Core utilities for configuration, logging, and domain models."""

from .config import (
    AppSettings,
    LoggingSettings,
    MomentumSettings,
    ValuationSettings,
    load_app_settings,
)
from .interfaces import SnapshotError
from .logging import configure_logging

__all__ = [
    "AppSettings",
    "LoggingSettings",
    "MomentumSettings",
    "SnapshotError",
    "ValuationSettings",
    "configure_logging",
    "load_app_settings",
]
