"""Shared utilities for the roster dashboard."""

from .constants import ALL_BATCHES, REMINDER_DAY_PRESETS

__all__ = ["ALL_BATCHES", "REMINDER_DAY_PRESETS"]
