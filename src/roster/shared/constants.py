"""Shared constants for the roster dashboard."""

# Batch selection sentinel meaning "no batch filter"
ALL_BATCHES = "All batches"

# Days-before-program presets offered for reminder emails
REMINDER_DAY_PRESETS = (10, 7, 5, 3)
