"""Conversion rates and input limits for duration parsing."""

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY = 24 * SECONDS_PER_HOUR
SECONDS_PER_WEEK = 7 * SECONDS_PER_DAY

SECONDS_PER_YEAR = 365 * SECONDS_PER_DAY
"""Years are a fixed 365 days; there is no calendar."""

DEFAULT_MAX_DURATION_LENGTH = 256
"""Longest input handed to the parser."""

ZERO_DURATION = "PT0S"
"""Formatted form of any elapsed time with no whole seconds."""
