"""Duration codec - ISO 8601 duration text to and from timedelta."""

from __future__ import annotations

import logging
from datetime import timedelta
from io import StringIO

from pyisoduration._constants import (
    DEFAULT_MAX_DURATION_LENGTH,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    SECONDS_PER_WEEK,
    SECONDS_PER_YEAR,
    ZERO_DURATION,
)
from pyisoduration._errors import (
    ERR_MSG_BAD_FORMAT,
    ERR_MSG_NO_MONTH,
    ERR_MSG_NUMERIC_CONVERSION,
    BadFormatError,
    NoMonthError,
    NumericConversionError,
)
from pyisoduration._grammar import match_full, match_week
from pyisoduration.duration import Duration

logger = logging.getLogger(__name__)

# Duration field -> seconds per unit. Months never contribute.
FIELD_RATES: tuple[tuple[str, int], ...] = (
    ("years", SECONDS_PER_YEAR),
    ("months", 0),
    ("weeks", SECONDS_PER_WEEK),
    ("days", SECONDS_PER_DAY),
    ("hours", SECONDS_PER_HOUR),
    ("minutes", SECONDS_PER_MINUTE),
    ("seconds", 1),
)


def parse_duration(
    value: str,
    *,
    max_length: int = DEFAULT_MAX_DURATION_LENGTH,
) -> tuple[timedelta, Duration]:
    """Parse an ISO 8601 duration string.

    Accepts either the week form ``P<n>W`` or the full form
    ``P[nY][nM][nD][T[nH][nM][nS]]``. The whole string must match.
    Years count as 365 days and weeks as 7 days.

    Args:
        value: The duration text, e.g. ``"P1Y2DT3H4M5S"`` or ``"P2W"``.
        max_length: Longest accepted input. Defaults to 256.

    Returns:
        The elapsed time and the structured components.

    Raises:
        BadFormatError: If the input matches neither form.
        NoMonthError: If the input has a non-zero month component.
        NumericConversionError: If a component cannot be represented.
    """
    if not isinstance(value, str):
        raise TypeError(f"duration must be a str, not {type(value).__name__}")

    if len(value) > max_length:
        internal = f"duration length {len(value)} exceeds limit {max_length}"
        logger.debug("rejected duration: %s", internal)
        raise BadFormatError(ERR_MSG_BAD_FORMAT, internal)

    matched = match_week(value)
    if matched is None:
        matched = match_full(value)
    if matched is None:
        internal = f"cannot parse duration: {value!r}"
        logger.debug("rejected duration: %s", internal)
        raise BadFormatError(ERR_MSG_BAD_FORMAT, internal)

    components: dict[str, int] = {}
    total = 0
    for name, rate in FIELD_RATES:
        digits = matched.get(name)
        if not digits:
            continue
        try:
            number = int(digits)
        except ValueError as exc:
            raise NumericConversionError(
                ERR_MSG_NUMERIC_CONVERSION,
                f"cannot convert {len(digits)}-digit {name} value in duration",
                wrapped=exc,
            ) from exc
        if name == "months" and number != 0:
            internal = f"month component {digits} in duration: {value!r}"
            logger.debug("rejected duration: %s", internal)
            raise NoMonthError(ERR_MSG_NO_MONTH, internal)
        components[name] = number
        total += number * rate

    try:
        elapsed = timedelta(seconds=total)
    except OverflowError as exc:
        raise NumericConversionError(
            ERR_MSG_NUMERIC_CONVERSION,
            f"duration {value!r} is out of range for timedelta",
            wrapped=exc,
        ) from exc

    return elapsed, Duration(**components)


def format_duration(elapsed: timedelta) -> str:
    """Format an elapsed time as ``PT[nH][nM][nS]``.

    Hours are never rolled up into days. Sub-second remainders are
    truncated. Zero, negative and sub-second values give ``"PT0S"``.
    """
    if not isinstance(elapsed, timedelta):
        raise TypeError(f"elapsed must be a timedelta, not {type(elapsed).__name__}")

    # Negative durations are not represented.
    if elapsed <= timedelta(0):
        return ZERO_DURATION

    total_seconds = elapsed // timedelta(seconds=1)
    if total_seconds == 0:
        logger.debug("sub-second duration %s formatted as %s", elapsed, ZERO_DURATION)
        return ZERO_DURATION

    hours = total_seconds // SECONDS_PER_HOUR
    minutes = total_seconds // SECONDS_PER_MINUTE - hours * 60
    seconds = total_seconds - (hours * SECONDS_PER_HOUR + minutes * SECONDS_PER_MINUTE)

    w = StringIO()
    w.write("PT")
    if hours > 0:
        w.write(f"{hours}H")
    if minutes > 0:
        w.write(f"{minutes}M")
    if seconds > 0:
        w.write(f"{seconds}S")
    return w.getvalue()
