"""Structured duration value."""

from __future__ import annotations

from dataclasses import dataclass, fields


@dataclass(frozen=True)
class Duration:
    """Components of an ISO 8601 duration exactly as written."""

    years: int = 0
    months: int = 0
    weeks: int = 0
    days: int = 0
    hours: int = 0
    minutes: int = 0
    seconds: int = 0

    def __post_init__(self) -> None:
        for f in fields(self):
            if getattr(self, f.name) < 0:
                raise ValueError(f"duration {f.name} cannot be negative")
