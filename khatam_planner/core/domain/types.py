"""Core configuration models.

This module defines the Pydantic models describing what the planner is asked
to schedule. ``PlanConfig`` is the already-sanitized input of the plan
builder; ``ReadingTarget`` accepts raw user values and clamps them into a
``PlanConfig``.
"""

# pylint: disable=missing-class-docstring
from __future__ import annotations

import math
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

PlanMode = Literal["per-day", "per-slot"]
ReadingUnit = Literal["pages", "ayat"]

DEFAULT_TOTAL_PAGES: int = 604
DEFAULT_TOTAL_AYAT: int = 6236
DEFAULT_SLOTS_PER_DAY: int = 5

MAX_TOTAL: int = 1_000_000
MAX_PERIODS: int = 366
MAX_SLOTS_PER_DAY: int = 10
MAX_KHATAM_TIMES: int = 1000


def clamp_int(value: Any, lo: int, hi: int) -> int:
    """Coerce a raw value into an integer within ``[lo, hi]``.

    Non-numeric and non-finite values map to ``lo``. Fractions are
    truncated toward zero before clamping.
    """
    if isinstance(value, bool):
        value = int(value)

    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return lo

    if not math.isfinite(number):
        return lo

    return max(lo, min(hi, math.trunc(number)))


# ---------------------------------------------------------------------------
# Plan builder input
# ---------------------------------------------------------------------------


class PlanConfig(BaseModel):
    """Immutable input of :func:`build_plan`.

    ``total`` already includes the khatam multiplier
    (``per_cycle_total * khatam_times``).
    """

    total: int = Field(..., ge=1, le=MAX_TOTAL)
    periods: int = Field(..., ge=1, le=MAX_PERIODS)
    mode: PlanMode = "per-slot"
    slots_per_day: int = Field(default=DEFAULT_SLOTS_PER_DAY, ge=1, le=MAX_SLOTS_PER_DAY)
    distribute_remainder: bool = True
    unit_label: str = "pages"

    model_config = ConfigDict(extra="forbid", frozen=True)

    @classmethod
    def from_json_obj(cls, obj: dict[str, Any]) -> PlanConfig:
        """Create a PlanConfig instance from a JSON-compatible object."""
        return cls.model_validate(obj)

    @property
    def total_slots(self) -> int:
        if self.mode == "per-day":
            return self.periods
        return self.periods * self.slots_per_day


# ---------------------------------------------------------------------------
# Raw reading target
# ---------------------------------------------------------------------------


class ReadingTarget(BaseModel):
    """User-facing reading target.

    Numeric fields are clamped rather than rejected, so any form input can be
    turned into a valid :class:`PlanConfig`.

    JSON example:
        {
          "unit": "pages",
          "periods": 30,
          "khatam_times": 2,
          "mode": "per-slot",
          "slots_per_day": 5
        }
    """

    unit: ReadingUnit = "pages"
    total_pages: int = DEFAULT_TOTAL_PAGES
    total_ayat: int = DEFAULT_TOTAL_AYAT

    periods: int = 29
    khatam_times: int = 1

    mode: PlanMode = "per-slot"
    slots_per_day: int = DEFAULT_SLOTS_PER_DAY
    distribute_remainder: bool = True

    model_config = ConfigDict(extra="forbid", frozen=True)

    @field_validator("total_pages", "total_ayat", mode="before")
    @classmethod
    def _clamp_totals(cls, value: Any) -> int:
        return clamp_int(value, 1, MAX_TOTAL)

    @field_validator("periods", mode="before")
    @classmethod
    def _clamp_periods(cls, value: Any) -> int:
        return clamp_int(value, 1, MAX_PERIODS)

    @field_validator("khatam_times", mode="before")
    @classmethod
    def _clamp_khatam_times(cls, value: Any) -> int:
        return clamp_int(value, 1, MAX_KHATAM_TIMES)

    @field_validator("slots_per_day", mode="before")
    @classmethod
    def _clamp_slots_per_day(cls, value: Any) -> int:
        return clamp_int(value, 1, MAX_SLOTS_PER_DAY)

    @classmethod
    def from_json_obj(cls, obj: dict[str, Any]) -> ReadingTarget:
        """Create a ReadingTarget instance from a JSON-compatible object."""
        return cls.model_validate(obj)

    @property
    def cycle_size(self) -> int:
        """Length of one complete read-through in the chosen unit."""
        return self.total_pages if self.unit == "pages" else self.total_ayat

    @property
    def unit_label(self) -> str:
        return self.unit

    def to_plan_config(self) -> PlanConfig:
        """Convert the target into a planner configuration."""
        return PlanConfig(
            total=clamp_int(self.cycle_size * self.khatam_times, 1, MAX_TOTAL),
            periods=self.periods,
            mode=self.mode,
            slots_per_day=self.slots_per_day,
            distribute_remainder=self.distribute_remainder,
            unit_label=self.unit_label,
        )
