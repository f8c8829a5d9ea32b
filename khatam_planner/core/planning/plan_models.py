"""
Planning model definitions.

This module contains immutable planning structures used to describe
slots, days, and the complete reading schedule.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Slot:
    """
    Smallest schedulable allocation.

    ``start`` / ``end`` are 1-based inclusive bounds, or both ``None`` when
    the material ran out before this slot.
    """

    index: int
    start: int | None
    end: int | None
    size: int

    @property
    def is_empty(self) -> bool:
        return self.start is None


@dataclass(frozen=True, slots=True)
class DayPlan:
    """
    All slots assigned to one calendar day.
    """

    day: int
    slots: tuple[Slot, ...]
    start: int | None
    end: int | None
    total_this_day: int

    @property
    def is_empty(self) -> bool:
        return self.start is None


@dataclass(frozen=True, slots=True)
class PlanResult:
    """
    Complete reading schedule.
    """

    days: tuple[DayPlan, ...]
    slots: tuple[Slot, ...]
    base: int
    remainder: int
    total_slots: int
    per_slot_label: str
