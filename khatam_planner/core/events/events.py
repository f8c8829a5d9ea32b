"""
Planner event models.

These events describe what a planner session did. They are consumed by
loggers and by tests; the pure planning core never emits them.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True, slots=True)
class PlanBuiltEvent:
    total: int
    periods: int
    mode: str
    total_slots: int

    base: int
    remainder: int
    empty_slots: int


@dataclass(frozen=True, slots=True)
class ChecklistChangedEvent:
    kind: Literal["day", "slot", "reset"]
    key: str | None
    done: bool | None


PlannerEvent = PlanBuiltEvent | ChecklistChangedEvent
