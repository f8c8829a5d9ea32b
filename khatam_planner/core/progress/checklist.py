"""Reading checklist state.

The checklist is an explicit, immutable state object. Every operation takes
a state and returns a new one; nothing here holds state between calls or
touches storage.
"""

from __future__ import annotations

import json
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from khatam_planner.core.planning.plan_models import PlanResult


class ChecklistState(BaseModel):
    """Completed days and slots.

    The JSON shape matches the persisted key-value layout:
        {"completedDays": {"1": true}, "completedSlots": {"1:3": true}}
    """

    completed_days: dict[int, bool] = Field(default_factory=dict, alias="completedDays")
    completed_slots: dict[str, bool] = Field(default_factory=dict, alias="completedSlots")

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    @classmethod
    def from_json_obj(cls, obj: dict[str, Any]) -> ChecklistState:
        """Create a ChecklistState instance from a JSON-compatible object."""
        return cls.model_validate(obj)

    def to_json_obj(self) -> dict[str, Any]:
        return json.loads(self.model_dump_json(by_alias=True))

    def is_day_done(self, day: int) -> bool:
        return bool(self.completed_days.get(day, False))

    def is_slot_done(self, day: int, index: int) -> bool:
        return bool(self.completed_slots.get(slot_key(day, index), False))


@dataclass(frozen=True, slots=True)
class Progress:
    done: int
    total: int
    pct: int


def slot_key(day: int, index: int) -> str:
    """Composite checklist key for slot ``index`` (global, 1-based) of ``day``."""
    return f"{day}:{index}"


def toggle_day(state: ChecklistState, day: int) -> ChecklistState:
    days = dict(state.completed_days)
    days[day] = not days.get(day, False)
    return state.model_copy(update={"completed_days": days})


def toggle_slot(state: ChecklistState, day: int, index: int) -> ChecklistState:
    key = slot_key(day, index)
    slots = dict(state.completed_slots)
    slots[key] = not slots.get(key, False)
    return state.model_copy(update={"completed_slots": slots})


def reset_checklist() -> ChecklistState:
    return ChecklistState()


def _percent(done: int, total: int) -> int:
    # Half-up rounding; round() would use banker's rounding.
    return math.floor(done / max(1, total) * 100 + 0.5)


def day_progress(state: ChecklistState, plan: PlanResult) -> Progress:
    """Completed days of ``plan``. Keys outside the plan are ignored."""
    done = sum(1 for d in plan.days if state.is_day_done(d.day))
    total = len(plan.days)
    return Progress(done=done, total=total, pct=_percent(done, total))


def slot_progress(state: ChecklistState, plan: PlanResult) -> Progress:
    """Completed slots of ``plan``. Keys outside the plan are ignored."""
    done = sum(
        1
        for d in plan.days
        for s in d.slots
        if state.is_slot_done(d.day, s.index)
    )
    total = plan.total_slots
    return Progress(done=done, total=total, pct=_percent(done, total))
