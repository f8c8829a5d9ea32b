"""Planner session.

A session is the stateful shell around the pure planning core: it keeps the
current reading target, the plan derived from it, and the checklist. Every
target change rebuilds the plan from scratch.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from khatam_planner.core.events.events import ChecklistChangedEvent, PlanBuiltEvent
from khatam_planner.core.planning.planner import build_plan
from khatam_planner.core.planning.summary import summarize_plan
from khatam_planner.core.progress.checklist import (
    ChecklistState,
    Progress,
    day_progress,
    reset_checklist,
    slot_key,
    slot_progress,
    toggle_day,
    toggle_slot,
)
from khatam_planner.core.progress.share_card import ShareSummary, build_share_summary

if TYPE_CHECKING:
    from khatam_planner.core.domain.types import PlanConfig, ReadingTarget
    from khatam_planner.core.events.event_bus import EventBus
    from khatam_planner.core.planning.plan_models import PlanResult
    from khatam_planner.core.planning.summary import PlanSummary

LOGGER = logging.getLogger(__name__)


class PlannerSession:
    """Holds target, plan and checklist for one reader."""

    def __init__(
        self,
        *,
        target: ReadingTarget,
        event_bus: EventBus,
        checklist: ChecklistState | None = None,
    ) -> None:
        self._event_bus = event_bus
        self._checklist = checklist if checklist is not None else ChecklistState()

        self._target = target
        self._config = target.to_plan_config()
        self._plan = self._build()

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def target(self) -> ReadingTarget:
        return self._target

    @property
    def config(self) -> PlanConfig:
        return self._config

    @property
    def plan(self) -> PlanResult:
        return self._plan

    @property
    def checklist(self) -> ChecklistState:
        return self._checklist

    # ------------------------------------------------------------------
    # Planning
    # ------------------------------------------------------------------

    def _build(self) -> PlanResult:
        plan = build_plan(self._config)

        LOGGER.debug(
            "Plan built",
            extra={
                "total": self._config.total,
                "periods": self._config.periods,
                "total_slots": plan.total_slots,
            },
        )

        self._event_bus.emit(
            PlanBuiltEvent(
                total=self._config.total,
                periods=self._config.periods,
                mode=self._config.mode,
                total_slots=plan.total_slots,
                base=plan.base,
                remainder=plan.remainder,
                empty_slots=sum(1 for s in plan.slots if s.is_empty),
            )
        )
        return plan

    def update_target(self, target: ReadingTarget) -> PlanResult:
        """Replace the target and rebuild the plan. The checklist is kept."""
        self._target = target
        self._config = target.to_plan_config()
        self._plan = self._build()
        return self._plan

    def summary(self) -> PlanSummary:
        return summarize_plan(
            config=self._config,
            plan=self._plan,
            khatam_times=self._target.khatam_times,
        )

    # ------------------------------------------------------------------
    # Checklist
    # ------------------------------------------------------------------

    def toggle_day(self, day: int) -> ChecklistState:
        if not 1 <= day <= len(self._plan.days):
            raise ValueError(f"day must be within 1..{len(self._plan.days)}, got {day}")

        self._checklist = toggle_day(self._checklist, day)
        self._event_bus.emit(
            ChecklistChangedEvent(
                kind="day",
                key=str(day),
                done=self._checklist.is_day_done(day),
            )
        )
        return self._checklist

    def toggle_slot(self, day: int, index: int) -> ChecklistState:
        if not 1 <= day <= len(self._plan.days):
            raise ValueError(f"day must be within 1..{len(self._plan.days)}, got {day}")

        day_slots = self._plan.days[day - 1].slots
        if index not in {s.index for s in day_slots}:
            raise ValueError(f"slot {index} does not belong to day {day}")

        self._checklist = toggle_slot(self._checklist, day, index)
        self._event_bus.emit(
            ChecklistChangedEvent(
                kind="slot",
                key=slot_key(day, index),
                done=self._checklist.is_slot_done(day, index),
            )
        )
        return self._checklist

    def reset_checklist(self) -> ChecklistState:
        self._checklist = reset_checklist()
        self._event_bus.emit(ChecklistChangedEvent(kind="reset", key=None, done=None))
        return self._checklist

    def day_progress(self) -> Progress:
        return day_progress(self._checklist, self._plan)

    def slot_progress(self) -> Progress:
        return slot_progress(self._checklist, self._plan)

    def share_summary(self) -> ShareSummary:
        return build_share_summary(
            plan=self._plan,
            state=self._checklist,
            target=self._target,
        )
