"""Shareable progress summary."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from khatam_planner.core.progress.checklist import day_progress, slot_progress

if TYPE_CHECKING:
    from khatam_planner.core.domain.types import ReadingTarget
    from khatam_planner.core.planning.plan_models import PlanResult
    from khatam_planner.core.progress.checklist import ChecklistState


@dataclass(frozen=True, slots=True)
class ShareSummary:
    title: str
    subtitle: str
    summary: str
    progress_pct: int  # 0 - 100
    progress_label: str


def build_share_summary(
    *,
    plan: PlanResult,
    state: ChecklistState,
    target: ReadingTarget,
) -> ShareSummary:
    """
    Describe the current progress of a plan for a share card.

    Per-slot plans report slot progress, per-day plans report day progress.
    """

    if target.mode == "per-slot":
        progress = slot_progress(state, plan)
        noun = "slots"
    else:
        progress = day_progress(state, plan)
        noun = "days"

    times = f"{target.khatam_times}x " if target.khatam_times > 1 else ""
    title = f"Khatam {times}in {target.periods} days"

    per_day = "per day" if target.mode == "per-day" else f"{target.slots_per_day} slots per day"
    subtitle = f"{target.cycle_size} {target.unit_label}, {per_day}"

    summary = f"{plan.base} {plan.per_slot_label}"
    if target.distribute_remainder and plan.remainder:
        summary += f", +1 for the first {plan.remainder} slots"

    return ShareSummary(
        title=title,
        subtitle=subtitle,
        summary=summary,
        progress_pct=max(0, min(100, progress.pct)),
        progress_label=f"{progress.done}/{progress.total} {noun}",
    )
