from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, List

from khatam_planner.core.planning.formatter import describe_day

if TYPE_CHECKING:
    from khatam_planner.core.domain.types import PlanConfig
    from khatam_planner.core.planning.plan_models import PlanResult


# ---------------------------------------------------------------------------
# Data models
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class PlanSummary:
    total: int
    unit_label: str
    khatam_times: int
    periods: int
    total_slots: int
    avg_per_day: float
    avg_per_slot: float
    base: int
    remainder: int
    distribution_note: str
    empty_slots: int
    empty_days: int
    warnings: List[str]


# ---------------------------------------------------------------------------
# Summary builder
# ---------------------------------------------------------------------------

def summarize_plan(
    *,
    config: PlanConfig,
    plan: PlanResult,
    khatam_times: int = 1,
) -> PlanSummary:
    warnings: list[str] = []

    unit = config.unit_label
    empty_slots = sum(1 for s in plan.slots if s.is_empty)
    empty_days = sum(1 for d in plan.days if d.is_empty)

    distribution_note = f"base {plan.base} {unit}"
    if config.distribute_remainder and plan.remainder:
        distribution_note += f", +1 for {plan.remainder} leading slots"

    if empty_slots:
        warnings.append(
            f"{empty_slots} of {plan.total_slots} slots are empty "
            f"(material runs out early)"
        )

    if empty_days:
        warnings.append(f"{empty_days} days have nothing to read")

    if not config.distribute_remainder:
        allocated = [s for s in plan.slots if not s.is_empty]
        if allocated and allocated[-1].size < plan.base:
            last = allocated[-1]
            warnings.append(
                f"Slot {last.index} is short ({last.size} < {plan.base} {unit})"
            )

        if plan.remainder:
            warnings.append(
                f"Rounding up overshoots by {plan.remainder} {unit}; "
                f"the schedule ends early"
            )

    return PlanSummary(
        total=config.total,
        unit_label=unit,
        khatam_times=khatam_times,
        periods=config.periods,
        total_slots=plan.total_slots,
        avg_per_day=config.total / config.periods,
        avg_per_slot=config.total / plan.total_slots,
        base=plan.base,
        remainder=plan.remainder,
        distribution_note=distribution_note,
        empty_slots=empty_slots,
        empty_days=empty_days,
        warnings=warnings,
    )


# ---------------------------------------------------------------------------
# Pretty printer
# ---------------------------------------------------------------------------

def print_plan_summary(
    summary: PlanSummary,
    plan: PlanResult | None = None,
    cycle_size: int = 0,
) -> None:
    unit = summary.unit_label

    print(f"Total: {summary.total} {unit}")
    print(f"Target: {summary.khatam_times}x khatam")
    print(f"Period: {summary.periods} days")
    print(f"Slots: {summary.total_slots}")
    print(f"Average per day: {summary.avg_per_day:.2f} {unit}")
    print(f"Average per slot: {summary.avg_per_slot:.2f} {unit}")
    print(f"Distribution: {summary.distribution_note}")
    print()

    if summary.warnings:
        print("Warnings:")
        for w in summary.warnings:
            print(f"  - {w}")
        print()

    if plan is None:
        return

    print("Plan:")
    for day in plan.days:
        print(f"  - {describe_day(day, cycle_size, unit)}")
