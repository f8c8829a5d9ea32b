from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from khatam_planner.core.domain.types import PlanConfig

from khatam_planner.core.planning.plan_models import DayPlan, PlanResult, Slot


def _ceil_div(a: int, b: int) -> int:
    return (a + b - 1) // b


def slot_sizes(
    *,
    total: int,
    total_slots: int,
    distribute_remainder: bool,
) -> tuple[int, int, list[int]]:
    """
    Return ``(base, remainder, nominal_sizes)`` for a schedule.

    With ``distribute_remainder`` the base is the floor of the even share and
    the first ``remainder`` slots get one extra unit. Otherwise the base is
    the ceiling of the even share, every slot is nominally ``base`` and
    ``remainder`` is the informational overshoot.
    """

    if distribute_remainder:
        base = total // total_slots
        remainder = total - base * total_slots
    else:
        base = _ceil_div(total, total_slots)
        remainder = max(0, base * total_slots - total)

    sizes: list[int] = []
    for i in range(total_slots):
        if distribute_remainder:
            sizes.append(base + (1 if i < remainder else 0))
        else:
            sizes.append(base)

    return base, remainder, sizes


def allocate_slots(*, total: int, sizes: list[int]) -> list[Slot]:
    """
    Walk a cursor over ``[1, total]`` and cut one range per nominal size.

    Slots past the point where the cursor exceeds ``total`` are empty; the
    last allocated slot is cut short at ``total``.
    """

    slots: list[Slot] = []
    cursor = 1

    for i, size in enumerate(sizes):
        if cursor > total:
            slots.append(Slot(index=i + 1, start=None, end=None, size=0))
            continue

        start = cursor
        end = min(total, cursor + size - 1)
        slots.append(Slot(index=i + 1, start=start, end=end, size=end - start + 1))
        cursor = end + 1

    return slots


def group_days(
    *,
    slots: list[Slot],
    periods: int,
    slots_per_day: int,
) -> list[DayPlan]:
    """
    Group consecutive slots into ``periods`` days of ``slots_per_day`` each.
    """

    days: list[DayPlan] = []

    for d in range(periods):
        first = d * slots_per_day
        day_slots = tuple(slots[first:first + slots_per_day])

        start = next((s.start for s in day_slots if s.start is not None), None)
        end = next((s.end for s in reversed(day_slots) if s.end is not None), None)

        days.append(
            DayPlan(
                day=d + 1,
                slots=day_slots,
                start=start,
                end=end,
                total_this_day=sum(s.size for s in day_slots),
            )
        )

    return days


def build_plan(config: PlanConfig) -> PlanResult:
    """
    Build a deterministic reading schedule.

    This function performs *planning only*. It holds no state between
    calls and never performs I/O; identical configurations always yield
    identical plans.

    Parameters
    ----------
    config:
        Sanitized planner configuration. ``total`` already includes the
        khatam multiplier.

    Returns
    -------
    PlanResult
        Days, flat slots, base size, remainder and slot count.
    """

    total_slots = config.total_slots

    # ------------------------------------------------------------------
    # 1. Nominal slot sizes
    # ------------------------------------------------------------------

    base, remainder, sizes = slot_sizes(
        total=config.total,
        total_slots=total_slots,
        distribute_remainder=config.distribute_remainder,
    )

    # ------------------------------------------------------------------
    # 2. Sequential allocation
    # ------------------------------------------------------------------

    slots = allocate_slots(total=config.total, sizes=sizes)

    # ------------------------------------------------------------------
    # 3. Group slots into days
    # ------------------------------------------------------------------

    slots_per_day = 1 if config.mode == "per-day" else config.slots_per_day

    days = group_days(
        slots=slots,
        periods=config.periods,
        slots_per_day=slots_per_day,
    )

    per_slot_label = (
        f"{config.unit_label} per slot"
        if config.mode == "per-slot"
        else f"{config.unit_label} per day"
    )

    return PlanResult(
        days=tuple(days),
        slots=tuple(slots),
        base=base,
        remainder=remainder,
        total_slots=total_slots,
        per_slot_label=per_slot_label,
    )
