"""
Range formatting utilities.

Absolute unit numbers in a multi-khatam schedule are rendered relative to
the read-through (cycle) they belong to, e.g. ``K2 1–20``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from khatam_planner.core.planning.plan_models import DayPlan, Slot

RANGE_SEP = "–"
EMPTY_SLOT = "—"

PRAYER_NAMES: tuple[str, ...] = ("Subuh", "Dzuhur", "Ashar", "Maghrib", "Isya")


def format_range(start: int, end: int, cycle_size: int = 0) -> str:
    """
    Render ``[start, end]`` relative to khatam cycle boundaries.

    A range crossing a boundary is rendered as two parts joined by ``+``.
    Only the start and end cycles are named.
    """
    if cycle_size <= 0:
        return f"{start}{RANGE_SEP}{end}"

    cycle_start = (start - 1) // cycle_size + 1
    cycle_end = (end - 1) // cycle_size + 1
    pos_start = (start - 1) % cycle_size + 1
    pos_end = (end - 1) % cycle_size + 1

    if cycle_start == cycle_end:
        return f"K{cycle_start} {pos_start}{RANGE_SEP}{pos_end}"

    return (
        f"K{cycle_start} {pos_start}{RANGE_SEP}{cycle_size}"
        f" + K{cycle_end} 1{RANGE_SEP}{pos_end}"
    )


def slot_name(position: int) -> str:
    """Name of the slot at 0-based ``position`` within a day."""
    if 0 <= position < len(PRAYER_NAMES):
        return PRAYER_NAMES[position]
    return f"Sholat {position + 1}"


def format_slot(slot: Slot, cycle_size: int = 0) -> str:
    if slot.start is None or slot.end is None:
        return EMPTY_SLOT
    return format_range(slot.start, slot.end, cycle_size)


def describe_day(day: DayPlan, cycle_size: int, unit_label: str) -> str:
    if day.start is None or day.end is None:
        return f"Day {day.day} {EMPTY_SLOT} finished"

    rendered = format_range(day.start, day.end, cycle_size)
    return f"Day {day.day} {EMPTY_SLOT} {rendered} ({day.total_this_day} {unit_label})"
