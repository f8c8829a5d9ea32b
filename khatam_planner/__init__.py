"""Public API for the khatam_planner package.

Only symbols imported here are considered part of the stable,
supported external interface.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

# ----------------------------------------------------------------------
# Configuration
# ----------------------------------------------------------------------
from khatam_planner.core.domain.types import (
    PlanConfig,
    PlanMode,
    ReadingTarget,
    ReadingUnit,
    clamp_int,
)

# ----------------------------------------------------------------------
# Events
# ----------------------------------------------------------------------
from khatam_planner.core.events.event_bus import EventBus
from khatam_planner.core.events.events import (
    ChecklistChangedEvent,
    PlanBuiltEvent,
    PlannerEvent,
)
from khatam_planner.core.events.sinks.sink_logging import LoggingEventSink

# ----------------------------------------------------------------------
# Planning core
# ----------------------------------------------------------------------
from khatam_planner.core.planning.formatter import (
    describe_day,
    format_range,
    format_slot,
    slot_name,
)
from khatam_planner.core.planning.plan_models import DayPlan, PlanResult, Slot
from khatam_planner.core.planning.planner import build_plan
from khatam_planner.core.planning.summary import PlanSummary, summarize_plan

# ----------------------------------------------------------------------
# Progress
# ----------------------------------------------------------------------
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

# ----------------------------------------------------------------------
# Runtime
# ----------------------------------------------------------------------
from khatam_planner.runtime.session import PlannerSession

# ----------------------------------------------------------------------
# Public API definition
# ----------------------------------------------------------------------

__all__ = [
    # Planning core
    "build_plan",
    "format_range",
    "PlanConfig",
    "PlanResult",
    "DayPlan",
    "Slot",

    # Configuration
    "ReadingTarget",
    "PlanMode",
    "ReadingUnit",
    "clamp_int",

    # Display
    "slot_name",
    "format_slot",
    "describe_day",
    "PlanSummary",
    "summarize_plan",

    # Progress
    "ChecklistState",
    "Progress",
    "slot_key",
    "toggle_day",
    "toggle_slot",
    "reset_checklist",
    "day_progress",
    "slot_progress",
    "ShareSummary",
    "build_share_summary",

    # Runtime
    "PlannerSession",
    "EventBus",
    "LoggingEventSink",
    "PlanBuiltEvent",
    "ChecklistChangedEvent",
    "PlannerEvent",

    # Version
    "__version__",
]

# ----------------------------------------------------------------------
# Package version
# ----------------------------------------------------------------------

try:
    __version__ = version("khatam-planner")
except PackageNotFoundError:
    __version__ = "0.0.0"
