from __future__ import annotations

from typing import TYPE_CHECKING

from khatam_planner.core.events.event_bus import EventBus

if TYPE_CHECKING:
    from khatam_planner.core.events.events import PlannerEvent


class _NullSink:
    """Event sink that discards all events."""

    def on_event(self, event: PlannerEvent) -> None:
        return


class NullEventBus(EventBus):
    """EventBus that discards all events (used for tests)."""

    def __init__(self) -> None:
        super().__init__(sinks=[_NullSink()])
