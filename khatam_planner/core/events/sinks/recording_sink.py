"""
In-memory recording sink.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from khatam_planner.core.events.events import PlannerEvent


class RecordingEventSink:
    """Keeps every received event in order (used for tests and debugging)."""

    def __init__(self) -> None:
        self.events: list[PlannerEvent] = []

    def on_event(self, event: PlannerEvent) -> None:
        self.events.append(event)

    def of_type(self, event_type: type) -> list[PlannerEvent]:
        return [e for e in self.events if isinstance(e, event_type)]
