"""
Event sink interface.

Sinks consume planner events emitted by the runtime session.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from khatam_planner.core.events.events import PlannerEvent


class EventSink(Protocol):
    def on_event(self, event: PlannerEvent) -> None:
        """Consume a planner event."""
