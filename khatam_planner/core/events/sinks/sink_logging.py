"""
Logging event sink.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from khatam_planner.core.events.events import PlannerEvent


class LoggingEventSink:
    """Logs planner events using the standard logging module."""

    def __init__(self, logger: logging.Logger) -> None:
        self._logger = logger

    def on_event(self, event: PlannerEvent) -> None:
        self._logger.info(
            "planner_event %s",
            type(event).__name__,
            extra={"event": event},
        )
