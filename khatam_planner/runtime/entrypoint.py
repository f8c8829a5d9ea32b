from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from khatam_planner.core.domain.types import ReadingTarget
from khatam_planner.core.events.event_bus import EventBus
from khatam_planner.core.events.sinks.sink_logging import LoggingEventSink
from khatam_planner.core.planning.summary import print_plan_summary
from khatam_planner.runtime.checklist_store import JsonChecklistStore
from khatam_planner.runtime.session import PlannerSession

LOGGER = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _load_json(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(path)
    return json.loads(path.read_text(encoding="utf-8"))


def _parse_slot_ref(raw: str) -> tuple[int, int]:
    """
    Parse a ``DAY:INDEX`` slot reference.
    """
    day, sep, index = raw.partition(":")
    if not sep:
        raise argparse.ArgumentTypeError(f"expected DAY:INDEX, got {raw!r}")
    try:
        return int(day), int(index)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected DAY:INDEX, got {raw!r}") from exc


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Split a khatam reading target into a day-by-day plan"
    )

    parser.add_argument(
        "--config",
        type=Path,
        required=True,
        help="Path to reading target JSON.",
    )

    parser.add_argument(
        "--checklist",
        type=Path,
        default=None,
        help="Path to checklist JSON (created on --save).",
    )

    parser.add_argument(
        "--toggle-day",
        type=int,
        action="append",
        default=[],
        metavar="DAY",
        help="Toggle a day in the checklist (repeatable).",
    )

    parser.add_argument(
        "--toggle-slot",
        type=_parse_slot_ref,
        action="append",
        default=[],
        metavar="DAY:INDEX",
        help="Toggle a slot in the checklist (repeatable).",
    )

    parser.add_argument(
        "--reset",
        action="store_true",
        help="Clear the checklist before applying toggles.",
    )

    parser.add_argument(
        "--save",
        action="store_true",
        help="Write the updated checklist back to --checklist.",
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the plan as JSON instead of a summary.",
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log planner events to stderr.",
    )

    return parser


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.INFO, stream=sys.stderr)

    if args.save and args.checklist is None:
        print("Error: --save requires --checklist.", file=sys.stderr)
        sys.exit(2)

    # ------------------------------------------------------------------
    # Load target and checklist
    # ------------------------------------------------------------------

    try:
        target = ReadingTarget.from_json_obj(_load_json(args.config))
    except ValidationError as exc:
        print(f"Error: invalid reading target in {args.config}:\n{exc}", file=sys.stderr)
        sys.exit(2)

    store = JsonChecklistStore(args.checklist) if args.checklist else None
    checklist = store.load() if store is not None else None

    bus = EventBus(sinks=[LoggingEventSink(logging.getLogger("khatam_planner.events"))])

    session = PlannerSession(target=target, event_bus=bus, checklist=checklist)

    # ------------------------------------------------------------------
    # Checklist updates
    # ------------------------------------------------------------------

    try:
        if args.reset:
            session.reset_checklist()
        for day in args.toggle_day:
            session.toggle_day(day)
        for day, index in args.toggle_slot:
            session.toggle_slot(day, index)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(2)

    if args.save and store is not None:
        store.save(session.checklist)

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    if args.json:
        payload = {
            "target": target.model_dump(mode="json"),
            "plan": asdict(session.plan),
            "checklist": session.checklist.to_json_obj(),
        }
        print(json.dumps(payload, indent=2))
    else:
        print_plan_summary(session.summary(), session.plan, target.cycle_size)

        progress = session.day_progress()
        share = session.share_summary()
        print()
        print(f"Progress: {progress.done}/{progress.total} days ({progress.pct}%)")
        print(f"Share: {share.title} | {share.progress_label} ({share.progress_pct}%)")

    bus.close()


if __name__ == "__main__":
    main()
