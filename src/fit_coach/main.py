"""Command line entry point: generate a plan from onboarding answers."""

import argparse
import json
import logging
from collections.abc import Sequence

from fit_coach.config import SETTINGS
from fit_coach.logging_setup import setup_logging
from fit_coach.models import EQUIPMENT_TAGS, OnboardingProfile
from fit_coach.planner import generate_plan
from fit_coach.services import PlanService

logger = logging.getLogger(__name__)


def _equipment(value: str) -> frozenset[str]:
    tags = frozenset(t.strip().lower() for t in value.split(",") if t.strip())
    unknown = tags - EQUIPMENT_TAGS
    if not tags or unknown:
        raise argparse.ArgumentTypeError(
            f"equipment must be a comma separated subset of {sorted(EQUIPMENT_TAGS)}"
        )
    return tags


def _schedule(value: str) -> int:
    days = int(value)
    if not 1 <= days <= 7:
        raise argparse.ArgumentTypeError("schedule must be between 1 and 7 days")
    return days


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="fit-coach", description=__doc__)
    parser.add_argument("--equipment", type=_equipment, required=True)
    parser.add_argument("--schedule", type=_schedule, default=3)
    parser.add_argument(
        "--goal", choices=("strength", "fat-loss", "general"), default="general"
    )
    parser.add_argument(
        "--experience", choices=("novice", "intermediate", "advanced"), default="novice"
    )
    parser.add_argument("--json", action="store_true", help="print the plan as JSON")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    setup_logging(SETTINGS.LOG_LEVEL)
    args = build_parser().parse_args(argv)
    profile = OnboardingProfile(
        equipment=args.equipment,
        schedule=args.schedule,
        goal=args.goal,
        experience=args.experience,
    )
    plan = generate_plan(profile)
    if args.json:
        print(json.dumps(plan.to_dict(), indent=2))
    else:
        print(PlanService().render_plan_message(plan))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
