import argparse
import logging
import sys
from typing import Optional, Sequence

from trisplit import (
    LayoutError,
    LayoutTypeError,
    format_layout,
    format_layout_details,
    load_scenario,
    run_scenario,
)
from trisplit.logging_utils import configure_logging

logger = logging.getLogger(__name__)


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Replay a three segment layout scenario")
    parser.add_argument("path", help="Path to the JSON scenario file")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    parser.add_argument(
        "--trace",
        action="store_true",
        help="Trace every strategy and distributor call (implies DEBUG logging)",
    )
    parser.add_argument(
        "--details",
        action="store_true",
        help="Print bounds, ideal sizes and strategies after every step",
    )
    args = parser.parse_args(argv)

    configure_logging("DEBUG" if args.trace else args.log_level)

    try:
        scenario = load_scenario(args.path)
        views = run_scenario(scenario)
    except (LayoutError, LayoutTypeError) as exc:
        logger.error("Scenario failed: %s", exc)
        raise SystemExit(1) from exc

    labels = ["initial"] + [step.describe() for step in scenario.steps]
    for label, view in zip(labels, views):
        print(f"{label}: {format_layout(view)}")
        if args.details:
            for line in format_layout_details(view).splitlines():
                print(f"  {line}")


if __name__ == "__main__":
    main(sys.argv[1:])
