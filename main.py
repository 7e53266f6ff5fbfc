"""
bestfirst - Entry Point

Finds the cheapest walk across a weighted digit grid from the top-left
cell to the bottom-right cell and prints its cost.

Example:
    python main.py grid.txt
    python main.py grid.txt --tracked          # Also print every step
    python main.py grid.txt -r 10000 --debug   # Progress every 10000 expansions
"""

import sys
import logging
import argparse
from typing import Any, Dict, List, Optional

from bestfirst.grid import GridState, WeightGrid
from bestfirst.search import Tracker, solve, solve_tracked
from bestfirst.settings import load_settings, save_settings

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_NO_SOLUTION = 1
EXIT_BAD_INPUT = 2


def configure_logging(level: str, log_file: Optional[str] = None) -> None:
    """
    Configure logging to the console and optionally a file.

    Args:
        level: Logging level name, e.g. "INFO"
        log_file: Optional path for a log file (overwritten each run)
    """
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        handlers=handlers,
        force=True,
    )


def parse_args(argv: Optional[List[str]] = None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="bestfirst - Minimal-cost path across a weighted digit grid"
    )
    parser.add_argument(
        "input",
        help="Grid file: one row of digits per line"
    )
    parser.add_argument(
        "--tracked", "-t",
        action="store_true",
        default=None,
        help="Print the path taken, one step per line"
    )
    parser.add_argument(
        "--report-interval", "-r",
        type=int,
        default=None,
        help="Log search progress every N expansions (0 disables)"
    )
    parser.add_argument(
        "--debug", "-d",
        action="store_true",
        help="Enable debug logging"
    )
    parser.add_argument(
        "--save-settings",
        action="store_true",
        help="Persist the effective options to config.json"
    )
    return parser.parse_args(argv)


def effective_settings(args, settings: Dict[str, Any]) -> Dict[str, Any]:
    """
    Overlay command line flags on loaded settings.

    Args:
        args: Parsed arguments
        settings: Settings from config.json

    Returns:
        New settings dictionary; flags that were given take precedence
    """
    result = dict(settings)
    if args.tracked is not None:
        result["tracked"] = args.tracked
    if args.report_interval is not None:
        result["report_interval"] = args.report_interval
    if args.debug:
        result["log_level"] = "DEBUG"
    return result


def run(args, settings: Dict[str, Any]) -> int:
    """
    Load the grid, search it and print the answer.

    Returns:
        Exit code
    """
    try:
        grid = WeightGrid.load(args.input)
    except (OSError, ValueError) as e:
        logger.error(f"Cannot read grid {args.input}: {e}")
        return EXIT_BAD_INPUT

    tracker = None
    interval = settings.get("report_interval") or 0
    if interval > 0:
        tracker = Tracker(interval)

    initial = GridState.start(grid)
    logger.info(f"Searching {grid.width}x{grid.height} grid")

    if settings.get("tracked"):
        solution = solve_tracked(initial, tracker)
        if solution is None:
            print("no solution")
            return EXIT_NO_SOLUTION

        tracked, cost = solution
        print(cost)
        path = tracked.path()
        for (state, step_cost), nxt in zip(tracked.history(), path[1:]):
            arrow = state.position.direction_to(nxt.position).to_char()
            print(f"{state.position.x},{state.position.y} {arrow} +{step_cost}")
        print(f"{tracked.state.position.x},{tracked.state.position.y}")
        return EXIT_OK

    cost = solve(initial, tracker)
    if cost is None:
        print("no solution")
        return EXIT_NO_SOLUTION

    print(cost)
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    """Run the bestfirst command line."""
    args = parse_args(argv)
    settings = effective_settings(args, load_settings())

    configure_logging(settings["log_level"], settings.get("log_file"))

    if args.save_settings:
        save_settings(settings)

    return run(args, settings)


if __name__ == "__main__":
    sys.exit(main())
