import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from . import TITLE, solution, solution2
from .config import SolverConfig
from .errors import Day16Error

logger = logging.getLogger("day_16")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="day_16", description=TITLE)
    parser.add_argument("--task", type=int, choices=(1, 2), required=True, help="which task to run")
    parser.add_argument("--input", type=Path, default=None, help="puzzle input file")
    parser.add_argument("--start", type=str, default=None, help="valve to start from")
    parser.add_argument("--budget", type=int, default=None, help="minutes available (per agent)")
    parser.add_argument("--workers", type=int, default=None, help="processes used for task 2")
    parser.add_argument("--progress", action="store_true", help="show a progress bar for task 2")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def config_from_args(args: argparse.Namespace) -> SolverConfig:
    config = SolverConfig().with_overrides(
        start_valve=args.start,
        workers=args.workers,
        progress=args.progress or None,
    )
    if args.input is not None:
        config = config.with_overrides(input_dir=args.input.parent, input_filename=args.input.name)
    if args.budget is not None:
        if args.task == 1:
            config = config.with_overrides(single_agent_budget=args.budget)
        else:
            config = config.with_overrides(two_agent_budget=args.budget)
    return config


def run_task(task: int, config: SolverConfig) -> str:
    if task == 1:
        pressure, route = solution.solve(config)
        logger.debug("route: %s", route.path)
        return f"the maximum amount of pressure we can release is {pressure}"
    pressure = solution2.solve(config)
    return f"the maximum pressure we can release together with an elephant is {pressure}"


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format="%(message)s")
    try:
        config = config_from_args(args)
        result = run_task(args.task, config)
    except (Day16Error, ValueError) as e:
        logger.error("%s", e)
        return 1
    print("Day 16")
    print(TITLE)
    print("")
    print(f"Task: {args.task}")
    print(f"Result: {result}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
