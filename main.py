#!/usr/bin/env python3
"""
Advertisement Placement Annealer
================================
Main entry point: reads requests, anneals, prints one rectangle per request.
"""

import argparse
import logging
import sys
import time
from typing import IO, List, Optional

from annealer import Annealer
from config import Config
from io_handlers import InputParseError, read_requests, write_advertisements
from models import AnnealingResult, Request
from solution_validation import SolutionValidator
from utils import setup_logging, save_json, timer

logger = logging.getLogger(__name__)


@timer
def solve(requests: List[Request],
          started_at: float,
          seed: Optional[int] = None,
          time_limit: Optional[float] = None) -> AnnealingResult:
    """Run the annealer with the budget counted from `started_at`."""
    annealer = Annealer(requests, seed=seed, time_limit=time_limit)
    return annealer.run(started_at=started_at)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Place one non-overlapping rectangle per request by simulated annealing.')
    parser.add_argument('input', nargs='?', type=str,
                        help='Problem file (defaults to stdin)')
    parser.add_argument('--seed', type=int, default=None,
                        help=f"Random seed (default {Config.ANNEALING['seed']})")
    parser.add_argument('--time-limit', type=float, default=None,
                        help=f"Search time in seconds (default {Config.ANNEALING['time_limit']})")
    parser.add_argument('--config', type=str, default=None,
                        help='JSON or YAML file overriding configuration sections')
    parser.add_argument('--log-level', type=str, default=None,
                        help='Logging level (DEBUG, INFO, WARNING, ...)')
    parser.add_argument('--log-file', type=str, default=None,
                        help='Also write logs to this file')
    parser.add_argument('--validate', action='store_true',
                        help='Check the final placement and log any issues')
    parser.add_argument('--summary-json', type=str, default=None,
                        help='Write run statistics to this JSON file')
    return parser


def main(argv: Optional[List[str]] = None,
         stdin: Optional[IO[str]] = None,
         stdout: Optional[IO[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    if args.config:
        Config.from_file(args.config)
    setup_logging(args.log_level, args.log_file)

    map_size = Config.GRID['map_size']
    try:
        if args.input:
            with open(args.input, 'r') as f:
                requests = read_requests(f, map_size)
        else:
            requests = read_requests(stdin, map_size)
    except InputParseError as e:
        logger.error(f"Invalid input: {e}")
        return 1

    started_at = time.perf_counter()
    result = solve(requests, started_at, seed=args.seed, time_limit=args.time_limit)

    write_advertisements(result.advertisements, stdout)

    if args.validate:
        validation = SolutionValidator(map_size).validate(requests, result.advertisements)
        for issue in validation.issues:
            logger.warning(f"[{issue.severity.value}] {issue.message}")
        result.metrics['validation'] = validation.metrics

    if args.summary_json:
        save_json(result.to_dict(), args.summary_json)

    logger.debug("\n" + result.get_summary())
    return 0


if __name__ == "__main__":
    sys.exit(main())
