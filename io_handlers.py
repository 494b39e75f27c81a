"""
io_handlers.py - Problem Input and Solution Output
==================================================
Parses the request list and prints one rectangle line per request.
"""

import logging
from typing import IO, List, Sequence

from models import MAP_SIZE, Request, Advertisement

logger = logging.getLogger(__name__)


class InputParseError(ValueError):
    """Raised when the problem input is malformed."""


def _to_int(token: str, position: int) -> int:
    try:
        value = int(token)
    except ValueError:
        raise InputParseError(f"Token {position} is not an integer: {token!r}") from None
    if value < 0:
        raise InputParseError(f"Token {position} must be non-negative, got {value}")
    return value


def parse_requests(text: str, map_size: int = MAP_SIZE) -> List[Request]:
    """
    Parse `N` followed by `N` triples of `row col area`.

    Args:
        text: Whitespace-separated problem input
        map_size: Exclusive upper bound for row and col

    Returns:
        Requests in input order

    Raises:
        InputParseError: On any missing, extra or invalid token
    """
    tokens = text.split()
    if not tokens:
        raise InputParseError("Input is empty")

    count = _to_int(tokens[0], 0)
    expected = 1 + 3 * count
    if len(tokens) < expected:
        raise InputParseError(
            f"Expected {count} requests ({expected} tokens), got {len(tokens)} tokens")
    if len(tokens) > expected:
        raise InputParseError(
            f"Unexpected trailing input after {count} requests: {tokens[expected]!r}")

    requests = []
    for i in range(count):
        base = 1 + 3 * i
        row, col, area = (_to_int(tokens[base + k], base + k) for k in range(3))

        if row >= map_size or col >= map_size:
            raise InputParseError(
                f"Request {i} point ({row}, {col}) is outside the {map_size}x{map_size} map")
        if area < 1:
            raise InputParseError(f"Request {i} area must be at least 1")

        requests.append(Request(row, col, area))

    logger.debug(f"Parsed {len(requests)} requests")
    return requests


def read_requests(stream: IO[str], map_size: int = MAP_SIZE) -> List[Request]:
    """Read and parse the whole stream."""
    return parse_requests(stream.read(), map_size)


def format_advertisements(ads: Sequence[Advertisement]) -> str:
    """One `row0 col0 row1 col1` line per rectangle."""
    return "".join(f"{ad}\n" for ad in ads)


def write_advertisements(ads: Sequence[Advertisement], stream: IO[str]):
    """Write the solution and flush so it is out before the process exits."""
    stream.write(format_advertisements(ads))
    stream.flush()
