#!/usr/bin/env python3
"""
Test Input/Output
=================
"""

import io

import pytest

from io_handlers import (
    InputParseError, parse_requests, read_requests,
    format_advertisements, write_advertisements
)
from models import Request, Advertisement


def test_parse_requests():
    text = "2\n0 0 5\n9999 12 100\n"

    assert parse_requests(text) == [Request(0, 0, 5), Request(9999, 12, 100)]


def test_parse_zero_requests():
    assert parse_requests("0") == []


def test_read_requests_from_stream():
    assert read_requests(io.StringIO("1 3 4 5")) == [Request(3, 4, 5)]


@pytest.mark.parametrize("text", [
    "",
    "   \n",
    "2\n0 0 5\n",
    "1\n0 0\n",
    "1\n0 0 5 7\n",
    "x\n",
    "1\n0 a 5\n",
    "1\n0 1.5 5\n",
    "1\n-1 0 5\n",
    "1\n10000 0 5\n",
    "1\n0 10000 5\n",
    "1\n0 0 0\n",
])
def test_malformed_input_is_rejected(text):
    with pytest.raises(InputParseError):
        parse_requests(text)


def test_parse_error_is_value_error():
    assert issubclass(InputParseError, ValueError)


def test_format_one_line_per_rectangle():
    ads = [Advertisement(0, 0, 1, 1), Advertisement(5, 6, 7, 8)]

    assert format_advertisements(ads) == "0 0 1 1\n5 6 7 8\n"


def test_write_advertisements():
    out = io.StringIO()

    write_advertisements([Advertisement(1, 2, 3, 4)], out)

    assert out.getvalue() == "1 2 3 4\n"
