"""Tests for per-line numeric formatting."""

import numpy as np

from CorsikaGrisu.core.line_format import (
    HEADER_FORMAT,
    RECORD_FORMAT,
    SIGNED_RECORD_FORMAT,
    LineFormat,
    format_fields,
    format_line,
    format_number
)


def test_header_format_uses_four_decimals():
    assert format_number(1.0, HEADER_FORMAT) == "1.0000"
    assert format_number(np.float32(0.5), HEADER_FORMAT) == "0.5000"


def test_integers_have_no_decimals():
    assert format_number(-1, RECORD_FORMAT) == "-1"
    assert format_number(np.int32(7), RECORD_FORMAT) == "7"


def test_signed_format():
    assert format_number(2.5, SIGNED_RECORD_FORMAT) == "+2.5000000"
    assert format_number(-2.5, SIGNED_RECORD_FORMAT) == "-2.5000000"
    assert format_number(3, SIGNED_RECORD_FORMAT) == "+3"


def test_format_is_per_call():
    format_number(1.0, SIGNED_RECORD_FORMAT)
    assert format_number(1.0, RECORD_FORMAT) == "1.0000000"


def test_format_fields_separator():
    assert format_fields([1.0, 2.0], HEADER_FORMAT, '\t') == "1.0000\t2.0000"


def test_format_line():
    line = format_line('S', [1.0, -1, -1], LineFormat(precision=2))
    assert line == "S 1.00 -1 -1"
    assert format_line('X', []) == "X"
