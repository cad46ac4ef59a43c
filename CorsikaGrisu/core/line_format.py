"""Numeric formatting for GrIsu output lines.

Formatting options are passed per line instead of being set on the
output stream, so sign display on photon lines cannot leak into the
header or shower lines.
"""

from dataclasses import dataclass
from numbers import Integral
from typing import Iterable, Union

import numpy as np

from ..physics.constants import HEADER_PRECISION, RECORD_PRECISION


Number = Union[int, float, np.floating, np.integer]


@dataclass(frozen=True)
class LineFormat:
    """Fixed-point formatting options for one line.
    
    Attributes:
        precision: Digits after the decimal point for floating point fields
        show_sign: Always print the sign, '+' included
    """
    precision: int = HEADER_PRECISION
    show_sign: bool = False


HEADER_FORMAT = LineFormat(precision=HEADER_PRECISION)
RECORD_FORMAT = LineFormat(precision=RECORD_PRECISION)
SIGNED_RECORD_FORMAT = LineFormat(precision=RECORD_PRECISION, show_sign=True)


def format_number(value: Number, fmt: LineFormat = HEADER_FORMAT) -> str:
    """Format a single field.
    
    Integers are written without decimals, everything else in fixed point
    with ``fmt.precision`` decimals.
    """
    sign = '+' if fmt.show_sign else ''
    if isinstance(value, (Integral, np.integer)) and not isinstance(value, bool):
        return f"{int(value):{sign}d}"
    return f"{float(value):{sign}.{fmt.precision}f}"


def format_fields(values: Iterable[Number], fmt: LineFormat, separator: str = ' ') -> str:
    """Format several fields joined by ``separator``."""
    return separator.join(format_number(value, fmt) for value in values)


def format_line(tag: str, values: Iterable[Number], fmt: LineFormat = RECORD_FORMAT) -> str:
    """Format a tagged record line, e.g. ``S 1.0000000 ... -1 -1 -1``."""
    fields = format_fields(values, fmt)
    return f"{tag} {fields}" if fields else tag
