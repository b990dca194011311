"""Fixed precision rounding for coordinate pairs.

Six decimal places is roughly 11cm at the equator, ample for marine site
boundaries. Rounding goes through ``decimal`` so that halves round up (away
from zero) on the shortest decimal representation of each float, rather
than Python's round-half-to-even on the binary value.

Example:
    >>> from site_geometry.geometry.rounding import round_coordinates
    >>> round_coordinates([1.1234565, -51.987654321])
    [1.123457, -51.987654]
"""

from __future__ import annotations

import decimal
import math
from typing import TYPE_CHECKING

from site_geometry.core import constants

if TYPE_CHECKING:
    from collections.abc import Sequence

_QUANTUM = decimal.Decimal(1).scaleb(-constants.DECIMAL_PLACES)


def _round(value: float) -> float:
    if not math.isfinite(value):
        return float(value)
    exact = decimal.Decimal(str(value))
    if exact.as_tuple().exponent >= 0:
        # Whole numbers have nothing to round off.
        return float(value)
    with decimal.localcontext() as context:
        context.prec = max(
            context.prec,
            exact.adjusted() + constants.DECIMAL_PLACES + 2,
        )
        rounded = exact.quantize(_QUANTUM, rounding=decimal.ROUND_HALF_UP)
    return float(rounded)


def round_coordinates(pair: Sequence[float]) -> list[float]:
    """Round both components of a coordinate pair to 6 decimal places.

    Args:
        pair: ``[longitude, latitude]`` (or any two numbers).

    Returns:
        A new two element list of floats; the input is not modified.
    """
    x, y = pair
    return [_round(x), _round(y)]
