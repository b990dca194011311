"""Tolerant floating-point equality for coordinate comparison."""

from __future__ import annotations

from typing import TYPE_CHECKING

from site_geometry.core import constants

if TYPE_CHECKING:
    from collections.abc import Sequence


def equal(a: float, b: float) -> bool:
    """Return True when ``a`` and ``b`` differ by less than machine epsilon."""
    return abs(a - b) < constants.EPSILON


def coords_equal(p: Sequence[float], q: Sequence[float]) -> bool:
    """Compare two ``[longitude, latitude]`` pairs component-wise."""
    return equal(p[0], q[0]) and equal(p[1], q[1])
