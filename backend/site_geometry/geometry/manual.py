"""Rings from manually entered site coordinates.

Applicants may type the corners of their site either as WGS84 latitude and
longitude or as OSGB36 (British National Grid) eastings and northings.
Points keep the order they were entered in; that order is the boundary
traversal and is never sorted or re-wound. The ring is closed by appending
the first pair when the last pair differs from it.

OSGB36 points are converted with pyproj from EPSG:27700 to EPSG:4326 using
``always_xy=True`` so that results come back as ``(longitude, latitude)``.

Example:
    >>> from site_geometry.geometry import manual
    >>> from site_geometry.models import site_details as models
    >>> manual.manual_entry_rings(
    ...     [
    ...         models.Wgs84Point(latitude=50, longitude=-1),
    ...         models.Wgs84Point(latitude=51, longitude=-1),
    ...         models.Wgs84Point(latitude=51, longitude=-2),
    ...     ],
    ...     models.CoordinateSystem.WGS84,
    ... )
    [[[-1.0, 50.0], [-1.0, 51.0], [-2.0, 51.0], [-1.0, 50.0]]]
"""

from __future__ import annotations

import functools
import math
from typing import TYPE_CHECKING

import pyproj
import pyproj.exceptions

from site_geometry.core import constants, errors
from site_geometry.geometry import numeric
from site_geometry.models import site_details as models

if TYPE_CHECKING:
    from collections.abc import Sequence

    from site_geometry.models.geometry import Position, Ring


@functools.lru_cache(maxsize=1)
def _osgb36_transformer() -> pyproj.Transformer:
    return pyproj.Transformer.from_crs(
        constants.OSGB36_CRS,
        constants.WGS84_CRS,
        always_xy=True,
    )


def osgb36_to_wgs84(eastings: float, northings: float) -> Position:
    """Convert an OSGB36 grid reference to ``[longitude, latitude]``.

    Args:
        eastings: Metres east of the national grid false origin.
        northings: Metres north of the national grid false origin.

    Returns:
        WGS84 longitude and latitude in decimal degrees.

    Raises:
        CoordinateTransformError: If pyproj fails or returns a non-finite
            result (e.g. for a point far outside the grid).
    """
    try:
        longitude, latitude = _osgb36_transformer().transform(
            eastings,
            northings,
            errcheck=True,
        )
    except pyproj.exceptions.ProjError as exc:
        raise errors.CoordinateTransformError(
            f"Cannot convert OSGB36 ({eastings}, {northings}) to WGS84: {exc}"
        ) from exc
    if not (math.isfinite(longitude) and math.isfinite(latitude)):
        raise errors.CoordinateTransformError(
            f"Cannot convert OSGB36 ({eastings}, {northings}) to WGS84"
        )
    return [longitude, latitude]


def point_to_wgs84(
    point: models.Point,
    coordinate_system: models.CoordinateSystem,
) -> Position:
    """Return a point as ``[longitude, latitude]`` in WGS84."""
    match coordinate_system, point:
        case models.CoordinateSystem.WGS84, models.Wgs84Point():
            return [point.longitude, point.latitude]
        case models.CoordinateSystem.OSGB36, models.Osgb36Point():
            return osgb36_to_wgs84(point.eastings, point.northings)
        case _:
            raise ValueError(
                f"{type(point).__name__} cannot be read as {coordinate_system}"
            )


def close_ring(ring: Ring) -> Ring:
    """Append the first pair to ``ring`` unless it already ends with it."""
    if ring and not numeric.coords_equal(ring[0], ring[-1]):
        ring.append(list(ring[0]))
    return ring


def manual_entry_rings(
    points: Sequence[models.Point],
    coordinate_system: models.CoordinateSystem,
) -> list[Ring]:
    """Build the single closed ring for a "multiple" coordinates entry.

    Duplicate consecutive points are kept. Fewer than three distinct points
    still produce a (degenerate) ring; rejecting those is left to payload
    validation.

    Args:
        points: Entered points, in boundary order.
        coordinate_system: System the points were entered in.

    Returns:
        A list holding exactly one closed ring of ``[longitude, latitude]``.

    Raises:
        CoordinateTransformError: If an OSGB36 point cannot be converted.
    """
    ring = [point_to_wgs84(point, coordinate_system) for point in points]
    return [close_ring(ring)]
