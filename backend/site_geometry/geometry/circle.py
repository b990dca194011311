"""Geodesic circles for single point site entries.

A "single" coordinates entry is a centre point plus a circle width
(diameter) in metres. The boundary is sampled on the WGS84 ellipsoid with
``pyproj.Geod.fwd``: ``vertex_count`` vertices at equal azimuth steps,
starting due north and running clockwise, each rounded to 6 decimal places.
The ring is then closed, so 60 vertices give 61 pairs.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

import pyproj

from site_geometry.core import constants
from site_geometry.geometry import manual, rounding

if TYPE_CHECKING:
    from site_geometry.models.geometry import Ring


@functools.lru_cache(maxsize=1)
def _geod() -> pyproj.Geod:
    return pyproj.Geod(ellps=constants.WGS84_ELLIPSOID)


def circle_ring(
    longitude: float,
    latitude: float,
    radius_metres: float,
    vertex_count: int = constants.DEFAULT_CIRCLE_VERTEX_COUNT,
) -> Ring:
    """Sample a closed ring around a WGS84 centre.

    Args:
        longitude: Centre longitude in decimal degrees.
        latitude: Centre latitude in decimal degrees.
        radius_metres: Geodesic distance from the centre to each vertex.
        vertex_count: Vertices before closure; at least 3.

    Returns:
        ``vertex_count + 1`` rounded ``[longitude, latitude]`` pairs.

    Raises:
        ValueError: If fewer than 3 vertices are requested.
    """
    if vertex_count < 3:
        raise ValueError(
            f"A circle needs at least 3 vertices, got {vertex_count}"
        )

    step = 360 / vertex_count
    azimuths = [index * step for index in range(vertex_count)]
    lons, lats, _ = _geod().fwd(
        [longitude] * vertex_count,
        [latitude] * vertex_count,
        azimuths,
        [radius_metres] * vertex_count,
    )
    ring = [
        rounding.round_coordinates((lon, lat))
        for lon, lat in zip(lons, lats, strict=True)
    ]
    return manual.close_ring(ring)
