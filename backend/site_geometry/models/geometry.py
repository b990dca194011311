"""Canonical geometry output types.

The canonical geometry is the Esri-style polygon consumed by the
area-matching query and the EMP caseworker system:

    {"rings": [[[lon, lat], ...], ...], "spatialReference": {"wkid": 4326}}

Each ring is explicitly closed (first pair equals last pair) and every
coordinate is WGS84 decimal degrees, longitude first.
"""

from __future__ import annotations

from typing import TypedDict

from site_geometry.core import constants

Position = list[float]
Ring = list[Position]


class SpatialReference(TypedDict):
    wkid: int


class CanonicalGeometry(TypedDict):
    rings: list[Ring]
    spatialReference: SpatialReference


def wgs84_spatial_reference() -> SpatialReference:
    """Return a fresh ``{"wkid": 4326}`` spatial reference."""
    return SpatialReference(wkid=constants.WGS84_WKID)
