"""Canonical geometry for an application's site details.

This module is the single entry point of the geometry package. It takes
every site-details entry of an application, parses each into its typed
model, turns each into rings and concatenates the rings in entry order
into one canonical geometry:

    - file entries: outer boundaries of the uploaded FeatureCollection
      (zero rings when the file had no features)
    - "multiple" coordinates entries: exactly one ring
    - "single" coordinates entries: one sampled circle ring

The spatial reference is always WGS84 (wkid 4326); OSGB36 input has been
converted before the rings are assembled.

Example:
    >>> from site_geometry.geometry.site_details import transform_site_details
    >>> transform_site_details([])
    {'rings': [], 'spatialReference': {'wkid': 4326}}
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, assert_never

from site_geometry.core import config
from site_geometry.geometry import circle, file_upload, manual
from site_geometry.models import geometry as geometry_models
from site_geometry.models import site_details as models

if TYPE_CHECKING:
    from collections.abc import Iterable

    from site_geometry.models.geometry import CanonicalGeometry, Ring

logger = logging.getLogger(__name__)


def entry_rings(
    entry: models.SiteDetails,
    settings: config.Settings,
) -> list[Ring]:
    """Rings contributed by one parsed site-details entry."""
    match entry:
        case models.FileSiteDetails(geo_json=feature_collection):
            return file_upload.rings_from_feature_collection(
                feature_collection
            )
        case models.PolygonSiteDetails(
            coordinates=points,
            coordinate_system=system,
        ):
            return manual.manual_entry_rings(points, system)
        case models.CircleSiteDetails(
            coordinates=point,
            coordinate_system=system,
            circle_width=width,
        ):
            longitude, latitude = manual.point_to_wgs84(point, system)
            return [
                circle.circle_ring(
                    longitude,
                    latitude,
                    width / 2,
                    settings.circle_vertex_count,
                )
            ]
        case _:
            assert_never(entry)


def transform_site_details(
    site_details: Iterable[object],
    settings: config.Settings | None = None,
) -> CanonicalGeometry:
    """Normalize all site-details entries into one canonical geometry.

    Args:
        site_details: Raw site-details mappings as stored on the
            application, or already parsed models, in entry order.
        settings: Settings for circle sampling; defaults to get_settings().

    Returns:
        ``{"rings": [...], "spatialReference": {"wkid": 4326}}``. An empty
        list of entries gives an empty ``rings`` list.

    Raises:
        SiteDetailsError: If an entry has an unknown ``coordinatesType`` or
            ``coordinatesEntry``, or a missing or invalid field. The error
            names the entry index and the field.
        GeometryError: If an uploaded feature is structurally malformed.
        CoordinateTransformError: If an OSGB36 point cannot be converted.
    """
    settings = settings or config.get_settings()
    entries = models.parse_site_details(site_details)

    rings: list[Ring] = []
    for index, entry in enumerate(entries):
        contributed = entry_rings(entry, settings)
        logger.debug(
            "Site details entry %d (%s) contributed %d ring(s)",
            index,
            type(entry).__name__,
            len(contributed),
        )
        rings.extend(contributed)

    return geometry_models.CanonicalGeometry(
        rings=rings,
        spatialReference=geometry_models.wgs84_spatial_reference(),
    )
