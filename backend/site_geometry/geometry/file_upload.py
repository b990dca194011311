"""Outer boundary rings from uploaded site files.

Uploaded KML and Shapefile sites are parsed to a GeoJSON FeatureCollection
before they reach this module. Only the outer boundary of each polygon is
kept: a Polygon contributes its first ring, and a MultiPolygon with N parts
contributes N rings. Features of any other type (Point, LineString, ...) are
skipped, as are features without a geometry. Rings are copied, not
re-closed; GeoJSON polygons are closed by definition.

Example:
    >>> from site_geometry.geometry import file_upload
    >>> file_upload.rings_from_feature_collection({
    ...     "type": "FeatureCollection",
    ...     "features": [{
    ...         "type": "Feature",
    ...         "geometry": {
    ...             "type": "Polygon",
    ...             "coordinates": [[[0, 0], [1, 1], [1, 0], [0, 0]]],
    ...         },
    ...     }],
    ... })
    [[[0, 0], [1, 1], [1, 0], [0, 0]]]
"""

from __future__ import annotations

import logging
import numbers
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

from site_geometry.core import errors
from site_geometry.models import site_details as models

if TYPE_CHECKING:
    from site_geometry.models.geometry import Ring

logger = logging.getLogger(__name__)


def _as_dict(value: Any) -> Any:
    if isinstance(value, models.FeatureCollection | models.Feature):
        return value.model_dump(by_alias=True)
    return value


def _is_number(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _copy_ring(ring: Any, feature_index: int) -> Ring:
    if not isinstance(ring, Sequence) or isinstance(ring, str):
        raise errors.GeometryError(feature_index, "ring is not an array")
    copied: Ring = []
    for position in ring:
        if (
            not isinstance(position, Sequence)
            or isinstance(position, str)
            or len(position) < 2
            or not all(_is_number(value) for value in position)
        ):
            raise errors.GeometryError(
                feature_index,
                "position is not an array of at least two numbers",
            )
        copied.append(list(position))
    return copied


def _outer_ring(polygon: Any, feature_index: int) -> Ring:
    if not isinstance(polygon, Sequence) or not polygon:
        raise errors.GeometryError(
            feature_index,
            "polygon has no boundary rings",
        )
    return _copy_ring(polygon[0], feature_index)


def _feature_rings(
    feature: Any,
    feature_index: int,
) -> list[Ring]:
    if not isinstance(feature, Mapping):
        raise errors.GeometryError(feature_index, "feature is not an object")
    geometry = feature.get("geometry") or {}
    if not isinstance(geometry, Mapping):
        raise errors.GeometryError(
            feature_index,
            "geometry is not an object",
        )
    geometry_type = geometry.get("type")
    if geometry_type not in ("Polygon", "MultiPolygon"):
        logger.debug(
            "Skipping feature %d with geometry type %s",
            feature_index,
            geometry_type,
        )
        return []

    coordinates = geometry.get("coordinates")
    if not isinstance(coordinates, Sequence):
        raise errors.GeometryError(
            feature_index,
            f"{geometry_type} is missing its coordinates array",
        )
    if geometry_type == "Polygon":
        return [_outer_ring(coordinates, feature_index)]
    return [_outer_ring(polygon, feature_index) for polygon in coordinates]


def rings_from_feature_collection(
    feature_collection: models.FeatureCollection | Mapping[str, Any],
) -> list[Ring]:
    """Flatten a FeatureCollection into a list of outer boundary rings.

    Args:
        feature_collection: Parsed GeoJSON FeatureCollection, as a mapping
            or a FeatureCollection model.

    Returns:
        One ring per Polygon and one ring per MultiPolygon part, in feature
        order. An empty collection yields an empty list.

    Raises:
        GeometryError: If a Polygon or MultiPolygon does not have the
            nesting GeoJSON requires.
    """
    collection = _as_dict(feature_collection)
    rings: list[Ring] = []
    for index, feature in enumerate(collection.get("features") or []):
        rings.extend(_feature_rings(_as_dict(feature), index))
    return rings
