"""Exceptions raised while normalizing site geometry.

Every error is raised synchronously to the caller and never logged or
swallowed here; translating them into HTTP responses is the job of the
calling layer.

Example:
    Report the offending site-details entry:
        >>> from site_geometry.core import errors
        >>> try:
        ...     transform_site_details([{"coordinatesType": "bogus"}])
        ... except errors.SiteDetailsError as e:
        ...     print(e.index, e.field)
        0 coordinatesType
"""

from __future__ import annotations


class SiteGeometryError(Exception):
    """Base class for all site geometry errors."""


class SiteDetailsError(SiteGeometryError, ValueError):
    """A site-details entry has an unknown selector or an invalid field.

    Attributes:
        index: Position of the offending entry in the site-details list.
        field: camelCase path of the invalid or missing field, e.g.
            ``coordinates.2.latitude``.
        reason: Human readable description of the problem.
    """

    def __init__(self, index: int, field: str, reason: str) -> None:
        self.index = index
        self.field = field
        self.reason = reason
        super().__init__(
            f"Invalid site details entry {index}: {field}: {reason}"
        )


class GeometryError(SiteGeometryError, ValueError):
    """A GeoJSON feature does not have the structure its type requires."""

    def __init__(self, feature_index: int, reason: str) -> None:
        self.feature_index = feature_index
        self.reason = reason
        super().__init__(
            f"Malformed geometry in feature {feature_index}: {reason}"
        )


class CoordinateTransformError(SiteGeometryError, RuntimeError):
    """The OSGB36 to WGS84 transform failed for a coordinate pair."""
