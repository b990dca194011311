"""Pydantic models for the site-details documents of an application.

A site-details entry describes one part of an application's site either as
an uploaded file (already parsed to a GeoJSON FeatureCollection) or as
manually entered coordinates. The raw documents select their shape with the
``coordinatesType`` and ``coordinatesEntry`` strings; ``parse_site_details``
turns them into one of three frozen models so that the geometry code can
pattern match on types instead of strings:

    - FileSiteDetails: ``coordinatesType == "file"``
    - PolygonSiteDetails: ``coordinates`` + ``coordinatesEntry == "multiple"``
    - CircleSiteDetails: ``coordinates`` + ``coordinatesEntry == "single"``

Field names are camelCase on the wire and snake_case in Python.

Example:
    >>> from site_geometry.models import site_details
    >>> [entry] = site_details.parse_site_details([
    ...     {
    ...         "coordinatesType": "coordinates",
    ...         "coordinatesEntry": "multiple",
    ...         "coordinateSystem": "wgs84",
    ...         "coordinates": [
    ...             {"latitude": "50.000000", "longitude": "-1.000000"},
    ...             {"latitude": "51.000000", "longitude": "-1.000000"},
    ...             {"latitude": "51.000000", "longitude": "-2.000000"},
    ...         ],
    ...     }
    ... ])
    >>> isinstance(entry, site_details.PolygonSiteDetails)
    True
"""

from __future__ import annotations

import datetime
import enum
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Generic, Literal, TypeVar

import pydantic
from pydantic import alias_generators

from site_geometry.core import constants, errors

if TYPE_CHECKING:
    from collections.abc import Iterable


class CoordinateSystem(enum.StrEnum):
    WGS84 = "wgs84"
    OSGB36 = "osgb36"


class FileUploadType(enum.StrEnum):
    KML = "kml"
    SHAPEFILE = "shapefile"
    GEOJSON = "geojson"


class _Model(pydantic.BaseModel):
    model_config = pydantic.ConfigDict(
        alias_generator=alias_generators.to_camel,
        populate_by_name=True,
        frozen=True,
    )


class Wgs84Point(_Model):
    latitude: float = pydantic.Field(
        ge=constants.MIN_LATITUDE,
        le=constants.MAX_LATITUDE,
    )
    longitude: float = pydantic.Field(
        ge=constants.MIN_LONGITUDE,
        le=constants.MAX_LONGITUDE,
    )


class Osgb36Point(_Model):
    eastings: float
    northings: float


Point = Wgs84Point | Osgb36Point
P = TypeVar("P", Wgs84Point, Osgb36Point)


class Geometry(_Model):
    """GeoJSON geometry; coordinates are checked when rings are extracted."""

    model_config = pydantic.ConfigDict(extra="allow")

    type: str
    coordinates: Any = None


class Feature(_Model):
    model_config = pydantic.ConfigDict(extra="allow")

    type: str = "Feature"
    geometry: Geometry | None = None
    properties: dict[str, Any] | None = None


class FeatureCollection(_Model):
    type: Literal["FeatureCollection"]
    features: list[Feature]


class ActivityDates(_Model):
    start: datetime.datetime | None = None
    end: datetime.datetime | None = None


class _SiteDetails(_Model):
    site_name: str | None = None
    activity_description: str | None = None
    activity_dates: ActivityDates | None = None


class FileSiteDetails(_SiteDetails):
    coordinates_type: Literal["file"]
    file_upload_type: FileUploadType
    geo_json: FeatureCollection = pydantic.Field(alias="geoJSON")


class PolygonSiteDetails(_SiteDetails, Generic[P]):
    coordinates_type: Literal["coordinates"]
    coordinates_entry: Literal["multiple"]
    coordinate_system: CoordinateSystem
    coordinates: list[P] = pydantic.Field(min_length=1)


class CircleSiteDetails(_SiteDetails, Generic[P]):
    coordinates_type: Literal["coordinates"]
    coordinates_entry: Literal["single"]
    coordinate_system: CoordinateSystem
    coordinates: P
    circle_width: int = pydantic.Field(gt=0)


SiteDetails = FileSiteDetails | PolygonSiteDetails | CircleSiteDetails

_MANUAL_MODELS = {
    "multiple": PolygonSiteDetails,
    "single": CircleSiteDetails,
}

_POINT_MODELS: dict[str, type[Point]] = {
    CoordinateSystem.WGS84: Wgs84Point,
    CoordinateSystem.OSGB36: Osgb36Point,
}


def _field_path(loc: tuple[int | str, ...]) -> str:
    return ".".join(str(part) for part in loc) or "siteDetails"


def _select_model(raw: Mapping[str, Any], index: int) -> type[SiteDetails]:
    coordinates_type = raw.get("coordinatesType")
    if coordinates_type == "file":
        return FileSiteDetails
    if coordinates_type == "coordinates":
        entry = raw.get("coordinatesEntry")
        model = _MANUAL_MODELS.get(entry) if isinstance(entry, str) else None
        if model is None:
            raise errors.SiteDetailsError(
                index,
                "coordinatesEntry",
                f"expected 'single' or 'multiple', got {entry!r}",
            )
        system = raw.get("coordinateSystem")
        # an unknown system is reported by the coordinateSystem field itself
        point = Wgs84Point
        if isinstance(system, str):
            point = _POINT_MODELS.get(system, Wgs84Point)
        return model[point]  # type: ignore[no-any-return]
    raise errors.SiteDetailsError(
        index,
        "coordinatesType",
        f"expected 'file' or 'coordinates', got {coordinates_type!r}",
    )


def parse_site_details_entry(raw: object, index: int = 0) -> SiteDetails:
    """Convert one raw site-details document into its typed model.

    Args:
        raw: A mapping as stored on the application, or an already parsed
            model (returned unchanged).
        index: Position of the entry, reported in errors.

    Returns:
        FileSiteDetails, PolygonSiteDetails or CircleSiteDetails.

    Raises:
        SiteDetailsError: If the selectors are unknown or any field is
            missing or invalid. Only the first problem is reported.
    """
    if isinstance(
        raw, (FileSiteDetails, PolygonSiteDetails, CircleSiteDetails)
    ):
        return raw
    if not isinstance(raw, Mapping):
        raise errors.SiteDetailsError(
            index,
            "siteDetails",
            f"expected an object, got {type(raw).__name__}",
        )

    model = _select_model(raw, index)
    try:
        return model.model_validate(raw)
    except pydantic.ValidationError as exc:
        first = exc.errors()[0]
        raise errors.SiteDetailsError(
            index,
            _field_path(first["loc"]),
            first["msg"],
        ) from exc


def parse_site_details(entries: Iterable[object]) -> list[SiteDetails]:
    """Parse every site-details entry of an application, in order."""
    return [
        parse_site_details_entry(raw, index)
        for index, raw in enumerate(entries)
    ]
