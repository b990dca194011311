"""Submission payload for EMP, the caseworker case management system.

When an exemption is submitted it is forwarded to EMP as an Esri feature:
a flat ``attributes`` dictionary describing the case and a ``geometry``
holding the canonical site geometry. Project dates span every site: the
earliest activity start and the latest activity end. All dates are
rendered in UTC.

Example:
    >>> from site_geometry.core import config
    >>> from site_geometry.services import emp_request
    >>> payload = emp_request.transform_exemption_to_emp_request(
    ...     exemption,
    ...     config.get_settings(),
    ... )
    >>> payload["attributes"]["CaseReference"]
    'EXE/2025/10158'
    >>> payload["geometry"]["spatialReference"]
    {'wkid': 4326}
"""

from __future__ import annotations

import datetime
import logging
import urllib.parse
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, NamedTuple, TypedDict

from site_geometry.geometry import site_details

if TYPE_CHECKING:
    from collections.abc import Iterable

    from site_geometry.core import config
    from site_geometry.models.geometry import CanonicalGeometry

logger = logging.getLogger(__name__)

STATUS = "Active"
APPLICATION_TYPE = "Exempt activity notification"

# Month names are fixed English regardless of the process locale.
_MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


class ProjectDates(NamedTuple):
    start: datetime.datetime | None
    end: datetime.datetime | None


class EmpRequest(TypedDict):
    attributes: dict[str, Any]
    geometry: CanonicalGeometry


def _to_datetime(value: datetime.datetime | str) -> datetime.datetime:
    """Parse an ISO 8601 string or normalize a datetime to aware UTC."""
    if isinstance(value, str):
        value = datetime.datetime.fromisoformat(value)
    if value.tzinfo is None:
        return value.replace(tzinfo=datetime.UTC)
    return value.astimezone(datetime.UTC)


def short_iso_date(value: datetime.datetime | str) -> str:
    """Format as ``YYYY-MM-DD``."""
    return _to_datetime(value).date().isoformat()


def long_date(value: datetime.datetime | str) -> str:
    """Format as ``d Mon YYYY``, e.g. ``1 Oct 2026``."""
    moment = _to_datetime(value)
    month = _MONTH_ABBREVIATIONS[moment.month - 1]
    return f"{moment.day} {month} {moment.year}"


def project_start_end_dates(
    site_details: Iterable[Mapping[str, Any]] | None,
) -> ProjectDates:
    """Earliest activity start and latest activity end across all sites.

    Sites without activity dates are ignored. Either bound is None when no
    site provides it.
    """
    start: datetime.datetime | None = None
    end: datetime.datetime | None = None
    for site in site_details or []:
        dates = site.get("activityDates") or {}
        if site_start := dates.get("start"):
            candidate = _to_datetime(site_start)
            if start is None or candidate < start:
                start = candidate
        if site_end := dates.get("end"):
            candidate = _to_datetime(site_end)
            if end is None or candidate > end:
                end = candidate
    return ProjectDates(start, end)


def _public_details_url(base_url: str, exemption_id: object) -> str:
    return urllib.parse.urljoin(
        base_url,
        f"/exemption/view-public-details/{exemption_id}",
    )


def transform_exemption_to_emp_request(
    exemption: Mapping[str, Any],
    settings: config.Settings,
) -> EmpRequest:
    """Build the EMP payload for a submitted exemption.

    Args:
        exemption: Exemption document as stored, including ``_id``,
            ``applicationReference``, ``submittedAt`` and ``siteDetails``.
        settings: Settings providing the front-end base URL and circle
            sampling options.

    Returns:
        Dictionary with ``attributes`` and ``geometry`` keys.

    Raises:
        SiteDetailsError: If a site-details entry is invalid.
        GeometryError: If an uploaded feature is malformed.
        CoordinateTransformError: If an OSGB36 point cannot be converted.
    """
    mcms_context = exemption.get("mcmsContext") or {}
    activity = mcms_context.get("activity") or {}
    public_register = exemption.get("publicRegister") or {}
    site_details_list = exemption.get("siteDetails") or []

    dates = project_start_end_dates(site_details_list)
    submitted_at = exemption["submittedAt"]
    article_code = mcms_context.get("articleCode")

    attributes: dict[str, Any] = {
        "CaseReference": exemption.get("applicationReference"),
        "Status": STATUS,
        "ApplicationTy": APPLICATION_TYPE,
        "ApplicantName": exemption.get("whoExemptionIsFor") or "",
        "Project": exemption.get("projectName"),
        "ActivityTy": activity.get("label"),
        "SubActTy": activity.get("purpose") or "",
        "ArticleNo": f"Article {article_code}" if article_code else "",
        "IAT_URL": mcms_context.get("pdfDownloadUrl"),
        "ProjStartDate": short_iso_date(dates.start) if dates.start else "",
        "ProjStartDateFormatted": (
            long_date(dates.start) if dates.start else ""
        ),
        "ProjEndDate": short_iso_date(dates.end) if dates.end else "",
        "ProjEndDateFormatted": long_date(dates.end) if dates.end else "",
        "SubDate": short_iso_date(submitted_at),
        "SubDateFormatted": long_date(submitted_at),
        "PubConsent": (
            "No" if public_register.get("consent") == "no" else "Yes"
        ),
        "Exemptions_URL": _public_details_url(
            settings.front_end_base_url,
            exemption.get("_id"),
        ),
        "CoastalOperationsArea": ", ".join(
            exemption.get("coastalOperationsAreas") or []
        ),
        "MarinePlanArea": ", ".join(exemption.get("marinePlanAreas") or []),
    }
    geometry = site_details.transform_site_details(site_details_list, settings)
    logger.debug(
        "Built EMP request for %s with %d ring(s)",
        attributes["CaseReference"],
        len(geometry["rings"]),
    )
    return EmpRequest(attributes=attributes, geometry=geometry)
