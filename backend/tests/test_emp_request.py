"""Tests for the EMP submission payload builder.

Covers site_geometry.services.emp_request:
    - case attributes taken from the exemption document
    - project dates spanning every site, in short ISO and long formats
    - public consent and the public details link
    - geometry produced by the site details normalizer
"""

from __future__ import annotations

import copy
import datetime
from typing import Any

import pytest

from site_geometry.core import config
from site_geometry.services import emp_request

EXEMPTION: dict[str, Any] = {
    "_id": "690204a0af9bd9354c7d3578",
    "projectName": "Manual - polygons",
    "applicationReference": "EXE/2025/10159",
    "submittedAt": "2025-10-29T12:29:10.394Z",
    "whoExemptionIsFor": "Test Company",
    "mcmsContext": {
        "activity": {
            "code": "DEPOSIT",
            "label": "Deposit of a substance or object",
            "purpose": "Scientific instruments and associated equipment",
        },
        "articleCode": "17",
        "pdfDownloadUrl": "https://marinelicensing.example/outcome/b87a",
    },
    "publicRegister": {"reason": None, "consent": "yes"},
    "coastalOperationsAreas": ["North East", "North West"],
    "marinePlanAreas": ["South Inshore"],
    "siteDetails": [
        {
            "coordinatesType": "coordinates",
            "coordinatesEntry": "multiple",
            "coordinateSystem": "wgs84",
            "activityDates": {
                "start": "2026-10-01T00:00:00.000Z",
                "end": "2026-11-01T00:00:00.000Z",
            },
            "coordinates": [
                {"latitude": "50.696698", "longitude": "-1.982385"},
                {"latitude": "50.698190", "longitude": "-1.980264"},
                {"latitude": "50.699503", "longitude": "-1.985637"},
                {"latitude": "50.698048", "longitude": "-1.988771"},
            ],
        },
        {
            "coordinatesType": "file",
            "fileUploadType": "kml",
            "activityDates": {
                "start": "2026-09-15T00:00:00.000Z",
                "end": "2026-10-20T00:00:00.000Z",
            },
            "geoJSON": {"type": "FeatureCollection", "features": []},
        },
    ],
}


@pytest.fixture
def settings() -> config.Settings:
    return config.Settings(front_end_base_url="http://localhost:3000")


def test_attributes(settings: config.Settings) -> None:
    attributes = emp_request.transform_exemption_to_emp_request(
        EXEMPTION, settings
    )["attributes"]
    assert attributes == {
        "CaseReference": "EXE/2025/10159",
        "Status": "Active",
        "ApplicationTy": "Exempt activity notification",
        "ApplicantName": "Test Company",
        "Project": "Manual - polygons",
        "ActivityTy": "Deposit of a substance or object",
        "SubActTy": "Scientific instruments and associated equipment",
        "ArticleNo": "Article 17",
        "IAT_URL": "https://marinelicensing.example/outcome/b87a",
        "ProjStartDate": "2026-09-15",
        "ProjStartDateFormatted": "15 Sep 2026",
        "ProjEndDate": "2026-11-01",
        "ProjEndDateFormatted": "1 Nov 2026",
        "SubDate": "2025-10-29",
        "SubDateFormatted": "29 Oct 2025",
        "PubConsent": "Yes",
        "Exemptions_URL": (
            "http://localhost:3000/exemption/view-public-details/"
            "690204a0af9bd9354c7d3578"
        ),
        "CoastalOperationsArea": "North East, North West",
        "MarinePlanArea": "South Inshore",
    }


def test_geometry(settings: config.Settings) -> None:
    geometry = emp_request.transform_exemption_to_emp_request(
        EXEMPTION, settings
    )["geometry"]
    assert geometry == {
        "rings": [
            [
                [-1.982385, 50.696698],
                [-1.980264, 50.69819],
                [-1.985637, 50.699503],
                [-1.988771, 50.698048],
                [-1.982385, 50.696698],
            ]
        ],
        "spatialReference": {"wkid": 4326},
    }


def test_optional_fields_default(settings: config.Settings) -> None:
    exemption = copy.deepcopy(EXEMPTION)
    exemption["mcmsContext"] = None
    exemption["whoExemptionIsFor"] = None
    exemption["publicRegister"] = {"consent": "no"}
    del exemption["coastalOperationsAreas"]
    del exemption["marinePlanAreas"]
    for site in exemption["siteDetails"]:
        del site["activityDates"]

    attributes = emp_request.transform_exemption_to_emp_request(
        exemption, settings
    )["attributes"]
    assert attributes["ActivityTy"] is None
    assert attributes["SubActTy"] == ""
    assert attributes["ArticleNo"] == ""
    assert attributes["IAT_URL"] is None
    assert attributes["ApplicantName"] == ""
    assert attributes["PubConsent"] == "No"
    assert attributes["ProjStartDate"] == ""
    assert attributes["ProjEndDateFormatted"] == ""
    assert attributes["CoastalOperationsArea"] == ""
    assert attributes["MarinePlanArea"] == ""


def test_base_url_with_path() -> None:
    settings = config.Settings(
        front_end_base_url="https://example.gov.uk/app/"
    )
    attributes = emp_request.transform_exemption_to_emp_request(
        EXEMPTION, settings
    )["attributes"]
    assert attributes["Exemptions_URL"] == (
        "https://example.gov.uk/exemption/view-public-details/"
        "690204a0af9bd9354c7d3578"
    )


def test_project_start_end_dates() -> None:
    dates = emp_request.project_start_end_dates(EXEMPTION["siteDetails"])
    assert dates.start == datetime.datetime(2026, 9, 15, tzinfo=datetime.UTC)
    assert dates.end == datetime.datetime(2026, 11, 1, tzinfo=datetime.UTC)


def test_project_start_end_dates_without_sites() -> None:
    assert emp_request.project_start_end_dates(None) == (None, None)
    assert emp_request.project_start_end_dates([{}]) == (None, None)


def test_project_dates_accept_datetimes() -> None:
    sites = [
        {
            "activityDates": {
                "start": datetime.datetime(2026, 3, 1),
                "end": None,
            }
        },
        {"activityDates": {"end": "2026-05-01T00:00:00.000Z"}},
    ]
    dates = emp_request.project_start_end_dates(sites)
    assert dates.start == datetime.datetime(2026, 3, 1, tzinfo=datetime.UTC)
    assert dates.end == datetime.datetime(2026, 5, 1, tzinfo=datetime.UTC)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("2024-03-15T10:30:00.000Z", "2024-03-15"),
        ("2024-12-31T23:59:59.000Z", "2024-12-31"),
        ("2024-02-29T12:00:00.000Z", "2024-02-29"),
        ("2024-03-15T23:30:00-02:00", "2024-03-16"),
        (datetime.datetime(2024, 5, 9, 12), "2024-05-09"),
    ],
)
def test_short_iso_date(value: datetime.datetime | str, expected: str) -> None:
    assert emp_request.short_iso_date(value) == expected


def test_long_date() -> None:
    assert emp_request.long_date("2024-05-09T12:00:00.000Z") == "9 May 2024"
    assert emp_request.long_date("2024-11-22T12:00:00.000Z") == "22 Nov 2024"


@pytest.mark.parametrize(
    ("month", "abbreviation"),
    list(
        enumerate(
            ["Jan", "Feb", "Mar", "Apr", "May", "Jun",
             "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"],
            start=1,
        )
    ),
)
def test_long_date_month_names_are_english(
    month: int, abbreviation: str
) -> None:
    moment = datetime.datetime(2025, month, 3, tzinfo=datetime.UTC)
    assert emp_request.long_date(moment) == f"3 {abbreviation} 2025"
