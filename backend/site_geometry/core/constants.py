"""Numeric and coordinate reference constants."""

import sys

EPSILON = sys.float_info.epsilon
DECIMAL_PLACES = 6

WGS84_WKID = 4326
WGS84_CRS = "EPSG:4326"
OSGB36_CRS = "EPSG:27700"
WGS84_ELLIPSOID = "WGS84"

MIN_LATITUDE = -90
MAX_LATITUDE = 90
MIN_LONGITUDE = -180
MAX_LONGITUDE = 180

DEFAULT_CIRCLE_VERTEX_COUNT = 60
