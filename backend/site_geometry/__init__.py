"""Site geometry package for the marine licensing backend.

This package normalizes the site boundaries an applicant submits for an
exemption or marine licence into one canonical polygon representation:
Esri-style ``rings`` in WGS84 (EPSG:4326). Boundaries arrive either as an
uploaded file (KML, Shapefile or GeoJSON, already parsed to a GeoJSON
FeatureCollection) or as manually entered coordinates in WGS84 or OSGB36.

- Parses untrusted site-details documents into typed pydantic models
- Extracts outer boundary rings from Polygon and MultiPolygon features
- Converts OSGB36 eastings/northings to WGS84 with pyproj
- Samples geodesic circles for single point plus width entries
- Builds the EMP (caseworker system) submission payload

See module sub-docstrings for details.
"""
