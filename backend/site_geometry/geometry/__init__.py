"""Geometry normalization for submitted site boundaries.

Submodules:
    - numeric: tolerant floating-point comparison of coordinates.
    - rounding: fixed precision rounding of coordinate pairs.
    - file_upload: outer boundary rings from GeoJSON FeatureCollections.
    - manual: rings from manually entered WGS84 or OSGB36 points.
    - circle: geodesic circle sampling for single point entries.
    - site_details: the entry point producing canonical geometry.
"""
