"""Typed models for site-details input and canonical geometry output.

Submodules:
    - site_details: pydantic models parsed from stored site-details entries.
    - geometry: the canonical ``{rings, spatialReference}`` output types.
"""
