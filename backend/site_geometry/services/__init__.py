"""Services built on the canonical site geometry.

Submodules:
    - emp_request: builds the payload sent to EMP, the caseworker system.
"""
