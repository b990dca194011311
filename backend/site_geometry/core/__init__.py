"""Configuration, constants and errors shared by the site geometry package."""
