"""Project Tracker: a demo service for mapping exceptions to HTTP error responses."""

__version__ = "1.0.0"
