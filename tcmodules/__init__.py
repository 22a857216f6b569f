"""Container image definitions for integration tests, with shared building blocks in core."""

__version__ = "0.10.0"