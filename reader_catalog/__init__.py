"""Reader catalog: tag taxonomy and catalog filtering service."""

__version__ = "1.0.0"
