"""International Center website core: gateway clients and navigation data."""

__version__ = "0.1.0"
