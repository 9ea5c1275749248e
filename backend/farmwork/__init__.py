"""FarmWork Hub job board core."""

__version__ = "1.0.0"
