"""lic — license compliance scanner for Go projects."""

__version__ = "0.4.0"
