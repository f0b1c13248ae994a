"""dish: configuration and HTTP helpers for DHIS2 data import tools."""

__version__ = "0.1.0"
