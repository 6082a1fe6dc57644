"""Vendor platform CLI: release image listing."""

__version__ = "0.1.0"
