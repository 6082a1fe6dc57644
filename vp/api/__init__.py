"""Vendor API access: transport, client and wire models."""

from .client import CurrentRelease, VendorApi, VendorApiClient
from .errors import ApiError
from .http import HttpClient, HttpError, MockHttpClient, RealHttpClient
from .models import App, Channel, CustomHostnames, Release

__all__ = [
    "ApiError",
    "App",
    "Channel",
    "CurrentRelease",
    "CustomHostnames",
    "HttpClient",
    "HttpError",
    "MockHttpClient",
    "RealHttpClient",
    "Release",
    "VendorApi",
    "VendorApiClient",
]
