"""Utility functions."""

from .http import FetchCommand, HTTPClient, HTTPFetchConfig, http_fetch_command

__all__ = ["FetchCommand", "HTTPClient", "HTTPFetchConfig", "http_fetch_command"]
