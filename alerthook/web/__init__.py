"""Outbound web requests."""

from alerthook.web.client import RequestStats, WebClient, WebResult

__all__ = ["RequestStats", "WebClient", "WebResult"]
