"""Event-triggered webhook notifications."""

__version__ = "0.1.0"
