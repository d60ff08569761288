"""Observability helpers for the pureconf command-line front end."""

from pureconf.observability.logging import configure_logging, get_logger, reset_logging

__all__ = ["configure_logging", "get_logger", "reset_logging"]
