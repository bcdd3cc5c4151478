"""Logging micro API for xaml-export."""

from .lib import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
