"""Core utilities shared across xaml-export."""

from .log import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
