"""Utility modules."""

from .logging_setup import setup_logging, shutdown_logging, set_level, get_logger

__all__ = ["setup_logging", "shutdown_logging", "set_level", "get_logger"]
