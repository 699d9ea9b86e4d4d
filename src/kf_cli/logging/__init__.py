"""Logging configuration for kf."""

from kf_cli.logging.config import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
