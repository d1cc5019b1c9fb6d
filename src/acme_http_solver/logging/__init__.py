"""Logging configuration for acme_http_solver."""

from acme_http_solver.logging.config import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
