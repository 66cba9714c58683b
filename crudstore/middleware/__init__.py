"""
Cross-cutting middleware and logging configuration.
"""
from .setup import setup_middleware
from .logging_setup import setup_logging

__all__ = ["setup_middleware", "setup_logging"]
