"""
HTTP exception handlers.
"""
from .handlers import setup_exception_handlers

__all__ = ["setup_exception_handlers"]
