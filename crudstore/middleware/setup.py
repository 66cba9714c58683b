"""
Middleware setup and configuration.
"""
from typing import List

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from crudstore.monitoring import MetricsMiddleware


def setup_middleware(app: FastAPI, cors_allow_origins: List[str]) -> None:
    """Set up all middleware for the FastAPI application."""
    # Request logging and metrics
    app.add_middleware(MetricsMiddleware)

    # Added last so it wraps everything and answers preflight requests first
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_allow_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )
