"""HTTP service mode for the joborg viewer."""

from .app import create_app, run_service

__all__ = ["create_app", "run_service"]
