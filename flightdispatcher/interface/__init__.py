"""Mini README: HTTP interface for the flight dispatcher.

Exports the FastAPI application factory used by ``dispatcher_cli.py``.
"""

from .web_app import create_application

__all__ = ["create_application"]
