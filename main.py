"""
Root application entry point for the carrier gateway HTTP surface
=================================================================

This module exposes the FastAPI application instance defined in
``balikobot/main.py`` so that deployment tools like Uvicorn can import
``main:app`` from the repository root.

Usage
-----

.. code-block:: bash

    BALIKOBOT_API_USER=... BALIKOBOT_API_KEY=... uvicorn main:app --port 8000
"""

from balikobot.main import app  # noqa: F401 re-export for Uvicorn

__all__ = ["app"]
