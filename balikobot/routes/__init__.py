"""
Route aggregation package for the carrier gateway HTTP surface.

Each module groups one endpoint family (packages, orders, catalogues,
branches) behind its own ``APIRouter``.  The main application imports
these routers and includes them in the global FastAPI instance.  Every
route is a thin pass-through to the :class:`~balikobot.Balikobot`
facade stored on ``app.state``.
"""

from fastapi import Request

from balikobot.services.balikobot_service import Balikobot

__all__ = [
    "packages",
    "orders",
    "catalog",
    "branches",
    "get_balikobot",
]


def get_balikobot(request: Request) -> Balikobot:
    return request.app.state.balikobot


# Import submodules so their routers can be registered by main.py
from . import branches, catalog, orders, packages  # noqa: E402,F401
