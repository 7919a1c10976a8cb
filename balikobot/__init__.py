"""
balikobot package
-----------------

Client for the Balikobot carrier gateway.  ``Balikobot`` is the public
facade; the FastAPI gateway lives in :mod:`balikobot.main` and is only
imported on demand.
"""

from .core.errors import (  # noqa: F401
    BalikobotError,
    CarrierRejectedError,
    EmptyResponseError,
    InvalidArgumentError,
    MalformedResponseError,
    TransportError,
)
from .core.requester import Requester  # noqa: F401
from .core.requests import Request  # noqa: F401
from .services.balikobot_service import Balikobot  # noqa: F401

__all__ = [
    "Balikobot",
    "Requester",
    "Request",
    "BalikobotError",
    "CarrierRejectedError",
    "EmptyResponseError",
    "InvalidArgumentError",
    "MalformedResponseError",
    "TransportError",
]
