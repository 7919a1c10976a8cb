"""
Pydantic value types returned by the facade and request bodies accepted
by the HTTP gateway.
"""

from .branches import Branch, PostCode  # noqa: F401
from .orders import OrderedShipment  # noqa: F401
from .packages import AddedPackages, LastStatus, PackageRecord, StatusRecord, TrackedShipment  # noqa: F401
