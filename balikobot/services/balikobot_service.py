"""
services/balikobot_service.py
-----------------------------

Domain facade over the carrier gateway.

Each method validates its arguments, assembles the payload for one
gateway verb, performs exactly one round trip through the dispatcher
and shapes the answer into the package's value types.  Optional
payload fields are always sent, as explicit ``null`` when absent.
Errors from any layer are propagated unchanged.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any, Dict, Iterator, List, Optional, Sequence, Union

from balikobot.clients import shapers
from balikobot.clients.client import Client
from balikobot.core.country import validate_code
from balikobot.core.requester import Requester, RequesterProtocol
from balikobot.core.requests import Request
from balikobot.logging_config import log_call
from balikobot.schemas.branches import Branch, PostCode
from balikobot.schemas.orders import OrderedShipment
from balikobot.schemas.packages import AddedPackages, LastStatus, TrackedShipment
from balikobot.utils import format_date, format_time

PackageId = Union[int, str]


class Balikobot:
    """Public client for the carrier gateway.

    >>> with Balikobot.from_settings() as balikobot:
    ...     units = balikobot.get_manipulation_units("ppl")
    """

    def __init__(self, requester: RequesterProtocol) -> None:
        self.requester = requester
        self.client = Client(requester)

    @classmethod
    def from_settings(cls, **requester_options: Any) -> "Balikobot":
        """Build a facade over an httpx :class:`Requester` configured from the environment."""
        return cls(Requester(**requester_options))

    def close(self) -> None:
        close = getattr(self.requester, "close", None)
        if close is not None:
            close()

    def __enter__(self) -> "Balikobot":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    # --------------------------
    # Packages
    # --------------------------
    @log_call
    def add_packages(self, shipper: str, packages: Sequence[Dict[str, Any]]) -> AddedPackages:
        body = self.client.call(Request.ADD, shipper, list(packages))
        return shapers.added_packages(shipper, body)

    @log_call
    def drop_package(self, shipper: str, package_id: PackageId) -> None:
        self.drop_packages(shipper, [package_id])

    @log_call
    def drop_packages(self, shipper: str, package_ids: Sequence[PackageId]) -> None:
        """Drop packages that were not ordered yet.  An empty list makes no call."""
        data = [{"id": package_id} for package_id in package_ids]
        if not data:
            return
        self.client.call(Request.DROP, shipper, data)

    @log_call
    def track_package(self, shipper: str, carrier_id: str) -> TrackedShipment:
        body = self.client.call(Request.TRACK, shipper, [{"id": carrier_id}])
        return shapers.tracked_shipment(carrier_id, body)

    @log_call
    def track_package_last_status(self, shipper: str, carrier_id: str) -> LastStatus:
        body = self.client.call(
            Request.TRACK_STATUS, shipper, [{"id": carrier_id}], should_have_status=False
        )
        return shapers.last_status(body)

    @log_call
    def get_overview(self, shipper: str) -> Any:
        """Packages added but not ordered yet."""
        body = self.client.call(Request.OVERVIEW, shipper, should_have_status=False)
        return shapers.passthrough(body)

    @log_call
    def get_labels(self, shipper: str, package_ids: Sequence[PackageId]) -> str:
        body = self.client.call(Request.LABELS, shipper, {"package_ids": list(package_ids)})
        return shapers.labels_url(body)

    @log_call
    def get_package_info(self, shipper: str, package_id: PackageId) -> Any:
        body = self.client.call(Request.PACKAGE, shipper, path=str(package_id), should_have_status=False)
        return shapers.passthrough(body)

    @log_call
    def check_packages(self, shipper: str, packages: Sequence[Dict[str, Any]]) -> None:
        """Let the gateway validate package data without creating anything."""
        self.client.call(Request.CHECK, shipper, list(packages))

    # --------------------------
    # Orders
    # --------------------------
    @log_call
    def order_shipment(
        self,
        shipper: str,
        package_ids: Sequence[PackageId],
        date: Optional[date] = None,
        note: Optional[str] = None,
    ) -> OrderedShipment:
        data = {
            "package_ids": list(package_ids),
            "date": format_date(date),
            "note": note,
        }
        body = self.client.call(Request.ORDER, shipper, data)
        return shapers.ordered_shipment(shipper, package_ids, body)

    @log_call
    def get_order(self, shipper: str, order_id: PackageId) -> Any:
        body = self.client.call(Request.ORDER_VIEW, shipper, path=str(order_id), should_have_status=False)
        return shapers.without_status(body)

    @log_call
    def order_pickup(
        self,
        shipper: str,
        date_from: datetime,
        date_to: datetime,
        weight: float,
        package_count: int,
        message: Optional[str] = None,
    ) -> None:
        data = {
            "date": format_date(date_from),
            "time_from": format_time(date_from),
            "time_to": format_time(date_to),
            "weight": weight,
            "package_count": package_count,
            "message": message,
        }
        self.client.call(Request.ORDER_PICKUP, shipper, data)

    # --------------------------
    # Catalogues
    # --------------------------
    @log_call
    def get_services(self, shipper: str) -> Dict[str, str]:
        return shapers.services(self.client.call(Request.SERVICES, shipper))

    @log_call
    def get_manipulation_units(self, shipper: str) -> Dict[Any, str]:
        return shapers.code_names(self.client.call(Request.MANIPULATION_UNITS, shipper), "units")

    @log_call
    def get_adr_units(self, shipper: str) -> Dict[Any, str]:
        return shapers.code_names(self.client.call(Request.ADR_UNITS, shipper), "units")

    @log_call
    def get_cod_countries(self, shipper: str) -> Dict[str, List[str]]:
        """Countries where each service accepts cash on delivery."""
        return shapers.countries(self.client.call(Request.COD_COUNTRIES, shipper), "cod_countries")

    @log_call
    def get_countries(self, shipper: str) -> Dict[str, List[str]]:
        return shapers.countries(self.client.call(Request.COUNTRIES, shipper), "countries")

    # --------------------------
    # Branches and postcodes
    # --------------------------
    @log_call
    def get_branches(
        self, shipper: str, service: Optional[str] = None, full_data: bool = False
    ) -> Iterator[Branch]:
        request = Request.FULL_BRANCHES if full_data else Request.BRANCHES
        body = self.client.call(request, shipper, path=service)
        return shapers.iter_branches(shipper, service, body)

    @log_call
    def get_branches_for_location(
        self,
        shipper: str,
        country: str,
        city: str,
        postcode: Optional[str] = None,
        street: Optional[str] = None,
        max_results: Optional[int] = None,
        radius: Optional[float] = None,
    ) -> Iterator[Branch]:
        validate_code(country)
        data = {
            "country": country,
            "city": city,
            "zip": postcode,
            "street": street,
            "max_results": max_results,
            "radius": radius,
        }
        body = self.client.call(Request.BRANCH_LOCATOR, shipper, data)
        return shapers.iter_branches(shipper, None, body)

    @log_call
    def get_post_codes(self, shipper: str, service: str, country: Optional[str] = None) -> Iterator[PostCode]:
        """Postcodes served by ``service``, produced lazily from one fetched response."""
        if country is not None:
            validate_code(country)
            path = f"{service}/{country}"
        else:
            path = service
        body = self.client.call(Request.ZIP_CODES, shipper, path=path)
        return shapers.iter_post_codes(shipper, service, body, country)
