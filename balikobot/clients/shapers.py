"""
clients/shapers.py
------------------

Response shaping rules, one function per endpoint family.

Each function takes a body that already passed the status resolver and
turns it into the value handed back to the caller.  Gateway fields are
often missing or ``null``; every default applied here is explicit.
"""

from __future__ import annotations

from typing import Any, Dict, Iterator, List, Optional, Sequence, Union

from balikobot.core.errors import CarrierRejectedError, EmptyResponseError, MalformedResponseError
from balikobot.core.status import get_item, iter_items
from balikobot.schemas.branches import Branch, PostCode
from balikobot.schemas.orders import OrderedShipment
from balikobot.schemas.packages import (
    AddedPackages,
    LastStatus,
    PackageRecord,
    StatusRecord,
    TrackedShipment,
)


def _strip_status(body: Any) -> Any:
    if isinstance(body, dict):
        return {k: v for k, v in body.items() if k != "status"}
    return body


def _first_item(body: Any) -> Any:
    item = get_item(body, 0)
    if not item:
        raise EmptyResponseError(response=body)
    return item


def added_packages(shipper: str, body: Any) -> AddedPackages:
    """ADD: one record per numbered item; the batch ``labels_url`` is kept."""
    _first_item(body)
    packages = []
    for index, item in iter_items(body):
        if not isinstance(item, dict) or item.get("package_id") is None:
            raise CarrierRejectedError(f"Package {index} was not created", response=body)
        packages.append(PackageRecord.from_data(item))
    labels_url = body.get("labels_url") if isinstance(body, dict) else None
    return AddedPackages(shipper=shipper, packages=tuple(packages), labels_url=labels_url)


def tracked_shipment(carrier_id: str, body: Any) -> TrackedShipment:
    """TRACK: the first item is the list of tracking events."""
    records = _first_item(body)
    if not isinstance(records, list):
        raise MalformedResponseError("Tracking events are not a list", response=body)
    return TrackedShipment(
        carrier_id=carrier_id,
        status_records=tuple(StatusRecord.model_validate(record) for record in records),
    )


def last_status(body: Any) -> LastStatus:
    item = _first_item(body)
    if not isinstance(item, dict) or "status_text" not in item or "status_id" not in item:
        raise MalformedResponseError("Last status is incomplete", response=body)
    return LastStatus(name=item["status_text"], status_id=item["status_id"], date=None)


def labels_url(body: Any) -> str:
    if not isinstance(body, dict) or not body.get("labels_url"):
        raise MalformedResponseError("Response is missing labels_url", response=body)
    return body["labels_url"]


def ordered_shipment(shipper: str, package_ids: Sequence[Union[int, str]], body: Any) -> OrderedShipment:
    data = _strip_status(body)
    if not isinstance(data, dict) or data.get("order_id") is None:
        raise MalformedResponseError("Response is missing order_id", response=body)
    return OrderedShipment.from_data(shipper, package_ids, data)


def passthrough(body: Any) -> Any:
    """PACKAGE / OVERVIEW: body returned as sent."""
    return body


def without_status(body: Any) -> Any:
    """ORDER_VIEW: body returned without its ``status`` field."""
    return _strip_status(body)


def code_names(body: Any, field: str = "units", code_key: str = "code", name_key: str = "name") -> Dict[Any, Any]:
    """Build ``{code: name}`` from a list of records.

    Later duplicates of a code overwrite earlier ones (last write wins).
    A ``null`` or absent list yields an empty mapping.
    """
    items = body.get(field) if isinstance(body, dict) else None
    if items is None:
        return {}
    if isinstance(items, dict):
        return dict(items)
    mapping: Dict[Any, Any] = {}
    for item in items:
        mapping[item[code_key]] = item[name_key]
    return mapping


def services(body: Any) -> Dict[Any, Any]:
    """SERVICES: ``service_types`` may be a ready mapping or a list of records."""
    return code_names(body, "service_types", "service_type", "name")


def countries(body: Any, countries_key: str = "countries") -> Dict[Any, List[str]]:
    """COUNTRIES / COD_COUNTRIES: ``{service_type: [country, ...]}``."""
    return code_names(body, "service_types", "service_type", countries_key)


def iter_branches(shipper: str, service: Optional[str], body: Any) -> Iterator[Branch]:
    branches = body.get("branches") if isinstance(body, dict) else None
    if branches is None:
        return
    for branch in branches:
        yield Branch.from_data(shipper, service, branch)


def iter_post_codes(shipper: str, service: str, body: Any, country: Optional[str] = None) -> Iterator[PostCode]:
    """ZIP_CODES: one :class:`PostCode` per record, built on demand.

    The item country wins over the top-level ``country`` which wins over
    the country the caller asked for.
    """
    zip_codes = body.get("zip_codes") if isinstance(body, dict) else None
    if zip_codes is None:
        return
    country = body.get("country") or country
    for record in zip_codes:
        yield PostCode.from_data(shipper, service, record, country)
