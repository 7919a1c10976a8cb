"""
schemas/branches.py
-------------------

Branch and postcode value types.  Branch records differ a lot between
shippers: the common fields are typed, everything else the gateway sends
for a (full) branch is kept as extra attributes.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict

_BRANCH_FIELDS = ("id", "type", "name", "street", "city", "zip", "country")

# Truthy spellings of the 1B flag; "0" and "" are false.
REMOTE_AREA_FLAGS = (True, 1, "1", "true")


class Branch(BaseModel):
    model_config = ConfigDict(frozen=True, extra="allow", coerce_numbers_to_str=True)

    shipper: str
    service: Optional[str] = None
    id: Optional[Union[int, str]] = None
    type: Optional[str] = None
    name: Optional[str] = None
    street: Optional[str] = None
    city: Optional[str] = None
    zip: Optional[str] = None
    country: Optional[str] = None
    coordinates: Optional[Tuple[float, float]] = None

    @classmethod
    def from_data(cls, shipper: str, service: Optional[str], data: Dict[str, Any]) -> "Branch":
        values: Dict[str, Any] = {
            k: v for k, v in data.items() if k not in ("shipper", "service", "coordinates")
        }
        lat, lng = data.get("lat"), data.get("lng")
        values.update(
            shipper=shipper,
            service=service,
            coordinates=(float(lat), float(lng)) if lat is not None and lng is not None else None,
        )
        for field in _BRANCH_FIELDS:
            values.setdefault(field, None)
        return cls.model_validate(values)


class PostCode(BaseModel):
    """A postcode (or postcode range) served by a shipper's service.

    ``is_remote_area`` is the gateway's ``1B`` flag.
    """

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    shipper: str
    service: Optional[str] = None
    postcode: Optional[str] = None
    postcode_end: Optional[str] = None
    city: Optional[str] = None
    country: Optional[str] = None
    is_remote_area: bool = False

    @classmethod
    def from_data(
        cls, shipper: str, service: Optional[str], data: Dict[str, Any], country: Optional[str] = None
    ) -> "PostCode":
        postcode = data.get("zip")
        if postcode is None:
            postcode = data.get("zip_start")
        return cls(
            shipper=shipper,
            service=service,
            postcode=postcode,
            postcode_end=data.get("zip_end"),
            city=data.get("city"),
            country=data.get("country") or country,
            is_remote_area=data.get("1B") in REMOTE_AREA_FLAGS,
        )
