"""
schemas/packages.py
-------------------

Value types produced by the package endpoints (add, track, track status).
All models are frozen: they are built once from a gateway response and
never modified afterwards.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field


class PackageRecord(BaseModel):
    """One package accepted by the ADD endpoint.

    ``raw_fields`` keeps every field the gateway returned for the item
    except ``status``.
    """

    model_config = ConfigDict(frozen=True)

    package_id: Union[int, str]
    carrier_id: Optional[str] = None
    label_url: Optional[str] = None
    raw_fields: Dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_data(cls, data: Dict[str, Any]) -> "PackageRecord":
        fields = {k: v for k, v in data.items() if k != "status"}
        carrier_id = fields.get("carrier_id")
        return cls(
            package_id=fields["package_id"],
            carrier_id=str(carrier_id) if carrier_id is not None else None,
            label_url=fields.get("label_url"),
            raw_fields=fields,
        )


class AddedPackages(BaseModel):
    """Result of one ADD call: the packages plus the batch labels URL."""

    model_config = ConfigDict(frozen=True)

    shipper: str
    packages: Tuple[PackageRecord, ...]
    labels_url: Optional[str] = None

    @property
    def package_ids(self) -> Tuple[Union[int, str], ...]:
        return tuple(package.package_id for package in self.packages)


class StatusRecord(BaseModel):
    """A single tracking event."""

    model_config = ConfigDict(frozen=True)

    date: Optional[str] = None
    name: Optional[str] = None
    status_id: Optional[Union[int, float, str]] = None
    status_text: Optional[str] = None


class TrackedShipment(BaseModel):
    model_config = ConfigDict(frozen=True)

    carrier_id: str
    status_records: Tuple[StatusRecord, ...]


class LastStatus(BaseModel):
    """Last known state of a package; the gateway sends no date for it."""

    model_config = ConfigDict(frozen=True)

    name: Optional[str] = None
    status_id: Optional[Union[int, float, str]] = None
    date: Optional[str] = None
