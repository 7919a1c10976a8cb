"""
schemas/orders.py
-----------------

Ordered shipment value type.  The gateway's ORDER response does not echo
the ordered package ids, so the ids supplied by the caller are kept.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Sequence, Tuple, Union

from pydantic import BaseModel, ConfigDict


class OrderedShipment(BaseModel):
    model_config = ConfigDict(frozen=True)

    shipper: str
    package_ids: Tuple[Union[int, str], ...]
    order_id: Union[int, str]
    handover_url: Optional[str] = None
    labels_url: Optional[str] = None
    file_url: Optional[str] = None

    @classmethod
    def from_data(
        cls, shipper: str, package_ids: Sequence[Union[int, str]], data: Dict[str, Any]
    ) -> "OrderedShipment":
        return cls(
            shipper=shipper,
            package_ids=tuple(package_ids),
            order_id=data["order_id"],
            handover_url=data.get("handover_url"),
            labels_url=data.get("labels_url"),
            file_url=data.get("file_url"),
        )
