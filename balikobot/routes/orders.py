"""
routes/orders.py
----------------

Shipment orders and pickups.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Response, status

from balikobot.routes import get_balikobot
from balikobot.schemas.orders import OrderedShipment
from balikobot.schemas.requests import OrderPickupRequest, OrderShipmentRequest
from balikobot.services.balikobot_service import Balikobot

router = APIRouter(prefix="/{shipper}", tags=["orders"])


@router.post("/order", response_model=OrderedShipment)
def post_order(shipper: str, data: OrderShipmentRequest, balikobot: Balikobot = Depends(get_balikobot)):
    return balikobot.order_shipment(shipper, data.package_ids, data.date, data.note)


@router.get("/orderview/{order_id}")
def get_order(shipper: str, order_id: str, balikobot: Balikobot = Depends(get_balikobot)) -> Any:
    return balikobot.get_order(shipper, order_id)


@router.post("/orderpickup", status_code=status.HTTP_204_NO_CONTENT)
def post_order_pickup(shipper: str, data: OrderPickupRequest, balikobot: Balikobot = Depends(get_balikobot)):
    balikobot.order_pickup(
        shipper,
        data.date_from,
        data.date_to,
        data.weight,
        data.package_count,
        data.message,
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
