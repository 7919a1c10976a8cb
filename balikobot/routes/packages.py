"""
routes/packages.py
------------------

Package lifecycle endpoints: add, check, drop, track, labels, overview.
"""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Depends, Response, status

from balikobot.routes import get_balikobot
from balikobot.schemas.packages import AddedPackages, LastStatus, TrackedShipment
from balikobot.schemas.requests import PackageIdsRequest, PackagesRequest
from balikobot.services.balikobot_service import Balikobot

router = APIRouter(prefix="/{shipper}", tags=["packages"])


@router.post("/add", response_model=AddedPackages)
def post_add(shipper: str, data: PackagesRequest, balikobot: Balikobot = Depends(get_balikobot)):
    return balikobot.add_packages(shipper, data.packages)


@router.post("/check", status_code=status.HTTP_204_NO_CONTENT)
def post_check(shipper: str, data: PackagesRequest, balikobot: Balikobot = Depends(get_balikobot)):
    balikobot.check_packages(shipper, data.packages)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/drop", status_code=status.HTTP_204_NO_CONTENT)
def post_drop(shipper: str, data: PackageIdsRequest, balikobot: Balikobot = Depends(get_balikobot)):
    balikobot.drop_packages(shipper, data.package_ids)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/track/{carrier_id}", response_model=TrackedShipment)
def get_track(shipper: str, carrier_id: str, balikobot: Balikobot = Depends(get_balikobot)):
    return balikobot.track_package(shipper, carrier_id)


@router.get("/trackstatus/{carrier_id}", response_model=LastStatus)
def get_track_status(shipper: str, carrier_id: str, balikobot: Balikobot = Depends(get_balikobot)):
    return balikobot.track_package_last_status(shipper, carrier_id)


@router.get("/overview")
def get_overview(shipper: str, balikobot: Balikobot = Depends(get_balikobot)) -> Any:
    return balikobot.get_overview(shipper)


@router.post("/labels")
def post_labels(shipper: str, data: PackageIdsRequest, balikobot: Balikobot = Depends(get_balikobot)) -> Dict[str, str]:
    return {"labels_url": balikobot.get_labels(shipper, data.package_ids)}


@router.get("/package/{package_id}")
def get_package(shipper: str, package_id: str, balikobot: Balikobot = Depends(get_balikobot)) -> Any:
    return balikobot.get_package_info(shipper, package_id)
