"""
routes/branches.py
------------------

Branch lists, branch locator and postcodes.  The facade produces these
lazily; the routes materialise them into JSON arrays.
"""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends

from balikobot.routes import get_balikobot
from balikobot.schemas.branches import Branch, PostCode
from balikobot.schemas.requests import BranchLocatorRequest
from balikobot.services.balikobot_service import Balikobot

router = APIRouter(prefix="/{shipper}", tags=["branches"])


@router.get("/branches", response_model=List[Branch])
def get_branches(
    shipper: str,
    service: Optional[str] = None,
    full: bool = False,
    balikobot: Balikobot = Depends(get_balikobot),
):
    return list(balikobot.get_branches(shipper, service, full_data=full))


@router.post("/branchlocator", response_model=List[Branch])
def post_branch_locator(shipper: str, data: BranchLocatorRequest, balikobot: Balikobot = Depends(get_balikobot)):
    return list(balikobot.get_branches_for_location(
        shipper,
        data.country,
        data.city,
        postcode=data.postcode,
        street=data.street,
        max_results=data.max_results,
        radius=data.radius,
    ))


@router.get("/zipcodes/{service}", response_model=List[PostCode])
def get_post_codes(
    shipper: str,
    service: str,
    country: Optional[str] = None,
    balikobot: Balikobot = Depends(get_balikobot),
):
    return list(balikobot.get_post_codes(shipper, service, country))
