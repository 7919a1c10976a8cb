"""
routes/catalog.py
-----------------

Per-shipper catalogues: services, units and the countries services reach.
Mapping keys are returned as strings since JSON objects only have string
keys.
"""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Depends

from balikobot.routes import get_balikobot
from balikobot.services.balikobot_service import Balikobot

router = APIRouter(prefix="/{shipper}", tags=["catalog"])


def _stringify_keys(mapping: Dict[Any, Any]) -> Dict[str, Any]:
    return {str(key): value for key, value in mapping.items()}


@router.get("/services")
def get_services(shipper: str, balikobot: Balikobot = Depends(get_balikobot)):
    return _stringify_keys(balikobot.get_services(shipper))


@router.get("/manipulationunits")
def get_manipulation_units(shipper: str, balikobot: Balikobot = Depends(get_balikobot)):
    return _stringify_keys(balikobot.get_manipulation_units(shipper))


@router.get("/adrunits")
def get_adr_units(shipper: str, balikobot: Balikobot = Depends(get_balikobot)):
    return _stringify_keys(balikobot.get_adr_units(shipper))


@router.get("/countries")
def get_countries(shipper: str, balikobot: Balikobot = Depends(get_balikobot)):
    return _stringify_keys(balikobot.get_countries(shipper))


@router.get("/codcountries")
def get_cod_countries(shipper: str, balikobot: Balikobot = Depends(get_balikobot)):
    return _stringify_keys(balikobot.get_cod_countries(shipper))
