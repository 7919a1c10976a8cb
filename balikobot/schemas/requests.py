"""
schemas/requests.py
-------------------

Request bodies accepted by the HTTP gateway routes.  They mirror the
arguments of the corresponding :class:`~balikobot.Balikobot` methods.
"""

from __future__ import annotations

import datetime as dt
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field


class PackagesRequest(BaseModel):
    """Package data for ADD and CHECK, one record per package."""
    packages: List[Dict[str, Any]] = Field(..., min_length=1)


class PackageIdsRequest(BaseModel):
    package_ids: List[Union[int, str]]


class OrderShipmentRequest(BaseModel):
    package_ids: List[Union[int, str]] = Field(..., min_length=1)
    date: Optional[dt.date] = None
    note: Optional[str] = None


class OrderPickupRequest(BaseModel):
    date_from: dt.datetime
    date_to: dt.datetime
    weight: float = Field(..., gt=0)
    package_count: int = Field(..., ge=1)
    message: Optional[str] = None


class BranchLocatorRequest(BaseModel):
    country: str
    city: str
    postcode: Optional[str] = None
    street: Optional[str] = None
    max_results: Optional[int] = Field(None, ge=1)
    radius: Optional[float] = Field(None, gt=0)
