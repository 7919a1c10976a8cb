"""
core/auth.py
-------------

Utility functions for building authenticated requests to the gateway.

These helpers centralise construction of the base URLs and HTTP
headers required to call the carrier gateway. They encapsulate
knowledge about the version‑specific hosts and keep the credentials
out of the places that log requests.
"""

from __future__ import annotations

from typing import Dict, Optional, Tuple

from balikobot.core.config import get_settings
from balikobot.core.errors import InvalidArgumentError


def get_base_url(version: str) -> str:
    """Return the API base URL for a given API version.

    The returned URL does not include a trailing slash. Version values
    are normalised to lower‑case.

    :param version: API version tag (``v1`` or ``v2``)
    :raises InvalidArgumentError: if the version is not supported
    :return: the base API URL
    """
    settings = get_settings()
    version = version.lower().strip()
    if version == "v1":
        return settings.api_v1_url.rstrip("/")
    if version == "v2":
        return settings.api_v2_url.rstrip("/")
    raise InvalidArgumentError(f"Unsupported API version: {version}")


def build_url(version: str, shipper: str, segment: str, path: Optional[str] = None) -> str:
    """Build ``{base}/{shipper}/{segment}[/{path}]``."""
    url = f"{get_base_url(version)}/{shipper}/{segment}"
    if path:
        url = f"{url}/{path.strip('/')}"
    return url


def build_headers() -> Dict[str, str]:
    """Headers sent with every call; the gateway speaks JSON only."""
    return {
        "Content-Type": "application/json",
        "Accept": "application/json",
    }


def get_basic_auth(api_user: Optional[str], api_key: Optional[str]) -> Optional[Tuple[str, str]]:
    """Return HTTP Basic credentials for httpx, or ``None``.

    When either part is missing no credentials are sent, so the gateway
    answers with its own 401.
    """
    if api_user and api_key:
        return api_user, api_key
    return None
