"""
clients/client.py
-----------------

Endpoint dispatcher.  Builds the versioned URL for a gateway verb, hands
the payload to the raw requester and runs the status resolver on the
answer.  Shipper codes are opaque here: no shipper gets special
treatment, only the verb decides the path and API version.
"""

from __future__ import annotations

from typing import Any, Optional

from balikobot.core.auth import build_url
from balikobot.core.errors import InvalidArgumentError
from balikobot.core.requester import RequesterProtocol
from balikobot.core.requests import Request
from balikobot.core.status import resolve


class Client:
    def __init__(self, requester: RequesterProtocol) -> None:
        self.requester = requester

    def call(
        self,
        request: Request,
        shipper: str,
        data: Any = None,
        *,
        should_have_status: bool = True,
        path: Optional[str] = None,
        version: Optional[str] = None,
    ) -> Any:
        """Perform one gateway call and return the validated body.

        :param request: gateway verb
        :param shipper: shipper code, e.g. ``cp`` or ``ppl``
        :param data: JSON payload, sent exactly as given (``None`` -> ``[]``)
        :param should_have_status: whether the body must carry a ``status`` field
        :param path: optional suffix appended after the verb segment
        :param version: API version override; defaults to the verb's version
        :raises BalikobotError: on transport failure or a rejected call
        """
        if not shipper or shipper != shipper.lower():
            raise InvalidArgumentError(f"Invalid shipper code: {shipper!r}")
        url = build_url(version or request.version, shipper, request.segment, path)
        status_code, body = self.requester.request(url, [] if data is None else data)
        return resolve(status_code, body, should_have_status)
