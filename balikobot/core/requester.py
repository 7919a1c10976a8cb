"""
core/requester.py
-----------------

Raw requester: one HTTP round trip against the carrier gateway.

The requester knows nothing about gateway verbs or embedded statuses.
It POSTs a JSON payload to an absolute URL and hands back the HTTP
status code together with the decoded body (``None`` when the body is
not JSON).  Network failures and timeouts are raised as
:class:`TransportError`.  There are no retries: a caller that wants
them wraps the client.
"""

from __future__ import annotations

import json
import time
from typing import Any, Optional, Protocol, Tuple

import httpx

from balikobot.core.auth import build_headers, get_basic_auth
from balikobot.core.config import get_settings
from balikobot.core.errors import TransportError
from balikobot.logging_config import log_http_request, logger


class RequesterProtocol(Protocol):
    """Contract consumed by :class:`balikobot.clients.client.Client`."""

    def request(self, url: str, data: Any = None) -> Tuple[int, Any]:
        ...


class Requester:
    """httpx based requester sharing one connection pool.

    Instances should be created once and closed with :meth:`close` (or
    used as a context manager) to release pooled connections.
    """

    def __init__(
        self,
        api_user: Optional[str] = None,
        api_key: Optional[str] = None,
        *,
        timeout: Optional[float] = None,
        http2: Optional[bool] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        settings = get_settings()
        self.api_user = api_user if api_user is not None else settings.api_user
        self.timeout = timeout if timeout is not None else settings.http_timeout
        # HTTPX Client uses connection pooling
        self._client = httpx.Client(
            http2=settings.http2 if http2 is None else http2,
            timeout=self.timeout,
            headers=build_headers(),
            auth=get_basic_auth(self.api_user, api_key if api_key is not None else settings.api_key),
            transport=transport,
        )

    def close(self) -> None:
        """Close the underlying HTTPX client and release resources."""
        self._client.close()

    def __enter__(self) -> "Requester":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def request(self, url: str, data: Any = None) -> Tuple[int, Any]:
        """POST ``data`` as JSON to ``url``.

        An absent payload is sent as an empty JSON array.

        :raises TransportError: if the gateway cannot be reached
        :return: ``(status_code, decoded body or None)``
        """
        payload = [] if data is None else data
        start_time = time.time()
        log_http_request("POST", url, json_body=payload)
        try:
            response = self._client.post(url, json=payload)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.error(json.dumps({
                "event": "http_error",
                "method": "POST",
                "url": url,
                "detail": str(exc),
            }), exc_info=True)
            raise TransportError(f"Request to {url} failed: {exc}") from exc
        duration_ms = (time.time() - start_time) * 1000
        log_http_request("POST", url, status=response.status_code, duration_ms=duration_ms)
        try:
            body = response.json()
        except ValueError:
            body = None
        return response.status_code, body
