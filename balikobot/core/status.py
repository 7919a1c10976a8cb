"""
core/status.py
--------------

Status resolver for the gateway's dual status signalling.

The gateway answers most calls with HTTP 200 and reports the outcome of
the operation in a ``status`` field inside the JSON body, either at the
top level or once per submitted item.  Both layers are checked here as
two separate gates:

1. HTTP gate: the transport status must be 2xx.
2. Body gate: the ``status`` field (top level and per item) must be 200,
   and must be present at all when the endpoint always sends one.
"""

from __future__ import annotations

import json
from typing import Any, Dict, Iterator, Optional, Tuple

from balikobot.core.errors import CarrierRejectedError, MalformedResponseError, TransportError
from balikobot.logging_config import logger

STATUS_OK = 200


def iter_items(body: Any) -> Iterator[Tuple[int, Any]]:
    """Yield ``(index, item)`` for the numbered items of a response body.

    List bodies are enumerated; mapping bodies carry their items under
    numeric keys (``"0"``, ``"1"``, ... or ints) next to top-level fields.
    """
    if isinstance(body, list):
        yield from enumerate(body)
        return
    if not isinstance(body, dict):
        return
    numbered = []
    for key, value in body.items():
        if isinstance(key, int) or (isinstance(key, str) and key.isdigit()):
            numbered.append((int(key), value))
    yield from sorted(numbered, key=lambda pair: pair[0])


def get_item(body: Any, index: int = 0) -> Any:
    """Return the numbered item ``index`` of a response body, or ``None``."""
    for position, item in iter_items(body):
        if position == index:
            return item
    return None


def _to_status(value: Any) -> Optional[int]:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _status_text(body: Any) -> Optional[str]:
    if isinstance(body, dict):
        for key in ("status_message", "status_text", "message"):
            if body.get(key):
                return str(body[key])
    return None


def check_http_status(status_code: int, body: Any) -> None:
    """First gate: HTTP transport status."""
    if 200 <= status_code < 300:
        return
    if body is None:
        raise TransportError(f"HTTP {status_code} without a readable body", status_code=status_code)
    raise CarrierRejectedError(
        f"HTTP {status_code}",
        status_code=status_code,
        response=body,
        status_text=_status_text(body),
    )


def check_body_status(body: Any, should_have_status: bool = True) -> None:
    """Second gate: embedded ``status`` fields."""
    if body is None:
        raise MalformedResponseError("Response body is not valid JSON")

    errors: Dict[int, Any] = {}
    has_status = False
    for index, item in iter_items(body):
        if isinstance(item, dict) and "status" in item:
            has_status = True
            status = _to_status(item["status"])
            if status != STATUS_OK:
                errors[index] = status if status is not None else item["status"]

    top_status = None
    if isinstance(body, dict) and "status" in body:
        has_status = True
        top_status = _to_status(body["status"])

    if should_have_status and not has_status:
        raise MalformedResponseError("Response is missing the status field", response=body)

    if errors or (isinstance(body, dict) and "status" in body and top_status != STATUS_OK):
        status_code = top_status if top_status not in (None, STATUS_OK) else next(iter(errors.values()), None)
        logger.warning(json.dumps({
            "event": "carrier_rejected",
            "status": status_code,
            "errors": errors,
        }))
        raise CarrierRejectedError(
            status_code=status_code,
            response=body,
            status_text=_status_text(body) or _status_text(get_item(body)),
            errors=errors,
        )


def resolve(status_code: int, body: Any, should_have_status: bool = True) -> Any:
    """Run both gates and return the body unchanged on success."""
    check_http_status(status_code, body)
    check_body_status(body, should_have_status)
    return body
