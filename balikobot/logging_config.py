"""
logging_config.py
------------------

This module defines a shared logging configuration and utilities for
structured logging throughout the carrier gateway client.  It uses
Python's built‑in ``logging`` module so that log output can be
captured by standard logging handlers or external systems.  Messages
are serialised as JSON to make them easier to parse downstream.

To use this module, import ``logger`` and call its methods instead
of ``logging.info`` directly.  The ``log_call`` decorator can be
applied to functions to record entry and exit points at the DEBUG
level without leaking credentials such as the API key.
"""

from __future__ import annotations

import json
import logging
import sys
import types
from functools import wraps
from typing import Any, Callable, Dict

from balikobot.core.config import get_settings

# Library code only owns the "balikobot" logger; the root logger is left
# to the host application (see configure_logging).
logger = logging.getLogger("balikobot")
logger.setLevel(get_settings().log_level.upper())

_SENSITIVE = ("key", "password", "secret", "token", "authorization")


def configure_logging() -> None:
    """Set up the root logger for the HTTP gateway process.

    Log output goes to stdout with a timestamp, log level and the raw
    message.  The message itself is a JSON string so downstream consumers
    can parse it easily.  Only application entry points call this.
    """
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def _sanitize(obj: Any) -> Any:
    """Recursively sanitise objects for logging.

    Dictionaries have keys that look like credentials removed.  Lists
    and tuples are processed element‑wise, pydantic models are dumped
    first.  Generators are never consumed, only their ``repr`` is kept.
    """
    if isinstance(obj, (bytes, bytearray)):
        return f"<binary {len(obj)} bytes>"
    if isinstance(obj, types.GeneratorType):
        return repr(obj)
    if isinstance(obj, dict):
        clean: Dict[str, Any] = {}
        for k, v in obj.items():
            if any(keyword in str(k).lower() for keyword in _SENSITIVE):
                continue
            clean[str(k)] = _sanitize(v)
        return clean
    if isinstance(obj, (list, tuple)):
        return [_sanitize(i) for i in obj]
    if hasattr(obj, "model_dump"):
        return _sanitize(obj.model_dump(mode="json"))
    try:
        return json.loads(json.dumps(obj))
    except (TypeError, ValueError):
        return str(obj)


def log_call(func: Callable[..., Any]) -> Callable[..., Any]:
    """Decorator to log entry and exit of functions.

    This decorator logs a DEBUG level message before a function is executed
    and another after it returns.  The messages include the function name
    and a sanitised snapshot of the arguments and return value.  Nothing is
    serialised unless DEBUG is enabled for the ``balikobot`` logger.

    Examples
    --------

    >>> @log_call
    ... def add(a, b):
    ...     return a + b
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        debug = logger.isEnabledFor(logging.DEBUG)
        if debug:
            logger.debug(json.dumps({
                "event": "call_start",
                "function": func.__qualname__,
                "args": _sanitize(args),
                "kwargs": _sanitize(kwargs),
            }))
        result = func(*args, **kwargs)
        if debug:
            logger.debug(json.dumps({
                "event": "call_end",
                "function": func.__qualname__,
                "result": _sanitize(result),
            }))
        return result

    return wrapper


def log_http_request(method: str, url: str, *, json_body: Any = None,
                     status: int | None = None, duration_ms: float | None = None) -> None:
    """Log an outbound HTTP request at DEBUG level.

    This helper centralises HTTP request logging so that only high‑level
    information (method, URL, payload, status and duration) is recorded.
    It is invoked by the requester before and after performing requests.

    Parameters
    ----------
    method : str
        The HTTP method (GET, POST, etc.)
    url : str
        The URL being requested.
    json_body : Any, optional
        JSON payload sent to the gateway.
    status : int, optional
        Response status code (log end only).
    duration_ms : float, optional
        Time taken in milliseconds (log end only).
    """
    if not logger.isEnabledFor(logging.DEBUG):
        return
    data: Dict[str, Any] = {
        "event": "http_request",
        "method": method,
        "url": url,
    }
    if json_body:
        data["json"] = _sanitize(json_body)
    if status is not None:
        data["status"] = status
    if duration_ms is not None:
        data["duration_ms"] = round(duration_ms, 2)
    logger.debug(json.dumps(data))
