from typing import Any, List, Tuple

import pytest

from balikobot.services.balikobot_service import Balikobot


class FakeRequester:
    """Raw requester double: records calls, answers with a canned response."""

    def __init__(self, status_code: int = 200, body: Any = None) -> None:
        self.status_code = status_code
        self.body = body
        self.calls: List[Tuple[str, Any]] = []

    def request(self, url: str, data: Any = None) -> Tuple[int, Any]:
        self.calls.append((url, data))
        return self.status_code, self.body


@pytest.fixture
def make_balikobot():
    def _make(status_code: int = 200, body: Any = None) -> Tuple[Balikobot, FakeRequester]:
        requester = FakeRequester(status_code, body)
        return Balikobot(requester), requester

    return _make
