import base64
import json

import httpx
import pytest

from balikobot.core.auth import build_headers, build_url, get_base_url, get_basic_auth
from balikobot.core.errors import InvalidArgumentError, MalformedResponseError, TransportError
from balikobot.core.requester import Requester
from balikobot.services.balikobot_service import Balikobot


def _requester(handler):
    return Requester("user", "key", http2=False, transport=httpx.MockTransport(handler))


def test_request_posts_json_with_basic_auth():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["method"] = request.method
        seen["url"] = str(request.url)
        seen["auth"] = request.headers["Authorization"]
        seen["payload"] = json.loads(request.content)
        return httpx.Response(200, json={"status": 200, "units": []})

    with _requester(handler) as requester:
        status_code, body = requester.request("https://api.balikobot.cz/cp/manipulationunits")

    assert status_code == 200
    assert body == {"status": 200, "units": []}
    assert seen["method"] == "POST"
    assert seen["url"] == "https://api.balikobot.cz/cp/manipulationunits"
    assert seen["auth"] == "Basic " + base64.b64encode(b"user:key").decode()
    assert seen["payload"] == []


def test_request_returns_none_for_non_json_body():
    requester = _requester(lambda request: httpx.Response(502, text="<html>Bad gateway</html>"))
    assert requester.request("https://api.balikobot.cz/cp/services") == (502, None)
    requester.close()


def test_network_failure_is_transport_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    requester = _requester(handler)
    with pytest.raises(TransportError):
        requester.request("https://api.balikobot.cz/cp/services")
    requester.close()


def test_invalid_url_is_transport_error():
    requester = Requester("test", "test", http2=False)
    with pytest.raises(TransportError):
        requester.request("dummy")
    requester.close()


def test_facade_over_http_requester():
    def handler(request):
        return httpx.Response(200, json={"status": 200, "units": [{"code": 1, "name": "KM"}]})

    with Balikobot(_requester(handler)) as balikobot:
        assert balikobot.get_manipulation_units("cp") == {1: "KM"}


def test_facade_maps_unreadable_success_to_malformed():
    with Balikobot(_requester(lambda request: httpx.Response(200, text="ok"))) as balikobot:
        with pytest.raises(MalformedResponseError):
            balikobot.get_services("cp")


def test_facade_maps_bodyless_http_error_to_transport_error():
    with Balikobot(_requester(lambda request: httpx.Response(503))) as balikobot:
        with pytest.raises(TransportError):
            balikobot.get_services("cp")


def test_base_urls():
    assert get_base_url("v1") == "https://api.balikobot.cz"
    assert get_base_url("V2") == "https://apiv2.balikobot.cz"
    assert build_url("v1", "cp", "zipcodes", "NP/CZ") == "https://api.balikobot.cz/cp/zipcodes/NP/CZ"
    with pytest.raises(InvalidArgumentError):
        get_base_url("v3")


def test_basic_auth_needs_both_credentials():
    assert get_basic_auth("user", "key") == ("user", "key")
    assert get_basic_auth("user", None) is None
    assert build_headers()["Content-Type"] == "application/json"


def test_missing_credentials_send_no_authorization_header():
    seen = {}

    def handler(request):
        seen["auth"] = request.headers.get("Authorization")
        return httpx.Response(200, json={"status": 200})

    with Requester("", "", http2=False, transport=httpx.MockTransport(handler)) as requester:
        requester.request("https://api.balikobot.cz/cp/services")
    assert seen["auth"] is None
