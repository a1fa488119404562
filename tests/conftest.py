"""
Shared fixtures: a client whose HTTP session never touches the network
"""

import json
from typing import Any, Dict, List, Optional, Union
from urllib.parse import parse_qs, urlsplit

import pytest
import requests

from ainfinit_sdk import AinfinitClient, AinfinitConfig


MERCHANT = "merchant"
SECRET_KEY = "4UafmbIJroNY2lXX"
FIXED_TIMESTAMP = 1557218157315


def make_response(
    body: Union[Dict[str, Any], str, bytes, None] = None,
    status_code: int = 200,
    request: Optional[requests.PreparedRequest] = None,
) -> requests.Response:
    """Build a ``requests.Response`` without a network round trip"""
    response = requests.Response()
    response.status_code = status_code
    response.reason = "OK" if status_code < 400 else "Error"
    if body is None:
        body = {"status": 200, "message": "success"}
    if isinstance(body, dict) or isinstance(body, list):
        response._content = json.dumps(body).encode("utf-8")
        response.headers["Content-Type"] = "application/json"
    elif isinstance(body, str):
        response._content = body.encode("utf-8")
    else:
        response._content = body
    response.request = request
    response.url = request.url if request is not None else ""
    return response


class FakeTransport:
    """
    Stand-in for ``Session.send``

    Queued bodies are returned in order; every prepared request is recorded.
    A queued exception is raised instead of returning a response.
    """

    def __init__(self) -> None:
        self.requests: List[requests.PreparedRequest] = []
        self._queue: List[Any] = []

    def queue(self, body: Any = None, status_code: int = 200) -> None:
        self._queue.append((body, status_code))

    def fail(self, error: Exception) -> None:
        self._queue.append(error)

    def __call__(self, prepared: requests.PreparedRequest, **kwargs: Any) -> requests.Response:
        self.requests.append(prepared)
        item = self._queue.pop(0) if self._queue else (None, 200)
        if isinstance(item, Exception):
            raise item
        body, status_code = item
        return make_response(body, status_code, prepared)

    @property
    def last(self) -> requests.PreparedRequest:
        return self.requests[-1]

    def last_query(self) -> Dict[str, List[str]]:
        return parse_qs(urlsplit(self.last.url).query)

    def last_path(self) -> str:
        return urlsplit(self.last.url).path

    def last_json(self) -> Any:
        return json.loads(self.last.body)


@pytest.fixture
def config() -> AinfinitConfig:
    return AinfinitConfig(
        merchant_code=MERCHANT,
        secret_key=SECRET_KEY,
        base_url="https://api.test.local",
    )


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def client(config: AinfinitConfig, transport: FakeTransport, monkeypatch) -> AinfinitClient:
    sdk_client = AinfinitClient(config, clock=lambda: FIXED_TIMESTAMP)
    monkeypatch.setattr(sdk_client.http._session, "send", transport)
    yield sdk_client
    sdk_client.close()
