from __future__ import annotations

import pytest
import requests

from pocket_sync.api import transport
from pocket_sync.api.errors import TransportError


class _Response:
    def __init__(self, status_code=200, text="", headers=None):
        self.status_code = status_code
        self.text = text
        self.headers = headers or {}


def test_do_request_posts_form_fields_without_none(monkeypatch) -> None:
    captured = {}

    def fake_post(url, data=None, headers=None, timeout=None, verify=None):
        captured.update(url=url, data=data, headers=headers, timeout=timeout)
        return _Response(text="code=abc")

    monkeypatch.setattr(transport.requests, "post", fake_post)

    body = transport.do_request(
        "https://getpocket.com/v3/oauth/request",
        {"consumer_key": "key-1", "redirect_uri": "myapp://cb", "tag": None},
        timeout=5,
    )

    assert body == "code=abc"
    assert captured["data"] == {"consumer_key": "key-1", "redirect_uri": "myapp://cb"}
    assert captured["headers"]["Content-Type"] == "application/x-www-form-urlencoded"
    assert captured["timeout"] == 5


def test_do_request_uses_configured_timeout(monkeypatch) -> None:
    captured = {}

    def fake_post(url, **kwargs):
        captured.update(kwargs)
        return _Response(text="{}")

    monkeypatch.setenv("POCKET_SYNC_TIMEOUT", "12.5")
    monkeypatch.setattr(transport.requests, "post", fake_post)

    transport.do_request("https://getpocket.com/v3/get", {})

    assert captured["timeout"] == 12.5


def test_error_status_raises_transport_error_with_x_error(monkeypatch) -> None:
    monkeypatch.setattr(
        transport.requests,
        "post",
        lambda url, **kwargs: _Response(status_code=400, headers={"X-Error": "Missing consumer key."}),
    )

    with pytest.raises(TransportError) as excinfo:
        transport.do_request("https://getpocket.com/v3/oauth/request", {})

    assert excinfo.value.status_code == 400
    assert excinfo.value.x_error == "Missing consumer key."
    assert "Missing consumer key." in str(excinfo.value)


def test_network_error_is_wrapped(monkeypatch) -> None:
    def fake_post(url, **kwargs):
        raise requests.ConnectionError("connection refused")

    monkeypatch.setattr(transport.requests, "post", fake_post)

    with pytest.raises(TransportError) as excinfo:
        transport.do_request("https://getpocket.com/v3/get", {})

    assert excinfo.value.status_code is None
    assert isinstance(excinfo.value.__cause__, requests.ConnectionError)
