from __future__ import annotations

import pytest

from pocket_sync import build_pocket_api
from pocket_sync.api.errors import MissingRequestTokenError


def test_pocket_api_runs_auth_then_fetch(fake_transport, page_body) -> None:
    transport = fake_transport([
        "code=req-1",
        "access_token=acc-1&username=reader",
        page_body(0, 4),
    ])
    api = build_pocket_api(consumer_key="key-1", do_request=transport, clock=lambda: 1700000000)

    request_token = api.get_request_token("myapp://callback")
    token = api.get_access_token()
    result = api.get_pocket_items(token.access_token, sync_tag="news")

    assert request_token == "req-1"
    assert token.username == "reader"
    assert len(result["response"]["list"]) == 4
    assert {body["consumer_key"] for _, body in transport.calls} == {"key-1"}
    assert transport.calls[2][1]["access_token"] == "acc-1"


def test_second_access_token_call_fails(fake_transport) -> None:
    api = build_pocket_api(
        consumer_key="key-1",
        do_request=fake_transport(["code=req-1", "access_token=acc-1&username=reader"]),
    )

    api.get_request_token("myapp://callback")
    api.get_access_token()

    with pytest.raises(MissingRequestTokenError):
        api.get_access_token()


def test_instances_do_not_share_pending_tokens(fake_transport) -> None:
    first = build_pocket_api(consumer_key="key-1", do_request=fake_transport(["code=req-1"]))
    second = build_pocket_api(consumer_key="key-1", do_request=fake_transport([]))

    first.get_request_token("myapp://callback")

    with pytest.raises(MissingRequestTokenError):
        second.get_access_token()


def test_default_consumer_key_comes_from_config(monkeypatch) -> None:
    from pocket_sync import config

    monkeypatch.delenv("POCKET_CONSUMER_KEY", raising=False)
    monkeypatch.setenv("POCKET_SYNC_PLATFORM", "ios")

    assert build_pocket_api().consumer_key == config.PLATFORM_CONSUMER_KEYS["ios"]
