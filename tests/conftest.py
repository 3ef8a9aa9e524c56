from __future__ import annotations

import json
from typing import Callable, Dict, List, Optional, Tuple

import pytest


class FakeTransport:
    """Scripted stand-in for the HTTP transport.

    Each entry in ``responses`` is either a response body string or an
    exception instance to raise for that call.
    """

    def __init__(self, responses: List[object]):
        self.responses = list(responses)
        self.calls: List[Tuple[str, Dict[str, Optional[str]]]] = []

    def __call__(self, url: str, body: Dict[str, Optional[str]]) -> str:
        self.calls.append((url, dict(body)))
        if not self.responses:
            raise AssertionError(f"Unexpected request to {url}")
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


def make_page(start: int, count: int) -> str:
    """JSON body of a /v3/get page holding ``count`` items from ``start``."""
    items = {
        str(i): {"item_id": str(i), "given_url": f"https://example.com/{i}"}
        for i in range(start, start + count)
    }
    return json.dumps({"status": 1, "complete": 1, "list": items})


@pytest.fixture
def fake_transport() -> Callable[[List[object]], FakeTransport]:
    return FakeTransport


@pytest.fixture
def page_body() -> Callable[[int, int], str]:
    return make_page
