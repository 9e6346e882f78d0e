"""Shared fixtures for upstream mocking."""

from __future__ import annotations

import json
from collections.abc import Callable

import httpx
import pytest


class UpstreamRecorder:
    """MockTransport handler that records requests and replies from a callback."""

    def __init__(self, reply: Callable[[httpx.Request], httpx.Response]) -> None:
        self._reply = reply
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._reply(request)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)

    @property
    def last_json(self) -> dict:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def upstream() -> Callable[..., UpstreamRecorder]:
    """Build a recorder replying with a fixed status and body text."""

    def _make(status: int = 200, text: str = "{}") -> UpstreamRecorder:
        return UpstreamRecorder(lambda _req: httpx.Response(status, text=text))

    return _make


@pytest.fixture
def paged_claims() -> UpstreamRecorder:
    """Claim search upstream serving two pages chained by token "abc"."""

    def _reply(request: httpx.Request) -> httpx.Response:
        token = request.url.params.get("pageToken")
        if token == "abc":
            return httpx.Response(
                200,
                json={
                    "claims": [
                        {
                            "text": "Second page claim",
                            "claimReview": [{"textualRating": "Misleading"}],
                        }
                    ]
                },
            )
        return httpx.Response(
            200,
            json={
                "claims": [
                    {
                        "text": "Vaccines alter DNA",
                        "claimant": "Social media",
                        "claimReview": [
                            {
                                "publisher": {"name": "AFP", "site": "afp.com"},
                                "textualRating": "False",
                                "url": "https://example.org/review",
                            }
                        ],
                    },
                    {
                        "text": "Masks reduce spread",
                        "claimReview": [{"textualRating": "Mostly True"}],
                    },
                ],
                "nextPageToken": "abc",
            },
        )

    return UpstreamRecorder(_reply)


@pytest.fixture
def unreachable() -> UpstreamRecorder:
    """Upstream that fails at the transport level."""

    def _reply(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    return UpstreamRecorder(_reply)
