"""Tests for upstream pass-through helpers."""

from __future__ import annotations

import httpx
import pytest

from core.relay import passthrough, redact_key, send
from util.errors import AppError


class TestPassthrough:
    """Tests for passthrough."""

    def test_json_body_is_relayed_verbatim(self) -> None:
        res = passthrough(200, '{"claims": [], "nextPageToken": "abc"}')
        assert res.status_code == 200
        assert res.body == {"claims": [], "nextPageToken": "abc"}

    def test_upstream_error_status_is_preserved(self) -> None:
        res = passthrough(403, '{"error": {"code": 403, "message": "denied"}}')
        assert res.status_code == 403
        assert res.body == {"error": {"code": 403, "message": "denied"}}
        assert res.error_message() == "denied"

    def test_non_json_text_is_wrapped(self) -> None:
        res = passthrough(502, "<html>Bad Gateway</html>")
        assert res.status_code == 502
        assert res.body == {"error": "<html>Bad Gateway</html>"}
        assert res.error_message() == "<html>Bad Gateway</html>"

    def test_empty_body_is_not_json_by_default(self) -> None:
        res = passthrough(200, "")
        assert res.body == {"error": ""}

    def test_empty_body_as_object(self) -> None:
        res = passthrough(200, "", empty_as_object=True)
        assert res.body == {}
        assert res.ok

    @pytest.mark.parametrize("text", ["NaN", "Infinity", "-Infinity", "{\"x\": NaN}"])
    def test_non_standard_constants_are_not_json(self, text: str) -> None:
        res = passthrough(200, text)
        assert res.status_code == 200
        assert res.body == {"error": text}

    def test_error_message_falls_back_to_status(self) -> None:
        assert passthrough(500, "{}").error_message() == "HTTP 500"


class TestRedactKey:
    """Tests for redact_key."""

    def test_masks_key_param(self) -> None:
        out = redact_key("https://api.example.com/find?key=secret&x=1")
        assert "secret" not in out
        assert "x=1" in out

    def test_leaves_url_without_key(self) -> None:
        assert redact_key("https://api.example.com/find?x=1") == (
            "https://api.example.com/find?x=1"
        )


class TestSend:
    """Tests for send."""

    async def test_network_failure_raises_bad_gateway(self) -> None:
        def _boom(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(AppError) as exc:
            await send(
                "GET",
                "https://api.example.com/x",
                timeout=1.0,
                transport=httpx.MockTransport(_boom),
                params={"key": "k"},
            )
        assert exc.value.http_status == 502
        assert exc.value.message == "connection refused"
