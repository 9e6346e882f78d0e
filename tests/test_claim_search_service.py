"""Tests for the claim search relay service."""

from __future__ import annotations

import pytest

from service.claim_search_service import ClaimSearchService
from util.errors import AppError


class TestClaimSearchService:
    """Tests for ClaimSearchService."""

    @pytest.mark.parametrize("query", ["", None])
    async def test_missing_query_makes_no_upstream_call(self, upstream, query) -> None:
        """Should reject an empty query before contacting upstream."""
        rec = upstream()
        service = ClaimSearchService("test-key", transport=rec.transport)
        with pytest.raises(AppError) as exc:
            await service.search(query)
        assert exc.value.http_status == 400
        assert exc.value.message == "Missing query"
        assert rec.requests == []

    async def test_missing_key_makes_no_upstream_call(self, upstream) -> None:
        """Should fail with a server error when the credential is unset."""
        rec = upstream()
        service = ClaimSearchService("", transport=rec.transport)
        with pytest.raises(AppError) as exc:
            await service.search("covid")
        assert exc.value.http_status == 500
        assert exc.value.message == "Missing FACTCHECK_API_KEY"
        assert rec.requests == []

    async def test_builds_upstream_request(self, upstream) -> None:
        """Should forward query, language, page size and key with a referer."""
        rec = upstream(text='{"claims": []}')
        service = ClaimSearchService("test-key", transport=rec.transport)
        await service.search("covid", "th", "10")

        request = rec.requests[0]
        assert request.method == "GET"
        assert request.url.path == "/v1alpha1/claims:search"
        assert request.url.params["query"] == "covid"
        assert request.url.params["languageCode"] == "th"
        assert request.url.params["pageSize"] == "10"
        assert request.url.params["key"] == "test-key"
        assert "pageToken" not in request.url.params
        assert request.headers["referer"] == "http://localhost:3000/"

    async def test_forwards_page_token(self, upstream) -> None:
        rec = upstream(text='{"claims": []}')
        service = ClaimSearchService("test-key", transport=rec.transport)
        await service.search("covid", "en", "10", "abc")
        assert rec.requests[0].url.params["pageToken"] == "abc"

    async def test_relays_json_and_status(self, upstream) -> None:
        """Body and status should equal the upstream's."""
        rec = upstream(200, '{"claims": [{"text": "x"}], "nextPageToken": "abc"}')
        service = ClaimSearchService("test-key", transport=rec.transport)
        res = await service.search("covid")
        assert res.status_code == 200
        assert res.body == {"claims": [{"text": "x"}], "nextPageToken": "abc"}

    async def test_wraps_non_json_preserving_status(self, upstream) -> None:
        rec = upstream(503, "Service Unavailable")
        service = ClaimSearchService("test-key", transport=rec.transport)
        res = await service.search("covid")
        assert res.status_code == 503
        assert res.body == {"error": "Service Unavailable"}
