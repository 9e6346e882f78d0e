# service/claim_search_service.py
import logging
import httpx
from config.settings import settings
from core.relay import passthrough, send
from model.api import RelayResponse
from util.constants import DEFAULT_LANG, DEFAULT_PAGE_SIZE
from util.enums import ErrorMessage
from util.errors import AppError

logger = logging.getLogger(__name__)


class ClaimSearchService:
    """
    Relay for the Fact Check Tools claims:search API.
    The upstream payload is never validated or reshaped.
    """

    def __init__(
        self,
        api_key: str | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._api_key = api_key if api_key is not None else settings.FACTCHECK_API_KEY
        self._url: str = settings.FACTCHECK_API_URL
        self._referer: str = settings.FACTCHECK_REFERER
        self._timeout: float = settings.UPSTREAM_TIMEOUT_SECONDS
        self._transport = transport

    async def search(
        self,
        query: str | None,
        lang: str = DEFAULT_LANG,
        page_size: str = DEFAULT_PAGE_SIZE,
        page_token: str | None = None,
    ) -> RelayResponse:
        if not query:
            raise AppError.of(ErrorMessage.MISSING_QUERY)
        if not self._api_key:
            logger.error("FACTCHECK_API_KEY is not configured")
            raise AppError.of(ErrorMessage.MISSING_FACTCHECK_KEY)

        params = {
            "query": query,
            "languageCode": lang or DEFAULT_LANG,
            "pageSize": page_size or DEFAULT_PAGE_SIZE,
        }
        if page_token:
            params["pageToken"] = page_token
        params["key"] = self._api_key

        res = await send(
            "GET",
            self._url,
            timeout=self._timeout,
            transport=self._transport,
            params=params,
            headers={"referer": self._referer},
        )
        return passthrough(res.status_code, res.text)
