# service/threat_lookup_service.py
import logging
import httpx
from config.settings import settings
from core.relay import passthrough, send
from model.api import RelayResponse
from util.constants import SafeBrowsing
from util.enums import ErrorMessage
from util.errors import AppError

logger = logging.getLogger(__name__)


def build_lookup_payload(url: str) -> dict:
    """threatMatches:find body for a single URL entry."""
    return {
        "client": {
            "clientId": SafeBrowsing.CLIENT_ID,
            "clientVersion": SafeBrowsing.CLIENT_VERSION,
        },
        "threatInfo": {
            "threatTypes": list(SafeBrowsing.THREAT_TYPES),
            "platformTypes": list(SafeBrowsing.PLATFORM_TYPES),
            "threatEntryTypes": list(SafeBrowsing.THREAT_ENTRY_TYPES),
            "threatEntries": [{"url": url}],
        },
    }


class ThreatLookupService:
    """
    Relay for the Safe Browsing threatMatches:find API.
    An empty object back means "no match"; that comes from upstream, never from here.
    """

    def __init__(
        self,
        api_key: str | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._api_key = (
            api_key if api_key is not None else settings.SAFE_BROWSING_API_KEY
        )
        self._url: str = settings.SAFE_BROWSING_API_URL
        self._timeout: float = settings.UPSTREAM_TIMEOUT_SECONDS
        self._transport = transport

    async def lookup(self, url: str | None) -> RelayResponse:
        target = (url or "").strip()
        if not target:
            raise AppError.of(ErrorMessage.MISSING_URL)
        if not self._api_key:
            logger.error("SAFE_BROWSING_API_KEY is not configured")
            raise AppError.of(ErrorMessage.MISSING_SAFE_BROWSING_KEY)

        res = await send(
            "POST",
            self._url,
            timeout=self._timeout,
            transport=self._transport,
            params={"key": self._api_key},
            headers={"Content-Type": "application/json"},
            json_body=build_lookup_payload(target),
        )
        return passthrough(res.status_code, res.text, empty_as_object=True)
