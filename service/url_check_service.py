# service/url_check_service.py
from datetime import datetime, timezone
from pydantic import ValidationError
from core.url import normalize_url
from model.threat import ThreatLookupResponse
from model.view import UrlCheckStatus, UrlCheckViewState
from service.threat_lookup_service import ThreatLookupService
from util.errors import AppError

EXAMPLE_URLS = (
    ("Phishing (test)", "https://testsafebrowsing.appspot.com/s/phishing.html"),
    ("Malware (test)", "https://testsafebrowsing.appspot.com/s/malware.html"),
    ("Unwanted (test)", "https://testsafebrowsing.appspot.com/s/unwanted.html"),
)


class UrlCheckView:
    """idle -> checking -> safe | unsafe | error. Unsafe means at least one match."""

    def __init__(self, threats: ThreatLookupService) -> None:
        self._threats = threats
        self.state = UrlCheckViewState()

    async def check(self, raw_url: str | None) -> UrlCheckViewState:
        s = self.state
        s.url = raw_url or ""
        s.target = normalize_url(s.url)
        if not s.target:
            return s

        s.status = UrlCheckStatus.checking
        s.error = None
        s.matches = None
        try:
            res = await self._threats.lookup(s.target)
        except AppError as e:
            return self._fail(e.message)
        if not res.ok:
            return self._fail(res.error_message())
        body = res.body if isinstance(res.body, dict) else {}
        try:
            data = ThreatLookupResponse.model_validate(body)
        except ValidationError:
            return self._fail("Unexpected response from threat lookup")

        s.matches = data.matches or []
        s.checkedAt = datetime.now(timezone.utc)
        s.status = UrlCheckStatus.unsafe if s.is_unsafe else UrlCheckStatus.safe
        return s

    def _fail(self, message: str) -> UrlCheckViewState:
        self.state.status = UrlCheckStatus.error
        self.state.error = message
        return self.state
