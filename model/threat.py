# model/threat.py
from pydantic import BaseModel


class ThreatEntry(BaseModel):
    url: str | None = None


class ThreatMatch(BaseModel):
    threatType: str | None = None
    platformType: str | None = None
    threat: ThreatEntry | None = None
    cacheDuration: str | None = None

    @property
    def threat_url(self) -> str | None:
        return self.threat.url if self.threat else None


class ThreatLookupResponse(BaseModel):
    matches: list[ThreatMatch] | None = None
    error: object | None = None
