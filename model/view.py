# model/view.py
from datetime import datetime
from enum import Enum
from pydantic import BaseModel, Field
from model.claim import Claim
from model.threat import ThreatMatch
from util.constants import DEFAULT_LANG


class SearchStatus(str, Enum):
    idle = "idle"
    searching = "searching"
    searching_more = "searching_more"
    results = "results"
    error = "error"


class UrlCheckStatus(str, Enum):
    idle = "idle"
    checking = "checking"
    safe = "safe"
    unsafe = "unsafe"
    error = "error"


class SearchViewState(BaseModel):
    id: str
    query: str = ""
    lang: str = DEFAULT_LANG
    status: SearchStatus = SearchStatus.idle
    items: list[Claim] = Field(default_factory=list)
    nextPageToken: str | None = None
    ratingFilter: str = ""
    error: str | None = None


class UrlCheckViewState(BaseModel):
    url: str = ""
    target: str = ""
    status: UrlCheckStatus = UrlCheckStatus.idle
    matches: list[ThreatMatch] | None = None
    checkedAt: datetime | None = None
    error: str | None = None

    @property
    def is_unsafe(self) -> bool:
        return len(self.matches or []) > 0
