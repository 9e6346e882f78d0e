# service/search_view_service.py
import logging
from pydantic import ValidationError
from model.api import RelayResponse
from model.claim import Claim, ClaimSearchResponse
from model.view import SearchStatus, SearchViewState
from repository.view_state_repository import ViewStateRepository
from service.claim_search_service import ClaimSearchService
from util.constants import DEFAULT_LANG, DEFAULT_PAGE_SIZE
from util.errors import AppError

logger = logging.getLogger(__name__)


def filter_by_rating(items: list[Claim], rating: str) -> list[Claim]:
    """Claims with any review whose rating contains `rating`. Empty rating keeps all."""
    if not rating:
        return list(items)
    return [c for c in items if c.has_rating(rating)]


def parse_claims(res: RelayResponse) -> ClaimSearchResponse:
    if not isinstance(res.body, dict):
        return ClaimSearchResponse()
    return ClaimSearchResponse.model_validate(res.body)


class SearchView:
    """
    Search page state machine:
      idle -> searching -> results | error
      results -> searching_more -> results | error
    A fresh search replaces the held claims, load-more appends to them.
    """

    def __init__(self, state: SearchViewState, claims: ClaimSearchService) -> None:
        self.state = state
        self._claims = claims

    async def submit(self, query: str, lang: str = DEFAULT_LANG) -> None:
        q = (query or "").strip()
        if not q:
            return
        self.state.query = q
        self.state.lang = lang or DEFAULT_LANG
        self.state.nextPageToken = None
        await self._fetch(append=False)

    async def load_more(self) -> None:
        if not self.state.nextPageToken or not self.state.query:
            return
        await self._fetch(append=True, page_token=self.state.nextPageToken)

    def set_filter(self, rating: str | None) -> None:
        self.state.ratingFilter = (rating or "").strip()

    def filtered(self) -> list[Claim]:
        return filter_by_rating(self.state.items, self.state.ratingFilter)

    @property
    def can_load_more(self) -> bool:
        s = self.state
        return s.status == SearchStatus.results and bool(s.items) and bool(s.nextPageToken)

    async def _fetch(self, *, append: bool, page_token: str | None = None) -> None:
        s = self.state
        s.status = SearchStatus.searching_more if append else SearchStatus.searching
        s.error = None
        try:
            res = await self._claims.search(
                s.query, s.lang, DEFAULT_PAGE_SIZE, page_token
            )
        except AppError as e:
            self._fail(e.message, append)
            return
        if not res.ok:
            self._fail(res.error_message(), append)
            return
        try:
            data = parse_claims(res)
        except ValidationError as e:
            logger.warning("unexpected claim search payload: %s", e.error_count())
            self._fail("Unexpected response from claim search", append)
            return

        s.nextPageToken = data.nextPageToken
        s.items = [*s.items, *data.claims] if append else data.claims
        s.status = SearchStatus.results

    def _fail(self, message: str, append: bool) -> None:
        self.state.error = message
        self.state.status = SearchStatus.error
        if not append:
            self.state.items = []


class SearchViewService:
    """Loads, drives and saves search views held in the view state repository."""

    def __init__(self, views: ViewStateRepository, claims: ClaimSearchService) -> None:
        self._views = views
        self._claims = claims

    def open(self, view_id: str | None) -> SearchView:
        state = self._views.get(view_id) or self._views.create()
        return SearchView(state, self._claims)

    def find(self, view_id: str | None) -> SearchView | None:
        state = self._views.get(view_id)
        return SearchView(state, self._claims) if state else None

    def save(self, view: SearchView) -> None:
        self._views.put(view.state)

    async def search(self, view_id: str | None, query: str, lang: str) -> SearchView:
        view = self.open(view_id)
        await view.submit(query, lang)
        self.save(view)
        return view

    async def load_more(self, view_id: str | None) -> SearchView | None:
        view = self.find(view_id)
        if view is None:
            return None
        await view.load_more()
        self.save(view)
        return view
