# repository/view_state_repository.py
import time
from collections import OrderedDict
from typing import Final, Optional
from uuid import uuid4
from config.settings import settings
from model.view import SearchViewState

DEFAULT_TTL_SECONDS: Final[int] = settings.VIEW_STATE_TTL_SECONDS
DEFAULT_MAX_ENTRIES: Final[int] = settings.VIEW_STATE_MAX_ENTRIES


class ViewStateRepository:
    """
    In-process holder for search view state, one entry per open view.
    Entries expire after `ttl_seconds` of inactivity; oldest go first when full.
    """

    def __init__(
        self,
        ttl_seconds: int = DEFAULT_TTL_SECONDS,
        max_entries: int = DEFAULT_MAX_ENTRIES,
    ) -> None:
        self._ttl = int(ttl_seconds)
        self._max = max(1, int(max_entries))
        self._entries: "OrderedDict[str, tuple[float, SearchViewState]]" = OrderedDict()

    # ---------------- Core CRUD ----------------

    def create(self) -> SearchViewState:
        state = SearchViewState(id=str(uuid4()))
        self.put(state)
        return state

    def put(self, state: SearchViewState) -> None:
        self._evict_expired()
        self._entries[state.id] = (time.monotonic(), state.model_copy(deep=True))
        self._entries.move_to_end(state.id)
        while len(self._entries) > self._max:
            self._entries.popitem(last=False)

    def get(self, view_id: str | None) -> Optional[SearchViewState]:
        if not view_id:
            return None
        self._evict_expired()
        entry = self._entries.get(view_id)
        if entry is None:
            return None
        _, state = entry
        return state.model_copy(deep=True)

    def __len__(self) -> int:
        return len(self._entries)

    def _evict_expired(self) -> None:
        cutoff = time.monotonic() - self._ttl
        stale = [k for k, (ts, _) in self._entries.items() if ts < cutoff]
        for k in stale:
            del self._entries[k]


view_states = ViewStateRepository()
