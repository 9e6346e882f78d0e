# controller/view_controller.py
from pathlib import Path
from urllib.parse import urlencode
from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates
from controller.controller_dependencies import (
    get_search_view_service,
    get_url_check_view,
)
from service.search_view_service import SearchViewService
from service.url_check_service import EXAMPLE_URLS, UrlCheckView
from util.constants import DEFAULT_LANG, RATING_FILTERS, InternalURIs
from util.enums import Language

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

RATING_BADGES = {
    "false": "badge-red",
    "misleading": "badge-amber",
    "true": "badge-green",
    "correct": "badge-green",
}


def rating_badge(label: str | None) -> str:
    return RATING_BADGES.get((label or "").lower(), "badge-grey")


templates.env.filters["rating_badge"] = rating_badge

view_router = APIRouter()


def _home(view_id: str | None, rating: str | None = None) -> RedirectResponse:
    params = {k: v for k, v in (("view", view_id), ("rating", rating)) if v}
    target = InternalURIs.HOME + (f"?{urlencode(params)}" if params else "")
    return RedirectResponse(target, status_code=status.HTTP_303_SEE_OTHER)


@view_router.get(InternalURIs.HOME, response_class=HTMLResponse)
async def search_page(
    request: Request,
    view: str | None = Query(None),
    rating: str | None = Query(None),
    service: SearchViewService = Depends(get_search_view_service),
):
    search_view = service.find(view)
    if search_view is not None:
        # Filtering only re-reads the held claims
        search_view.set_filter(rating)
        service.save(search_view)
    return templates.TemplateResponse(
        request,
        "search.html",
        {
            "view": search_view,
            "state": search_view.state if search_view else None,
            "items": search_view.filtered() if search_view else [],
            "languages": [lang.value for lang in Language],
            "rating_filters": RATING_FILTERS,
            "default_lang": DEFAULT_LANG,
        },
    )


@view_router.get(InternalURIs.SEARCH)
async def search(
    query: str = Query(""),
    lang: str = Query(DEFAULT_LANG),
    view: str | None = Query(None),
    service: SearchViewService = Depends(get_search_view_service),
) -> RedirectResponse:
    if not query.strip():
        existing = service.find(view)
        if existing is None:
            return _home(None)
        return _home(existing.state.id, existing.state.ratingFilter)
    search_view = await service.search(view, query, lang)
    return _home(search_view.state.id, search_view.state.ratingFilter)


@view_router.get(InternalURIs.LOAD_MORE)
async def load_more(
    view: str | None = Query(None),
    service: SearchViewService = Depends(get_search_view_service),
) -> RedirectResponse:
    search_view = await service.load_more(view)
    if search_view is None:
        return _home(None)
    return _home(search_view.state.id, search_view.state.ratingFilter)


@view_router.get(InternalURIs.URL_CHECK, response_class=HTMLResponse)
async def url_check_page(
    request: Request,
    url: str | None = Query(None),
    checker: UrlCheckView = Depends(get_url_check_view),
):
    state = await checker.check(url)
    return templates.TemplateResponse(
        request,
        "httpcheck.html",
        {"state": state, "examples": EXAMPLE_URLS},
    )
