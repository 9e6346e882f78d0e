# controller/relay_controller.py
from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse
from model.api import RelayResponse
from service.claim_search_service import ClaimSearchService
from service.threat_lookup_service import ThreatLookupService
from controller.controller_dependencies import (
    get_claim_search_service,
    get_threat_lookup_service,
)
from util.constants import DEFAULT_LANG, DEFAULT_PAGE_SIZE, InternalURIs

relay_router = APIRouter()

NO_STORE = {"Cache-Control": "no-store"}


def _relay(res: RelayResponse) -> JSONResponse:
    return JSONResponse(res.body, status_code=res.status_code, headers=NO_STORE)


@relay_router.get(InternalURIs.FACTCHECK)
async def factcheck(
    query: str | None = Query(None),
    q: str | None = Query(None),
    lang: str | None = Query(None),
    pageSize: str | None = Query(None),
    pageToken: str | None = Query(None),
    service: ClaimSearchService = Depends(get_claim_search_service),
) -> JSONResponse:
    res = await service.search(
        query or q,
        lang or DEFAULT_LANG,
        pageSize or DEFAULT_PAGE_SIZE,
        pageToken or None,
    )
    return _relay(res)


@relay_router.get(InternalURIs.HTTPCHECK)
async def httpcheck(
    url: str | None = Query(None),
    service: ThreatLookupService = Depends(get_threat_lookup_service),
) -> JSONResponse:
    res = await service.lookup(url)
    return _relay(res)
