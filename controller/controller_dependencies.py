# controller/controller_dependencies.py
from fastapi import Depends
from repository.view_state_repository import ViewStateRepository, view_states
from service.claim_search_service import ClaimSearchService
from service.search_view_service import SearchViewService
from service.threat_lookup_service import ThreatLookupService
from service.url_check_service import UrlCheckView


def get_claim_search_service() -> ClaimSearchService:
    return ClaimSearchService()


def get_threat_lookup_service() -> ThreatLookupService:
    return ThreatLookupService()


def get_view_state_repository() -> ViewStateRepository:
    return view_states


def get_search_view_service(
    views: ViewStateRepository = Depends(get_view_state_repository),
    claims: ClaimSearchService = Depends(get_claim_search_service),
) -> SearchViewService:
    return SearchViewService(views, claims)


def get_url_check_view(
    threats: ThreatLookupService = Depends(get_threat_lookup_service),
) -> UrlCheckView:
    return UrlCheckView(threats)
