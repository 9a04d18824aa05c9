"""
Factory for creating the personalization module.
"""
from typing import Optional

from name_service.catalog import NameCatalog
from name_service.personalization import NameRanker, PersonalizationGate, build_default_ranker
from app.user_progress.services import UserProgressService
from .services import PersonalizationService
from .routes import create_personalization_routes


def create_personalization_module(
    progress_service: UserProgressService,
    catalog: NameCatalog,
    gate: PersonalizationGate,
    ranker: Optional[NameRanker] = None,
) -> dict:
    """Create personalization module with service and routes.

    Args:
        progress_service: Shared user progress service
        catalog: Name catalog the ranker scores against
        gate: Minimum-ratings gate
        ranker: Ranker to use; defaults to the heuristic ranker

    Returns:
        Dictionary containing the service and blueprint
    """
    ranker = ranker or build_default_ranker()
    personalization_service = PersonalizationService(progress_service, catalog, ranker, gate)
    blueprint = create_personalization_routes(personalization_service)

    return {
        "service": personalization_service,
        "blueprint": blueprint
    }
