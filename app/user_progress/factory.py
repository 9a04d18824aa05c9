"""
Factory for creating the user progress module.
"""
import random
from typing import List, Optional

from name_service.catalog import NameCatalog
from name_service.store import ProgressRepository
from .services import UserProgressService
from .routes import create_user_progress_routes


def create_user_progress_module(
    repository: ProgressRepository,
    catalog: NameCatalog,
    partner_ids: List[str],
    rng: Optional[random.Random] = None,
) -> dict:
    """Create user progress module with service and routes.

    Args:
        repository: Progress record repository
        catalog: Name catalog used to seed new queues
        partner_ids: The partner ids allowed to use the app
        rng: Optional random source for queue shuffling (tests pass a seeded one)

    Returns:
        Dictionary containing the service and blueprint
    """
    progress_service = UserProgressService(repository, catalog, partner_ids, rng=rng)
    blueprint = create_user_progress_routes(progress_service)

    return {
        "service": progress_service,
        "blueprint": blueprint
    }
