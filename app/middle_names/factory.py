"""
Factory for creating the middle names module.
"""
from name_service.catalog import NameCatalog
from app.user_progress.services import UserProgressService
from .services import MiddleNameService
from .routes import create_middle_name_routes


def create_middle_names_module(progress_service: UserProgressService, catalog: NameCatalog) -> dict:
    """Create middle names module with service and routes.

    Args:
        progress_service: Shared user progress service
        catalog: Catalog providing the middle name list

    Returns:
        Dictionary containing the service and blueprint
    """
    middle_name_service = MiddleNameService(progress_service, catalog)
    blueprint = create_middle_name_routes(middle_name_service)

    return {
        "service": middle_name_service,
        "blueprint": blueprint
    }
