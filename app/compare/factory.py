"""
Factory for creating the compare module.
"""
from app.user_progress.services import UserProgressService
from .services import CompareService
from .routes import create_compare_routes


def create_compare_module(progress_service: UserProgressService) -> dict:
    """Create compare module with service and routes.

    Args:
        progress_service: Shared user progress service

    Returns:
        Dictionary containing the service and blueprint
    """
    compare_service = CompareService(progress_service)
    blueprint = create_compare_routes(compare_service)

    return {
        "service": compare_service,
        "blueprint": blueprint
    }
