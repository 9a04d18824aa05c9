"""
Factory for creating the custom names module.
"""
from app.user_progress.services import UserProgressService
from .services import CustomNameService
from .routes import create_custom_name_routes


def create_custom_names_module(progress_service: UserProgressService) -> dict:
    """Create custom names module with service and routes.

    Args:
        progress_service: Shared user progress service

    Returns:
        Dictionary containing the service and blueprint
    """
    custom_name_service = CustomNameService(progress_service)
    blueprint = create_custom_name_routes(custom_name_service)

    return {
        "service": custom_name_service,
        "blueprint": blueprint
    }
