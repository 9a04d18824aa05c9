"""
Factory for creating the ratings module.
"""
from name_service.personalization import PersonalizationGate
from app.user_progress.services import UserProgressService
from .services import RatingService
from .routes import create_rating_routes


def create_ratings_module(
    progress_service: UserProgressService,
    gate: PersonalizationGate,
) -> dict:
    """Create ratings module with service and routes.

    Args:
        progress_service: Shared user progress service
        gate: Gate used to report when personalization becomes available

    Returns:
        Dictionary containing the service and blueprint
    """
    rating_service = RatingService(progress_service, gate)
    blueprint = create_rating_routes(rating_service)

    return {
        "service": rating_service,
        "blueprint": blueprint
    }
