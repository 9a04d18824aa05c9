"""
Compare routes.
"""
from flask import Blueprint, jsonify

from .services import CompareService


def create_compare_routes(compare_service: CompareService) -> Blueprint:
    """Create compare routes."""
    bp = Blueprint('compare', __name__)

    @bp.route("/api/compare", methods=["GET"])
    def compare():
        """Names both partners love or might consider."""
        return jsonify(compare_service.compare())

    return bp
