"""
Rating routes: rate a name, undo a rating, view the shortlist.
"""
from flask import Blueprint, request, jsonify

from name_service.progress import Rating
from app.user_progress.services import INVALID_BODY, USER_NOT_FOUND
from .services import RatingService


def create_rating_routes(rating_service: RatingService) -> Blueprint:
    """Create rating routes."""
    bp = Blueprint('ratings', __name__)
    progress_service = rating_service.progress_service

    @bp.route("/api/ratings", methods=["POST"])
    def rate_name():
        """Rate the current name."""
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            return jsonify(INVALID_BODY), 400
        uid, error = progress_service.require_partner_json(data.get("user"))
        if error:
            return jsonify(error), 400

        name = data.get("name")
        rating = data.get("rating")
        if not isinstance(name, str) or not name or not Rating.is_valid(rating):
            return jsonify({"error": "Invalid rating"}), 400

        result = rating_service.set_rating(uid, name, Rating(rating))
        if result is None:
            return jsonify(USER_NOT_FOUND), 404
        return jsonify(result.to_dict())

    @bp.route("/api/ratings", methods=["DELETE"])
    def undo_rating():
        """Undo the last rating."""
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            return jsonify(INVALID_BODY), 400
        uid, error = progress_service.require_partner_json(data.get("user"))
        if error:
            return jsonify(error), 400

        name = data.get("name")
        if not isinstance(name, str) or not name:
            return jsonify({"error": "Name is required"}), 400

        result = rating_service.undo_rating(uid, name)
        if result is None:
            return jsonify(USER_NOT_FOUND), 404
        return jsonify({"ok": True, "currentIndex": result.current_index})

    @bp.route("/api/shortlist", methods=["GET"])
    def shortlist():
        """Loved and maybe names for the partner."""
        uid, error = progress_service.require_partner_json(request.args.get("user"))
        if error:
            return jsonify(error), 400

        lists = rating_service.shortlist(uid)
        if lists is None:
            return jsonify(USER_NOT_FOUND), 404
        return jsonify(lists)

    return bp
