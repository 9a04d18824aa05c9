"""
Middle name routes.
"""
from flask import Blueprint, request, jsonify

from name_service.progress import Rating
from app.user_progress.services import INVALID_BODY, USER_NOT_FOUND
from .services import MiddleNameService, MiddlePhaseError


def create_middle_name_routes(middle_name_service: MiddleNameService) -> Blueprint:
    """Create middle name routes."""
    bp = Blueprint('middle_names', __name__)
    progress_service = middle_name_service.progress_service

    @bp.route("/api/middle/start", methods=["POST"])
    def start():
        """Start rating middle names for the chosen first names."""
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            return jsonify(INVALID_BODY), 400
        uid, error = progress_service.require_partner_json(data.get("user"))
        if error:
            return jsonify(error), 400

        first_names = data.get("firstNames")
        if not isinstance(first_names, list):
            return jsonify({"error": "firstNames must be a list"}), 400

        try:
            progress = middle_name_service.start(uid, first_names)
        except MiddlePhaseError as exc:
            return jsonify({"error": str(exc)}), 400
        if progress is None:
            return jsonify(USER_NOT_FOUND), 404
        return jsonify({
            "ok": True,
            "activeFirstName": progress.active_first_name,
            "middleNameOrder": progress.middle_name_order,
        })

    @bp.route("/api/middle/rate", methods=["POST"])
    def rate():
        """Rate a middle name for the active first name."""
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            return jsonify(INVALID_BODY), 400
        uid, error = progress_service.require_partner_json(data.get("user"))
        if error:
            return jsonify(error), 400

        middle_name = data.get("middleName")
        rating = data.get("rating")
        if not isinstance(middle_name, str) or not middle_name or not Rating.is_valid(rating):
            return jsonify({"error": "Invalid rating"}), 400

        try:
            progress = middle_name_service.rate(uid, middle_name, Rating(rating))
        except MiddlePhaseError as exc:
            return jsonify({"error": str(exc)}), 400
        if progress is None:
            return jsonify(USER_NOT_FOUND), 404
        return jsonify({"ok": True, "middleNameIndex": progress.middle_name_index})

    @bp.route("/api/middle/switch", methods=["POST"])
    def switch():
        """Switch the active first name."""
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            return jsonify(INVALID_BODY), 400
        uid, error = progress_service.require_partner_json(data.get("user"))
        if error:
            return jsonify(error), 400

        first_name = data.get("firstName")
        if not isinstance(first_name, str) or not first_name:
            return jsonify({"error": "firstName is required"}), 400

        try:
            progress = middle_name_service.switch(uid, first_name)
        except MiddlePhaseError as exc:
            return jsonify({"error": str(exc)}), 400
        if progress is None:
            return jsonify(USER_NOT_FOUND), 404
        return jsonify({"ok": True, "activeFirstName": progress.active_first_name})

    @bp.route("/api/middle/pairings", methods=["GET"])
    def pairings():
        """Liked middle names per chosen first name."""
        uid, error = progress_service.require_partner_json(request.args.get("user"))
        if error:
            return jsonify(error), 400

        result = middle_name_service.pairings(uid)
        if result is None:
            return jsonify(USER_NOT_FOUND), 404
        return jsonify(result)

    return bp
