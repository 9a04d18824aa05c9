"""
Personalization routes.
"""
from flask import Blueprint, request, jsonify

from app.user_progress.services import INVALID_BODY, USER_NOT_FOUND
from .services import PersonalizationService, PersonalizeOutcome


def create_personalization_routes(personalization_service: PersonalizationService) -> Blueprint:
    """Create personalization routes."""
    bp = Blueprint('personalization', __name__)
    progress_service = personalization_service.progress_service
    min_ratings = personalization_service.gate.min_ratings

    @bp.route("/api/personalize", methods=["POST"])
    def personalize():
        """Reorder the partner's unrated names by inferred taste."""
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            return jsonify(INVALID_BODY), 400
        uid, error = progress_service.require_partner_json(data.get("user"))
        if error:
            return jsonify(error), 400

        outcome = personalization_service.personalize(uid)
        if outcome is PersonalizeOutcome.USER_NOT_FOUND:
            return jsonify(USER_NOT_FOUND), 404
        if outcome is PersonalizeOutcome.NOT_ENOUGH_RATINGS:
            return jsonify({
                "ok": False,
                "message": f"Need at least {min_ratings} ratings to personalize"
            })
        return jsonify({"ok": True, "personalized": True})

    @bp.route("/api/personalize/profile", methods=["GET"])
    def profile():
        """Show the taste profile inferred from the partner's ratings."""
        uid, error = progress_service.require_partner_json(request.args.get("user"))
        if error:
            return jsonify(error), 400

        preference_profile = personalization_service.profile(uid)
        if preference_profile is None:
            return jsonify(USER_NOT_FOUND), 404
        return jsonify(preference_profile.to_dict())

    return bp
