"""
Custom name routes.
"""
from flask import Blueprint, request, jsonify

from app.user_progress.services import INVALID_BODY, USER_NOT_FOUND
from .services import CustomNameService


def create_custom_name_routes(custom_name_service: CustomNameService) -> Blueprint:
    """Create custom name routes."""
    bp = Blueprint('custom_names', __name__)
    progress_service = custom_name_service.progress_service

    @bp.route("/api/names", methods=["POST"])
    def add_name():
        """Add a custom name to the partner's stack."""
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            return jsonify(INVALID_BODY), 400
        uid, error = progress_service.require_partner_json(data.get("user"))
        if error:
            return jsonify(error), 400

        name = data.get("name")
        if not isinstance(name, str) or not name.strip():
            return jsonify({"error": "Name is required"}), 400

        nicknames = data.get("nicknames")
        progress = custom_name_service.add_name(
            uid,
            name,
            origin=data.get("origin"),
            meaning=data.get("meaning"),
            phonetic=data.get("phonetic"),
            nicknames=nicknames if isinstance(nicknames, list) else None,
        )
        if progress is None:
            return jsonify(USER_NOT_FOUND), 404
        return jsonify({"ok": True})

    return bp
