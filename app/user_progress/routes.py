"""
User progress routes: load, create and sync a partner's record.
"""
import logging

from flask import Blueprint, request, jsonify
from pydantic import ValidationError

from .services import UserProgressService, INVALID_BODY, USER_NOT_FOUND, parse_progress_error

logger = logging.getLogger(__name__)


def create_user_progress_routes(progress_service: UserProgressService) -> Blueprint:
    """Create user progress routes."""
    bp = Blueprint('user_progress', __name__)

    @bp.route("/api/user", methods=["GET"])
    def get_user():
        """Return the partner's progress, creating it on first visit."""
        uid, error = progress_service.require_partner_json(request.args.get("user"))
        if error:
            return jsonify(error), 400

        progress = progress_service.get_or_create_progress(uid)
        return jsonify(progress.to_record())

    @bp.route("/api/user", methods=["POST"])
    def save_user():
        """Replace the partner's progress with the client's copy."""
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            return jsonify(INVALID_BODY), 400
        uid, error = progress_service.require_partner_json(data.get("user"))
        if error:
            return jsonify(error), 400

        raw_progress = data.get("progress")
        if not isinstance(raw_progress, dict):
            return jsonify({"error": "progress is required"}), 400

        try:
            progress_service.replace_progress(uid, raw_progress)
        except ValidationError as exc:
            logger.info("Rejected progress sync for %s: %s", uid, exc)
            return jsonify({"error": f"Invalid progress: {parse_progress_error(exc)}"}), 400
        return jsonify({"ok": True})

    @bp.route("/api/user/tutorial", methods=["POST"])
    def tutorial_seen():
        """Remember that the partner dismissed the tutorial."""
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            return jsonify(INVALID_BODY), 400
        uid, error = progress_service.require_partner_json(data.get("user"))
        if error:
            return jsonify(error), 400

        if progress_service.mark_tutorial_seen(uid) is None:
            return jsonify(USER_NOT_FOUND), 404
        return jsonify({"ok": True})

    return bp
