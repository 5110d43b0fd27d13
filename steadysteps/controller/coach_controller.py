# steadysteps/controller/coach_controller.py
from flask import Blueprint, jsonify, request
from flask_jwt_extended import jwt_required
from steadysteps.services.coach_service import CoachService
from steadysteps.stores import get_store
from steadysteps.utils.jwt_utils import get_current_user_id

coach_bp = Blueprint("coach_bp", __name__, url_prefix="/api/v2/coach")


@coach_bp.route("/messages", methods=["POST"])
@jwt_required()
def send_message():
    user_id = get_current_user_id()
    if not user_id:
        return jsonify({"error": "Authentication required"}), 401

    data = request.get_json(silent=True) or {}
    return CoachService.send_message(get_store(), user_id, data)
