from flask import Blueprint, request, jsonify
from flask_jwt_extended import jwt_required
from steadysteps.services.user_profile_service import UserProfileService
from steadysteps.stores import get_store
from steadysteps.utils.jwt_utils import get_current_user_id

user_profile_bp = Blueprint("user_profile", __name__, url_prefix="/api/v2/profile")


@user_profile_bp.route("", methods=["GET"])
@jwt_required()
def get_user_profile():
    user_id = get_current_user_id()
    if not user_id:
        return jsonify({"error": "Unauthorized"}), 401

    return UserProfileService.get_user_profile(get_store(), user_id)


@user_profile_bp.route("", methods=["POST"])
@jwt_required()
def create_user_profile():
    user_id = get_current_user_id()
    if not user_id:
        return jsonify({"error": "Unauthorized"}), 401

    data = request.get_json(silent=True) or {}
    return UserProfileService.create_user_profile(get_store(), user_id, data)


@user_profile_bp.route("", methods=["PUT"])
@jwt_required()
def update_user_profile():
    user_id = get_current_user_id()
    if not user_id:
        return jsonify({"error": "Unauthorized"}), 401

    data = request.get_json(silent=True) or {}
    return UserProfileService.update_user_profile(get_store(), user_id, data)


@user_profile_bp.route("/activity-goal", methods=["POST"])
@jwt_required()
def adjust_activity_goal():
    user_id = get_current_user_id()
    if not user_id:
        return jsonify({"error": "Unauthorized"}), 401

    data = request.get_json(silent=True) or {}
    return UserProfileService.adjust_activity_goal(get_store(), user_id, data)
