# steadysteps/controller/checkin_controller.py
from flask import Blueprint, jsonify, request
from flask_jwt_extended import jwt_required
from steadysteps.services.checkin_service import CheckinService, PAGE_SIZE
from steadysteps.stores import get_store
from steadysteps.utils.jwt_utils import get_current_user_id

checkin_bp = Blueprint("checkin_bp", __name__, url_prefix="/api/v2/checkins")


@checkin_bp.route("", methods=["POST"])
@jwt_required()
def submit_checkin():
    user_id = get_current_user_id()
    if not user_id:
        return jsonify({"error": "Unauthorized"}), 401

    data = request.get_json(silent=True)
    return CheckinService.submit_checkin(get_store(), user_id, data)


@checkin_bp.route("", methods=["GET"])
@jwt_required()
def get_checkins():
    user_id = get_current_user_id()
    if not user_id:
        return jsonify({"error": "Unauthorized"}), 401

    start_date = request.args.get("start_date")
    end_date = request.args.get("end_date")
    if start_date or end_date:
        return CheckinService.get_checkins_for_range(get_store(), user_id, start_date, end_date)

    page = request.args.get("page", 1, type=int)
    page_size = request.args.get("page_size", PAGE_SIZE, type=int)
    return CheckinService.get_checkins(get_store(), user_id, page, page_size)


@checkin_bp.route("/today", methods=["GET"])
@jwt_required()
def get_today_checkin():
    user_id = get_current_user_id()
    if not user_id:
        return jsonify({"error": "Unauthorized"}), 401

    return CheckinService.get_today_checkin(get_store(), user_id)


@checkin_bp.route("/<date_str>/wellness", methods=["PUT"])
@jwt_required()
def save_wellness(date_str):
    user_id = get_current_user_id()
    if not user_id:
        return jsonify({"error": "Unauthorized"}), 401

    data = request.get_json(silent=True) or {}
    return CheckinService.save_wellness(get_store(), user_id, date_str, data)


@checkin_bp.route("/questions", methods=["GET"])
@jwt_required()
def get_nutrition_questions():
    user_id = get_current_user_id()
    if not user_id:
        return jsonify({"error": "Unauthorized"}), 401

    return CheckinService.get_nutrition_questions(get_store(), user_id)
