# steadysteps/controller/progress_controller.py
from flask import Blueprint, jsonify, request
from flask_jwt_extended import jwt_required
from steadysteps.errors import StoreError
from steadysteps.mappers.progress_mapper import checkin_summary
from steadysteps.services.nudge_service import NudgeService
from steadysteps.services.not_behind_service import NotBehindService
from steadysteps.services.progress_service import ProgressService
from steadysteps.stores import SyncedProgressStore, get_store
from steadysteps.utils import parse_date
from steadysteps.utils.jwt_utils import get_current_user_id

progress_bp = Blueprint("progress_bp", __name__, url_prefix="/api/v2")


@progress_bp.route("/progress/level", methods=["GET"])
@jwt_required()
def get_level():
    user_id = get_current_user_id()
    if not user_id:
        return jsonify({"error": "Unauthorized"}), 401

    return ProgressService.get_level(get_store(), user_id)


@progress_bp.route("/progress/weekly", methods=["GET"])
@jwt_required()
def get_weekly_stats():
    user_id = get_current_user_id()
    if not user_id:
        return jsonify({"error": "Unauthorized"}), 401

    return ProgressService.get_weekly_stats(get_store(), user_id)


@progress_bp.route("/badges", methods=["GET"])
@jwt_required()
def get_badges():
    user_id = get_current_user_id()
    if not user_id:
        return jsonify({"error": "Unauthorized"}), 401

    return ProgressService.get_badges(get_store(), user_id)


@progress_bp.route("/nudges/today", methods=["GET"])
@jwt_required()
def get_nudge():
    user_id = get_current_user_id()
    if not user_id:
        return jsonify({"error": "Unauthorized"}), 401

    return NudgeService.get_nudge(get_store(), user_id)


@progress_bp.route("/not-behind", methods=["GET"])
@jwt_required()
def get_not_behind():
    user_id = get_current_user_id()
    if not user_id:
        return jsonify({"error": "Unauthorized"}), 401

    return NotBehindService.get_status(get_store(), user_id)


@progress_bp.route("/not-behind/refresh", methods=["POST"])
@jwt_required()
def refresh_not_behind():
    user_id = get_current_user_id()
    if not user_id:
        return jsonify({"error": "Unauthorized"}), 401

    return NotBehindService.refresh(get_store(), user_id)


@progress_bp.route("/sync", methods=["POST"])
@jwt_required()
def push_pending():
    user_id = get_current_user_id()
    if not user_id:
        return jsonify({"error": "Unauthorized"}), 401

    store = get_store()
    if not isinstance(store, SyncedProgressStore):
        return jsonify({"status": "success", "pushed": 0, "conflicts": 0, "failed": 0}), 200

    return jsonify({"status": "success", **store.push_pending(user_id)}), 200


@progress_bp.route("/sync/conflicts/<date_str>", methods=["POST"])
@jwt_required()
def resolve_conflict(date_str):
    user_id = get_current_user_id()
    if not user_id:
        return jsonify({"error": "Unauthorized"}), 401

    store = get_store()
    if not isinstance(store, SyncedProgressStore):
        return jsonify({"error": "No local cache configured"}), 400

    try:
        checkin_date = parse_date(date_str)
    except ValueError:
        return jsonify({"error": "Invalid date format, use YYYY-MM-DD"}), 400

    keep_local = bool((request.get_json(silent=True) or {}).get("keep_local", False))
    try:
        resolved = store.resolve_conflict(user_id, checkin_date, keep_local=keep_local)
    except StoreError:
        return jsonify({"error": "Failed to resolve conflict"}), 500

    if not resolved:
        return jsonify({"error": "No conflict for this date"}), 404

    return jsonify({"status": "success", "checkin": checkin_summary(resolved)}), 200
