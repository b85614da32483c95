from flask import Blueprint
from feedback_service.controllers.feedback_controller import (
    list_feedbacks_handler,
    get_feedback_handler,
    list_event_feedbacks_handler,
    get_statistics_handler,
    create_feedback_handler,
)

feedback_bp = Blueprint("feedbacks", __name__, url_prefix="/api/feedbacks")

@feedback_bp.route("", methods=["GET"])
def list_feedbacks():
    return list_feedbacks_handler()

@feedback_bp.route("", methods=["POST"])
def create_feedback():
    return create_feedback_handler()

@feedback_bp.route("/statistics", methods=["GET"])
def get_statistics():
    return get_statistics_handler()

@feedback_bp.route("/event/<event_id>", methods=["GET"])
def list_event_feedbacks(event_id):
    return list_event_feedbacks_handler(event_id)

@feedback_bp.route("/<feedback_id>", methods=["GET"])
def get_feedback(feedback_id):
    return get_feedback_handler(feedback_id)
