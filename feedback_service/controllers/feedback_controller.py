"""
Feedback Controller Module

Handles feedback HTTP requests:
- Request validation (rejected before reaching the service)
- Mapping service results onto status codes
"""

from flask import current_app
from feedback_service.extensions import db
from feedback_service.utils.http import ok, error, envelope, json_body, validate_schema
from feedback_service.schemas.feedback_schema import CreateFeedbackRequestSchema, FeedbackSchema
from feedback_service.repositories.feedback_repository import FeedbackRepository
from feedback_service.services.feedback_service import FeedbackService
from feedback_service.services.statistics_service import get_statistics


def get_feedback_service() -> FeedbackService:
    # One repository per request, bound to the request-scoped session
    return FeedbackService(FeedbackRepository(db.session))


def list_feedbacks_handler():
    result = get_feedback_service().get_feedbacks()
    if not result.success:
        current_app.logger.error(f"Listing feedbacks failed: {result.error}")
        return error("SERVER_ERROR", result.error, 500)
    return envelope(result, FeedbackSchema(many=True))


def get_feedback_handler(feedback_id: str):
    result = get_feedback_service().get_feedback(feedback_id)
    if not result.success:
        return error("NOT_FOUND", result.error, 404)
    return envelope(result, FeedbackSchema())


def list_event_feedbacks_handler(event_id: str):
    result = get_feedback_service().get_feedbacks_by_event(event_id)
    if not result.success:
        current_app.logger.error(f"Listing feedbacks for event {event_id} failed: {result.error}")
        return error("SERVER_ERROR", result.error, 500)
    return envelope(result, FeedbackSchema(many=True))


def get_statistics_handler():
    return ok({"success": True, "result": get_statistics()})


def create_feedback_handler():
    """
    Create a feedback entry.

    Body Parameters:
        - eventId (required): External event reference
        - rating (required): Integer 1-5
        - venueRating, eventOrganizationRating, staffSupportRating,
          entertainmentQualityRating, foodAndBeveragesRating,
          valueForMoneyRating (optional): Integers 1-5
        - eventName, userId, userName, content, categoryId, categoryName (optional)
        - isAnonymous (optional): Boolean, default false
    """
    data, errors = validate_schema(CreateFeedbackRequestSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "Invalid feedback data", 400, details=errors)

    result = get_feedback_service().create_feedback(data)
    if not result.success:
        current_app.logger.error(f"Creating feedback failed: {result.error}")
        return error("SERVER_ERROR", result.error, 500)
    return envelope(result, FeedbackSchema())
