"""
Feedback Service Module

Maps validated requests onto Feedback entities and serves feedback reads.

Creation goes through the repository and is persisted. Reads are answered
from SAMPLE_FEEDBACKS and never query the database, so newly created
feedback is not visible through the read operations.
"""

import logging
from typing import Any, Dict, List

from feedback_service.models.feedback import Feedback, utcnow
from feedback_service.repositories.feedback_repository import FeedbackRepository
from feedback_service.services.feedback_fixtures import SAMPLE_FEEDBACKS, FeedbackItem
from feedback_service.utils.result import Err, Ok, Result

logger = logging.getLogger(__name__)


class FeedbackService:
    def __init__(self, feedback_repository: FeedbackRepository):
        self._feedback_repository = feedback_repository

    def create_feedback(self, request: Dict[str, Any]) -> Result[Feedback]:
        """
        Create and persist a feedback entry.

        Args:
            request: Data loaded by CreateFeedbackRequestSchema.

        Only event_id, user_id, content, rating and is_anonymous are copied
        onto the entity. Category and sub-ratings are accepted on the request
        but have no column to land in.
        """
        missing = [key for key in ("event_id", "rating") if request.get(key) is None]
        if missing:
            return Err(f"Missing required field(s): {', '.join(missing)}")

        feedback = Feedback(
            event_id=request["event_id"],
            user_id=request.get("user_id"),
            content=request.get("content"),
            rating=request["rating"],
            is_anonymous=request.get("is_anonymous", False),
            created_at=utcnow(),
        )

        result = self._feedback_repository.add(feedback)
        if not result.success:
            return Err(result.error)

        logger.info(f"Feedback {feedback.id} created for event {feedback.event_id}")
        return Ok(feedback)

    def get_feedbacks(self) -> Result[List[FeedbackItem]]:
        return Ok(list(SAMPLE_FEEDBACKS))

    def get_feedback(self, feedback_id: str) -> Result[FeedbackItem]:
        for feedback in SAMPLE_FEEDBACKS:
            if feedback.id == feedback_id:
                return Ok(feedback)
        return Err("Feedback not found")

    def get_feedbacks_by_event(self, event_id: str) -> Result[List[FeedbackItem]]:
        return Ok([f for f in SAMPLE_FEEDBACKS if f.event_id == event_id])
