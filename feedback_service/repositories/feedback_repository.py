from feedback_service.models.feedback import Feedback
from feedback_service.repositories.base_repository import BaseRepository

__all__ = ["FeedbackRepository"]


class FeedbackRepository(BaseRepository[Feedback]):
    model = Feedback
