from .base_repository import BaseRepository
from .feedback_repository import FeedbackRepository

__all__ = ["BaseRepository", "FeedbackRepository"]
