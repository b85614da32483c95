from .category import Category
from .feedback import Feedback

__all__ = ["Category", "Feedback"]
