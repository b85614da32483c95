from datetime import datetime, timezone
import uuid

from feedback_service.extensions import db


def generate_id() -> str:
    return str(uuid.uuid4())


def utcnow() -> datetime:
    # Stored naive, always UTC
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Feedback(db.Model):
    __tablename__ = "feedbacks"

    id = db.Column(db.String(36), primary_key=True, default=generate_id)
    event_id = db.Column(db.String(100), nullable=False, index=True)
    event_name = db.Column(db.String(255), nullable=True)
    user_id = db.Column(db.String(100), nullable=True)
    user_name = db.Column(db.String(255), nullable=True)
    content = db.Column(db.Text, nullable=True)
    rating = db.Column(db.Integer, nullable=False)
    category_id = db.Column(db.Integer, db.ForeignKey("categories.id"), nullable=True)
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)
    is_anonymous = db.Column(db.Boolean, nullable=False, default=False)

    category = db.relationship("Category", backref="feedbacks")

    def __init__(self, **kwargs):
        # id and created_at are fixed at construction, not at flush
        kwargs.setdefault("id", generate_id())
        kwargs.setdefault("created_at", utcnow())
        super().__init__(**kwargs)

    @property
    def category_name(self):
        return self.category.name if self.category else None

    def __repr__(self):
        return f"<Feedback {self.id}: event={self.event_id} rating={self.rating}>"
