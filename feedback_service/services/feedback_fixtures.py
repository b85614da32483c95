"""
Feedback Sample Data

Static feedback records served by the read endpoints. They are not stored in
the database and never change at runtime; feedback created through the API
does not show up here.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Tuple


@dataclass(frozen=True)
class FeedbackItem:
    id: str
    event_id: str
    rating: int
    created_at: datetime
    event_name: Optional[str] = None
    user_id: Optional[str] = None
    user_name: Optional[str] = None
    content: Optional[str] = None
    category_id: Optional[int] = None
    category_name: Optional[str] = None
    is_anonymous: bool = False


# (id, name) pairs, also used to seed the categories table
CATEGORIES = (
    (1, "Music"),
    (2, "Fashion"),
    (3, "Food & Culinary"),
    (4, "Art & Design"),
    (5, "Technology"),
    (6, "Social"),
    (7, "Sports"),
    (8, "Business"),
    (9, "Entertainment"),
)

_CATEGORY_NAMES = dict(CATEGORIES)


def _item(idx, event_name, user_name, content, rating, category_id, created_at):
    return FeedbackItem(
        id=str(idx),
        event_id=f"evt-{idx}",
        event_name=event_name,
        user_id=f"user-{idx}",
        user_name=user_name,
        content=content,
        rating=rating,
        category_id=category_id,
        category_name=_CATEGORY_NAMES[category_id],
        created_at=created_at,
        is_anonymous=False,
    )


SAMPLE_FEEDBACKS: Tuple[FeedbackItem, ...] = (
    _item(
        1, "Echo Beats Festival", "Jackson Moore",
        "An absolutely amazing festival! The lineup of artists was incredible, and the sound "
        "quality was impeccable. The energy from the crowd made it a night to remember.",
        5, 1, datetime(2029, 4, 22),
    ),
    _item(
        2, "Runway Revolution 2029", "Alicia Smithson",
        "Beautiful designs and a well-organized event overall. The models and lighting were "
        "captivating, but the seating arrangements could have been planned better for the audience.",
        4, 2, datetime(2029, 5, 2),
    ),
    _item(
        3, "Symphony Under the Stars", "Patrick Cooper",
        "The music under the open sky was breathtaking. The orchestra was phenomenal, and the "
        "ambiance made it feel like a dream. Everything was organized beautifully.",
        5, 1, datetime(2029, 4, 20),
    ),
    _item(
        4, "Culinary Delights Festival", "Clara Simmons",
        "The variety of cuisines and food stalls was fantastic! The flavors were outstanding, "
        "though some popular stalls ran out of food too early in the event.",
        4, 3, datetime(2029, 5, 25),
    ),
    _item(
        5, "Artistry Unveiled Expo", "Natalie Johnson",
        "The expo was a treat for art lovers! The installations were awe-inspiring, and the "
        "chance to meet artists was a highlight of the event for me.",
        5, 4, datetime(2029, 5, 15),
    ),
    _item(
        6, "Tech Future Expo", "Henry Carter",
        "A fantastic platform for tech enthusiasts to explore the latest innovations. More "
        "hands-on workshops would have made the event even better, but it was still very informative.",
        4, 5, datetime(2029, 6, 1),
    ),
    _item(
        7, "Garden Party Gala", "Emily Watson",
        "A beautiful outdoor event with lovely decorations and great networking opportunities. "
        "The weather was perfect and the atmosphere was delightful.",
        5, 6, datetime(2029, 5, 30),
    ),
    _item(
        8, "Sports Championship Finals", "Michael Rodriguez",
        "Incredible energy throughout the entire event! The competition was fierce and the crowd "
        "support was amazing. Great organization by the event team.",
        5, 7, datetime(2029, 6, 10),
    ),
    _item(
        9, "Business Innovation Summit", "Sarah Chen",
        "Very informative sessions with industry leaders. The networking opportunities were "
        "valuable, though some presentations could have been more interactive.",
        4, 8, datetime(2029, 5, 18),
    ),
    _item(
        10, "Comedy Night Special", "David Wilson",
        "Hilarious performances from start to finish! All the comedians were fantastic and the "
        "venue had a great intimate atmosphere. Definitely recommend!",
        5, 9, datetime(2029, 6, 5),
    ),
)
