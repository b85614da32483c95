"""
Feedback Statistics

Summary figures for the dashboard. These are fixed values, not aggregates
computed from stored feedback.
"""

from typing import Any, Dict

OVERALL_RATING = 4.8
TOTAL_REVIEWS = 15545

# month -> (ratings 1-3, ratings 4-5)
MONTHLY_RATINGS = (
    ("Jan", 650, 880),
    ("Feb", 700, 920),
    ("Mar", 680, 900),
    ("Apr", 620, 870),
    ("May", 690, 910),
    ("Jun", 720, 950),
    ("Jul", 680, 890),
    ("Aug", 630, 860),
    ("Sep", 710, 940),
    ("Oct", 690, 920),
    ("Nov", 720, 960),
    ("Dec", 700, 930),
)


def get_statistics() -> Dict[str, Any]:
    return {
        "overallRating": OVERALL_RATING,
        "totalReviews": TOTAL_REVIEWS,
        "monthlyData": [
            {"month": month, "rating1To3": low, "rating4To5": high}
            for month, low, high in MONTHLY_RATINGS
        ],
    }
