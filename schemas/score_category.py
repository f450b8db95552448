"""Credit score bands on the 300-850 scale."""

from enum import Enum
from typing import Dict


class ScoreCategory(str, Enum):
    POOR = "poor"
    FAIR = "fair"
    GOOD = "good"
    EXCELLENT = "excellent"


SCORE_CATEGORY_DISPLAY_NAMES: Dict[str, str] = {
    "poor": "Poor",
    "fair": "Fair",
    "good": "Good",
    "excellent": "Excellent",
}


def get_score_category_display_name(category) -> str:
    """Human-readable name for a ScoreCategory or its string value."""
    value = category.value if isinstance(category, ScoreCategory) else str(category)
    return SCORE_CATEGORY_DISPLAY_NAMES.get(value, value.title())
