"""Score categorization - maps a numeric score to its named band."""

from schemas.score_category import ScoreCategory
from config.bureau_loader import get_score_bands

# Highest band first so the first satisfied lower bound wins
_BANDS_DESCENDING = (ScoreCategory.EXCELLENT, ScoreCategory.GOOD, ScoreCategory.FAIR)


def categorize_score(score: int) -> ScoreCategory:
    """Classify a score into Poor / Fair / Good / Excellent.

    Bands are closed and non-overlapping: Poor below 601, Fair 601-660,
    Good 661-780, Excellent 781 and above. Scores outside 300-850 fall into
    the band their value implies.
    """
    bounds = get_score_bands()
    for category in _BANDS_DESCENDING:
        if score >= bounds[category.value]:
            return category
    return ScoreCategory.POOR
