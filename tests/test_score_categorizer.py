"""Tests for score band classification."""

import pytest

from config.bureau_loader import get_score_bands
from schemas.score_category import ScoreCategory, get_score_category_display_name
from pipeline.score_categorizer import categorize_score


class TestCategorizeScore:

    @pytest.mark.parametrize("score, expected", [
        (300, ScoreCategory.POOR),
        (600, ScoreCategory.POOR),
        (601, ScoreCategory.FAIR),
        (660, ScoreCategory.FAIR),
        (661, ScoreCategory.GOOD),
        (780, ScoreCategory.GOOD),
        (781, ScoreCategory.EXCELLENT),
        (850, ScoreCategory.EXCELLENT),
    ])
    def test_band_boundaries(self, score, expected):
        assert categorize_score(score) == expected

    def test_out_of_range_scores_follow_their_value(self):
        assert categorize_score(0) == ScoreCategory.POOR
        assert categorize_score(-5) == ScoreCategory.POOR
        assert categorize_score(900) == ScoreCategory.EXCELLENT

    def test_bands_loaded_from_config(self):
        bands = get_score_bands()
        assert bands["fair"] == 601
        assert bands["good"] == 661
        assert bands["excellent"] == 781

    def test_display_names(self):
        assert get_score_category_display_name(ScoreCategory.GOOD) == "Good"
        assert get_score_category_display_name(ScoreCategory.POOR) == "Poor"
