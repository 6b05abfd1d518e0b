"""
Tests for the allocation evaluator (scoring/allocation.py)
"""

import pytest

from marketing_trainer.scoring.allocation import (
    allocation_message,
    channel_feedback,
    evaluate_allocation,
)

SAAS_KEY = {"Google Ads": 50, "LinkedIn Ads": 30, "Email Marketing": 20}


class TestEvaluateAllocation:
    """Score and top-level message"""

    def test_optimal_allocation(self):
        result = evaluate_allocation(dict(SAAS_KEY), SAAS_KEY)
        assert result.score == 100
        assert result.messages == ["Excellent work! Your allocation is nearly optimal."]
        assert all(msg == "Perfect allocation!" for msg in result.channel_feedback.values())

    def test_near_miss_allocation(self):
        user = {"Google Ads": 60, "LinkedIn Ads": 25, "Email Marketing": 15}
        result = evaluate_allocation(user, SAAS_KEY)
        # deviations 10, 5, 5 -> avg 6.667 -> 100 - 13.33
        assert result.score == 87
        assert result.messages == ["Good job! A few tweaks could improve efficiency."]
        assert result.channel_feedback == {
            "Google Ads": "Consider decreasing by about 10%.",
            "LinkedIn Ads": "Very close! Minor adjustment could optimize this.",
            "Email Marketing": "Very close! Minor adjustment could optimize this.",
        }

    def test_exactly_one_message(self):
        result = evaluate_allocation({"Google Ads": 100}, SAAS_KEY)
        assert len(result.messages) == 1

    def test_missing_channel_counts_as_zero(self):
        result = evaluate_allocation({"Google Ads": 80, "LinkedIn Ads": 20}, SAAS_KEY)
        assert result.channel_feedback["Email Marketing"] == (
            "Under-allocated by 20%. This channel offers better efficiency."
        )
        # deviations 30, 10, 20 -> avg 20 -> 60
        assert result.score == 60
        assert result.messages == ["Not bad, but there is room for improvement in channel selection."]

    def test_extra_channels_ignored(self):
        user = dict(SAAS_KEY, **{"TikTok Ads": 40})
        result = evaluate_allocation(user, SAAS_KEY)
        assert result.score == 100
        assert "TikTok Ads" not in result.channel_feedback

    def test_score_floored_at_zero(self):
        result = evaluate_allocation({"X": 100}, {"A": 100})
        assert result.score == 0
        assert result.messages == ["Keep practicing! Consider the relative efficiency of each channel."]

    def test_score_rounds_half_up(self):
        # deviation 6.75 -> 100 - 13.5 = 86.5
        result = evaluate_allocation({"A": 56.75}, {"A": 50})
        assert result.score == 87

    def test_message_band_uses_unrounded_score(self):
        # 100 - 5.2 * 2 = 89.6: displayed as 90 but still below the top band
        result = evaluate_allocation({"A": 55.2}, {"A": 50})
        assert result.score == 90
        assert result.messages == ["Good job! A few tweaks could improve efficiency."]

    def test_empty_answer_key_raises(self):
        with pytest.raises(ValueError, match="at least one channel"):
            evaluate_allocation({"A": 100}, {})

    def test_score_bounded(self):
        key = {"A": 40, "B": 60}
        for a in range(0, 101, 5):
            result = evaluate_allocation({"A": a, "B": 100 - a}, key)
            assert 0 <= result.score <= 100

    def test_score_non_increasing_with_deviation(self):
        key = {"A": 40, "B": 30, "C": 30}
        scores = [
            evaluate_allocation({"A": 40 + d, "B": 30, "C": 30}, key).score
            for d in range(0, 61)
        ]
        assert scores == sorted(scores, reverse=True)


class TestChannelFeedback:
    """Per-channel feedback bands"""

    def test_perfect(self):
        assert channel_feedback(30, 30) == "Perfect allocation!"

    def test_close_boundary_inclusive(self):
        assert channel_feedback(35, 30) == "Very close! Minor adjustment could optimize this."
        assert channel_feedback(25, 30) == "Very close! Minor adjustment could optimize this."

    def test_adjust_band_increasing(self):
        assert channel_feedback(22, 30) == "Consider increasing by about 8%."

    def test_adjust_band_boundary_inclusive(self):
        assert channel_feedback(40, 30) == "Consider decreasing by about 10%."

    def test_adjust_amount_rounds_half_up(self):
        assert channel_feedback(57.5, 50) == "Consider decreasing by about 8%."

    def test_over_allocated(self):
        assert channel_feedback(70, 50) == "Over-allocated by 20%. This channel may be too expensive."

    def test_under_allocated(self):
        assert channel_feedback(10, 30) == "Under-allocated by 20%. This channel offers better efficiency."

    def test_just_over_adjust_band(self):
        assert channel_feedback(40.5, 30).startswith("Over-allocated by 11%")


class TestAllocationMessage:
    """Top-level score bands"""

    @pytest.mark.parametrize("score, expected_prefix", [
        (100, "Excellent work!"),
        (90, "Excellent work!"),
        (89.9, "Good job!"),
        (75, "Good job!"),
        (74.9, "Not bad"),
        (60, "Not bad"),
        (59.9, "Keep practicing!"),
        (0, "Keep practicing!"),
    ])
    def test_bands(self, score, expected_prefix):
        assert allocation_message(score).startswith(expected_prefix)
