"""Tests for scoring module."""

import random

import pytest

from starsense.core.models import ReviewSentiment, ScoredToken, TokenRow, WordCount, WordSummary
from starsense.core.scoring import (
    aggregate_review_sentiment,
    count_words,
    filter_by_support,
    inner_join_on_word,
    rank_words,
    refine_lexicon,
    score_tokens,
    summarize_words,
)


def _tokens(review_id, business_id, stars, words):
    return [TokenRow(review_id, business_id, stars, w) for w in words.split()]


class TestLexiconJoin:
    """Inner join on word."""

    def test_unmatched_rows_dropped(self, small_lexicon):
        """Test that tokens missing from the lexicon are dropped."""
        rows = _tokens("r1", "b1", 5, "amazing pasta wonderful")
        scored = score_tokens(rows, small_lexicon)
        assert [s.word for s in scored] == ["amazing", "wonderful"]

    def test_scores_equal_lexicon_values(self, small_lexicon):
        """Test that every score equals the stored lexicon value."""
        rows = _tokens("r1", "b1", 5, "amazing awful pasta terrible amazing")
        for token in score_tokens(rows, small_lexicon):
            assert token.word in small_lexicon
            assert token.score == small_lexicon[token.word]

    def test_at_most_one_row_per_token(self, small_lexicon):
        """Test that the join never multiplies rows."""
        rows = _tokens("r1", "b1", 5, "amazing amazing amazing")
        assert len(list(inner_join_on_word(rows, small_lexicon))) == 3

    def test_empty_inputs(self, small_lexicon):
        """Test empty tokens and an empty lexicon."""
        assert score_tokens([], small_lexicon) == []
        assert score_tokens(_tokens("r1", "b1", 5, "amazing"), {}) == []


class TestReviewAggregator:
    """Mean sentiment per review."""

    def test_mean_per_review(self):
        """Test the mean score per review."""
        scored = [
            ScoredToken("r1", "b1", 5, "amazing", 4),
            ScoredToken("r1", "b1", 5, "awful", -3),
            ScoredToken("r2", "b1", 1, "awful", -3),
        ]
        assert aggregate_review_sentiment(scored) == [
            ReviewSentiment("r1", 5, 0.5),
            ReviewSentiment("r2", 1, -3.0),
        ]

    def test_repeated_words_weighted(self):
        """Test that repeated words count once per occurrence."""
        scored = [
            ScoredToken("r1", "b1", 4, "good", 3),
            ScoredToken("r1", "b1", 4, "good", 3),
            ScoredToken("r1", "b1", 4, "bad", -3),
        ]
        assert aggregate_review_sentiment(scored)[0].sentiment == pytest.approx(1.0)

    def test_order_independent(self):
        """Test that the result does not depend on row order."""
        rng = random.Random(7)
        scored = [ScoredToken(f"r{i % 13}", "b", i % 5 + 1, "w", rng.randint(-5, 5)) for i in range(500)]
        first = aggregate_review_sentiment(scored)
        shuffled = list(scored)
        rng.shuffle(shuffled)
        assert aggregate_review_sentiment(shuffled) == first
        assert aggregate_review_sentiment(scored) == first

    def test_empty(self):
        """Test empty input."""
        assert aggregate_review_sentiment([]) == []


class TestWordSupport:
    """Word counts, summaries and the support filter."""

    def test_count_words(self):
        """Test per-review word counts."""
        rows = _tokens("r1", "b1", 4, "good good food") + _tokens("r2", "b2", 2, "good")
        assert count_words(rows) == [
            WordCount("r1", "b1", 4, "food", 1),
            WordCount("r1", "b1", 4, "good", 2),
            WordCount("r2", "b2", 2, "good", 1),
        ]

    def test_summarize_words(self):
        """Test businesses, reviews, uses and average stars per word."""
        rows = (
            _tokens("r1", "b1", 5, "good good good")
            + _tokens("r2", "b1", 4, "good")
            + _tokens("r3", "b2", 1, "good bland")
        )
        summaries = {s.word: s for s in summarize_words(count_words(rows))}
        good = summaries["good"]
        assert good.businesses == 2
        assert good.reviews == 3
        assert good.uses == 5
        # each review counts once regardless of repetitions
        assert good.average_stars == pytest.approx((5 + 4 + 1) / 3)
        assert summaries["bland"] == WordSummary("bland", 1, 1, 1, 1.0)

    def test_summaries_sorted_by_word(self):
        """Test that summaries come out sorted by word."""
        rows = _tokens("r1", "b1", 3, "zesty apple mild")
        assert [s.word for s in summarize_words(count_words(rows))] == ["apple", "mild", "zesty"]

    def test_threshold_boundary_is_inclusive(self):
        """Test that exactly min_reviews reviews is enough."""
        def summary(reviews):
            rows = [TokenRow(f"r{i}", f"b{i % 50}", 4, "tasty") for i in range(reviews)]
            return summarize_words(count_words(rows))

        below = summary(199)
        assert below[0].reviews == 199 and below[0].businesses == 50
        assert filter_by_support(below, min_reviews=200, min_businesses=10) == []

        at = summary(200)
        assert len(filter_by_support(at, min_reviews=200, min_businesses=10)) == 1

    def test_business_threshold(self):
        """Test the distinct business threshold."""
        s = WordSummary("tasty", businesses=9, reviews=500, uses=800, average_stars=4.0)
        assert filter_by_support([s], 200, 10) == []
        assert filter_by_support([s], 200, 9) == [s]

    def test_filter_monotonic(self):
        """Test that raising thresholds never adds words."""
        rng = random.Random(3)
        summaries = [
            WordSummary(f"w{i}", rng.randint(1, 30), rng.randint(1, 400), 400, 3.0)
            for i in range(200)
        ]
        previous = filter_by_support(summaries, 0, 0)
        for min_reviews, min_businesses in [(50, 0), (50, 5), (150, 5), (150, 20), (300, 25)]:
            current = filter_by_support(summaries, min_reviews, min_businesses)
            assert set(current) <= set(previous)
            previous = current

    def test_refine_lexicon(self, small_lexicon):
        """Test that only words in the lexicon are kept, with their score."""
        summaries = [
            WordSummary("amazing", 12, 250, 300, 4.6),
            WordSummary("pasta", 40, 900, 1200, 3.9),
        ]
        refined = refine_lexicon(summaries, small_lexicon)
        assert len(refined) == 1
        assert refined[0].word == "amazing"
        assert refined[0].score == 4
        assert refined[0].average_stars == 4.6


def test_rank_words():
    """Test ranking words by average stars."""
    summaries = [
        WordSummary("meh", 10, 200, 210, 2.5),
        WordSummary("yum", 10, 200, 210, 4.8),
        WordSummary("gross", 10, 200, 210, 1.2),
    ]
    assert [s.word for s in rank_words(summaries, 2)] == ["yum", "meh"]
    assert [s.word for s in rank_words(summaries, 2, ascending=True)] == ["gross", "meh"]
    assert rank_words(summaries, 0) == []
