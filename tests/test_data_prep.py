"""Tests for table conversion and export."""

import json

import pandas as pd

from starsense.core.models import AnalysisResult, RefinedWord, ReviewSentiment, WordSummary
from starsense.utils.data_prep import export_to_csv, export_to_json, prepare_export, result_tables, to_dataframe


def _result():
    return AnalysisResult(
        review_sentiment=[ReviewSentiment("r1", 5, 4.0), ReviewSentiment("r2", 1, -3.0)],
        refined_lexicon=[RefinedWord("amazing", 12, 250, 300, 4.6, 4)],
        word_summaries=[WordSummary("amazing", 12, 250, 300, 4.6)],
        reviews_loaded=2,
        tokens_kept=6,
        tokens_scored=4,
        source="reviews.json",
    )


def test_to_dataframe_empty_keeps_columns():
    """Test that an empty table keeps its columns."""
    frame = to_dataframe([], RefinedWord)
    assert frame.empty
    assert list(frame.columns) == ["word", "businesses", "reviews", "uses", "average_stars", "score"]


def test_result_tables():
    """Test the table names and contents."""
    tables = result_tables(_result())
    assert set(tables) == {"review_sentiment", "refined_lexicon", "word_summaries"}
    assert list(tables["review_sentiment"]["sentiment"]) == [4.0, -3.0]


def test_export_to_json(tmp_path):
    """Test the JSON export payload."""
    out = tmp_path / "result.json"
    export_to_json(prepare_export(_result(), {"min_reviews": 200}), str(out))

    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["parameters"] == {"min_reviews": 200}
    assert data["counts"]["refined_words"] == 1
    assert data["review_sentiment"][0] == {"review_id": "r1", "stars": 5, "sentiment": 4.0}
    assert data["metadata"]["export_timestamp"] is not None


def test_export_to_csv(tmp_path):
    """Test that one CSV is written per table."""
    written = export_to_csv(_result(), str(tmp_path / "tables"))
    assert sorted(p.name for p in written) == ["refined_lexicon.csv", "review_sentiment.csv", "word_summaries.csv"]
    frame = pd.read_csv(tmp_path / "tables" / "refined_lexicon.csv")
    assert frame.loc[0, "word"] == "amazing"
    assert frame.loc[0, "score"] == 4
