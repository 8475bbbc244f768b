"""Tests for the comparison plots."""

import pandas as pd
import pytest

from starsense.core.constants import ReportConstants
from starsense.ui.plots import describe_by_group, plot_sentiment_by_stars, plot_stars_by_score, save_plots


@pytest.fixture
def sentiment_frame():
    """Four scored reviews across three star ratings."""
    return pd.DataFrame({
        "review_id": ["r1", "r2", "r3", "r4"],
        "stars": [5, 5, 1, 3],
        "sentiment": [3.0, 4.0, -2.0, 0.5],
    })


def test_describe_by_group(sentiment_frame):
    """Test the per-group summary statistics."""
    summary = describe_by_group(sentiment_frame, "stars", "sentiment")
    assert list(summary.index) == [1, 3, 5]
    assert summary.loc[5, "count"] == 2
    assert summary.loc[5, "mean"] == pytest.approx(3.5)


def test_describe_by_group_empty():
    """Test the summary of an empty table."""
    assert describe_by_group(pd.DataFrame(), "stars", "sentiment").empty


def test_plot_labels(sentiment_frame):
    """Test the axis labels of both plots."""
    fig = plot_sentiment_by_stars(sentiment_frame)
    assert fig.axes[0].get_ylabel() == "Average sentiment score"

    refined = pd.DataFrame({"score": [-3, 2, 2], "average_stars": [2.1, 3.9, 4.2]})
    fig = plot_stars_by_score(refined)
    assert fig.axes[0].get_xlabel() == "AFINN score of word"


def test_save_plots_handles_empty_tables(tmp_path, sentiment_frame):
    """Test that plots are written even for empty tables."""
    paths = save_plots(sentiment_frame, pd.DataFrame(), str(tmp_path / "plots"))
    assert [p.name for p in paths] == [ReportConstants.SENTIMENT_PLOT_FILE, ReportConstants.LEXICON_PLOT_FILE]
    for path in paths:
        assert path.exists() and path.stat().st_size > 0
