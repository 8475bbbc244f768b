"""
Boxplots comparing lexicon sentiment with star ratings.
"""
import logging
from pathlib import Path
from typing import Optional

import matplotlib.pyplot as plt
import pandas as pd
import seaborn as sns

from ..core.constants import ReportConstants

logger = logging.getLogger(__name__)


def describe_by_group(frame: pd.DataFrame, group: str, value: str) -> pd.DataFrame:
    """Count, mean and quartiles of ``value`` for each ``group``: the numbers behind a boxplot."""
    if frame.empty:
        return pd.DataFrame(columns=["count", "mean", "std", "min", "25%", "50%", "75%", "max"])
    return frame.groupby(group)[value].describe()


def _boxplot(frame: pd.DataFrame, x: str, y: str, xlabel: str, ylabel: str, title: str):
    sns.set_style("whitegrid")
    fig, ax = plt.subplots(figsize=(8, 6))
    if frame.empty:
        ax.text(0.5, 0.5, "No data", ha="center", va="center", transform=ax.transAxes, fontsize=14)
    else:
        sns.boxplot(data=frame, x=x, y=y, ax=ax, color="#9ecae1")
    ax.set_xlabel(xlabel, fontsize=11)
    ax.set_ylabel(ylabel, fontsize=11)
    ax.set_title(title, fontsize=13, fontweight='bold')
    fig.tight_layout()
    return fig


def plot_sentiment_by_stars(review_sentiment: pd.DataFrame):
    """Per-review average sentiment, one box per star rating."""
    return _boxplot(review_sentiment, "stars", "sentiment",
                    "Stars", "Average sentiment score",
                    "Review sentiment by star rating")


def plot_stars_by_score(refined_lexicon: pd.DataFrame):
    """Average stars of reviews containing a word, one box per AFINN score."""
    return _boxplot(refined_lexicon, "score", "average_stars",
                    "AFINN score of word", "Average stars of reviews with this word",
                    "Word support vs. lexicon score")


def save_figure(fig, path: Path, dpi: int = ReportConstants.PLOT_DPI) -> Path:
    """Save a figure and release it."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(path, dpi=dpi, bbox_inches='tight')
    plt.close(fig)
    logger.info(f"Saved plot to {path}")
    return path


def save_plots(review_sentiment: pd.DataFrame, refined_lexicon: pd.DataFrame,
               plot_dir: str, dpi: Optional[int] = None) -> list:
    """Render both comparison plots into ``plot_dir``."""
    dpi = dpi or ReportConstants.PLOT_DPI
    out = Path(plot_dir)
    return [
        save_figure(plot_sentiment_by_stars(review_sentiment), out / ReportConstants.SENTIMENT_PLOT_FILE, dpi),
        save_figure(plot_stars_by_score(refined_lexicon), out / ReportConstants.LEXICON_PLOT_FILE, dpi),
    ]
