"""Plots and dashboard for StarSense."""

from .plots import describe_by_group, plot_sentiment_by_stars, plot_stars_by_score, save_plots

__all__ = [
    "describe_by_group",
    "plot_sentiment_by_stars",
    "plot_stars_by_score",
    "save_plots",
]
