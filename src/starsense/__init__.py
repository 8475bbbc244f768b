"""StarSense - review sentiment vs. star rating analysis."""

__version__ = "0.1.0"
__author__ = "StarSense Team"

from .core.models import *
from .core.config import settings
from .core.pipeline import run_analysis
from .services.review_loader import load_reviews
from .services.lexicon import load_resources

__all__ = [
    "settings",
    "run_analysis",
    "load_reviews",
    "load_resources",
]
