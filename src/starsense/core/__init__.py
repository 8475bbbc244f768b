"""Core modules for StarSense."""

from .models import *
from .config import settings
from .errors import *
from .text import *
from .scoring import *
from .pipeline import run_analysis

__all__ = [
    "settings",
    "Review",
    "TokenRow",
    "ScoredToken",
    "ReviewSentiment",
    "WordCount",
    "WordSummary",
    "RefinedWord",
    "AnalysisResult",
    "StarSenseError",
    "ReviewFileError",
    "ParseError",
    "LexiconError",
    "tokenize",
    "filter_tokens",
    "inner_join_on_word",
    "run_analysis",
]
