"""External resource services for StarSense."""

from .review_loader import ReviewLoader, load_reviews
from .lexicon import load_resources, read_lexicon_file, read_stop_words_file

__all__ = [
    "ReviewLoader",
    "load_reviews",
    "load_resources",
    "read_lexicon_file",
    "read_stop_words_file",
]
