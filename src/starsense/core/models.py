"""Data models for StarSense."""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class Review:
    """A single review as read from the source file."""
    review_id: str
    business_id: str
    stars: int
    text: str


@dataclass(frozen=True)
class TokenRow:
    """One word occurrence in one review."""
    review_id: str
    business_id: str
    stars: int
    word: str


@dataclass(frozen=True)
class ScoredToken:
    """Token row paired with its lexicon score."""
    review_id: str
    business_id: str
    stars: int
    word: str
    score: int


@dataclass(frozen=True)
class ReviewSentiment:
    """Mean lexicon score of a review next to its star rating."""
    review_id: str
    stars: int
    sentiment: float


@dataclass(frozen=True)
class WordCount:
    """Occurrences of a word within a single review."""
    review_id: str
    business_id: str
    stars: int
    word: str
    n: int


@dataclass(frozen=True)
class WordSummary:
    """Support statistics of a word across the sample."""
    word: str
    businesses: int
    reviews: int
    uses: int
    average_stars: float


@dataclass(frozen=True)
class RefinedWord:
    """Support statistics of a word together with its lexicon score."""
    word: str
    businesses: int
    reviews: int
    uses: int
    average_stars: float
    score: int


@dataclass
class AnalysisResult:
    """Tables produced by one run of the pipeline."""
    review_sentiment: List[ReviewSentiment]
    refined_lexicon: List[RefinedWord]
    word_summaries: List[WordSummary] = field(default_factory=list)
    reviews_loaded: int = 0
    tokens_kept: int = 0
    tokens_scored: int = 0
    source: Optional[str] = None
