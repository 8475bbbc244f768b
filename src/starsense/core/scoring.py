"""Lexicon scoring and aggregation stages."""

import logging
import math
from collections import defaultdict
from typing import Dict, Iterable, Iterator, List, Mapping, Tuple, TypeVar

from .models import (
    RefinedWord,
    ReviewSentiment,
    ScoredToken,
    TokenRow,
    WordCount,
    WordSummary,
)

logger = logging.getLogger(__name__)

Row = TypeVar("Row")


def inner_join_on_word(rows: Iterable[Row], lexicon: Mapping[str, int]) -> Iterator[Tuple[Row, int]]:
    """Pair each row with the lexicon score of its ``word``.

    Rows whose word has no lexicon entry are dropped silently. Lexicon keys
    are unique, so every input row yields at most one pair.
    """
    for row in rows:
        score = lexicon.get(row.word)
        if score is not None:
            yield row, score


def score_tokens(rows: Iterable[TokenRow], lexicon: Mapping[str, int]) -> List[ScoredToken]:
    """Attach lexicon scores to token rows, dropping words not in the lexicon."""
    return [
        ScoredToken(row.review_id, row.business_id, row.stars, row.word, score)
        for row, score in inner_join_on_word(rows, lexicon)
    ]


def aggregate_review_sentiment(scored: Iterable[ScoredToken]) -> List[ReviewSentiment]:
    """Mean lexicon score per (review_id, stars).

    Repeated words count once per occurrence. Reviews without any scored
    token produce no row.
    """
    groups: Dict[Tuple[str, int], List[int]] = defaultdict(list)
    for token in scored:
        groups[(token.review_id, token.stars)].append(token.score)

    # fsum is exactly rounded, so the mean does not depend on row order
    return [
        ReviewSentiment(review_id, stars, math.fsum(scores) / len(scores))
        for (review_id, stars), scores in sorted(groups.items())
    ]


def count_words(rows: Iterable[TokenRow]) -> List[WordCount]:
    """Count occurrences of each word within each review."""
    counts: Dict[Tuple[str, str, int, str], int] = defaultdict(int)
    for row in rows:
        counts[(row.review_id, row.business_id, row.stars, row.word)] += 1
    return [WordCount(*key, n=n) for key, n in sorted(counts.items())]


def summarize_words(counted: Iterable[WordCount]) -> List[WordSummary]:
    """Per-word support: distinct businesses, reviews, total uses, average stars.

    ``average_stars`` weighs every review containing the word once,
    regardless of how often the word occurs in it.
    """
    businesses = defaultdict(set)
    reviews: Dict[str, int] = defaultdict(int)
    uses: Dict[str, int] = defaultdict(int)
    stars: Dict[str, List[int]] = defaultdict(list)

    for row in counted:
        businesses[row.word].add(row.business_id)
        reviews[row.word] += 1
        uses[row.word] += row.n
        stars[row.word].append(row.stars)

    return [
        WordSummary(
            word=word,
            businesses=len(businesses[word]),
            reviews=reviews[word],
            uses=uses[word],
            average_stars=math.fsum(stars[word]) / reviews[word],
        )
        for word in sorted(reviews)
    ]


def filter_by_support(summaries: Iterable[WordSummary], min_reviews: int, min_businesses: int) -> List[WordSummary]:
    """Keep words seen in at least ``min_reviews`` reviews and ``min_businesses`` businesses."""
    return [
        s for s in summaries
        if s.reviews >= min_reviews and s.businesses >= min_businesses
    ]


def refine_lexicon(summaries: Iterable[WordSummary], lexicon: Mapping[str, int]) -> List[RefinedWord]:
    """Attach lexicon scores to word summaries, dropping words not in the lexicon."""
    return [
        RefinedWord(s.word, s.businesses, s.reviews, s.uses, s.average_stars, score)
        for s, score in inner_join_on_word(summaries, lexicon)
    ]


def rank_words(summaries: Iterable[WordSummary], n: int = 10, ascending: bool = False) -> List[WordSummary]:
    """Words ordered by average stars, highest first unless ``ascending``."""
    if ascending:
        ranked = sorted(summaries, key=lambda s: (s.average_stars, s.word))
    else:
        ranked = sorted(summaries, key=lambda s: (-s.average_stars, s.word))
    return ranked[:max(0, n)]
