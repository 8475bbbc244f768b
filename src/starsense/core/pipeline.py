"""End-to-end sentiment vs. star rating analysis."""

import logging
from typing import AbstractSet, Iterable, Mapping, Optional

from .constants import PipelineConstants
from .models import AnalysisResult, Review
from .scoring import (
    aggregate_review_sentiment,
    count_words,
    filter_by_support,
    refine_lexicon,
    score_tokens,
    summarize_words,
)
from .text import review_words

logger = logging.getLogger(__name__)


def run_analysis(
    reviews: Iterable[Review],
    stop_words: AbstractSet[str],
    lexicon: Mapping[str, int],
    min_reviews: int = PipelineConstants.DEFAULT_MIN_REVIEWS,
    min_businesses: int = PipelineConstants.DEFAULT_MIN_BUSINESSES,
    source: Optional[str] = None,
) -> AnalysisResult:
    """Score reviews against the lexicon and build the support-filtered lexicon.

    Empty input, or thresholds no word can meet, yield empty tables rather
    than errors.
    """
    reviews = list(reviews)
    tokens = review_words(reviews, stop_words)

    scored = score_tokens(tokens, lexicon)
    review_sentiment = aggregate_review_sentiment(scored)
    logger.info(f"Scored {len(scored)} of {len(tokens)} tokens; "
                f"{len(review_sentiment)} of {len(reviews)} reviews have a sentiment")

    summaries = summarize_words(count_words(tokens))
    supported = filter_by_support(summaries, min_reviews, min_businesses)
    refined = refine_lexicon(supported, lexicon)
    logger.info(f"{len(supported)} of {len(summaries)} words meet support "
                f"(reviews >= {min_reviews}, businesses >= {min_businesses}); "
                f"{len(refined)} are in the lexicon")

    return AnalysisResult(
        review_sentiment=review_sentiment,
        refined_lexicon=refined,
        word_summaries=supported,
        reviews_loaded=len(reviews),
        tokens_kept=len(tokens),
        tokens_scored=len(scored),
        source=source,
    )
