"""Tokenization and token filtering."""

import logging
import re
from typing import AbstractSet, Iterable, Iterator, List

from .constants import PipelineConstants
from .models import Review, TokenRow

logger = logging.getLogger(__name__)

_SPLIT_RE = re.compile(PipelineConstants.SPLIT_PATTERN)
_WORD_RE = re.compile(PipelineConstants.WORD_PATTERN)


def tokenize(text: str) -> List[str]:
    """Split text into lowercase word tokens.

    Splits on anything that is not a word character, an apostrophe or a
    single period, then strips apostrophes and periods from the ends of each
    token. Abbreviations such as "u.s." stay whole as "u.s" instead of
    turning into one-letter words. Digits, inner periods and non-ASCII
    letters are kept here; ``filter_tokens`` removes them.
    """
    text = (text or "").lower().replace(PipelineConstants.TYPOGRAPHIC_APOSTROPHE, "'")
    tokens = []
    for piece in _SPLIT_RE.split(text):
        piece = piece.strip(PipelineConstants.EDGE_CHARS)
        if piece:
            tokens.append(piece)
    return tokens


def unnest_tokens(reviews: Iterable[Review]) -> Iterator[TokenRow]:
    """Yield one token row per word occurrence, in review then token order."""
    for review in reviews:
        for word in tokenize(review.text):
            yield TokenRow(review.review_id, review.business_id, review.stars, word)


def is_candidate_word(word: str, stop_words: AbstractSet[str]) -> bool:
    """True if the word is not a stop word and consists only of [a-z']."""
    return word not in stop_words and _WORD_RE.fullmatch(word) is not None


def filter_tokens(rows: Iterable[TokenRow], stop_words: AbstractSet[str]) -> Iterator[TokenRow]:
    """Drop stop words and tokens containing anything besides a-z and apostrophes."""
    for row in rows:
        if is_candidate_word(row.word, stop_words):
            yield row


def review_words(reviews: Iterable[Review], stop_words: AbstractSet[str]) -> List[TokenRow]:
    """Tokenize and filter reviews into a list of token rows."""
    rows = list(filter_tokens(unnest_tokens(reviews), stop_words))
    logger.debug(f"Kept {len(rows)} tokens after filtering")
    return rows
