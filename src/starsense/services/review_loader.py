"""Loader for line-delimited JSON review files."""

import json
import logging
from itertools import islice
from pathlib import Path
from typing import Any, Dict, Iterator, List, Union

from tqdm import tqdm

from ..core.constants import PipelineConstants
from ..core.errors import ParseError, ReviewFileError
from ..core.models import Review

logger = logging.getLogger(__name__)


def parse_review(record: Any, path: str, line_number: int) -> Review:
    """Build a Review from a decoded JSON object, validating required fields."""
    if not isinstance(record, dict):
        raise ParseError(path, line_number, f"expected a JSON object, got {type(record).__name__}")

    missing = [name for name in PipelineConstants.REQUIRED_FIELDS if name not in record]
    if missing:
        raise ParseError(path, line_number, f"missing required field(s): {', '.join(missing)}")

    for name in ("review_id", "business_id", "text"):
        if not isinstance(record[name], str):
            raise ParseError(path, line_number, f"field '{name}' must be a string")

    stars = record["stars"]
    if isinstance(stars, bool) or not isinstance(stars, (int, float)):
        raise ParseError(path, line_number, "field 'stars' must be a number")
    if isinstance(stars, float):
        if not stars.is_integer():
            raise ParseError(path, line_number, f"field 'stars' must be a whole number, got {stars}")
        stars = int(stars)

    return Review(
        review_id=record["review_id"],
        business_id=record["business_id"],
        stars=stars,
        text=record["text"],
    )


class ReviewLoader:
    """Reads at most ``max_records`` lines of a review file."""

    def __init__(self, max_records: int = PipelineConstants.DEFAULT_MAX_RECORDS,
                 skip_malformed: bool = False, show_progress: bool = False):
        if max_records < 1:
            raise ValueError("max_records must be at least 1")
        self.max_records = max_records
        self.skip_malformed = skip_malformed
        self.show_progress = show_progress
        self.skipped = 0

    def iter_reviews(self, path: Union[str, Path]) -> Iterator[Review]:
        """Yield reviews in file order, never reading past line ``max_records``."""
        path = str(path)
        self.skipped = 0
        try:
            handle = open(path, "r", encoding="utf-8-sig")
        except OSError as e:
            raise ReviewFileError(path, e.strerror or str(e)) from e

        with handle:
            lines = islice(handle, self.max_records)
            if self.show_progress:
                lines = tqdm(lines, total=self.max_records, desc="Reading reviews", unit=" lines")
            try:
                for line_number, line in enumerate(lines, start=1):
                    line = line.strip()
                    if not line:
                        continue
                    try:
                        yield parse_review(self._decode(line, path, line_number), path, line_number)
                    except ParseError as e:
                        if not self.skip_malformed:
                            raise
                        self.skipped += 1
                        logger.warning(f"Skipping malformed record: {e}")
            except UnicodeDecodeError as e:
                raise ReviewFileError(path, f"not valid UTF-8 ({e.reason})") from e
            except OSError as e:
                raise ReviewFileError(path, e.strerror or str(e)) from e

    def load(self, path: Union[str, Path]) -> List[Review]:
        """Read reviews into a list."""
        reviews = list(self.iter_reviews(path))
        logger.info(f"Loaded {len(reviews)} reviews from {path}")
        if self.skipped:
            logger.warning(f"Skipped {self.skipped} malformed lines in {path}")
        return reviews

    @staticmethod
    def _decode(line: str, path: str, line_number: int) -> Dict[str, Any]:
        try:
            return json.loads(line)
        except json.JSONDecodeError as e:
            raise ParseError(path, line_number, f"invalid JSON ({e.msg})") from e


def load_reviews(path: Union[str, Path], max_records: int = PipelineConstants.DEFAULT_MAX_RECORDS,
                 skip_malformed: bool = False, show_progress: bool = False) -> List[Review]:
    """Read the first ``max_records`` lines of ``path`` into reviews."""
    loader = ReviewLoader(max_records, skip_malformed=skip_malformed, show_progress=show_progress)
    return loader.load(path)
