"""Exceptions raised by StarSense."""

from typing import Optional


class StarSenseError(Exception):
    """Base class for all StarSense errors."""


class ReviewFileError(StarSenseError, OSError):
    """The review file is missing or cannot be read."""

    def __init__(self, path: str, reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"cannot read review file {self.path}: {reason}")


class ParseError(StarSenseError, ValueError):
    """A line of the review file is not a valid review record."""

    def __init__(self, path: str, line_number: int, reason: str):
        self.path = str(path)
        self.line_number = line_number
        self.reason = reason
        super().__init__(f"{self.path}:{line_number}: {reason}")


class LexiconError(StarSenseError, ValueError):
    """A lexical resource (lexicon or stop-word list) is malformed."""

    def __init__(self, reason: str, path: Optional[str] = None, line_number: Optional[int] = None):
        self.path = str(path) if path is not None else None
        self.line_number = line_number
        self.reason = reason
        location = ""
        if self.path:
            location = f"{self.path}:{line_number}: " if line_number else f"{self.path}: "
        super().__init__(f"{location}{reason}")
