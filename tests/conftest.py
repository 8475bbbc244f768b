"""Shared fixtures for StarSense tests."""

import json

import matplotlib
import pytest

matplotlib.use("Agg")


@pytest.fixture
def write_reviews(tmp_path):
    """Write review dicts (or raw strings) as JSON lines and return the path."""
    def _write(records, name="reviews.json"):
        path = tmp_path / name
        with open(path, "w", encoding="utf-8") as f:
            for record in records:
                line = record if isinstance(record, str) else json.dumps(record)
                f.write(line + "\n")
        return path
    return _write


@pytest.fixture
def small_lexicon():
    """Four AFINN words, two positive and two negative."""
    return {"amazing": 4, "wonderful": 4, "terrible": -3, "awful": -3}
