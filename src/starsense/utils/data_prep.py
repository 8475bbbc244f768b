"""Data preparation for export."""

import json
from dataclasses import asdict, fields
from pathlib import Path
from typing import Dict, Any, List, Type

import pandas as pd

from ..core.models import AnalysisResult, RefinedWord, ReviewSentiment, WordSummary


def to_dataframe(rows: List[Any], row_type: Type) -> pd.DataFrame:
    """Convert a list of dataclass rows into a DataFrame.

    Columns follow the dataclass field order even when ``rows`` is empty.
    """
    columns = [f.name for f in fields(row_type)]
    return pd.DataFrame([asdict(r) for r in rows], columns=columns)


def result_tables(result: AnalysisResult) -> Dict[str, pd.DataFrame]:
    """All output tables of a run, keyed by table name."""
    return {
        "review_sentiment": to_dataframe(result.review_sentiment, ReviewSentiment),
        "refined_lexicon": to_dataframe(result.refined_lexicon, RefinedWord),
        "word_summaries": to_dataframe(result.word_summaries, WordSummary),
    }


def prepare_export(result: AnalysisResult, params: Dict[str, Any]) -> Dict[str, Any]:
    """Prepare a run's tables and parameters for JSON export."""
    return {
        "source": result.source,
        "parameters": params,
        "counts": {
            "reviews_loaded": result.reviews_loaded,
            "tokens_kept": result.tokens_kept,
            "tokens_scored": result.tokens_scored,
            "reviews_with_sentiment": len(result.review_sentiment),
            "supported_words": len(result.word_summaries),
            "refined_words": len(result.refined_lexicon),
        },
        "review_sentiment": [asdict(r) for r in result.review_sentiment],
        "refined_lexicon": [asdict(r) for r in result.refined_lexicon],
        "metadata": {
            "export_timestamp": None,  # Will be set by caller
            "version": "0.1.0"
        }
    }


def export_to_json(data: Dict[str, Any], filename: str) -> None:
    """Export data to JSON file."""
    import datetime

    # Add timestamp
    data["metadata"]["export_timestamp"] = datetime.datetime.now().isoformat()

    with open(filename, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=2, ensure_ascii=False)


def export_to_csv(result: AnalysisResult, directory: str) -> List[Path]:
    """Write each result table to ``<directory>/<table>.csv``."""
    out_dir = Path(directory)
    out_dir.mkdir(parents=True, exist_ok=True)
    written = []
    for name, frame in result_tables(result).items():
        path = out_dir / f"{name}.csv"
        frame.to_csv(path, index=False)
        written.append(path)
    return written
