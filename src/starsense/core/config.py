"""Configuration management for StarSense."""

from typing import Optional
from pydantic_settings import BaseSettings
from pydantic import Field

from .constants import PipelineConstants, LexiconConstants, FileConstants


class Settings(BaseSettings):
    """Application settings."""

    # Input files
    review_file: str = Field(FileConstants.DEFAULT_REVIEW_FILE, description="Line-delimited JSON review file")
    lexicon_file: Optional[str] = Field(None, description="Tab-separated word/score lexicon (defaults to AFINN)")
    stop_words_file: Optional[str] = Field(None, description="One stop word per line (defaults to NLTK English)")
    afinn_language: str = Field(LexiconConstants.DEFAULT_AFINN_LANGUAGE, description="AFINN lexicon language")

    # Logging
    log_level: str = Field("INFO", description="Logging level")

    # Analysis settings
    max_records: int = Field(PipelineConstants.DEFAULT_MAX_RECORDS, ge=1, description="Maximum number of review lines to read")
    min_reviews: int = Field(PipelineConstants.DEFAULT_MIN_REVIEWS, ge=0, description="Minimum reviews a word must appear in")
    min_businesses: int = Field(PipelineConstants.DEFAULT_MIN_BUSINESSES, ge=0, description="Minimum businesses a word must appear for")
    skip_malformed: bool = Field(False, description="Skip malformed review lines instead of aborting")
    show_progress: bool = Field(True, description="Show a progress bar while loading reviews")

    # Output
    plot_dir: str = Field(FileConstants.DEFAULT_PLOT_DIR, description="Directory for generated plots")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


# Global settings instance
settings = Settings()
