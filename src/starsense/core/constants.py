"""Constants and configuration values for StarSense."""

# Pipeline Constants
class PipelineConstants:
    """Defaults used by the analysis pipeline."""

    DEFAULT_MAX_RECORDS = 200000  # lines read from the review file
    DEFAULT_MIN_REVIEWS = 200  # reviews a word must appear in
    DEFAULT_MIN_BUSINESSES = 10  # businesses a word must appear for

    REQUIRED_FIELDS = ("review_id", "business_id", "stars", "text")

    WORD_PATTERN = r"[a-z']+"  # tokens must match this entirely
    SPLIT_PATTERN = r"\.{2,}|[^\w'.]+"  # tokenizer splits on runs of these or on ellipses
    EDGE_CHARS = "'."  # stripped from both ends of a token
    TYPOGRAPHIC_APOSTROPHE = "’"

# Lexicon Constants
class LexiconConstants:
    """Constants for the polarity lexicon and stop words."""

    MIN_SCORE = -5
    MAX_SCORE = 5
    DEFAULT_AFINN_LANGUAGE = "en"
    NLTK_STOPWORDS_LANGUAGE = "english"

# Report Constants
class ReportConstants:
    """Constants for terminal output and plots."""

    EXTREME_WORDS = 10  # words listed at each end of the ranking
    SAMPLE_ROWS = 10  # rows shown when previewing a table
    PLOT_DPI = 150
    SENTIMENT_PLOT_FILE = "sentiment_by_stars.png"
    LEXICON_PLOT_FILE = "stars_by_afinn_score.png"

# File and Path Constants
class FileConstants:
    """Constants for file operations."""

    DEFAULT_REVIEW_FILE = "yelp_academic_dataset_review.json"
    DEFAULT_PLOT_DIR = "plots"
    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
