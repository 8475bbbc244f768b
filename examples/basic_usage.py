"""Basic usage examples for StarSense."""

import sys

from starsense import load_resources, load_reviews, run_analysis
from starsense.core.models import Review
from starsense.core.scoring import rank_words
from starsense.ui.plots import describe_by_group, save_plots
from starsense.utils.data_prep import result_tables


def example_in_memory():
    """Example: score a handful of reviews against a small lexicon."""
    print("🔍 Scoring two reviews in memory")

    reviews = [
        Review("r1", "b1", 5, "Amazing, wonderful food"),
        Review("r2", "b2", 1, "Terrible and awful service"),
    ]
    lexicon = {"amazing": 4, "wonderful": 4, "terrible": -3, "awful": -3}

    result = run_analysis(reviews, frozenset({"and"}), lexicon, min_reviews=1, min_businesses=1)
    for row in result.review_sentiment:
        print(f"  {row.review_id}: {row.stars} stars, sentiment {row.sentiment:+.2f}")


def example_yelp_file(path):
    """Example: the full analysis on a Yelp review file with AFINN and NLTK stop words."""
    print(f"\n🔍 Analyzing {path}")

    lexicon, stop_words = load_resources()
    reviews = load_reviews(path, max_records=200000)
    print(f"📊 Loaded {len(reviews)} reviews")

    result = run_analysis(reviews, stop_words, lexicon, min_reviews=200, min_businesses=10)
    tables = result_tables(result)

    print(describe_by_group(tables["review_sentiment"], "stars", "sentiment").round(2))

    print("🏆 Most positive words:")
    for w in rank_words(result.word_summaries, 5):
        print(f"  {w.word}: {w.average_stars:.2f}")

    print("👎 Most negative words:")
    for w in rank_words(result.word_summaries, 5, ascending=True):
        print(f"  {w.word}: {w.average_stars:.2f}")

    save_plots(tables["review_sentiment"], tables["refined_lexicon"], "plots")


if __name__ == "__main__":
    example_in_memory()
    if len(sys.argv) > 1:
        example_yelp_file(sys.argv[1])
