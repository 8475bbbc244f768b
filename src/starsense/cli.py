"""Command-line interface for StarSense."""

import argparse
import logging
import subprocess
import sys
from pathlib import Path

from .core.config import settings
from .core.constants import FileConstants, ReportConstants
from .core.errors import StarSenseError
from .core.models import WordSummary
from .core.pipeline import run_analysis
from .core.scoring import rank_words
from .services.lexicon import load_resources
from .services.review_loader import load_reviews
from .ui.plots import describe_by_group, save_plots
from .utils.data_prep import export_to_csv, export_to_json, prepare_export, result_tables, to_dataframe

logger = logging.getLogger(__name__)


def _positive_int(value):
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return number


def setup_logging(level: str = None):
    """Setup logging configuration."""
    logging.basicConfig(
        level=getattr(logging, (level or settings.log_level).upper(), logging.INFO),
        format=FileConstants.LOG_FORMAT
    )


def _run(args):
    """Load resources and reviews, then run the pipeline."""
    lexicon, stop_words = load_resources(args.lexicon, args.stop_words, settings.afinn_language)
    reviews = load_reviews(
        args.input,
        max_records=args.max_records,
        skip_malformed=args.skip_malformed,
        show_progress=settings.show_progress and not args.no_progress,
    )
    return run_analysis(
        reviews, stop_words, lexicon,
        min_reviews=args.min_reviews,
        min_businesses=args.min_businesses,
        source=str(args.input),
    )


def _print_words(title, words):
    print(f"\n{title}:")
    if not words:
        print("  (none)")
    for i, w in enumerate(words, 1):
        print(f"  {i:2d}. {w.word:<15} {w.average_stars:.2f} stars "
              f"({w.reviews} reviews, {w.businesses} businesses, {w.uses} uses)")


def cmd_analyze(args):
    """Analyze command."""
    print(f"Analyzing up to {args.max_records} reviews from {args.input}...")
    result = _run(args)
    tables = result_tables(result)

    print(f"Loaded {result.reviews_loaded} reviews, kept {result.tokens_kept} tokens, "
          f"scored {result.tokens_scored}")

    sentiment = tables["review_sentiment"]
    refined = tables["refined_lexicon"]

    if sentiment.empty:
        logger.warning("No review contains a lexicon word; review sentiment table is empty")
    else:
        print("\nSentiment by star rating:")
        print(describe_by_group(sentiment, "stars", "sentiment").round(3).to_string())

    if refined.empty:
        logger.warning(f"No lexicon word meets reviews >= {args.min_reviews} "
                       f"and businesses >= {args.min_businesses}")
    else:
        print("\nAverage stars by AFINN score:")
        print(describe_by_group(refined, "score", "average_stars").round(3).to_string())

    if not args.no_plots:
        for path in save_plots(sentiment, refined, args.plot_dir):
            print(f"Plot written to {path}")

    if args.out:
        params = {
            "max_records": args.max_records,
            "min_reviews": args.min_reviews,
            "min_businesses": args.min_businesses,
        }
        export_to_json(prepare_export(result, params), args.out)
        print(f"Results exported to {args.out}")

    if args.csv_dir:
        for path in export_to_csv(result, args.csv_dir):
            print(f"Table written to {path}")


def cmd_words(args):
    """Words command: most positive and most negative supported words."""
    result = _run(args)
    summaries = result.word_summaries
    print(f"{len(summaries)} words appear in at least {args.min_reviews} reviews "
          f"of at least {args.min_businesses} businesses")

    _print_words("Most positive words", rank_words(summaries, args.top))
    _print_words("Most negative words", rank_words(summaries, args.top, ascending=True))

    if args.verbose:
        frame = to_dataframe(summaries, WordSummary)
        print()
        print(frame.head(ReportConstants.SAMPLE_ROWS).to_string(index=False))


def cmd_ui(args):
    """UI command."""
    app_path = Path(__file__).parent / "ui" / "streamlit_app.py"

    if not app_path.exists():
        print(f"Streamlit app not found at {app_path}")
        return

    print("Launching StarSense UI...")
    try:
        subprocess.run([
            sys.executable, "-m", "streamlit", "run", str(app_path)
        ], check=True)
    except subprocess.CalledProcessError as e:
        print(f"Failed to launch UI: {e}")
    except KeyboardInterrupt:
        print("\nUI stopped by user")


def _add_run_arguments(parser):
    parser.add_argument('--input', default=settings.review_file, help='Line-delimited JSON review file')
    parser.add_argument('--max-records', type=_positive_int, default=settings.max_records, help='Maximum review lines to read')
    parser.add_argument('--min-reviews', type=int, default=settings.min_reviews, help='Minimum reviews per word')
    parser.add_argument('--min-businesses', type=int, default=settings.min_businesses, help='Minimum businesses per word')
    parser.add_argument('--lexicon', default=settings.lexicon_file, help='Tab-separated word/score lexicon file')
    parser.add_argument('--stop-words', default=settings.stop_words_file, help='Stop word file, one word per line')
    parser.add_argument('--skip-malformed', action='store_true', default=settings.skip_malformed,
                        help='Skip malformed lines instead of aborting')
    parser.add_argument('--no-progress', action='store_true', help='Hide the progress bar')


def build_parser():
    """Build the argument parser."""
    parser = argparse.ArgumentParser(description="StarSense - Review sentiment vs. star rating")
    parser.add_argument('--log-level', default=settings.log_level, help='Logging level')
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Analyze command
    analyze_parser = subparsers.add_parser('analyze', help='Score reviews and compare with star ratings')
    _add_run_arguments(analyze_parser)
    analyze_parser.add_argument('--plot-dir', default=settings.plot_dir, help='Directory for plots')
    analyze_parser.add_argument('--no-plots', action='store_true', help='Do not render plots')
    analyze_parser.add_argument('--out', help='Output JSON file')
    analyze_parser.add_argument('--csv-dir', help='Directory for CSV tables')

    # Words command
    words_parser = subparsers.add_parser('words', help='List the most positive and negative words')
    _add_run_arguments(words_parser)
    words_parser.add_argument('--top', type=int, default=ReportConstants.EXTREME_WORDS, help='Words per list')
    words_parser.add_argument('--verbose', action='store_true', help='Also print the word summary table')

    # UI command
    subparsers.add_parser('ui', help='Launch web UI')

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return

    setup_logging(args.log_level)

    try:
        if args.command == 'analyze':
            cmd_analyze(args)
        elif args.command == 'words':
            cmd_words(args)
        elif args.command == 'ui':
            cmd_ui(args)
    except KeyboardInterrupt:
        print("\nOperation cancelled by user")
    except StarSenseError as e:
        logger.error(f"Command failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
