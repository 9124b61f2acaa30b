"""Command-line interface for ReviewLens."""

import argparse
import json
import logging
import sys

from .core.config import settings
from .core.constants import FileConstants, StoreConstants
from .core.exceptions import ReviewLensError
from .core.report import analyze_reviews
from .samples import SAMPLE_REVIEWS
from .services.store_client import StoreReviewService
from .utils.data_prep import export_to_json, load_reviews, prepare_export

logger = logging.getLogger(__name__)


def setup_logging():
    """Setup logging configuration."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format=FileConstants.LOG_FORMAT
    )


def _collect_reviews(args):
    """Resolve the review corpus from --file, --url or --sample."""
    if args.file:
        return load_reviews(args.file), args.file
    if args.url:
        result = StoreReviewService().fetch(args.url)
        label = "App Store" if result.platform == StoreConstants.APPSTORE else "Play Store"
        print(f"Fetched {result.count} reviews from {label}")
        return result.texts, args.url
    return list(SAMPLE_REVIEWS[args.sample]), f"sample:{args.sample}"


def cmd_analyze(args):
    """Analyze command."""
    reviews, source = _collect_reviews(args)
    print(f"Analyzing {len(reviews)} reviews from {source}...")

    report = analyze_reviews(reviews, min_reviews=args.min_reviews)
    sentiment = report.sentiment
    problems = report.problems

    if args.out:
        export_to_json(prepare_export(report, source), args.out)
        print(f"Results exported to {args.out}")

    print(f"\nSentiment Summary:")
    print(f"  Total: {sentiment.total}")
    print(f"  Positive: {sentiment.positive}  Neutral: {sentiment.neutral}  Negative: {sentiment.negative}")
    print(f"  Average score: {sentiment.average_score:+.2f}")
    if sentiment.most_negative:
        print(f"  Most negative ({sentiment.most_negative.score:+.2f}): {sentiment.most_negative.text[:100]}")
    if sentiment.most_positive:
        print(f"  Most positive ({sentiment.most_positive.score:+.2f}): {sentiment.most_positive.text[:100]}")

    print(f"\nProblems: {problems.reviews_with_problems}/{problems.total_reviews} reviews")
    for match in problems.categories[:5]:
        top_keywords = sorted(match.matched_keywords.items(), key=lambda kv: kv[1], reverse=True)[:3]
        keywords = ", ".join(f"{kw} ({n})" for kw, n in top_keywords)
        print(f"  {match.icon} {match.name}: {match.review_count} reviews [{keywords}]")

    phrases = problems.recurring_phrases
    if phrases.bigrams or phrases.trigrams:
        print(f"\nRecurring phrases:")
        for p in phrases.trigrams[:5] + phrases.bigrams[:5]:
            print(f"  \"{p.phrase}\" x{p.count}")


def cmd_fetch(args):
    """Fetch command."""
    result = StoreReviewService().fetch(args.url)
    print(f"Fetched {result.count} reviews from {result.platform}")

    if args.out:
        with open(args.out, 'w', encoding='utf-8') as f:
            json.dump(result.to_dict(), f, indent=2, ensure_ascii=False)
        print(f"Reviews saved to {args.out}")
    elif result.reviews:
        print("\nSample review:")
        sample = result.reviews[0]
        print(f"Author: {sample.author}")
        print(f"Rating: {sample.score}")
        print(f"Text: {sample.text[:100]}...")


def cmd_export(args):
    """Export command."""
    try:
        with open(args.input_file, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except FileNotFoundError:
        raise ReviewLensError(f"Input file {args.input_file} not found")
    except json.JSONDecodeError as e:
        raise ReviewLensError(f"Invalid JSON in input file: {e}")

    if args.pretty:
        print(json.dumps(data, indent=2, ensure_ascii=False))
    else:
        output_file = args.output or args.input_file.replace('.json', '_export.json')
        with open(output_file, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
        print(f"Exported to {output_file}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="ReviewLens - App Review Sentiment & Problem Analysis")
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Analyze command
    analyze_parser = subparsers.add_parser('analyze', help='Analyze reviews')
    source = analyze_parser.add_mutually_exclusive_group()
    source.add_argument('--file', help='Reviews file (.json, delimited text, or one per line)')
    source.add_argument('--url', help='Google Play or App Store listing URL')
    source.add_argument('--sample', choices=sorted(SAMPLE_REVIEWS), default='playstore',
                        help='Built-in sample corpus (default: playstore)')
    analyze_parser.add_argument('--out', help='Output JSON file')
    analyze_parser.add_argument('--min-reviews', type=int, default=None,
                                help=f'Minimum reviews required (default: {settings.min_reviews})')

    # Fetch command
    fetch_parser = subparsers.add_parser('fetch', help='Fetch reviews from a store listing')
    fetch_parser.add_argument('url', help='Google Play or App Store listing URL')
    fetch_parser.add_argument('--out', help='Output JSON file')

    # Export command
    export_parser = subparsers.add_parser('export', help='Export analysis results')
    export_parser.add_argument('--in', dest='input_file', required=True, help='Input JSON file')
    export_parser.add_argument('--out', dest='output', help='Output file (optional)')
    export_parser.add_argument('--pretty', action='store_true', help='Pretty print to stdout')

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return

    setup_logging()

    try:
        if args.command == 'analyze':
            cmd_analyze(args)
        elif args.command == 'fetch':
            cmd_fetch(args)
        elif args.command == 'export':
            cmd_export(args)
    except KeyboardInterrupt:
        print("\nOperation cancelled by user")
    except ReviewLensError as e:
        logger.error(f"Command failed: {e}")
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
