"""Basic usage examples for ReviewLens."""

from reviewlens import ProblemExtractor, SentimentScorer, StoreReviewService, analyze_reviews
from reviewlens.core.lexicon import Lexicon
from reviewlens.samples import SAMPLE_REVIEWS

def example_sample_report():
    """Example: Full report over the built-in Play Store sample."""
    print("🔍 Analyzing built-in Play Store sample")
    
    reviews = SAMPLE_REVIEWS["playstore"]
    report = analyze_reviews(reviews)
    
    sentiment = report.sentiment
    print(f"📊 {sentiment.total} reviews: {sentiment.positive} positive, "
          f"{sentiment.neutral} neutral, {sentiment.negative} negative")
    print(f"📈 Average score: {sentiment.average_score:+.2f}")
    
    print(f"🧩 {report.problems.reviews_with_problems} reviews mention a problem:")
    for match in report.problems.categories[:5]:
        print(f"  {match.icon} {match.name}: {match.review_count} reviews")

def example_custom_lexicon():
    """Example: Scoring with a hand-made lexicon."""
    print("\n🔍 Scoring with a custom lexicon")
    
    scorer = SentimentScorer(Lexicon({"snappy": 3, "clunky": -2}, name="ux"))
    for text in ["Snappy and clean", "Not snappy at all", "Very clunky menus"]:
        result = scorer.score_review(text)
        print(f"  {result.score:+.1f} {result.label.value:<8} {text}")

def example_phrases_only():
    """Example: Mining recurring phrases without sentiment."""
    print("\n🔍 Recurring phrases in the App Store sample")
    
    phrases = ProblemExtractor().mine_recurring_phrases(SAMPLE_REVIEWS["appstore"])
    for p in phrases.bigrams + phrases.trigrams:
        print(f"  \"{p.phrase}\" x{p.count}")

def example_store_fetch(url: str):
    """Example: Fetch a live listing and analyze it."""
    print(f"\n🔍 Fetching {url}")
    
    result = StoreReviewService().fetch(url)
    print(f"📥 Fetched {result.count} {result.platform} reviews")
    report = analyze_reviews(result.texts)
    print(f"📈 Average score: {report.sentiment.average_score:+.2f}")

if __name__ == "__main__":
    example_sample_report()
    example_custom_lexicon()
    example_phrases_only()
