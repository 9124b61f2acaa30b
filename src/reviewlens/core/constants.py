"""Constants and configuration values for ReviewLens."""

# Sentiment Scoring Constants
class SentimentConstants:
    """Constants related to lexicon-based sentiment scoring."""
    
    # Label thresholds (exclusive: a score of exactly 1 or -1 is neutral)
    POSITIVE_THRESHOLD = 1
    NEGATIVE_THRESHOLD = -1
    
    # Rounding
    WORD_SCORE_DECIMALS = 1  # per-word weight after intensifier
    SCORE_DECIMALS = 2  # review score and corpus average
    COMPARATIVE_DECIMALS = 3  # score per token
    
    # Tokenization
    MIN_TOKEN_LENGTH = 2  # tokens of length <= 1 are dropped
    
    # Aggregation
    TOP_WORDS_LIMIT = 20  # most frequent scored words in a corpus
    
    # Display colours handed to the presentation layer
    LABEL_COLORS = {
        "positive": "#00e676",
        "negative": "#ff5252",
        "neutral": "#ffd740",
    }

# Problem Extraction Constants
class ProblemConstants:
    """Constants for keyword categorization and phrase mining."""
    
    MIN_NGRAM_WORD_LENGTH = 3  # words of length <= 2 are dropped before windowing
    MIN_PHRASE_COUNT = 2  # phrases seen fewer times are discarded
    MAX_BIGRAMS = 15  # top bigrams kept
    MAX_TRIGRAMS = 10  # top trigrams kept
    MIN_TRIGRAM_CONTENT_WORDS = 2  # non-stopwords required in a trigram

# Store Fetch Constants
class StoreConstants:
    """Constants for the app-store review fetch layer."""
    
    PLAYSTORE = "playstore"
    APPSTORE = "appstore"
    
    PLAYSTORE_HOSTS = ("play.google.com",)
    APPSTORE_HOSTS = ("apps.apple.com", "itunes.apple.com")
    
    APPSTORE_FEED_URL = (
        "https://itunes.apple.com/{country}/rss/customerreviews/"
        "page={page}/id={app_id}/sortby=mostrecent/json"
    )
    APPSTORE_FEED_TITLE = "iTunes Store"  # feed metadata entry, not a review
    ANONYMOUS_AUTHOR = "Anonymous"

# Input Constants
class InputConstants:
    """Constants for reading review corpora."""
    
    REVIEW_DELIMITER = "─────"  # separator between pasted reviews

# File and Path Constants
class FileConstants:
    """Constants for file operations."""
    
    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    EXPORT_VERSION = "1.0.0"
