"""App store review fetching for ReviewLens."""

import logging
import re
from typing import List, Optional, Tuple

import requests
from google_play_scraper import Sort, reviews as playstore_reviews

from ..core.config import settings
from ..core.constants import StoreConstants
from ..core.exceptions import InvalidStoreUrlError, NoReviewsFoundError, ReviewFetchError
from ..core.models import FetchResult, StoreReview

logger = logging.getLogger(__name__)

_PLAYSTORE_ID = re.compile(r"[?&]id=([a-zA-Z0-9._]+)")
_APPSTORE_ID = re.compile(r"/id(\d+)")
_NEWLINES = re.compile(r"[\r\n]+")


def detect_platform(url: str) -> Optional[str]:
    """Return ``playstore``, ``appstore`` or None for an unsupported URL."""
    if any(host in url for host in StoreConstants.PLAYSTORE_HOSTS):
        return StoreConstants.PLAYSTORE
    if any(host in url for host in StoreConstants.APPSTORE_HOSTS):
        return StoreConstants.APPSTORE
    return None


def parse_playstore_id(url: str) -> Optional[str]:
    match = _PLAYSTORE_ID.search(url)
    return match.group(1) if match else None


def parse_appstore_id(url: str) -> Optional[str]:
    match = _APPSTORE_ID.search(url)
    return match.group(1) if match else None


def clean_review_text(text: Optional[str]) -> str:
    """Collapse line breaks to single spaces and trim."""
    return _NEWLINES.sub(" ", text or "").strip()


def _parse_rating(value) -> Optional[int]:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


class StoreReviewService:
    """Fetches reviews from Google Play and the Apple App Store."""

    def __init__(self, country: str = None, lang: str = None, timeout: float = None):
        self.country = country or settings.store_country
        self.lang = lang or settings.store_lang
        self.timeout = timeout or settings.request_timeout
        self.session = requests.Session()

    def fetch(self, url: str) -> FetchResult:
        """Fetch reviews for a store listing URL.

        Raises:
            InvalidStoreUrlError: URL is not a supported store link or has no app id
            NoReviewsFoundError: The store returned no reviews
            ReviewFetchError: Network or scraper failure
        """
        url = (url or "").strip()
        if not url:
            raise InvalidStoreUrlError("Please paste a Play Store or App Store URL.")

        platform = detect_platform(url)
        if platform is None:
            raise InvalidStoreUrlError(
                "Invalid URL. Please provide a Google Play Store or Apple App Store link."
            )

        if platform == StoreConstants.PLAYSTORE:
            app_id = parse_playstore_id(url)
            if not app_id:
                raise InvalidStoreUrlError("Could not extract app ID from Play Store URL.")
            result = self.fetch_playstore(app_id)
        else:
            app_id = parse_appstore_id(url)
            if not app_id:
                raise InvalidStoreUrlError("Could not extract app ID from App Store URL.")
            result = self.fetch_appstore(app_id)

        if not result.reviews:
            raise NoReviewsFoundError(
                "No reviews found for this app. The app may have no reviews, or the URL might be incorrect."
            )

        logger.info(f"Fetched {result.count} {platform} reviews for {app_id}")
        return result

    def fetch_playstore(self, app_id: str, count: int = None) -> FetchResult:
        """Newest Google Play reviews for ``app_id``."""
        count = count or settings.playstore_review_count
        logger.info(f"Fetching Play Store reviews for: {app_id}")
        try:
            raw, token = playstore_reviews(
                app_id,
                lang=self.lang,
                country=self.country,
                sort=Sort.NEWEST,
                count=count,
            )
        except Exception as e:
            logger.error(f"Play Store fetch failed for {app_id}: {e}")
            raise ReviewFetchError("Failed to fetch reviews. Please check the URL and try again.") from e

        reviews = []
        for item in raw:
            at = item.get("at")
            reviews.append(StoreReview(
                text=clean_review_text(item.get("content")),
                score=item.get("score"),
                author=item.get("userName"),
                date=at.isoformat() if hasattr(at, "isoformat") else at,
            ))

        has_more = bool(getattr(token, "token", None))
        return FetchResult(platform=StoreConstants.PLAYSTORE, reviews=reviews, has_more=has_more)

    def fetch_appstore(self, app_id: str, max_pages: int = None) -> FetchResult:
        """Most recent App Store reviews from the iTunes RSS feed.

        Pages are read in order until one fails, has no entries, or the
        page limit is reached.
        """
        max_pages = max_pages or settings.appstore_max_pages
        logger.info(f"Fetching App Store reviews for ID: {app_id}")

        reviews: List[StoreReview] = []
        has_more = False
        next_page = None
        for page in range(1, max_pages + 1):
            entries, ok = self._fetch_appstore_page(app_id, page)
            if not ok:
                break
            reviews.extend(entries)
            if page == max_pages:
                has_more = True
                next_page = page + 1

        return FetchResult(
            platform=StoreConstants.APPSTORE,
            reviews=reviews,
            has_more=has_more,
            next_page=next_page,
        )

    def _fetch_appstore_page(self, app_id: str, page: int) -> Tuple[List[StoreReview], bool]:
        feed_url = StoreConstants.APPSTORE_FEED_URL.format(country=self.country, page=page, app_id=app_id)
        try:
            response = self.session.get(feed_url, timeout=self.timeout)
        except requests.RequestException as e:
            logger.warning(f"App Store page {page} request failed: {e}")
            return [], False

        if response.status_code != 200:
            logger.debug(f"App Store page {page} returned {response.status_code}")
            return [], False

        try:
            data = response.json()
        except ValueError as e:
            logger.warning(f"App Store page {page} is not valid JSON: {e}")
            return [], False

        if not isinstance(data, dict):
            logger.warning(f"App Store page {page} has an unexpected payload")
            return [], False

        entries = (data.get("feed") or {}).get("entry")
        if not entries or not isinstance(entries, list):
            return [], False

        reviews = []
        for entry in entries:
            content = (entry.get("content") or {}).get("label")
            title = (entry.get("title") or {}).get("label")
            if not content or title == StoreConstants.APPSTORE_FEED_TITLE:
                continue
            rating = (entry.get("im:rating") or {}).get("label")
            author = ((entry.get("author") or {}).get("name") or {}).get("label")
            raw_text = f"{title} - {content}" if title else content
            reviews.append(StoreReview(
                text=clean_review_text(raw_text),
                score=_parse_rating(rating),
                author=author or StoreConstants.ANONYMOUS_AUTHOR,
            ))
        return reviews, True
