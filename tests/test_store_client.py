"""Test store URL parsing and review fetching."""

import datetime

import pytest
import requests
from unittest.mock import Mock, patch

from reviewlens.core.exceptions import InvalidStoreUrlError, NoReviewsFoundError, ReviewFetchError
from reviewlens.services.store_client import (
    StoreReviewService,
    clean_review_text,
    detect_platform,
    parse_appstore_id,
    parse_playstore_id,
)

PLAY_URL = "https://play.google.com/store/apps/details?id=com.example.app&hl=en"
APPLE_URL = "https://apps.apple.com/us/app/example/id123456789"


def _feed_response(entries, status_code=200):
    response = Mock()
    response.status_code = status_code
    response.json.return_value = {"feed": {"entry": entries}} if entries is not None else {"feed": {}}
    return response


def _entry(title, content, rating="4", author="sam"):
    return {
        "title": {"label": title},
        "content": {"label": content},
        "im:rating": {"label": rating},
        "author": {"name": {"label": author}},
    }


class TestUrlParsing:
    """Test platform detection and id extraction."""

    def test_detect_platform(self):
        assert detect_platform(PLAY_URL) == "playstore"
        assert detect_platform(APPLE_URL) == "appstore"
        assert detect_platform("https://itunes.apple.com/app/id42") == "appstore"
        assert detect_platform("https://example.com/app") is None

    def test_parse_ids(self):
        assert parse_playstore_id(PLAY_URL) == "com.example.app"
        assert parse_playstore_id("https://play.google.com/store/apps") is None
        assert parse_appstore_id(APPLE_URL) == "123456789"
        assert parse_appstore_id("https://apps.apple.com/us/app/example") is None

    def test_clean_review_text(self):
        assert clean_review_text("  line one\r\n\nline two ") == "line one line two"
        assert clean_review_text(None) == ""


class TestFetch:
    """Test StoreReviewService with mocked collaborators."""

    def setup_method(self):
        """Set up test instance."""
        self.service = StoreReviewService(country="us", lang="en", timeout=1)

    @pytest.mark.parametrize("url", ["", "   ", "https://example.com/app"])
    def test_invalid_url(self, url):
        with pytest.raises(InvalidStoreUrlError):
            self.service.fetch(url)

    def test_missing_app_id(self):
        with pytest.raises(InvalidStoreUrlError, match="Play Store"):
            self.service.fetch("https://play.google.com/store/apps/details")
        with pytest.raises(InvalidStoreUrlError, match="App Store"):
            self.service.fetch("https://apps.apple.com/us/app/example")

    @patch("reviewlens.services.store_client.playstore_reviews")
    def test_playstore(self, mock_reviews):
        token = Mock(token="next")
        mock_reviews.return_value = ([
            {"content": "Great app\nreally", "score": 5, "userName": "ana",
             "at": datetime.datetime(2024, 6, 1, 12, 0)},
            {"content": None, "score": 1, "userName": "bo", "at": None},
        ], token)

        result = self.service.fetch(PLAY_URL)

        assert result.platform == "playstore"
        assert result.count == 2
        assert result.texts == ["Great app really", ""]
        assert result.reviews[0].date == "2024-06-01T12:00:00"
        assert result.has_more is True
        assert mock_reviews.call_args[0][0] == "com.example.app"

    @patch("reviewlens.services.store_client.playstore_reviews")
    def test_playstore_failure(self, mock_reviews):
        mock_reviews.side_effect = RuntimeError("blocked")
        with pytest.raises(ReviewFetchError):
            self.service.fetch(PLAY_URL)

    @patch("reviewlens.services.store_client.playstore_reviews")
    def test_playstore_no_reviews(self, mock_reviews):
        mock_reviews.return_value = ([], None)
        with pytest.raises(NoReviewsFoundError):
            self.service.fetch(PLAY_URL)

    def test_appstore_pages(self):
        self.service.session = Mock()
        self.service.session.get.side_effect = [
            _feed_response([
                _entry("iTunes Store", "feed metadata"),
                _entry("Love it", "Works\nwell", rating="5"),
                _entry("", "No title here", rating="2", author=None),
            ]),
            _feed_response(None),
        ]

        result = self.service.fetch(APPLE_URL)

        assert result.platform == "appstore"
        assert result.texts == ["Love it - Works well", "No title here"]
        assert result.reviews[0].score == 5
        assert result.reviews[1].author == "Anonymous"
        assert result.has_more is False
        assert self.service.session.get.call_count == 2
        first_url = self.service.session.get.call_args_list[0][0][0]
        assert "page=1/id=123456789" in first_url

    def test_appstore_stops_on_http_error(self):
        self.service.session = Mock()
        self.service.session.get.return_value = _feed_response([], status_code=404)
        with pytest.raises(NoReviewsFoundError):
            self.service.fetch(APPLE_URL)
        assert self.service.session.get.call_count == 1

    def test_appstore_network_error(self):
        self.service.session = Mock()
        self.service.session.get.side_effect = requests.ConnectionError("down")
        with pytest.raises(NoReviewsFoundError):
            self.service.fetch(APPLE_URL)

    def test_appstore_page_limit(self):
        self.service.session = Mock()
        self.service.session.get.return_value = _feed_response([_entry("Ok", "fine")])
        result = self.service.fetch_appstore("42", max_pages=3)
        assert result.count == 3
        assert result.has_more is True
        assert result.next_page == 4
        assert result.to_dict()["hasMore"] is True

    def test_appstore_list_payload(self):
        response = Mock(status_code=200)
        response.json.return_value = [{"feed": {}}]
        self.service.session = Mock()
        self.service.session.get.return_value = response
        with pytest.raises(NoReviewsFoundError):
            self.service.fetch(APPLE_URL)
        assert self.service.session.get.call_count == 1

    def test_appstore_non_numeric_rating(self):
        self.service.session = Mock()
        self.service.session.get.side_effect = [
            _feed_response([_entry("Meh", "Odd rating", rating="five"), _entry("Ok", "fine", rating=None)]),
            _feed_response(None),
        ]
        result = self.service.fetch(APPLE_URL)
        assert [r.score for r in result.reviews] == [None, None]
        assert result.texts == ["Meh - Odd rating", "Ok - fine"]
