"""Tests for input loading and export."""

import json

import pytest

from reviewlens.core.exceptions import ReviewLensError
from reviewlens.core.report import analyze_reviews
from reviewlens.utils.data_prep import export_to_json, load_reviews, prepare_export, split_reviews


def test_split_reviews():
    text = "First review\n─────\n\n─────\n  Second review  "
    assert split_reviews(text) == ["First review", "Second review"]
    assert split_reviews("") == []


def test_load_reviews_json_strings(tmp_path):
    path = tmp_path / "reviews.json"
    path.write_text(json.dumps(["one", "two"]), encoding="utf-8")
    assert load_reviews(str(path)) == ["one", "two"]


def test_load_reviews_fetch_record(tmp_path):
    path = tmp_path / "fetched.json"
    record = {"platform": "appstore", "count": 2, "reviews": [{"text": "a b"}, {"text": None, "score": 1}]}
    path.write_text(json.dumps(record), encoding="utf-8")
    assert load_reviews(str(path)) == ["a b", ""]


def test_load_reviews_bad_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ReviewLensError):
        load_reviews(str(path))
    path.write_text(json.dumps({"reviews": "nope"}), encoding="utf-8")
    with pytest.raises(ReviewLensError):
        load_reviews(str(path))


def test_load_reviews_text_lines(tmp_path):
    path = tmp_path / "reviews.txt"
    path.write_text("first\n\n  second  \n", encoding="utf-8")
    assert load_reviews(str(path)) == ["first", "second"]


def test_load_reviews_delimited(tmp_path):
    path = tmp_path / "pasted.txt"
    path.write_text("multi\nline one\n─────\nsecond", encoding="utf-8")
    assert load_reviews(str(path)) == ["multi\nline one", "second"]


def test_load_reviews_missing(tmp_path):
    with pytest.raises(ReviewLensError):
        load_reviews(str(tmp_path / "missing.txt"))


def test_export_round_trip(tmp_path, scorer):
    report = analyze_reviews(["good app", "bad crash"], scorer=scorer)
    data = prepare_export(report, source="unit")
    assert data["metadata"]["export_timestamp"] is None

    out = tmp_path / "report.json"
    export_to_json(data, str(out))

    saved = json.loads(out.read_text(encoding="utf-8"))
    assert saved["metadata"]["source"] == "unit"
    assert saved["metadata"]["export_timestamp"]
    assert saved["sentiment"]["total"] == 2
    assert saved["rows"][0]["text"] == "bad crash"
