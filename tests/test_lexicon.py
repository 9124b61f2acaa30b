"""Tests for lexicon loading and immutability."""

import pytest

from reviewlens.core.exceptions import LexiconLoadError
from reviewlens.core.lexicon import INTENSIFIERS, NEGATION_WORDS, Lexicon, load_lexicon


class TestLexicon:
    """Test the read-only lexicon object."""

    def test_lookup(self, small_lexicon):
        assert "good" in small_lexicon
        assert small_lexicon["bad"] == -3
        assert small_lexicon.get("missing") is None
        assert len(small_lexicon) == 9

    def test_weights_are_read_only(self, small_lexicon):
        with pytest.raises(TypeError):
            small_lexicon.weights["good"] = 5

    def test_source_mapping_is_copied(self):
        source = {"good": 3}
        lexicon = Lexicon(source)
        source["good"] = -3
        source["new"] = 1
        assert lexicon["good"] == 3
        assert "new" not in lexicon

    def test_default_modifiers(self, small_lexicon):
        assert small_lexicon.is_negation("doesn't")
        assert small_lexicon.is_negation("never")
        assert not small_lexicon.is_negation("very")
        assert small_lexicon.multiplier("extremely") == 2.0
        assert small_lexicon.multiplier("slightly") == 0.5
        assert small_lexicon.multiplier("good") is None

    def test_modifier_lists(self):
        assert len(NEGATION_WORDS) == 20
        assert len(INTENSIFIERS) == 14
        with pytest.raises(TypeError):
            INTENSIFIERS["mega"] = 3.0

    def test_custom_modifiers(self):
        lexicon = Lexicon({"good": 3}, negations=frozenset({"nah"}), intensifiers={"mega": 3.0})
        assert lexicon.is_negation("nah")
        assert not lexicon.is_negation("not")
        assert lexicon.multiplier("mega") == 3.0


class TestLoaders:
    """Test lexicon sources."""

    def test_from_file(self, tmp_path):
        path = tmp_path / "words.tsv"
        path.write_text("# comment\nGood\t3\n\nmeh\t-1.5\ncan't stand\t-3\n", encoding="utf-8")
        lexicon = Lexicon.from_file(str(path))
        assert lexicon.name == "words"
        assert lexicon["good"] == 3
        assert isinstance(lexicon["good"], int)
        assert lexicon["meh"] == -1.5
        assert lexicon["can't stand"] == -3

    def test_from_file_missing(self, tmp_path):
        with pytest.raises(LexiconLoadError):
            Lexicon.from_file(str(tmp_path / "nope.tsv"))

    def test_from_file_malformed(self, tmp_path):
        path = tmp_path / "bad.tsv"
        path.write_text("good 3\n", encoding="utf-8")
        with pytest.raises(LexiconLoadError):
            Lexicon.from_file(str(path))

    def test_from_file_bad_weight(self, tmp_path):
        path = tmp_path / "bad.tsv"
        path.write_text("good\tlots\n", encoding="utf-8")
        with pytest.raises(LexiconLoadError):
            Lexicon.from_file(str(path))

    def test_load_lexicon_file(self, tmp_path):
        path = tmp_path / "words.tsv"
        path.write_text("good\t3\n", encoding="utf-8")
        assert load_lexicon("file", str(path))["good"] == 3

    def test_load_lexicon_file_without_path(self):
        with pytest.raises(LexiconLoadError):
            load_lexicon("file")

    def test_load_lexicon_unknown(self):
        with pytest.raises(LexiconLoadError):
            load_lexicon("klingon")

    def test_afinn(self):
        lexicon = load_lexicon("afinn")
        assert lexicon.name == "afinn"
        assert lexicon["good"] == 3
        assert lexicon["terrible"] == -3
        assert len(lexicon) > 3000
        assert all(isinstance(v, int) for v in lexicon.weights.values())

    def test_afinn_unknown_language(self):
        with pytest.raises(LexiconLoadError):
            Lexicon.from_afinn(language="xx")

    def test_vader(self):
        lexicon = load_lexicon("vader")
        assert lexicon.name == "vader"
        assert lexicon["good"] > 0
        assert lexicon["terrible"] < 0
