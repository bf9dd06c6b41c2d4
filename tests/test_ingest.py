"""Tests for the ingest module."""

import pytest
import tempfile
from pathlib import Path

from lexistack.ingest import (
    INGESTORS,
    get_ingestor,
    ingest_bigrams,
    register_ingestor,
)
from lexistack.ingest.base import Ingestor, IngestResult, parse_frequency
from lexistack.ingest.hunspell import HunspellIngestor
from lexistack.ingest.plain_text import PlainTextIngestor


def write_temp(content: str, suffix: str) -> Path:
    with tempfile.NamedTemporaryFile(
        mode="w", suffix=suffix, delete=False, encoding="utf-8"
    ) as f:
        f.write(content)
        return Path(f.name)


class TestIngestResult:
    """Tests for IngestResult dataclass."""

    def test_repr(self):
        """Test IngestResult string representation."""
        result = IngestResult(
            entries=[],
            source_path="/test.txt",
            dict_name="test",
            total_raw=100,
            total_valid=80,
            total_duplicates=5,
        )
        repr_str = repr(result)
        assert "test" in repr_str
        assert "80/100" in repr_str


class TestParseFrequency:
    """Tests for parse_frequency."""

    def test_values(self):
        assert parse_frequency("12") == 12
        assert parse_frequency("0") == 0
        assert parse_frequency("-3") is None
        assert parse_frequency("word") is None


class TestHunspellIngestor:
    """Tests for HunspellIngestor."""

    def test_parse_simple_dic(self, sample_hunspell_content):
        """Test parsing a simple Hunspell .dic file."""
        filepath = write_temp(sample_hunspell_content, ".dic")
        try:
            words = list(HunspellIngestor().parse(filepath))

            assert len(words) == 5
            word_forms = [w[0] for w in words]
            assert "testing" in word_forms  # Stripped /ABC
            assert "sample" in word_forms
            assert all(w[1] is None for w in words)
        finally:
            filepath.unlink()

    def test_morphological_fields_stripped(self):
        """Test fields after the word are dropped with or without flags."""
        filepath = write_temp("3\nword po:noun\nrun/ABC st:run\nwalk\tpo:verb\n", ".dic")
        try:
            result = HunspellIngestor().ingest(filepath)
            assert result.errors == []
            assert [e.word for e in result.entries] == ["word", "run", "walk"]
        finally:
            filepath.unlink()

    def test_ingest_assigns_default_frequency(self, sample_hunspell_content):
        filepath = write_temp(sample_hunspell_content, ".dic")
        try:
            result = HunspellIngestor(default_frequency=7).ingest(filepath)
            assert result.total_valid == 5
            assert {e.frequency for e in result.entries} == {7}
        finally:
            filepath.unlink()

    def test_get_dict_name(self):
        """Test dictionary name generation."""
        ingestor = HunspellIngestor()
        assert ingestor.get_dict_name(Path("/path/to/en_US.dic")) == "hunspell_en_US"


class TestPlainTextIngestor:
    """Tests for PlainTextIngestor."""

    def test_parse_with_frequencies(self, sample_wordlist_content):
        """Test words and frequency columns are split."""
        filepath = write_temp(sample_wordlist_content, ".txt")
        try:
            parsed = {w: f for w, f, _ in PlainTextIngestor().parse(filepath)}
            assert parsed["hello"] == 120
            assert parsed["Café"] == 30
            assert parsed["test"] is None
            assert len(parsed) == 6
        finally:
            filepath.unlink()

    def test_parse_with_inline_comments(self):
        """Test parsing with inline comments."""
        filepath = write_temp("hello 5 # greeting\nworld # planet\n", ".txt")
        try:
            parsed = list(PlainTextIngestor().parse(filepath))
            assert parsed[0][:2] == ("hello", 5)
            assert parsed[1][:2] == ("world", None)
        finally:
            filepath.unlink()

    def test_custom_comment_char(self):
        """Test custom comment character."""
        filepath = write_temp("; comment\nhello\nworld\n; another\n", ".txt")
        try:
            words = list(PlainTextIngestor(comment_char=";").parse(filepath))
            assert len(words) == 2
        finally:
            filepath.unlink()

    def test_multi_word_line_reported(self):
        """Test lines with several words are reported as errors."""
        filepath = write_temp("two words\nsingle\n", ".txt")
        try:
            result = PlainTextIngestor().ingest(filepath)
            assert [e.word for e in result.entries] == ["single"]
            assert len(result.errors) == 1
        finally:
            filepath.unlink()

    def test_length_filter(self):
        filepath = write_temp("a\nab\nabc\nabcd\n", ".txt")
        try:
            result = PlainTextIngestor(min_length=2, max_length=3).ingest(filepath)
            assert sorted(e.key for e in result.entries) == ["ab", "abc"]
        finally:
            filepath.unlink()


class TestIngestIntegration:
    """Integration tests for ingest module."""

    def test_folding_in_ingest(self):
        """Test that entries keep display form and get folded keys."""
        filepath = write_temp("HELLO\nÇare\n", ".txt")
        try:
            result = PlainTextIngestor().ingest(filepath)
            by_key = {e.key: e for e in result.entries}
            assert by_key["hello"].word == "HELLO"
            assert by_key["care"].word == "Çare"
        finally:
            filepath.unlink()

    def test_duplicate_detection(self):
        """Test that duplicates are detected and merged."""
        filepath = write_temp("hello 3\nHELLO 10\nHello\n", ".txt")
        try:
            result = PlainTextIngestor().ingest(filepath)

            assert result.total_valid == 1
            assert result.total_duplicates == 2
            entry = result.entries[0]
            assert entry.word == "hello"
            assert entry.frequency == 10
            assert len(entry.sources) == 3
            assert entry.sources[1].line_number == 2
        finally:
            filepath.unlink()


class TestBigramIngest:
    """Tests for bigram ingestion."""

    def test_ingest(self, bigram_file):
        result = ingest_bigrams(bigram_file)
        assert result.bigrams["good"] == {"morning": 40, "night": 35, "news": 12}
        assert result.bigrams["thank"] == {"you": 1}
        assert result.total_pairs == 4

    def test_bad_lines_reported(self, tmp_path):
        path = tmp_path / "bad.bigrams"
        path.write_text("lonely\ngood morning x\ngood day 3\n", encoding="utf-8")
        result = ingest_bigrams(path)
        assert len(result.errors) == 2
        assert result.bigrams == {"good": {"day": 3}}

    def test_folded_previous_word(self, tmp_path):
        path = tmp_path / "case.bigrams"
        path.write_text("Good night 4\ngood night 9\n", encoding="utf-8")
        result = ingest_bigrams(path)
        assert result.bigrams == {"good": {"night": 9}}

    def test_folded_following_word(self, tmp_path):
        """Test followers differing only by case are one pair."""
        path = tmp_path / "case.bigrams"
        path.write_text("good Morning 4\ngood morning 9\ngood Café 2\ngood cafe 1\n", encoding="utf-8")
        result = ingest_bigrams(path)
        assert result.bigrams["good"] == {"Morning": 9, "Café": 2}
        assert result.total_pairs == 2


class TestRegistry:
    """Tests for the ingestor registry."""

    def test_builtin(self):
        assert get_ingestor("plain_text") is PlainTextIngestor
        assert get_ingestor("hunspell") is HunspellIngestor

    def test_unknown(self):
        with pytest.raises(ValueError) as exc_info:
            get_ingestor("nonexistent")
        assert "Unknown ingestor" in str(exc_info.value)

    def test_register(self):
        """Test registering a custom ingestor."""

        class CsvIngestor(Ingestor):
            file_extensions = [".csv"]

            def parse(self, filepath):
                with open(filepath, encoding="utf-8") as f:
                    for line_num, line in enumerate(f, start=1):
                        word, freq = line.strip().split(",")
                        yield word, int(freq), line_num

        register_ingestor("csv_test", CsvIngestor)
        try:
            filepath = write_temp("alpha,4\nbeta,2\n", ".csv")
            result = get_ingestor("csv_test")().ingest(filepath)
            filepath.unlink()
            assert {e.key: e.frequency for e in result.entries} == {"alpha": 4, "beta": 2}
        finally:
            del INGESTORS["csv_test"]
