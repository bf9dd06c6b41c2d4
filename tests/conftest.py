"""Pytest configuration and fixtures."""

import pytest
import sys
from pathlib import Path
from typing import Optional

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from lexistack.dictionary import NOT_A_FREQUENCY, Dictionary
from lexistack.schema import SuggestedWordInfo


class FakeDictionary(Dictionary):
    """Dictionary with canned answers that records every call."""

    def __init__(
        self,
        name: str,
        words: Optional[list[str]] = None,
        bigrams: Optional[list[str]] = None,
        frequencies: Optional[dict[str, int]] = None,
        initialized: bool = True,
    ):
        self.name = name
        self.words = words
        self.bigrams = bigrams
        self.frequencies = frequencies or {}
        self.initialized = initialized
        self.calls: list[tuple] = []
        self.close_count = 0

    def _suggestions(self, words: Optional[list[str]]) -> Optional[list[SuggestedWordInfo]]:
        if words is None:
            return None
        return [SuggestedWordInfo(word=w, score=1, dict_name=self.name) for w in words]

    def get_words(self, composer, prev_word, proximity_info):
        self.calls.append(("get_words", composer, prev_word, proximity_info))
        return self._suggestions(self.words)

    def get_bigrams(self, composer, previous_word, callback):
        self.calls.append(("get_bigrams", composer, previous_word, callback))
        return self._suggestions(self.bigrams)

    def is_valid_word(self, word):
        self.calls.append(("is_valid_word", word))
        return word in self.frequencies

    def get_frequency(self, word):
        self.calls.append(("get_frequency", word))
        return self.frequencies.get(word, NOT_A_FREQUENCY)

    def is_initialized(self):
        return self.initialized

    def close(self):
        self.close_count += 1

    def __repr__(self):
        return f"FakeDictionary({self.name})"


@pytest.fixture
def fake_dictionary():
    """Factory for FakeDictionary instances."""
    return FakeDictionary


@pytest.fixture
def sample_wordlist_content():
    """Sample plain text word list with frequencies."""
    return """# Word list
hello 120
help 90
helmet 40
world 75
Café 30
test
"""


@pytest.fixture
def sample_hunspell_content():
    """Sample Hunspell dictionary content."""
    return """100
hello
world
testing/ABC
sample/XYZ
python
"""


@pytest.fixture
def sample_bigram_content():
    """Sample bigram list."""
    return """# previous next frequency
good morning 40
good night 35
good news 12
thank you
"""


@pytest.fixture
def wordlist_file(tmp_path, sample_wordlist_content):
    path = tmp_path / "en.txt"
    path.write_text(sample_wordlist_content, encoding="utf-8")
    return path


@pytest.fixture
def bigram_file(tmp_path, sample_bigram_content):
    path = tmp_path / "en.bigrams"
    path.write_text(sample_bigram_content, encoding="utf-8")
    return path
