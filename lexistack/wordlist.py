"""In-memory dictionary built from word lists.

Entries are kept under their folded key, so "cafe" finds "Café". Suggestions
are scored by entry frequency, highest first.

Files:
    words/en.txt         plain text or Hunspell word list
    words/en.bigrams     optional "previous next [frequency]" pairs
    dicts/en.json        saved dictionary (save() / load())
"""

from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Iterable, Optional
import json
import logging

from . import config as cfg
from .dictionary import NOT_A_FREQUENCY, Dictionary, WordCallback
from .ingest import get_ingestor, ingest_bigrams
from .ingest.base import IngestResult
from .normalizer import fold_and_validate, fold_word
from .schema import SuggestedWordInfo, WordComposer, WordEntry

logger = logging.getLogger(__name__)


def _rank_key(item: tuple[str, int]) -> tuple[int, str]:
    word, frequency = item
    return -frequency, word


class WordListDictionary(Dictionary):
    """A dictionary held entirely in memory."""

    def __init__(
        self,
        name: str,
        max_suggestions: Optional[int] = None,
        max_bigrams: Optional[int] = None,
    ):
        """Initialize an empty dictionary.

        Args:
            name: Dictionary name, attached to every suggestion.
            max_suggestions: Cap on get_words() results.
            max_bigrams: Cap on get_bigrams() results.
        """
        self.name = name
        self.max_suggestions = (
            cfg.default_max_suggestions() if max_suggestions is None else max_suggestions
        )
        self.max_bigrams = cfg.default_max_bigrams() if max_bigrams is None else max_bigrams
        self.generated_at = datetime.now(timezone.utc).isoformat()

        self._entries: dict[str, WordEntry] = {}          # key -> entry
        # previous key -> following key -> (display word, freq)
        self._bigrams: dict[str, dict[str, tuple[str, int]]] = {}
        self._closed = False

    @classmethod
    def from_ingest(
        cls,
        result: IngestResult,
        name: Optional[str] = None,
        **kwargs: Any,
    ) -> "WordListDictionary":
        """Create a dictionary from an IngestResult."""
        dictionary = cls(name or result.dict_name, **kwargs)
        dictionary.add_entries(result.entries)
        return dictionary

    @classmethod
    def from_file(
        cls,
        filepath: Path | str,
        ingestor: str = "plain_text",
        bigrams: Optional[Path | str] = None,
        name: Optional[str] = None,
        **kwargs: Any,
    ) -> "WordListDictionary":
        """Load a word list (and optional bigram list) from disk.

        Args:
            filepath: Word list path.
            ingestor: Registered ingestor name, e.g. "plain_text", "hunspell".
            bigrams: Optional bigram list path.
            name: Dictionary name (defaults to the ingestor's name).
            **kwargs: Passed to the constructor.

        Returns:
            Loaded dictionary.
        """
        result = get_ingestor(ingestor)().ingest(filepath)
        if result.errors:
            logger.info("%s: skipped %d invalid lines", filepath, len(result.errors))
        dictionary = cls.from_ingest(result, name=name, **kwargs)

        if bigrams is not None:
            pairs = ingest_bigrams(bigrams)
            for previous, followers in pairs.bigrams.items():
                for following, frequency in followers.items():
                    dictionary.add_bigram(previous, following, frequency)

        logger.debug("Loaded %r", dictionary)
        return dictionary

    def add_entries(self, entries: Iterable[WordEntry]) -> None:
        """Add or merge entries."""
        for entry in entries:
            if entry.key in self._entries:
                self._entries[entry.key].merge(entry)
            else:
                self._entries[entry.key] = entry

    def add_bigram(self, previous: str, following: str, frequency: int) -> None:
        """Record that `following` comes after `previous`."""
        followers = self._bigrams.setdefault(fold_word(previous), {})
        key = fold_word(following)
        if key in followers:
            word, known = followers[key]
            followers[key] = (word, max(frequency, known))
        else:
            followers[key] = (following, frequency)

    def count(self) -> int:
        """Get entry count."""
        return len(self._entries)

    def get_words(
        self,
        composer: WordComposer,
        prev_word: Optional[str],
        proximity_info: Any,
    ) -> Optional[list[SuggestedWordInfo]]:
        if self._closed or composer.is_empty():
            return None

        prefix = fold_word(composer.typed_word)
        matches = [
            (entry.word, entry.frequency)
            for key, entry in self._entries.items()
            if key.startswith(prefix)
        ]
        matches.sort(key=_rank_key)
        return [
            SuggestedWordInfo(word=word, score=frequency, dict_name=self.name)
            for word, frequency in matches[: self.max_suggestions]
        ]

    def get_bigrams(
        self,
        composer: WordComposer,
        previous_word: str,
        callback: Optional[WordCallback],
    ) -> Optional[list[SuggestedWordInfo]]:
        if self._closed:
            return None
        followers = self._bigrams.get(fold_word(previous_word))
        if not followers:
            return None

        prefix = fold_word(composer.typed_word)
        ranked = sorted(
            (
                pair
                for key, pair in followers.items()
                if key.startswith(prefix)
            ),
            key=_rank_key,
        )

        suggestions = []
        for word, frequency in ranked[: self.max_bigrams]:
            if callback is not None and not callback.add_word(word, frequency, self.name):
                break
            suggestions.append(
                SuggestedWordInfo(word=word, score=frequency, dict_name=self.name)
            )
        return suggestions

    def is_valid_word(self, word: str) -> bool:
        key = fold_and_validate(word)
        return key is not None and key in self._entries

    def get_frequency(self, word: str) -> int:
        key = fold_and_validate(word)
        entry = self._entries.get(key) if key is not None else None
        return entry.frequency if entry is not None else NOT_A_FREQUENCY

    def is_initialized(self) -> bool:
        return not self._closed and bool(self._entries)

    def close(self) -> None:
        self._entries = {}
        self._bigrams = {}
        self._closed = True

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "name": self.name,
            "generated_at": self.generated_at,
            "word_count": self.count(),
            "words": {
                key: self._entries[key].to_dict() for key in sorted(self._entries)
            },
            "bigrams": {
                key: dict(sorted(followers.values()))
                for key, followers in sorted(self._bigrams.items())
            },
        }

    def save(self, filepath: Path | str) -> None:
        """Save dictionary to JSON file."""
        filepath = Path(filepath)
        filepath.parent.mkdir(parents=True, exist_ok=True)
        with open(filepath, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2, ensure_ascii=False)

    @classmethod
    def load(cls, filepath: Path | str, **kwargs: Any) -> "WordListDictionary":
        """Load dictionary from JSON file."""
        with open(filepath, "r", encoding="utf-8") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise ValueError(f"Not a dictionary file: {filepath}") from e

        if not isinstance(data, dict) or "name" not in data:
            raise ValueError(f"Not a dictionary file: {filepath}")

        d = cls(data["name"], **kwargs)
        d.generated_at = data.get("generated_at", d.generated_at)
        try:
            entries = [WordEntry.from_dict(w) for w in data.get("words", {}).values()]
            for entry in entries:
                # Stored keys may be stale or hand-edited
                entry.key = fold_word(entry.word)
            d.add_entries(entries)
            for previous, followers in data.get("bigrams", {}).items():
                for following, frequency in followers.items():
                    d.add_bigram(previous, following, frequency)
        except (KeyError, TypeError, AttributeError) as e:
            raise ValueError(f"Not a dictionary file: {filepath}") from e
        return d

    def __repr__(self) -> str:
        return f"WordListDictionary({self.name}: {self.count()} words)"
