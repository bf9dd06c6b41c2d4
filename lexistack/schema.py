"""Records exchanged between callers and dictionaries.

Core concept:
    - A dictionary stores WordEntry objects under a folded lookup key
    - Each entry tracks the source files it was read from
    - Lookups answer with SuggestedWordInfo records tagged by dictionary name

Example:
    "Çare" (tr word list) + "care" (en word list) -> key "care"
    Two entries in two dictionaries, two suggestions from a collection.
"""

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class WordComposer:
    """The word currently being typed."""

    typed_word: str = ""

    def size(self) -> int:
        """Get number of typed characters."""
        return len(self.typed_word)

    def is_empty(self) -> bool:
        return not self.typed_word

    def add(self, text: str) -> None:
        """Append typed characters."""
        self.typed_word += text

    def delete_last(self) -> None:
        """Remove the last typed character, if any."""
        self.typed_word = self.typed_word[:-1]

    def reset(self) -> None:
        self.typed_word = ""


@dataclass(frozen=True)
class SuggestedWordInfo:
    """One candidate word produced by a dictionary."""

    word: str
    score: int
    dict_name: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "word": self.word,
            "score": self.score,
            "dict_name": self.dict_name,
        }


@dataclass
class WordSource:
    """Tracks where an entry came from."""

    dict_name: str          # e.g., "hunspell_en", "user_words"
    dict_filepath: str      # Full path to source file
    line_number: Optional[int] = None  # Line in source file (if applicable)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "dict_name": self.dict_name,
            "dict_filepath": self.dict_filepath,
            "line_number": self.line_number,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "WordSource":
        """Create from dictionary."""
        return cls(
            dict_name=data["dict_name"],
            dict_filepath=data["dict_filepath"],
            line_number=data.get("line_number"),
        )


@dataclass
class WordEntry:
    """A headword with its frequency and provenance."""

    word: str                               # Display form, as first seen
    key: str                                # Folded lookup key
    frequency: int
    sources: list[WordSource] = field(default_factory=list)

    def add_source(self, source: WordSource) -> None:
        self.sources.append(source)

    def merge(self, other: "WordEntry") -> None:
        """Merge another entry with the same key into this one.

        The higher frequency wins; sources accumulate.
        """
        if other.frequency > self.frequency:
            self.frequency = other.frequency
        for source in other.sources:
            self.add_source(source)

    def get_source_dicts(self) -> list[str]:
        """Get list of source dictionary names."""
        return [s.dict_name for s in self.sources]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "word": self.word,
            "key": self.key,
            "frequency": self.frequency,
            "sources": [s.to_dict() for s in self.sources],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "WordEntry":
        """Create from dictionary."""
        return cls(
            word=data["word"],
            key=data["key"],
            frequency=data["frequency"],
            sources=[WordSource.from_dict(s) for s in data.get("sources", [])],
        )
