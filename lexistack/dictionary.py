"""Dictionary interface shared by every lookup source.

A dictionary answers four kinds of predictive-text queries:
    - get_words: candidates for the word being typed
    - get_bigrams: words that commonly follow a previous word
    - is_valid_word: whether a word is known
    - get_frequency: how common a word is

Concrete dictionaries subclass Dictionary. DictionaryCollection is itself a
Dictionary, so callers never need to know whether they hold one source or many.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional, Protocol

from .schema import SuggestedWordInfo, WordComposer

# Returned by get_frequency() for words a dictionary does not know.
# Lower than any valid frequency.
NOT_A_FREQUENCY = -1


class WordCallback(Protocol):
    """Receives bigram results as a dictionary produces them."""

    def add_word(self, word: str, score: int, dict_name: str) -> bool:
        """Offer one result.

        Returns:
            False to ask the dictionary to stop producing results.
        """
        ...


class Dictionary(ABC):
    """Base class for word lookup sources."""

    @abstractmethod
    def get_words(
        self,
        composer: WordComposer,
        prev_word: Optional[str],
        proximity_info: Any,
    ) -> Optional[list[SuggestedWordInfo]]:
        """Find candidate words for the composer's typed input.

        Args:
            composer: Word being typed.
            prev_word: Word before the one being typed, if any.
            proximity_info: Keyboard geometry context (opaque).

        Returns:
            Suggestions in the dictionary's own order, or None.
        """
        pass

    @abstractmethod
    def get_bigrams(
        self,
        composer: WordComposer,
        previous_word: str,
        callback: Optional[WordCallback],
    ) -> Optional[list[SuggestedWordInfo]]:
        """Find words that follow previous_word.

        Args:
            composer: Word being typed (may be empty).
            previous_word: Word the continuations follow.
            callback: Optional sink offered each result.

        Returns:
            Suggestions in the dictionary's own order, or None.
        """
        pass

    @abstractmethod
    def is_valid_word(self, word: str) -> bool:
        pass

    @abstractmethod
    def get_frequency(self, word: str) -> int:
        """Return the word's frequency, or NOT_A_FREQUENCY if unknown."""
        pass

    def is_initialized(self) -> bool:
        """Check whether the dictionary is ready to answer lookups."""
        return True

    def close(self) -> None:
        """Release whatever the dictionary holds."""
        pass
