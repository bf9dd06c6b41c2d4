"""A collection of dictionaries that behaves like one dictionary.

Lookups fan out to every member and merge the answers:
    - get_words / get_bigrams: concatenation in member order
    - is_valid_word: true if any member knows the word
    - get_frequency: highest frequency reported by any member

The member list is held as an immutable tuple. Mutators build a new tuple and
publish it with a single assignment; readers grab the tuple once and iterate
it to the end, so a lookup always sees one complete member list and never
takes a lock.

Mutators are not safe against each other. Callers that add and remove
dictionaries from several threads must serialize those calls themselves.

Usage:
    from lexistack import DictionaryCollection, WordComposer, WordListDictionary

    main = WordListDictionary.from_file("words/en.txt")
    user = WordListDictionary.from_file("words/user.txt", name="user")
    collection = DictionaryCollection(main, user)

    collection.get_words(WordComposer("hel"), None, None)
    collection.get_frequency("hello")
    collection.close()
"""

import logging
from typing import Any, Iterable, Iterator, Optional

from .dictionary import NOT_A_FREQUENCY, Dictionary, WordCallback
from .schema import SuggestedWordInfo, WordComposer

logger = logging.getLogger(__name__)


class DictionaryCollection(Dictionary):
    """Fans lookups out to an ordered, mutable list of dictionaries."""

    def __init__(self, *dictionaries: Optional[Dictionary]):
        """Initialize collection.

        Args:
            *dictionaries: Initial members. None entries are dropped,
                duplicates are kept.
        """
        self._dictionaries: tuple[Dictionary, ...] = tuple(
            d for d in dictionaries if d is not None
        )

    @classmethod
    def from_iterable(
        cls, dictionaries: Optional[Iterable[Optional[Dictionary]]]
    ) -> "DictionaryCollection":
        """Create a collection from any iterable of dictionaries."""
        if dictionaries is None:
            return cls()
        return cls(*dictionaries)

    @property
    def dictionaries(self) -> tuple[Dictionary, ...]:
        """Current member snapshot."""
        return self._dictionaries

    def get_words(
        self,
        composer: WordComposer,
        prev_word: Optional[str],
        proximity_info: Any,
    ) -> Optional[list[SuggestedWordInfo]]:
        dictionaries = self._dictionaries
        if not dictionaries:
            return None
        suggestions: list[SuggestedWordInfo] = []
        for dictionary in dictionaries:
            found = dictionary.get_words(composer, prev_word, proximity_info)
            if found:
                suggestions.extend(found)
        return suggestions

    def get_bigrams(
        self,
        composer: WordComposer,
        previous_word: str,
        callback: Optional[WordCallback],
    ) -> Optional[list[SuggestedWordInfo]]:
        dictionaries = self._dictionaries
        if not dictionaries:
            return None
        suggestions: list[SuggestedWordInfo] = []
        for dictionary in dictionaries:
            found = dictionary.get_bigrams(composer, previous_word, callback)
            if found:
                suggestions.extend(found)
        return suggestions

    def is_valid_word(self, word: str) -> bool:
        for dictionary in reversed(self._dictionaries):
            if dictionary.is_valid_word(word):
                return True
        return False

    def get_frequency(self, word: str) -> int:
        max_freq = NOT_A_FREQUENCY
        for dictionary in reversed(self._dictionaries):
            freq = dictionary.get_frequency(word)
            if freq >= max_freq:
                max_freq = freq
        return max_freq

    def is_initialized(self) -> bool:
        return bool(self._dictionaries)

    def close(self) -> None:
        """Close every member. The collection must not be used afterwards."""
        for dictionary in self._dictionaries:
            dictionary.close()

    # Warning: not thread-safe against other add/remove calls.
    def add_dictionary(self, dictionary: Optional[Dictionary]) -> None:
        """Append a dictionary to the collection.

        Args:
            dictionary: Dictionary to add. None is ignored.
        """
        if dictionary is None:
            return
        dictionaries = self._dictionaries
        if dictionary in dictionaries:
            logger.warning(
                "This collection already contains this dictionary: %r", dictionary
            )
        self._dictionaries = dictionaries + (dictionary,)

    # Warning: not thread-safe against other add/remove calls.
    def remove_dictionary(self, dictionary: Optional[Dictionary]) -> None:
        """Remove the first occurrence of a dictionary.

        Args:
            dictionary: Dictionary to remove. None is ignored.
        """
        if dictionary is None:
            return
        dictionaries = list(self._dictionaries)
        if dictionary not in dictionaries:
            logger.warning(
                "This collection does not contain this dictionary: %r", dictionary
            )
            return
        dictionaries.remove(dictionary)
        self._dictionaries = tuple(dictionaries)

    def __len__(self) -> int:
        return len(self._dictionaries)

    def __iter__(self) -> Iterator[Dictionary]:
        return iter(self._dictionaries)

    def __contains__(self, dictionary: object) -> bool:
        return dictionary in self._dictionaries

    def __repr__(self) -> str:
        return f"DictionaryCollection({len(self._dictionaries)} dictionaries)"
