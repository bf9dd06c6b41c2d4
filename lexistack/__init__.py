"""lexistack - several word lists behind one dictionary interface.

A toolkit for predictive-text lookups over a changing set of dictionaries.
The collection answers exactly like a single dictionary.

Core concepts:
    - Every lookup source implements the Dictionary interface
    - DictionaryCollection fans each lookup out to its members and merges
    - Members can be added and removed while lookups are running

Example:
    main dictionary: "hello" (120), "help" (90)
    user dictionary: "helios" (5)
    collection.get_words(WordComposer("hel"), None, None)
        -> hello, help, helios (member order, each member's own order)

Usage:
    from lexistack import DictionaryCollection, WordComposer, WordListDictionary

    main = WordListDictionary.from_file("words/en.txt", bigrams="words/en.bigrams")
    user = WordListDictionary.from_file("words/user.txt", name="user")

    collection = DictionaryCollection(main)
    collection.add_dictionary(user)

    collection.get_words(WordComposer("hel"), None, None)
    collection.get_bigrams(WordComposer(), "good", None)
    collection.is_valid_word("hello")
    collection.get_frequency("hello")

    collection.close()
"""

from .collection import DictionaryCollection
from .dictionary import NOT_A_FREQUENCY, Dictionary, WordCallback
from .schema import SuggestedWordInfo, WordComposer, WordEntry, WordSource
from .wordlist import WordListDictionary

__version__ = "0.1.0"

__all__ = [
    "Dictionary",
    "DictionaryCollection",
    "NOT_A_FREQUENCY",
    "SuggestedWordInfo",
    "WordCallback",
    "WordComposer",
    "WordEntry",
    "WordListDictionary",
    "WordSource",
]
