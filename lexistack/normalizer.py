"""Lookup-key folding for lexistack.

Dictionaries store every headword under a folded key so that lookups are
case- and accent-insensitive: "Çare", "care" and "CARE" share the key "care".
The display form of the word is kept separately on the entry.
"""

import unicodedata
from typing import Optional

# Letters that NFD does not decompose into base letter + combining mark
FOLD_MAP: dict[str, str] = {
    "ß": "ss",
    "ı": "i",
    "æ": "ae",
    "œ": "oe",
    "ø": "o",
    "ł": "l",
    "đ": "d",
    "ð": "d",
    "þ": "th",
}


def fold_char(char: str) -> str:
    """Fold a single character to its lookup form.

    Args:
        char: Single character.

    Returns:
        Folded form (may be multiple chars for ligatures like ß→ss).
    """
    lower = char.lower()
    if lower in FOLD_MAP:
        return FOLD_MAP[lower]

    # Drop combining marks left over from decomposition
    decomposed = unicodedata.normalize("NFD", lower)
    kept = [c for c in decomposed if unicodedata.category(c) != "Mn"]
    return "".join(kept) if kept else lower


def fold_word(word: str) -> str:
    """Fold a word to its lookup key.

    Args:
        word: Word to fold.

    Returns:
        Lowercase key with diacritics removed.
    """
    return "".join(fold_char(char) for char in word)


def is_valid_entry(word: str) -> bool:
    """Check that a word can be stored as a dictionary entry.

    Args:
        word: Raw word.

    Returns:
        True if the word is non-empty and contains no whitespace.
    """
    return bool(word) and not any(c.isspace() for c in word)


def fold_and_validate(word: str) -> Optional[str]:
    """Fold word and return its key if valid, else None.

    Args:
        word: Raw word.

    Returns:
        Folded key or None if the word cannot be an entry.
    """
    word = word.strip()
    if not is_valid_entry(word):
        return None
    return fold_word(word)
