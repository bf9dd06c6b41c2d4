"""lexistack CLI - query several word lists as one dictionary.

Usage:
    python -m lexistack.main --dict words/en.txt --dict words/user.txt --typed hel
    python -m lexistack.main --dict words/en.dic --format hunspell --check hello
    python -m lexistack.main --dict words/en.txt --bigrams words/en.bigrams --previous good
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from . import config as cfg
from .collection import DictionaryCollection
from .ingest import ingest_bigrams
from .schema import WordComposer
from .wordlist import WordListDictionary


def load_dictionary(
    path: Path,
    fmt: str,
    bigrams: Optional[Path] = None,
) -> WordListDictionary:
    """Load one dictionary in the requested format."""
    if fmt != "json":
        return WordListDictionary.from_file(path, ingestor=fmt, bigrams=bigrams)

    dictionary = WordListDictionary.load(path)
    if bigrams is not None:
        for previous, followers in ingest_bigrams(bigrams).bigrams.items():
            for following, frequency in followers.items():
                dictionary.add_bigram(previous, following, frequency)
    return dictionary


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="lexistack - query several word lists as one dictionary"
    )
    parser.add_argument(
        "--dict",
        "-d",
        dest="dicts",
        type=Path,
        action="append",
        required=True,
        help="Word list to load (repeatable, queried in the given order)",
    )
    parser.add_argument(
        "--format",
        "-f",
        choices=["plain_text", "hunspell", "json"],
        default="plain_text",
        help="Format of every --dict file (default: plain_text)",
    )
    parser.add_argument(
        "--bigrams",
        "-b",
        type=Path,
        action="append",
        default=[],
        help="Bigram list for the --dict at the same position",
    )
    parser.add_argument("--typed", "-t", type=str, default="", help="Word being typed")
    parser.add_argument("--previous", "-p", type=str, help="Previous word")
    parser.add_argument(
        "--check",
        "-c",
        type=str,
        action="append",
        default=[],
        help="Report validity and frequency for a word (repeatable)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args(argv)
    if len(args.bigrams) > len(args.dicts):
        parser.error("more --bigrams than --dict arguments")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else cfg.default_log_level().upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )

    collection = DictionaryCollection()
    for index, path in enumerate(args.dicts):
        bigrams = args.bigrams[index] if index < len(args.bigrams) else None
        try:
            collection.add_dictionary(load_dictionary(path, args.format, bigrams))
        except (OSError, ValueError) as e:
            print(f"ERROR - {path}: {e}", file=sys.stderr)
            collection.close()
            return 1

    try:
        print("=" * 60)
        print(f"Dictionaries: {', '.join(str(d) for d in collection)}")
        print("=" * 60)

        composer = WordComposer(args.typed)
        if args.typed:
            suggestions = collection.get_words(composer, args.previous, None) or []
            print(f"\nSuggestions for {args.typed!r}:")
            for info in suggestions:
                print(f"  {info.word:<24} {info.score:>8}  [{info.dict_name}]")

        if args.previous:
            bigrams = collection.get_bigrams(composer, args.previous, None) or []
            print(f"\nAfter {args.previous!r}:")
            for info in bigrams:
                print(f"  {info.word:<24} {info.score:>8}  [{info.dict_name}]")

        for word in args.check:
            valid = collection.is_valid_word(word)
            frequency = collection.get_frequency(word)
            print(f"\n{word}: valid={valid} frequency={frequency}")
    finally:
        collection.close()

    return 0


if __name__ == "__main__":
    sys.exit(main())
