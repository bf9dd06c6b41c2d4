"""Bigram list ingestor.

Format: one pair per line, optionally followed by a frequency.

    good morning 40
    good night 35
    thank you       # no frequency, default applies

Previous words are stored under their folded key. Following words that fold to
the same key are one pair and keep the first display form seen.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, Optional

from .. import config as cfg
from ..normalizer import fold_and_validate
from .base import parse_frequency


@dataclass
class BigramResult:
    """Result of ingesting a bigram source."""

    bigrams: dict[str, dict[str, int]]  # previous key -> following word -> freq
    source_path: str
    total_raw: int = 0
    total_pairs: int = 0
    errors: list[str] = field(default_factory=list)

    def __repr__(self) -> str:
        return f"BigramResult({self.total_pairs}/{self.total_raw} pairs)"


class BigramIngestor:
    """Ingestor for whitespace-separated bigram lists."""

    file_extensions = [".bigrams", ".txt"]

    def __init__(self, default_frequency: Optional[int] = None, comment_char: str = "#"):
        self.default_frequency = (
            cfg.default_frequency() if default_frequency is None else default_frequency
        )
        self.comment_char = comment_char

    def parse(self, filepath: Path) -> Iterator[tuple[list[str], int]]:
        """Yield (fields, line_number) for every non-comment line."""
        with open(filepath, "r", encoding="utf-8", errors="ignore") as f:
            for line_num, line in enumerate(f, start=1):
                line = line.split(self.comment_char)[0].strip()
                if line:
                    yield line.split(), line_num

    def ingest(self, filepath: Path | str) -> BigramResult:
        filepath = Path(filepath)
        bigrams: dict[str, dict[str, int]] = {}
        # previous key -> following key -> display form kept in bigrams
        display: dict[str, dict[str, str]] = {}
        total_raw = 0
        total_pairs = 0
        errors: list[str] = []

        for fields, line_num in self.parse(filepath):
            total_raw += 1

            frequency = None
            if len(fields) == 3:
                frequency = parse_frequency(fields[2])
                if frequency is None:
                    errors.append(f"line {line_num}: bad frequency {fields[2]!r}")
                    continue
            elif len(fields) != 2:
                errors.append(f"line {line_num}: expected 'previous next [frequency]'")
                continue

            previous = fold_and_validate(fields[0])
            following_key = fold_and_validate(fields[1])
            if previous is None or following_key is None:
                errors.append(f"line {line_num}: invalid pair")
                continue

            followers = bigrams.setdefault(previous, {})
            forms = display.setdefault(previous, {})
            if following_key not in forms:
                forms[following_key] = fields[1]
                total_pairs += 1
            following = forms[following_key]
            if frequency is None:
                frequency = self.default_frequency
            followers[following] = max(frequency, followers.get(following, frequency))

        return BigramResult(
            bigrams=bigrams,
            source_path=str(filepath.resolve()),
            total_raw=total_raw,
            total_pairs=total_pairs,
            errors=errors,
        )


def ingest_bigrams(filepath: Path | str, default_frequency: Optional[int] = None) -> BigramResult:
    """Convenience function to ingest a bigram list."""
    return BigramIngestor(default_frequency=default_frequency).ingest(filepath)
