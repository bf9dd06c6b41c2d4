"""Base ingestor interface for word list sources.

All ingestors inherit from Ingestor and implement the parse() method.
ingest() turns parsed lines into WordEntry objects for any source format.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, Optional
import logging

from .. import config as cfg
from ..normalizer import fold_and_validate
from ..schema import WordEntry, WordSource

logger = logging.getLogger(__name__)

# (original_word, frequency or None, line_number)
ParsedLine = tuple[str, Optional[int], Optional[int]]


@dataclass
class IngestResult:
    """Result of ingesting a word list source."""

    entries: list[WordEntry]
    source_path: str
    dict_name: str
    total_raw: int = 0          # Total lines/entries in source
    total_valid: int = 0        # Unique entries after folding
    total_duplicates: int = 0   # Duplicates within this source
    errors: list[str] = field(default_factory=list)

    def __repr__(self) -> str:
        return (
            f"IngestResult({self.dict_name}: "
            f"{self.total_valid}/{self.total_raw} valid, "
            f"{self.total_duplicates} dupes)"
        )


def parse_frequency(raw: str) -> Optional[int]:
    """Parse a non-negative frequency column, or None if it is not one."""
    try:
        value = int(raw)
    except ValueError:
        return None
    return value if value >= 0 else None


class Ingestor(ABC):
    """Base class for word list ingestors.

    Subclasses must implement:
        - parse(filepath) -> Iterator of (word, frequency, line_number) tuples
        - file_extensions: list of supported extensions

    The ingest() method handles folding, frequencies and WordEntry creation.
    """

    file_extensions: list[str] = []

    def __init__(
        self,
        min_length: Optional[int] = None,
        max_length: Optional[int] = None,
        default_frequency: Optional[int] = None,
    ):
        """Initialize ingestor.

        Args:
            min_length: Minimum key length to include.
            max_length: Maximum key length to include.
            default_frequency: Frequency for lines that carry none.
        """
        self.min_length = cfg.default_min_length() if min_length is None else min_length
        self.max_length = cfg.default_max_length() if max_length is None else max_length
        self.default_frequency = (
            cfg.default_frequency() if default_frequency is None else default_frequency
        )

    @abstractmethod
    def parse(self, filepath: Path) -> Iterator[ParsedLine]:
        """Parse source file and yield (word, frequency, line_number) tuples.

        Args:
            filepath: Path to source file.

        Yields:
            Tuples of (original_word, frequency or None, line_number).
        """
        pass

    def get_dict_name(self, filepath: Path) -> str:
        """Generate dictionary name from filepath."""
        return filepath.stem

    def ingest(self, filepath: Path | str) -> IngestResult:
        """Ingest word list from file.

        Args:
            filepath: Path to source file.

        Returns:
            IngestResult with entries and statistics.
        """
        filepath = Path(filepath)
        dict_name = self.get_dict_name(filepath)
        filepath_str = str(filepath.resolve())

        entries: dict[str, WordEntry] = {}
        total_raw = 0
        duplicates = 0
        errors: list[str] = []

        for original_word, frequency, line_num in self.parse(filepath):
            total_raw += 1

            key = fold_and_validate(original_word)
            if key is None:
                errors.append(f"line {line_num}: invalid entry {original_word!r}")
                continue

            if len(key) < self.min_length or len(key) > self.max_length:
                continue

            entry = WordEntry(
                word=original_word.strip(),
                key=key,
                frequency=self.default_frequency if frequency is None else frequency,
                sources=[WordSource(
                    dict_name=dict_name,
                    dict_filepath=filepath_str,
                    line_number=line_num,
                )],
            )

            if key in entries:
                entries[key].merge(entry)
                duplicates += 1
            else:
                entries[key] = entry

        result = IngestResult(
            entries=list(entries.values()),
            source_path=filepath_str,
            dict_name=dict_name,
            total_raw=total_raw,
            total_valid=len(entries),
            total_duplicates=duplicates,
            errors=errors,
        )
        logger.debug("Ingested %r", result)
        return result
