"""Hunspell dictionary ingestor.

Parses Hunspell .dic files used by LibreOffice, Firefox, etc.

Format:
    12345           # Optional word count (first line)
    word/FLAGS      # Word with optional affix flags
    another         # Word without flags

Hunspell carries no frequencies; every entry gets the default frequency.
"""

from pathlib import Path
from typing import Iterator, Optional

from .base import Ingestor, ParsedLine


class HunspellIngestor(Ingestor):
    """Ingestor for Hunspell .dic files."""

    file_extensions = [".dic"]

    def get_dict_name(self, filepath: Path) -> str:
        return f"hunspell_{filepath.stem}"

    def parse(self, filepath: Path) -> Iterator[ParsedLine]:
        """Parse Hunspell .dic file.

        Args:
            filepath: Path to .dic file.

        Yields:
            Tuples of (word, None, line_number).
        """
        with open(filepath, "r", encoding="utf-8", errors="ignore") as f:
            for line_num, line in enumerate(f, start=1):
                line = line.strip()
                if not line:
                    continue

                # Skip first line if it's just a number (word count)
                if line_num == 1 and line.isdigit():
                    continue

                # Strip affix flags and morphological fields: "word/ABC po:noun"
                fields = line.split("/")[0].split()

                if fields:
                    yield fields[0], None, line_num


def ingest(
    filepath: Path | str,
    min_length: Optional[int] = None,
    max_length: Optional[int] = None,
    default_frequency: Optional[int] = None,
):
    """Convenience function to ingest a Hunspell dictionary.

    Args:
        filepath: Path to .dic file.
        min_length: Minimum word length.
        max_length: Maximum word length.
        default_frequency: Frequency assigned to every entry.

    Returns:
        IngestResult with entries.
    """
    ingestor = HunspellIngestor(
        min_length=min_length,
        max_length=max_length,
        default_frequency=default_frequency,
    )
    return ingestor.ingest(filepath)
