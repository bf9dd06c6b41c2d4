"""Plain text word list ingestor.

Simple format: one entry per line, optionally followed by a frequency.
Supports comments with # and empty lines.

    hello 120
    world 98
    lexistack       # no frequency, default applies

Use for:
- Custom word lists
- User dictionaries
- Frequency lists exported from corpora
"""

from pathlib import Path
from typing import Iterator, Optional

from .base import Ingestor, ParsedLine, parse_frequency


class PlainTextIngestor(Ingestor):
    """Ingestor for plain text word lists."""

    file_extensions = [".txt", ".list", ".words"]

    def __init__(
        self,
        min_length: Optional[int] = None,
        max_length: Optional[int] = None,
        default_frequency: Optional[int] = None,
        comment_char: str = "#",
    ):
        super().__init__(min_length, max_length, default_frequency)
        self.comment_char = comment_char

    def parse(self, filepath: Path) -> Iterator[ParsedLine]:
        """Parse plain text word list.

        Args:
            filepath: Path to text file.

        Yields:
            Tuples of (word, frequency, line_number).
        """
        with open(filepath, "r", encoding="utf-8", errors="ignore") as f:
            for line_num, line in enumerate(f, start=1):
                line = line.strip()

                # Skip empty lines and comments
                if not line or line.startswith(self.comment_char):
                    continue

                # Handle inline comments: "word 12 # comment"
                if self.comment_char in line:
                    line = line.split(self.comment_char)[0].strip()

                if not line:
                    continue

                fields = line.split()
                frequency = None
                if len(fields) > 1:
                    frequency = parse_frequency(fields[-1])
                    if frequency is not None:
                        fields = fields[:-1]

                # Multi-word lines are kept whole so ingest() reports them
                yield " ".join(fields), frequency, line_num


def ingest(
    filepath: Path | str,
    min_length: Optional[int] = None,
    max_length: Optional[int] = None,
    default_frequency: Optional[int] = None,
    comment_char: str = "#",
):
    """Convenience function to ingest a plain text word list.

    Args:
        filepath: Path to text file.
        min_length: Minimum word length.
        max_length: Maximum word length.
        default_frequency: Frequency for lines without one.
        comment_char: Character that starts a comment.

    Returns:
        IngestResult with entries.
    """
    ingestor = PlainTextIngestor(
        min_length=min_length,
        max_length=max_length,
        default_frequency=default_frequency,
        comment_char=comment_char,
    )
    return ingestor.ingest(filepath)
