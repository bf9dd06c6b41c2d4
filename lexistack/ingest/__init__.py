"""Word list ingestion module.

Provides pluggable ingestors for various word list formats:
- Hunspell .dic files
- Plain text word lists with optional frequencies
- Bigram lists

Usage:
    from lexistack.ingest import hunspell, plain_text, ingest_bigrams

    result = hunspell.ingest("path/to/en_US.dic")
    result = plain_text.ingest("path/to/words.txt")
    pairs = ingest_bigrams("path/to/pairs.bigrams")
"""

from .base import Ingestor, IngestResult
from .bigrams import BigramIngestor, BigramResult, ingest_bigrams
from . import hunspell
from . import plain_text

# Register available ingestors
INGESTORS: dict[str, type[Ingestor]] = {
    "hunspell": hunspell.HunspellIngestor,
    "plain_text": plain_text.PlainTextIngestor,
}


def get_ingestor(name: str) -> type[Ingestor]:
    """Get ingestor class by name."""
    if name not in INGESTORS:
        raise ValueError(f"Unknown ingestor: {name}. Available: {list(INGESTORS.keys())}")
    return INGESTORS[name]


def register_ingestor(name: str, ingestor_cls: type[Ingestor]) -> None:
    """Register a custom ingestor."""
    INGESTORS[name] = ingestor_cls


__all__ = [
    "Ingestor",
    "IngestResult",
    "BigramIngestor",
    "BigramResult",
    "ingest_bigrams",
    "hunspell",
    "plain_text",
    "get_ingestor",
    "register_ingestor",
    "INGESTORS",
]
