"""Common chunking types."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Dict, Union

from textchunker.exceptions import ValidationError


class ChunkingStrategy(str, Enum):
    """How to pick a sentence boundary near the size target."""

    # Grow past the target to finish the current sentence.
    SOFT_LIMIT = "soft"
    # Never exceed the target, cutting mid-sentence if needed.
    HARD_LIMIT = "hard"

    @classmethod
    def coerce(cls, value: Union["ChunkingStrategy", str]) -> "ChunkingStrategy":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValidationError(
                f"Unknown chunking strategy '{value}'",
                field="strategy",
                value=value,
                validation_rule="one_of:soft,hard",
            ) from None


@dataclass(frozen=True)
class ChunkingStats:
    """Per-chunk word count summary for a word-mode split."""

    chunk_count: int = 0
    avg_words_per_chunk: int = 0
    min_words: int = 0
    max_words: int = 0
    total_words: int = 0

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)


__all__ = ["ChunkingStats", "ChunkingStrategy"]
