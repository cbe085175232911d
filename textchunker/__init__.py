"""
TextChunker - split text into word, character or line bounded chunks,
preferring locale-aware sentence boundaries.
"""

from textchunker.chunkers import (
    ChunkingStats,
    ChunkingStrategy,
    TextChunker,
    select_boundary,
    to_word_boundaries,
)
from textchunker.exceptions import (
    ConfigurationError,
    SegmentationError,
    TextChunkerError,
    ValidationError,
)
from textchunker.segmentation import (
    ABBREVIATIONS,
    BaseSegmenter,
    RegexSentenceSegmenter,
    SentenceBoundaryDetector,
    SentenceSpan,
    SpacySentenceSegmenter,
)

__version__ = "1.0.0"

__all__ = [
    "ABBREVIATIONS",
    "BaseSegmenter",
    "ChunkingStats",
    "ChunkingStrategy",
    "ConfigurationError",
    "RegexSentenceSegmenter",
    "SegmentationError",
    "SentenceBoundaryDetector",
    "SentenceSpan",
    "SpacySentenceSegmenter",
    "TextChunker",
    "TextChunkerError",
    "ValidationError",
    "select_boundary",
    "to_word_boundaries",
]
