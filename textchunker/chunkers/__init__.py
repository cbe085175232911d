"""Chunking facade, boundary policy and word mapping."""

from .base import ChunkingStats, ChunkingStrategy
from .policy import select_boundary
from .text_chunker import TextChunker
from .word_mapper import to_word_boundaries


__all__ = [
    "ChunkingStats",
    "ChunkingStrategy",
    "TextChunker",
    "select_boundary",
    "to_word_boundaries",
]
