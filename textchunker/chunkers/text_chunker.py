"""Word, character and line based chunking with sentence-boundary awareness."""

from __future__ import annotations

import logging
import math
import numbers
import re
from typing import List, Optional, Union

import numpy as np

from textchunker.core.config import ChunkerConfig, get_config
from textchunker.exceptions import ValidationError
from textchunker.segmentation import BaseSegmenter, SentenceBoundaryDetector

from .base import ChunkingStats, ChunkingStrategy
from .policy import select_boundary
from .word_mapper import to_word_boundaries


LOGGER = logging.getLogger(__name__)

_WHITESPACE_RUN = re.compile(r"\s+")
_LINE_BREAK = re.compile(r"\r?\n")

StrategyLike = Union[ChunkingStrategy, str, None]


def _require_int(name: str, value: object, minimum: int) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral) or value < minimum:
        raise ValidationError(
            f"{name} must be an integer >= {minimum}, got {value!r}",
            field=name,
            value=value,
            validation_rule=f"int>={minimum}",
        )
    return int(value)


class TextChunker:
    """Split text into bounded chunks, preferring to cut at sentence ends.

    Sentence ends come from a spaCy sentencizer for the chunker's locale, or
    from a punctuation/abbreviation heuristic when spaCy has no pipeline for
    that language. For scripts written without spaces between words
    (Chinese, Japanese, Thai) use ``split_by_characters``; word counts are
    meaningless there.

    Example:
        chunker = TextChunker(locale="es")
        chunker.split_by_words(text, 300, strategy="hard")
    """

    def __init__(
        self,
        locale: Optional[str] = None,
        *,
        cfg: Optional[ChunkerConfig] = None,
        segmenter: Optional[BaseSegmenter] = None,
    ):
        self.cfg = cfg or get_config()
        self.locale = locale or self.cfg.default_locale
        self.detector = SentenceBoundaryDetector(
            self.locale,
            segmenter=segmenter,
            use_locale_segmenter=self.cfg.use_locale_segmenter,
        )

    def _strategy(self, strategy: StrategyLike) -> ChunkingStrategy:
        if strategy is None:
            strategy = self.cfg.default_strategy
        return ChunkingStrategy.coerce(strategy)

    @staticmethod
    def normalize_whitespace(text: str, preserve_whitespace: bool) -> str:
        if preserve_whitespace:
            return text.strip()
        return _WHITESPACE_RUN.sub(" ", text.strip())

    def find_sentence_boundaries(self, text: str) -> List[int]:
        return self.detector.find_boundaries(text)

    def split_by_words(
        self,
        text: str,
        words_per_chunk: int,
        *,
        strategy: StrategyLike = None,
        preserve_whitespace: bool = True,
        min_chunk_size: int = 1,
        max_chunk_size: Optional[int] = None,
        respect_sentence_boundaries: bool = True,
    ) -> List[str]:
        """Split text into chunks of about ``words_per_chunk`` words.

        ``max_chunk_size`` replaces ``words_per_chunk`` as the cap when set.
        Chunks with fewer than ``min_chunk_size`` words are dropped, not
        merged into a neighbour.
        """
        if not text or not isinstance(text, str):
            return []
        normalized = self.normalize_whitespace(text, preserve_whitespace)
        words = [word for word in _WHITESPACE_RUN.split(normalized) if word]
        if not words:
            return []
        policy = self._strategy(strategy)
        limit = _require_int(
            "max_chunk_size" if max_chunk_size is not None else "words_per_chunk",
            max_chunk_size if max_chunk_size is not None else words_per_chunk,
            1,
        )
        _require_int("min_chunk_size", min_chunk_size, 0)

        word_boundaries: List[int] = []
        if respect_sentence_boundaries:
            # Detect on the single-spaced form so offsets line up with word positions.
            joined = " ".join(words)
            word_boundaries = to_word_boundaries(words, self.detector.find_boundaries(joined))

        chunks: List[str] = []
        total = len(words)
        start = 0
        while start < total:
            target = start + limit
            if target >= total:
                remaining = words[start:]
                if len(remaining) >= min_chunk_size:
                    chunks.append(" ".join(remaining))
                break

            end = target
            if word_boundaries:
                boundary = select_boundary(word_boundaries, target, policy, start)
                if boundary > start:
                    end = boundary

            chunk_words = words[start:end]
            if len(chunk_words) >= min_chunk_size:
                chunks.append(" ".join(chunk_words))
            start = end

        self._log_chunk_summary("word", [len(chunk.split()) for chunk in chunks], total)
        return chunks

    def split_by_characters(
        self,
        text: str,
        chars_per_chunk: int,
        *,
        strategy: StrategyLike = None,
        preserve_whitespace: bool = True,
        min_chunk_size: int = 1,
        respect_sentence_boundaries: bool = True,
    ) -> List[str]:
        """Split text into chunks of about ``chars_per_chunk`` characters.

        With HARD_LIMIT no chunk is ever longer than ``chars_per_chunk``.
        Whitespace following a cut is skipped so chunks never start with it.
        """
        if not text or not isinstance(text, str):
            return []
        normalized = self.normalize_whitespace(text, preserve_whitespace)
        if not normalized:
            return []
        policy = self._strategy(strategy)
        chars_per_chunk = _require_int("chars_per_chunk", chars_per_chunk, 1)
        _require_int("min_chunk_size", min_chunk_size, 0)

        length = len(normalized)
        boundaries: List[int] = []
        if respect_sentence_boundaries:
            boundaries = self.detector.find_boundaries(normalized)

        chunks: List[str] = []
        start = 0
        while start < length:
            target = start + chars_per_chunk
            end = min(target, length)

            if boundaries and end < length:
                boundary = select_boundary(boundaries, target, policy, start)
                if boundary > start:
                    end = boundary

            chunk = normalized[start:end].strip()
            if chunk and len(chunk) >= min_chunk_size:
                chunks.append(chunk)

            start = end
            while start < length and normalized[start].isspace():
                start += 1

        self._log_chunk_summary("character", [len(chunk) for chunk in chunks], length)
        return chunks

    def split_by_lines(
        self,
        text: str,
        lines_per_chunk: int,
        *,
        preserve_empty_lines: bool = False,
    ) -> List[str]:
        """Group lines into newline-joined chunks of ``lines_per_chunk`` lines.

        Blank lines are skipped unless ``preserve_empty_lines``. The final
        chunk holds whatever is left, however few lines that is.
        """
        if not text or not isinstance(text, str):
            return []
        _require_int("lines_per_chunk", lines_per_chunk, 1)

        chunks: List[str] = []
        current: List[str] = []
        for line in _LINE_BREAK.split(text):
            if not preserve_empty_lines and not line.strip():
                continue
            current.append(line)
            if len(current) >= lines_per_chunk:
                chunks.append("\n".join(current))
                current = []

        if current:
            chunks.append("\n".join(current))
        return chunks

    def get_chunking_stats(self, text: str, words_per_chunk: int, **options) -> ChunkingStats:
        """Word-count statistics for ``split_by_words`` with the same options."""
        chunks = self.split_by_words(text, words_per_chunk, **options)
        if not chunks:
            return ChunkingStats()

        counts = np.array([len(chunk.split()) for chunk in chunks])
        # Half-up rounding; np.round would round 4.5 to 4.
        average = int(math.floor(float(counts.mean()) + 0.5))
        return ChunkingStats(
            chunk_count=len(chunks),
            avg_words_per_chunk=average,
            min_words=int(counts.min()),
            max_words=int(counts.max()),
            total_words=int(counts.sum()),
        )

    def _log_chunk_summary(self, mode: str, sizes: List[int], source_size: int) -> None:
        if not sizes or not self.cfg.debug_chunking:
            return
        values = np.asarray(sizes, dtype=float)
        LOGGER.info(
            "%s chunker (%s, %s): %d chunks | mean=%.1f | median=%.1f | p90=%.1f | source=%d",
            mode.capitalize(),
            self.locale,
            self.detector.provider_name,
            len(sizes),
            float(np.mean(values)),
            float(np.median(values)),
            float(np.percentile(values, 90)),
            source_size,
        )


__all__ = ["TextChunker"]
