"""Sentence boundary detection over a memoized segmentation provider."""

from __future__ import annotations

import logging
from typing import List, Optional

from .base import BaseSegmenter
from .regex_segmenter import RegexSentenceSegmenter
from .spacy_segmenter import SpacySentenceSegmenter
from textchunker.exceptions import SegmentationError


LOGGER = logging.getLogger(__name__)


def get_segmenter(locale: str, use_locale_segmenter: bool = True) -> BaseSegmenter:
    """Return the spaCy segmenter for ``locale``, or the regex fallback when unavailable."""
    if not use_locale_segmenter:
        LOGGER.debug("Locale segmentation disabled; using regex sentence detection.")
        return RegexSentenceSegmenter()
    try:
        return SpacySentenceSegmenter(locale)
    except SegmentationError as exc:
        LOGGER.debug("Falling back to regex sentence detection: %s", exc.message)
        return RegexSentenceSegmenter()


class SentenceBoundaryDetector:
    """Finds character offsets where sentences end.

    The provider is resolved on first use and kept for the life of the
    detector. Resolution is deterministic per locale, so a concurrent first
    call can only ever store the same kind of provider.
    """

    def __init__(
        self,
        locale: str = "en",
        segmenter: Optional[BaseSegmenter] = None,
        use_locale_segmenter: bool = True,
    ):
        self.locale = locale
        self.use_locale_segmenter = use_locale_segmenter
        self._segmenter = segmenter

    @property
    def segmenter(self) -> BaseSegmenter:
        if self._segmenter is None:
            self._segmenter = get_segmenter(self.locale, self.use_locale_segmenter)
        return self._segmenter

    @property
    def provider_name(self) -> str:
        """Name of the resolved provider, or "none" before first use; never loads one."""
        if self._segmenter is None:
            return "none"
        return self._segmenter.name

    def find_boundaries(self, text: str) -> List[int]:
        """Sorted sentence-end offsets; the end of the final sentence is never included."""
        if not text:
            return []
        length = len(text)
        boundaries: List[int] = []
        for span in self.segmenter.segment(text):
            end = span.end
            if 0 < end < length and (not boundaries or end > boundaries[-1]):
                boundaries.append(end)
        return boundaries


__all__ = ["SentenceBoundaryDetector", "get_segmenter"]
