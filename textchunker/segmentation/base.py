"""Sentence segmentation data structures and provider interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class SentenceSpan:
    """One sentence located in the source text as ``[start, start + length)``."""

    start: int
    length: int

    @property
    def end(self) -> int:
        return self.start + self.length


class BaseSegmenter(ABC):
    """Common interface for sentence segmentation providers."""

    name: str = "base"

    @abstractmethod
    def segment(self, text: str) -> List[SentenceSpan]:
        """Split text into sentence spans, in order."""


__all__ = ["BaseSegmenter", "SentenceSpan"]
