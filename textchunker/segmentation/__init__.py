"""Sentence segmentation providers and boundary detection."""

from .base import BaseSegmenter, SentenceSpan
from .detector import SentenceBoundaryDetector, get_segmenter
from .regex_segmenter import ABBREVIATIONS, RegexSentenceSegmenter, is_abbreviation
from .spacy_segmenter import SpacySentenceSegmenter


__all__ = [
    "ABBREVIATIONS",
    "BaseSegmenter",
    "RegexSentenceSegmenter",
    "SentenceBoundaryDetector",
    "SentenceSpan",
    "SpacySentenceSegmenter",
    "get_segmenter",
    "is_abbreviation",
]
