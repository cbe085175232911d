"""Punctuation-based sentence segmenter with abbreviation handling."""

from __future__ import annotations

import re
from typing import List

from .base import BaseSegmenter, SentenceSpan


# Lowercase tokens that end with a period but do not end a sentence.
ABBREVIATIONS = frozenset({
    "prof.", "dr.", "mr.", "mrs.", "ms.", "jr.", "sr.", "esq.",
    "e.g.", "i.e.", "etc.", "vs.", "v.s.", "a.m.", "p.m.", "am.", "pm.",
    "inc.", "ltd.", "corp.", "co.", "st.", "ave.", "blvd.", "rd.",
    "jan.", "feb.", "mar.", "apr.", "may.", "jun.", "jul.", "aug.",
    "sep.", "oct.", "nov.", "dec.", "mon.", "tue.", "wed.", "thu.",
    "fri.", "sat.", "sun.", "no.", "vol.", "pp.", "ed.", "p.",
})

# How far back from a period to look for the abbreviation token.
ABBREVIATION_LOOKBEHIND = 15

_TERMINATOR_RUN = re.compile(r"[.!?]+")
# Dotted tokens such as "e.g" are captured whole so they can match "e.g.".
_TRAILING_TOKEN = re.compile(r"\b([a-z]+(?:\.[a-z]+)*\.?)\s*$", re.IGNORECASE)


def is_abbreviation(text: str, period_index: int) -> bool:
    """Return True when the period at ``period_index`` closes a known abbreviation."""
    before = text[max(0, period_index - ABBREVIATION_LOOKBEHIND):period_index]
    match = _TRAILING_TOKEN.search(before)
    if not match:
        return False
    token = match.group(1).lower()
    return token in ABBREVIATIONS or f"{token}." in ABBREVIATIONS


def find_terminators(text: str) -> List[int]:
    """Offsets just past each sentence-ending punctuation run, before ``len(text)``."""
    boundaries: List[int] = []
    length = len(text)
    for match in _TERMINATOR_RUN.finditer(text):
        # Only periods are ambiguous; "!" and "?" always terminate.
        if match.group(0)[0] == "." and is_abbreviation(text, match.start()):
            continue
        end = match.end()
        if end < length and text[end].isspace():
            boundaries.append(end)
    return boundaries


class RegexSentenceSegmenter(BaseSegmenter):
    """Locale-independent fallback used when no spaCy pipeline is available."""

    name = "regex"

    def segment(self, text: str) -> List[SentenceSpan]:
        if not text:
            return []
        spans: List[SentenceSpan] = []
        length = len(text)
        start = 0
        for boundary in find_terminators(text) + [length]:
            while start < boundary and text[start].isspace():
                start += 1
            if start < boundary:
                spans.append(SentenceSpan(start=start, length=boundary - start))
            start = boundary
        return spans


__all__ = [
    "ABBREVIATIONS",
    "RegexSentenceSegmenter",
    "find_terminators",
    "is_abbreviation",
]
