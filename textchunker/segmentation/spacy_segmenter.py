"""spaCy-backed locale-aware sentence segmenter."""

from __future__ import annotations

import logging
import re
from typing import List

import spacy

from textchunker.exceptions import SegmentationError

from .base import BaseSegmenter, SentenceSpan


LOGGER = logging.getLogger(__name__)


def primary_language(locale: str) -> str:
    """Reduce a BCP-47 tag such as ``en-US`` or ``pt_BR`` to its language subtag."""
    return re.split(r"[-_]", locale.strip(), maxsplit=1)[0].lower()


class SpacySentenceSegmenter(BaseSegmenter):
    """Blank spaCy pipeline for the locale's language plus the rule-based sentencizer."""

    name = "spacy"

    def __init__(self, locale: str = "en"):
        self.locale = locale
        self.language = primary_language(locale or "")
        self._nlp = self._load_pipeline()

    def _load_pipeline(self):
        if not self.language:
            raise SegmentationError(
                f"Cannot derive a language from locale '{self.locale}'",
                locale=self.locale,
                provider=self.name,
            )
        try:
            nlp = spacy.blank(self.language)
            if "sentencizer" not in nlp.pipe_names:
                nlp.add_pipe("sentencizer")
        except Exception as exc:  # noqa: BLE001 - spaCy raises ImportError/ValueError/KeyError per language
            raise SegmentationError(
                f"spaCy has no usable pipeline for locale '{self.locale}': {exc}",
                locale=self.locale,
                provider=self.name,
            ) from exc
        LOGGER.debug("Loaded spaCy sentencizer for language '%s'.", self.language)
        return nlp

    def segment(self, text: str) -> List[SentenceSpan]:
        if not text:
            return []
        if len(text) >= self._nlp.max_length:
            self._nlp.max_length = len(text) + 1
        doc = self._nlp(text)
        spans: List[SentenceSpan] = []
        for sent in doc.sents:
            if not sent.text.strip():
                continue
            spans.append(SentenceSpan(start=sent.start_char, length=sent.end_char - sent.start_char))
        return spans


__all__ = ["SpacySentenceSegmenter", "primary_language"]
