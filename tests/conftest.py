"""
Test-wide fixtures and configuration.

Ensures the suite runs in TEXTCHUNKER_ENV=testing so defaults are stable
regardless of the developer's .env file.
"""
import os

import pytest

from textchunker.core import config as chunker_config
from textchunker.segmentation import BaseSegmenter, RegexSentenceSegmenter, SentenceSpan


def pytest_configure(config: pytest.Config) -> None:  # noqa: D401
    os.environ["TEXTCHUNKER_ENV"] = "testing"
    os.environ.setdefault("TEXTCHUNKER_USE_LOCALE_SEGMENTER", "true")
    chunker_config.reload_config()


class FixedSpanSegmenter(BaseSegmenter):
    """Fake provider returning sentence ends at preset offsets."""

    name = "fake"

    def __init__(self, ends):
        self.ends = list(ends)
        self.calls = 0

    def segment(self, text):
        self.calls += 1
        spans = []
        start = 0
        for end in self.ends + [len(text)]:
            if end > start:
                spans.append(SentenceSpan(start=start, length=end - start))
                start = end
        return spans


@pytest.fixture
def regex_segmenter():
    return RegexSentenceSegmenter()


@pytest.fixture
def fake_segmenter_factory():
    return FixedSpanSegmenter
