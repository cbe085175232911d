import pytest

from textchunker.segmentation import (
    ABBREVIATIONS,
    RegexSentenceSegmenter,
    SentenceBoundaryDetector,
    SpacySentenceSegmenter,
    get_segmenter,
    is_abbreviation,
)
from textchunker.segmentation.regex_segmenter import find_terminators
from textchunker.segmentation.spacy_segmenter import primary_language
from textchunker.exceptions import SegmentationError


def test_abbreviations_are_immutable():
    assert "dr." in ABBREVIATIONS
    with pytest.raises(AttributeError):
        ABBREVIATIONS.add("xyz.")


@pytest.mark.parametrize(
    "text, index, expected",
    [
        ("Dr. Smith", 2, True),
        ("see MR. Jones", 6, True),
        ("fruit, e.g. apples", 10, True),
        ("we met at 5 p.m. today", 15, True),
        ("He went home. Then", 12, False),
    ],
)
def test_is_abbreviation(text, index, expected):
    assert text[index] == "."
    assert is_abbreviation(text, index) is expected


def test_terminators_skip_abbreviations_and_inline_periods():
    text = "Dr. Smith paid $3.50 today. Really?! Yes."
    boundaries = find_terminators(text)
    assert boundaries == [text.index("today.") + 6, text.index("?!") + 2]


def test_terminator_at_end_of_text_is_not_a_boundary():
    assert find_terminators("One sentence only.") == []


def test_regex_segmenter_spans_skip_leading_whitespace(regex_segmenter):
    text = "First one.   Second one! Third"
    spans = regex_segmenter.segment(text)
    assert [text[s.start:s.end] for s in spans] == ["First one.", "Second one!", "Third"]
    assert regex_segmenter.segment("") == []


def test_detector_returns_sorted_boundaries_below_text_length(regex_segmenter):
    detector = SentenceBoundaryDetector(segmenter=regex_segmenter)
    text = "A b. C d? E f!"
    assert detector.find_boundaries(text) == [4, 9]
    assert detector.find_boundaries("") == []


def test_detector_memoizes_provider(monkeypatch):
    calls = []

    def fake_get_segmenter(locale, use_locale_segmenter=True):
        calls.append(locale)
        return RegexSentenceSegmenter()

    monkeypatch.setattr("textchunker.segmentation.detector.get_segmenter", fake_get_segmenter)
    detector = SentenceBoundaryDetector("fr")
    detector.find_boundaries("Un. Deux.")
    detector.find_boundaries("Trois. Quatre.")
    assert calls == ["fr"]


def test_disabled_locale_segmenter_uses_regex():
    assert isinstance(get_segmenter("en", use_locale_segmenter=False), RegexSentenceSegmenter)


def test_unavailable_locale_falls_back_to_regex(monkeypatch):
    def boom(self):
        raise SegmentationError("nope", locale=self.locale, provider="spacy")

    monkeypatch.setattr(SpacySentenceSegmenter, "_load_pipeline", boom)
    detector = SentenceBoundaryDetector("zz")
    assert isinstance(detector.segmenter, RegexSentenceSegmenter)
    assert detector.find_boundaries("Hello there. Bye now.") == [12]


@pytest.mark.parametrize("locale, expected", [("en", "en"), ("en-US", "en"), ("pt_BR", "pt"), (" DE ", "de")])
def test_primary_language(locale, expected):
    assert primary_language(locale) == expected


@pytest.mark.integration
def test_spacy_segmenter_finds_sentences():
    segmenter = SpacySentenceSegmenter("en-GB")
    text = "The cat sat down. Then it slept! Did it dream?"
    spans = segmenter.segment(text)
    assert [text[s.start:s.end] for s in spans] == [
        "The cat sat down.",
        "Then it slept!",
        "Did it dream?",
    ]


@pytest.mark.integration
def test_spacy_detector_excludes_final_sentence_end():
    detector = SentenceBoundaryDetector("en")
    text = "The cat sat down. Then it slept."
    assert isinstance(detector.segmenter, SpacySentenceSegmenter)
    assert detector.find_boundaries(text) == [17]


def test_locale_without_language_raises_segmentation_error():
    with pytest.raises(SegmentationError) as excinfo:
        SpacySentenceSegmenter("  ")
    assert excinfo.value.details["provider"] == "spacy"
    assert isinstance(get_segmenter(""), RegexSentenceSegmenter)
