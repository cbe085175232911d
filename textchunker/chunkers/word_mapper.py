"""Map character-offset sentence boundaries onto word indices."""

from __future__ import annotations

from typing import List, Sequence


def to_word_boundaries(words: Sequence[str], char_boundaries: Sequence[int]) -> List[int]:
    """Convert sorted character boundaries into sorted word boundaries.

    Offsets are computed as if ``words`` were joined by single spaces. A word
    boundary ``k`` means the sentence ends after ``words[k - 1]``. A character
    boundary inside a word, at its end, or on the following separator belongs
    to that word; boundaries past the last word are dropped.
    """
    if not char_boundaries:
        return []

    word_boundaries: List[int] = []
    char_index = 0
    pointer = 0
    total = len(char_boundaries)

    for word_index, word in enumerate(words):
        if pointer >= total:
            break
        word_end = char_index + len(word)
        while pointer < total and char_boundaries[pointer] <= word_end + 1:
            word_boundaries.append(word_index + 1)
            pointer += 1
        char_index = word_end + 1

    return sorted(set(word_boundaries))


__all__ = ["to_word_boundaries"]
