from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

ALPHABET_SIZE = 26
WORD_LENGTH = 5

_ORD_A = ord("a")


def letter_of(ch: str) -> int:
    """Map a lower-case ASCII letter to its index in [0, 26)."""
    idx = ord(ch) - _ORD_A
    if not 0 <= idx < ALPHABET_SIZE:
        raise ValueError(f"Unsupported char: {ch!r} (use a-z)")
    return idx


def natural_mask(word: str) -> int | None:
    """Natural bitmask of a word, or None if any letter repeats."""
    bits = 0
    for ch in word:
        b = 1 << letter_of(ch)
        if bits & b:
            return None
        bits |= b
    return bits


@dataclass
class FilterResult:
    words: list[str] = field(default_factory=list)
    counts: np.ndarray = field(default_factory=lambda: np.zeros(ALPHABET_SIZE, dtype=np.int64))
    masks: dict[str, int] = field(default_factory=dict)


def _candidate(line: str) -> str | None:
    word = line.strip().lower()
    if len(word) != WORD_LENGTH:
        return None
    if not (word.isascii() and word.isalpha()):
        return None
    return word


def filter_words(lines) -> FilterResult:
    """Keep 5-letter words with no repeated letter, one spelling per letter set.

    The first spelling seen for a given letter set wins; later anagrams are
    dropped. Letter counts cover retained words only.
    """
    result = FilterResult()
    seen: set[int] = set()

    for line in lines:
        word = _candidate(line)
        if word is None:
            continue

        bits = natural_mask(word)
        if bits is None or bits in seen:
            continue

        seen.add(bits)
        result.words.append(word)
        result.masks[word] = bits
        for ch in word:
            result.counts[letter_of(ch)] += 1

    return result


def load_words(path: str) -> list[str]:
    with open(path, "r", encoding="utf-8") as f:
        return f.read().splitlines()
