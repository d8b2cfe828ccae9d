from __future__ import annotations

from dataclasses import dataclass

from fivewords.words import ALPHABET_SIZE, letter_of

# One bucket per bit position, plus the empty-mask sentinel slot.
BUCKET_COUNT = ALPHABET_SIZE + 1


@dataclass(frozen=True)
class BucketIndex:
    buckets: tuple[tuple[int, ...], ...]
    words: dict[int, str]

    def __len__(self) -> int:
        return len(self.words)


def remapped_mask(word: str, remap: list[tuple[int, int]]) -> tuple[int, int]:
    """Return (remapped mask, lowest set bit position) for a word."""
    bits = 0
    lowbit = ALPHABET_SIZE
    for ch in word:
        msk, pos = remap[letter_of(ch)]
        bits |= msk
        lowbit = min(lowbit, pos)
    return bits, lowbit


def build_index(words: list[str], remap: list[tuple[int, int]]) -> BucketIndex:
    """Bucket every word's remapped mask by its rarest letter's bit position."""
    buckets: list[list[int]] = [[] for _ in range(BUCKET_COUNT)]
    table: dict[int, str] = {}

    for word in words:
        bits, lowbit = remapped_mask(word, remap)
        buckets[lowbit].append(bits)
        table[bits] = word

    return BucketIndex(buckets=tuple(tuple(b) for b in buckets), words=table)
