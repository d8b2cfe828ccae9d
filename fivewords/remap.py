import logging

import numpy as np

from fivewords.words import ALPHABET_SIZE

logger = logging.getLogger("fivewords")


def frequency_order(counts) -> list[int]:
    """Letters sorted by ascending count; equal counts keep alphabetical order."""
    counts = np.asarray(counts)
    if counts.shape != (ALPHABET_SIZE,):
        raise ValueError(f"Expected {ALPHABET_SIZE} letter counts, got shape {counts.shape}")
    order = np.argsort(counts, kind="stable")

    if logger.isEnabledFor(logging.DEBUG):
        for idx in order:
            logger.debug("%s: %d", chr(ord("a") + int(idx)), counts[idx])

    return [int(idx) for idx in order]


def build_remap(order: list[int]) -> list[tuple[int, int]]:
    """Build the remap table: letter index -> (new bit value, new bit position).

    The first letter in ``order`` (the rarest) gets bit 0, e.g.

        'q' x 100  ->  remap[16] == (0b001, 0)
        'x' x 310  ->  remap[23] == (0b010, 1)
        'j' x 350  ->  remap[9]  == (0b100, 2)
    """
    if sorted(order) != list(range(ALPHABET_SIZE)):
        raise ValueError("order must be a permutation of the 26 letter indices")

    remap: list[tuple[int, int]] = [(0, 0)] * ALPHABET_SIZE
    for pos, letter in enumerate(order):
        remap[letter] = (1 << pos, pos)
    return remap
