from __future__ import annotations

import logging
import os
from concurrent.futures import ProcessPoolExecutor, as_completed
from typing import Iterable, Iterator

from fivewords.index import BucketIndex
from fivewords.metrics import configure_logging
from fivewords.words import ALPHABET_SIZE

logger = logging.getLogger("fivewords")

WORDS_PER_SOLUTION = 5

# Seeds 0..25 pre-mark the letter left out of a solution; seed 26 marks no letter.
SEEDS = range(ALPHABET_SIZE + 1)

Solution = tuple[str, ...]


class SearchInvariantError(RuntimeError):
    """A selected mask has no word behind it; the index is inconsistent."""


def trailing_ones(mask: int) -> int:
    return (~mask & (mask + 1)).bit_length() - 1


def search_seed(index: BucketIndex, seed: int, trace: bool = False) -> list[Solution]:
    """Find every 5-word selection with pairwise disjoint masks, starting from one seed bit.

    Each step fills the lowest free bit of ``used`` with a word from the bucket
    for that bit, so every bit below the frontier is already taken. Results are
    in selection order (rarest letter first).
    """
    buckets = index.buckets
    table = index.words
    selected = [0] * WORDS_PER_SOLUTION
    found: list[Solution] = []

    def resolve(bits: int) -> str:
        try:
            return table[bits]
        except KeyError:
            raise SearchInvariantError(f"no word for mask {bits:#028b}") from None

    def search(used: int, depth: int):
        if depth == WORDS_PER_SOLUTION:
            found.append(tuple(resolve(bits) for bits in selected))
            return

        # lowest free bit (next low-frequency letter)
        lowbit = trailing_ones(used)
        candidates = buckets[lowbit] if lowbit < len(buckets) else ()

        if trace:
            logger.debug(
                "free lowbit [%02d] with mask [%s] at depth %d :: searching %d words...",
                lowbit, format(used, "#028b"), depth, len(candidates),
            )

        for bits in candidates:
            if used & bits == 0:
                selected[depth] = bits
                search(used | bits, depth + 1)

    search(1 << seed, 0)
    return found


# Per-process state, set by the pool initializer.
_worker_index: BucketIndex | None = None
_worker_trace = False


def _init_worker(index: BucketIndex, trace: bool, debug: bool):
    global _worker_index, _worker_trace
    configure_logging(debug)
    _worker_index = index
    _worker_trace = trace


def _run_seed(seed: int) -> tuple[int, list[Solution]]:
    return seed, search_seed(_worker_index, seed, _worker_trace)


def solve(index: BucketIndex, workers: int = 0, trace: bool = False) -> Iterator[Solution]:
    """Run every seed and yield solutions as each seed finishes.

    ``workers == 1`` runs the seeds in-process in seed order; otherwise they are
    spread over a process pool (``0`` means one process per CPU) and arrive in
    completion order. Solutions are not deduplicated across seeds.
    """
    if workers <= 0:
        workers = os.cpu_count() or 1

    if workers == 1:
        for seed in SEEDS:
            found = search_seed(index, seed, trace)
            logger.debug("seed=%d solutions=%d", seed, len(found))
            yield from found
        return

    debug = logger.isEnabledFor(logging.DEBUG)
    with ProcessPoolExecutor(
        max_workers=workers,
        initializer=_init_worker,
        initargs=(index, trace, debug),
    ) as executor:
        futures = [executor.submit(_run_seed, seed) for seed in SEEDS]
        for future in as_completed(futures):
            seed, found = future.result()
            logger.debug("seed=%d solutions=%d", seed, len(found))
            yield from found


def unique_solutions(solutions: Iterable[Solution]) -> Iterator[Solution]:
    """Drop repeats of the same word set, keeping the first-seen ordering."""
    seen: set[frozenset[str]] = set()
    for solution in solutions:
        key = frozenset(solution)
        if key not in seen:
            seen.add(key)
            yield solution
