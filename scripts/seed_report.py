"""Per-seed solution counts, and whether the boundary seed finds anything new."""
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from fivewords.index import build_index
from fivewords.remap import build_remap, frequency_order
from fivewords.search import SEEDS, search_seed
from fivewords.settings import settings
from fivewords.words import filter_words, load_words

path = sys.argv[1] if len(sys.argv) > 1 else str(settings.WORDS_PATH)
filtered = filter_words(load_words(path))
order = frequency_order(filtered.counts)
index = build_index(filtered.words, build_remap(order))

print(f"{len(filtered.words)} candidate words from {path}")
print()

per_seed = {}
for seed in SEEDS:
    per_seed[seed] = search_seed(index, seed)
    letter = chr(ord("a") + order[seed]) if seed < len(order) else "-"
    print(f"  seed {seed:2d} (unused {letter}): {len(per_seed[seed])} solutions")

boundary = SEEDS[-1]
regular = {frozenset(s) for seed in SEEDS[:-1] for s in per_seed[seed]}
extra = {frozenset(s) for s in per_seed[boundary]}

print()
print(f"Distinct solutions over seeds 0..{boundary - 1}: {len(regular)}")
print(f"Boundary seed {boundary}: {len(extra)} solutions, {len(extra - regular)} not found elsewhere")
