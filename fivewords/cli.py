import argparse
import asyncio
import logging
import sys

from fivewords.index import build_index
from fivewords.metrics import StageTimer, configure_logging
from fivewords.remap import build_remap, frequency_order
from fivewords.search import solve, unique_solutions
from fivewords.settings import Settings, settings, update_settings
from fivewords.words import filter_words, load_words

logger = logging.getLogger("fivewords")


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="fivewords",
        description="Find five 5-letter words that together use 25 distinct letters.",
    )
    parser.add_argument("wordlist", nargs="?", help="newline-delimited word list (default: WORDS_PATH)")
    parser.add_argument("--workers", type=int, help="worker processes (0 = one per CPU, 1 = in-process)")
    parser.add_argument("--unique", action="store_true", default=None, help="drop repeated solutions across seeds")
    parser.add_argument("--debug", action="store_true", default=None, help="log letter frequencies and timing detail")
    parser.add_argument("--trace", action="store_true", help="with --debug, log every search step")
    parser.add_argument("--notify-topic", help="ntfy topic to post a summary to")
    return parser.parse_args(argv)


def run(cfg: Settings, lines: list[str], timer: StageTimer | None = None,
        trace: bool = False, out=None) -> list[tuple[str, ...]]:
    """Run the pipeline over a loaded word list, printing each solution line as it arrives."""
    out = out or sys.stdout
    timer = timer or StageTimer()

    with timer.stage("filter"):
        filtered = filter_words(lines)
    logger.info("Retained %d candidate words", len(filtered.words))

    with timer.stage("index"):
        remap = build_remap(frequency_order(filtered.counts))
        index = build_index(filtered.words, remap)

    solutions: list[tuple[str, ...]] = []
    with timer.stage("search"):
        found = solve(index, cfg.WORKERS, trace=trace and cfg.DEBUG)
        if cfg.UNIQUE:
            found = unique_solutions(found)
        for solution in found:
            print(" ".join(solution), file=out, flush=True)
            solutions.append(solution)

    logger.info("Found %d solutions (%s)", len(solutions), timer.format())

    if cfg.NTFY_TOPIC:
        from fivewords.notifier import send_notification

        asyncio.run(send_notification(
            solutions, len(filtered.words), timer.summary(), cfg.NTFY_TOPIC, cfg.NTFY_URL,
        ))

    return solutions


def main(argv=None) -> int:
    args = parse_args(argv)

    overrides = {
        "WORDS_PATH": args.wordlist,
        "WORKERS": args.workers,
        "UNIQUE": args.unique,
        "DEBUG": args.debug,
        "NTFY_TOPIC": args.notify_topic,
    }
    errors = update_settings(settings, **{k: v for k, v in overrides.items() if v is not None})

    configure_logging(settings.DEBUG)
    for name, err in errors.items():
        logger.warning("Ignoring %s: %s", name, err)

    timer = StageTimer()
    try:
        with timer.stage("load"):
            lines = load_words(str(settings.WORDS_PATH))
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Cannot read word list %s: %s", settings.WORDS_PATH, e)
        return 1
    logger.info("Loaded %d lines from %s", len(lines), settings.WORDS_PATH)

    run(settings, lines, timer, trace=args.trace)
    return 0


if __name__ == "__main__":
    sys.exit(main())
