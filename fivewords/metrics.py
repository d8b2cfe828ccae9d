import logging
import time
from contextlib import contextmanager

logger = logging.getLogger("fivewords")

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def configure_logging(debug: bool = False):
    level = logging.DEBUG if debug else logging.INFO
    # basicConfig writes to stderr; stdout carries solution lines only
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logger.setLevel(level)


class StageTimer:
    """Wall-clock milliseconds for each pipeline stage of one run."""

    def __init__(self):
        self.timings: dict[str, float] = {}
        self._start = time.perf_counter()

    @contextmanager
    def stage(self, name: str):
        t0 = time.perf_counter()
        try:
            yield
        finally:
            ms = round((time.perf_counter() - t0) * 1000, 1)
            self.timings[name] = ms
            logger.info("stage=%s elapsed=%.1fms", name, ms)

    @property
    def total_ms(self) -> float:
        return round((time.perf_counter() - self._start) * 1000, 1)

    def summary(self) -> dict[str, float]:
        return {**self.timings, "total": self.total_ms}

    def format(self) -> str:
        return " ".join(f"{name}={ms}ms" for name, ms in self.summary().items())
