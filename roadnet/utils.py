import logging
import time


def is_root_debug_logging() -> bool:
    """
    Returns true if the global (root) logger has at least `logging.DEBUG` level.
    """
    return logging.getLogger().isEnabledFor(logging.DEBUG)


class Timer:
    """Measures the wall time of a `with` block."""

    def __init__(self, name: str):
        self.name = name
        self.start = None
        self.end = None

    def __enter__(self):
        self.start = time.time()
        self.end = None
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.end = time.time()

    @property
    def duration_ms(self) -> float:
        assert self.end is not None, "Trying to call duration on unfinished timer."
        return (self.end - self.start) * 1000

    def __str__(self):
        if self.end is None:
            return f"{self.name}: running"
        return f"{self.name}: {self.duration_ms:.1f} ms"
