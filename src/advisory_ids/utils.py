import logging
import time
from collections.abc import Iterator
from contextlib import contextmanager


@contextmanager
def timer(name: str) -> Iterator[None]:
    start = time.perf_counter()
    try:
        yield
    finally:
        logging.debug(f"{name} took {time.perf_counter() - start:.3f}s")
