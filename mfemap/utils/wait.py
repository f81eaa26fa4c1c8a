from __future__ import annotations

import time
from typing import Callable, TypeVar

T = TypeVar("T")


def wait_until_stable(probe: Callable[[], T], timeout: float, interval: float = 0.5) -> T:
    """Polls ``probe`` until two consecutive readings agree or ``timeout`` elapses.

    Returns the last reading either way.
    """

    deadline = time.monotonic() + timeout
    previous = probe()
    while time.monotonic() < deadline:
        time.sleep(interval)
        current = probe()
        if current == previous:
            return current
        previous = current
    return previous
