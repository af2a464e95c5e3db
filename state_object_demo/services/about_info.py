"""
Simulated about-info retrieval.

Stands in for a real network call or disk read. It waits a fixed delay
and then either returns the payload or raises LoadFailure.
"""

import random
import time
from typing import Callable, Optional

from state_object_demo.config import (
    ABOUT_PAYLOAD,
    DEFAULT_FETCH_DELAY_S,
    DEFAULT_SUCCESS_PROBABILITY,
    FetchSettings,
)
from state_object_demo.services.load_state import LoadFailure


def fetch_about_info(
    delay_s: float = DEFAULT_FETCH_DELAY_S,
    success_probability: float = DEFAULT_SUCCESS_PROBABILITY,
    payload: str = ABOUT_PAYLOAD,
    rng: Optional[random.Random] = None,
) -> str:
    """
    Gather the about info (blocking, call from a worker thread).

    Args:
        delay_s: Seconds to wait before answering.
        success_probability: Chance of success, 0.5 gives a coin flip.
        payload: Returned on success.
        rng: Random source, injectable for deterministic tests.

    Returns:
        The payload string.

    Raises:
        LoadFailure: When the simulated retrieval fails.
    """
    if delay_s > 0:
        time.sleep(delay_s)

    roll = (rng or random).random()
    if roll < success_probability:
        return payload
    raise LoadFailure()


def make_about_fetcher(
    settings: Optional[FetchSettings] = None,
    rng: Optional[random.Random] = None,
) -> Callable[[], str]:
    """Bind settings into a zero-argument fetch callable for AboutLoader."""
    settings = settings or FetchSettings()

    def fetch() -> str:
        return fetch_about_info(
            delay_s=settings.delay_s,
            success_probability=settings.success_probability,
            payload=settings.payload,
            rng=rng,
        )

    return fetch
