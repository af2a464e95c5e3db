"""
Application configuration.

Holds the fixed strings shown by the UI and the settings for the
simulated about-info fetch. Fetch settings can be overridden through
environment variables, which is handy for demos and tests.
"""

import math
import os
from dataclasses import dataclass


APP_NAME = "State Object Demo"
APP_VERSION = "0.1.0"

ENV_PREFIX = "STATE_OBJECT_DEMO_"
ENV_FETCH_DELAY = ENV_PREFIX + "FETCH_DELAY"
ENV_SUCCESS_PROBABILITY = ENV_PREFIX + "SUCCESS_PROBABILITY"
ENV_LOG_LEVEL = ENV_PREFIX + "LOG_LEVEL"

# Simulated fetch defaults
DEFAULT_FETCH_DELAY_S = 2.0
DEFAULT_SUCCESS_PROBABILITY = 0.5
ABOUT_PAYLOAD = "the info is ready"
LOAD_FAILURE_DESCRIPTION = "about info failed to load... don't ask."

# UI strings
LOADING_TEXT = "Loading about info..."
ABOUT_NAV_TEXT = "About..."
ABOUT_FOOTER = "The 'About' info should be loaded once, no matter how many times it's visited."
RESET_BUTTON_TEXT = "Reset Model"
RESET_FOOTER = "Reset the model as if it had never been loaded before."


def _read_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


@dataclass(frozen=True)
class FetchSettings:
    """
    Settings for the simulated about-info fetch.

    Attributes:
        delay_s: Seconds to wait before producing a result.
        success_probability: Chance in [0, 1] that the fetch succeeds.
        payload: Value returned on success.
    """
    delay_s: float = DEFAULT_FETCH_DELAY_S
    success_probability: float = DEFAULT_SUCCESS_PROBABILITY
    payload: str = ABOUT_PAYLOAD

    def __post_init__(self) -> None:
        if not math.isfinite(self.delay_s) or self.delay_s < 0:
            raise ValueError(f"delay_s must be a finite number >= 0, got {self.delay_s}")
        if not 0.0 <= self.success_probability <= 1.0:
            raise ValueError(
                f"success_probability must be within [0, 1], got {self.success_probability}"
            )

    @classmethod
    def from_env(cls) -> "FetchSettings":
        """Build settings from defaults plus any environment overrides."""
        return cls(
            delay_s=_read_float(ENV_FETCH_DELAY, DEFAULT_FETCH_DELAY_S),
            success_probability=_read_float(
                ENV_SUCCESS_PROBABILITY, DEFAULT_SUCCESS_PROBABILITY
            ),
        )
