"""
Observable load state for a lazily loaded screen.

The parent window owns a single LoadState and hands it to every child
view it creates. Views read it and re-render on its signals. Only the
completion slots and reset() mutate it.
"""

import logging
from enum import Enum
from typing import Optional

from PySide6.QtCore import QObject, Signal, Slot

from state_object_demo.config import LOAD_FAILURE_DESCRIPTION


logger = logging.getLogger(__name__)


class DisplayMode(Enum):
    """What the child screen should render."""
    LOADING = "loading"     # Not loaded yet, or load in progress
    READY = "ready"         # Info available
    ERROR = "error"         # Last load failed


class LoadFailure(Exception):
    """Raised when the about info could not be retrieved."""

    def __init__(self, description: str = LOAD_FAILURE_DESCRIPTION) -> None:
        super().__init__(description)
        self.description = description

    def __str__(self) -> str:
        return self.description


class LoadState(QObject):
    """
    Display mode plus the result of the last load.

    Invariant:
        READY   -> info set, error None
        ERROR   -> error set, info None
        LOADING -> info and error both None

    Signals:
        display_mode_changed: Emitted with the new mode on every transition.
        state_changed: Emitted after any mutation, including a reset while
            already loading.
    """

    display_mode_changed = Signal(DisplayMode)
    state_changed = Signal()

    def __init__(self, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self._display_mode = DisplayMode.LOADING
        self._info: Optional[str] = None
        self._error: Optional[LoadFailure] = None
        self._fetching = False
        self._generation = 0

    @property
    def display_mode(self) -> DisplayMode:
        return self._display_mode

    @property
    def info(self) -> Optional[str]:
        return self._info

    @property
    def error(self) -> Optional[LoadFailure]:
        return self._error

    @property
    def is_loading(self) -> bool:
        return self._display_mode == DisplayMode.LOADING

    @property
    def is_ready(self) -> bool:
        return self._display_mode == DisplayMode.READY

    @property
    def has_error(self) -> bool:
        return self._display_mode == DisplayMode.ERROR

    @property
    def is_fetching(self) -> bool:
        """True while a fetch started since the last reset has not completed."""
        return self._fetching

    @property
    def generation(self) -> int:
        """Incremented by every reset(); tags which load a fetch belongs to."""
        return self._generation

    def reset(self) -> None:
        """
        Return to the never-loaded state.

        Clears info and error along with the mode, and starts a new
        generation so the next ensure_loaded fetches again. A fetch already
        in flight is not cancelled and will still deliver its result.
        """
        logger.debug("Resetting load state (was %s)", self._display_mode.value)
        self._generation += 1
        self._fetching = False
        self._info = None
        self._error = None
        self._set_mode(DisplayMode.LOADING)

    def mark_fetching(self) -> int:
        """
        Record that a fetch has been started for this state.

        Returns:
            The generation the fetch belongs to. Pass it back to
            apply_success/apply_failure.
        """
        self._fetching = True
        return self._generation

    @Slot(object)
    def apply_success(self, info: str, generation: Optional[int] = None) -> None:
        """Store a successful result (runs in the GUI thread)."""
        self._finish_fetch(generation)
        self._info = info
        self._error = None
        self._set_mode(DisplayMode.READY)

    @Slot(object)
    def apply_failure(self, exc: BaseException, generation: Optional[int] = None) -> None:
        """Store a failed result (runs in the GUI thread)."""
        if not isinstance(exc, LoadFailure):
            exc = LoadFailure(str(exc) or LOAD_FAILURE_DESCRIPTION)
        self._finish_fetch(generation)
        self._info = None
        self._error = exc
        self._set_mode(DisplayMode.ERROR)

    def _finish_fetch(self, generation: Optional[int]) -> None:
        # A result from before the last reset still overwrites the state,
        # but only the current generation's fetch clears the marker.
        if generation is None or generation == self._generation:
            self._fetching = False
        else:
            logger.debug(
                "Fetch from generation %d completed after reset (now %d)",
                generation, self._generation,
            )

    def _set_mode(self, mode: DisplayMode) -> None:
        changed = mode != self._display_mode
        self._display_mode = mode
        if changed:
            self.display_mode_changed.emit(mode)
        self.state_changed.emit()
