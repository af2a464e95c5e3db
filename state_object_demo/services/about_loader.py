"""
Lazy loader for the about info.

Starts a background fetch only when the state has nothing loaded yet,
and routes the outcome back into the state on the GUI thread.
"""

import logging
from typing import Callable, Optional

from PySide6.QtCore import QObject, QThreadPool, Slot

from state_object_demo.services.load_state import LoadState
from state_object_demo.utils.thread_utils import SingleRunWorker


logger = logging.getLogger(__name__)


class FetchCompletion(QObject):
    """
    Receives one worker's signals and forwards them to the state.

    Lives in the GUI thread, so its slots run there. Remembers the state
    generation the fetch was started in.
    """

    def __init__(
        self,
        state: LoadState,
        generation: int,
        fetch_number: int,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self._state = state
        self._generation = generation
        self._fetch_number = fetch_number

    @property
    def generation(self) -> int:
        return self._generation

    @Slot()
    def on_started(self) -> None:
        logger.debug(
            "About info fetch #%d running (generation %d)",
            self._fetch_number, self._generation,
        )

    @Slot(object)
    def on_result(self, info: str) -> None:
        logger.info("About info loaded: %s", info)
        self._state.apply_success(info, self._generation)

    @Slot(object)
    def on_error(self, exc: BaseException) -> None:
        logger.warning("About info failed to load: %s", exc)
        self._state.apply_failure(exc, self._generation)

    @Slot()
    def on_finished(self) -> None:
        self.deleteLater()


class AboutLoader(QObject):
    """
    Runs the about-info fetch in the background, at most once per load.

    Usage:
        loader = AboutLoader(make_about_fetcher())
        loader.ensure_loaded(state)  # Starts a fetch
        loader.ensure_loaded(state)  # No-op while in flight or once ready
    """

    def __init__(
        self,
        fetch_func: Callable[[], str],
        thread_pool: Optional[QThreadPool] = None,
        parent: Optional[QObject] = None,
    ) -> None:
        """
        Initialize the loader.

        Args:
            fetch_func: Blocking callable returning the info or raising
                LoadFailure. Runs on a pool thread.
            thread_pool: Pool to run fetches on (default: global instance).
        """
        super().__init__(parent)
        self._fetch_func = fetch_func
        self._thread_pool = thread_pool or QThreadPool.globalInstance()
        self._fetch_count = 0

    @property
    def fetch_count(self) -> int:
        """Number of fetches this loader has started."""
        return self._fetch_count

    def ensure_loaded(self, state: LoadState) -> bool:
        """
        Start a fetch unless the state is ready or already fetching.

        Returns:
            True if a fetch was started.
        """
        if state.is_ready:
            logger.debug("About info already loaded, skipping fetch")
            return False
        if state.is_fetching:
            logger.debug("About info fetch already in flight, skipping")
            return False

        generation = state.mark_fetching()
        self._fetch_count += 1
        logger.debug("Starting about info fetch #%d", self._fetch_count)

        # Parented to the loader so it outlives this call until finished
        completion = FetchCompletion(state, generation, self._fetch_count, parent=self)

        worker = SingleRunWorker(self._fetch_func)
        worker.signals.started.connect(completion.on_started)
        worker.signals.result.connect(completion.on_result)
        worker.signals.error.connect(completion.on_error)
        worker.signals.finished.connect(completion.on_finished)

        self._thread_pool.start(worker)
        return True
