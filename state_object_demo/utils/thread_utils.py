"""
Threading utilities for background work in the UI.

Provides a one-shot worker that runs a callable on a QThreadPool and
reports the outcome through Qt signals. Slots connected on QObjects that
live in the GUI thread receive the outcome through queued delivery, so
they can safely touch UI state.
"""

import logging
from typing import Any, Callable

from PySide6.QtCore import QRunnable, QObject, Signal


logger = logging.getLogger(__name__)


class WorkerSignals(QObject):
    """
    Signals for worker communication.

    Signals:
        started: Emitted when the worker begins executing.
        result: Emitted with the return value on success.
        error: Emitted with the raised exception on failure.
        finished: Emitted when the worker completes (success or failure).
    """
    started = Signal()
    result = Signal(object)
    error = Signal(object)
    finished = Signal()


class SingleRunWorker(QRunnable):
    """
    Executes a function once in a thread pool.

    Usage:
        worker = SingleRunWorker(fetch_about_info, delay_s=2.0)
        worker.signals.result.connect(state.apply_success)
        worker.signals.error.connect(state.apply_failure)
        QThreadPool.globalInstance().start(worker)
    """

    def __init__(self, func: Callable, *args: Any, **kwargs: Any) -> None:
        super().__init__()
        self.func = func
        self.args = args
        self.kwargs = kwargs
        self.signals = WorkerSignals()
        self.setAutoDelete(True)

    def run(self) -> None:
        """Execute the function and emit appropriate signals."""
        self.signals.started.emit()
        try:
            result = self.func(*self.args, **self.kwargs)
        except Exception as e:
            logger.debug("Worker function %r raised: %s", self.func, e)
            self.signals.error.emit(e)
        else:
            self.signals.result.emit(result)
        finally:
            self.signals.finished.emit()
