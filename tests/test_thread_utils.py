"""Unit tests for thread utilities."""

import os
import unittest
from unittest.mock import MagicMock

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtCore import QThreadPool, QCoreApplication
from PySide6.QtWidgets import QApplication

from state_object_demo.services.load_state import LoadFailure
from state_object_demo.utils.thread_utils import WorkerSignals, SingleRunWorker

# Need QApplication for Qt event loop
app = None


def setUpModule():
    global app
    if QCoreApplication.instance() is None:
        app = QApplication([])


def run_worker(worker):
    pool = QThreadPool.globalInstance()
    pool.start(worker)
    pool.waitForDone(1000)
    QCoreApplication.processEvents()


class TestWorkerSignals(unittest.TestCase):
    """Tests for WorkerSignals class."""

    def test_signals_exist(self):
        """Verify all expected signals are defined."""
        signals = WorkerSignals()
        for name in ('started', 'result', 'error', 'finished'):
            self.assertTrue(hasattr(signals, name), name)


class TestSingleRunWorker(unittest.TestCase):
    """Tests for SingleRunWorker class."""

    def test_successful_execution(self):
        """Worker should emit result on success."""
        def add(a, b):
            return a + b

        worker = SingleRunWorker(add, 2, 3)
        result_handler = MagicMock()
        error_handler = MagicMock()
        finished_handler = MagicMock()

        worker.signals.result.connect(result_handler)
        worker.signals.error.connect(error_handler)
        worker.signals.finished.connect(finished_handler)

        run_worker(worker)

        result_handler.assert_called_once_with(5)
        error_handler.assert_not_called()
        finished_handler.assert_called_once()

    def test_error_carries_exception(self):
        """Worker should emit the raised exception object on failure."""
        def failing_func():
            raise LoadFailure("nope")

        worker = SingleRunWorker(failing_func)
        result_handler = MagicMock()
        error_handler = MagicMock()
        finished_handler = MagicMock()

        worker.signals.result.connect(result_handler)
        worker.signals.error.connect(error_handler)
        worker.signals.finished.connect(finished_handler)

        run_worker(worker)

        result_handler.assert_not_called()
        error_handler.assert_called_once()
        exc = error_handler.call_args[0][0]
        self.assertIsInstance(exc, LoadFailure)
        self.assertEqual(exc.description, "nope")
        finished_handler.assert_called_once()

    def test_kwargs_support(self):
        """Worker should pass kwargs to function."""
        def greet(name, greeting="Hello"):
            return f"{greeting}, {name}!"

        worker = SingleRunWorker(greet, "World", greeting="Hi")
        result_handler = MagicMock()
        worker.signals.result.connect(result_handler)

        run_worker(worker)

        result_handler.assert_called_once_with("Hi, World!")

    def test_started_emitted(self):
        worker = SingleRunWorker(lambda: None)
        started_handler = MagicMock()
        worker.signals.started.connect(started_handler)

        run_worker(worker)

        started_handler.assert_called_once()


if __name__ == '__main__':
    unittest.main()
