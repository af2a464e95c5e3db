"""Unit tests for LoadState transitions and notifications."""

import os
import unittest
from unittest.mock import MagicMock

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtCore import QCoreApplication
from PySide6.QtWidgets import QApplication

from state_object_demo.config import LOAD_FAILURE_DESCRIPTION
from state_object_demo.services.load_state import DisplayMode, LoadFailure, LoadState

app = None


def setUpModule():
    global app
    if QCoreApplication.instance() is None:
        app = QApplication([])


class TestLoadFailure(unittest.TestCase):

    def test_default_description(self):
        self.assertEqual(LoadFailure().description, LOAD_FAILURE_DESCRIPTION)
        self.assertEqual(str(LoadFailure()), LOAD_FAILURE_DESCRIPTION)

    def test_custom_description(self):
        self.assertEqual(str(LoadFailure("disk on fire")), "disk on fire")


class TestLoadState(unittest.TestCase):
    """Tests for LoadState."""

    def setUp(self):
        self.state = LoadState()

    def assert_invariant(self):
        mode = self.state.display_mode
        if mode == DisplayMode.LOADING:
            self.assertIsNone(self.state.info)
            self.assertIsNone(self.state.error)
        elif mode == DisplayMode.READY:
            self.assertIsNotNone(self.state.info)
            self.assertIsNone(self.state.error)
        else:
            self.assertIsNone(self.state.info)
            self.assertIsNotNone(self.state.error)

    def test_starts_loading(self):
        self.assertEqual(self.state.display_mode, DisplayMode.LOADING)
        self.assertTrue(self.state.is_loading)
        self.assertFalse(self.state.is_fetching)
        self.assert_invariant()

    def test_success_transitions_to_ready(self):
        """Loading -> Ready with the payload set and no error."""
        self.state.mark_fetching()
        self.state.apply_success("the info is ready")

        self.assertEqual(self.state.display_mode, DisplayMode.READY)
        self.assertEqual(self.state.info, "the info is ready")
        self.assertIsNone(self.state.error)
        self.assertFalse(self.state.is_fetching)
        self.assert_invariant()

    def test_failure_transitions_to_error(self):
        """Loading -> Error with the error set and no payload."""
        self.state.mark_fetching()
        self.state.apply_failure(LoadFailure())

        self.assertEqual(self.state.display_mode, DisplayMode.ERROR)
        self.assertTrue(self.state.has_error)
        self.assertIsNone(self.state.info)
        self.assertEqual(self.state.error.description, LOAD_FAILURE_DESCRIPTION)
        self.assertFalse(self.state.is_fetching)
        self.assert_invariant()

    def test_failure_wraps_foreign_exception(self):
        self.state.apply_failure(OSError("connection refused"))

        self.assertIsInstance(self.state.error, LoadFailure)
        self.assertEqual(self.state.error.description, "connection refused")

    def test_failure_after_success_clears_info(self):
        self.state.apply_success("the info is ready")
        self.state.apply_failure(LoadFailure())

        self.assertIsNone(self.state.info)
        self.assert_invariant()

    def test_reset_on_ready_returns_to_loading(self):
        """reset() goes back to Loading and drops the stale payload."""
        self.state.apply_success("the info is ready")
        self.state.reset()

        self.assertEqual(self.state.display_mode, DisplayMode.LOADING)
        self.assertIsNone(self.state.info)
        self.assert_invariant()

    def test_reset_on_error_clears_error(self):
        self.state.apply_failure(LoadFailure())
        self.state.reset()

        self.assertTrue(self.state.is_loading)
        self.assertIsNone(self.state.error)

    def test_reset_starts_new_generation(self):
        generation = self.state.mark_fetching()
        self.state.reset()

        self.assertEqual(self.state.generation, generation + 1)
        self.assertFalse(self.state.is_fetching)

    def test_stale_result_overwrites_but_keeps_current_marker(self):
        """A result from before reset() lands, but the newer fetch stays in flight."""
        stale = self.state.mark_fetching()
        self.state.reset()
        current = self.state.mark_fetching()

        self.state.apply_success("old info", stale)
        self.assertEqual(self.state.info, "old info")
        self.assertTrue(self.state.is_fetching)

        self.state.apply_success("the info is ready", current)
        self.assertEqual(self.state.info, "the info is ready")
        self.assertFalse(self.state.is_fetching)

    def test_stale_failure_keeps_current_marker(self):
        stale = self.state.mark_fetching()
        self.state.reset()
        self.state.mark_fetching()

        self.state.apply_failure(LoadFailure(), stale)

        self.assertTrue(self.state.has_error)
        self.assertTrue(self.state.is_fetching)
        self.assert_invariant()

    def test_mode_changed_signal(self):
        handler = MagicMock()
        self.state.display_mode_changed.connect(handler)

        self.state.apply_success("x")
        self.state.reset()

        self.assertEqual(
            [c.args[0] for c in handler.call_args_list],
            [DisplayMode.READY, DisplayMode.LOADING],
        )

    def test_mode_changed_not_emitted_without_transition(self):
        mode_handler = MagicMock()
        state_handler = MagicMock()
        self.state.display_mode_changed.connect(mode_handler)
        self.state.state_changed.connect(state_handler)

        self.state.reset()

        mode_handler.assert_not_called()
        state_handler.assert_called_once()

    def test_state_changed_on_every_mutation(self):
        handler = MagicMock()
        self.state.state_changed.connect(handler)

        self.state.apply_success("a")
        self.state.apply_success("b")

        self.assertEqual(handler.call_count, 2)
        self.assertEqual(self.state.info, "b")


if __name__ == '__main__':
    unittest.main()
