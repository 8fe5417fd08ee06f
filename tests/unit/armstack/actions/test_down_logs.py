from __future__ import annotations

import argparse
import unittest
from pathlib import Path
from unittest import mock

from armstack.actions import down, logs
from armstack.config import DeployConfig


ARGS = argparse.Namespace(config=DeployConfig(workdir=Path("/w")))


class TestDownHandler(unittest.TestCase):
    def test_down_delegates_to_compose(self):
        engine = mock.MagicMock()
        engine.compose_down.return_value = 0
        with mock.patch.object(down, "make_engine", return_value=engine):
            self.assertEqual(down.handler(ARGS), 0)
        engine.compose_down.assert_called_once_with()

    def test_down_failure_maps_to_exit_1(self):
        engine = mock.MagicMock()
        engine.compose_down.return_value = 125
        with mock.patch.object(down, "make_engine", return_value=engine):
            self.assertEqual(down.handler(ARGS), 1)


class TestLogsHandler(unittest.TestCase):
    def test_logs_follow(self):
        engine = mock.MagicMock()
        engine.compose_logs.return_value = 0
        with mock.patch.object(logs, "make_engine", return_value=engine):
            self.assertEqual(logs.handler(ARGS), 0)
        engine.compose_logs.assert_called_once_with(follow=True)

    def test_logs_failure_maps_to_exit_1(self):
        engine = mock.MagicMock()
        engine.compose_logs.return_value = 14
        with mock.patch.object(logs, "make_engine", return_value=engine):
            self.assertEqual(logs.handler(ARGS), 1)

    def test_ctrl_c_ends_logs_cleanly(self):
        engine = mock.MagicMock()
        engine.compose_logs.side_effect = KeyboardInterrupt
        with mock.patch.object(logs, "make_engine", return_value=engine):
            self.assertEqual(logs.handler(ARGS), 0)


if __name__ == "__main__":
    unittest.main()
