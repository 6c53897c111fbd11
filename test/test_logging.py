"""Tests for the package logger setup."""

from __future__ import annotations

import logging
import sys
import tempfile
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from CardSearch.utils.log import configure_logging, log


class TestConfigureLogging(unittest.TestCase):
    def tearDown(self) -> None:
        for handler in list(log.handlers):
            handler.close()
        log.handlers.clear()
        log.setLevel(logging.NOTSET)
        log.propagate = True

    def test_console_only_by_default(self) -> None:
        configure_logging(level="warning", action="search")
        self.assertEqual(len(log.handlers), 1)
        self.assertIsInstance(log.handlers[0], logging.StreamHandler)
        self.assertEqual(log.level, logging.WARNING)
        self.assertFalse(log.propagate)

    def test_file_mirror_per_action(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            configure_logging(level="INFO", action="named", log_to_file=True, log_dir=tmp)
            log.debug("lookup detail")
            for handler in log.handlers:
                handler.flush()
            files = list((Path(tmp) / "named").glob("named_*.log"))
            self.assertEqual(len(files), 1)
            self.assertIn("[DEBG] lookup detail", files[0].read_text(encoding="utf-8"))
            self.tearDown()

    def test_file_mirror_needs_action(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            configure_logging(log_to_file=True, log_dir=tmp)
            self.assertEqual(len(log.handlers), 1)
            self.assertEqual(list(Path(tmp).iterdir()), [])


if __name__ == "__main__":
    unittest.main()
