"""Tests for config loading and input sanitization."""

from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from sizetree import config


def _write_config(path: Path, data: object) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data), encoding="utf-8")


class ConfigBehaviorTests(unittest.TestCase):
    def test_missing_config_yields_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch("sizetree.config.CONFIG_PATH", Path(tmp) / "absent.json"):
                self.assertEqual(config.load_config(), {})
                self.assertIsNone(config.load_workers())
                self.assertIsNone(config.load_line_width())

    def test_valid_values_are_loaded(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "nested" / "sizetree.json"
            with mock.patch("sizetree.config.CONFIG_PATH", config_path):
                _write_config(config_path, {"workers": 3, "line_width": 120})
                self.assertEqual(config.load_workers(), 3)
                self.assertEqual(config.load_line_width(), 120)

    def test_invalid_values_are_ignored(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "sizetree.json"
            with mock.patch("sizetree.config.CONFIG_PATH", config_path):
                _write_config(config_path, {"workers": True, "line_width": -4})
                self.assertIsNone(config.load_workers())
                self.assertIsNone(config.load_line_width())

                _write_config(config_path, {"workers": "8", "line_width": 7.5})
                self.assertIsNone(config.load_workers())
                self.assertIsNone(config.load_line_width())

    def test_malformed_json_falls_back_to_empty(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "sizetree.json"
            config_path.write_text("{not json", encoding="utf-8")
            with mock.patch("sizetree.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_config(), {})

            config_path.write_text("[1, 2]", encoding="utf-8")
            with mock.patch("sizetree.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_config(), {})


if __name__ == "__main__":
    unittest.main()
