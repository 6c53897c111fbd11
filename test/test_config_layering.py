"""Tests for YAML config loading, layering and validation."""

from __future__ import annotations

import os
import sys
import tempfile
import unittest
from pathlib import Path
from unittest import mock

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from CardSearch.config import build_options, load_config, load_config_with_defaults, parse_config_dict
from CardSearch.config.app import merge_config_dicts, parse_yaml
from CardSearch.search import SortDirection, SortMethod, UniqueStrategy, cmc

DEFAULT_PATH = REPO_ROOT / "config" / "default.yml"


def _raw() -> dict:
    return parse_yaml(DEFAULT_PATH.read_text(encoding="utf-8"))


class TestConfigDefaults(unittest.TestCase):
    def test_default_file_parses(self) -> None:
        with mock.patch.dict(os.environ, {}, clear=True):
            config = load_config(DEFAULT_PATH)
        self.assertEqual(config.runtime.level, "INFO")
        self.assertEqual(config.api.base_url, "https://api.scryfall.com")
        self.assertEqual(config.api.timeout, 30.0)
        self.assertEqual(config.api.user_agent, "card-search/0.1")
        self.assertIsNone(config.search.order)
        self.assertEqual(config.search.max_results, 50)
        self.assertEqual(config.output.formats, ("console",))

    def test_override_merges_with_defaults(self) -> None:
        override_yaml = """
log:
  level: debug

search:
  order: released
  direction: desc
  unique: prints
  include_extras: true

output:
  formats: [console, json]
"""
        with tempfile.TemporaryDirectory() as tmp:
            override_path = Path(tmp) / "override.yml"
            override_path.write_text(override_yaml, encoding="utf-8")
            config = load_config_with_defaults(override_path, default_path=DEFAULT_PATH)

        self.assertEqual(config.runtime.level, "DEBUG")
        self.assertFalse(config.runtime.to_file)
        self.assertEqual(config.search.order, SortMethod.RELEASED)
        self.assertEqual(config.search.direction, SortDirection.DESCENDING)
        self.assertEqual(config.search.unique, UniqueStrategy.PRINTS)
        self.assertTrue(config.search.include_extras)
        self.assertEqual(config.search.max_results, 50)
        self.assertEqual(config.output.formats, ("console", "json"))
        self.assertEqual(config.api.base_url, "https://api.scryfall.com")

    def test_user_agent_from_environment(self) -> None:
        with mock.patch.dict(os.environ, {"CARDSEARCH_USER_AGENT": "  my-app/2.0  "}):
            config = parse_config_dict(_raw())
        self.assertEqual(config.api.user_agent, "my-app/2.0")

    def test_merge_is_deep(self) -> None:
        merged = merge_config_dicts({"a": {"b": 1, "c": 2}, "d": 3}, {"a": {"c": 5}})
        self.assertEqual(merged, {"a": {"b": 1, "c": 5}, "d": 3})


class TestConfigValidation(unittest.TestCase):
    def _parse_with(self, section: str, **values: object) -> None:
        raw = _raw()
        raw[section] = {**raw[section], **values}
        parse_config_dict(raw)

    def test_unknown_log_level(self) -> None:
        with self.assertRaises(ValueError):
            self._parse_with("log", level="LOUD")

    def test_bad_timeout_type(self) -> None:
        with self.assertRaises(TypeError):
            self._parse_with("api", timeout="fast")

    def test_non_positive_timeout(self) -> None:
        with self.assertRaises(ValueError):
            self._parse_with("api", timeout=0)

    def test_negative_interval(self) -> None:
        with self.assertRaises(ValueError):
            self._parse_with("api", request_interval=-1)

    def test_bad_base_url(self) -> None:
        with self.assertRaises(ValueError):
            self._parse_with("api", base_url="api.scryfall.com")

    def test_unknown_sort_order(self) -> None:
        with self.assertRaises(ValueError):
            self._parse_with("search", order="price")

    def test_direction_requires_order(self) -> None:
        with self.assertRaises(ValueError):
            self._parse_with("search", direction="asc")

    def test_unknown_output_format(self) -> None:
        with self.assertRaises(ValueError):
            self._parse_with("output", formats=["pdf"])

    def test_missing_section(self) -> None:
        raw = _raw()
        del raw["api"]
        with self.assertRaises(ValueError):
            parse_config_dict(raw)

    def test_root_must_be_mapping(self) -> None:
        with self.assertRaises(ValueError):
            parse_yaml("- a\n- b\n")


class TestBuildOptions(unittest.TestCase):
    def test_configured_defaults_applied(self) -> None:
        raw = _raw()
        raw["search"] = {**raw["search"], "order": "cmc", "direction": "desc", "include_variations": True}
        config = parse_config_dict(raw)
        options = build_options(config.search, cmc(3))
        self.assertEqual(options.query_string(), "q=cmc%3A3&order=cmc&dir=desc&include_variations=true")


if __name__ == "__main__":
    unittest.main()
