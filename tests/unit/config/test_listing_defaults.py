"""Read-only config defaults and their sanitization."""

from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from lsx import config


class ListingDefaultsTests(unittest.TestCase):
    def test_missing_file_yields_no_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch("lsx.config.CONFIG_PATH", Path(tmp) / "config.json"):
                self.assertEqual(config.load_config(), {})
                self.assertEqual(config.load_listing_defaults(), {})

    def test_malformed_or_non_object_file_is_ignored(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("lsx.config.CONFIG_PATH", config_path):
                config_path.write_text("{not json", encoding="utf-8")
                self.assertEqual(config.load_listing_defaults(), {})
                config_path.write_text("[1, 2]", encoding="utf-8")
                self.assertEqual(config.load_listing_defaults(), {})

    def test_only_well_typed_keys_survive(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            config_path.write_text(
                json.dumps(
                    {
                        "show_hidden": True,
                        "long_format": "yes",
                        "ascii_borders": False,
                        "depth": 2,
                        "unknown": True,
                    }
                ),
                encoding="utf-8",
            )
            with mock.patch("lsx.config.CONFIG_PATH", config_path):
                self.assertEqual(
                    config.load_listing_defaults(),
                    {"show_hidden": True, "ascii_borders": False, "depth": 2},
                )

    def test_invalid_depth_values_are_dropped(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("lsx.config.CONFIG_PATH", config_path):
                for depth in (-1, True, 1.5, "3"):
                    config_path.write_text(json.dumps({"depth": depth}), encoding="utf-8")
                    self.assertNotIn("depth", config.load_listing_defaults())

    def test_loading_never_creates_the_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "nested" / "config.json"
            with mock.patch("lsx.config.CONFIG_PATH", config_path):
                config.load_listing_defaults()
            self.assertFalse(config_path.exists())
            self.assertFalse(config_path.parent.exists())


if __name__ == "__main__":
    unittest.main()
