"""Depth-bounded inline expansion of nested directories."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from lsx.glyphs import ASCII_GLYPHS, UNICODE_GLYPHS
from lsx.options import ListingOptions
from lsx.tree_model import indent_prefix, iter_inline_rows


def _make_tree(root: Path) -> Path:
    sub = root / "sub"
    (sub / "inner" / "deeper").mkdir(parents=True)
    (sub / "a.txt").write_text("a", encoding="utf-8")
    (sub / "b.txt").write_text("b", encoding="utf-8")
    (sub / "inner" / "deep.txt").write_text("d", encoding="utf-8")
    (sub / "inner" / "deeper" / "bottom.txt").write_text("z", encoding="utf-8")
    return sub


class IndentPrefixTests(unittest.TestCase):
    def test_unicode_branches(self) -> None:
        self.assertEqual(indent_prefix(1, False, UNICODE_GLYPHS), "  ├─ ")
        self.assertEqual(indent_prefix(1, True, UNICODE_GLYPHS), "  └─ ")
        self.assertEqual(indent_prefix(3, True, UNICODE_GLYPHS), "      └─ ")

    def test_ascii_branches(self) -> None:
        self.assertEqual(indent_prefix(1, False, ASCII_GLYPHS), "  |- ")
        self.assertEqual(indent_prefix(2, True, ASCII_GLYPHS), "    `- ")

    def test_top_level_has_no_prefix(self) -> None:
        self.assertEqual(indent_prefix(0, True, UNICODE_GLYPHS), "")


class InlineRowsTests(unittest.TestCase):
    def test_depth_zero_yields_nothing(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            sub = _make_tree(Path(tmp))
            self.assertEqual(list(iter_inline_rows(sub, ListingOptions(depth=0), UNICODE_GLYPHS)), [])

    def test_depth_one_lists_direct_children_only(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            sub = _make_tree(Path(tmp))
            rows = list(iter_inline_rows(sub, ListingOptions(depth=1), UNICODE_GLYPHS))

            self.assertEqual([row.entry.name for row in rows], ["a.txt", "b.txt", "inner"])
            self.assertEqual([row.level for row in rows], [1, 1, 1])
            self.assertEqual([row.is_last for row in rows], [False, False, True])
            self.assertEqual([row.prefix for row in rows], ["  ├─ ", "  ├─ ", "  └─ "])

    def test_nested_rows_follow_their_parent(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            sub = _make_tree(Path(tmp))
            rows = list(iter_inline_rows(sub, ListingOptions(depth=2), UNICODE_GLYPHS))

            self.assertEqual(
                [(row.entry.name, row.level) for row in rows],
                [("a.txt", 1), ("b.txt", 1), ("inner", 1), ("deep.txt", 2), ("deeper", 2)],
            )
            self.assertEqual(rows[-1].prefix, "    └─ ")

    def test_levels_never_exceed_depth(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            sub = _make_tree(Path(tmp))
            for depth in (1, 2, 3, 999):
                rows = list(iter_inline_rows(sub, ListingOptions(depth=depth), UNICODE_GLYPHS))
                self.assertTrue(all(row.level <= depth for row in rows))
            deepest = list(iter_inline_rows(sub, ListingOptions(depth=999), UNICODE_GLYPHS))
            self.assertEqual(max(row.level for row in deepest), 3)
            self.assertIn("bottom.txt", [row.entry.name for row in deepest])

    def test_sort_options_apply_at_every_level(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            sub = _make_tree(Path(tmp))
            rows = list(iter_inline_rows(sub, ListingOptions(depth=2, reverse=True), UNICODE_GLYPHS))
            self.assertEqual(
                [row.entry.name for row in rows],
                ["inner", "deeper", "deep.txt", "b.txt", "a.txt"],
            )

    def test_pattern_filters_nested_levels(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            sub = _make_tree(Path(tmp))
            rows = list(iter_inline_rows(sub, ListingOptions(depth=3, pattern="*.txt"), UNICODE_GLYPHS))
            self.assertEqual([row.entry.name for row in rows], ["a.txt", "b.txt"])

    def test_unreadable_directory_contributes_no_rows(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            missing = root / "gone"
            plain_file = root / "file.txt"
            plain_file.write_text("x", encoding="utf-8")
            options = ListingOptions(depth=2)

            self.assertEqual(list(iter_inline_rows(missing, options, UNICODE_GLYPHS)), [])
            self.assertEqual(list(iter_inline_rows(plain_file, options, UNICODE_GLYPHS)), [])

    def test_symlinked_directory_is_not_expanded(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            sub = _make_tree(Path(tmp))
            (sub / "loop").symlink_to(sub)
            rows = list(iter_inline_rows(sub, ListingOptions(depth=999), UNICODE_GLYPHS))
            names = [row.entry.name for row in rows]
            self.assertEqual(names.count("loop"), 1)
            self.assertEqual(names.count("a.txt"), 1)


if __name__ == "__main__":
    unittest.main()
