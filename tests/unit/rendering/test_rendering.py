"""Tests for size formatting and tree text rendering."""

from __future__ import annotations

import unittest

from sizetree.rendering import format_entry_line, format_size, padding_for, render_tree
from sizetree.size_tree import DirectoryEntry, FileEntry


class FormatSizeTests(unittest.TestCase):
    def test_unit_boundaries(self) -> None:
        self.assertEqual(format_size(0), "0.00 B")
        self.assertEqual(format_size(1023), "1023.00 B")
        self.assertEqual(format_size(1024), "1.00 KB")
        self.assertEqual(format_size(1536), "1.50 KB")
        self.assertEqual(format_size(1048575), "1024.00 KB")
        self.assertEqual(format_size(1048576), "1.00 MB")

    def test_one_gibibyte_stays_in_megabytes(self) -> None:
        self.assertEqual(format_size(1073741824), "1024.00 MB")
        self.assertEqual(format_size(1073741825), "1.00 GB")
        self.assertEqual(format_size(5 * 1073741824), "5.00 GB")


class EntryLineTests(unittest.TestCase):
    def test_padding_counts_indent_name_and_size_but_not_marker(self) -> None:
        line = format_entry_line("a", 10, depth=1)

        self.assertEqual(len(line), 83)
        self.assertEqual(line, "| -- a " + "." * 69 + "10.00 B")
        self.assertEqual(len(format_entry_line("a", 10, depth=0)), 83)
        self.assertTrue(line.startswith("| -- a ...."))
        self.assertTrue(line.endswith("..10.00 B"))

    def test_padding_is_space_then_dots(self) -> None:
        self.assertEqual(padding_for(76, width=80), " ...")
        self.assertEqual(padding_for(79, width=80), " ")
        self.assertEqual(padding_for(80, width=80), "")
        self.assertEqual(padding_for(95, width=80), "")

    def test_long_name_gets_no_padding(self) -> None:
        name = "n" * 90
        self.assertEqual(format_entry_line(name, 1, depth=0), f"-- {name}1.00 B")

    def test_custom_width(self) -> None:
        self.assertEqual(format_entry_line("x", 1, depth=0, width=20), "-- x ............1.00 B")


class RenderTreeTests(unittest.TestCase):
    def test_render_tree_emits_pre_order_lines(self) -> None:
        tree = DirectoryEntry(
            "root",
            35,
            (
                DirectoryEntry("sub", 5, (FileEntry("c", 5),)),
                FileEntry("a", 10),
                FileEntry("b", 20),
            ),
        )

        lines = render_tree(tree).splitlines()

        self.assertEqual(len(lines), 5)
        self.assertTrue(lines[0].startswith("-- root "))
        self.assertTrue(lines[1].startswith("| -- sub "))
        self.assertTrue(lines[2].startswith("| | -- c "))
        self.assertTrue(lines[3].startswith("| -- a "))
        self.assertTrue(lines[4].startswith("| -- b "))
        self.assertTrue(all(len(line) == 83 for line in lines))
        self.assertTrue(render_tree(tree).endswith("\n"))


if __name__ == "__main__":
    unittest.main()
