from __future__ import annotations

import math
import unittest
from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from vibes_core.columns import chunk_rows, layout_columns  # noqa: E402
from vibes_core.models import DisplayItem, LayoutConfig  # noqa: E402
from vibes_core.styling import pad_to, paint, strip_styles, visible_length  # noqa: E402


class StylingTests(unittest.TestCase):
    def test_plain_text_length_is_raw_length(self):
        self.assertEqual(visible_length("hello world"), 11)

    def test_styled_text_measures_visible_characters(self):
        styled = paint("amy", "cyan") + paint(" en_US", "bright_black")
        self.assertIn("\x1b[", styled)
        self.assertEqual(visible_length(styled), 9)
        self.assertEqual(strip_styles(styled), "amy en_US")

    def test_paint_leaves_empty_text_alone(self):
        self.assertEqual(paint("", "cyan"), "")

    def test_pad_to_uses_supplied_measurement(self):
        styled = paint("abc", "bold")
        self.assertEqual(strip_styles(pad_to(styled, 10, measured=3)), "abc" + " " * 7)
        self.assertEqual(pad_to("abcdef", 3), "abcdef")


class LayoutColumnsTests(unittest.TestCase):
    def test_empty_items_render_empty_string(self):
        self.assertEqual(layout_columns([]), "")

    def test_row_count_is_ceiling_of_items_over_columns(self):
        for count in (1, 2, 5, 6):
            for columns in (1, 2, 3):
                items = [f"item{i}" for i in range(count)]
                out = layout_columns(items, LayoutConfig(columns=columns))
                self.assertEqual(len(out.split("\n")), math.ceil(count / columns))

    def test_rows_pack_row_major_and_last_row_is_short(self):
        out = layout_columns(["a1", "a2", "a3", "a4", "a5"])
        lines = out.split("\n")
        self.assertEqual(lines[0], "  " + "  a1".ljust(35) + "  " + "  a2".ljust(35))
        self.assertEqual(lines[1], "  " + "  a3".ljust(35) + "  " + "  a4".ljust(35))
        self.assertEqual(lines[2], "  " + "  a5".ljust(35))

    def test_plain_items_carry_no_styling(self):
        out = layout_columns([DisplayItem("bob"), DisplayItem("amy")])
        self.assertNotIn("\x1b", out)

    def test_only_current_item_is_highlighted(self):
        out = layout_columns([{"name": "bob"}, {"name": "amy", "current": True}])
        plain = strip_styles(out)
        self.assertIn("▶ amy", plain)
        self.assertNotIn("▶ bob", plain)
        self.assertIn(paint("▶ amy", "cyan"), out)
        self.assertEqual(plain.count("▶"), 1)

    def test_description_gets_muted_style(self):
        out = layout_columns([DisplayItem("en_US-amy", "en_US")], LayoutConfig(columns=1))
        self.assertIn(paint("  en_US-amy", "cyan"), out)
        self.assertIn(paint(" en_US", "bright_black"), out)
        self.assertEqual(strip_styles(out), "  " + "  en_US-amy en_US".ljust(35))

    def test_styled_cells_pad_to_same_visible_width(self):
        items = [
            DisplayItem("amy", "en_US", is_current=True),
            DisplayItem("bob"),
            DisplayItem("carol", "it_IT"),
            DisplayItem("dave", is_current=False),
        ]
        out = layout_columns(items, LayoutConfig(columns=4, column_width=20, indent=""))
        line = strip_styles(out)
        self.assertEqual(len(line), 4 * 20 + 3 * 2)

    def test_long_labels_are_never_truncated(self):
        name = "x" * 50
        out = strip_styles(layout_columns([name, "b"]))
        self.assertEqual(out, "  " + "  " + name + "  " + "  b".ljust(35))

    def test_custom_indent_and_highlight(self):
        config = LayoutConfig(columns=1, column_width=0, highlight_char="*", indent="> ")
        out = layout_columns([DisplayItem("amy", is_current=True)], config)
        self.assertEqual(strip_styles(out), "> * amy")

    def test_output_is_deterministic(self):
        items = [DisplayItem("amy", "en_US", True), "bob", {"name": "carol", "lang": "it_IT"}]
        self.assertEqual(layout_columns(items), layout_columns(items))

    def test_duplicate_names_render_as_given(self):
        out = strip_styles(layout_columns(["amy", "amy"]))
        self.assertEqual(out.count("amy"), 2)

    def test_chunk_rows_floors_size_at_one(self):
        self.assertEqual(chunk_rows(["a", "b"], 0), [["a"], ["b"]])


class DisplayItemTests(unittest.TestCase):
    def test_coerce_string(self):
        self.assertEqual(DisplayItem.coerce("amy"), DisplayItem("amy"))

    def test_coerce_mapping_aliases(self):
        item = DisplayItem.coerce({"name": "amy", "lang": "en_US", "is_current": True})
        self.assertEqual(item, DisplayItem("amy", "en_US", True))

    def test_coerce_keeps_display_item(self):
        item = DisplayItem("amy")
        self.assertIs(DisplayItem.coerce(item), item)


if __name__ == "__main__":
    unittest.main()
