# test_indent.py

import pytest

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from treeline.config import PrintConfig
from treeline.indent import (
    IndentChars, Indent, compute_prefixes,
    UTF_CHARS, UTF_CHARS_BOLD, ASCII_CHARS_TICK, ASCII_CHARS_PLUS,
)


class TestComputePrefixes:
    """Prefix fragments built from indent width and glyphs."""

    def test_utf_indent_four(self):
        indent = compute_prefixes(4, UTF_CHARS)
        assert indent.regular_prefix == "├── "
        assert indent.last_regular_prefix == "└── "
        assert indent.child_prefix == "│   "
        assert indent.last_child_prefix == "    "

    def test_ascii_tick_indent_six(self):
        indent = compute_prefixes(6, ASCII_CHARS_TICK)
        assert indent.regular_prefix == "|---- "
        assert indent.last_regular_prefix == "`---- "
        assert indent.child_prefix == "|     "
        assert indent.last_child_prefix == "      "

    @pytest.mark.parametrize("width", [0, 1, 2])
    def test_small_indent_has_no_fill(self, width):
        indent = compute_prefixes(width, UTF_CHARS)
        assert indent == Indent("├ ", "│ ", "└ ", "  ")

    def test_from_config(self):
        config = PrintConfig(indent=3, characters=UTF_CHARS)
        indent = Indent.from_config(config)
        assert indent.regular_prefix == "├─ "
        assert indent.last_regular_prefix == "└─ "
        assert indent.child_prefix == "│  "
        assert indent.last_child_prefix == "   "

    def test_empty_glyphs_are_used_as_given(self):
        indent = compute_prefixes(4, IndentChars("", "", "", "", ""))
        assert indent == Indent(" ", " ", " ", " ")


class TestIndentChars:
    """Looking up and building glyph sets."""

    @pytest.mark.parametrize("name, expected", [
        ("utf", UTF_CHARS),
        ("utf-light", UTF_CHARS),
        ("utf-heavy", UTF_CHARS_BOLD),
        ("utf-bold", UTF_CHARS_BOLD),
        ("ascii", ASCII_CHARS_TICK),
        ("ascii-plus", ASCII_CHARS_PLUS),
        ("  UTF-Double ", IndentChars("╠", "║", "╚", "═")),
    ])
    def test_from_name(self, name, expected):
        assert IndentChars.from_name(name) == expected

    def test_unknown_name_lists_choices(self):
        with pytest.raises(ValueError, match="ascii-plus"):
            IndentChars.from_name("fancy")

    def test_from_mapping_defaults_empty_to_space(self):
        chars = IndentChars.from_value(
            {"down_and_right": "+", "down": ":", "turn_right": "\\", "right": "="})
        assert chars == IndentChars("+", ":", "\\", "=", " ")
        assert compute_prefixes(3, chars).regular_prefix == "+= "

    def test_from_mapping_rejects_missing_and_unknown_fields(self):
        with pytest.raises(ValueError, match="Missing"):
            IndentChars.from_value({"down": "|"})
        with pytest.raises(ValueError, match="Unknown"):
            IndentChars.from_value({"down_and_right": "+", "down": "|",
                                    "turn_right": "+", "right": "-", "up": "^"})

    def test_from_value_passes_instances_through(self):
        assert IndentChars.from_value(UTF_CHARS) is UTF_CHARS
