# __init__.py

from .logger import Logger
from .style import Style, apply_style, parse_color
from .indent import (
    IndentChars, Indent, compute_prefixes,
    UTF_CHARS, UTF_CHARS_BOLD, UTF_CHARS_DOUBLE, UTF_CHARS_DASHED,
    ASCII_CHARS_TICK, ASCII_CHARS_PLUS,
)
from .config import PrintConfig, StyleWhen, OutputKind
from .item import TreeItem, StringItem
from .builder import TreeBuilder
from .loader import ConfigError, load_config, config_from_env
from .output import print_tree, print_tree_with, write_tree, write_tree_with

__all__ = [
    "print_tree", "print_tree_with", "write_tree", "write_tree_with",
    "TreeItem", "StringItem", "TreeBuilder",
    "PrintConfig", "StyleWhen", "OutputKind",
    "Style", "apply_style", "parse_color",
    "IndentChars", "Indent", "compute_prefixes",
    "UTF_CHARS", "UTF_CHARS_BOLD", "UTF_CHARS_DOUBLE", "UTF_CHARS_DASHED",
    "ASCII_CHARS_TICK", "ASCII_CHARS_PLUS",
    "ConfigError", "load_config", "config_from_env",
    "Logger",
]
