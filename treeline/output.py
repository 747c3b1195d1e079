# output.py

import sys
from typing import TextIO

from .logger import Logger
from .config import OutputKind, PrintConfig
from .indent import Indent
from .item import TreeItem
from .loader import config_from_env
from .style import Style, apply_style

logger = Logger(__name__)

PLAIN = Style()

def print_item(
    item: TreeItem,
    f: TextIO,
    prefix: str,
    child_prefix: str,
    config: PrintConfig,
    indent: Indent,
    branch_style: Style,
    leaf_style: Style,
    styled: bool,
    level: int,
) -> None:
    """
    Write item and its subtree to f, one line per item.

    Args:
        item: Item to render
        f: Text sink, write errors propagate unchanged
        prefix: Branch drawn before this item's text
        child_prefix: Prefix that this item's children extend
        config: Render configuration, only depth is read here
        indent: Prefix fragments computed once for the whole render
        branch_style: Style of the prefixes
        leaf_style: Style passed to the item for its own text
        styled: Whether styles are applied at all
        level: Depth of item below the root
    """
    f.write(apply_style(prefix, branch_style, styled))
    item.write_self(f, leaf_style if styled else PLAIN)
    f.write("\n")

    if config.depth is not None and level >= config.depth:
        return

    # children() may return any iterable, including a generator
    children = list(item.children())
    if not children:
        return

    *regular, last = children

    rp = child_prefix + indent.regular_prefix
    cp = child_prefix + indent.child_prefix
    for child in regular:
        print_item(child, f, rp, cp, config, indent,
                   branch_style, leaf_style, styled, level + 1)

    rp = child_prefix + indent.last_regular_prefix
    cp = child_prefix + indent.last_child_prefix
    print_item(last, f, rp, cp, config, indent,
               branch_style, leaf_style, styled, level + 1)

def _render(item: TreeItem, f: TextIO, config: PrintConfig, styled: bool) -> None:
    logger.debug(f"Rendering {type(item).__name__} (styled={styled}, depth={config.depth})")
    print_item(item, f, "", "", config, Indent.from_config(config),
               config.branch, config.leaf, styled, 0)

def print_tree(item: TreeItem) -> None:
    """Print item to standard output using the configuration from the environment."""
    print_tree_with(item, config_from_env())

def print_tree_with(item: TreeItem, config: PrintConfig) -> None:
    """Print item to standard output using config."""
    out = sys.stdout
    _render(item, out, config, config.should_style_output(OutputKind.STDOUT, out))
    out.flush()

def write_tree(item: TreeItem, f: TextIO) -> None:
    """
    Write item to f using the configuration from the environment.

    f is not assumed to be a terminal, so the output is only styled when
    the configuration says styled = "always".
    """
    write_tree_with(item, f, config_from_env())

def write_tree_with(item: TreeItem, f: TextIO, config: PrintConfig) -> None:
    """Write item to f using config."""
    _render(item, f, config, config.should_style_output(OutputKind.UNKNOWN))
