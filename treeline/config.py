# config.py

import sys
from enum import Enum
from dataclasses import dataclass, field
from typing import Optional, TextIO
from rich.console import Console

from .indent import IndentChars, UTF_CHARS
from .style import Style

class StyleWhen(Enum):
    """When rendered output should carry escape codes."""
    NEVER = "never"
    ALWAYS = "always"
    TTY = "tty"

class OutputKind(Enum):
    """Where a render is going."""
    STDOUT = "stdout"
    UNKNOWN = "unknown"

@dataclass
class PrintConfig:
    """
    Formatting options for a render.

    Attributes:
        depth: Deepest level that is expanded below the root, None for no limit
        indent: Columns used per tree level, including connector and space
        characters: Glyphs used to draw branches
        branch: Style of the branch prefixes
        leaf: Style of the item text
        styled: Styling policy
    """
    depth: Optional[int] = None
    indent: int = 3
    characters: IndentChars = UTF_CHARS
    branch: Style = field(default_factory=lambda: Style(dimmed=True))
    leaf: Style = field(default_factory=Style)
    styled: StyleWhen = StyleWhen.TTY

    def should_style_output(self, output_kind: OutputKind,
                            stream: Optional[TextIO] = None) -> bool:
        """
        Decide whether a render to output_kind gets styled.

        Only standard output is ever treated as interactive; any other
        destination is styled only with StyleWhen.ALWAYS.
        """
        if self.styled is StyleWhen.ALWAYS:
            return True
        if self.styled is StyleWhen.TTY and output_kind is OutputKind.STDOUT:
            return Console(file=stream or sys.stdout).is_terminal
        return False

    def paint_branch(self, text: str) -> str:
        return self.branch.paint(text)

    def paint_leaf(self, text: str) -> str:
        return self.leaf.paint(text)
