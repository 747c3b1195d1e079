# item.py

from dataclasses import dataclass, field
from typing import List, Protocol, Sequence, TextIO, runtime_checkable

from .style import Style

@runtime_checkable
class TreeItem(Protocol):
    """
    Anything that can be rendered as a tree.

    write_self writes the item's own text, painted with style, and
    children returns the ordered child items (empty for a leaf). Calling
    children again on an unchanged item must return an equal sequence.
    """
    def write_self(self, f: TextIO, style: Style) -> None: ...
    def children(self) -> Sequence["TreeItem"]: ...

@dataclass
class StringItem:
    """A tree item with a text label and explicit children."""
    text: str
    items: List["StringItem"] = field(default_factory=list)

    def write_self(self, f: TextIO, style: Style) -> None:
        f.write(style.paint(self.text))

    def children(self) -> List["StringItem"]:
        return self.items
