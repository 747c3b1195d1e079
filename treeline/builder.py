# builder.py

import copy

from .item import StringItem

class TreeBuilder:
    """
    Builds a StringItem tree one node at a time.

    begin_child opens a new level below the current one and end_child
    closes it, so the calls read like the indented tree they produce.
    """
    def __init__(self, text: str):
        self._item = StringItem(text)
        self._level = 0

    def _parent(self) -> StringItem:
        """Return the item new children are attached to."""
        parent = self._item
        for _ in range(self._level):
            parent = parent.items[-1]
        return parent

    def begin_child(self, text: str) -> "TreeBuilder":
        self._parent().items.append(StringItem(text))
        self._level += 1
        return self

    def end_child(self) -> "TreeBuilder":
        if self._level == 0:
            raise ValueError("end_child() called without a matching begin_child()")
        self._level -= 1
        return self

    def add_empty_child(self, text: str) -> "TreeBuilder":
        return self.begin_child(text).end_child()

    def build(self) -> StringItem:
        """Return a copy of the tree built so far."""
        return copy.deepcopy(self._item)
