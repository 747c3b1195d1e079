# adapters/value.py

from dataclasses import dataclass
from typing import Any, List, Mapping, TextIO

from ..style import Style

def value_to_string(value: Any) -> str:
    """Return the display text of a scalar, empty for containers and None."""
    if value is None or isinstance(value, (Mapping, list, tuple)):
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)

def _is_container(value: Any) -> bool:
    return isinstance(value, (Mapping, list, tuple))

@dataclass
class ValueItem:
    """
    A nested document (dicts, lists and scalars) rendered as a tree.

    Mapping entries holding containers become children labelled with their
    key, scalar entries become "key = value" leaves, and list elements
    become unlabelled children.
    """
    value: Any
    key: str = ""

    def write_self(self, f: TextIO, style: Style) -> None:
        f.write(style.paint(self.key or value_to_string(self.value)))

    def children(self) -> List["ValueItem"]:
        if isinstance(self.value, Mapping):
            items = []
            for k, v in self.value.items():
                if _is_container(v):
                    items.append(ValueItem(v, value_to_string(k)))
                else:
                    items.append(ValueItem(f"{value_to_string(k)} = {value_to_string(v)}"))
            return items
        if isinstance(self.value, (list, tuple)):
            return [ValueItem(v) for v in self.value]
        return []
