# adapters/path.py

from pathlib import Path
from dataclasses import dataclass
from typing import List, TextIO, Union

from ..logger import Logger
from ..style import Style

logger = Logger(__name__)

@dataclass
class PathItem:
    """
    A file system path rendered as a directory tree.

    Directory entries are listed by name. Symbolic links are shown but not
    followed, so a link back to a parent directory cannot loop.
    """
    path: Union[str, Path]

    def __post_init__(self):
        self.path = Path(self.path)

    def write_self(self, f: TextIO, style: Style) -> None:
        f.write(style.paint(self.path.name or str(self.path)))

    def children(self) -> List["PathItem"]:
        if self.path.is_symlink() or not self.path.is_dir():
            return []
        try:
            entries = sorted(self.path.iterdir(), key=lambda p: p.name)
        except OSError as e:
            logger.warning(f"Cannot list directory '{self.path}': {e}")
            return []
        return [PathItem(entry) for entry in entries]
