# indent.py

from dataclasses import dataclass, fields
from typing import Dict, Mapping, Union

@dataclass(frozen=True)
class IndentChars:
    """
    The five glyphs used to draw branches.

    Only used to build the prefix fragments in Indent; the renderer never
    looks at a single glyph.
    """
    down_and_right: str
    down: str
    turn_right: str
    right: str
    empty: str = " "

    @classmethod
    def from_name(cls, name: str) -> "IndentChars":
        """Look up a predefined glyph set by name."""
        try:
            return CHARACTER_SETS[name.strip().lower()]
        except KeyError:
            valid = ", ".join(repr(n) for n in CHARACTER_SETS)
            raise ValueError(f"Unknown character set {name!r}, expected one of {valid}") from None

    @classmethod
    def from_value(cls, value: Union["IndentChars", str, Mapping[str, str]]) -> "IndentChars":
        """
        Build a glyph set from a preset name or a mapping of glyph fields.

        Args:
            value: IndentChars, preset name, or mapping with the keys
                   down_and_right, down, turn_right, right and optionally empty

        Returns:
            The matching IndentChars
        """
        if isinstance(value, IndentChars):
            return value
        if isinstance(value, str):
            return cls.from_name(value)
        if isinstance(value, Mapping):
            known = {f.name for f in fields(cls)}
            unknown = set(value) - known
            if unknown:
                raise ValueError(f"Unknown character fields: {', '.join(sorted(unknown))}")
            missing = {'down_and_right', 'down', 'turn_right', 'right'} - set(value)
            if missing:
                raise ValueError(f"Missing character fields: {', '.join(sorted(missing))}")
            return cls(**{k: str(v) for k, v in value.items()})
        raise ValueError(f"Characters must be a name or a table, got {type(value).__name__}")

ASCII_CHARS_TICK = IndentChars(down_and_right='|', down='|', turn_right='`', right='-')
ASCII_CHARS_PLUS = IndentChars(down_and_right='+', down='|', turn_right='+', right='-')
UTF_CHARS = IndentChars(down_and_right='├', down='│', turn_right='└', right='─')
UTF_CHARS_BOLD = IndentChars(down_and_right='┣', down='┃', turn_right='┗', right='━')
UTF_CHARS_DOUBLE = IndentChars(down_and_right='╠', down='║', turn_right='╚', right='═')
UTF_CHARS_DASHED = IndentChars(down_and_right='├', down='┆', turn_right='└', right='╌')

CHARACTER_SETS: Dict[str, IndentChars] = {
    'utf': UTF_CHARS,
    'utf-light': UTF_CHARS,
    'utf-bold': UTF_CHARS_BOLD,
    'utf-heavy': UTF_CHARS_BOLD,
    'utf-double': UTF_CHARS_DOUBLE,
    'utf-dashed': UTF_CHARS_DASHED,
    'ascii': ASCII_CHARS_TICK,
    'ascii-tick': ASCII_CHARS_TICK,
    'ascii-plus': ASCII_CHARS_PLUS,
}

@dataclass(frozen=True)
class Indent:
    """Prefix fragments appended to a parent's child prefix for each child."""
    regular_prefix: str
    child_prefix: str
    last_regular_prefix: str
    last_child_prefix: str

    @classmethod
    def from_config(cls, config) -> "Indent":
        return compute_prefixes(config.indent, config.characters)

def compute_prefixes(indent_width: int, characters: IndentChars) -> Indent:
    """
    Build the four prefix fragments for an indent width.

    Two columns are reserved for the connector glyph and the trailing space,
    the rest is filled with `right` (branches) or `empty` (continuations).
    """
    n = max(indent_width - 2, 0)
    right_pad = characters.right * n
    empty_pad = characters.empty * n
    return Indent(
        regular_prefix=f"{characters.down_and_right}{right_pad} ",
        child_prefix=f"{characters.down}{empty_pad} ",
        last_regular_prefix=f"{characters.turn_right}{right_pad} ",
        last_child_prefix=f"{characters.empty}{empty_pad} ",
    )
