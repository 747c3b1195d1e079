# style.py

import re
from dataclasses import dataclass
from typing import Optional, Sequence, Union
from rich.color import Color, ColorParseError
from rich.style import Style as RichStyle

ColorSpec = Union[str, int, Sequence[int], Color]

CAMEL_BOUNDARY = re.compile(r'(?<=[a-z0-9])(?=[A-Z])')

# ANSI names rich spells differently
COLOR_ALIASES = {
    'purple': 'magenta',
    'grey': 'bright_black',
    'gray': 'bright_black',
}

def parse_color(spec: ColorSpec) -> Color:
    """
    Resolve a color spec into a rich Color.

    Accepts a rich color name, a hex string ("#4682B4"), "color(N)" or
    "rgb(r,g,b)" strings, a palette index 0-255, or an [r, g, b] sequence.
    CamelCase names are read as snake_case, so "SteelBlue" is "steel_blue".
    Only names in rich's palette are known: CSS names it lacks, such as
    "MediumSeaGreen", have to be given as hex.

    Raises:
        ValueError: if the spec cannot be resolved.
    """
    if isinstance(spec, Color):
        return spec
    if isinstance(spec, bool):
        raise ValueError(f"Invalid color: {spec!r}")
    if isinstance(spec, int):
        if not 0 <= spec <= 255:
            raise ValueError(f"Palette index out of range: {spec}")
        return Color.from_ansi(spec)
    if isinstance(spec, str):
        name = spec.strip()
        if name.isalnum():
            name = CAMEL_BOUNDARY.sub('_', name)
        name = name.lower()
        try:
            return Color.parse(COLOR_ALIASES.get(name, name))
        except ColorParseError as e:
            raise ValueError(f"Invalid color: {spec!r}") from e
    if isinstance(spec, (list, tuple)):
        if len(spec) != 3 or not all(
            isinstance(c, int) and not isinstance(c, bool) and 0 <= c <= 255
            for c in spec
        ):
            raise ValueError(f"RGB color needs three values in 0-255: {spec!r}")
        return Color.from_rgb(*spec)
    raise ValueError(f"Invalid color: {spec!r}")

@dataclass
class Style:
    """
    Foreground/background colors and text attributes for one kind of output.

    Colors are kept as given (name, index, hex or RGB) and only resolved when
    the style is converted for rendering.
    """
    foreground: Optional[ColorSpec] = None
    background: Optional[ColorSpec] = None
    bold: bool = False
    dimmed: bool = False
    italic: bool = False
    underline: bool = False
    blink: bool = False
    reverse: bool = False
    hidden: bool = False
    strikethrough: bool = False

    @property
    def is_plain(self) -> bool:
        """True when rendering with this style adds no escape codes."""
        return self == Style()

    def to_rich(self) -> RichStyle:
        """Convert to a rich Style."""
        return RichStyle(
            color=parse_color(self.foreground) if self.foreground is not None else None,
            bgcolor=parse_color(self.background) if self.background is not None else None,
            bold=self.bold or None,
            dim=self.dimmed or None,
            italic=self.italic or None,
            underline=self.underline or None,
            blink=self.blink or None,
            reverse=self.reverse or None,
            conceal=self.hidden or None,
            strike=self.strikethrough or None,
        )

    def paint(self, text: str) -> str:
        return apply_style(text, self)

def apply_style(text: str, style: Style, enabled: bool = True) -> str:
    """
    Wrap text in the escape sequences for style.

    Args:
        text: Text to style
        style: Style to apply
        enabled: When False the text is returned untouched

    Returns:
        Styled text, or the original text when styling is off or the
        style is plain
    """
    if not enabled or not text or style.is_plain:
        return text
    return style.to_rich().render(text)
