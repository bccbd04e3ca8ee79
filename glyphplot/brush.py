from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from glyphplot.config import DEFAULT_CONFIG, PlotConfig
from glyphplot.errors import InvalidBrushValue


GENERAL = "*"
BLANK = "Blank"

_WHITESPACE_CONTROLS = {"\t", "\n", "\r"}


def normalize_glyph(value: str) -> str:
    if not isinstance(value, str):
        raise InvalidBrushValue(f"brush value must be a string, got {type(value)!r}")
    if not value:
        raise InvalidBrushValue()
    if value[0].isprintable():
        return value[0]
    if len(value) == 1:
        if value in _WHITESPACE_CONTROLS:
            return " "
        raise InvalidBrushValue(f"non-printable brush value: {value!r}")
    return value[:2]


@dataclass(frozen=True)
class Brush:
    """A glyph plus the style name it was drawn with.

    Cells named ``"*"`` are general: they hold a literal character and are left
    alone by :meth:`glyphplot.plot.Plot.redraw`. A brush built without a value
    is the transparent blank brush; a value without a name is general.
    """

    value: str | None = None
    name: str | None = None

    def __post_init__(self) -> None:
        if self.value is None:
            object.__setattr__(self, "value", DEFAULT_CONFIG.blank)
            object.__setattr__(self, "name", self.name or BLANK)
            return
        object.__setattr__(self, "value", normalize_glyph(self.value))
        object.__setattr__(self, "name", self.name or GENERAL)

    def is_general(self) -> bool:
        return self.name == GENERAL

    def is_blank(self) -> bool:
        return self.name == BLANK

    def with_name(self, name: str) -> "Brush":
        return Brush(self.value, name)


class Palette:
    """Maps style names to glyph values."""

    def __init__(self, config: PlotConfig = DEFAULT_CONFIG) -> None:
        self._config = config
        self._brushes: dict[str, str] = {}
        self.reset()

    def __getitem__(self, name: str) -> str:
        return self._brushes.get(name, self._config.blank)

    def __contains__(self, name: str) -> bool:
        return name in self._brushes

    def has_brush(self, name: str) -> bool:
        return name in self._brushes

    def names(self) -> list[str]:
        return sorted(self._brushes)

    def reset(self) -> "Palette":
        self._brushes = {name: normalize_glyph(value) for name, value in self._config.brush_values().items()}
        return self

    def get_brush(self, name: str) -> Brush:
        value = self._brushes.get(name)
        if value is None:
            return Brush(self._config.blank, BLANK)
        return Brush(value, name)

    def set_brush(self, brush: Brush | str, value: str | None = None) -> "Palette":
        if isinstance(brush, Brush):
            self._brushes[brush.name] = brush.value
            return self
        if value is None:
            raise ValueError("value is required when setting a brush by name")
        resolved = Brush(value, brush)
        self._brushes[resolved.name] = resolved.value
        return self

    def set_brushes(self, names: Iterable[str], value: str) -> "Palette":
        for name in names:
            self.set_brush(name, value)
        return self

    def copy(self) -> "Palette":
        out = Palette(self._config)
        out._brushes = dict(self._brushes)
        return out


def string_to_brushes(text: str) -> list[Brush]:
    return [Brush(ch, GENERAL) for ch in text]


LETTER_BRUSHES = string_to_brushes("abcdefghijklmnopqrstuvwxyz")
NUMBER_BRUSHES = string_to_brushes("0123456789")
SYMBOL_BRUSHES = string_to_brushes("@$*#.+&*=?,-%!^\"<~>'")
