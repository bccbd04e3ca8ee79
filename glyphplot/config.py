from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class PlotConfig:
    """Default glyphs and layout constants handed to every plot at construction."""

    main: str = "_"
    area: str = "#"
    blank: str = " "
    border_top: str = "_"
    border_bottom: str = "_"
    border_left: str = "|"
    border_right: str = "|"
    line_horizontal: str = "-"
    line_vertical: str = "|"
    bar_value_precision: int = 0
    xlim_margin: float = 0.01
    ylim_margin: float = 0.02

    def brush_values(self) -> dict[str, str]:
        return {
            "Main": self.main,
            "Blank": self.blank,
            "Area": self.area,
            "LineHorizontal": self.line_horizontal,
            "LineVertical": self.line_vertical,
            "BorderTop": self.border_top,
            "BorderBottom": self.border_bottom,
            "BorderLeft": self.border_left,
            "BorderRight": self.border_right,
        }


DEFAULT_CONFIG = PlotConfig()

_GLYPH_KEYS = (
    "main",
    "area",
    "blank",
    "border_top",
    "border_bottom",
    "border_left",
    "border_right",
    "line_horizontal",
    "line_vertical",
)


def validate_plot_config(overrides: Mapping[str, Any] | None = None) -> PlotConfig:
    """Validate and merge user overrides against the defaults."""

    raw: dict[str, Any] = asdict(DEFAULT_CONFIG)
    if overrides:
        for key, value in overrides.items():
            if key not in raw:
                raise ValueError(f"Unknown plot config key: {key}")
            raw[key] = value

    for key in _GLYPH_KEYS:
        if not isinstance(raw[key], str) or not raw[key]:
            raise ValueError(f"Config `{key}` must be a non-empty string")

    precision = raw["bar_value_precision"]
    if isinstance(precision, bool) or not isinstance(precision, int) or precision < 0:
        raise ValueError("Config `bar_value_precision` must be a non-negative integer")

    for key in ("xlim_margin", "ylim_margin"):
        if not isinstance(raw[key], (int, float)) or float(raw[key]) < 0:
            raise ValueError(f"Config `{key}` must be a non-negative number")

    return PlotConfig(
        **{key: str(raw[key]) for key in _GLYPH_KEYS},
        bar_value_precision=int(precision),
        xlim_margin=float(raw["xlim_margin"]),
        ylim_margin=float(raw["ylim_margin"]),
    )
