from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np

from glyphplot.brush import GENERAL, Brush


MAX_LEVELS = 256
DEFAULT_GAMMA = "  ..oo00#@"
DEFAULT_TEXT = "AskiPlot"


def _level(value: int) -> int:
    level = int(value)
    if not 0 <= level < MAX_LEVELS:
        raise ValueError("luminance must be in [0, 255]")
    return level


class Gamma(ABC):
    """Maps an 8-bit luminance to a glyph."""

    @abstractmethod
    def __call__(self, level: int) -> Brush:
        raise NotImplementedError


class FixedGamma(Gamma):
    """Splits 0..255 into ``len(chars)`` equal bands, dark to light.

    When 256 does not divide evenly the last band is the wider one.
    """

    def __init__(self, chars: str = DEFAULT_GAMMA, *, rng: np.random.Generator | None = None) -> None:
        self._rng = rng
        self._chars = ""
        self._table: list[Brush] = []
        self.set(chars)

    @property
    def chars(self) -> str:
        return self._chars

    def __call__(self, level: int) -> Brush:
        return self._table[_level(level)]

    def set(self, chars: str) -> "FixedGamma":
        chars = str(chars)[:MAX_LEVELS]
        if not chars:
            raise ValueError("gamma must contain at least one character")
        brushes = [Brush(ch, GENERAL) for ch in chars]
        band = MAX_LEVELS // len(brushes)
        table: list[Brush] = []
        for brush in brushes[:-1]:
            table.extend([brush] * band)
        table.extend([brushes[-1]] * (MAX_LEVELS - len(table)))
        self._chars = chars
        self._table = table
        return self

    def shuffle(self) -> "FixedGamma":
        if self._rng is None:
            self._rng = np.random.default_rng()
        order = self._rng.permutation(len(self._chars))
        return self.set("".join(self._chars[i] for i in order))

    def __str__(self) -> str:
        return self._chars


class VariableGamma(Gamma):
    """Base for gammas that emit a fixed zero glyph below a threshold."""

    def __init__(self, zero_threshold: int = 128, zero_brush: Brush | str = " ") -> None:
        self._threshold = 0
        self._zero = Brush()
        self.set_zero_threshold(zero_threshold)
        self.set_zero_brush(zero_brush)

    @property
    def zero_threshold(self) -> int:
        return self._threshold

    @property
    def zero_brush(self) -> Brush:
        return self._zero

    def set_zero_threshold(self, threshold: int) -> "VariableGamma":
        self._threshold = _level(threshold)
        return self

    def set_zero_brush(self, brush: Brush | str) -> "VariableGamma":
        value = brush.value if isinstance(brush, Brush) else brush
        self._zero = Brush(value, GENERAL)
        return self

    def __call__(self, level: int) -> Brush:
        if _level(level) < self._threshold:
            return self._zero
        return self._above_threshold()

    @abstractmethod
    def _above_threshold(self) -> Brush:
        raise NotImplementedError


class RandomGamma(VariableGamma):
    def __init__(
        self,
        chars: str,
        *,
        rng: np.random.Generator | None = None,
        zero_threshold: int = 128,
        zero_brush: Brush | str = " ",
    ) -> None:
        super().__init__(zero_threshold, zero_brush)
        self._rng = rng if rng is not None else np.random.default_rng()
        self._brushes: list[Brush] = []
        self.set(chars)

    @property
    def chars(self) -> str:
        return "".join(brush.value for brush in self._brushes)

    def set(self, chars: str) -> "RandomGamma":
        chars = str(chars)[:MAX_LEVELS]
        if not chars:
            raise ValueError("gamma must contain at least one character")
        self._brushes = [Brush(ch, GENERAL) for ch in chars]
        return self

    def _above_threshold(self) -> Brush:
        return self._brushes[int(self._rng.integers(len(self._brushes)))]


class TextGamma(VariableGamma):
    """Emits successive characters of ``text`` for every bright pixel.

    The position in ``text`` carries over between calls and images.
    """

    def __init__(self, text: str = DEFAULT_TEXT, *, zero_threshold: int = 128, zero_brush: Brush | str = " ") -> None:
        super().__init__(zero_threshold, zero_brush)
        self._text = DEFAULT_TEXT
        self._use_count = 0
        self.set_text(text)

    @property
    def text(self) -> str:
        return self._text

    @property
    def use_count(self) -> int:
        return self._use_count

    def set_text(self, text: str) -> "TextGamma":
        self._text = str(text) or " "
        return self

    def _above_threshold(self) -> Brush:
        ch = self._text[self._use_count % len(self._text)]
        self._use_count += 1
        return Brush(ch, GENERAL)
