from __future__ import annotations


class PlotError(Exception):
    """Base class for every error raised by glyphplot."""


class InvalidPlotSize(PlotError, ValueError):
    def __init__(self, message: str = "plot width and height must be positive integers") -> None:
        super().__init__(message)


class InvalidBrushValue(PlotError, ValueError):
    def __init__(self, message: str = "brush value must be a single printable character") -> None:
        super().__init__(message)


class PlotDataError(PlotError, ValueError):
    pass


class InconsistentData(PlotDataError):
    def __init__(self, message: str = "data to be drawn is inconsistent") -> None:
        super().__init__(message)


class BMPFormatNotSupported(PlotError):
    def __init__(self, message: str = "BMP format not supported") -> None:
        super().__init__(message)


class GridCellTypeError(PlotError, TypeError):
    pass
