from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal
from typing import Any

import numpy as np

from glyphplot.errors import InconsistentData, PlotDataError


try:
    import pandas as pd
except Exception:  # pragma: no cover - optional dependency
    pd = None  # type: ignore[assignment]

try:
    import torch
except Exception:  # pragma: no cover - optional dependency
    torch = None  # type: ignore[assignment]


def coerce_series(values: Any, *, label: str = "values") -> np.ndarray:
    """Return ``values`` as a 1-D float64 array."""
    if torch is not None and isinstance(values, torch.Tensor):
        tensor = values.detach()
        if tensor.ndim != 1:
            raise PlotDataError(f"{label} must be 1-D")
        if tensor.is_cuda:
            tensor = tensor.cpu()
        return tensor.to(torch.float64).numpy()

    if pd is not None and isinstance(values, pd.Series):
        return _coerce_ndarray(values.to_numpy(), label=label)

    if isinstance(values, np.ndarray):
        if values.ndim != 1:
            raise PlotDataError(f"{label} must be 1-D")
        return _coerce_ndarray(values, label=label)

    if isinstance(values, Sequence) and not isinstance(values, (str, bytes, bytearray)):
        return _coerce_ndarray(np.asarray(values, dtype=object), label=label)

    raise PlotDataError(f"unsupported {label} input type: {type(values)!r}")


def coerce_pair(x: Any, y: Any, *, strict: bool) -> tuple[np.ndarray, np.ndarray]:
    """Coerce paired series; ``strict`` rejects a length mismatch, otherwise the longer one is cut."""
    x_arr = coerce_series(x, label="x")
    y_arr = coerce_series(y, label="y")
    if x_arr.size != y_arr.size:
        if strict:
            raise InconsistentData(f"x and y length mismatch: {x_arr.size} != {y_arr.size}")
        n = min(x_arr.size, y_arr.size)
        x_arr = x_arr[:n]
        y_arr = y_arr[:n]
    return x_arr, y_arr


def is_integer_series(values: Any) -> bool:
    if torch is not None and isinstance(values, torch.Tensor):
        return not values.is_floating_point() and not values.is_complex()
    if pd is not None and isinstance(values, pd.Series):
        values = values.to_numpy()
    if isinstance(values, np.ndarray):
        return values.dtype.kind in {"i", "u", "b"}
    if isinstance(values, Sequence) and not isinstance(values, (str, bytes, bytearray)):
        return all(isinstance(v, (int, np.integer)) for v in values)
    return False


def _coerce_ndarray(arr: np.ndarray, *, label: str) -> np.ndarray:
    if arr.ndim != 1:
        raise PlotDataError(f"{label} must be 1-D")
    if arr.dtype.kind in {"i", "u", "f", "b"}:
        return arr.astype(np.float64, copy=False)

    out = np.empty(arr.shape[0], dtype=np.float64)
    for i, raw in enumerate(arr.tolist()):
        if raw is None:
            out[i] = np.nan
            continue
        if isinstance(raw, Decimal):
            out[i] = float(raw)
            continue
        try:
            out[i] = float(raw)
        except (TypeError, ValueError) as exc:
            raise PlotDataError(f"{label} contains non-numeric value at index {i}: {raw!r}") from exc
    return out
