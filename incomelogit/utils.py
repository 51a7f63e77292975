"""Value classification and feature scaling helpers."""

from __future__ import annotations

import re

import numpy as np

_NUMBER = re.compile(
    r"[+-]?(?:inf|infinity|nan|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)",
    re.IGNORECASE,
)


def is_categorical(value: str) -> bool:
    """Return True when the trimmed value is not a floating-point number."""
    return _NUMBER.fullmatch(value.strip()) is None


def scale_features(features) -> np.ndarray:
    """Min-max scale every column to [0, 1]; constant columns become zeros."""
    data = np.array(features, dtype=float)
    if data.ndim != 2:
        raise ValueError(f"expected a 2-D feature matrix, got {data.ndim} dimensions")
    lows = np.fmin.reduce(data, axis=0, initial=np.inf)
    highs = np.fmax.reduce(data, axis=0, initial=-np.inf)
    constant = highs == lows
    with np.errstate(divide="ignore", invalid="ignore"):
        scaled = (data - lows) / (highs - lows)
    scaled[:, constant] = 0.0
    return scaled