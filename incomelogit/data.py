"""Loading the census CSV and splitting it into train and test parts."""

from __future__ import annotations

import csv
import math

import numpy as np

from incomelogit.utils import is_categorical, scale_features

_LABELS = {">50K": 1, "<=50K": 0}


class DatasetError(ValueError):
    """Raised when the dataset file cannot be turned into a feature matrix."""


def _numeric(value: str) -> float:
    # Only an untrimmed, well-formed number parses; anything else counts as zero.
    if value == value.strip() and not is_categorical(value):
        return float(value)
    return 0.0


def load_and_preprocess_dataset(file_path) -> tuple[np.ndarray, list[int]]:
    """Read a header-less CSV, encode categorical columns and scale features.

    The last column holds the label (">50K" is 1, "<=50K" is 0); rows whose
    label is neither keep their features but contribute no label.
    """
    features: list[list[float]] = []
    labels: list[int] = []
    encoders: dict[int, dict[str, int]] = {}
    width: int | None = None

    with open(file_path, newline="", encoding="utf-8") as handle:
        for line_no, record in enumerate(csv.reader(handle), start=1):
            if not record:
                continue
            if width is None:
                width = len(record)
            elif len(record) != width:
                raise DatasetError(
                    f"line {line_no}: found record with {len(record)} fields, "
                    f"but the previous record has {width} fields"
                )
            *columns, label_text = record
            row = []
            for idx, value in enumerate(columns):
                if is_categorical(value):
                    encoder = encoders.setdefault(idx, {})
                    row.append(float(encoder.setdefault(value, len(encoder))))
                else:
                    row.append(_numeric(value))
            label = _LABELS.get(label_text.strip())
            if label is not None:
                labels.append(label)
            features.append(row)

    if not features or not features[0]:
        raise DatasetError("Dataset is empty or malformed")

    return scale_features(np.array(features, dtype=float)), labels


def split_data(features, labels, test_size: float):
    """Split rows in order: the first (1 - test_size) share trains, the rest tests."""
    matrix = np.asarray(features, dtype=float)
    label_list = list(labels)
    fraction = matrix.shape[0] * (1.0 - test_size)
    split_idx = 0 if math.isnan(fraction) or fraction <= 0 else int(fraction)
    if split_idx > matrix.shape[0] or split_idx > len(label_list):
        raise ValueError(f"split index {split_idx} is out of range")
    return (
        matrix[:split_idx].copy(),
        label_list[:split_idx],
        matrix[split_idx:].copy(),
        label_list[split_idx:],
    )