import math

import numpy as np
import pytest

from incomelogit.model import (
    LogisticRegression,
    TrainingError,
    accuracy,
    evaluate_model,
    train_and_tune_model,
)


def test_evaluate_model():
    features = np.array([[1.0, 0.0], [0.0, 1.0]])
    labels = [0, 1]
    model = LogisticRegression(1.0).fit(features, labels)
    acc = evaluate_model(model, features, labels)
    assert 0.0 <= acc <= 1.0
    assert acc == 1.0


def _separable():
    x = np.array([[0.0], [0.1], [0.2], [0.8], [0.9], [1.0]])
    y = [0, 0, 0, 1, 1, 1]
    return x, y


def test_predict_returns_original_labels():
    x, _ = _separable()
    model = LogisticRegression(0.1).fit(x, ["low", "low", "low", "high", "high", "high"])
    assert model.predict(x) == ["low", "low", "low", "high", "high", "high"]


def test_stronger_penalty_shrinks_weights():
    x, y = _separable()
    weak = LogisticRegression(0.1).fit(x, y)
    strong = LogisticRegression(10.0).fit(x, y)
    assert abs(strong.coef_[0, 0]) < abs(weak.coef_[0, 0])


def test_multiclass_fit():
    base = np.array([[1.0, 0.0], [0.0, 1.0], [0.0, 0.0]])
    x = np.tile(base, (5, 1))
    y = [5, 7, 9] * 5
    model = LogisticRegression(0.1).fit(x, y)
    assert model.predict(base) == [5, 7, 9]


def test_fit_single_class():
    with pytest.raises(TrainingError):
        LogisticRegression(1.0).fit(np.array([[1.0], [2.0]]), [1, 1])


def test_fit_row_mismatch():
    with pytest.raises(TrainingError):
        LogisticRegression(1.0).fit(np.array([[1.0], [2.0], [3.0]]), [0, 1])


def test_predict_unfitted():
    with pytest.raises(TrainingError):
        LogisticRegression(1.0).predict(np.array([[1.0]]))


def test_predict_wrong_width():
    x, y = _separable()
    model = LogisticRegression(1.0).fit(x, y)
    with pytest.raises(TrainingError):
        model.predict(np.array([[1.0, 2.0]]))


def test_accuracy_values():
    assert accuracy([1, 0, 1], [1, 1, 1]) == pytest.approx(2 / 3)
    assert accuracy([0, 0], [0, 0]) == 1.0


def test_accuracy_empty_is_nan():
    result = accuracy([], [])
    assert result == pytest.approx(math.nan, nan_ok=True)


def test_accuracy_size_mismatch():
    with pytest.raises(ValueError):
        accuracy([1, 0], [1])


def test_train_and_tune_model_keeps_first_best():
    x, y = _separable()
    model, acc = train_and_tune_model(x, y)
    assert acc == 1.0
    assert model.alpha == 0.1
    assert model.predict(x) == y