"""Regularised logistic regression fitted with L-BFGS, plus tuning helpers."""

from __future__ import annotations

import math

import numpy as np
from scipy.optimize import minimize
from scipy.special import expit, logsumexp

ALPHAS = (0.1, 1.0, 10.0)


class TrainingError(ValueError):
    """Raised when a model cannot be fitted or used."""


class LogisticRegression:
    """Binary or multinomial logistic regression with an L2 penalty on weights."""

    def __init__(self, alpha=0.0):
        self.alpha = float(alpha)
        self.classes_: np.ndarray | None = None
        self.coef_: np.ndarray | None = None
        self.intercept_: np.ndarray | None = None

    def fit(self, features, labels) -> LogisticRegression:
        """Fit the model and return it."""
        x = np.asarray(features, dtype=float)
        y = np.asarray(list(labels))
        if x.ndim != 2:
            raise TrainingError("features must be a 2-D matrix")
        if x.shape[0] != y.shape[0]:
            raise TrainingError(
                f"number of rows in features ({x.shape[0]}) does not match "
                f"number of labels ({y.shape[0]})"
            )
        classes, y_idx = np.unique(y, return_inverse=True)
        if len(classes) < 2:
            raise TrainingError(f"incorrect number of classes: {len(classes)}")

        n_features = x.shape[1]
        if len(classes) == 2:
            objective = self._binary_objective(x, y_idx.astype(float))
            rows = 1
        else:
            objective = self._multinomial_objective(x, y_idx, len(classes))
            rows = len(classes)

        result = minimize(
            objective,
            np.zeros(rows * (n_features + 1)),
            jac=True,
            method="L-BFGS-B",
        )
        params = result.x.reshape(rows, n_features + 1)
        if not np.all(np.isfinite(params)):
            raise TrainingError("optimisation diverged")

        self.classes_ = classes
        self.coef_ = params[:, :-1]
        self.intercept_ = params[:, -1]
        return self

    def _binary_objective(self, x, y):
        alpha = self.alpha

        def objective(params):
            w, b = params[:-1], params[-1]
            z = x @ w + b
            loss = np.sum(np.logaddexp(0.0, z) - y * z) + 0.5 * alpha * (w @ w)
            err = expit(z) - y
            grad = np.empty_like(params)
            grad[:-1] = x.T @ err + alpha * w
            grad[-1] = err.sum()
            return loss, grad

        return objective

    def _multinomial_objective(self, x, y, n_classes):
        alpha = self.alpha
        onehot = np.eye(n_classes)[y]

        def objective(params):
            coef = params.reshape(n_classes, x.shape[1] + 1)
            w, b = coef[:, :-1], coef[:, -1]
            z = x @ w.T + b
            lse = logsumexp(z, axis=1)
            loss = np.sum(lse - np.sum(z * onehot, axis=1)) + 0.5 * alpha * np.sum(w * w)
            diff = np.exp(z - lse[:, None]) - onehot
            grad_w = diff.T @ x + alpha * w
            grad_b = diff.sum(axis=0)
            return loss, np.column_stack([grad_w, grad_b]).ravel()

        return objective

    def predict(self, features) -> list:
        """Predict a class label for every row."""
        if self.coef_ is None or self.classes_ is None or self.intercept_ is None:
            raise TrainingError("model has not been fitted")
        x = np.asarray(features, dtype=float)
        if x.ndim != 2 or x.shape[1] != self.coef_.shape[1]:
            raise TrainingError(
                f"expected {self.coef_.shape[1]} feature columns, got shape {x.shape}"
            )
        z = x @ self.coef_.T + self.intercept_
        if len(self.classes_) == 2:
            picked = (z[:, 0] > 0.0).astype(int)
        else:
            picked = np.argmax(z, axis=1)
        return self.classes_[picked].tolist()


def accuracy(predictions, labels) -> float:
    """Fraction of predictions that equal the labels."""
    predictions = list(predictions)
    labels = list(labels)
    if len(predictions) != len(labels):
        raise ValueError(
            f"size mismatch: {len(predictions)} predictions, {len(labels)} labels"
        )
    if not labels:
        return math.nan
    return sum(p == t for p, t in zip(predictions, labels)) / len(labels)


def evaluate_model(model: LogisticRegression, test_features, test_labels) -> float:
    """Accuracy of the model on the given data."""
    return accuracy(model.predict(test_features), test_labels)


def train_and_tune_model(features, labels) -> tuple[LogisticRegression, float]:
    """Fit one model per regularisation strength and keep the most accurate."""
    best: tuple[LogisticRegression, float] | None = None
    best_accuracy = 0.0
    for alpha in ALPHAS:
        model = LogisticRegression(alpha).fit(features, labels)
        acc = evaluate_model(model, features, labels)
        if acc > best_accuracy:
            best_accuracy = acc
            best = (model, acc)
    if best is None:
        raise TrainingError("No model was successfully trained")
    return best