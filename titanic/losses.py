""" Loss functions over logits and the accuracy metric. """

from typing import Callable, Dict, Tuple

import numpy as np


def bce_with_logits(logits: np.ndarray, targets: np.ndarray) -> Tuple[float, np.ndarray]:
    """ Mean binary cross-entropy on raw logits, and its gradient w.r.t. the logits.

    Uses max(x, 0) - x*y + log(1 + exp(-|x|)), which stays finite for large |x|. """
    x = logits.reshape(-1)
    y = targets.reshape(-1).astype(x.dtype)
    loss = np.mean(np.maximum(x, 0) - x * y + np.log1p(np.exp(-np.abs(x))))
    grad = (sigmoid(x) - y) / len(x)
    return float(loss), grad.reshape(logits.shape).astype(logits.dtype)


def mse(logits: np.ndarray, targets: np.ndarray) -> Tuple[float, np.ndarray]:
    """ Mean squared error between logits and 0/1 targets, and its gradient. """
    x = logits.reshape(-1)
    diff = x - targets.reshape(-1).astype(x.dtype)
    loss = np.mean(diff ** 2)
    grad = 2.0 * diff / len(x)
    return float(loss), grad.reshape(logits.shape).astype(logits.dtype)


LOSSES: Dict[str, Callable] = {
    'bce': bce_with_logits,
    'mse': mse,
}


def sigmoid(x: np.ndarray) -> np.ndarray:
    # split by sign so exp never overflows
    out = np.empty_like(x)
    positive = x >= 0
    out[positive] = 1.0 / (1.0 + np.exp(-x[positive]))
    exp_x = np.exp(x[~positive])
    out[~positive] = exp_x / (1.0 + exp_x)
    return out


def accuracy(logits: np.ndarray, targets: np.ndarray) -> float:
    """ Percentage of rows whose thresholded logit (> 0) equals the target. """
    predictions = (logits.reshape(-1) > 0).astype(np.int64)
    labels = targets.reshape(-1).astype(np.int64)
    return 100.0 * np.count_nonzero(predictions == labels) / len(labels)
