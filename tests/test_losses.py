"""Tests for losses and the accuracy metric."""

import numpy as np
import pytest

from titanic.losses import accuracy, bce_with_logits, mse, sigmoid


def test_bce_matches_probability_form():
    logits = np.array([[2.0], [-1.0], [0.5]])
    targets = np.array([1.0, 0.0, 0.0])
    p = 1 / (1 + np.exp(-logits[:, 0]))
    expected = -np.mean(targets * np.log(p) + (1 - targets) * np.log(1 - p))

    loss, grad = bce_with_logits(logits, targets)

    assert loss == pytest.approx(expected)
    np.testing.assert_allclose(grad[:, 0], (p - targets) / 3)
    assert grad.shape == logits.shape


def test_bce_stays_finite_for_large_logits():
    loss, grad = bce_with_logits(np.array([[1000.0], [-1000.0]]), np.array([0.0, 1.0]))
    assert np.isfinite(loss)
    assert np.all(np.isfinite(grad))


def test_mse():
    loss, grad = mse(np.array([[1.0], [0.0]]), np.array([0.0, 0.0]))
    assert loss == pytest.approx(0.5)
    np.testing.assert_allclose(grad[:, 0], [1.0, 0.0])


def test_sigmoid_extremes():
    np.testing.assert_allclose(sigmoid(np.array([-800.0, 0.0, 800.0])), [0.0, 0.5, 1.0])


def test_accuracy_perfect_predictions():
    assert accuracy(np.array([[3.0], [-2.0]]), np.array([1.0, 0.0])) == 100.0


def test_accuracy_threshold_is_zero():
    # sigmoid(0.3) > 0.5, so a 0.3 logit predicts survival
    assert accuracy(np.array([[0.3], [0.0]]), np.array([1.0, 0.0])) == 100.0


@pytest.mark.parametrize('seed', range(5))
def test_accuracy_is_bounded(seed):
    rng = np.random.default_rng(seed)
    logits = rng.normal(size=(20, 1))
    targets = rng.integers(0, 2, size=20).astype(float)
    assert 0.0 <= accuracy(logits, targets) <= 100.0
