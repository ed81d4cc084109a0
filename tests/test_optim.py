"""Tests for the optimizers and gradient clipping."""

import numpy as np
import pytest

from titanic.optim import SGD, Adam, clip_grad_norm, make_optimizer


def test_sgd_step():
    params = {'w': np.array([1.0, 2.0])}
    SGD(0.5).step(params, {'w': np.array([2.0, -2.0])})
    np.testing.assert_allclose(params['w'], [0.0, 3.0])


def test_adam_first_step_moves_by_learning_rate():
    params = {'w': np.array([1.0, -1.0])}
    optimizer = Adam(0.1, epsilon=0.0)
    optimizer.step(params, {'w': np.array([0.5, -3.0])})

    np.testing.assert_allclose(params['w'], [0.9, -0.9])
    assert optimizer.state.step == 1
    assert set(optimizer.state.first_moment) == {'w'}


def test_adam_updates_in_place():
    w = np.zeros(3)
    params = {'w': w}
    Adam(0.01).step(params, {'w': np.ones(3)})
    assert params['w'] is w
    assert np.all(w < 0)


def test_clip_grad_norm_scales_to_max():
    grads = {'a': np.array([3.0]), 'b': np.array([4.0])}
    norm = clip_grad_norm(grads, 1.0)

    assert norm == pytest.approx(5.0)
    np.testing.assert_allclose([grads['a'][0], grads['b'][0]], [0.6, 0.8])


def test_clip_grad_norm_leaves_small_gradients():
    grads = {'a': np.array([0.3, 0.4])}
    clip_grad_norm(grads, 1.0)
    np.testing.assert_allclose(grads['a'], [0.3, 0.4])


def test_make_optimizer():
    assert isinstance(make_optimizer('adam', 1e-3), Adam)
    assert isinstance(make_optimizer('sgd', 1e-3), SGD)
    with pytest.raises(ValueError):
        make_optimizer('rmsprop', 1e-3)
