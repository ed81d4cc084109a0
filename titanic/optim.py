""" Gradient-descent update rules with explicit per-parameter state. """

import math
from dataclasses import dataclass, field
from typing import Dict

import numpy as np

Params = Dict[str, np.ndarray]


def clip_grad_norm(grads: Params, max_norm: float = 1.0) -> float:
    """ Scale all gradients in place so their global L2 norm is at most max_norm.

    Returns the norm before clipping. """
    total = math.sqrt(sum(float(np.sum(np.square(g, dtype=np.float64))) for g in grads.values()))
    if total > max_norm:
        scale = max_norm / total
        for g in grads.values():
            g *= scale
    return total


class SGD:
    """ Plain gradient descent: p -= lr * g. No state. """

    def __init__(self, learning_rate: float) -> None:
        self.learning_rate = learning_rate

    def step(self, params: Params, grads: Params) -> None:
        for name, param in params.items():
            param -= self.learning_rate * grads[name]


@dataclass
class AdamState:
    """ Running moment estimates, created on the first step. """
    step: int = 0
    first_moment: Params = field(default_factory=dict)
    second_moment: Params = field(default_factory=dict)


class Adam:
    """ Adam with bias-corrected first and second moment estimates. """

    def __init__(self, learning_rate: float, beta1: float = 0.9, beta2: float = 0.999, epsilon: float = 1e-5) -> None:
        self.learning_rate = learning_rate
        self.beta1 = beta1
        self.beta2 = beta2
        self.epsilon = epsilon
        self.state = AdamState()

    def step(self, params: Params, grads: Params) -> None:
        state = self.state
        state.step += 1
        correction1 = 1 - self.beta1 ** state.step
        correction2 = 1 - self.beta2 ** state.step
        for name, param in params.items():
            grad = grads[name]
            m = state.first_moment.get(name, np.zeros_like(param))
            v = state.second_moment.get(name, np.zeros_like(param))
            m = self.beta1 * m + (1 - self.beta1) * grad
            v = self.beta2 * v + (1 - self.beta2) * np.square(grad)
            state.first_moment[name] = m
            state.second_moment[name] = v
            update = (m / correction1) / (np.sqrt(v / correction2) + self.epsilon)
            param -= (self.learning_rate * update).astype(param.dtype)


OPTIMIZERS = {
    'sgd': SGD,
    'adam': Adam,
}


def make_optimizer(name: str, learning_rate: float):
    try:
        return OPTIMIZERS[name](learning_rate)
    except KeyError:
        raise ValueError(f"Unknown optimizer '{name}'. Expected one of: {', '.join(OPTIMIZERS)}")
