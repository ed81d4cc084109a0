""" Titanic: Machine Learning from Disaster
Predict which passengers survived the Titanic shipwreck.
https://www.kaggle.com/c/titanic/overview

Two-layer feed-forward classifier: linear -> ReLU -> linear, producing one
logit per passenger. """

import pickle
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

import numpy as np

from titanic.context import Context
from titanic.errors import LoadError, ShapeMismatch
from titanic.features import FEATURE_SIZE


PARAMETER_NAMES = ('W1', 'b1', 'W2', 'b2')

Params = Dict[str, np.ndarray]


@dataclass(frozen=True)
class ModelConfig:
    feature_size: int = FEATURE_SIZE
    hidden_size: int = 64

    def init(self, context: Optional[Context] = None) -> 'Model':
        """ Fresh model with uniform(-1/sqrt(fan_in), 1/sqrt(fan_in)) parameters. """
        context = context or Context()

        def uniform(fan_in, shape):
            bound = 1.0 / np.sqrt(fan_in)
            return context.rng.uniform(-bound, bound, size=shape).astype(context.dtype)

        params = {
            'W1': uniform(self.feature_size, (self.feature_size, self.hidden_size)),
            'b1': uniform(self.feature_size, (self.hidden_size,)),
            'W2': uniform(self.hidden_size, (self.hidden_size, 1)),
            'b2': uniform(self.hidden_size, (1,)),
        }
        return Model(self, params)


@dataclass
class ForwardCache:
    """ Intermediates of one forward pass, kept for the backward pass. """
    inputs: np.ndarray
    pre_activation: np.ndarray
    hidden: np.ndarray


class Model:
    """ Binary classification model. """

    def __init__(self, config: ModelConfig, params: Params, trainable: bool = True) -> None:
        expected = {
            'W1': (config.feature_size, config.hidden_size),
            'b1': (config.hidden_size,),
            'W2': (config.hidden_size, 1),
            'b2': (1,),
        }
        for name, shape in expected.items():
            if params[name].shape != shape:
                raise ShapeMismatch(f'Parameter {name} has shape {params[name].shape}, expected {shape}')
        self.config = config
        self.params = params
        self.trainable = trainable

    def forward_cached(self, inputs: np.ndarray) -> Tuple[np.ndarray, ForwardCache]:
        pre_activation = inputs @ self.params['W1'] + self.params['b1']
        hidden = np.maximum(pre_activation, 0)
        logits = hidden @ self.params['W2'] + self.params['b2']
        return logits, ForwardCache(inputs, pre_activation, hidden)

    def forward(self, inputs: np.ndarray) -> np.ndarray:
        """ Logits of shape (N, 1) for inputs of shape (N, feature_size). """
        logits, _ = self.forward_cached(inputs)
        return logits

    def backward(self, cache: ForwardCache, dlogits: np.ndarray) -> Params:
        """ Gradients of a scalar loss w.r.t. every parameter, given d(loss)/d(logits). """
        if not self.trainable:
            raise RuntimeError('Cannot compute gradients of a validation model')
        grads = {
            'W2': cache.hidden.T @ dlogits,
            'b2': dlogits.sum(axis=0),
        }
        dhidden = dlogits @ self.params['W2'].T
        dpre = dhidden * (cache.pre_activation > 0)
        grads['W1'] = cache.inputs.T @ dpre
        grads['b1'] = dpre.sum(axis=0)
        return grads

    def predict(self, inputs: np.ndarray) -> np.ndarray:
        """ 0/1 prediction per row: logit above 0, i.e. sigmoid above 0.5. """
        return (self.forward(inputs)[:, 0] > 0).astype(np.int64)

    def valid(self) -> 'Model':
        """ Read-only view sharing storage with this model. """
        views = {}
        for name, value in self.params.items():
            view = value.view()
            view.flags.writeable = False
            views[name] = view
        return Model(self.config, views, trainable=False)

    # ------------------------ Snapshots ------------------------
    def save(self, path: str) -> None:
        snapshot = {
            'feature_size': self.config.feature_size,
            'hidden_size': self.config.hidden_size,
        }
        snapshot.update({name: np.array(self.params[name]) for name in PARAMETER_NAMES})
        with open(path, 'wb') as f:
            pickle.dump(snapshot, f)

    @classmethod
    def load(cls, path: str, config: Optional[ModelConfig] = None) -> 'Model':
        """ Load a snapshot, refusing one whose architecture differs from `config`. """
        config = config or ModelConfig()
        try:
            with open(path, 'rb') as f:
                snapshot = pickle.load(f)
        except FileNotFoundError as err:
            raise LoadError(f'Model file not found: {path}', hint='run `titanic train` first') from err
        except (OSError, pickle.UnpicklingError, EOFError) as err:
            raise LoadError(f'Could not read model file {path}: {err}') from err
        if not isinstance(snapshot, dict) or any(k not in snapshot for k in ('feature_size', 'hidden_size') + PARAMETER_NAMES):
            raise LoadError(f'{path} is not a model snapshot')

        stored = ModelConfig(feature_size=snapshot['feature_size'], hidden_size=snapshot['hidden_size'])
        if stored != config:
            raise ShapeMismatch(
                f'Model in {path} has feature_size={stored.feature_size}, hidden_size={stored.hidden_size}; '
                f'expected feature_size={config.feature_size}, hidden_size={config.hidden_size}')
        return cls(config, {name: snapshot[name] for name in PARAMETER_NAMES})
