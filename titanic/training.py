""" Full-batch training loop with per-epoch validation. """

from dataclasses import dataclass, field, replace
from typing import List, Optional

import numpy as np

from titanic.context import Context
from titanic.dataset import TRAIN_PATH, VALID_PATH, Batch, Dataset
from titanic.losses import LOSSES, accuracy
from titanic.model import Model, ModelConfig
from titanic.optim import clip_grad_norm, make_optimizer


MODEL_PATH = 'model.pickle'


@dataclass(frozen=True)
class TrainingConfig:
    epochs: int = 10
    optimizer: str = 'adam'
    learning_rate: float = 8e-3
    grad_clip: Optional[float] = None
    seed: int = 42
    hidden_size: int = 64
    loss: str = 'bce'
    model_path: str = MODEL_PATH
    train_path: str = TRAIN_PATH
    valid_path: str = VALID_PATH

    def __post_init__(self) -> None:
        if self.epochs < 0:
            raise ValueError('epochs must be non-negative')
        if self.loss not in LOSSES:
            raise ValueError(f"Unknown loss '{self.loss}'. Expected one of: {', '.join(LOSSES)}")


# ------------------------ Run profiles ------------------------
PROFILES = {
    'adam': TrainingConfig(epochs=10, optimizer='adam', learning_rate=8e-3),
    'sgd': TrainingConfig(epochs=20, optimizer='sgd', learning_rate=5e-5),
    'sgd-clip': TrainingConfig(epochs=20, optimizer='sgd', learning_rate=7e-3, grad_clip=1.0),
}


def get_profile(name: str, **overrides) -> TrainingConfig:
    """ Named profile with selected fields replaced; None overrides are ignored. """
    if name not in PROFILES:
        raise ValueError(f"Unknown profile '{name}'. Expected one of: {', '.join(PROFILES)}")
    return replace(PROFILES[name], **{k: v for k, v in overrides.items() if v is not None})


@dataclass(frozen=True)
class StepOutput:
    loss: float
    accuracy: float


@dataclass(frozen=True)
class EpochMetrics:
    epoch: int
    train: StepOutput
    valid: StepOutput


@dataclass
class Trainer:
    """ Owns the trainable model and the optimizer state of one run. """
    config: TrainingConfig
    context: Optional[Context] = None
    history: List[EpochMetrics] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.context is None:
            self.context = Context(seed=self.config.seed)
        self.loss_fn = LOSSES[self.config.loss]
        self.model = ModelConfig(hidden_size=self.config.hidden_size).init(self.context)
        self.optimizer = make_optimizer(self.config.optimizer, self.config.learning_rate)

    def train_step(self, batch: Batch) -> StepOutput:
        """ Forward, loss, backward and one optimizer update over the whole batch. """
        logits, cache = self.model.forward_cached(batch.inputs)
        loss, dlogits = self.loss_fn(logits, batch.targets)
        grads = self.model.backward(cache, dlogits)
        if self.config.grad_clip is not None:
            clip_grad_norm(grads, self.config.grad_clip)
        self.optimizer.step(self.model.params, grads)
        return StepOutput(loss, accuracy(logits, batch.targets))

    def valid_step(self, batch: Batch) -> StepOutput:
        logits = self.model.valid().forward(batch.inputs)
        loss, _ = self.loss_fn(logits, batch.targets)
        return StepOutput(loss, accuracy(logits, batch.targets))

    def fit(self, training_set: Dataset, validation_set: Dataset) -> Model:
        train_batch = training_set.batch()
        valid_batch = validation_set.batch()
        for epoch in range(self.config.epochs):
            output = self.train_step(train_batch)
            print(f'[Train - Epoch {epoch}] Loss {output.loss:.3f} | Accuracy {output.accuracy:.3f} %')
            if not np.isfinite(output.loss):
                print(f'[Train - Epoch {epoch}] WARNING: loss is not finite, lower the learning rate')

            valid = self.valid_step(valid_batch)
            print(f'*** [Validate - Epoch {epoch}] Loss {valid.loss:.3f} | Accuracy {valid.accuracy:.3f} %')
            self.history.append(EpochMetrics(epoch, output, valid))

        self.model.save(self.config.model_path)
        print(f'Model saved to {self.config.model_path}')
        return self.model


def train(config: TrainingConfig, context: Optional[Context] = None) -> Model:
    """ Train on the configured train/validation files and save the model. """
    context = context or Context(seed=config.seed)
    training_set = Dataset.training(config.train_path, context)
    validation_set = Dataset.validation(config.valid_path, context)
    training_set.count_survivors()
    return Trainer(config, context).fit(training_set, validation_set)
