""" Execution context threaded through training and inference. """

from dataclasses import dataclass, field

import numpy as np


@dataclass
class Context:
    """ Numeric settings of one run: element type and a seeded generator. """
    seed: int = 42
    dtype: type = np.float32
    rng: np.random.Generator = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.rng = np.random.default_rng(self.seed)

    def array(self, values) -> np.ndarray:
        return np.asarray(values, dtype=self.dtype)
