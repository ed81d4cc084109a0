""" In-memory datasets of encoded passengers and their full-size batches. """

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

import numpy as np

from titanic import features, records
from titanic.context import Context
from titanic.errors import EmptyDatasetError, ParseError


# Conventional file locations
TRAIN_PATH = 'data/train.csv'
VALID_PATH = 'data/validation.csv'
TEST_PATH = 'data/test.csv'


@dataclass(frozen=True)
class Batch:
    """ Whole-dataset matrices. Row i of every field describes source row i.

    `targets` is None for unlabeled data. """
    inputs: np.ndarray
    ids: np.ndarray
    targets: Optional[np.ndarray] = None

    def __len__(self) -> int:
        return len(self.ids)


def _frozen(values):
    values.flags.writeable = False
    return values


class Dataset:
    """ Ordered (feature vector, label, id) triples, in file order. """

    def __init__(self, inputs: np.ndarray, ids: np.ndarray, labels: Optional[np.ndarray] = None) -> None:
        if labels is not None and len(labels) != len(ids):
            raise ValueError('labels and ids must have the same length')
        self._inputs = _frozen(inputs)
        self._ids = _frozen(ids)
        self._labels = None if labels is None else _frozen(labels)

    @classmethod
    def from_rows(cls, rows: Sequence[records.Row], context: Optional[Context] = None,
                  labeled: Optional[bool] = None) -> 'Dataset':
        """ Encode rows in order. Labels are kept when every row has one, or when `labeled` is set. """
        context = context or Context()
        inputs = context.array([features.encode(row) for row in rows]).reshape(-1, features.FEATURE_SIZE)
        ids = np.array([row.id for row in rows], dtype=np.int64)
        if labeled is None:
            labeled = bool(rows) and all(row.is_labeled for row in rows)
        labels = None
        if labeled:
            labels = context.array([features.label(row) for row in rows])
        return cls(inputs, ids, labels)

    @classmethod
    def from_file(cls, path: str, labeled: bool, context: Optional[Context] = None) -> 'Dataset':
        rows = records.load(path)
        if labeled and not rows:
            raise EmptyDatasetError(f'{path}: no data rows')
        if labeled and not rows[0].is_labeled:
            raise ParseError(f'{path}: missing {records.labelTarget} column')
        return cls.from_rows(rows, context, labeled=labeled or None)

    @classmethod
    def training(cls, path: str = TRAIN_PATH, context: Optional[Context] = None) -> 'Dataset':
        return cls.from_file(path, labeled=True, context=context)

    @classmethod
    def validation(cls, path: str = VALID_PATH, context: Optional[Context] = None) -> 'Dataset':
        return cls.from_file(path, labeled=True, context=context)

    @classmethod
    def testing(cls, path: str = TEST_PATH, context: Optional[Context] = None) -> 'Dataset':
        return cls.from_file(path, labeled=False, context=context)

    def __len__(self) -> int:
        return len(self._ids)

    @property
    def is_labeled(self) -> bool:
        return self._labels is not None

    def batch(self) -> Batch:
        """ Materialize every row as one batch. """
        if len(self) == 0:
            raise EmptyDatasetError('Cannot build a batch from an empty dataset')
        return Batch(inputs=self._inputs, ids=self._ids, targets=self._labels)

    # ------------------------ Chart accessors ------------------------
    def _column(self, name: str) -> np.ndarray:
        return np.array(self._inputs[:, features.FEATURE_NAMES.index(name)], dtype=float)

    def ages(self) -> np.ndarray:
        return self._column('age')

    def classes(self) -> np.ndarray:
        return self._column('pclass')

    def fares(self) -> np.ndarray:
        return self._column('fare')

    def sexes(self) -> np.ndarray:
        return self._column('sex_is_male')

    def parch(self) -> np.ndarray:
        return self._column('parch')

    def sib_sp(self) -> np.ndarray:
        return self._column('sib_sp')

    def survived(self) -> np.ndarray:
        if self._labels is None:
            raise ValueError('dataset has no labels')
        return np.array(self._labels, dtype=float)

    def count_survivors(self) -> Tuple[int, int]:
        survived = int(np.count_nonzero(self.survived()))
        died = len(self) - survived
        print('Survived/Died: {}/{}'.format(survived, died))
        return survived, died
