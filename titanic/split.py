""" Split a labeled Kaggle file into the training and validation files. """

from typing import Tuple

import pandas as pd
from sklearn.model_selection import train_test_split

from titanic.dataset import TRAIN_PATH, VALID_PATH
from titanic.errors import LoadError, ParseError
from titanic.records import labelTarget


def split(source: str, train_path: str = TRAIN_PATH, valid_path: str = VALID_PATH,
          test_size: float = 0.2, seed: int = 42) -> Tuple[int, int]:
    """ Stratified split on `Survived`; columns are written back unchanged. """
    try:
        data = pd.read_csv(source, dtype=str, keep_default_na=False)
    except FileNotFoundError as err:
        raise LoadError(f'Data file not found: {source}') from err
    if labelTarget not in data.columns:
        raise ParseError(f'{source}: missing {labelTarget} column')

    dataTrain, dataValid = train_test_split(
        data, test_size=test_size, random_state=seed, stratify=data[labelTarget])
    # keep file order inside each split
    dataTrain = dataTrain.sort_index()
    dataValid = dataValid.sort_index()
    dataTrain.to_csv(train_path, index=False)
    dataValid.to_csv(valid_path, index=False)
    print(f'Train/Validation: {len(dataTrain)}/{len(dataValid)}')
    return len(dataTrain), len(dataValid)
