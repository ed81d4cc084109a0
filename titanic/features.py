""" Fixed-width numeric encoding of passenger rows. """

from typing import Tuple

from titanic.records import Row, Sex


# Order is part of the saved-model contract
FEATURE_NAMES = ('age', 'pclass', 'fare', 'sex_is_male', 'parch', 'sib_sp')
FEATURE_SIZE = len(FEATURE_NAMES)

FeatureVector = Tuple[float, float, float, float, float, float]


def encode(row: Row) -> FeatureVector:
    """ Map an imputed row to [age, pclass, fare, sex_is_male, parch, sib_sp]. """
    sex_is_male = 1.0 if row.sex is Sex.MALE else 0.0
    return (
        float(row.age),
        float(row.pclass),
        float(row.fare),
        sex_is_male,
        float(row.parch),
        float(row.sib_sp),
    )


def label(row: Row) -> float:
    """ Training target: 1.0 for survivors, 0.0 otherwise. """
    if row.label is None:
        raise ValueError(f'row {row.id} has no label')
    return 1.0 if row.label else 0.0
