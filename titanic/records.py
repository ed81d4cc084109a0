""" Titanic passenger records: loading and imputation of missing cells. """

import math
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

import pandas as pd

from titanic.errors import LoadError, ParseError


# ------------------------ Assumptions ------------------------
# Fixed fill values for optional cells, applied once at load time
DEFAULT_AGE = 24.0
DEFAULT_FARE = 100.0
DEFAULT_CABIN = 'C23 C25 C27'
DEFAULT_EMBARKED = 'S'

# Column names of the Kaggle files
labelId = 'PassengerId'
labelTarget = 'Survived'
labelRequired = ('PassengerId', 'Pclass', 'Name', 'Sex', 'SibSp', 'Parch', 'Ticket')


class Sex(Enum):
    MALE = 'male'
    FEMALE = 'female'


class Embarked(Enum):
    CHERBOURG = 'C'
    QUEENSTOWN = 'Q'
    SOUTHAMPTON = 'S'


@dataclass(frozen=True)
class Row:
    """ One imputed passenger record. `label` is None for unlabeled files. """
    id: int
    label: Optional[bool]
    pclass: int
    name: str
    sex: Sex
    age: float
    sib_sp: int
    parch: int
    ticket: str
    fare: float
    cabin: str
    embarked: Embarked

    @property
    def is_labeled(self) -> bool:
        return self.label is not None


# ------------------------ Cell converters ------------------------
def _non_negative(convert):
    def checked(cell):
        value = convert(cell)
        if not (math.isfinite(value) and value >= 0):
            raise ValueError(f'expected a finite non-negative value, got {cell!r}')
        return value
    return checked


def _pclass(cell):
    value = int(cell)
    if value not in (1, 2, 3):
        raise ValueError(f'expected 1, 2 or 3, got {cell!r}')
    return value


def _survived(cell):
    if cell not in ('0', '1'):
        raise ValueError(f'expected 0 or 1, got {cell!r}')
    return cell == '1'


def _sex(cell):
    return Sex(cell.strip().lower())


def _embarked(cell):
    return Embarked(cell.strip().upper())


class _Line:
    """ Cell access for one data line, raising ParseError with its position. """

    def __init__(self, path, lineno, cells):
        self.path = path
        self.lineno = lineno
        self.cells = cells

    def _raw(self, column):
        cell = self.cells.get(column)
        if cell is None or pd.isna(cell) or not str(cell).strip():
            return None
        return str(cell).strip()

    def _convert(self, column, cell, convert):
        try:
            return convert(cell)
        except ValueError as err:
            raise ParseError(f'{self.path}:{self.lineno}: bad {column} value {cell!r} ({err})') from err

    def required(self, column, convert=str):
        cell = self._raw(column)
        if cell is None:
            raise ParseError(f'{self.path}:{self.lineno}: missing required {column} value')
        return self._convert(column, cell, convert)

    def optional(self, column, default, convert=str):
        cell = self._raw(column)
        if cell is None:
            return convert(default) if isinstance(default, str) else default
        return self._convert(column, cell, convert)


def _read_frame(path):
    try:
        return pd.read_csv(path, dtype=str, keep_default_na=False)
    except FileNotFoundError as err:
        raise LoadError(f'Data file not found: {path}', hint='run `titanic split` to create train/validation files') from err
    except (OSError, UnicodeDecodeError) as err:
        raise LoadError(f'Could not read data file {path}: {err}') from err
    except pd.errors.EmptyDataError as err:
        raise ParseError(f'{path}: file has no header') from err
    except pd.errors.ParserError as err:
        raise ParseError(f'{path}: {err}') from err


def parse_row(line: _Line, labeled: bool) -> Row:
    """ Convert the cells of one line into a Row, filling optional cells. """
    return Row(
        id=line.required('PassengerId', int),
        label=line.required('Survived', _survived) if labeled else None,
        pclass=line.required('Pclass', _pclass),
        name=line.required('Name'),
        sex=line.required('Sex', _sex),
        age=line.optional('Age', DEFAULT_AGE, _non_negative(float)),
        sib_sp=line.required('SibSp', _non_negative(int)),
        parch=line.required('Parch', _non_negative(int)),
        ticket=line.required('Ticket'),
        fare=line.optional('Fare', DEFAULT_FARE, _non_negative(float)),
        cabin=line.optional('Cabin', DEFAULT_CABIN),
        embarked=line.optional('Embarked', DEFAULT_EMBARKED, _embarked),
    )


def load(path: str) -> List[Row]:
    """ Load a header-described csv file into imputed rows, in file order.

    The file is labeled when it has a `Survived` column. Any missing
    required column or unparsable cell is fatal. """
    data = _read_frame(str(path))
    missing = [k for k in labelRequired if k not in data.columns]
    if missing:
        raise ParseError(f'{path}: missing columns {", ".join(missing)}')
    labeled = labelTarget in data.columns

    rows = []
    # header is line 1
    for lineno, cells in enumerate(data.to_dict('records'), start=2):
        rows.append(parse_row(_Line(str(path), lineno, cells), labeled))
    print(f'Loaded {len(rows)} rows from {path}')
    return rows
