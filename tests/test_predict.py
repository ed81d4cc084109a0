"""Tests for inference and the submission file."""

import pandas as pd
import pytest

from titanic.errors import LoadError, ShapeMismatch
from titanic.model import ModelConfig
from titanic.predict import predict


@pytest.fixture
def model_path(tmp_path):
    path = str(tmp_path / 'model.pickle')
    ModelConfig().init().save(path)
    return path


def test_submission_keeps_order_and_cardinality(model_path, test_csv, tmp_path):
    output = str(tmp_path / 'submission.csv')
    result = predict(model_path, test_csv, output)

    written = pd.read_csv(output)
    assert list(written.columns) == ['PassengerId', 'Survived']
    assert written['PassengerId'].tolist() == [892, 893, 1044]
    assert set(written['Survived']) <= {0, 1}
    assert written['Survived'].tolist() == result['Survived'].tolist()


def test_hidden_size_mismatch(model_path, test_csv, tmp_path):
    with pytest.raises(ShapeMismatch):
        predict(model_path, test_csv, str(tmp_path / 'out.csv'), hidden_size=32)


def test_missing_model(test_csv, tmp_path):
    with pytest.raises(LoadError):
        predict(str(tmp_path / 'absent.pickle'), test_csv, str(tmp_path / 'out.csv'))


def test_predictions_follow_logit_sign(tmp_path, test_csv):
    model = ModelConfig().init()
    model.params['W2'][:] = 0
    model.params['b2'][:] = 1.0
    path = str(tmp_path / 'model.pickle')
    model.save(path)

    result = predict(path, test_csv, str(tmp_path / 'out.csv'))
    assert result['Survived'].tolist() == [1, 1, 1]
