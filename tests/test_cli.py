"""End-to-end tests of the command line."""

import pandas as pd

from titanic.cli import main


def test_train_then_predict(train_csv, test_csv, tmp_path):
    model = str(tmp_path / 'model.pickle')
    output = str(tmp_path / 'submission.csv')

    assert main(['train', '--epochs', '2', '--train', train_csv, '--valid', train_csv, '--model', model]) == 0
    assert main(['predict', '--model', model, '--test', test_csv, '--output', output]) == 0
    assert pd.read_csv(output)['PassengerId'].tolist() == [892, 893, 1044]


def test_fatal_error_exit_code(tmp_path, capsys):
    code = main(['predict', '--model', str(tmp_path / 'absent.pickle')])

    assert code == 1
    assert 'error: Model file not found' in capsys.readouterr().err


def test_train_on_header_only_file(write_csv, tmp_path, capsys):
    empty = write_csv('empty.csv', [])
    code = main(['train', '--epochs', '1', '--train', empty, '--valid', empty,
                 '--model', str(tmp_path / 'model.pickle')])

    assert code == 1
    assert 'no data rows' in capsys.readouterr().err
