""" Inference: load a trained model and write the submission file. """

from typing import Optional

import pandas as pd

from titanic.context import Context
from titanic.dataset import TEST_PATH, Dataset
from titanic.model import Model, ModelConfig
from titanic.records import labelId, labelTarget
from titanic.training import MODEL_PATH


SUBMISSION_PATH = 'data/submission.csv'


def predict(model_path: str = MODEL_PATH, test_path: str = TEST_PATH, output_path: str = SUBMISSION_PATH,
            hidden_size: int = 64, context: Optional[Context] = None) -> pd.DataFrame:
    """ Predict survival for every test passenger, keeping input order. """
    model = Model.load(model_path, ModelConfig(hidden_size=hidden_size)).valid()
    batch = Dataset.testing(test_path, context).batch()

    predY = model.predict(batch.inputs)
    # write to csv
    result = pd.DataFrame({labelId: batch.ids, labelTarget: predY})
    result.to_csv(output_path, index=False)
    print('Submission saved.')
    return result
