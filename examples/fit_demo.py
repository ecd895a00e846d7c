import sys

from linfit.ml.dataset import Dataset
from linfit.processing.pipeline import RegressionPipeline
from linfit.utils.json_logging import setup_json_logging

""" Demo of RegressionPipeline. Usage: python examples/fit_demo.py path/to/lineal_dataset.csv """

setup_json_logging()
source = sys.argv[1] if len(sys.argv) > 1 else "./assets/lineal_dataset.csv"

""" Describe the raw data """
dataset = Dataset.parse(source)
print(f"dataset length {dataset.size()}")

""" Fit on normalized data """
config = {
    "model": {
        "epochs": 100,
        "learning_rate": 0.01,
        "normalize": True,
    },
}
report = RegressionPipeline(config).run_dataset(dataset)

print(f"inputs:  {report.input_statistics.as_dict()}")
print(f"outputs: {report.output_statistics.as_dict()}")
print(f"bias {report.bias} weight {report.weight} cost {report.cost}")

""" Predictions are made in normalized space; map them back by hand """
params = report.model.training_data.normalization
x = report.input_statistics.median
y = params.denormalize_output(report.model.predict(params.normalize_input(x)))
print(f"prediction at median input {x}: {y}")
