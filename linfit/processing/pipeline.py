import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from linfit.ml.dataset import Dataset
from linfit.ml.linear_regression import LinearRegressionModel, LinearRegressionOptions
from linfit.ml.statistics import DescriptiveStatistics

logger = logging.getLogger(__name__)


@dataclass
class RegressionReport:
    """Outcome of one pipeline run."""
    dataset_size: int
    input_statistics: DescriptiveStatistics
    output_statistics: DescriptiveStatistics
    model: LinearRegressionModel

    @property
    def bias(self) -> float:
        return self.model.bias

    @property
    def weight(self) -> float:
        return self.model.weight

    @property
    def cost(self) -> float:
        return self.model.cost


class RegressionPipeline:
    """
    Parses a dataset file, describes it and fits a linear regression model.

    The pipeline is configured from a dictionary with two optional keys:
    ``strict`` selects the parsing policy and ``model`` holds the
    LinearRegressionOptions fields.
    """

    _config_keys = {"strict", "model"}

    def __init__(self, config: Optional[dict] = None):
        """
        Initialize the pipeline with a configuration.

        Args:
            config: Dictionary with the pipeline settings. If None, defaults are used.

        Example:
            config = {
                "strict": False,
                "model": {
                    "epochs": 100,
                    "learning_rate": 0.01,
                    "normalize": True,
                },
            }

        Raises:
            ValueError: If the configuration contains unknown keys.
        """
        self.strict = False
        self.options = LinearRegressionOptions()

        if config is not None:
            self._configure_from_dict(config)

    def run(self, source: Union[str, Path]) -> RegressionReport:
        """
        Run the full pipeline on a dataset file.

        Statistics are computed on the raw columns, before any normalization
        performed by the model.

        Raises:
            EmptyInputError: If no sample could be read from ``source``.
            SourceUnavailableError, MalformedRecordError: Only in strict mode.
        """
        dataset = Dataset.parse(source, strict=self.strict)
        return self.run_dataset(dataset)

    def run_dataset(self, dataset: Dataset) -> RegressionReport:
        input_statistics = DescriptiveStatistics.compute(dataset.inputs)
        output_statistics = DescriptiveStatistics.compute(dataset.outputs)

        model = LinearRegressionModel(dataset, self.options).fit()
        logger.info("Pipeline finished", extra={"samples": dataset.size(), "cost": model.cost})

        return RegressionReport(
            dataset_size=dataset.size(),
            input_statistics=input_statistics,
            output_statistics=output_statistics,
            model=model,
        )

    def _configure_from_dict(self, config: dict) -> None:
        unknown = set(config) - self._config_keys
        if unknown:
            raise ValueError(f"Unknown pipeline settings: {sorted(unknown)}. Available settings: {sorted(self._config_keys)}")

        strict = config.get("strict", False)
        if not isinstance(strict, bool):
            raise ValueError(f"strict must be a bool, got {strict!r}")
        self.strict = strict
        self.options = LinearRegressionOptions.from_dict(config.get("model"))
