import logging
import math
from dataclasses import dataclass, fields, asdict
from fractions import Fraction
from typing import Iterable, List, Optional

import numpy as np

from linfit.abstract_interfaces.model import Model
from linfit.ml.dataset import Dataset
from linfit.ml.errors import EmptyInputError
from linfit.ml.gradient import GradientDescentOptimizer, cost

logger = logging.getLogger(__name__)


def fused_multiply_add(a: float, x: float, b: float) -> float:
    """
    Return a * x + b rounded once, as a hardware fused multiply-add would.

    Finite operands are combined exactly as rationals and rounded on the final
    conversion; an exact result beyond the float range rounds to a signed
    infinity. Non-finite operands follow ordinary float arithmetic.
    """
    if not (math.isfinite(a) and math.isfinite(x) and math.isfinite(b)):
        return a * x + b
    exact = Fraction(a) * Fraction(x) + Fraction(b)
    try:
        return float(exact)
    except OverflowError:
        return math.inf if exact > 0 else -math.inf


@dataclass
class LinearRegressionOptions:
    """Training configuration for LinearRegressionModel."""
    epochs: int = 100
    learning_rate: float = 0.01
    normalize: bool = False
    record_cost: bool = False

    @classmethod
    def from_dict(cls, config: Optional[dict]) -> "LinearRegressionOptions":
        """
        Build options from a plain mapping.

        Raises:
            ValueError: If the mapping contains a key that is not an option.
        """
        if config is None:
            return cls()
        known = {f.name for f in fields(cls)}
        unknown = set(config) - known
        if unknown:
            raise ValueError(f"Unknown model options: {sorted(unknown)}. Available options: {sorted(known)}")
        return cls(**config)

    def as_dict(self) -> dict:
        return asdict(self)


class LinearRegressionModel(Model[float, float]):
    """
    Single-feature linear regression, ``bias + weight * x``, fitted by batch
    gradient descent.

    The model takes its own copy of the training data, so later changes made
    by the caller to the original Dataset do not reach the optimizer, and the
    optional in-place normalization never touches the caller's Dataset.

    Normalization is not tracked for prediction: when the model was trained
    with ``normalize=True`` the caller must transform inputs and outputs
    themselves (``training_data.normalization`` holds the parameters).
    """

    def __init__(self, training_data: Dataset, options: Optional[LinearRegressionOptions] = None):
        self.training_data = training_data.copy()
        self.options = options if options is not None else LinearRegressionOptions()
        self.bias = 0.0
        self.weight = 0.0
        self.cost = 0.0
        self.cost_history: List[float] = []

    def fit(self) -> "LinearRegressionModel":
        """
        Train the model on its training data.

        Normalizes the training data first when ``options.normalize`` is set
        and the data has not been normalized yet,
        runs ``options.epochs`` gradient descent steps from the current
        parameters and stores the resulting bias, weight and final cost.

        Non-finite results (constant columns, divergent learning rates) are
        logged as warnings and left in place.

        Raises:
            EmptyInputError: If the training data has no samples.
        """
        if self.training_data.size() == 0:
            raise EmptyInputError("Cannot fit a model on an empty dataset")

        if self.options.normalize and self.training_data.normalization is None:
            self.training_data.normalize()

        optimizer = GradientDescentOptimizer(
            self.options.epochs,
            self.options.learning_rate,
            record_cost=self.options.record_cost,
        )
        self.bias, self.weight = optimizer.run(self.bias, self.weight, self.training_data)
        self.cost = cost(self.bias, self.weight, self.training_data)
        self.cost_history = optimizer.cost_history

        if not self.is_finite():
            logger.warning(
                "Fit produced non-finite parameters",
                extra={"bias": self.bias, "weight": self.weight, "cost": self.cost},
            )
        logger.info(
            "Fitted %s",
            self,
            extra={"bias": self.bias, "weight": self.weight, "cost": self.cost, "samples": self.training_data.size()},
        )
        return self

    def predict(self, value: float) -> float:
        """Return ``bias + weight * value`` with a single rounding."""
        return fused_multiply_add(self.weight, float(value), self.bias)

    def predict_many(self, values: Iterable[float]) -> np.ndarray:
        return np.array([self.predict(v) for v in values], dtype=np.float64)

    def is_finite(self) -> bool:
        return all(math.isfinite(v) for v in (self.bias, self.weight, self.cost))

    def __str__(self) -> str:
        return f"{self.__class__.__name__}(bias={self.bias}, weight={self.weight})"
