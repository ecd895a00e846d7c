"""
Cost evaluation and batch gradient descent for the model ``bias + weight * x``.

The cost is the half mean squared error, sum(residual**2) / (2n), which makes
its partial derivatives exactly the averaged gradient sums used below.
"""
import logging
from typing import List, Tuple

import numpy as np
from tqdm import tqdm

from linfit.ml.dataset import Dataset
from linfit.ml.errors import EmptyInputError

logger = logging.getLogger(__name__)


def _require_samples(dataset: Dataset, operation: str) -> int:
    n = dataset.size()
    if n == 0:
        raise EmptyInputError(f"Cannot {operation} on an empty dataset")
    return n


def cost(bias: float, weight: float, dataset: Dataset) -> float:
    """
    Half mean squared error of (bias, weight) over the dataset.

    Args:
        bias: Intercept of the line.
        weight: Slope of the line.
        dataset: Index-aligned inputs and outputs.

    Returns:
        sum((bias + weight * x - y) ** 2) / (2 * n)

    Raises:
        EmptyInputError: If the dataset has no samples.
    """
    n = _require_samples(dataset, "compute cost")
    with np.errstate(over="ignore", invalid="ignore"):
        residuals = bias + weight * dataset.inputs - dataset.outputs
        return float(np.sum(residuals ** 2) / (2.0 * n))


class GradientDescentOptimizer:
    """
    Full-batch gradient descent over a fixed number of epochs.

    There is no early stopping and no divergence check: a learning rate that
    is too large drives the parameters to Inf/NaN and the run still completes.
    """

    def __init__(self, epochs: int, learning_rate: float, record_cost: bool = False, progress: bool = False):
        """
        Args:
            epochs: Number of full passes over the data. Must be >= 0.
            learning_rate: Step size applied to the averaged gradients.
            record_cost: If True, keep the cost before the first step and after
                         every step in ``cost_history``.
            progress: If True, show a tqdm progress bar over the epochs.
        """
        if isinstance(epochs, bool) or not isinstance(epochs, (int, np.integer)) or epochs < 0:
            raise ValueError(f"epochs must be a non-negative integer, got {epochs!r}")
        self.epochs = int(epochs)
        self.learning_rate = float(learning_rate)
        self.record_cost = record_cost
        self.progress = progress
        self.cost_history: List[float] = []

    def run(self, initial_bias: float, initial_weight: float, dataset: Dataset) -> Tuple[float, float]:
        """
        Minimize ``cost`` starting from (initial_bias, initial_weight).

        Both gradients of an epoch are computed from the same parameter values
        before either parameter moves.

        Returns:
            Tuple of (bias, weight) after ``epochs`` updates.

        Raises:
            EmptyInputError: If the dataset has no samples.
        """
        n = _require_samples(dataset, "run gradient descent")
        x = dataset.inputs
        y = dataset.outputs
        bias = float(initial_bias)
        weight = float(initial_weight)

        self.cost_history = []
        if self.record_cost:
            self.cost_history.append(cost(bias, weight, dataset))

        epochs = range(self.epochs)
        if self.progress:
            epochs = tqdm(epochs, desc="Gradient descent")

        with np.errstate(over="ignore", invalid="ignore"):
            for _ in epochs:
                residuals = bias + weight * x - y
                bias_gradient = float(np.sum(residuals))
                weight_gradient = float(np.sum(residuals * x))

                bias -= self.learning_rate * bias_gradient / n
                weight -= self.learning_rate * weight_gradient / n

                if self.record_cost:
                    self.cost_history.append(cost(bias, weight, dataset))

        logger.debug("Gradient descent finished", extra={"epochs": self.epochs, "bias": bias, "weight": weight})
        return bias, weight

    def __str__(self) -> str:
        return f"{self.__class__.__name__}(epochs={self.epochs}, learning_rate={self.learning_rate})"


def gradient_descent(
    epochs: int,
    learning_rate: float,
    initial_bias: float,
    initial_weight: float,
    dataset: Dataset,
) -> Tuple[float, float]:
    """Run ``epochs`` full-batch updates and return the final (bias, weight)."""
    return GradientDescentOptimizer(epochs, learning_rate).run(initial_bias, initial_weight, dataset)
