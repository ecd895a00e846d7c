from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")
R = TypeVar("R")


class Model(ABC, Generic[T, R]):
    """
    Abstract base class for trainable models.

    A model owns its training data and exposes two operations: ``fit`` learns
    parameters from that data, ``predict`` maps one input of type T to an
    output of type R. Optimizers and cost functions never need to know which
    concrete model they serve.
    """

    @abstractmethod
    def fit(self) -> "Model[T, R]":
        """
        Train the model on the data it owns.

        Returns:
            The fitted model, so calls can be chained.

        Raises:
            LinfitError: If training cannot start (e.g. there is no data).
        """
        pass

    @abstractmethod
    def predict(self, value: T) -> R:
        """
        Make a prediction for a single input.

        Args:
            value: The input to predict for.

        Returns:
            The model output for ``value``.
        """
        pass

    def __str__(self) -> str:
        """Return a string representation of the model."""
        return f"{self.__class__.__name__}"
