"""
linfit: single-feature linear regression fitted by batch gradient descent.

We re-export the main entry points here so that elsewhere we can do:
from linfit import Dataset, LinearRegressionModel
"""

from linfit.ml.dataset import Dataset, Sample, NormalizationParams
from linfit.ml.errors import LinfitError, SourceUnavailableError, MalformedRecordError, EmptyInputError
from linfit.ml.gradient import cost, gradient_descent, GradientDescentOptimizer
from linfit.ml.linear_regression import LinearRegressionModel, LinearRegressionOptions
from linfit.ml.statistics import DescriptiveStatistics
from linfit.processing.pipeline import RegressionPipeline, RegressionReport


__all__ = [
    "Dataset",
    "Sample",
    "NormalizationParams",
    "LinfitError",
    "SourceUnavailableError",
    "MalformedRecordError",
    "EmptyInputError",
    "cost",
    "gradient_descent",
    "GradientDescentOptimizer",
    "LinearRegressionModel",
    "LinearRegressionOptions",
    "DescriptiveStatistics",
    "RegressionPipeline",
    "RegressionReport",
]
