from dataclasses import dataclass, asdict
from typing import Iterable

import numpy as np

from linfit.ml.errors import EmptyInputError


def _as_sample(values: Iterable[float]) -> np.ndarray:
    sample = np.asarray(values if isinstance(values, np.ndarray) else list(values), dtype=np.float64).ravel()
    if sample.size == 0:
        raise EmptyInputError("Cannot compute statistics of an empty sequence")
    return sample


def median(values: Iterable[float]) -> float:
    """
    Middle element of the sorted sample, or the average of the two central
    elements when the count is even. NaN sorts last and never raises.
    """
    data = np.sort(_as_sample(values))
    mid = len(data) // 2
    if len(data) % 2 == 0:
        with np.errstate(invalid="ignore"):
            return float((data[mid] + data[mid - 1]) / 2.0)
    return float(data[mid])


def mode(values: Iterable[float]) -> float:
    """
    Value of the longest run of equal values in the sorted sample.

    The sorted sample is scanned once from left to right and a run only
    replaces the current best when it is strictly longer, so ties go to the
    smaller value. NaN never equals itself and counts as a run of one.
    """
    data = np.sort(_as_sample(values))

    best = data[0]
    best_count = 0
    current = data[0]
    current_count = 0
    for value in data:
        if value == current:
            current_count += 1
            continue
        if current_count > best_count:
            best, best_count = current, current_count
        current = value
        current_count = 1
    if current_count > best_count:
        best = current
    return float(best)


@dataclass(frozen=True)
class DescriptiveStatistics:
    """
    Read-only summary of a numeric sample.

    The snapshot is taken once by ``compute``; it does not follow later changes
    to the source sequence. Variance is the population variance.
    """
    mean: float
    variance: float
    std_dev: float
    std_err: float
    median: float
    mode: float
    min: float
    max: float
    sum: float
    count: int

    @classmethod
    def compute(cls, values: Iterable[float]) -> "DescriptiveStatistics":
        """
        Summarize a non-empty numeric sequence.

        Raises:
            EmptyInputError: If ``values`` is empty.
        """
        data = _as_sample(values)
        count = len(data)
        with np.errstate(over="ignore", invalid="ignore"):
            total = float(np.sum(data))
            mean = total / count
            variance = float(np.sum((data - mean) ** 2)) / count
        std_dev = float(np.sqrt(variance))

        return cls(
            mean=mean,
            variance=variance,
            std_dev=std_dev,
            std_err=std_dev / float(np.sqrt(count)),
            median=median(data),
            mode=mode(data),
            min=float(np.min(data)),
            max=float(np.max(data)),
            sum=total,
            count=count,
        )

    def as_dict(self) -> dict:
        return asdict(self)
