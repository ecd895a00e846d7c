"""
Paired (input, output) observations for single-feature regression.

Source files hold one record per line as ``output,input`` -- the label comes
first, the feature second. Records that do not parse are skipped unless the
caller asks for strict parsing.
"""
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

import numpy as np

from linfit.ml.errors import EmptyInputError, MalformedRecordError, SourceUnavailableError
from linfit.utils.paths import read_lines

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Sample:
    """One (input, output) observation."""
    input: float
    output: float


@dataclass(frozen=True)
class NormalizationParams:
    """Column means and population standard deviations used by Dataset.normalize()."""
    input_mean: float
    input_std: float
    output_mean: float
    output_std: float

    def normalize_input(self, x: float) -> float:
        return (x - self.input_mean) / self.input_std

    def denormalize_output(self, y: float) -> float:
        return y * self.output_std + self.output_mean


def _parse_record(line: str) -> Optional[Tuple[float, float]]:
    """Return (input, output) for a ``output,input`` line, or None if it does not parse."""
    fields = line.split(",")
    # float() also takes digit separators such as "1_000"; those are not numbers here
    if len(fields) < 2 or "_" in fields[0] or "_" in fields[1]:
        return None
    try:
        output = float(fields[0].strip())
        x = float(fields[1].strip())
    except ValueError:
        return None
    return x, output


class Dataset:
    """
    Ordered collection of samples stored as two index-aligned float64 arrays.

    ``inputs[i]`` and ``outputs[i]`` always belong to the same sample, and the
    two arrays always have the same length.
    """

    def __init__(self, inputs: Optional[Iterable[float]] = None, outputs: Optional[Iterable[float]] = None):
        self.inputs = np.array([] if inputs is None else list(inputs), dtype=np.float64)
        self.outputs = np.array([] if outputs is None else list(outputs), dtype=np.float64)
        if self.inputs.ndim != 1 or self.outputs.ndim != 1:
            raise ValueError("inputs and outputs must be one-dimensional sequences")
        if len(self.inputs) != len(self.outputs):
            raise ValueError(
                f"inputs and outputs must have same length. Got inputs: {len(self.inputs)}, outputs: {len(self.outputs)}"
            )
        self.normalization: Optional[NormalizationParams] = None

    @classmethod
    def parse(cls, source: Union[str, Path], strict: bool = False) -> "Dataset":
        """
        Build a Dataset from a delimited text file.

        Each non-blank line must hold two comma-separated numbers, output first
        and input second. Extra fields after the second are ignored.

        Args:
            source: Path of the file to read.
            strict: If False (the default), an unreadable source yields an empty
                    Dataset and malformed lines are skipped. If True, both
                    conditions raise.

        Returns:
            Dataset: The parsed samples, in file order.

        Raises:
            SourceUnavailableError: Only when strict and the source cannot be opened.
            MalformedRecordError: Only when strict and a line does not parse.
        """
        try:
            lines = read_lines(source)
        except SourceUnavailableError as e:
            if strict:
                raise
            logger.info("%s; using an empty dataset", e)
            return cls()

        inputs: List[float] = []
        outputs: List[float] = []
        skipped = 0
        for line_number, line in enumerate(lines, start=1):
            if not line.strip():
                continue
            record = _parse_record(line)
            if record is None:
                if strict:
                    raise MalformedRecordError(line_number, line)
                logger.debug("Skipping malformed record on line %d: %r", line_number, line)
                skipped += 1
                continue
            inputs.append(record[0])
            outputs.append(record[1])

        dataset = cls(inputs, outputs)
        logger.info(
            "Parsed dataset from %s",
            source,
            extra={"samples": dataset.size(), "skipped_lines": skipped},
        )
        return dataset

    def size(self) -> int:
        return len(self.inputs)

    def __len__(self) -> int:
        return self.size()

    @property
    def samples(self) -> List[Sample]:
        return [Sample(float(x), float(y)) for x, y in zip(self.inputs, self.outputs)]

    def add_row(self, input: float, output: float) -> None:
        """Append one sample to the end of the dataset."""
        self.inputs = np.append(self.inputs, np.float64(input))
        self.outputs = np.append(self.outputs, np.float64(output))

    def copy(self) -> "Dataset":
        clone = Dataset(self.inputs, self.outputs)
        clone.normalization = self.normalization
        return clone

    def normalize(self) -> NormalizationParams:
        """
        Z-score both columns in place.

        Every input x becomes (x - mean_in) / std_in and every output y becomes
        (y - mean_out) / std_out, where std is the population standard deviation
        (sum of squares divided by n). The parameters used are stored in
        ``self.normalization`` and returned; nothing in this class reverses them.

        A constant column has std == 0 and turns into NaN; that is reported
        through a warning, not prevented.

        Raises:
            EmptyInputError: If the dataset has no samples.
        """
        if self.size() == 0:
            raise EmptyInputError("Cannot normalize an empty dataset")

        input_mean = float(np.mean(self.inputs))
        output_mean = float(np.mean(self.outputs))
        input_std = float(np.sqrt(np.mean((self.inputs - input_mean) ** 2)))
        output_std = float(np.sqrt(np.mean((self.outputs - output_mean) ** 2)))

        for name, std in (("input", input_std), ("output", output_std)):
            if std == 0.0:
                logger.warning("Constant %s column: normalization divides by zero", name)

        with np.errstate(divide="ignore", invalid="ignore"):
            self.inputs = (self.inputs - input_mean) / input_std
            self.outputs = (self.outputs - output_mean) / output_std

        self.normalization = NormalizationParams(
            input_mean=input_mean,
            input_std=input_std,
            output_mean=output_mean,
            output_std=output_std,
        )
        return self.normalization

    def __repr__(self) -> str:
        return f"Dataset(size={self.size()}, normalized={self.normalization is not None})"
