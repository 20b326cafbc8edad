import math
from typing import Iterator, NamedTuple

import numpy as np

from libiso.excepts import ErrorKind, ParameterOutOfRange

MAX_PARAMETERS = 5


class ParameterSet:
    """Fixed size, ordered and read-only sequence of model parameters.

    Values are kept in a float64 numpy array flagged as not writeable. A new
    set is created for every change (see `replace`), so two sets never share
    storage.
    """

    __slots__ = ("_values",)

    def __init__(self, values):
        array = np.array(values, dtype=np.float64)
        if array.ndim != 1 or not 1 <= array.size <= MAX_PARAMETERS:
            raise ValueError(
                f"a parameter set holds 1 to {MAX_PARAMETERS} values, got shape {array.shape}"
            )
        array.flags.writeable = False
        self._values = array

    def __len__(self) -> int:
        return self._values.size

    def __getitem__(self, index: int) -> float:
        return float(self._values[self._position(index)])

    def __iter__(self) -> Iterator[float]:
        return (float(v) for v in self._values)

    def __eq__(self, other):
        if not isinstance(other, ParameterSet):
            return NotImplemented
        return np.array_equal(self._values, other._values)

    __hash__ = None

    def __repr__(self):
        return f"ParameterSet({self._values.tolist()})"

    def copy(self) -> "ParameterSet":
        return ParameterSet(self._values)

    def replace(self, index: int, value: float) -> "ParameterSet":
        """New set equal to this one except at **index**."""
        values = self._values.copy()
        values[self._position(index)] = value
        return ParameterSet(values)

    def _position(self, index) -> int:
        if (
            isinstance(index, bool)
            or not isinstance(index, (int, np.integer))
            or not 0 <= index < self._values.size
        ):
            raise ParameterOutOfRange("ParameterSet", index, self._values.size)
        return int(index)


class Rule(NamedTuple):
    """Admissible interval of a parameter.

    ``kind`` is reported when the value is below (or at an excluded) lower
    bound, ``upper_kind`` (defaulting to ``kind``) when it violates the upper
    bound. NaN never satisfies a rule.
    """

    kind: ErrorKind
    lower: float | None = None
    lower_inclusive: bool = False
    upper: float | None = None
    upper_inclusive: bool = False
    upper_kind: ErrorKind | None = None

    def violation(self, value: float) -> ErrorKind | None:
        if math.isnan(value):
            return self.kind
        if self.lower is not None:
            if value < self.lower or (value == self.lower and not self.lower_inclusive):
                return self.kind
        if self.upper is not None:
            if value > self.upper or (value == self.upper and not self.upper_inclusive):
                return self.upper_kind or self.kind
        return None


def positive(kind: ErrorKind) -> Rule:
    return Rule(kind, lower=0.0)


def non_negative(kind: ErrorKind) -> Rule:
    return Rule(kind, lower=0.0, lower_inclusive=True)


def greater_than_one(kind: ErrorKind) -> Rule:
    return Rule(kind, lower=1.0)


def open_unit(kind: ErrorKind, upper_kind: ErrorKind | None = None) -> Rule:
    """0 < value < 1"""
    return Rule(kind, lower=0.0, upper=1.0, upper_kind=upper_kind)


def closed_unit(kind: ErrorKind) -> Rule:
    """0 <= value <= 1"""
    return Rule(
        kind, lower=0.0, lower_inclusive=True, upper=1.0, upper_inclusive=True
    )


class ParameterSpec(NamedTuple):
    """Declaration of one parameter (or physical constant) of a model."""

    name: str
    description: str
    rule: Rule
    default: float | None = None
