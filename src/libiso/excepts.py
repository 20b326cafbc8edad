import inspect
from enum import Enum
from typing import NamedTuple


class ErrorKind(Enum):
    """Closed set of failures reported by the library."""

    BAD_COEFFICIENT = "Isotherm coefficients are undefined."
    BAD_CE_LE_ZERO = "Ce less than or equal to zero."
    BAD_CE_LT_ZERO = "Ce less than zero."
    BAD_QE_LT_ZERO = "Qe less than zero."
    BAD_K1_LE_ZERO = "K1 less than or equal to zero."
    BAD_K1_LT_ZERO = "K1 less than zero."
    BAD_K2_LE_ZERO = "K2 less than or equal to zero."
    BAD_K2_LT_ZERO = "K2 less than zero."
    BAD_K3_LE_ZERO = "K3 less than or equal to zero."
    BAD_K3_LT_ZERO = "K3 less than zero."
    BAD_K4_LE_ZERO = "K4 less than or equal to zero."
    BAD_K4_LT_ZERO = "K4 less than zero."
    BAD_K2_LE_ONE = "K2 less than or equal to one."
    BAD_K3_GE_ONE = "K3 greater than or equal to one."
    BAD_K3_BETWEEN_01 = "K3 must lie between 0 and 1."
    BAD_K4_BETWEEN_01 = "K4 must lie between 0 and 1."
    BAD_QMAX_LE_ZERO = "Qmax less than or equal to zero."
    BAD_TEMP_LE_ZERO = "Temperature less than or equal to zero."
    BAD_RGAS_LE_ZERO = "Universal gas constant less than or equal to zero."
    BAD_RESULT = "Inconsistent result for the model."
    BAD_OVERFLOW = "Overflow in mathematical operation."
    BAD_LOG_CE_GT_K2 = "log(Ce) greater than or equal to K2."
    BAD_THETA_GE_ONE = "Coverage greater than or equal to one."
    BAD_THETA_LE_ZERO = "Coverage less than or equal to zero."
    BAD_KCE_K1_LE_ONE = "K1 * Ce less than or equal to one."
    ZERO_DERIVATIVE = "Derivative numerically zero during Newton-Raphson iteration."
    NON_CONVERGENCE = "Convergence problem of the iterative method."
    OUT_OF_RANGE = "Parameter index out of range."


class SourceInfo(NamedTuple):
    """Where an exception was raised."""

    filename: str
    lineno: int
    function: str

    def __str__(self):
        return f"{self.function} ({self.filename}:{self.lineno})"


def _raise_site() -> SourceInfo:
    # first frame outside this module is the one building the exception
    frame = inspect.currentframe()
    try:
        while frame is not None and frame.f_code.co_filename == __file__:
            frame = frame.f_back
        if frame is None:
            return SourceInfo("<unknown>", 0, "<unknown>")
        return SourceInfo(
            frame.f_code.co_filename, frame.f_lineno, frame.f_code.co_qualname
        )
    finally:
        del frame


class IsothermException(Exception):
    """Base of every error raised by libiso.

    It records the kind of failure, the class (or function) that detected it,
    the place where it was raised and any value that helps to diagnose it.
    """

    def __init__(self, kind: ErrorKind, classname: str, msg: str = "", **diagn):
        super().__init__(msg)
        self.kind = kind
        self.classname = classname
        self.where = _raise_site()
        self.msg = msg
        self.diagnostic = diagn

    def for_origin(self, classname: str):
        """Same error reported on behalf of ``classname``."""
        other = type(self).__new__(type(self))
        other.__dict__.update(self.__dict__)
        other.classname = classname
        other.diagnostic = dict(self.diagnostic)
        Exception.__init__(other, *self.args)
        return other

    def __reduce__(self):
        return _restore, (type(self), self.args, dict(self.__dict__))

    def __str__(self):
        text = f"{self.classname}: {self.kind.value}"
        if self.msg:
            text += f" {self.msg}"
        return f"{text} [{self.where}]"


class ValidationError(IsothermException, ValueError):
    """A parameter or an input falls outside the domain of the model."""

    def __init__(self, kind: ErrorKind, classname: str, msg: str = "", value=None):
        super().__init__(kind, classname, msg, value=value)
        self.value = value


class ParameterOutOfRange(IsothermException, IndexError):
    """Index does not name a parameter of the model."""

    def __init__(self, classname: str, index, size: int):
        super().__init__(
            ErrorKind.OUT_OF_RANGE,
            classname,
            f"index {index!r} is not valid for {size} parameter(s)",
            index=index,
            size=size,
        )
        self.index = index


class ArithmeticOverflow(IsothermException, OverflowError):
    """A result, or an input, does not fit in a finite float."""

    def __init__(self, classname: str, msg: str = "", value=None):
        super().__init__(ErrorKind.BAD_OVERFLOW, classname, msg, value=value)
        self.value = value


class NotConvergenceException(IsothermException):
    """When convergence is not reached.

    It contains the last value of the iterations and its residual in case
    this information can be valuable.
    """

    def __init__(
        self, kind: ErrorKind, classname: str, msg: str, last_value, residual=None
    ):
        super().__init__(
            kind, classname, msg, last_value=last_value, residual=residual
        )
        self.last_value = last_value
        self.residual = residual


class TooManyIterations(NotConvergenceException):
    """When maximum number of iterations is reached.

    This exception is thrown when the maximum number of iterations
    has been reached without meeting the convergence criteria
    """

    def __init__(self, classname: str, msg: str, last_value, residual=None):
        super().__init__(
            ErrorKind.NON_CONVERGENCE, classname, msg, last_value, residual
        )


class ZeroDerivativeException(NotConvergenceException):
    """When the derivative vanishes and the Newton step cannot be taken."""

    def __init__(self, classname: str, msg: str, last_value, residual=None):
        super().__init__(
            ErrorKind.ZERO_DERIVATIVE, classname, msg, last_value, residual
        )


class FailedNewtonRaphson(NotConvergenceException):
    """When the residual cannot be evaluated during the iterations."""

    def __init__(self, classname: str, msg: str, last_value, residual=None):
        super().__init__(ErrorKind.BAD_RESULT, classname, msg, last_value, residual)


def _restore(cls, args, state):
    exc = cls.__new__(cls)
    Exception.__init__(exc, *args)
    exc.__dict__.update(state)
    return exc
