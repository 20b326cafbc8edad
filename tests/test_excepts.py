import pickle

import pytest

from libiso.excepts import (
    ArithmeticOverflow,
    ErrorKind,
    FailedNewtonRaphson,
    IsothermException,
    NotConvergenceException,
    ParameterOutOfRange,
    TooManyIterations,
    ValidationError,
    ZeroDerivativeException,
)


def test_validation_error():
    err = ValidationError(ErrorKind.BAD_QMAX_LE_ZERO, "Langmuir", "qmax = 0.0", value=0.0)
    assert isinstance(err, IsothermException)
    assert isinstance(err, ValueError)
    assert err.kind is ErrorKind.BAD_QMAX_LE_ZERO
    assert err.classname == "Langmuir"
    assert err.value == 0.0
    assert err.diagnostic == {"value": 0.0}


def test_raise_site():
    err = ValidationError(ErrorKind.BAD_CE_LT_ZERO, "Henry")
    assert err.where.function == "test_raise_site"
    assert err.where.filename == __file__
    assert err.where.lineno > 0


def test_str():
    err = ValidationError(ErrorKind.BAD_K1_LE_ZERO, "Sips", "k1 = -1.0")
    text = str(err)
    assert text.startswith(f"Sips: {ErrorKind.BAD_K1_LE_ZERO.value} k1 = -1.0 [")
    assert "test_str" in text


def test_out_of_range_is_index_error():
    err = ParameterOutOfRange("Toth", 3, 3)
    assert isinstance(err, IndexError)
    assert err.kind is ErrorKind.OUT_OF_RANGE
    assert err.diagnostic == {"index": 3, "size": 3}


@pytest.mark.parametrize(
    "cls, kind",
    [
        (TooManyIterations, ErrorKind.NON_CONVERGENCE),
        (ZeroDerivativeException, ErrorKind.ZERO_DERIVATIVE),
        (FailedNewtonRaphson, ErrorKind.BAD_RESULT),
    ],
)
def test_solver_errors(cls, kind):
    err = cls("newton_raphson", "failed", 0.5, 1e-3)
    assert isinstance(err, NotConvergenceException)
    assert err.kind is kind
    assert err.last_value == 0.5
    assert err.residual == 1e-3


def test_for_origin():
    err = TooManyIterations("newton_raphson", "failed", 0.5, 1e-3)
    relabeled = err.for_origin("Kiselev")
    assert type(relabeled) is TooManyIterations
    assert relabeled.classname == "Kiselev"
    assert relabeled.last_value == 0.5
    assert relabeled.where == err.where
    assert err.classname == "newton_raphson"
    relabeled.diagnostic["extra"] = 1
    assert "extra" not in err.diagnostic


def test_overflow_is_arithmetic_error():
    err = ArithmeticOverflow("Langmuir", "Ce = inf", value=float("inf"))
    assert isinstance(err, OverflowError)
    assert isinstance(err, ArithmeticError)
    assert err.kind is ErrorKind.BAD_OVERFLOW
    assert err.value == float("inf")


def test_message_in_args():
    err = ValidationError(ErrorKind.BAD_K1_LE_ZERO, "Sips", "k1 = -1.0", value=-1.0)
    assert err.args == ("k1 = -1.0",)
    assert err.for_origin("Toth").args == err.args


@pytest.mark.parametrize(
    "err",
    [
        ValidationError(ErrorKind.BAD_K1_LE_ZERO, "Sips", "k1 = -1.0", value=-1.0),
        ParameterOutOfRange("Toth", 3, 3),
        ArithmeticOverflow("Langmuir", "Ce = inf", value=float("inf")),
        TooManyIterations("newton_raphson", "failed", 0.5, 1e-3).for_origin("Kiselev"),
    ],
)
def test_pickle(err):
    restored = pickle.loads(pickle.dumps(err))
    assert type(restored) is type(err)
    assert restored.kind is err.kind
    assert restored.classname == err.classname
    assert restored.where == err.where
    assert restored.diagnostic == err.diagnostic
    assert restored.args == err.args
    assert str(restored) == str(err)


def test_error_messages_are_distinct():
    # equal messages would silently turn members into aliases
    assert len(ErrorKind.__members__) == len(list(ErrorKind))


# Run the tests
if __name__ == "__main__":
    pytest.main()
