from .config import NewtonRaphsonSettings  # noqa: F401
from .data_structure import IsothermCurve, IsothermRecord  # noqa: F401
from .excepts import (  # noqa: F401
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
from .isotherm import Isotherm  # noqa: F401
from .metadata import (  # noqa: F401
    IsothermIdentity,
    IsothermType,
    ParameterDescriptor,
    available_isotherms,
    get_isotherm,
    metadata_registry,
)
from .models import *  # noqa: F401,F403
from .models import __all__ as _models
from .parameters import ParameterSet  # noqa: F401
from .solver import newton_raphson  # noqa: F401
from .utils import qe_curve  # noqa: F401

"""
libiso - A Python library of adsorption isotherms.

Every model derives from `Isotherm` and exposes the quantity adsorbed at
equilibrium through `qe(ce, temperature)`, its validated parameters, and the
inverse `ce(qe)`:
- closed form models: Henry, Langmuir, Freundlich, Sips, Toth, ...
- implicit models (Elovich, Fowler-Guggenheim, Hill-de Boer, Kiselev,
  Weber-van Vliet) solved with the Newton-Raphson method (`newton_raphson`).

Models can be looked up by name with `get_isotherm`, their parameters are
described through `metadata_registry`, and `IsothermRecord` / `IsothermCurve`
are Pydantic models to store model definitions and sampled curves.
"""

# Define __all__ to control what gets imported when using `from libiso import *`
__all__ = [
    "Isotherm",
    "ParameterSet",
    "IsothermIdentity",
    "IsothermType",
    "ParameterDescriptor",
    "metadata_registry",
    "get_isotherm",
    "available_isotherms",
    "newton_raphson",
    "NewtonRaphsonSettings",
    "ErrorKind",
    "IsothermException",
    "ValidationError",
    "ParameterOutOfRange",
    "ArithmeticOverflow",
    "NotConvergenceException",
    "TooManyIterations",
    "ZeroDerivativeException",
    "FailedNewtonRaphson",
    "IsothermRecord",
    "IsothermCurve",
    "qe_curve",
    *_models,
]
