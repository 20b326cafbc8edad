"""
Library wide constants and numerical settings.

Values used by more than one module live here so that models and solver
agree on them.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

# Universal gas constant, J/(mol K) (CODATA 2018)
R_GAS_CONSTANT = 8.314462618

# Smallest magnitude treated as different from zero
EPSILON_ZERO = 1e-14

Criterion = Literal["step", "residual", "both"]


class NewtonRaphsonSettings(BaseModel):
    """Options of the Newton-Raphson root finder.

    Attributes
    ----------
    threshold : float
        Convergence tolerance, applied to the step, the residual or both
        according to ``criterion``.
    max_iterations : int
        Hard cap on the number of iterations.
    criterion : {"step", "residual", "both"}
        Convergence test.
    derivative_step : float
        Fixed step of the finite difference used when no derivative is given.
    zero_derivative : float
        Derivatives smaller than this (in absolute value) stop the iterations.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    threshold: float = Field(default=1e-10, gt=0)
    max_iterations: int = Field(default=5000, ge=1)
    criterion: Criterion = "step"
    derivative_step: float = Field(default=1e-6, gt=0)
    zero_derivative: float = Field(default=EPSILON_ZERO, ge=0)


DEFAULT_SOLVER_SETTINGS = NewtonRaphsonSettings()
