import abc
import math
from typing import ClassVar

from libiso.config import R_GAS_CONSTANT
from libiso.excepts import ErrorKind, ValidationError
from libiso.isotherm import Isotherm
from libiso.parameters import ParameterSpec, positive

QMAX = ParameterSpec(
    "qmax", "Maximum adsorption capacity", positive(ErrorKind.BAD_QMAX_LE_ZERO)
)
RGAS = ParameterSpec(
    "rgas",
    "Universal gas constant",
    positive(ErrorKind.BAD_RGAS_LE_ZERO),
    default=R_GAS_CONSTANT,
)


class CoverageIsotherm(Isotherm):
    """Model defined implicitly in the surface coverage ``theta = q / qmax``.

    Subclasses provide the residual of the equilibrium equation in theta and
    its derivative; `_qe` solves it inside (0, 1) and scales the coverage by
    ``qmax``.
    """

    theta_guess: ClassVar[float] = 0.5

    def _qe(self, ce, temperature):
        if ce == 0.0:
            return 0.0
        self._prepare(ce, temperature)
        theta = self._solve(
            lambda t: self._residual(self._checked_theta(t), ce, temperature),
            self.theta_guess,
            fprime=lambda t: self._derivative(self._checked_theta(t), ce, temperature),
            bounds=(0.0, 1.0),
        )
        return self.qmax * theta

    def _prepare(self, ce, temperature):
        """Runtime checks done once before solving."""

    @abc.abstractmethod
    def _residual(self, theta, ce, temperature):
        """Equilibrium equation, zero at the solution."""

    @abc.abstractmethod
    def _derivative(self, theta, ce, temperature):
        """Derivative of `_residual` with respect to theta."""

    def _checked_theta(self, theta):
        if not theta > 0.0:
            raise ValidationError(
                ErrorKind.BAD_THETA_LE_ZERO, self.identity.name, value=theta
            )
        if not theta < 1.0:
            raise ValidationError(
                ErrorKind.BAD_THETA_GE_ONE, self.identity.name, value=theta
            )
        return theta


def log_odds(theta):
    return math.log(theta) - math.log1p(-theta)
