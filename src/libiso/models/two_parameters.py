"""
Two parameter isotherms.

Models depending on the temperature (Temkin, Dubinin-Radushkevich) take the
universal gas constant as the keyword-only constant ``rgas``.
"""

import math

from libiso.excepts import ErrorKind, ValidationError
from libiso.isotherm import Isotherm
from libiso.metadata import IsothermIdentity, IsothermType, register_isotherm
from libiso.parameters import ParameterSpec, non_negative, positive

from ._common import QMAX, RGAS

K1_AFFINITY = ParameterSpec(
    "k1", "Affinity constant", positive(ErrorKind.BAD_K1_LE_ZERO)
)


@register_isotherm
class Langmuir(Isotherm):
    r"""
    $$
    q_e = \frac{q_{max} K_1 C_e}{1 + K_1 C_e}
    $$
    """

    identity = IsothermIdentity(name="Langmuir", tag=IsothermType.LANGMUIR)
    parameter_specs = (QMAX, K1_AFFINITY)

    def _qe(self, ce, temperature):
        kc = self.k1 * ce
        return self.qmax * kc / (1.0 + kc)


@register_isotherm
class Freundlich(Isotherm):
    r"""
    $$
    q_e = K_1 C_e^{1/K_2}
    $$
    """

    identity = IsothermIdentity(name="Freundlich", tag=IsothermType.FREUNDLICH)
    parameter_specs = (
        ParameterSpec(
            "k1", "Freundlich constant", positive(ErrorKind.BAD_K1_LE_ZERO)
        ),
        ParameterSpec(
            "k2", "Heterogeneity factor", positive(ErrorKind.BAD_K2_LE_ZERO)
        ),
    )

    def _qe(self, ce, temperature):
        return self.k1 * ce ** (1.0 / self.k2)


@register_isotherm
class Temkin(Isotherm):
    r"""
    $$
    q_e = \frac{R T}{K_2} \ln(K_1 C_e)
    $$

    Defined for $T > 0$ and $K_1 C_e > 1$.
    """

    identity = IsothermIdentity(name="Temkin", tag=IsothermType.TEMKIN)
    parameter_specs = (
        ParameterSpec(
            "k1", "Equilibrium binding constant", positive(ErrorKind.BAD_K1_LE_ZERO)
        ),
        ParameterSpec(
            "k2", "Heat of adsorption constant", positive(ErrorKind.BAD_K2_LE_ZERO)
        ),
    )
    constant_specs = (RGAS,)
    through_origin = False

    def concentration_bounds(self):
        return 1.0 / self.k1, math.inf

    def _qe(self, ce, temperature):
        self._require_temperature(temperature)
        kc = self.k1 * ce
        if not kc > 1.0:
            raise ValidationError(
                ErrorKind.BAD_KCE_K1_LE_ONE,
                self.identity.name,
                f"K1*Ce = {kc!r}",
                value=kc,
            )
        return self.rgas * temperature * math.log(kc) / self.k2


@register_isotherm
class DubininRadushkevich(Isotherm):
    r"""
    $$
    q_e = q_{max} \exp\left(-K_1 \left[R T \ln\left(1 + \frac{1}{C_e}\right)\right]^2\right)
    $$
    """

    identity = IsothermIdentity(
        name="DubininRadushkevich", tag=IsothermType.DUBININ_RADUSHKEVICH
    )
    parameter_specs = (
        QMAX,
        ParameterSpec(
            "k1",
            "Constant related to the adsorption energy",
            positive(ErrorKind.BAD_K1_LE_ZERO),
        ),
    )
    constant_specs = (RGAS,)

    def _qe(self, ce, temperature):
        self._require_temperature(temperature)
        if ce == 0.0:
            return 0.0
        potential = self.rgas * temperature * math.log1p(1.0 / ce)
        return self.qmax * math.exp(-self.k1 * potential**2)


@register_isotherm
class HarkinJura(Isotherm):
    r"""
    $$
    q_e = \sqrt{\frac{K_1}{K_2 - \log_{10} C_e}}
    $$
    """

    identity = IsothermIdentity(name="HarkinJura", tag=IsothermType.HARKIN_JURA)
    parameter_specs = (
        ParameterSpec(
            "k1", "Harkin-Jura constant A", positive(ErrorKind.BAD_K1_LE_ZERO)
        ),
        ParameterSpec(
            "k2", "Harkin-Jura constant B", non_negative(ErrorKind.BAD_K2_LT_ZERO)
        ),
    )

    def concentration_bounds(self):
        # log10(Ce) < k2
        return 0.0, 10.0 ** min(self.k2, 308.0)

    def _qe(self, ce, temperature):
        if ce == 0.0:
            return 0.0
        log_ce = math.log10(ce)
        if log_ce >= self.k2:
            raise ValidationError(
                ErrorKind.BAD_LOG_CE_GT_K2,
                self.identity.name,
                f"log10(Ce) = {log_ce!r}",
                value=ce,
            )
        return math.sqrt(self.k1 / (self.k2 - log_ce))


@register_isotherm
class Jovanovic(Isotherm):
    r"""
    $$
    q_e = q_{max} \left(1 - e^{-K_1 C_e}\right)
    $$
    """

    identity = IsothermIdentity(name="Jovanovic", tag=IsothermType.JOVANOVIC)
    parameter_specs = (QMAX, K1_AFFINITY)

    def _qe(self, ce, temperature):
        return -self.qmax * math.expm1(-self.k1 * ce)


@register_isotherm
class Halsey(Isotherm):
    r"""
    $$
    q_e = \exp\left(\frac{\ln K_1 - \ln C_e}{K_2}\right)
    $$

    Defined for $C_e > 0$ only.
    """

    identity = IsothermIdentity(name="Halsey", tag=IsothermType.HALSEY)
    parameter_specs = (
        ParameterSpec("k1", "Halsey constant", positive(ErrorKind.BAD_K1_LE_ZERO)),
        ParameterSpec("k2", "Halsey exponent", positive(ErrorKind.BAD_K2_LE_ZERO)),
    )
    through_origin = False

    def _qe(self, ce, temperature):
        if ce == 0.0:
            raise ValidationError(
                ErrorKind.BAD_CE_LE_ZERO, self.identity.name, "Ce = 0.0", value=ce
            )
        return math.exp((math.log(self.k1) - math.log(ce)) / self.k2)


@register_isotherm
class Elovich(Isotherm):
    r"""
    Implicit in the coverage $\theta = q_e / q_{max}$:

    $$
    \theta = K_1 C_e e^{-\theta}
    $$

    The equation is solved with Newton-Raphson for $\theta > 0$.
    """

    identity = IsothermIdentity(name="Elovich", tag=IsothermType.ELOVICH)
    parameter_specs = (QMAX, K1_AFFINITY)

    def _qe(self, ce, temperature):
        if ce == 0.0:
            return 0.0
        a = self.k1 * ce

        def residual(theta):
            return theta - a * math.exp(-theta)

        def derivative(theta):
            return 1.0 + a * math.exp(-theta)

        # theta = a/(1+a) lies below the root, iterations then increase monotonically
        theta = self._solve(
            residual, a / (1.0 + a), fprime=derivative, bounds=(0.0, math.inf)
        )
        return self.qmax * theta
