import math

from libiso.excepts import ErrorKind
from libiso.isotherm import Isotherm
from libiso.metadata import IsothermIdentity, IsothermType, register_isotherm
from libiso.parameters import ParameterSpec, closed_unit, open_unit, positive

from ._common import QMAX


@register_isotherm
class FritzSchlunderIV(Isotherm):
    r"""
    $$
    q_e = \frac{q_{max} C_e^{K_2}}{1 + K_1 C_e^{K_3}}
    $$

    with $0 \le K_3 \le 1$.
    """

    identity = IsothermIdentity(
        name="FritzSchlunderIV", tag=IsothermType.FRITZ_SCHLUNDER_IV
    )
    parameter_specs = (
        QMAX,
        ParameterSpec("k1", "Affinity constant", positive(ErrorKind.BAD_K1_LE_ZERO)),
        ParameterSpec("k2", "Exponent of the numerator", positive(ErrorKind.BAD_K2_LE_ZERO)),
        ParameterSpec(
            "k3",
            "Exponent of the denominator",
            closed_unit(ErrorKind.BAD_K3_BETWEEN_01),
        ),
    )

    def _qe(self, ce, temperature):
        return self.qmax * ce**self.k2 / (1.0 + self.k1 * ce**self.k3)


@register_isotherm
class MarczewskiJaroniec(Isotherm):
    r"""
    $$
    q_e = q_{max} \left(\frac{(K_1 C_e)^{K_2}}{1 + (K_1 C_e)^{K_2}}\right)^{K_3 / K_2}
    $$
    """

    identity = IsothermIdentity(
        name="MarczewskiJaroniec", tag=IsothermType.MARCZEWSKI_JARONIEC
    )
    parameter_specs = (
        QMAX,
        ParameterSpec("k1", "Affinity constant", positive(ErrorKind.BAD_K1_LE_ZERO)),
        ParameterSpec(
            "k2", "Heterogeneity parameter", positive(ErrorKind.BAD_K2_LE_ZERO)
        ),
        ParameterSpec(
            "k3",
            "Heterogeneity parameter of the energy distribution",
            open_unit(ErrorKind.BAD_K3_LE_ZERO, ErrorKind.BAD_K3_GE_ONE),
        ),
    )

    def _qe(self, ce, temperature):
        x = (self.k1 * ce) ** self.k2
        return self.qmax * (x / (1.0 + x)) ** (self.k3 / self.k2)


@register_isotherm
class Baudu(Isotherm):
    r"""
    $$
    q_e = \frac{q_{max} K_1 C_e^{1 + K_2 + K_3}}{1 + K_1 C_e^{1 + K_2}}
    $$
    """

    identity = IsothermIdentity(name="Baudu", tag=IsothermType.BAUDU)
    parameter_specs = (
        QMAX,
        ParameterSpec("k1", "Baudu constant", positive(ErrorKind.BAD_K1_LE_ZERO)),
        ParameterSpec("k2", "Baudu exponent x", positive(ErrorKind.BAD_K2_LE_ZERO)),
        ParameterSpec("k3", "Baudu exponent y", positive(ErrorKind.BAD_K3_LE_ZERO)),
    )

    def _qe(self, ce, temperature):
        return (
            self.qmax
            * self.k1
            * ce ** (1.0 + self.k2 + self.k3)
            / (1.0 + self.k1 * ce ** (1.0 + self.k2))
        )


@register_isotherm
class WeberVanVliet(Isotherm):
    r"""
    Implicit in $q_e$:

    $$
    C_e = K_1 q_e^{K_2 q_e^{K_3} + K_4}
    $$

    The logarithm of the equation,

    $$
    \ln K_1 + (K_2 q_e^{K_3} + K_4) \ln q_e - \ln C_e = 0
    $$

    is solved with Newton-Raphson for $q_e > 0$.
    """

    identity = IsothermIdentity(name="WeberVanVliet", tag=IsothermType.WEBER_VAN_VLIET)
    parameter_specs = (
        ParameterSpec("k1", "Scale constant", positive(ErrorKind.BAD_K1_LE_ZERO)),
        ParameterSpec("k2", "Exponent constant", positive(ErrorKind.BAD_K2_LE_ZERO)),
        ParameterSpec("k3", "Exponent of qe", positive(ErrorKind.BAD_K3_LE_ZERO)),
        ParameterSpec("k4", "Constant exponent", positive(ErrorKind.BAD_K4_LE_ZERO)),
    )

    def _qe(self, ce, temperature):
        if ce == 0.0:
            return 0.0
        k1, k2, k3, k4 = self.values()
        target = math.log(ce) - math.log(k1)

        def residual(q):
            return (k2 * q**k3 + k4) * math.log(q) - target

        def derivative(q):
            return k2 * k3 * q ** (k3 - 1.0) * math.log(q) + (k2 * q**k3 + k4) / q

        return self._solve(residual, 1.0, fprime=derivative, bounds=(0.0, math.inf))
