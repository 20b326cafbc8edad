import math

from libiso.excepts import ErrorKind, ValidationError
from libiso.isotherm import Isotherm
from libiso.metadata import IsothermIdentity, IsothermType, register_isotherm
from libiso.parameters import (
    ParameterSpec,
    greater_than_one,
    non_negative,
    open_unit,
    positive,
)

from ._common import QMAX, RGAS, CoverageIsotherm, log_odds


def _k1(description):
    return ParameterSpec("k1", description, positive(ErrorKind.BAD_K1_LE_ZERO))


def _k2(description):
    return ParameterSpec("k2", description, positive(ErrorKind.BAD_K2_LE_ZERO))


def _k2_above_one(description):
    return ParameterSpec("k2", description, greater_than_one(ErrorKind.BAD_K2_LE_ONE))


@register_isotherm
class Sips(Isotherm):
    r"""
    $$
    q_e = q_{max} \frac{(K_1 C_e)^{1/K_2}}{1 + (K_1 C_e)^{1/K_2}}
    $$
    """

    identity = IsothermIdentity(name="Sips", tag=IsothermType.SIPS)
    parameter_specs = (QMAX, _k1("Affinity constant"), _k2("Heterogeneity factor"))

    def _qe(self, ce, temperature):
        x = (self.k1 * ce) ** (1.0 / self.k2)
        return self.qmax * x / (1.0 + x)


@register_isotherm
class Toth(Isotherm):
    r"""
    $$
    q_e = \frac{q_{max} C_e}{\left(1/K_1 + C_e^{K_2}\right)^{1/K_2}}
    $$
    """

    identity = IsothermIdentity(name="Toth", tag=IsothermType.TOTH)
    parameter_specs = (QMAX, _k1("Affinity constant"), _k2("Heterogeneity factor"))

    def _qe(self, ce, temperature):
        return self.qmax * ce / (1.0 / self.k1 + ce**self.k2) ** (1.0 / self.k2)


@register_isotherm
class Hill(Isotherm):
    r"""
    $$
    q_e = \frac{q_{max} C_e^{K_2}}{K_1 + C_e^{K_2}}
    $$
    """

    identity = IsothermIdentity(name="Hill", tag=IsothermType.HILL)
    parameter_specs = (
        QMAX,
        _k1("Hill constant"),
        _k2_above_one("Cooperativity coefficient"),
    )

    def _qe(self, ce, temperature):
        x = ce**self.k2
        return self.qmax * x / (self.k1 + x)


@register_isotherm
class Khan(Isotherm):
    r"""
    $$
    q_e = \frac{q_{max} K_1 C_e}{(1 + K_1 C_e)^{K_2}}
    $$
    """

    identity = IsothermIdentity(name="Khan", tag=IsothermType.KHAN)
    parameter_specs = (QMAX, _k1("Khan constant"), _k2_above_one("Khan exponent"))

    def _qe(self, ce, temperature):
        kc = self.k1 * ce
        return self.qmax * kc / (1.0 + kc) ** self.k2


@register_isotherm
class Jossens(Isotherm):
    r"""
    $$
    q_e = \frac{q_{max} C_e}{1 + K_1 C_e^{K_2}}
    $$
    """

    identity = IsothermIdentity(name="Jossens", tag=IsothermType.JOSSENS)
    parameter_specs = (
        QMAX,
        _k1("Jossens constant"),
        _k2_above_one("Jossens exponent"),
    )

    def _qe(self, ce, temperature):
        return self.qmax * ce / (1.0 + self.k1 * ce**self.k2)


@register_isotherm
class KobleCorrigan(Isotherm):
    r"""
    $$
    q_e = \frac{q_{max} C_e^{K_2}}{1 + K_1 C_e^{K_2}}
    $$
    """

    identity = IsothermIdentity(name="KobleCorrigan", tag=IsothermType.KOBLE_CORRIGAN)
    parameter_specs = (
        QMAX,
        _k1("Koble-Corrigan constant"),
        _k2_above_one("Heterogeneity factor"),
    )

    def _qe(self, ce, temperature):
        x = ce**self.k2
        return self.qmax * x / (1.0 + self.k1 * x)


@register_isotherm
class HollKrich(Isotherm):
    r"""
    $$
    q_e = \frac{q_{max} K_1 C_e^{K_2}}{1 + K_1 C_e^{K_2}}
    $$
    """

    identity = IsothermIdentity(name="HollKrich", tag=IsothermType.HOLL_KRICH)
    parameter_specs = (
        QMAX,
        _k1("Affinity constant"),
        _k2_above_one("Heterogeneity factor"),
    )

    def _qe(self, ce, temperature):
        x = self.k1 * ce**self.k2
        return self.qmax * x / (1.0 + x)


@register_isotherm
class LangmuirFreundlich(Isotherm):
    r"""
    $$
    q_e = \frac{q_{max} K_1 C_e^{K_2}}{1 + K_1 C_e^{K_2}}
    $$
    """

    identity = IsothermIdentity(
        name="LangmuirFreundlich", tag=IsothermType.LANGMUIR_FREUNDLICH
    )
    parameter_specs = (QMAX, _k1("Affinity constant"), _k2("Heterogeneity factor"))

    def _qe(self, ce, temperature):
        x = self.k1 * ce**self.k2
        return self.qmax * x / (1.0 + x)


@register_isotherm
class BrouersSotolongo(Isotherm):
    r"""
    $$
    q_e = q_{max} \left(1 - \exp(-K_1 C_e^{K_2})\right)
    $$
    """

    identity = IsothermIdentity(
        name="BrouersSotolongo", tag=IsothermType.BROUERS_SOTOLONGO
    )
    parameter_specs = (QMAX, _k1("Brouers-Sotolongo constant"), _k2("Exponent"))

    def _qe(self, ce, temperature):
        return -self.qmax * math.expm1(-self.k1 * ce**self.k2)


@register_isotherm
class BrunauerEmmettTeller(Isotherm):
    r"""
    $$
    q_e = \frac{q_{max} K_1 C_e}{(K_2 - C_e)\left(1 + (K_1 - 1) C_e / K_2\right)}
    $$

    $K_2$ is the saturation concentration, $C_e$ must stay below it.
    """

    identity = IsothermIdentity(
        name="BrunauerEmmettTeller", tag=IsothermType.BRUNAUER_EMMETT_TELLER
    )
    parameter_specs = (
        QMAX,
        _k1("BET constant"),
        _k2("Saturation concentration"),
    )

    def concentration_bounds(self):
        return 0.0, self.k2

    def _qe(self, ce, temperature):
        if ce >= self.k2:
            raise ValidationError(
                ErrorKind.BAD_RESULT,
                self.identity.name,
                f"Ce = {ce!r} not below the saturation concentration {self.k2!r}",
                value=ce,
            )
        return (
            self.qmax
            * self.k1
            * ce
            / ((self.k2 - ce) * (1.0 + (self.k1 - 1.0) * ce / self.k2))
        )


@register_isotherm
class MacMillanTeller(Isotherm):
    r"""
    $$
    q_e = q_{max} \left(\frac{K_1}{\ln(K_2 / C_e)}\right)^{1/3}
    $$
    """

    identity = IsothermIdentity(
        name="MacMillanTeller", tag=IsothermType.MACMILLAN_TELLER
    )
    parameter_specs = (
        QMAX,
        _k1("MacMillan-Teller constant"),
        _k2("Saturation concentration"),
    )

    def concentration_bounds(self):
        return 0.0, self.k2

    def _qe(self, ce, temperature):
        if ce == 0.0:
            return 0.0
        if ce >= self.k2:
            raise ValidationError(
                ErrorKind.BAD_RESULT,
                self.identity.name,
                f"Ce = {ce!r} not below the saturation concentration {self.k2!r}",
                value=ce,
            )
        return self.qmax * math.cbrt(self.k1 / math.log(self.k2 / ce))


@register_isotherm
class RadkePrausnitzI(Isotherm):
    r"""
    $$
    q_e = \frac{q_{max} K_1 C_e}{(1 + K_1 C_e)^{K_2}}
    $$
    """

    identity = IsothermIdentity(
        name="RadkePrausnitzI", tag=IsothermType.RADKE_PRAUSNITZ_I
    )
    parameter_specs = (QMAX, _k1("Affinity constant"), _k2("Exponent"))

    def _qe(self, ce, temperature):
        kc = self.k1 * ce
        return self.qmax * kc / (1.0 + kc) ** self.k2


@register_isotherm
class RadkePrausnitzIII(Isotherm):
    r"""
    $$
    q_e = \frac{q_{max} K_1 C_e^{K_2}}{1 + K_1 C_e^{K_2 - 1}}
    $$
    """

    identity = IsothermIdentity(
        name="RadkePrausnitzIII", tag=IsothermType.RADKE_PRAUSNITZ_III
    )
    parameter_specs = (QMAX, _k1("Affinity constant"), _k2_above_one("Exponent"))

    def _qe(self, ce, temperature):
        if ce == 0.0:
            return 0.0
        return (
            self.qmax * self.k1 * ce**self.k2 / (1.0 + self.k1 * ce ** (self.k2 - 1.0))
        )


@register_isotherm
class RedlichPeterson(Isotherm):
    r"""
    $$
    q_e = \frac{K_1 C_e}{1 + K_2 C_e^{K_3}}
    $$

    with $0 < K_3 < 1$.
    """

    identity = IsothermIdentity(
        name="RedlichPeterson", tag=IsothermType.REDLICH_PETERSON
    )
    parameter_specs = (
        _k1("Redlich-Peterson constant A"),
        _k2("Redlich-Peterson constant B"),
        ParameterSpec(
            "k3",
            "Exponent",
            open_unit(ErrorKind.BAD_K3_LE_ZERO, ErrorKind.BAD_K3_GE_ONE),
        ),
    )

    def _qe(self, ce, temperature):
        return self.k1 * ce / (1.0 + self.k2 * ce**self.k3)


@register_isotherm
class Unilan(Isotherm):
    r"""
    $$
    q_e = \frac{q_{max}}{2 K_2}
          \ln\frac{1 + K_1 e^{K_2} C_e}{1 + K_1 e^{-K_2} C_e}
    $$
    """

    identity = IsothermIdentity(name="Unilan", tag=IsothermType.UNILAN)
    parameter_specs = (
        QMAX,
        _k1("Affinity constant"),
        _k2("Heterogeneity parameter"),
    )

    def _qe(self, ce, temperature):
        kc = self.k1 * ce
        return (
            self.qmax
            / (2.0 * self.k2)
            * math.log(
                (1.0 + kc * math.exp(self.k2)) / (1.0 + kc * math.exp(-self.k2))
            )
        )


@register_isotherm
class ValenzuelaMyers(Isotherm):
    r"""
    $$
    q_e = \frac{q_{max}}{2 K_2}
          \ln\frac{K_1 + C_e e^{K_2}}{K_1 + C_e e^{-K_2}}
    $$
    """

    identity = IsothermIdentity(
        name="ValenzuelaMyers", tag=IsothermType.VALENZUELA_MYERS
    )
    parameter_specs = (
        QMAX,
        _k1("Valenzuela-Myers constant"),
        _k2("Heterogeneity parameter"),
    )

    def _qe(self, ce, temperature):
        return (
            self.qmax
            / (2.0 * self.k2)
            * math.log(
                (self.k1 + ce * math.exp(self.k2)) / (self.k1 + ce * math.exp(-self.k2))
            )
        )


@register_isotherm
class ViethSladek(Isotherm):
    r"""
    $$
    q_e = K_2 C_e + \frac{q_{max} K_1 C_e}{1 + K_1 C_e}
    $$
    """

    identity = IsothermIdentity(name="ViethSladek", tag=IsothermType.VIETH_SLADEK)
    parameter_specs = (
        QMAX,
        _k1("Affinity constant"),
        _k2("Henry's law constant of the linear part"),
    )

    def _qe(self, ce, temperature):
        kc = self.k1 * ce
        return self.k2 * ce + self.qmax * kc / (1.0 + kc)


@register_isotherm
class FritzSchlunderIII(Isotherm):
    r"""
    $$
    q_e = \frac{q_{max} K_1 C_e}{1 + q_{max} C_e^{K_2}}
    $$
    """

    identity = IsothermIdentity(
        name="FritzSchlunderIII", tag=IsothermType.FRITZ_SCHLUNDER_III
    )
    parameter_specs = (
        QMAX,
        _k1("Fritz-Schlunder constant"),
        _k2("Fritz-Schlunder exponent"),
    )

    def _qe(self, ce, temperature):
        return self.qmax * self.k1 * ce / (1.0 + self.qmax * ce**self.k2)


# ------ implicit models, solved in the coverage theta ----------


@register_isotherm
class FowlerGuggenheim(CoverageIsotherm):
    r"""
    $$
    K_1 C_e = \frac{\theta}{1 - \theta} \exp\left(\frac{\theta K_2}{R T}\right)
    $$

    with $\theta = q_e / q_{max}$. The logarithm of the equation is solved
    for $0 < \theta < 1$.
    """

    identity = IsothermIdentity(
        name="FowlerGuggenheim", tag=IsothermType.FOWLER_GUGGENHEIM
    )
    parameter_specs = (
        QMAX,
        _k1("Equilibrium constant"),
        ParameterSpec(
            "k2",
            "Interaction energy between adsorbed molecules",
            non_negative(ErrorKind.BAD_K2_LT_ZERO),
        ),
    )
    constant_specs = (RGAS,)

    def _prepare(self, ce, temperature):
        self._require_temperature(temperature)

    def _residual(self, theta, ce, temperature):
        return (
            log_odds(theta)
            + theta * self.k2 / (self.rgas * temperature)
            - math.log(self.k1 * ce)
        )

    def _derivative(self, theta, ce, temperature):
        return 1.0 / (theta * (1.0 - theta)) + self.k2 / (self.rgas * temperature)


@register_isotherm
class HillDeBoer(CoverageIsotherm):
    r"""
    $$
    K_1 C_e = \frac{\theta}{1 - \theta}
              \exp\left(\frac{\theta}{1 - \theta} - \frac{\theta K_2}{R T}\right)
    $$

    with $\theta = q_e / q_{max}$, solved in logarithmic form for
    $0 < \theta < 1$.
    """

    identity = IsothermIdentity(name="HillDeBoer", tag=IsothermType.HILL_DE_BOER)
    parameter_specs = (
        QMAX,
        _k1("Equilibrium constant"),
        ParameterSpec(
            "k2",
            "Interaction energy between adsorbed molecules",
            non_negative(ErrorKind.BAD_K2_LT_ZERO),
        ),
    )
    constant_specs = (RGAS,)
    theta_guess = 0.95

    def _prepare(self, ce, temperature):
        self._require_temperature(temperature)

    def _residual(self, theta, ce, temperature):
        return (
            log_odds(theta)
            + theta / (1.0 - theta)
            - theta * self.k2 / (self.rgas * temperature)
            - math.log(self.k1 * ce)
        )

    def _derivative(self, theta, ce, temperature):
        return (
            1.0 / (theta * (1.0 - theta))
            + 1.0 / (1.0 - theta) ** 2
            - self.k2 / (self.rgas * temperature)
        )


@register_isotherm
class Kiselev(CoverageIsotherm):
    r"""
    $$
    K_1 C_e = \frac{\theta}{(1 - \theta)(1 + K_2 \theta)}
    $$

    with $\theta = q_e / q_{max}$, solved in logarithmic form for
    $0 < \theta < 1$.
    """

    identity = IsothermIdentity(name="Kiselev", tag=IsothermType.KISELEV)
    parameter_specs = (
        QMAX,
        _k1("Equilibrium constant"),
        _k2("Constant of complex formation between adsorbed molecules"),
    )

    def _residual(self, theta, ce, temperature):
        return (
            log_odds(theta)
            - math.log1p(self.k2 * theta)
            - math.log(self.k1 * ce)
        )

    def _derivative(self, theta, ce, temperature):
        return 1.0 / theta + 1.0 / (1.0 - theta) - self.k2 / (1.0 + self.k2 * theta)
