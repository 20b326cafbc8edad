from libiso.excepts import ErrorKind
from libiso.isotherm import Isotherm
from libiso.metadata import IsothermIdentity, IsothermType, register_isotherm
from libiso.parameters import ParameterSpec, closed_unit, positive

from ._common import QMAX


@register_isotherm
class FritzSchlunderV(Isotherm):
    r"""
    $$
    q_e = \frac{q_{max} C_e^{K_3}}{K_1 + K_2 C_e^{K_4}}
    $$

    with $0 \le K_3 \le 1$ and $0 \le K_4 \le 1$.
    """

    identity = IsothermIdentity(
        name="FritzSchlunderV", tag=IsothermType.FRITZ_SCHLUNDER_V
    )
    parameter_specs = (
        QMAX,
        ParameterSpec("k1", "Fritz-Schlunder constant A", positive(ErrorKind.BAD_K1_LE_ZERO)),
        ParameterSpec("k2", "Fritz-Schlunder constant B", positive(ErrorKind.BAD_K2_LE_ZERO)),
        ParameterSpec(
            "k3", "Exponent of the numerator", closed_unit(ErrorKind.BAD_K3_BETWEEN_01)
        ),
        ParameterSpec(
            "k4", "Exponent of the denominator", closed_unit(ErrorKind.BAD_K4_BETWEEN_01)
        ),
    )

    def _qe(self, ce, temperature):
        return self.qmax * ce**self.k3 / (self.k1 + self.k2 * ce**self.k4)
