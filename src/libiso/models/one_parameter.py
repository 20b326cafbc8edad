from libiso.excepts import ErrorKind
from libiso.isotherm import Isotherm
from libiso.metadata import IsothermIdentity, IsothermType, register_isotherm
from libiso.parameters import ParameterSpec, positive


@register_isotherm
class Henry(Isotherm):
    r"""
    Linear isotherm, valid at low coverage.

    $$
    q_e = K_1 C_e
    $$
    """

    identity = IsothermIdentity(name="Henry", tag=IsothermType.HENRY)
    parameter_specs = (
        ParameterSpec(
            "k1", "Henry's constant", positive(ErrorKind.BAD_K1_LE_ZERO)
        ),
    )

    def _qe(self, ce, temperature):
        return self.k1 * ce
