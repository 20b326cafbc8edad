import json

import numpy as np


class NumpyEncoder(json.JSONEncoder):
    """Custom encoder for numpy data types"""

    def default(self, obj):
        if isinstance(obj, np.integer):
            return int(obj)

        elif isinstance(obj, np.floating):
            return float(obj)

        elif isinstance(obj, (np.ndarray,)):
            return obj.tolist()

        elif isinstance(obj, (np.bool_)):
            return bool(obj)

        return json.JSONEncoder.default(self, obj)


def qe_curve(model, concentration, temperature=0.0):
    r"""
    Evaluate an isotherm over a range of equilibrium concentrations.

    $$
    q_{e,i} = f(C_{e,i}, T)
    $$

    Parameters
    ----------
    model : Isotherm
        The isotherm to evaluate.
    concentration : array_like
        One dimensional sequence of equilibrium concentrations, none of them
        negative.
    temperature : float, optional
        Absolute temperature, used only by the models depending on it.

    Returns
    -------
    numpy.ndarray
        The quantity adsorbed at each concentration, with the same shape as
        **concentration**.

    Raises
    ------
    ValueError
        If **concentration** is not one dimensional.
    """
    concentration = np.asarray(concentration, dtype=np.float64)
    if concentration.ndim != 1:
        raise ValueError("concentration must be a one dimensional array")

    return np.fromiter(
        (model.qe(c, temperature) for c in concentration),
        dtype=np.float64,
        count=concentration.size,
    )
