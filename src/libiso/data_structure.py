import json
from typing import Any, Dict, Literal

import numpy as np
from pydantic import BaseModel, ConfigDict, model_validator
from pydantic_numpy.typing import Np1DArrayFp64

from .metadata import get_isotherm
from .utils import NumpyEncoder, qe_curve


class IsothermRecord(BaseModel):
    """Serializable definition of an isotherm: model name and named values.

    ``{"model": "Sips", "parameters": {"qmax": 1.0, "k1": 2.0, "k2": 3.0}}``
    """

    model_config = ConfigDict(frozen=True)

    model: str
    parameters: Dict[str, float]
    constants: Dict[str, float] = {}

    @model_validator(mode="after")
    def _check_names(self) -> "IsothermRecord":
        try:
            cls = get_isotherm(self.model)
        except KeyError as exc:
            raise ValueError(exc.args[0]) from exc

        expected = cls.parameter_names()
        if set(self.parameters) != set(expected):
            raise ValueError(
                f"{self.model} expects parameters {list(expected)}, "
                f"got {list(self.parameters)}"
            )
        allowed = {spec.name for spec in cls.constant_specs}
        unknown = set(self.constants) - allowed
        if unknown:
            raise ValueError(f"{self.model} has no constants {sorted(unknown)}")
        return self

    def build(self):
        """Instantiate the model, validating every value."""
        cls = get_isotherm(self.model)
        values = [self.parameters[name] for name in cls.parameter_names()]
        return cls(*values, **self.constants)

    @classmethod
    def from_isotherm(cls, model) -> "IsothermRecord":
        return model.to_record()

    @classmethod
    def load_from_json(cls, file_path: str) -> "IsothermRecord":
        with open(file_path, "r") as file:
            data = json.load(file)
        return cls.model_validate(data)


class IsothermCurve(BaseModel):
    """A model sampled at a set of equilibrium concentrations."""

    model: IsothermRecord
    temperature: float = 0.0
    concentration: Np1DArrayFp64
    qe: Np1DArrayFp64

    @model_validator(mode="after")
    def _check_shapes(self) -> "IsothermCurve":
        if self.concentration.shape != self.qe.shape:
            raise ValueError("concentration and qe must have the same length")
        return self

    @classmethod
    def from_isotherm(
        cls, model, concentration, temperature: float = 0.0
    ) -> "IsothermCurve":
        concentration = np.asarray(concentration, dtype=np.float64)
        return cls(
            model=model.to_record(),
            temperature=temperature,
            concentration=concentration,
            qe=qe_curve(model, concentration, temperature),
        )

    def build_model(self):
        return self.model.build()

    def to_json(self, format: Literal["dict", "json"] = "json") -> Dict[str, Any] | str:
        data = {
            "model": self.model.model_dump(),
            "temperature": self.temperature,
            "concentration": self.concentration,
            "qe": self.qe,
        }
        if format == "dict":
            return data
        return json.dumps(data, cls=NumpyEncoder)

    @classmethod
    def load_from_json(cls, data: str | dict) -> "IsothermCurve":
        if isinstance(data, str):
            with open(data, "r") as file:
                data = json.load(file)
        return cls(
            model=data["model"],
            temperature=data.get("temperature", 0.0),
            concentration=np.array(data["concentration"], dtype=np.float64),
            qe=np.array(data["qe"], dtype=np.float64),
        )
