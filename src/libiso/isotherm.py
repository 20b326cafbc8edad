import abc
import logging
import math
from typing import Any, Callable, ClassVar, NamedTuple

from libiso.config import DEFAULT_SOLVER_SETTINGS, NewtonRaphsonSettings
from libiso.data_structure import IsothermRecord
from libiso.excepts import (
    ArithmeticOverflow,
    ErrorKind,
    NotConvergenceException,
    ParameterOutOfRange,
    ValidationError,
)
from libiso.metadata import IsothermIdentity, ParameterDescriptor, metadata_registry
from libiso.parameters import MAX_PARAMETERS, ParameterSet, ParameterSpec
from libiso.solver import newton_raphson

logger = logging.getLogger(__name__)


class _State(NamedTuple):
    values: ParameterSet
    constants: tuple[float, ...]


def _named_property(name: str) -> property:
    def getter(self):
        return self.get(name)

    def setter(self, value):
        self.set(name, value)

    return property(getter, setter, doc=f"Value of ``{name}``.")


class Isotherm(abc.ABC):
    """Base class of every adsorption isotherm.

    A concrete model declares its `identity`, the ordered `parameter_specs`
    (name, description and admissible domain of each parameter), optionally
    keyword-only `constant_specs` with a default value, and implements `_qe`.
    Everything else (validation, accessors, cloning, metadata, inversion) is
    provided here.

    Parameters are validated only when the model is built or changed, so an
    instance always holds values inside the model domain. Changing a
    parameter assembles and validates a full new state and replaces the old
    one only when validation succeeds.
    """

    identity: ClassVar[IsothermIdentity]
    parameter_specs: ClassVar[tuple[ParameterSpec, ...]] = ()
    constant_specs: ClassVar[tuple[ParameterSpec, ...]] = ()
    solver_settings: ClassVar[NewtonRaphsonSettings] = DEFAULT_SOLVER_SETTINGS
    # qe(0) == 0
    through_origin: ClassVar[bool] = True

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        own = [
            spec
            for attr in ("parameter_specs", "constant_specs")
            if attr in cls.__dict__
            for spec in cls.__dict__[attr]
        ]
        if "parameter_specs" in cls.__dict__ and not (
            1 <= len(cls.parameter_specs) <= MAX_PARAMETERS
        ):
            raise TypeError(
                f"{cls.__name__} must declare 1 to {MAX_PARAMETERS} parameters"
            )
        for spec in own:
            if hasattr(Isotherm, spec.name):
                raise TypeError(f"parameter name {spec.name!r} shadows Isotherm API")
            setattr(cls, spec.name, _named_property(spec.name))

    def __init__(self, *values: float, **constants: float):
        self._state = self._validated_state(values, constants)

    # ------ validation ----------

    def _validated_state(self, values, constants) -> _State:
        name = self.identity.name
        if len(values) != len(self.parameter_specs):
            raise TypeError(
                f"{name} takes {len(self.parameter_specs)} parameters "
                f"({len(values)} given)"
            )
        known = {spec.name for spec in self.constant_specs}
        unknown = set(constants) - known
        if unknown:
            raise TypeError(f"{name} got unexpected constants {sorted(unknown)}")

        checked = [
            self._check(spec, value) for spec, value in zip(self.parameter_specs, values)
        ]
        checked_constants = tuple(
            self._check(spec, constants.get(spec.name, spec.default))
            for spec in self.constant_specs
        )
        return _State(ParameterSet(checked), checked_constants)

    def _check(self, spec: ParameterSpec, value) -> float:
        value = float(value)
        kind = spec.rule.violation(value)
        if kind is not None:
            raise ValidationError(
                kind, self.identity.name, f"{spec.name} = {value!r}", value=value
            )
        return value

    # ------ accessors ----------

    def _locate(self, key) -> tuple[bool, int]:
        if isinstance(key, str):
            for i, spec in enumerate(self.parameter_specs):
                if spec.name == key:
                    return False, i
            for i, spec in enumerate(self.constant_specs):
                if spec.name == key:
                    return True, i
        elif not isinstance(key, bool) and isinstance(key, int):
            if 0 <= key < len(self.parameter_specs):
                return False, key
        raise ParameterOutOfRange(self.identity.name, key, len(self.parameter_specs))

    def get(self, key: int | str) -> float:
        """Value of a parameter (by position or name) or of a constant (by name)."""
        is_constant, position = self._locate(key)
        if is_constant:
            return self._state.constants[position]
        return self._state.values[position]

    def set(self, key: int | str, value: float) -> None:
        """Change one parameter or constant.

        The whole model is validated again with the new value. On failure the
        exception propagates and the model keeps its previous values.
        """
        is_constant, position = self._locate(key)
        values = self._state.values
        constants = self.constant_values()
        if is_constant:
            constants[self.constant_specs[position].name] = value
        else:
            values = values.replace(position, value)

        self._state = self._validated_state(tuple(values), constants)
        logger.debug("%s: %r set to %r", self.identity.name, key, value)

    @property
    def parameter_set(self) -> ParameterSet:
        """Copy of the parameters, in declaration order."""
        return self._state.values.copy()

    def values(self) -> tuple[float, ...]:
        return tuple(self._state.values)

    def constant_values(self) -> dict[str, float]:
        return {
            spec.name: value
            for spec, value in zip(self.constant_specs, self._state.constants)
        }

    # ------ type level information ----------

    @classmethod
    def parameter_count(cls) -> int:
        return len(cls.parameter_specs)

    @classmethod
    def parameter_names(cls) -> tuple[str, ...]:
        return tuple(spec.name for spec in cls.parameter_specs)

    @classmethod
    def describe(cls, index: int) -> ParameterDescriptor:
        return metadata_registry.describe(cls, index)

    @classmethod
    def parameter_info(cls):
        """Iterable of (name, description) pairs, in parameter order."""
        return metadata_registry.iter_parameters(cls)

    # ------ evaluation ----------

    def qe(self, ce: float, temperature: float = 0.0) -> float:
        """
        Quantity adsorbed at equilibrium.

        Parameters
        ----------
        ce : float
            Equilibrium concentration, it must not be negative.
        temperature : float
            Absolute temperature. Only the models depending on it use it.

        Returns
        -------
        float
            The quantity adsorbed.

        Raises
        ------
        ValidationError
            If the concentration is negative or an input is outside the
            domain of the model.
        ArithmeticOverflow
            If the concentration is infinite or the result is not finite.
        NotConvergenceException
            If an implicit model cannot solve its equation.
        """
        ce = float(ce)
        if not ce >= 0.0:
            raise ValidationError(
                ErrorKind.BAD_CE_LT_ZERO, self.identity.name, f"Ce = {ce!r}", value=ce
            )
        if math.isinf(ce):
            raise ArithmeticOverflow(self.identity.name, f"Ce = {ce!r}", value=ce)
        try:
            result = float(self._qe(ce, float(temperature)))
        except OverflowError as exc:
            raise ArithmeticOverflow(
                self.identity.name, f"Ce = {ce!r}: {exc}", value=ce
            ) from exc
        # inf / inf gives nan without raising
        if not math.isfinite(result):
            raise ArithmeticOverflow(
                self.identity.name, f"Qe = {result!r} at Ce = {ce!r}", value=ce
            )
        return result

    @abc.abstractmethod
    def _qe(self, ce: float, temperature: float) -> float:
        """Model equation, ``ce`` is already known to be non-negative."""

    def ce(
        self,
        qe: float,
        temperature: float = 0.0,
        *,
        guess: float | None = None,
        settings: NewtonRaphsonSettings | None = None,
    ) -> float:
        """
        Equilibrium concentration giving the quantity adsorbed **qe**.

        The model equation is inverted numerically with Newton-Raphson and a
        finite difference derivative. The search is kept inside
        `concentration_bounds`; without **guess** it starts at 1.0, or inside
        the bounds when 1.0 is not.
        """
        qe = float(qe)
        if not qe >= 0.0:
            raise ValidationError(
                ErrorKind.BAD_QE_LT_ZERO, self.identity.name, f"Qe = {qe!r}", value=qe
            )
        if qe == 0.0 and self.through_origin:
            return 0.0

        bounds = self.concentration_bounds()
        if guess is None:
            lo, hi = bounds
            guess = 1.0
            if not lo < guess < hi:
                guess = 2.0 * lo if math.isinf(hi) else 0.5 * (lo + hi)

        def residual(c):
            return self.qe(c, temperature) - qe

        return self._solve(residual, guess, bounds=bounds, settings=settings)

    def concentration_bounds(self) -> tuple[float, float]:
        """Open interval of the concentrations where `qe` is defined."""
        return 0.0, math.inf

    def _solve(
        self,
        residual: Callable[[float], float],
        x0: float,
        *,
        fprime: Callable[[float], float] | None = None,
        bounds: tuple[float, float] | None = None,
        settings: NewtonRaphsonSettings | None = None,
    ) -> float:
        settings = settings or self.solver_settings
        try:
            return newton_raphson(
                residual,
                x0,
                fprime=fprime,
                bounds=bounds,
                **settings.model_dump(),
            )
        except NotConvergenceException as exc:
            raise exc.for_origin(self.identity.name) from exc

    def _require_temperature(self, temperature: float) -> None:
        if not temperature > 0.0:
            raise ValidationError(
                ErrorKind.BAD_TEMP_LE_ZERO,
                self.identity.name,
                f"T = {temperature!r}",
                value=temperature,
            )

    # ------ copies, comparison, records ----------

    def clone(self) -> "Isotherm":
        """Independent model of the same type with the same values."""
        other = type(self).__new__(type(self))
        other._state = _State(self._state.values.copy(), self._state.constants)
        return other

    def __copy__(self):
        return self.clone()

    def __deepcopy__(self, memo):
        return self.clone()

    def __eq__(self, other):
        if not isinstance(other, Isotherm):
            return NotImplemented
        return type(self) is type(other) and self._state == other._state

    __hash__ = None

    def __repr__(self):
        items = [
            f"{spec.name}={value!r}"
            for spec, value in zip(self.parameter_specs, self._state.values)
        ]
        items += [f"{k}={v!r}" for k, v in self.constant_values().items()]
        return f"{type(self).__name__}({', '.join(items)})"

    def to_record(self) -> IsothermRecord:
        return IsothermRecord(
            model=self.identity.name,
            parameters=dict(zip(self.parameter_names(), self.values())),
            constants=self.constant_values(),
        )

    @classmethod
    def from_record(cls, record: IsothermRecord | dict[str, Any]) -> "Isotherm":
        if not isinstance(record, IsothermRecord):
            record = IsothermRecord.model_validate(record)
        model = record.build()
        if not isinstance(model, cls):
            raise TypeError(f"record describes {record.model}, not {cls.__name__}")
        return model
