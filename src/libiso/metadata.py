"""
Type level information about the isotherm models.

- `IsothermIdentity`: name and numeric tag of a model type.
- `MetadataRegistry`: per type table of parameter descriptors, built on first
  use and read-only afterwards.
- The catalog of concrete models (`register_isotherm`, `get_isotherm`).
"""

import logging
import threading
from enum import IntEnum
from typing import Iterator

from pydantic import BaseModel, ConfigDict

from libiso.excepts import ParameterOutOfRange

logger = logging.getLogger(__name__)


class IsothermType(IntEnum):
    HENRY = 1
    LANGMUIR = 10
    FREUNDLICH = 11
    TEMKIN = 12
    DUBININ_RADUSHKEVICH = 13
    HARKIN_JURA = 14
    JOVANOVIC = 15
    HALSEY = 16
    ELOVICH = 17
    SIPS = 30
    TOTH = 31
    HILL = 32
    HILL_DE_BOER = 33
    FOWLER_GUGGENHEIM = 34
    KISELEV = 35
    KHAN = 36
    JOSSENS = 37
    KOBLE_CORRIGAN = 38
    HOLL_KRICH = 39
    LANGMUIR_FREUNDLICH = 40
    BROUERS_SOTOLONGO = 41
    BRUNAUER_EMMETT_TELLER = 42
    MACMILLAN_TELLER = 43
    RADKE_PRAUSNITZ_I = 44
    RADKE_PRAUSNITZ_III = 45
    REDLICH_PETERSON = 46
    UNILAN = 47
    VALENZUELA_MYERS = 48
    VIETH_SLADEK = 49
    FRITZ_SCHLUNDER_III = 50
    FRITZ_SCHLUNDER_IV = 60
    MARCZEWSKI_JARONIEC = 61
    BAUDU = 62
    WEBER_VAN_VLIET = 63
    FRITZ_SCHLUNDER_V = 80


class IsothermIdentity(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    tag: IsothermType


class ParameterDescriptor(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    description: str


class _ParameterInfo:
    """Restartable view over the (name, description) pairs of a model type."""

    __slots__ = ("_table",)

    def __init__(self, table: tuple[ParameterDescriptor, ...]):
        self._table = table

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return ((d.name, d.description) for d in self._table)

    def __len__(self) -> int:
        return len(self._table)


class MetadataRegistry:
    """Parameter descriptors of every model type.

    The table of a type is assembled the first time it is requested and never
    changes afterwards. The first build is guarded by a lock, later reads are
    lock free.
    """

    def __init__(self):
        self._tables: dict[type, tuple[ParameterDescriptor, ...]] = {}
        self._lock = threading.Lock()

    def descriptors(self, model_type: type) -> tuple[ParameterDescriptor, ...]:
        table = self._tables.get(model_type)
        if table is not None:
            return table
        with self._lock:
            table = self._tables.get(model_type)
            if table is None:
                table = self._build(model_type)
                self._tables[model_type] = table
        return table

    def describe(self, model_type: type, index: int) -> ParameterDescriptor:
        table = self.descriptors(model_type)
        if (
            isinstance(index, bool)
            or not isinstance(index, int)
            or not 0 <= index < len(table)
        ):
            raise ParameterOutOfRange(model_type.identity.name, index, len(table))
        return table[index]

    def iter_parameters(self, model_type: type) -> _ParameterInfo:
        return _ParameterInfo(self.descriptors(model_type))

    def __contains__(self, model_type: type) -> bool:
        return model_type in self._tables

    @staticmethod
    def _build(model_type: type) -> tuple[ParameterDescriptor, ...]:
        specs = model_type.parameter_specs
        names = [spec.name for spec in specs]
        if len(set(names)) != len(names):
            raise ValueError(f"{model_type.__name__} declares duplicated parameters")
        logger.debug("building parameter table of %s", model_type.__name__)
        return tuple(
            ParameterDescriptor(name=spec.name, description=spec.description)
            for spec in specs
        )


metadata_registry = MetadataRegistry()

_CATALOG: dict[str, type] = {}


def register_isotherm(cls: type) -> type:
    """Class decorator adding a concrete model to the catalog."""
    name = cls.identity.name
    if _CATALOG.get(name, cls) is not cls:
        raise ValueError(f"an isotherm named {name!r} is already registered")
    _CATALOG[name] = cls
    return cls


def get_isotherm(name: str | IsothermType) -> type:
    """Retrieve a model class by identity name or type tag."""
    if isinstance(name, IsothermType):
        for cls in _CATALOG.values():
            if cls.identity.tag is name:
                return cls
    elif name in _CATALOG:
        return _CATALOG[name]
    raise KeyError(f"unknown isotherm {name!r}")


def available_isotherms() -> tuple[str, ...]:
    return tuple(sorted(_CATALOG))
