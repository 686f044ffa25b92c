"""Immutable register catalog with name lookup.

The catalog indexes definitions by name once at construction.  Lookups are
an exact name match followed by a kind filter, so one operation can accept
several kinds (any readable int register, input or holding) while a
write operation can exclude read-only kinds entirely.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from types import MappingProxyType

from pythermia.exceptions import CatalogError
from pythermia.registers.definitions import HeatpumpModel, RegisterDefinition, RegisterKind
from pythermia.registers.thermia import THERMIA_REGISTERS

_MAX_ADDRESS = 0xFFFF


def is_supported_by(definition: RegisterDefinition, model: HeatpumpModel) -> bool:
    """Return True if the register exists on the given model variant."""
    return model in definition.models


class RegisterCatalog:
    """Read-only table of register definitions indexed by name.

    Example:
        catalog = RegisterCatalog(THERMIA_REGISTERS)
        reg = catalog.lookup("valueHeatpumpBrineInTemperature", INT_KINDS)
        if reg is not None and catalog.is_supported_by(reg, HeatpumpModel.MEGA):
            ...
    """

    def __init__(self, definitions: Iterable[RegisterDefinition]) -> None:
        """Build the name index.

        Args:
            definitions: Register definitions; names must be unique

        Raises:
            CatalogError: On duplicate names, out-of-range addresses or
                scales below 1
        """
        index: dict[str, RegisterDefinition] = {}
        for definition in definitions:
            if definition.name in index:
                existing = index[definition.name]
                raise CatalogError(
                    f"Duplicate register name '{definition.name}' "
                    f"({existing.kind.value} at {existing.address} and "
                    f"{definition.kind.value} at {definition.address})"
                )
            if not 0 <= definition.address <= _MAX_ADDRESS:
                raise CatalogError(
                    f"Register '{definition.name}' address {definition.address} "
                    "is outside the 16-bit range"
                )
            if definition.scale < 1:
                raise CatalogError(
                    f"Register '{definition.name}' has invalid scale {int(definition.scale)}"
                )
            index[definition.name] = definition
        self._by_name = MappingProxyType(index)

    def __len__(self) -> int:
        return len(self._by_name)

    def __iter__(self) -> Iterator[RegisterDefinition]:
        return iter(self._by_name.values())

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def get(self, name: str) -> RegisterDefinition | None:
        """Return the definition for a name regardless of kind."""
        return self._by_name.get(name)

    def lookup(self, name: str, kinds: Iterable[RegisterKind]) -> RegisterDefinition | None:
        """Resolve a name under a set of acceptable kinds.

        Args:
            name: Exact register name
            kinds: Register kinds the caller accepts

        Returns:
            The matching definition, or None if the name is unknown or its
            kind is not in ``kinds``
        """
        definition = self._by_name.get(name)
        if definition is None or definition.kind not in frozenset(kinds):
            return None
        return definition

    @staticmethod
    def is_supported_by(definition: RegisterDefinition, model: HeatpumpModel) -> bool:
        """Return True if the register exists on the given model variant."""
        return is_supported_by(definition, model)

    def registers_for_model(self, model: HeatpumpModel) -> tuple[RegisterDefinition, ...]:
        """Return only registers supported by the given model."""
        return tuple(r for r in self if model in r.models)

    def by_system(self) -> dict[str, tuple[RegisterDefinition, ...]]:
        """Group definitions by their system classification."""
        groups: dict[str, tuple[RegisterDefinition, ...]] = {}
        for reg in self:
            groups[reg.system] = (*groups.get(reg.system, ()), reg)
        return groups


THERMIA_CATALOG = RegisterCatalog(THERMIA_REGISTERS)

__all__ = ["THERMIA_CATALOG", "RegisterCatalog", "is_supported_by"]
