"""Symbolic register access.

RegisterAccessor turns a register name into the right Modbus request.
Every operation runs the same four steps:

1. resolve   - look the name up in the catalog under the kinds the
               operation accepts (RegisterNotFoundError otherwise)
2. authorize - check the register exists on the session's model
               (UnsupportedModelError otherwise)
3. dispatch  - issue the Modbus primitive for the register's kind
4. interpret - convert the raw wire value (bit → bool, word → int16)

Steps 1 and 2 never touch the wire.  Values are returned raw; see
:mod:`pythermia.scaling` for display conversion.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from .exceptions import RegisterNotFoundError, SessionNotOpenError, UnsupportedModelError
from .registers.catalog import THERMIA_CATALOG, RegisterCatalog
from .registers.definitions import (
    BIT_KINDS,
    INT_KINDS,
    WRITABLE_BIT_KINDS,
    WRITABLE_INT_KINDS,
    RegisterDefinition,
    RegisterKind,
)

if TYPE_CHECKING:
    from .session import HeatpumpSession

_LOGGER = logging.getLogger(__name__)


def to_signed16(value: int) -> int:
    """Reinterpret an unsigned 16-bit word as two's-complement int16."""
    value &= 0xFFFF
    return value - 0x10000 if value & 0x8000 else value


def to_unsigned16(value: int) -> int:
    """Truncate an int to the unsigned 16-bit word sent on the wire."""
    return value & 0xFFFF


class RegisterAccessor:
    """Read and write controller registers by name.

    The accessor holds no per-session state and caches nothing; the session
    is borrowed for the duration of each call.

    Example:
        accessor = RegisterAccessor()
        with HeatpumpSession("192.168.0.106", model=HeatpumpModel.MEGA) as session:
            raw = accessor.read_int(session, "valueHeatpumpBrineInTemperature")
            accessor.write_int(session, "setpointHotWater", 5000)
    """

    def __init__(self, catalog: RegisterCatalog = THERMIA_CATALOG) -> None:
        self._catalog = catalog

    @property
    def catalog(self) -> RegisterCatalog:
        """Get the register catalog."""
        return self._catalog

    def resolve(
        self,
        session: HeatpumpSession,
        name: str,
        kinds: Iterable[RegisterKind],
    ) -> RegisterDefinition:
        """Resolve and authorize a register for a session.

        Raises:
            SessionNotOpenError: If the session is not open
            RegisterNotFoundError: If the name is unknown under ``kinds``
            UnsupportedModelError: If the session's model lacks the register
        """
        if not session.is_open:
            raise SessionNotOpenError("Session is not open")

        kinds = frozenset(kinds)
        definition = self._catalog.lookup(name, kinds)
        if definition is None:
            raise RegisterNotFoundError(name, kinds)
        if not self._catalog.is_supported_by(definition, session.model):
            raise UnsupportedModelError(name, session.model)
        return definition

    def read_bit(self, session: HeatpumpSession, name: str) -> bool:
        """Read a coil or discrete input.

        Raises:
            RegisterNotFoundError: If ``name`` is not a coil or discrete input
            UnsupportedModelError: If the register is unavailable on the model
            TransportReadError: If the Modbus request fails
        """
        reg = self.resolve(session, name, BIT_KINDS)
        _LOGGER.debug("Reading %s (%s %d)", name, reg.kind.value, reg.address)
        if reg.kind is RegisterKind.COIL_STATUS:
            return session.read_coil(reg.address)
        return session.read_discrete_input(reg.address)

    def read_int(self, session: HeatpumpSession, name: str) -> int:
        """Read an input or holding register as a signed 16-bit value.

        Raises:
            RegisterNotFoundError: If ``name`` is not an input or holding register
            UnsupportedModelError: If the register is unavailable on the model
            TransportReadError: If the Modbus request fails
        """
        reg = self.resolve(session, name, INT_KINDS)
        _LOGGER.debug("Reading %s (%s %d)", name, reg.kind.value, reg.address)
        if reg.kind is RegisterKind.INPUT_REGISTER:
            raw = session.read_input_register(reg.address)
        else:
            raw = session.read_holding_register(reg.address)
        return to_signed16(raw)

    def write_bit(self, session: HeatpumpSession, name: str, value: bool) -> None:
        """Write a coil.  Discrete inputs are read-only and never match.

        Raises:
            RegisterNotFoundError: If ``name`` is not a coil
            UnsupportedModelError: If the register is unavailable on the model
            TransportWriteError: If the Modbus request fails
        """
        reg = self.resolve(session, name, WRITABLE_BIT_KINDS)
        _LOGGER.debug("Writing %s (%s %d) = %s", name, reg.kind.value, reg.address, value)
        session.write_coil(reg.address, bool(value))

    def write_int(self, session: HeatpumpSession, name: str, value: int) -> None:
        """Write a holding register.  Input registers are read-only and never match.

        The value is pre-scaled (write 220 for 22.0 on a scale-10 register) and
        truncated to 16 bits, so negative values are sent in two's complement.

        Raises:
            RegisterNotFoundError: If ``name`` is not a holding register
            UnsupportedModelError: If the register is unavailable on the model
            TransportWriteError: If the Modbus request fails
        """
        reg = self.resolve(session, name, WRITABLE_INT_KINDS)
        _LOGGER.debug("Writing %s (%s %d) = %d", name, reg.kind.value, reg.address, value)
        session.write_holding_register(reg.address, to_unsigned16(int(value)))


__all__ = ["RegisterAccessor", "to_signed16", "to_unsigned16"]
