"""Symbolic Modbus TCP access to Thermia heat pump controllers.

Usage:
    from pythermia import HeatpumpModel, HeatpumpSession, RegisterAccessor
    from pythermia.scaling import format_value

    accessor = RegisterAccessor()
    with HeatpumpSession("192.168.0.106", model=HeatpumpModel.MEGA) as session:
        raw = accessor.read_int(session, "valueHeatpumpBrineInTemperature")
        print(format_value(raw, 100))

        accessor.write_int(session, "setpointHotWater", 5000)
"""

from __future__ import annotations

from .accessor import RegisterAccessor, to_signed16, to_unsigned16
from .config import SessionConfig
from .exceptions import (
    CatalogError,
    ConfigurationError,
    RegisterError,
    RegisterNotFoundError,
    SessionAlreadyOpenError,
    SessionError,
    SessionNotOpenError,
    ThermiaError,
    TransportConnectionError,
    TransportError,
    TransportReadError,
    TransportWriteError,
    UnsupportedModelError,
)
from .registers import (
    THERMIA_CATALOG,
    HeatpumpModel,
    RegisterCatalog,
    RegisterDefinition,
    RegisterKind,
)
from .session import HeatpumpSession

__version__ = "0.1.0"
__all__ = [
    "HeatpumpSession",
    "RegisterAccessor",
    "SessionConfig",
    "to_signed16",
    "to_unsigned16",
    # Registers
    "THERMIA_CATALOG",
    "HeatpumpModel",
    "RegisterCatalog",
    "RegisterDefinition",
    "RegisterKind",
    # Exceptions
    "CatalogError",
    "ConfigurationError",
    "RegisterError",
    "RegisterNotFoundError",
    "SessionAlreadyOpenError",
    "SessionError",
    "SessionNotOpenError",
    "ThermiaError",
    "TransportConnectionError",
    "TransportError",
    "TransportReadError",
    "TransportWriteError",
    "UnsupportedModelError",
]
