"""Thermia controller register catalog.

This package is the single source of truth for register definitions:

- definitions: RegisterDefinition, register kinds, model variants, kind sets
- thermia: generated table of the controller's registers
- catalog: RegisterCatalog index and the process-wide THERMIA_CATALOG
- csv_source: parser/renderer for the tabular register description
"""

from pythermia.registers.catalog import THERMIA_CATALOG, RegisterCatalog, is_supported_by
from pythermia.registers.definitions import (
    ALL_KINDS,
    ALL_MODELS,
    BIT_KINDS,
    INT_KINDS,
    INVERTER_ONLY,
    MEGA_ONLY,
    WRITABLE_BIT_KINDS,
    WRITABLE_INT_KINDS,
    WRITABLE_KINDS,
    HeatpumpModel,
    RegisterDefinition,
    RegisterKind,
    ScaleFactor,
)
from pythermia.registers.thermia import THERMIA_REGISTERS

__all__ = [
    # Types
    "HeatpumpModel",
    "RegisterDefinition",
    "RegisterKind",
    "ScaleFactor",
    # Kind sets
    "ALL_KINDS",
    "BIT_KINDS",
    "INT_KINDS",
    "WRITABLE_BIT_KINDS",
    "WRITABLE_INT_KINDS",
    "WRITABLE_KINDS",
    # Model sets
    "ALL_MODELS",
    "INVERTER_ONLY",
    "MEGA_ONLY",
    # Catalog
    "THERMIA_CATALOG",
    "THERMIA_REGISTERS",
    "RegisterCatalog",
    "is_supported_by",
]
