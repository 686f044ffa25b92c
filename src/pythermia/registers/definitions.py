"""Register definition types shared by the catalog, the generator and the accessor.

A RegisterDefinition carries the identity chain of one controller register:
  symbolic name → register kind → Modbus address → scale → model variants

The register kind fixes the Modbus function used on the wire:

  CoilStatus       01 read coils / 05 write single coil
  InputStatus      02 read discrete inputs (read-only)
  InputRegister    04 read input registers (read-only)
  HoldingRegister  03 read holding registers / 06 write single register

Operations accept a *set* of kinds (e.g. read_int accepts both input and
holding registers), so kind sets below replace the bitmasks of the original
controller documentation while keeping intersection semantics.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pythermia.exceptions import ConfigurationError


class RegisterKind(str, Enum):
    """Modbus register kind.  Values are the tokens used in the CSV source."""

    COIL_STATUS = "CoilStatus"
    INPUT_STATUS = "InputStatus"
    INPUT_REGISTER = "InputRegister"
    HOLDING_REGISTER = "HoldingRegister"


class HeatpumpModel(str, Enum):
    """Controller hardware family; decides which registers physically exist."""

    MEGA = "mega"
    INVERTER = "inverter"

    @classmethod
    def from_token(cls, token: str) -> HeatpumpModel:
        """Parse a model token as given on the command line or in config.

        Only the exact lowercase tokens are recognised.

        Raises:
            ConfigurationError: If the token is not 'mega' or 'inverter'
        """
        try:
            return cls(token)
        except ValueError as err:
            valid = ", ".join(f"'{m.value}'" for m in cls)
            raise ConfigurationError(f"Unknown model '{token}', must be one of {valid}") from err


class ScaleFactor(int, Enum):
    """Divisor applied to raw register value for display."""

    NONE = 1
    DIV_10 = 10
    DIV_100 = 100


# ---------------------------------------------------------------------------
# Kind sets accepted by the register operations
# ---------------------------------------------------------------------------
BIT_KINDS: frozenset[RegisterKind] = frozenset(
    {RegisterKind.COIL_STATUS, RegisterKind.INPUT_STATUS}
)
INT_KINDS: frozenset[RegisterKind] = frozenset(
    {RegisterKind.INPUT_REGISTER, RegisterKind.HOLDING_REGISTER}
)
WRITABLE_BIT_KINDS: frozenset[RegisterKind] = frozenset({RegisterKind.COIL_STATUS})
WRITABLE_INT_KINDS: frozenset[RegisterKind] = frozenset({RegisterKind.HOLDING_REGISTER})
WRITABLE_KINDS: frozenset[RegisterKind] = WRITABLE_BIT_KINDS | WRITABLE_INT_KINDS
ALL_KINDS: frozenset[RegisterKind] = frozenset(RegisterKind)

# ---------------------------------------------------------------------------
# Model sets for the `models` field on RegisterDefinition
# ---------------------------------------------------------------------------
ALL_MODELS: frozenset[HeatpumpModel] = frozenset(HeatpumpModel)
MEGA_ONLY: frozenset[HeatpumpModel] = frozenset({HeatpumpModel.MEGA})
INVERTER_ONLY: frozenset[HeatpumpModel] = frozenset({HeatpumpModel.INVERTER})


@dataclass(frozen=True)
class RegisterDefinition:
    """Single register definition, the atomic unit of the catalog.

    Attributes:
        name: Stable symbolic name, unique within a catalog.
        kind: Register kind; selects the Modbus function code.
        address: Modbus register address (0-65535).
        default_value: Nominal/default raw value from the controller
            documentation.  Informational only.
        scale: Divisor converting the raw value into display units.
            Never applied on the wire.
        models: Controller variants that expose this register.
        system: Top-level classification (e.g. "Heatpump", "Heating").
        subsystem: Second-level classification.
        description: Human-readable description.
    """

    name: str
    kind: RegisterKind
    address: int
    default_value: int = 0
    scale: int = ScaleFactor.NONE
    models: frozenset[HeatpumpModel] = ALL_MODELS
    system: str = ""
    subsystem: str = ""
    description: str = ""

    @property
    def is_bit(self) -> bool:
        """True for coils and discrete inputs."""
        return self.kind in BIT_KINDS

    @property
    def is_writable(self) -> bool:
        """True for coils and holding registers."""
        return self.kind in WRITABLE_KINDS


__all__ = [
    "ALL_KINDS",
    "ALL_MODELS",
    "BIT_KINDS",
    "INT_KINDS",
    "INVERTER_ONLY",
    "MEGA_ONLY",
    "WRITABLE_BIT_KINDS",
    "WRITABLE_INT_KINDS",
    "WRITABLE_KINDS",
    "HeatpumpModel",
    "RegisterDefinition",
    "RegisterKind",
    "ScaleFactor",
]
