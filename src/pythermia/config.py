"""Session configuration.

This module provides the SessionConfig dataclass for configuring a
controller session in a uniform way, supporting validation and
serialization to/from dictionaries and the process environment.

Example:
    config = SessionConfig(host="192.168.0.106", model=HeatpumpModel.MEGA)
    config.validate()

    # Serialize to dict for storage
    data = config.to_dict()

    # Restore from dict
    restored = SessionConfig.from_dict(data)

    # Or from THERMIA_HOST / THERMIA_MODEL / ... environment variables
    config = SessionConfig.from_env()
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from pythermia.exceptions import ConfigurationError
from pythermia.registers.definitions import HeatpumpModel

DEFAULT_PORT = 502
DEFAULT_UNIT_ID = 1
DEFAULT_TIMEOUT = 3.0


@dataclass
class SessionConfig:
    """Configuration for a single controller connection.

    Attributes:
        host: IP address or hostname of the controller
        model: Controller model variant (Mega or Inverter)
        port: Modbus TCP port (default 502)
        unit_id: Modbus unit ID (the controller is a single node, default 1)
        timeout: Transport timeout in seconds (default 3.0)
    """

    host: str
    model: HeatpumpModel
    port: int = DEFAULT_PORT
    unit_id: int = DEFAULT_UNIT_ID
    timeout: float = DEFAULT_TIMEOUT

    def validate(self) -> None:
        """Validate configuration completeness.

        Raises:
            ConfigurationError: If configuration is invalid
        """
        if not self.host:
            raise ConfigurationError("host is required")
        if not isinstance(self.model, HeatpumpModel):
            raise ConfigurationError(f"model must be a HeatpumpModel, got {self.model!r}")
        if not 1 <= self.port <= 65535:
            raise ConfigurationError(f"port must be between 1 and 65535, got {self.port}")
        if not 1 <= self.unit_id <= 247:
            raise ConfigurationError(f"unit_id must be between 1 and 247, got {self.unit_id}")
        if self.timeout <= 0:
            raise ConfigurationError(f"timeout must be positive, got {self.timeout}")

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary for serialization."""
        return {
            "host": self.host,
            "model": self.model.value,
            "port": self.port,
            "unit_id": self.unit_id,
            "timeout": self.timeout,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> SessionConfig:
        """Create configuration from dictionary.

        Args:
            data: Dictionary with configuration values (from to_dict())

        Returns:
            SessionConfig instance with values from dictionary

        Raises:
            ConfigurationError: If the model token is unknown
        """
        return cls(
            host=data.get("host", ""),
            model=HeatpumpModel.from_token(data.get("model", HeatpumpModel.MEGA.value)),
            port=int(data.get("port", DEFAULT_PORT)),
            unit_id=int(data.get("unit_id", DEFAULT_UNIT_ID)),
            timeout=float(data.get("timeout", DEFAULT_TIMEOUT)),
        )

    @classmethod
    def from_env(
        cls,
        prefix: str = "THERMIA_",
        environ: Mapping[str, str] | None = None,
    ) -> SessionConfig:
        """Create configuration from environment variables.

        Reads ``{prefix}HOST``, ``{prefix}MODEL``, ``{prefix}PORT``,
        ``{prefix}UNIT_ID`` and ``{prefix}TIMEOUT``.

        Raises:
            ConfigurationError: If a numeric variable is not a number or
                the model token is unknown
        """
        env = os.environ if environ is None else environ
        data: dict[str, Any] = {}
        for key in ("host", "model", "port", "unit_id", "timeout"):
            value = env.get(f"{prefix}{key.upper()}")
            if value is not None:
                data[key] = value
        try:
            return cls.from_dict(data)
        except ConfigurationError:
            raise
        except ValueError as err:
            raise ConfigurationError(f"Invalid {prefix}* environment: {err}") from err


__all__ = ["DEFAULT_PORT", "DEFAULT_TIMEOUT", "DEFAULT_UNIT_ID", "SessionConfig"]
