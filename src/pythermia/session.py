"""Modbus TCP session with a Thermia heat pump controller.

This module provides the HeatpumpSession class, which owns the single
Modbus TCP connection to one controller together with the controller's
model variant.  It exposes one method per Modbus primitive the register
layer needs; symbolic access by register name lives in
:mod:`pythermia.accessor`.

IMPORTANT: Single-Client Limitation
------------------------------------
The controller accepts ONE Modbus TCP client at a time.  A session performs
no internal locking; if several threads need register access, let one worker
own the session and serialize requests through it.

Failed reads and writes are not retried and never close the session; retry
and reconnection policy belongs to the caller.
"""

from __future__ import annotations

import logging
from types import TracebackType
from typing import TYPE_CHECKING, Any

from pymodbus.client import ModbusTcpClient
from pymodbus.exceptions import ModbusException

from .config import DEFAULT_PORT, DEFAULT_TIMEOUT, DEFAULT_UNIT_ID
from .exceptions import (
    SessionAlreadyOpenError,
    SessionNotOpenError,
    TransportConnectionError,
    TransportReadError,
    TransportWriteError,
)
from .registers.definitions import HeatpumpModel

if TYPE_CHECKING:
    from .config import SessionConfig

_LOGGER = logging.getLogger(__name__)


class HeatpumpSession:
    """Modbus TCP session for one controller.

    Lifecycle: ``Closed --open()--> Open --close()--> Closed``.  A failed
    open leaves the session closed.  ``close()`` may be called any number
    of times.

    Example:
        session = HeatpumpSession("192.168.0.106", model=HeatpumpModel.MEGA)
        session.open()
        try:
            raw = session.read_holding_register(100)
        finally:
            session.close()

        # or
        with HeatpumpSession("192.168.0.106") as session:
            ...
    """

    def __init__(
        self,
        host: str,
        port: int = DEFAULT_PORT,
        model: HeatpumpModel = HeatpumpModel.MEGA,
        *,
        unit_id: int = DEFAULT_UNIT_ID,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """Initialize an unopened session.

        Args:
            host: IP address or hostname of the controller
            port: Modbus TCP port (default 502)
            model: Controller model variant, used for register availability
            unit_id: Modbus unit/slave ID of the controller node (default 1)
            timeout: Transport timeout in seconds
        """
        self._host = host
        self._port = port
        self._model = model
        self._unit_id = unit_id
        self._timeout = timeout
        self._client: ModbusTcpClient | None = None

    @classmethod
    def from_config(cls, config: SessionConfig) -> HeatpumpSession:
        """Create an unopened session from a validated configuration."""
        config.validate()
        return cls(
            config.host,
            config.port,
            config.model,
            unit_id=config.unit_id,
            timeout=config.timeout,
        )

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def host(self) -> str:
        """Get the controller host."""
        return self._host

    @property
    def port(self) -> int:
        """Get the controller port."""
        return self._port

    @property
    def model(self) -> HeatpumpModel:
        """Get the configured model variant."""
        return self._model

    @property
    def unit_id(self) -> int:
        """Get the Modbus unit/slave ID."""
        return self._unit_id

    @property
    def is_open(self) -> bool:
        """True while the transport connection is held."""
        return self._client is not None

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def open(self) -> None:
        """Establish the Modbus TCP connection.

        Raises:
            SessionAlreadyOpenError: If the session is already open; the
                existing connection is left untouched
            TransportConnectionError: If the connection cannot be made
        """
        if self._client is not None:
            raise SessionAlreadyOpenError(
                f"Session to {self._host}:{self._port} is already open"
            )

        client = ModbusTcpClient(
            host=self._host,
            port=self._port,
            timeout=self._timeout,
            retries=0,
        )
        try:
            connected = client.connect()
        except (ModbusException, OSError) as err:
            client.close()
            _LOGGER.error("Failed to connect to %s:%s: %s", self._host, self._port, err)
            raise TransportConnectionError(
                f"Failed to connect to {self._host}:{self._port}: {err}"
            ) from err

        if not connected:
            client.close()
            _LOGGER.error("Failed to connect to %s:%s", self._host, self._port)
            raise TransportConnectionError(
                f"Failed to connect to controller at {self._host}:{self._port}"
            )

        self._client = client
        _LOGGER.info(
            "Connected to %s:%s (unit %s, model: %s)",
            self._host,
            self._port,
            self._unit_id,
            self._model.value,
        )

    def close(self) -> None:
        """Close the connection.  No-op when already closed."""
        if self._client is None:
            return
        self._client.close()
        self._client = None
        _LOGGER.debug("Disconnected from %s:%s", self._host, self._port)

    def __enter__(self) -> HeatpumpSession:
        self.open()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

    def _require_client(self) -> ModbusTcpClient:
        if self._client is None:
            raise SessionNotOpenError("Session is not open")
        return self._client

    # ------------------------------------------------------------------
    # Modbus primitives (one register, one round trip each)
    # ------------------------------------------------------------------

    def _read(self, function: str, address: int, reg_type: str) -> Any:
        client = self._require_client()
        try:
            result = getattr(client, function)(address, count=1, device_id=self._unit_id)
        except (ModbusException, OSError) as err:
            _LOGGER.error("Failed to read %s at %d: %s", reg_type, address, err)
            raise TransportReadError(
                address, f"Failed to read {reg_type} at {address}: {err}"
            ) from err

        if result.isError():
            _LOGGER.error("Modbus error reading %s at %d: %s", reg_type, address, result)
            raise TransportReadError(
                address, f"Modbus read error for {reg_type} at {address}: {result}"
            )
        return result

    def _write(self, function: str, address: int, value: Any, reg_type: str) -> None:
        client = self._require_client()
        try:
            result = getattr(client, function)(address, value, device_id=self._unit_id)
        except (ModbusException, OSError) as err:
            _LOGGER.error("Failed to write %s at %d: %s", reg_type, address, err)
            raise TransportWriteError(
                address, f"Failed to write {reg_type} at {address}: {err}"
            ) from err

        if result.isError():
            _LOGGER.error("Modbus error writing %s at %d: %s", reg_type, address, result)
            raise TransportWriteError(
                address, f"Modbus write error for {reg_type} at {address}: {result}"
            )

    def read_coil(self, address: int) -> bool:
        """Read one coil (function code 0x01)."""
        result = self._read("read_coils", address, "coil")
        return bool(result.bits[0])

    def read_discrete_input(self, address: int) -> bool:
        """Read one discrete input (function code 0x02)."""
        result = self._read("read_discrete_inputs", address, "discrete input")
        return bool(result.bits[0])

    def read_holding_register(self, address: int) -> int:
        """Read one holding register (function code 0x03) as unsigned 16-bit."""
        result = self._read("read_holding_registers", address, "holding register")
        return int(result.registers[0])

    def read_input_register(self, address: int) -> int:
        """Read one input register (function code 0x04) as unsigned 16-bit."""
        result = self._read("read_input_registers", address, "input register")
        return int(result.registers[0])

    def write_coil(self, address: int, value: bool) -> None:
        """Write one coil (function code 0x05)."""
        self._write("write_coil", address, bool(value), "coil")

    def write_holding_register(self, address: int, value: int) -> None:
        """Write one holding register (function code 0x06).

        Args:
            address: Register address
            value: Unsigned 16-bit word (0-65535)
        """
        self._write("write_register", address, value, "holding register")

    def __repr__(self) -> str:
        state = "open" if self.is_open else "closed"
        return f"HeatpumpSession({self._host}:{self._port}, {self._model.value}, {state})"


__all__ = ["HeatpumpSession"]
