"""Pytest configuration and fixtures for pythermia tests."""

from __future__ import annotations

from collections.abc import Callable, Generator
from typing import Any
from unittest.mock import patch

import pytest

from pythermia.registers.catalog import RegisterCatalog
from pythermia.registers.definitions import (
    ALL_MODELS,
    INVERTER_ONLY,
    MEGA_ONLY,
    HeatpumpModel,
    RegisterDefinition,
    RegisterKind,
)
from pythermia.session import HeatpumpSession


class FakeResponse:
    """Minimal stand-in for a pymodbus response PDU."""

    def __init__(
        self,
        bits: list[bool] | None = None,
        registers: list[int] | None = None,
        error: bool = False,
    ) -> None:
        self.bits = bits or []
        self.registers = registers or []
        self._error = error

    def isError(self) -> bool:  # noqa: N802 - pymodbus API
        return self._error

    def __str__(self) -> str:
        return "ExceptionResponse(dev_id=1, exception_code=2)" if self._error else "OK"


class FakeModbusClient:
    """In-memory Modbus TCP device with the ModbusTcpClient call signatures.

    Register tables are plain dicts keyed by address; unknown addresses read
    as zero.  Every request is recorded in ``requests`` as
    ``(function, address)`` so tests can assert on wire traffic.
    """

    def __init__(self, host: str = "", port: int = 502, **kwargs: Any) -> None:
        self.host = host
        self.port = port
        self.kwargs = kwargs
        self.connect_result = True
        self.connected = False
        self.close_calls = 0
        self.coils: dict[int, bool] = {}
        self.discrete_inputs: dict[int, bool] = {}
        self.holding_registers: dict[int, int] = {}
        self.input_registers: dict[int, int] = {}
        self.error_addresses: set[int] = set()
        self.requests: list[tuple[str, int]] = []

    def connect(self) -> bool:
        self.connected = self.connect_result
        return self.connect_result

    def close(self) -> None:
        self.connected = False
        self.close_calls += 1

    def _respond(self, function: str, address: int, **payload: Any) -> FakeResponse:
        self.requests.append((function, address))
        if address in self.error_addresses:
            return FakeResponse(error=True)
        return FakeResponse(**payload)

    def read_coils(self, address: int, *, count: int = 1, device_id: int = 1) -> FakeResponse:
        bits = [self.coils.get(address, False)] + [False] * 7
        return self._respond("read_coils", address, bits=bits)

    def read_discrete_inputs(
        self, address: int, *, count: int = 1, device_id: int = 1
    ) -> FakeResponse:
        bits = [self.discrete_inputs.get(address, False)] + [False] * 7
        return self._respond("read_discrete_inputs", address, bits=bits)

    def read_holding_registers(
        self, address: int, *, count: int = 1, device_id: int = 1
    ) -> FakeResponse:
        value = self.holding_registers.get(address, 0)
        return self._respond("read_holding_registers", address, registers=[value])

    def read_input_registers(
        self, address: int, *, count: int = 1, device_id: int = 1
    ) -> FakeResponse:
        value = self.input_registers.get(address, 0)
        return self._respond("read_input_registers", address, registers=[value])

    def write_coil(self, address: int, value: bool, *, device_id: int = 1) -> FakeResponse:
        response = self._respond("write_coil", address)
        if not response.isError():
            self.coils[address] = bool(value)
        return response

    def write_register(self, address: int, value: int, *, device_id: int = 1) -> FakeResponse:
        assert 0 <= value <= 0xFFFF, "register values on the wire are unsigned 16-bit"
        response = self._respond("write_register", address)
        if not response.isError():
            self.holding_registers[address] = value
        return response


@pytest.fixture
def fake_client() -> Generator[FakeModbusClient, None, None]:
    """Patch ModbusTcpClient so every session talks to one fake device."""
    client = FakeModbusClient()

    def factory(host: str = "", port: int = 502, **kwargs: Any) -> FakeModbusClient:
        client.host = host
        client.port = port
        client.kwargs = kwargs
        return client

    with patch("pythermia.session.ModbusTcpClient", side_effect=factory):
        yield client


@pytest.fixture
def open_session(
    fake_client: FakeModbusClient,
) -> Generator[Callable[[HeatpumpModel], HeatpumpSession], None, None]:
    """Factory fixture returning open sessions against the fake device."""
    sessions: list[HeatpumpSession] = []

    def _open(model: HeatpumpModel = HeatpumpModel.MEGA) -> HeatpumpSession:
        session = HeatpumpSession("192.168.0.106", model=model)
        session.open()
        sessions.append(session)
        return session

    yield _open

    for session in sessions:
        session.close()


SAMPLE_REGISTERS: tuple[RegisterDefinition, ...] = (
    RegisterDefinition(
        name="valueHeatpumpBrineInTemperature",
        kind=RegisterKind.HOLDING_REGISTER,
        address=100,
        scale=10,
        models=ALL_MODELS,
        system="Heatpump",
        subsystem="Sensors",
        description="Brine in temperature",
    ),
    RegisterDefinition(
        name="enableHeatpumpResetAllAlarms",
        kind=RegisterKind.COIL_STATUS,
        address=50,
        models=MEGA_ONLY,
        system="Heatpump",
        subsystem="Alarms",
        description="Reset all active alarms",
    ),
    RegisterDefinition(
        name="valueHeatpumpOutdoorTemperature",
        kind=RegisterKind.INPUT_REGISTER,
        address=13,
        scale=100,
        system="Heatpump",
        subsystem="Sensors",
    ),
    RegisterDefinition(
        name="alarmHeatpumpBrineInSensor",
        kind=RegisterKind.INPUT_STATUS,
        address=20,
        system="Heatpump",
        subsystem="Alarms",
    ),
    RegisterDefinition(
        name="valueHeatpumpCompressorSpeedRpm",
        kind=RegisterKind.INPUT_REGISTER,
        address=5,
        models=INVERTER_ONLY,
        system="Heatpump",
        subsystem="Compressor",
    ),
    RegisterDefinition(
        name="enableHeatpumpSmartGrid",
        kind=RegisterKind.COIL_STATUS,
        address=58,
        models=INVERTER_ONLY,
        system="Heatpump",
        subsystem="Smart grid",
    ),
)


@pytest.fixture
def sample_catalog() -> RegisterCatalog:
    """Small catalog covering every register kind and model set."""
    return RegisterCatalog(SAMPLE_REGISTERS)
