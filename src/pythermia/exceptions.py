"""Exceptions raised by pythermia.

Every failure of a session or register operation is raised as a subclass of
:class:`ThermiaError`, so callers can use a single ``except ThermiaError`` or
branch on the concrete type.  Diagnostic detail (register name, address,
model) is attached as attributes rather than only formatted into the message.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pythermia.registers.definitions import HeatpumpModel, RegisterKind


class ThermiaError(Exception):
    """Base exception for all pythermia errors."""

    pass


class ConfigurationError(ThermiaError, ValueError):
    """Invalid configuration (unknown model token, bad port, ...)."""

    pass


class CatalogError(ThermiaError):
    """Register catalog could not be built or parsed."""

    pass


# ---------------------------------------------------------------------------
# Session lifecycle
# ---------------------------------------------------------------------------


class SessionError(ThermiaError):
    """Base exception for session lifecycle errors."""

    pass


class SessionNotOpenError(SessionError):
    """Operation attempted on a session that is not open."""

    pass


class SessionAlreadyOpenError(SessionError):
    """Open attempted on a session that already holds a connection."""

    pass


# ---------------------------------------------------------------------------
# Register resolution
# ---------------------------------------------------------------------------


class RegisterError(ThermiaError):
    """Base exception for register resolution errors.

    Attributes:
        name: The register name the caller asked for.
    """

    def __init__(self, name: str, message: str) -> None:
        self.name = name
        super().__init__(message)


class RegisterNotFoundError(RegisterError):
    """Name does not resolve to a register of an acceptable kind."""

    def __init__(self, name: str, kinds: Iterable[RegisterKind]) -> None:
        """Initialize with the register name and the kinds that were accepted.

        Args:
            name: Register name that was looked up
            kinds: Register kinds the operation accepts
        """
        self.kinds = frozenset(kinds)
        accepted = ", ".join(sorted(kind.value for kind in self.kinds))
        super().__init__(name, f"Register '{name}' not found (accepted kinds: {accepted})")


class UnsupportedModelError(RegisterError):
    """Register exists but is not exposed by the connected model variant."""

    def __init__(self, name: str, model: HeatpumpModel) -> None:
        """Initialize with the register name and the session's model.

        Args:
            name: Register name that was resolved
            model: Model variant of the session
        """
        self.model = model
        super().__init__(name, f"Register '{name}' is not supported by model '{model.value}'")


# ---------------------------------------------------------------------------
# Transport
# ---------------------------------------------------------------------------


class TransportError(ThermiaError):
    """Base exception for all transport errors."""

    pass


class TransportConnectionError(TransportError):
    """Failed to connect to the controller."""

    pass


class TransportReadError(TransportError):
    """Failed to read data from the controller.

    Attributes:
        address: Register address of the failed request.
    """

    def __init__(self, address: int, message: str) -> None:
        self.address = address
        super().__init__(message)


class TransportWriteError(TransportError):
    """Failed to write data to the controller.

    Attributes:
        address: Register address of the failed request.
    """

    def __init__(self, address: int, message: str) -> None:
        self.address = address
        super().__init__(message)


__all__ = [
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
