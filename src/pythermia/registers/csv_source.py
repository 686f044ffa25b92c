"""Tabular register description → catalog module.

The controller's registers are maintained as a CSV table, one row per
register::

    name,type,address,defacto,scale,mega,inverter,system,subsystem,description

- ``type`` is one of the four RegisterKind tokens.
- ``mega`` / ``inverter`` are ``1`` when the model variant exposes the
  register.
- ``description`` is the last field and may itself contain commas; any
  fields past ``subsystem`` are joined back together.

Blank lines and ``#`` comments are ignored, as is the first line starting
with ``name,``.  Malformed rows and unknown kinds are skipped with a warning
so one bad row does not block regeneration.

The generated module is what :mod:`pythermia.registers.thermia` contains;
this layer never reads the CSV at runtime.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import UTC, datetime

from pythermia.exceptions import CatalogError
from pythermia.registers.definitions import (
    ALL_MODELS,
    INVERTER_ONLY,
    MEGA_ONLY,
    HeatpumpModel,
    RegisterDefinition,
    RegisterKind,
)

_LOGGER = logging.getLogger(__name__)

MIN_FIELDS = 10

_MODEL_SET_NAMES: dict[frozenset[HeatpumpModel], str] = {
    ALL_MODELS: "ALL_MODELS",
    MEGA_ONLY: "MEGA_ONLY",
    INVERTER_ONLY: "INVERTER_ONLY",
    frozenset(): "frozenset()",
}


def split_csv_line(line: str) -> list[str]:
    """Split one CSV line on commas outside double quotes.

    Quote characters toggle quoting and are dropped from the field.
    """
    fields: list[str] = []
    current: list[str] = []
    in_quotes = False
    for char in line:
        if char == '"':
            in_quotes = not in_quotes
        elif char == "," and not in_quotes:
            fields.append("".join(current))
            current = []
        else:
            current.append(char)
    fields.append("".join(current))
    return fields


def _parse_int(value: str, field: str, line_no: int) -> int:
    try:
        return int(value.strip())
    except ValueError as err:
        raise CatalogError(f"Line {line_no}: invalid {field} '{value}'") from err


def _parse_models(mega: str, inverter: str) -> frozenset[HeatpumpModel]:
    models: set[HeatpumpModel] = set()
    if mega.strip() == "1":
        models.add(HeatpumpModel.MEGA)
    if inverter.strip() == "1":
        models.add(HeatpumpModel.INVERTER)
    return frozenset(models)


def parse_register_csv(text: str) -> tuple[RegisterDefinition, ...]:
    """Parse the tabular register description.

    Args:
        text: Full CSV file content

    Returns:
        Register definitions in file order

    Raises:
        CatalogError: If a numeric field is not an integer
    """
    definitions: list[RegisterDefinition] = []
    header_skipped = False

    for line_no, line in enumerate(text.splitlines(), start=1):
        trimmed = line.strip()
        if not trimmed or trimmed.startswith("#"):
            continue
        if not header_skipped and trimmed.startswith("name,"):
            header_skipped = True
            continue

        fields = split_csv_line(trimmed)
        if len(fields) < MIN_FIELDS:
            _LOGGER.warning("Skipping malformed line %d: %s", line_no, trimmed)
            continue

        name, kind_token, address, default, scale, mega, inverter, system, subsystem = fields[:9]
        try:
            kind = RegisterKind(kind_token.strip())
        except ValueError:
            _LOGGER.warning(
                "Unknown type '%s' for register '%s' on line %d", kind_token, name, line_no
            )
            continue

        definitions.append(
            RegisterDefinition(
                name=name.strip(),
                kind=kind,
                address=_parse_int(address, "address", line_no),
                default_value=_parse_int(default, "default", line_no),
                scale=_parse_int(scale, "scale", line_no),
                models=_parse_models(mega, inverter),
                system=system.strip(),
                subsystem=subsystem.strip(),
                description=",".join(fields[9:]).strip(),
            )
        )

    return tuple(definitions)


def _quote(text: str) -> str:
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def _models_expr(models: frozenset[HeatpumpModel]) -> str:
    return _MODEL_SET_NAMES[models]


def render_catalog_module(
    definitions: Iterable[RegisterDefinition],
    *,
    source: str = "",
    generated_at: datetime | None = None,
) -> str:
    """Render the Python source of a generated catalog module.

    Args:
        definitions: Register definitions to emit, in order
        source: Name of the CSV file, recorded in the module docstring
        generated_at: Timestamp for the header (defaults to now, UTC)

    Returns:
        Module source defining ``THERMIA_REGISTERS``
    """
    stamp = (generated_at or datetime.now(UTC)).strftime("%Y-%m-%dT%H:%M:%SZ")
    origin = f" from {source}" if source else ""
    lines = [
        '"""Thermia heat pump register catalog.',
        "",
        f"Auto-generated{origin} by thermia-registers-codegen - do not edit manually.",
        f"Generated: {stamp}",
        '"""',
        "",
        "from __future__ import annotations",
        "",
        "from pythermia.registers.definitions import (",
        "    ALL_MODELS,",
        "    INVERTER_ONLY,",
        "    MEGA_ONLY,",
        "    RegisterDefinition,",
        "    RegisterKind,",
        ")",
        "",
        "THERMIA_REGISTERS: tuple[RegisterDefinition, ...] = (",
    ]
    for reg in definitions:
        lines.extend(
            [
                "    RegisterDefinition(",
                f"        name={_quote(reg.name)},",
                f"        kind=RegisterKind.{reg.kind.name},",
                f"        address={reg.address},",
                f"        default_value={reg.default_value},",
                f"        scale={int(reg.scale)},",
                f"        models={_models_expr(reg.models)},",
                f"        system={_quote(reg.system)},",
                f"        subsystem={_quote(reg.subsystem)},",
                f"        description={_quote(reg.description)},",
                "    ),",
            ]
        )
    lines.extend([")", "", '__all__ = ["THERMIA_REGISTERS"]', ""])
    return "\n".join(lines)


__all__ = [
    "MIN_FIELDS",
    "parse_register_csv",
    "render_catalog_module",
    "split_csv_line",
]
