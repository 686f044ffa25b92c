#!/usr/bin/env python3
"""Register read/write tool for Thermia heat pumps.

Reads and writes controller registers by name over Modbus TCP, for manual
verification of the register catalog against a live controller.

Usage:
    thermia-modbus 192.168.0.106 mega read valueHeatpumpBrineInTemperature
    thermia-modbus 192.168.0.106 mega write setpointHotWater 5000
    thermia-modbus 192.168.0.106 inverter list
"""

from __future__ import annotations

import argparse
import logging
import sys

from pythermia import __version__
from pythermia.accessor import RegisterAccessor
from pythermia.exceptions import ConfigurationError, ThermiaError
from pythermia.registers.definitions import WRITABLE_KINDS, HeatpumpModel
from pythermia.scaling import format_value
from pythermia.session import HeatpumpSession


def _model_arg(token: str) -> HeatpumpModel:
    try:
        return HeatpumpModel.from_token(token)
    except ConfigurationError as err:
        raise argparse.ArgumentTypeError(str(err)) from err


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser."""
    parser = argparse.ArgumentParser(
        prog="thermia-modbus",
        description="Read and write Thermia heat pump registers by name over Modbus TCP.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Models: mega, inverter

Examples:
  thermia-modbus 192.168.0.106 mega read valueHeatpumpBrineInTemperature
  thermia-modbus 192.168.0.106 mega read valueHeatpumpOutdoorTemperature
  thermia-modbus 192.168.0.106 mega write setpointHotWater 5000

Values are raw: write 5000 for 50.00 on a register with scale 100.
""",
    )
    parser.add_argument("address", help="Controller IP address or hostname")
    parser.add_argument("model", type=_model_arg, help="Controller model (mega or inverter)")
    parser.add_argument(
        "--port",
        "-p",
        type=int,
        default=502,
        help="Modbus TCP port (default: %(default)s)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log connection and register activity",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    operations = parser.add_subparsers(dest="operation", required=True)

    read_parser = operations.add_parser("read", help="Read one or more registers")
    read_parser.add_argument("names", nargs="+", metavar="name", help="Register name")

    write_parser = operations.add_parser("write", help="Write a coil or holding register")
    write_parser.add_argument("name", help="Register name")
    write_parser.add_argument("value", type=int, help="Raw value (0/1 for coils)")

    operations.add_parser("list", help="List registers available on the model")

    return parser


def run_read(accessor: RegisterAccessor, session: HeatpumpSession, names: list[str]) -> int:
    """Read each named register and print its value.

    Stops at the first unknown name.  Other failures are reported and
    reading continues.

    Returns:
        Exit status (0 if every read succeeded)
    """
    status = 0
    for name in names:
        reg = accessor.catalog.get(name)
        if reg is None:
            print(f"register: not found '{name}'", file=sys.stderr)
            return 1
        try:
            if reg.is_bit:
                bit = accessor.read_bit(session, name)
                print(f"{name} = {int(bit)} (read)")
            else:
                value = accessor.read_int(session, name)
                if reg.scale > 1:
                    scaled = format_value(value, reg.scale)
                    print(f"{name} = {scaled} (read) (raw = {value})")
                else:
                    print(f"{name} = {value} (read)")
        except ThermiaError as e:
            print(f"register: {e}", file=sys.stderr)
            status = 1
    return status


def run_write(accessor: RegisterAccessor, session: HeatpumpSession, name: str, value: int) -> int:
    """Write a raw value to a coil or holding register.

    Returns:
        Exit status (0 on success)
    """
    reg = accessor.catalog.lookup(name, WRITABLE_KINDS)
    if reg is None:
        print(f"register: not found '{name}'", file=sys.stderr)
        return 1
    try:
        if reg.is_bit:
            accessor.write_bit(session, name, value != 0)
        else:
            accessor.write_int(session, name, value)
    except ThermiaError as e:
        print(f"register: {e}", file=sys.stderr)
        return 1
    print(f"{name} = {value} (write)")
    return 0


def run_list(accessor: RegisterAccessor, model: HeatpumpModel) -> int:
    """Print the registers available on a model."""
    for reg in accessor.catalog.registers_for_model(model):
        scale = f" /{int(reg.scale)}" if reg.scale > 1 else ""
        print(
            f"{reg.name:<45} {reg.kind.value:<16} {reg.address:>5}{scale:<5} {reg.description}",
        )
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    accessor = RegisterAccessor()
    if args.operation == "list":
        return run_list(accessor, args.model)

    session = HeatpumpSession(args.address, args.port, args.model)
    try:
        session.open()
    except ThermiaError as e:
        print(f"modbus: {e}", file=sys.stderr)
        return 1

    try:
        if args.operation == "read":
            return run_read(accessor, session, args.names)
        return run_write(accessor, session, args.name, args.value)
    finally:
        session.close()


if __name__ == "__main__":
    sys.exit(main())
