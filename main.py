# main.py
from __future__ import annotations

import argparse
import string
import sys
from contextlib import ExitStack
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import IO, List, Sequence

from debug import Debug
from machine import Machine
from settings import (
    MachineSettings,
    build_machine,
    load_settings,
    parse_plugboard,
    parse_rotor_list,
    random_settings,
    save_settings,
)

debug = Debug()

# ASCII only: str.upper() can turn one character into two ("ß" -> "SS")
_ASCII_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


# ────────────────────────────────────────────────────────────────────────
#  1. Line loop
# ────────────────────────────────────────────────────────────────────────


def process_lines(machine: Machine, lines: Iterable[str]) -> Iterator[str]:
    """Yield one enciphered line per input line, state carried across lines."""
    for line in lines:
        yield machine.encrypt_text(line.rstrip("\r\n").translate(_ASCII_UPPER))


def process_io(machine: Machine, reader: IO[str], writer: IO[str]) -> None:
    for out in process_lines(machine, reader):
        writer.write(out + "\n")
    writer.flush()


# ────────────────────────────────────────────────────────────────────────
#  2. CLI helpers
# ────────────────────────────────────────────────────────────────────────


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Three-rotor cipher machine. Reads stdin, writes stdout.")
    p.add_argument("--rotors", default="I,II,III", help="Rotor selection, left to right (e.g. I,II,III); names are case-insensitive")
    p.add_argument("--reflector", default="B", help="Reflector type (A, B, or C); case-insensitive")
    p.add_argument("--r1", type=int, default=1, help="Position of first rotor (1-26)")
    p.add_argument("--r2", type=int, default=1, help="Position of second rotor (1-26)")
    p.add_argument("--r3", type=int, default=1, help="Position of third rotor (1-26)")
    p.add_argument("--ring1", type=int, default=1, help="Ring setting of first rotor (1-26)")
    p.add_argument("--ring2", type=int, default=1, help="Ring setting of second rotor (1-26)")
    p.add_argument("--ring3", type=int, default=1, help="Ring setting of third rotor (1-26)")
    p.add_argument("-p", dest="plugboard", default="", help="Plugboard connections (e.g. 'AB CD EF')")
    p.add_argument("--config", metavar="FILE", help="Load machine settings from JSON instead of the flags above.")
    p.add_argument("--generate-config", metavar="FILE", help="Write random settings to FILE and exit.")
    p.add_argument("--seed", type=int, help="Deterministic seed for --generate-config")
    p.add_argument("--input", metavar="FILE", help="Read from FILE instead of stdin")
    p.add_argument("--output", metavar="FILE", help="Write to FILE instead of stdout")
    p.add_argument("--log-file", metavar="FILE", help="Also write --debug output to FILE")
    p.add_argument(
        "--debug", metavar="COMPONENT", action="append", default=[],
        help="Log one component (plugboard, rotor, reflector, stepping, encipher, config). Repeatable.",
    )
    return p.parse_args(argv)


def settings_from_args(args: argparse.Namespace) -> MachineSettings:
    if args.config:
        return load_settings(args.config)
    return MachineSettings(
        rotors=parse_rotor_list(args.rotors),
        reflector=args.reflector,
        positions=[args.r1, args.r2, args.r3],
        ring_settings=[args.ring1, args.ring2, args.ring3],
        plugs=parse_plugboard(args.plugboard),
    )


# ────────────────────────────────────────────────────────────────────────
#  3. Main entry point
# ────────────────────────────────────────────────────────────────────────


def run(args: argparse.Namespace) -> None:
    debug.enable(*args.debug)

    handler = debug.log_to_file(args.log_file) if args.log_file else None
    try:
        _run(args)
    finally:
        if handler is not None:
            debug.logger.removeHandler(handler)
            handler.close()


def _run(args: argparse.Namespace) -> None:
    if args.generate_config:
        save_settings(random_settings(args.seed), args.generate_config)
        print(f"Wrote {args.generate_config}", file=sys.stderr)
        return

    machine = build_machine(settings_from_args(args))
    debug.log("config", repr(machine))

    with ExitStack() as stack:
        reader = stack.enter_context(Path(args.input).open(encoding="utf-8")) if args.input else sys.stdin
        writer = stack.enter_context(Path(args.output).open("w", encoding="utf-8")) if args.output else sys.stdout
        process_io(machine, reader, writer)


def main(argv: List[str] | None = None) -> None:
    args = parse_args(argv)
    try:
        run(args)
    except (ValueError, TypeError, OSError) as e:
        sys.exit(f"Error: {e}")


if __name__ == "__main__":
    main()
