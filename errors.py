# errors.py
"""Configuration errors raised by the machine and its settings layer.

All of them are ``ValueError`` subclasses: every one describes a bad value
handed in by the caller, never a transient condition worth retrying.
"""
from __future__ import annotations


class EnigmaError(ValueError):
    """Base class for every machine configuration error."""


class WrongRotorCount(EnigmaError):
    def __init__(self, count: int) -> None:
        super().__init__(f"exactly three rotors must be specified, got {count}")
        self.count = count


class UnknownRotor(EnigmaError):
    def __init__(self, name: str) -> None:
        super().__init__(f"invalid rotor type: {name}")
        self.name = name


class UnknownReflector(EnigmaError):
    def __init__(self, name: str) -> None:
        super().__init__(f"invalid reflector type: {name}")
        self.name = name


class OutOfRange(EnigmaError):
    def __init__(self, what: str, values: tuple[int, ...]) -> None:
        super().__init__(f"{what} must be between 1 and 26, got {list(values)}")
        self.what = what
        self.values = values


class InvalidLetter(EnigmaError):
    def __init__(self, letter: str) -> None:
        super().__init__(f"plugboard connections must be between A and Z, got {letter!r}")
        self.letter = letter


class AlreadyConnected(EnigmaError):
    def __init__(self, letter: str) -> None:
        super().__init__(f"letter {letter} is already connected")
        self.letter = letter


class InvalidPlugPair(EnigmaError):
    def __init__(self, pair: str) -> None:
        super().__init__(f"invalid plugboard pair: {pair!r}")
        self.pair = pair


__all__ = [
    "EnigmaError",
    "WrongRotorCount",
    "UnknownRotor",
    "UnknownReflector",
    "OutOfRange",
    "InvalidLetter",
    "AlreadyConnected",
    "InvalidPlugPair",
]
