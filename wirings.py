# wirings.py
"""Wheel database: the historical rotor and reflector wirings.

The built-in tables are read-only module constants. A :class:`WheelCatalog`
wraps them and lets callers register further named wirings on their own
copy; the shared :data:`DEFAULT_CATALOG` only ever holds the built-ins.
"""
from __future__ import annotations

import string
from types import MappingProxyType
from typing import Dict, Mapping, Tuple

from debug import Debug

debug = Debug()

Alpha26 = string.ascii_uppercase

# Army rotors ------------------------------------------------------------
ROTOR_WIRINGS: Mapping[str, str] = MappingProxyType({
    "I":   "EKMFLGDQVZNTOWYHXUSPAIBRCJ",
    "II":  "AJDKSIRUXBLHWTMCQGZNPYFVOE",
    "III": "BDFHJLCPRTXVZNYEIWGAKMUSQO",
    "IV":  "ESOVPZJAYQUIRHXLNFTGKDCMWB",
    "V":   "VZBRGITYUPSDNHLXAWMJQOFECK",
})

# 1-indexed: the rotor turns its neighbour when leaving this letter
ROTOR_NOTCHES: Mapping[str, int] = MappingProxyType({
    "I":   17,  # Q
    "II":  5,   # E
    "III": 22,  # V
    "IV":  10,  # J
    "V":   26,  # Z
})

# Reflectors -------------------------------------------------------------
REFLECTOR_WIRINGS: Mapping[str, str] = MappingProxyType({
    "A": "EJMZALYXVBWFCRQUONTSPIKHGD",
    "B": "YRUHQSLDPXNGOKMIEBFZCWVJAT",
    "C": "FVPJIAOYEDRZXWGCTKUQSBNMHL",
})


# ────────────────────────────────────────────────────────────────────────
#  Wiring checks
# ────────────────────────────────────────────────────────────────────────


def is_permutation(wiring: str, alpha: str = Alpha26) -> bool:
    """True if *wiring* uses every symbol of *alpha* exactly once."""
    return sorted(wiring) == sorted(alpha)


def is_involution(wiring: str, alpha: str = Alpha26) -> bool:
    """True if wiring[wiring[i]] == alpha[i] for all i."""
    if not is_permutation(wiring, alpha):
        return False
    for i, ch in enumerate(wiring):
        j = alpha.index(ch)
        if wiring[j] != alpha[i]:
            return False
    return True


def has_fixed_points(wiring: str, alpha: str = Alpha26) -> bool:
    return any(a == b for a, b in zip(alpha, wiring))


# ────────────────────────────────────────────────────────────────────────
#  Catalog
# ────────────────────────────────────────────────────────────────────────


class WheelCatalog:
    """Named rotor and reflector wirings, looked up case-insensitively."""

    def __init__(
        self,
        rotors: Mapping[str, Tuple[str, int]] | None = None,
        reflectors: Mapping[str, str] | None = None,
    ) -> None:
        self._rotors: Dict[str, Tuple[str, int]] = {}
        self._reflectors: Dict[str, str] = {}
        self.frozen = False

        for name, (wiring, notch) in (rotors or {}).items():
            self.register_rotor(name, wiring, notch)
        for name, wiring in (reflectors or {}).items():
            self.register_reflector(name, wiring)

    @classmethod
    def builtin(cls) -> "WheelCatalog":
        """The five army rotors and reflectors A-C, frozen."""
        catalog = cls(
            {name: (ROTOR_WIRINGS[name], ROTOR_NOTCHES[name]) for name in ROTOR_WIRINGS},
            REFLECTOR_WIRINGS,
        )
        catalog.frozen = True
        return catalog

    # ── registration ──────────────────────────────────────────────
    def _require_mutable(self) -> None:
        if self.frozen:
            raise TypeError("catalog is frozen; register on a copy() instead")

    def register_rotor(self, name: str, wiring: str, notch: int) -> None:
        self._require_mutable()
        wiring = wiring.upper()
        if not is_permutation(wiring):
            raise ValueError(f"Rotor {name!r}: wiring must be a permutation of A-Z")
        if not 1 <= notch <= len(Alpha26):
            raise ValueError(f"Rotor {name!r}: notch must be between 1 and 26")
        self._rotors[name.upper()] = (wiring, notch)
        debug.log("config", f"registered rotor {name.upper()} {wiring} notch={notch}")

    def register_reflector(self, name: str, wiring: str) -> None:
        self._require_mutable()
        wiring = wiring.upper()
        if not is_involution(wiring) or has_fixed_points(wiring):
            raise ValueError(
                f"Reflector {name!r}: wiring must be an involution with no fixed points"
            )
        self._reflectors[name.upper()] = wiring
        debug.log("config", f"registered reflector {name.upper()} {wiring}")

    # ── lookup ────────────────────────────────────────────────────
    def rotor(self, name: str) -> Tuple[str, int] | None:
        """Return ``(wiring, notch)`` or None when *name* is unknown."""
        return self._rotors.get(name.upper())

    def reflector(self, name: str) -> str | None:
        return self._reflectors.get(name.upper())

    @property
    def rotor_names(self) -> list[str]:
        return list(self._rotors)

    @property
    def reflector_names(self) -> list[str]:
        return list(self._reflectors)

    def copy(self) -> "WheelCatalog":
        return WheelCatalog(self._rotors, self._reflectors)

    def __repr__(self) -> str:
        return (
            f"<WheelCatalog rotors={self.rotor_names} "
            f"reflectors={self.reflector_names}>"
        )


DEFAULT_CATALOG = WheelCatalog.builtin()

__all__ = [
    "Alpha26",
    "ROTOR_WIRINGS",
    "ROTOR_NOTCHES",
    "REFLECTOR_WIRINGS",
    "WheelCatalog",
    "DEFAULT_CATALOG",
    "is_permutation",
    "is_involution",
]
