# rotor_and_reflector.py
from __future__ import annotations
from debug import Debug
from wirings import Alpha26, has_fixed_points, is_involution, is_permutation

debug = Debug()


class Rotor:
    def __init__(self, name: str, wiring: str, notch: int, alphabet: str = Alpha26) -> None:
        if not is_permutation(wiring, alphabet):
            raise ValueError("wiring must be a permutation of alphabet")

        self.name = name
        self.wiring = wiring
        self.alphabet = alphabet
        self.size = len(alphabet)

        # integer lookup tables
        self._fwd = [alphabet.index(c) for c in wiring]
        self._rev = [wiring.index(c) for c in alphabet]

        self.notch = notch          # 1-indexed, e.g. 17 for Q
        self.position = 0
        self.ring_setting = 0

    # ── ring & notch helpers ──────────────────────────────────────
    def set_ring(self, ring: int) -> "Rotor":
        """Apply a 1-based ring setting."""
        self.ring_setting = (ring - 1) % self.size
        return self

    def set_position(self, position: int) -> "Rotor":
        """Turn to a 1-based window position."""
        self.position = (position - 1) % self.size
        return self

    def at_notch(self) -> bool:
        return self.position == self.notch - 1

    @property
    def offset(self) -> int:
        return (self.position - self.ring_setting) % self.size

    @property
    def window(self) -> str:
        """Letter currently showing through the machine's window."""
        return self.alphabet[self.position]

    # ── stepping --------------------------------------------------
    def step(self) -> None:
        self.position = (self.position + 1) % self.size
        debug.log("rotor", f"{self.name} -> pos {self.position}")

    # ── signal paths ---------------------------------------------
    def forward(self, sig: int) -> int:
        offset = self.offset
        mapped = self._fwd[(sig + offset) % self.size]
        return (mapped - offset) % self.size

    def backward(self, sig: int) -> int:
        offset = self.offset
        mapped = self._rev[(sig + offset) % self.size]
        return (mapped - offset) % self.size

    # ── niceties --------------------------------------------------
    def __repr__(self) -> str:
        return f"<Rotor {self.name} pos={self.position} ring={self.ring_setting}>"


class Reflector:
    def __init__(self, name: str, wiring: str, alphabet: str = Alpha26) -> None:
        if len(wiring) != len(alphabet):
            raise ValueError("Reflector wiring length must match alphabet length")

        # w[i] = j ⇒ w[j] = i, and nothing maps to itself
        if not is_involution(wiring, alphabet) or has_fixed_points(wiring, alphabet):
            raise ValueError("Reflector wiring must be an involution with no fixed points")

        self.name = name
        self.wiring = wiring
        self.alphabet = alphabet
        self.size = len(alphabet)
        self._map = tuple(alphabet.index(c) for c in wiring)

    def reflect(self, sig: int) -> int:
        mapped = self._map[sig]
        debug.log("reflector", f"{sig}->{mapped}")
        return mapped

    def __repr__(self) -> str:
        return f"<Reflector {self.name}>"
