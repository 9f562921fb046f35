# machine.py  ──────────────────────────────────────────────────────
from __future__ import annotations

from collections.abc import Sequence

from debug import Debug
from errors import OutOfRange, UnknownReflector, UnknownRotor, WrongRotorCount
from keyboard_and_plugboard import Keyboard, Plugboard
from rotor_and_reflector import Reflector, Rotor
from wirings import DEFAULT_CATALOG, WheelCatalog

debug = Debug()

ROTOR_COUNT = 3


def _check_range(what: str, values: tuple[int, ...]) -> None:
    if any(not 1 <= v <= 26 for v in values):
        raise OutOfRange(what, values)


class Machine:
    """Three rotors, a reflector and a plugboard.

    Rotor 0 is the leftmost (slowest) wheel, rotor 2 the rightmost (fastest).
    A machine is mutable and meant for a single caller at a time.
    """

    def __init__(
        self,
        rotors: Sequence[Rotor],
        reflector: Reflector,
        plugboard: Plugboard | None = None,
        keyboard: Keyboard | None = None,
    ) -> None:
        if len(rotors) != ROTOR_COUNT:
            raise WrongRotorCount(len(rotors))

        self.kb        = keyboard or Keyboard()
        self.pb        = plugboard or Plugboard()
        self.rotors    = list(rotors)
        self.reflector = reflector

    @classmethod
    def create(
        cls,
        rotor_names: Sequence[str],
        reflector_name: str,
        catalog: WheelCatalog = DEFAULT_CATALOG,
    ) -> "Machine":
        """Build a machine from wheel names, all positions and rings at 0."""
        if len(rotor_names) != ROTOR_COUNT:
            raise WrongRotorCount(len(rotor_names))

        refl_wiring = catalog.reflector(reflector_name)
        if refl_wiring is None:
            raise UnknownReflector(reflector_name)

        rotors = []
        for name in rotor_names:
            entry = catalog.rotor(name)
            if entry is None:
                raise UnknownRotor(name)
            wiring, notch = entry
            rotors.append(Rotor(name.upper(), wiring, notch))

        debug.log("config", f"rotors={[r.name for r in rotors]} reflector={reflector_name.upper()}")
        return cls(rotors, Reflector(reflector_name.upper(), refl_wiring))

    # ── settings ────────────────────────────────────────────────

    def reset(self) -> None:
        """Turn every rotor back to position 0; rings and plugs stay."""
        for rotor in self.rotors:
            rotor.position = 0

    def set_positions(self, p0: int, p1: int, p2: int) -> None:
        """Set 1-based rotor positions (A=1 … Z=26)."""
        values = (p0, p1, p2)
        _check_range("rotor positions", values)
        for rotor, pos in zip(self.rotors, values):
            rotor.set_position(pos)

    def set_ring_settings(self, r0: int, r1: int, r2: int) -> None:
        """Apply 1-based ring settings (ringstellung)."""
        values = (r0, r1, r2)
        _check_range("ring settings", values)
        for rotor, ring in zip(self.rotors, values):
            rotor.set_ring(ring)

    def add_plug_connection(self, a: str, b: str) -> None:
        self.pb.connect(a, b)

    # ── read-only views ─────────────────────────────────────────

    @property
    def positions(self) -> tuple[int, ...]:
        return tuple(r.position for r in self.rotors)

    @property
    def ring_settings(self) -> tuple[int, ...]:
        return tuple(r.ring_setting for r in self.rotors)

    @property
    def rotor_names(self) -> list[str]:
        return [r.name for r in self.rotors]

    @property
    def reflector_name(self) -> str:
        return self.reflector.name

    @property
    def window(self) -> str:
        return "".join(r.window for r in self.rotors)

    # ── stepping logic  ─────────────────────────────────────────

    def _step_rotors(self) -> None:
        """Advance the wheels for one key press, double-step included."""
        left, middle, right = self.rotors

        if middle.at_notch():
            middle.step()
            left.step()
        elif right.at_notch():
            middle.step()

        right.step()
        debug.log("stepping", f"window {self.window}")

    # ── encipher one symbol  ────────────────────────────────────

    def encrypt_char(self, c: str) -> str:
        """Encipher one upper-case letter; anything else comes back as-is."""
        if c not in self.kb:
            return c

        self._step_rotors()

        signal = self.kb.forward(c)
        signal = self.pb.forward(signal)

        for rotor in reversed(self.rotors):
            signal = rotor.forward(signal)

        signal = self.reflector.reflect(signal)

        for rotor in self.rotors:
            signal = rotor.backward(signal)

        signal = self.pb.backward(signal)
        out_ch = self.kb.backward(signal)
        debug.log("encipher", f"{c} -> {out_ch}")
        return out_ch

    def encrypt_text(self, text: str) -> str:
        return "".join(self.encrypt_char(ch) for ch in text)

    def __repr__(self) -> str:
        return (
            f"<Machine rotors={self.rotor_names} reflector={self.reflector_name} "
            f"window={self.window} plugs={self.pb.pairs()}>"
        )
