# settings.py
"""Machine settings: parsing flag values, JSON files and random daily keys."""
from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from pathlib import Path
from random import Random, SystemRandom
from typing import List

from debug import Debug
from errors import InvalidPlugPair
from machine import ROTOR_COUNT, Machine
from wirings import DEFAULT_CATALOG, Alpha26, WheelCatalog

debug = Debug()

REQUIRED_KEYS = {"rotors", "reflector"}
MAX_PLUG_PAIRS = 10


@dataclass(slots=True)
class MachineSettings:
    """Everything needed to put a machine into its starting state."""

    rotors: List[str] = field(default_factory=lambda: ["I", "II", "III"])
    reflector: str = "B"
    positions: List[int] = field(default_factory=lambda: [1, 1, 1])     # 1-26
    ring_settings: List[int] = field(default_factory=lambda: [1, 1, 1])  # 1-26
    plugs: List[str] = field(default_factory=list)


# ────────────────────────────────────────────────────────────────────────
#  1. Flag parsing helpers
# ────────────────────────────────────────────────────────────────────────


def parse_rotor_list(raw: str) -> List[str]:
    """``"I,II,III"`` → ``["I", "II", "III"]``."""
    return [name.strip() for name in raw.split(",")]


def parse_plugboard(raw: str) -> List[str]:
    """``"AB CD"`` → ``["AB", "CD"]``; every token must be two characters."""
    pairs = raw.split()
    for pair in pairs:
        if len(pair) != 2:
            raise InvalidPlugPair(pair)
    return pairs


# ────────────────────────────────────────────────────────────────────────
#  2. JSON loading & saving
# ────────────────────────────────────────────────────────────────────────


def _require_list(key: str, value, kind: type) -> list:
    if not isinstance(value, list) or not all(
        isinstance(v, kind) and not isinstance(v, bool) for v in value
    ):
        raise ValueError(f"Config key {key!r} must be a list of {kind.__name__}")
    return value


def settings_from_dict(data: dict) -> MachineSettings:
    if not isinstance(data, dict):
        raise ValueError("Config must be a JSON object")
    missing = REQUIRED_KEYS - data.keys()
    if missing:
        raise ValueError(f"Missing keys in config: {', '.join(sorted(missing))}")

    rotors = data["rotors"]
    if isinstance(rotors, str):
        rotors = parse_rotor_list(rotors)
    _require_list("rotors", rotors, str)

    reflector = data["reflector"]
    if not isinstance(reflector, str):
        raise ValueError("Config key 'reflector' must be a string")

    plugs = data.get("plugs", data.get("plugboard", []))
    if isinstance(plugs, str):
        plugs = parse_plugboard(plugs)
    _require_list("plugs", plugs, str)

    defaults = MachineSettings()
    positions = data.get("positions", defaults.positions)
    rings = data.get("ring_settings", data.get("ring_set", defaults.ring_settings))
    return MachineSettings(
        rotors=list(rotors),
        reflector=reflector,
        positions=list(_require_list("positions", positions, int)),
        ring_settings=list(_require_list("ring_settings", rings, int)),
        plugs=list(plugs),
    )


def settings_to_dict(settings: MachineSettings) -> dict:
    return asdict(settings)


def load_settings(path: str | Path) -> MachineSettings:
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    debug.log("config", f"loaded {path}: {data}")
    return settings_from_dict(data)


def save_settings(settings: MachineSettings, path: str | Path) -> None:
    Path(path).write_text(json.dumps(settings_to_dict(settings), indent=2), encoding="utf-8")


# ────────────────────────────────────────────────────────────────────────
#  3. Building a machine
# ────────────────────────────────────────────────────────────────────────


def build_machine(
    settings: MachineSettings,
    catalog: WheelCatalog = DEFAULT_CATALOG,
) -> Machine:
    """Create the machine and apply positions, rings and plugs in that order."""
    machine = Machine.create(settings.rotors, settings.reflector, catalog)
    machine.reset()
    machine.set_positions(*_three("rotor positions", settings.positions))
    machine.set_ring_settings(*_three("ring settings", settings.ring_settings))
    for pair in settings.plugs:
        if len(pair) != 2:
            raise InvalidPlugPair(pair)
        machine.add_plug_connection(pair[0], pair[1])
    return machine


def _three(what: str, values: List[int]) -> List[int]:
    if len(values) != ROTOR_COUNT:
        raise ValueError(f"{what}: expected {ROTOR_COUNT} values, got {len(values)}")
    return values


# ────────────────────────────────────────────────────────────────────────
#  4. Random daily key
# ────────────────────────────────────────────────────────────────────────


def build_rng(seed: int | None) -> Random | SystemRandom:
    """Deterministic RNG when *seed* given; CSPRNG otherwise."""
    return Random(seed) if seed is not None else SystemRandom()


def choose_pairs(k: int, rng: Random | SystemRandom, alpha: str = Alpha26) -> List[str]:
    """Return *k* disjoint plug pairs."""
    k = min(k, len(alpha) // 2)
    pool = list(alpha)
    rng.shuffle(pool)
    return [a + b for a, b in zip(pool[::2], pool[1::2])][:k]


def random_settings(
    seed: int | None = None,
    catalog: WheelCatalog = DEFAULT_CATALOG,
    max_pairs: int = MAX_PLUG_PAIRS,
) -> MachineSettings:
    rng = build_rng(seed)
    size = len(Alpha26)
    return MachineSettings(
        rotors=rng.sample(sorted(catalog.rotor_names), ROTOR_COUNT),
        reflector=rng.choice(sorted(catalog.reflector_names)),
        positions=[rng.randint(1, size) for _ in range(ROTOR_COUNT)],
        ring_settings=[rng.randint(1, size) for _ in range(ROTOR_COUNT)],
        plugs=choose_pairs(max_pairs, rng),
    )
