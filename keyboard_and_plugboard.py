# keyboard_and_plugboard.py
from __future__ import annotations

from debug import Debug
from errors import AlreadyConnected, InvalidLetter
from wirings import Alpha26

debug = Debug()


# ── Keyboard ──────────────────────────────────────────────────────
class Keyboard:
    def __init__(self, alphabet: str = Alpha26) -> None:
        self.alphabet: str = alphabet
        self.alpha_to_index: dict[str, int] = {
            ch: i for i, ch in enumerate(alphabet)
        }

    def __contains__(self, letter: str) -> bool:
        return letter in self.alpha_to_index

    # letter → integer signal
    def forward(self, letter: str) -> int:
        return self.alpha_to_index[letter]

    # integer signal → letter
    def backward(self, signal: int) -> str:
        return self.alphabet[signal]


# ── Plugboard ─────────────────────────────────────────────────────
class Plugboard:
    """Symmetric letter swaps; letters without a cable pass straight through."""

    def __init__(self, alphabet: str = Alpha26) -> None:
        self.alphabet: str = alphabet
        self.mapping: dict[str, str] = {}

    def connect(self, a: str, b: str) -> None:
        """Wire *a* and *b* together; nothing changes if either check fails."""
        a, b = a.upper(), b.upper()

        for ch in (a, b):
            if len(ch) != 1 or ch not in self.alphabet:
                raise InvalidLetter(ch)
        for ch in (a, b):
            if ch in self.mapping:
                raise AlreadyConnected(ch)
        if a == b:
            # a letter is already wired to itself
            raise AlreadyConnected(a)

        # passed validation → commit swap
        self.mapping[a], self.mapping[b] = b, a
        debug.log("config", f"plug {a}<->{b}")

    def partner(self, letter: str) -> str | None:
        return self.mapping.get(letter)

    def swap(self, letter: str) -> str:
        return self.mapping.get(letter, letter)

    def __contains__(self, letter: str) -> bool:
        return letter in self.mapping

    def __len__(self) -> int:
        return len(self.mapping) // 2

    def pairs(self) -> list[str]:
        return [f"{a}{b}" for a, b in sorted(self.mapping.items()) if a < b]

    # one private helper does the job for both directions
    def _map(self, signal: int) -> int:
        letter = self.alphabet[signal]
        mapped = self.swap(letter)
        debug.log("plugboard", f"{signal}->{letter}->{mapped}")
        return self.alphabet.index(mapped)

    forward = _map        # alias: signal in
    backward = _map       # alias: signal out

    # nicety for debugging
    def __repr__(self) -> str:
        return f"<Plugboard {' '.join(self.pairs())}>"
