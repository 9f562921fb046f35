# debug.py
from __future__ import annotations
import logging
from typing import Dict

class Debug:
    _root_configured: bool = False          # class-level guard

    # shared by every instance so one toggle reaches all modules
    _components: Dict[str, bool] = {
        "plugboard":  False,
        "rotor":      False,
        "reflector":  False,
        "stepping":   False,
        "encipher":   False,
        "config":     False,
    }
    _enabled: bool = True                   # global switch

    _FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s]: %(message)s"
    _DATEFMT = "%Y-%m-%d %H:%M:%S"

    def __init__(self) -> None:
        """Multiple Debug() instances share the same root logger config."""
        if not Debug._root_configured:
            handlers: list[logging.Handler] = [logging.StreamHandler()]

            logging.basicConfig(
                level=logging.DEBUG,
                format=Debug._FORMAT,
                datefmt=Debug._DATEFMT,
                handlers=handlers,
            )
            Debug._root_configured = True

        self.logger = logging.getLogger("ENIGMA")

    def log_to_file(self, path: str) -> logging.Handler:
        """Also stream messages to *path*; returns the new handler."""
        handler = logging.FileHandler(path, encoding="utf-8")
        handler.setFormatter(logging.Formatter(Debug._FORMAT, Debug._DATEFMT))
        self.logger.addHandler(handler)
        return handler

    @property
    def enabled(self) -> bool:
        return Debug._enabled

    @property
    def components(self) -> Dict[str, bool]:
        return Debug._components

    # ── logging API ──────────────────────────────────────────────
    def log(self, component: str, message: str) -> None:
        if Debug._enabled and Debug._components.get(component, False):
            self.logger.debug("[%s] %s", component.upper(), message)

    # ── component toggles ────────────────────────────────────────
    def enable(self, *components: str) -> None:
        for c in components:
            self._require(c)
            Debug._components[c] = True

    def disable(self, *components: str) -> None:
        for c in components:
            self._require(c)
            Debug._components[c] = False

    def toggle(self, component: str) -> None:
        self._require(component)
        Debug._components[component] = not Debug._components[component]

    def toggle_global(self, state: bool) -> None:
        """Switch every component on/off at once."""
        Debug._enabled = state

    def status(self) -> Dict[str, bool]:
        """Return a *copy* of the current component map."""
        return Debug._components.copy()

    # ── helpers ──────────────────────────────────────────────────
    def _require(self, component: str) -> None:
        if component not in Debug._components:
            raise ValueError(f"No such component: {component!r}")

    # nicety for `print(dbg)`
    def __repr__(self) -> str:
        active = [k for k, v in Debug._components.items() if v]
        return f"<Debug enabled={Debug._enabled} active={active}>"
