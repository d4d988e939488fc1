"""Method registry: single source of truth for method name → builder mapping.

Every builder in :mod:`tgwire.methods` is registered with the exact Bot API
method name it targets and the documented result type, all in **one**
place::

    @registry.register("getMe", returns=User)
    def get_me() -> Request:
        return Request.build("getMe")

The registry is consumed by :mod:`tgwire.responses` (to decode results) and
by the docs-sync tool (to compare the binding with the live reference).
"""

from __future__ import annotations

import dataclasses
import inspect
from typing import Any, Callable, Dict, Iterator, Optional, Tuple

from tgwire.request import Request

Builder = Callable[..., Request]


# ── Registry entry ───────────────────────────────────────────────────────────

@dataclasses.dataclass(frozen=True)
class MethodEntry:
    """Metadata for a single registered API method."""
    name: str                              # e.g. "sendMessage"
    builder: Builder                       # the request builder function
    returns: Any                           # documented result type
    params: Tuple[Tuple[str, bool], ...]   # (wire name, required) pairs

    @property
    def required(self) -> Tuple[str, ...]:
        return tuple(name for name, required in self.params if required)

    @property
    def optional(self) -> Tuple[str, ...]:
        return tuple(name for name, required in self.params if not required)


def _signature_params(func: Builder) -> Tuple[Tuple[str, bool], ...]:
    params = []
    for param in inspect.signature(func).parameters.values():
        if param.kind in (param.VAR_POSITIONAL, param.VAR_KEYWORD):
            continue
        params.append((param.name, param.default is param.empty))
    return tuple(params)


# ── Registry ─────────────────────────────────────────────────────────────────

class MethodRegistry:
    """Singleton registry of request builders.

    Usage::

        entry = registry.get("sendMessage")
        request = entry.builder(12345, "hi")
    """

    _instance: Optional[MethodRegistry] = None
    _entries: Dict[str, MethodEntry]

    def __new__(cls) -> MethodRegistry:
        if cls._instance is None:
            inst = super().__new__(cls)
            inst._entries = {}
            cls._instance = inst
        return cls._instance

    # ── decorator ────────────────────────────────────────────────────────

    def register(self, name: str, *, returns: Any) -> Callable[[Builder], Builder]:
        """Decorator that registers a builder for the API method *name*.

        Raises:
            ValueError: If *name* is already bound to another builder.
        """
        def decorator(func: Builder) -> Builder:
            existing = self._entries.get(name)
            if existing is not None and existing.builder is not func:
                raise ValueError(f"method {name!r} is already registered to {existing.builder.__name__}")
            self._entries[name] = MethodEntry(
                name=name,
                builder=func,
                returns=returns,
                params=_signature_params(func),
            )
            return func
        return decorator

    # ── lookup helpers ───────────────────────────────────────────────────

    def get(self, name: str) -> Optional[MethodEntry]:
        """Return the entry for *name*, or ``None``."""
        return self._entries.get(name)

    def entries(self) -> Dict[str, MethodEntry]:
        """Return a copy of all registered methods."""
        return dict(self._entries)

    def names(self) -> Tuple[str, ...]:
        return tuple(self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[MethodEntry]:
        return iter(list(self._entries.values()))


# Module-level singleton, import this everywhere.
registry = MethodRegistry()
