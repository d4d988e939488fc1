"""Shared infrastructure for the tgwire tooling (logging).

The ``tgwire`` package itself must NEVER import from here: the binding
layer performs no I/O and does not log.
"""

from core.logger import WireLogger

__all__ = [
    "WireLogger",
]
