"""Status server exposing tweener state."""

from .server import StatusServer

__all__ = [
    "StatusServer",
]
