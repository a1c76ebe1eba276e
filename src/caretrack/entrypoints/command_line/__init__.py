"""Parsing and execution of caretrack's command language.

The same language is used by ``caretrack run`` and the interactive
``caretrack shell``.
"""

from .dispatcher import CommandDispatcher, Outcome

__all__ = ["CommandDispatcher", "Outcome"]
