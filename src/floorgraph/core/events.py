"""Synchronous notification hooks.

Handlers may subscribe or unsubscribe (on this or any other hook) while a
hook is firing. Each ``fire`` works on a snapshot of the subscriber list:
handlers added during the pass wait for the next ``fire``, handlers removed
during the pass are skipped if they have not run yet.
"""

from __future__ import annotations

from typing import Any, Callable, List

Handler = Callable[..., Any]


class EventHook:
    """Ordered list of callbacks fired in subscription order."""

    def __init__(self) -> None:
        self._handlers: List[Handler] = []

    def add(self, handler: Handler) -> None:
        self._handlers.append(handler)

    def remove(self, handler: Handler) -> None:
        """Drop the first subscription of ``handler``; unknown handlers are ignored."""
        try:
            self._handlers.remove(handler)
        except ValueError:
            pass

    def has(self, handler: Handler) -> bool:
        return handler in self._handlers

    def clear(self) -> None:
        self._handlers = []

    def fire(self, *args: Any) -> None:
        for handler in list(self._handlers):
            if handler not in self._handlers:
                continue
            handler(*args)

    def __len__(self) -> int:
        return len(self._handlers)
