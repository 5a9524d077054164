"""Named event stacks for cooperative extension points."""

from __future__ import annotations

import logging
from typing import Any, Callable

Callback = Callable[[Any], Any]


class Payload:
    """Mutable box for threading an immutable value through a run.

    Callbacks rebind ``payload.value`` and later callbacks observe the new value.
    """

    def __init__(self, value: Any = None) -> None:
        self.value = value

    def __repr__(self) -> str:
        return f"Payload({self.value!r})"


class EventRegistry:
    """Ordered callback stacks keyed by event name.

    Callbacks are compared with ``==``, so the exact handle used to register a callback
    (function, bound method or closure) locates it again. A callback never appears twice
    in positional inserts or replacements.

    Not thread-safe: confine an instance to one thread or guard it externally.
    Callbacks run synchronously; exceptions bubble up normally.
    """

    def __init__(self):
        self._events: dict[str, list[Callback]] = {}
        self._has_run: set[str] = set()
        self._data: Any = None

    @property
    def current_payload(self) -> Any:
        """Payload of the run in progress, or None outside a run."""
        return self._data

    def names(self) -> list[str]:
        """Known event names, in order of first reference."""
        return list(self._events)

    def __contains__(self, name: str) -> bool:
        return name in self._events

    def add(self, name: str, callback: Callback, unique: bool = False) -> bool:
        """Append a callback to the event stack.

        Args:
            name: Event name.
            callback: Callable receiving the run payload.
            unique: Refuse the callback if it is already registered for this event.

        Returns:
            False if the callback was refused as a duplicate, True otherwise.
        """
        stack = self._events.setdefault(name, [])
        if unique and callback in stack:
            logging.debug(f"Duplicate callback refused for event << {name} >>: {callback!r}")
            return False

        stack.append(callback)
        return True

    def add_before(self, name: str, existing: Callback, callback: Callback) -> bool:
        """Insert a callback immediately before ``existing``.

        If ``existing`` is not registered for the event, the callback is simply appended
        (this is not an error and returns True).
        """
        stack = self._events.get(name)
        if not stack or existing not in stack:
            return self.add(name, callback)

        return self._insert(name, stack.index(existing), callback)

    def add_after(self, name: str, existing: Callback, callback: Callback) -> bool:
        """Insert a callback immediately after ``existing``.

        Falls back to appending, like :meth:`add_before`, when ``existing`` is absent.
        """
        stack = self._events.get(name)
        if not stack or existing not in stack:
            return self.add(name, callback)

        return self._insert(name, stack.index(existing) + 1, callback)

    def replace(self, name: str, existing: Callback, callback: Callback) -> bool:
        """Swap ``existing`` for ``callback``, keeping its position.

        When ``callback`` is already registered, ``existing`` is removed instead so the
        stack never holds it twice. Replacing a callback with itself leaves the stack unchanged.
        Returns False if the event is unknown or empty, or ``existing`` is not registered.
        """
        stack = self._events.get(name)
        if not stack or existing not in stack:
            return False

        key = stack.index(existing)
        if callback == existing or callback not in stack:
            stack[key] = callback
            return True

        logging.debug(f"Replacement already registered for << {name} >>, removing {existing!r}")
        del stack[key]
        return True

    def get(self, name: str) -> list[Callback]:
        """Return a copy of the callbacks registered for an event."""
        return list(self._events.get(name, ()))

    def clear(self, name: str | None = None, callback: Callback | None = None) -> None:
        """Clear some or all callbacks.

        - no arguments: drop every event
        - name only: empty that event's stack (the name stays known)
        - name and callback: remove that callback from the event
        """
        if name is None and callback is None:
            self._events = {}
            return

        if callback is None:
            self._events[name] = []
            return

        stack = self._events.get(name)
        if stack is None or callback not in stack:
            return

        stack.remove(callback)

    def run(self, name: str, payload: Any = None) -> None:
        """Call every callback registered for an event, in order, with a shared payload.

        The stack is snapshotted first, so callbacks that change the registry do not
        affect this run. Exceptions raised by a callback stop the run and propagate.
        """
        self._has_run.add(name)

        callbacks = self.get(name)
        if not callbacks:
            return

        logging.debug(f"Running event << {name} >> with {len(callbacks)} callback(s)")
        previous = self._data
        self._data = payload
        try:
            for callback in callbacks:
                callback(payload)
        finally:
            self._data = previous

    def has_run(self, name: str) -> bool:
        """Check whether an event has ever been run."""
        return name in self._has_run

    def _insert(self, name: str, key: int, callback: Callback) -> bool:
        stack = self._events[name]
        if callback in stack:
            return False

        stack.insert(key, callback)
        return True
