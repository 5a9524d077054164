"""Register callbacks from an INI file."""

from __future__ import annotations

import configparser
import importlib
import logging
import os

from hookstack.lib.events import Callback, EventRegistry

BEFORE_PREFIX = "before."
AFTER_PREFIX = "after."


def resolve_callback(ref: str) -> Callback:
    """Import the callable named by a ``module.path:attribute`` reference."""
    module_name, sep, attr_path = ref.strip().partition(":")
    if not sep or not module_name or not attr_path:
        raise ValueError(f"Invalid callback reference '{ref}', expected 'module:attribute'")

    target = importlib.import_module(module_name)
    for attr in attr_path.split("."):
        target = getattr(target, attr)

    if not callable(target):
        raise ValueError(f"Callback reference '{ref}' does not point to a callable")
    return target


class HookConfig:
    """Hook definitions stored in an INI file.

    Each section is an event name and each option registers one callback::

        [request.start]
        auth = myapp.hooks:authenticate
        before.timing = myapp.hooks:start_timer|myapp.hooks:authenticate

    ``before.<label>`` and ``after.<label>`` options take ``callback|existing`` and position
    the callback relative to an already registered one.
    """

    def __init__(self, config_file_path: str = "hooks.ini") -> None:
        self._config_obj = configparser.ConfigParser(interpolation=None)
        # Keep labels case-sensitive
        self._config_obj.optionxform = str
        self.config_file_path = config_file_path

    def load(self, registry: EventRegistry) -> int:
        """Register every configured hook on the registry.

        Returns the number of callbacks that were registered.
        """
        if not os.path.exists(self.config_file_path):
            logging.warning(f"Hook config file not found: {self.config_file_path}")
            return 0

        logging.debug(f"Loading hooks from: {self.config_file_path}")
        self._config_obj.read(self.config_file_path, encoding="utf-8")

        registered = 0
        for event_name in self._config_obj.sections():
            for label, ref in self._config_obj.items(event_name):
                if self._register(registry, event_name, label, ref):
                    registered += 1
                else:
                    logging.info(f"Skipped duplicate hook << {label} >> for event {event_name}")
        return registered

    def _register(self, registry: EventRegistry, event_name: str, label: str, ref: str) -> bool:
        if label.startswith(BEFORE_PREFIX) or label.startswith(AFTER_PREFIX):
            callback_ref, sep, existing_ref = ref.partition("|")
            if not sep:
                raise ValueError(
                    f"Hook '{label}' in [{event_name}] must be written as 'callback|existing'"
                )
            callback = resolve_callback(callback_ref)
            existing = resolve_callback(existing_ref)
            if label.startswith(BEFORE_PREFIX):
                return registry.add_before(event_name, existing, callback)
            return registry.add_after(event_name, existing, callback)

        return registry.add(event_name, resolve_callback(ref), unique=True)
