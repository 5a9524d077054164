from hookstack.lib.events import EventRegistry, Payload
from hookstack.version import __version__

PACKAGE = __package__
VERSION = __version__

__all__ = [
    "VERSION",
    "PACKAGE",
    EventRegistry.__name__,
    Payload.__name__,
]
