"""evently - synchronous in-process event emitter."""

from evently.events import EventEmitter
from evently.events import EventEmitterMixin
from evently.events import ListenerKind

__all__ = ["EventEmitter", "EventEmitterMixin", "ListenerKind", "__version__"]
__version__ = "0.1.0"
