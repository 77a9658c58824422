"""Synchronous named-event emitter.

Listeners are kept per event name in three ordered groups: one-shot listeners
added with :meth:`EventEmitterMixin.once_before`, recurring listeners added
with :meth:`EventEmitterMixin.on`, and one-shot listeners added with
:meth:`EventEmitterMixin.once`. They fire in that group order.

Emission iterates over a copy of the entries taken when ``emit`` starts, so
listeners may register or remove listeners (or emit again) while an emission
is in progress; such changes only apply to later emissions.
"""

from __future__ import annotations

import enum
import logging
from typing import TYPE_CHECKING
from typing import Any

from evently.config import get_config
from evently.errors import InvalidArgumentError

if TYPE_CHECKING:
    from collections.abc import Callable
    from collections.abc import Hashable
    from collections.abc import Sequence

logger = logging.getLogger(__name__)


class ListenerKind(enum.Enum):
    RECURRING = "recurring"
    ONCE = "once"


class _Entry:
    """A registered listener together with its kind.

    Entries are compared by identity so a firing one-shot removes exactly its
    own registration, even when the same callable was registered twice.
    """

    __slots__ = ("kind", "listener")

    def __init__(self, listener: Callable[..., Any], kind: ListenerKind) -> None:
        self.listener = listener
        self.kind = kind

    def __repr__(self) -> str:
        return f"_Entry({self.listener!r}, {self.kind.value})"


class _Slot:
    """The three listener groups of one event name."""

    __slots__ = ("before", "once", "recurring")

    def __init__(self) -> None:
        self.before: list[_Entry] = []
        self.recurring: list[_Entry] = []
        self.once: list[_Entry] = []

    def groups(self) -> tuple[list[_Entry], list[_Entry], list[_Entry]]:
        return (self.before, self.recurring, self.once)

    def entries(self) -> list[_Entry]:
        return self.before + self.recurring + self.once

    def discard(self, entry: _Entry) -> bool:
        for group in self.groups():
            for i, candidate in enumerate(group):
                if candidate is entry:
                    del group[i]
                    return True
        return False

    def discard_listener(self, listener: Callable[..., Any]) -> bool:
        for group in self.groups():
            for i, candidate in enumerate(group):
                if candidate.listener == listener:
                    del group[i]
                    return True
        return False

    def __bool__(self) -> bool:
        return bool(self.before or self.recurring or self.once)

    def __len__(self) -> int:
        return len(self.before) + len(self.recurring) + len(self.once)


def _require_event(event: Hashable | None) -> None:
    if event is None:
        msg = "event name must not be None"
        raise InvalidArgumentError(msg, argument="event")


class EventEmitterMixin:
    """Named-event registration and synchronous dispatch.

    Can be mixed into any class; state is created on first use so subclasses
    need not call ``super().__init__()``.

    API:
    - on(event, listener) / once(event, listener) / once_before(event, listener)
    - remove_listener(event, listener) / off(event, listener=None)
    - remove_all_listeners(event=None)
    - listeners(event=None) / event_names() / listener_count(event)
    - emit(event, arguments=())
    - forward(other) / unforward(other)
    """

    _event_slots: dict[Hashable, _Slot]
    _forward_targets: list[EventEmitterMixin]

    def _registry(self) -> dict[Hashable, _Slot]:
        try:
            return self._event_slots
        except AttributeError:
            self._event_slots = {}
            return self._event_slots

    def _targets(self) -> list[EventEmitterMixin]:
        try:
            return self._forward_targets
        except AttributeError:
            self._forward_targets = []
            return self._forward_targets

    def _slot_for(self, event: Hashable) -> _Slot:
        registry = self._registry()
        slot = registry.get(event)
        if slot is None:
            slot = registry[event] = _Slot()
        return slot

    def _prune(self, event: Hashable) -> None:
        """Drop ``event`` once its slot is empty; queries rely on every key having listeners."""
        registry = self._registry()
        slot = registry.get(event)
        if slot is not None and not slot:
            del registry[event]

    # Registration

    def on(self, event: Hashable, listener: Callable[..., Any]) -> EventEmitterMixin:
        """Register ``listener`` to run on every emission of ``event``."""
        _require_event(event)
        self._slot_for(event).recurring.append(_Entry(listener, ListenerKind.RECURRING))
        return self

    def once(self, event: Hashable, listener: Callable[..., Any]) -> EventEmitterMixin:
        """Register ``listener`` to run on the next emission of ``event`` only."""
        _require_event(event)
        self._slot_for(event).once.append(_Entry(listener, ListenerKind.ONCE))
        return self

    def once_before(self, event: Hashable, listener: Callable[..., Any]) -> EventEmitterMixin:
        """Register a one-shot ``listener`` that runs before all other listeners.

        Several ``once_before`` listeners keep their registration order.
        """
        _require_event(event)
        self._slot_for(event).before.append(_Entry(listener, ListenerKind.ONCE))
        return self

    # Removal

    def remove_listener(self, event: Hashable, listener: Callable[..., Any]) -> EventEmitterMixin:
        """Remove the first registration of ``listener`` for ``event``, if any."""
        _require_event(event)
        slot = self._registry().get(event)
        if slot is not None and slot.discard_listener(listener):
            self._prune(event)
        return self

    def off(
        self, event: Hashable, listener: Callable[..., Any] | None = None
    ) -> EventEmitterMixin:
        """Remove ``listener`` from ``event``, or every listener when omitted."""
        _require_event(event)
        if listener is None:
            return self.remove_all_listeners(event)
        return self.remove_listener(event, listener)

    def remove_all_listeners(self, event: Hashable | None = None) -> EventEmitterMixin:
        """Remove every listener for ``event``, or for all events when omitted."""
        if event is None:
            self._registry().clear()
        else:
            self._registry().pop(event, None)
        return self

    # Queries

    def listeners(
        self, event: Hashable | None = None
    ) -> list[Callable[..., Any]] | dict[Hashable, list[Callable[..., Any]]]:
        """Return the listeners of ``event`` in firing order.

        Without ``event``, return a mapping of every event name that has
        listeners to its listener list. The result is a copy.
        """
        registry = self._registry()
        if event is None:
            return {
                name: [entry.listener for entry in slot.entries()]
                for name, slot in registry.items()
            }
        slot = registry.get(event)
        if slot is None:
            return []
        return [entry.listener for entry in slot.entries()]

    def event_names(self) -> list[Hashable]:
        return list(self._registry())

    def listener_count(self, event: Hashable) -> int:
        _require_event(event)
        slot = self._registry().get(event)
        return len(slot) if slot is not None else 0

    # Dispatch

    def emit(self, event: Hashable, arguments: Sequence[Any] = ()) -> None:
        """Invoke the listeners of ``event`` with ``arguments`` spread positionally.

        Exceptions raised by a listener propagate to the caller and the
        remaining listeners of this emission are skipped.
        """
        _require_event(event)
        slot = self._registry().get(event)
        snapshot = slot.entries() if slot is not None else []
        targets = list(self._targets())
        if not snapshot and not targets:
            return

        config = get_config()
        if config.trace_dispatch:
            logger.log(
                logging.getLevelName(config.trace_level),
                "emit %r to %d listener(s) and %d forward target(s)",
                event,
                len(snapshot),
                len(targets),
            )

        args = tuple(arguments)
        for entry in snapshot:
            if entry.kind is ListenerKind.ONCE:
                self._discard_entry(event, entry)
            entry.listener(*args)

        for target in targets:
            target.emit(event, args)

    def _discard_entry(self, event: Hashable, entry: _Entry) -> None:
        slot = self._registry().get(event)
        if slot is not None and slot.discard(entry):
            self._prune(event)

    # Forwarding

    def forward(self, other: EventEmitterMixin) -> EventEmitterMixin:
        """Re-emit every future emission of this emitter on ``other``.

        Relays run after all of the event's own listeners, including
        one-shots and listeners registered after the forward, and in the
        order the targets were added. Events without local listeners are
        relayed too.
        """
        self._targets().append(other)
        logger.debug("forwarding events from %r to %r", self, other)
        return self

    def unforward(self, other: EventEmitterMixin) -> EventEmitterMixin:
        """Stop one forwarding relay to ``other``; no-op if there is none."""
        targets = self._targets()
        for i, target in enumerate(targets):
            if target is other:
                del targets[i]
                logger.debug("stopped forwarding events from %r to %r", self, other)
                break
        return self


class EventEmitter(EventEmitterMixin):
    """Concrete event emitter."""

    def __init__(self) -> None:
        self._event_slots = {}
        self._forward_targets = []

    def __repr__(self) -> str:
        return f"<EventEmitter events={len(self._event_slots)} forwards={len(self._forward_targets)}>"
