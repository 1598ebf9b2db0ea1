# message_slot.py
"""Caller-side holder for one message channel."""

from __future__ import annotations

from typing import Callable

from .context import CapabilityContext
from .environment import StatusEnvironment
from .models import Event, Message


Resolver = Callable[[Event, CapabilityContext, StatusEnvironment], Message]


class MessageSlot:
    """Keeps the last resolved message for a channel.

    A message resolved with ``should_keep`` stays in the slot through later
    updates that resolve to nothing, until a shown message replaces it or the
    slot is reset.
    """

    def __init__(self, resolver: Resolver, env: StatusEnvironment) -> None:
        self._resolver = resolver
        self._env = env
        self.current: Message = Message.cleared()

    def reset(self) -> Message:
        self.current = Message.cleared()
        return self.current

    def apply(self, resolved: Message) -> Message:
        if resolved.should_show or not self.current.should_keep:
            self.current = resolved
        return self.current

    def update(self, event: Event, context: CapabilityContext) -> Message:
        return self.apply(self._resolver(event, context, self._env))
