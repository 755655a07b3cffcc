"""Message Store: append-only, process-local list of messages.

Invariants:
    - Best-effort and non-durable: contents are lost on restart
    - Appends are never lost under concurrent callers (guarded by a lock)
    - list_messages() returns a snapshot in insertion order
    - One MessageStore per process, created on startup via init_message_store

Design Decisions:
    - threading.Lock over asyncio.Lock: GraphQL resolvers may run on the event loop
      or in a worker thread, the lock covers both
    - Unrelated to the relational store: no gateway, no session
"""

import logging
import threading

from expense_api.core.domain_types import Message, MessageId, new_identifier

logger = logging.getLogger(__name__)


class MessageStore:
    """Single owner of the in-memory message sequence."""

    def __init__(self):
        self._messages: list[Message] = []
        self._lock = threading.Lock()

    def add_message(self, text: str) -> Message:
        """Append a message with a fresh id and return it."""
        message = Message(id=MessageId(new_identifier()), text=text)
        with self._lock:
            self._messages.append(message)
        logger.info("Message added", extra={"message_id": message.id})
        return message

    def list_messages(self) -> list[Message]:
        with self._lock:
            return list(self._messages)


# Singleton (initialized on startup)
message_store: MessageStore | None = None


def init_message_store() -> MessageStore:
    global message_store
    message_store = MessageStore()
    return message_store


def get_message_store() -> MessageStore:
    """FastAPI dependency for the process-wide message store."""
    if message_store is None:
        raise RuntimeError("Message store not initialized")
    return message_store
