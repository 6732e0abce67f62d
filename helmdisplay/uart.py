"""Receive queue that splits serial bytes into NMEA-style messages."""

from __future__ import annotations

import threading
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum

from .nmea import process_vtg

MAX_MESSAGE_SIZE = 120
MAX_MESSAGES = 255

_UINT32 = 0xFFFFFFFF
_WHITESPACE = " \t\n\v\f\r"


class PeekMode(Enum):
    """Where a peek index is counted from."""

    HEAD = "head"
    TAIL = "tail"
    ABSOLUTE = "absolute"


@dataclass(frozen=True)
class QueueInfo:
    """Snapshot of the queue's indices."""

    size: int
    next_read: int
    next_write: int


class MessageQueue:
    """A fixed ring of received text messages with decoding handlers."""

    def __init__(
        self,
        size: int = MAX_MESSAGES,
        max_message_size: int = MAX_MESSAGE_SIZE,
        handlers: Mapping[str, Callable[[str], object]] | None = None,
    ) -> None:
        if size < 1:
            raise ValueError(f"queue size must be positive, got {size}")
        if max_message_size < 2:
            raise ValueError(f"message size must be at least 2, got {max_message_size}")
        self._size = size
        self._max_message_size = max_message_size
        self._handlers = dict(handlers) if handlers is not None else {"VTG": process_vtg}
        self._messages = [""] * size
        self._pending: list[str] = []
        self._next_read = 0
        self._next_write = 0
        self._lock = threading.RLock()

    def feed(self, data: bytes) -> None:
        """Consume raw bytes, queueing each CR- or LF-terminated message."""
        for char in bytes(data).decode("latin-1"):
            if char in "\r\n":
                self._store("".join(self._pending).split("\0", 1)[0])
                self._pending.clear()
            elif self._pending or char not in _WHITESPACE:
                self._pending.append(char)
                # a message that fills the buffer without a terminator is dropped
                if len(self._pending) == self._max_message_size:
                    self._pending.clear()

    def _store(self, message: str) -> None:
        with self._lock:
            if self._next_write + 1 == self._next_read:
                self._next_read = (self._next_read + 1) % self._size
            self._messages[self._next_write] = message
            self._next_write = (self._next_write + 1) % self._size

    def decode_next(self) -> bool:
        """Hand the next unread message to its handler; False if none was waiting."""
        with self._lock:
            if self._next_read == self._next_write:
                return False
            message = self._messages[self._next_read]
            if len(message) > 6 and message[0] in "$!" and message[1] != message[0]:
                for msg_id, handler in self._handlers.items():
                    if message[3:6] == msg_id[:3]:
                        handler(message)
            self._next_read = (self._next_read + 1) % self._size
            return True

    def decode_all(self) -> int:
        """Decode every waiting message and return how many were processed."""
        count = 0
        while self.decode_next():
            count += 1
        return count

    def peek(self, mode: PeekMode, index: int) -> str | None:
        """Return a copy of a queued message, or None if the slot is out of range."""
        with self._lock:
            if mode is PeekMode.ABSOLUTE:
                slot = index & _UINT32
            elif mode is PeekMode.HEAD:
                slot = ((self._next_read + index) & _UINT32) % self._size
            elif mode is PeekMode.TAIL:
                slot = ((self._next_write + self._size - index) & _UINT32) % self._size
            else:
                raise ValueError(f"invalid peek mode: {mode!r}")
            if slot < self._size:
                return self._messages[slot]
            return None

    def queue_info(self) -> QueueInfo:
        """Return the current size and read/write indices."""
        with self._lock:
            return QueueInfo(self._size, self._next_read, self._next_write)