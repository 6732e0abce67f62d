"""CAN frame records, the per-port frame ring and the log-file filter."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

CAN_MAX_DATA = 8
MAX_LOGGED_MESSAGES_PER_PORT = 300
LOG_FILE_NAME = "canlog.log"
ROTATED_LOG_FILE_NAME = "canlog.ctb"


class LoggerPort(IntEnum):
    """Which CAN ports are written to the log file."""

    PORT_1 = 0
    PORT_2 = 1
    BOTH = 2

    def cycle(self) -> LoggerPort:
        """The selection that follows this one: port 1, port 2, both, port 1."""
        if self is LoggerPort.PORT_1:
            return LoggerPort.PORT_2
        if self is LoggerPort.PORT_2:
            return LoggerPort.BOTH
        return LoggerPort.PORT_1


@dataclass(frozen=True)
class CanMessage:
    """A CAN frame as delivered by the bus driver."""

    can_id: int
    data: bytes = b""
    extended: bool = False
    timestamp_us: int = 0

    def __post_init__(self) -> None:
        if len(self.data) > CAN_MAX_DATA:
            raise ValueError(
                f"CAN data holds at most {CAN_MAX_DATA} bytes, got {len(self.data)}"
            )
        if self.can_id < 0:
            raise ValueError(f"CAN id must not be negative, got {self.can_id}")
        if self.timestamp_us < 0:
            raise ValueError(f"timestamp must not be negative, got {self.timestamp_us}")


@dataclass(frozen=True)
class CanRecord:
    """A logged frame: bus number, time, id, direction and data."""

    bus: int = 0
    time_us: int = 0
    can_id: int = 0
    extended: bool = False
    transmit: bool = False
    data: bytes = b""

    @classmethod
    def received(cls, port: int, message: CanMessage) -> CanRecord:
        """Record of a received frame, timed by the driver's timestamp."""
        return cls(
            bus=int(port),
            time_us=message.timestamp_us,
            can_id=message.can_id,
            extended=message.extended,
            transmit=False,
            data=bytes(message.data),
        )

    @classmethod
    def transmitted(cls, port: int, message: CanMessage, now_us: int) -> CanRecord:
        """Record of a transmitted frame, timed at ``now_us``."""
        return cls(
            bus=int(port),
            time_us=now_us,
            can_id=message.can_id,
            extended=message.extended,
            transmit=True,
            data=bytes(message.data),
        )


def format_time(micros: int) -> str:
    """Seconds and milliseconds, the seconds right-aligned in seven columns."""
    if micros < 0:
        raise ValueError(f"time must not be negative, got {micros}")
    return f"{micros // 1_000_000:7d}.{(micros % 1_000_000) // 1000:03d}"


def format_record(record: CanRecord) -> tuple[str, str, str, tuple[str, ...]]:
    """Display columns of a record: time, direction, hex id and hex data bytes."""
    direction = "T" if record.transmit else "R"
    return (
        format_time(record.time_us),
        direction,
        f"{record.can_id:X}",
        tuple(f"{byte:02X}" for byte in record.data),
    )


def should_log(record: CanRecord, recording: bool, logger_port: LoggerPort) -> bool:
    """True when ``record`` belongs in the log file."""
    if not recording:
        return False
    port = LoggerPort(logger_port)
    if port is LoggerPort.PORT_1 and record.bus != 0:
        return False
    if port is LoggerPort.PORT_2 and record.bus != 1:
        return False
    return True


class FrameRing:
    """A fixed circular store of the most recent records of one port."""

    def __init__(self, capacity: int = MAX_LOGGED_MESSAGES_PER_PORT) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self._slots: list[CanRecord | None] = [None] * capacity
        self._write = 0
        self._count = 0

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def append(self, record: CanRecord) -> None:
        """Store ``record``, overwriting the oldest once the ring is full."""
        self._slots[self._write] = record
        self._write = (self._write + 1) % len(self._slots)
        self._count = min(self._count + 1, len(self._slots))

    def latest(self, count: int, offset: int = 0) -> list[CanRecord | None]:
        """``count`` slots newest first, starting ``offset`` records back.

        Slots never written are returned as None.
        """
        if count < 0 or offset < 0:
            raise ValueError("count and offset must not be negative")
        capacity = len(self._slots)
        index = (self._write - offset) % capacity
        rows: list[CanRecord | None] = []
        for _ in range(count):
            index = (index - 1) % capacity
            rows.append(self._slots[index])
        return rows

    def __len__(self) -> int:
        return self._count