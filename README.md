# helmdisplay

The logic behind a small marine helm display, written so that it runs without a
screen, a serial port or a CAN bus. Everything is plain Python objects and
functions that you feed with bytes, strings and numbers.

## Install

```
pip install .
```

To run the tests, install the `test` extra:

```
pip install .[test]
pytest
```

## Serial messages (`helmdisplay.uart`)

`MessageQueue(size=255, max_message_size=120, handlers=None)` is a fixed ring of
received text messages.

- `feed(data)` takes raw bytes. A CR or LF ends a message (so CR LF leaves an
  empty message between two real ones). Leading whitespace is skipped, and a
  message that reaches `max_message_size` characters without a terminator is
  thrown away. When the ring is full the oldest unread message is dropped.
- `decode_next()` passes the next unread message to its handler and returns
  `False` when nothing was waiting. A message is handled only if it is longer
  than six characters, starts with `$` or `!`, and its second character differs
  from its first; the handler is chosen by the three characters at positions 3–5
  (for `$GPVTG,...` that is `VTG`). By default the only handler is
  `helmdisplay.nmea.process_vtg`, whose result is discarded.
- `decode_all()` decodes every waiting message and returns how many there were.
- `peek(mode, index)` returns a copy of a stored message without removing it.
  `PeekMode.HEAD` counts from the next unread slot, `PeekMode.TAIL` counts back
  from the next write slot, and `PeekMode.ABSOLUTE` names a slot directly. It
  returns `None` when the slot is outside the ring.
- `queue_info()` returns a `QueueInfo(size, next_read, next_write)` snapshot.

```python
from helmdisplay.nmea import process_vtg
from helmdisplay.uart import MessageQueue

speeds = []
queue = MessageQueue(handlers={"VTG": lambda s: speeds.append(process_vtg(s))})
queue.feed(b"$GPVTG,054.7,T,034.4,M,005.5,N,010.2,K*48\r")
queue.decode_all()   # 1
speeds               # [5.5]
```

## NMEA 0183 (`helmdisplay.nmea`)

- `extract_field(sentence, index, max_length=255)` returns comma-separated field
  `index` (0 to 255) or `None`. A field followed by another comma is returned
  even when it is empty; the last field is returned only when it holds at least
  one character. The result is cut to `max_length - 1` characters.
- `process_vtg(sentence)` returns the ground speed in knots from a VTG
  sentence. It reads the knots field (field 5) first and falls back to the km/h
  field (field 7) converted to knots; it returns `None` when neither is present.

## PVCI status lines (`helmdisplay.pvci`)

- `split_fields(line)` splits a line on commas into at most 50 fields, keeping
  the first three characters of each.
- `parse_pvci(line, previous=None)` returns a frozen `PvciStatus`: fields 1–4
  become the port/starboard bucket and nozzle positions, fields 5–6 the
  interceptor positions, and fields 7–9 the `sfe`, `nfe` and `sta1` fault bytes.
  Values the line does not carry (`sta2`, `sta3`, `cfe`) come from `previous`.
  `lcd_config` is set to 3, and `gal` is set to 1 once any of `sfe`, `nfe`,
  `sta1`, `sta2` or `sta3` is non-zero.
- `PvciStatus.has_alarm()` is true when `gal` is set.

## Passcode entry (`helmdisplay.passcode`)

`PasscodeEntry(secret="1123")` collects digits one press at a time. `press(digit)`
returns the slot the digit went into; a press after a full-length code starts a
fresh entry. `clear()` forgets the digits, `is_unlocked()` compares them with the
secret, and `destination(target)` returns the `PasscodeTarget`
(`CALIBRATION` or `SYSTEM_OPTIONS`) once unlocked, or `None` while still locked.

## CAN frames (`helmdisplay.canlog`)

- `CanMessage(can_id, data=b"", extended=False, timestamp_us=0)` is a frame from
  the bus driver; it rejects more than eight data bytes and negative ids or
  timestamps.
- `CanRecord.received(port, message)` records a received frame at the driver's
  timestamp; `CanRecord.transmitted(port, message, now_us)` records a sent frame
  at `now_us`.
- `FrameRing(capacity=300)` keeps the most recent records of one port.
  `append(record)` overwrites the oldest once full, `latest(count, offset=0)`
  returns `count` slots newest first starting `offset` records back (unwritten
  slots are `None`), and `len()` counts the records stored.
- `format_time(micros)` gives seconds and milliseconds with the seconds
  right-aligned in seven columns; `format_record(record)` gives the time,
  `T`/`R` direction, hex id and hex data bytes.
- `should_log(record, recording, logger_port)` says whether a record belongs in
  the log file for the chosen `LoggerPort` (`PORT_1`, `PORT_2` or `BOTH`;
  `LoggerPort.cycle()` steps through them in that order).

## Viewers (`helmdisplay.viewers`)

- `uart_viewer_header(queue)` gives the heading with the queue's read and write
  indices.
- `uart_viewer_lines(queue, rows)` gives the last `rows` ring slots, top row
  first, ending at the slot before the next write.
- `DatabasePager(item_count, items_per_page=9, instance_count=1)` pages through
  database items: `page_down()` and `page_up()` wrap around, `next_instance()`
  cycles the device instance, `visible_indices()` is the range shown,
  `page_label()` reads like `Page 1 of 3`, and `title()` reads like
  `DB Viewer (1)`.

## What it does not do

The package holds logic only. It does not open a serial port or a CAN
interface, draw anything on a screen, or write log files: `should_log` decides
whether a record belongs in the log, but writing it is left to the caller.
There is no keypad or button-bar handling, no screen navigation, and no
command-line program.