"""Parsing of the PVCI control-system status line."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace

MAX_FIELDS = 50
MAX_FIELD_CHARS = 3
LCD_CONFIG = 3

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


def _leading_int(text: str) -> int:
    """Parse the leading integer of ``text`` the way ``atoi`` does, 0 if none."""
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def _trunc_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


def _centred_position(raw: int) -> int:
    return _trunc_div(_trunc_div(raw * 1000, 999) - 500, 50)


def _one_sided_position(raw: int) -> int:
    return _trunc_div(_trunc_div(raw * 1000, 999), 50)


@dataclass(frozen=True)
class PvciStatus:
    """Actuator positions and fault bytes decoded from a PVCI line."""

    port_bucket: int = 0
    stbd_bucket: int = 0
    port_nozzle: int = 0
    stbd_nozzle: int = 0
    port_interceptor: int = 0
    stbd_interceptor: int = 0
    sfe: int = 0
    nfe: int = 0
    sta1: int = 0
    sta2: int = 0
    sta3: int = 0
    cfe: int = 0
    gal: int = 0
    lcd_config: int = 1

    def has_alarm(self) -> bool:
        """True once any station or feedback fault has raised the general alarm."""
        return self.gal != 0


def split_fields(line: str) -> list[str]:
    """Split ``line`` on commas, keeping at most three characters per field."""
    fields = [""]
    for char in line:
        if char == ",":
            if len(fields) == MAX_FIELDS:
                break
            fields.append("")
        elif len(fields[-1]) < MAX_FIELD_CHARS:
            fields[-1] += char
    return fields


def parse_pvci(line: str, previous: PvciStatus | None = None) -> PvciStatus:
    """Decode a PVCI line, carrying over values the line does not update."""
    previous = previous if previous is not None else PvciStatus()
    fields = split_fields(line)
    raw = [_leading_int(field) for field in fields]
    raw += [0] * (MAX_FIELDS - len(raw))

    status = replace(
        previous,
        port_bucket=_centred_position(raw[1]),
        stbd_bucket=_centred_position(raw[2]),
        port_nozzle=_centred_position(raw[3]),
        stbd_nozzle=_centred_position(raw[4]),
        port_interceptor=_one_sided_position(raw[5]),
        stbd_interceptor=_one_sided_position(raw[6]),
        sfe=raw[7] & 0xFF,
        nfe=raw[8] & 0xFF,
        sta1=raw[9] & 0xFF,
        lcd_config=LCD_CONFIG,
    )
    if status.sfe | status.nfe | status.sta1 | status.sta2 | status.sta3:
        status = replace(status, gal=1)
    return status