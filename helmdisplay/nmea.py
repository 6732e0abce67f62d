"""NMEA 0183 field extraction and sentence decoding."""

from __future__ import annotations

import re

KNOTS_PER_KMH = 1 / 1.852

_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def _leading_float(text: str) -> float:
    """Parse the leading number of ``text`` the way ``atof`` does, 0.0 if none."""
    match = _FLOAT_PREFIX.match(text)
    return float(match.group(1)) if match else 0.0


def extract_field(sentence: str, index: int, max_length: int = 255) -> str | None:
    """Return comma-separated field ``index`` of ``sentence``, or None if absent.

    A field followed by another comma is returned even when empty; the last
    field is returned only when it holds at least one character. The result
    holds at most ``max_length - 1`` characters.
    """
    if not 0 <= index <= 255:
        raise ValueError(f"field index must be within 0..255, got {index}")
    if max_length < 1:
        raise ValueError(f"max_length must be positive, got {max_length}")

    sentence = sentence.split("\0", 1)[0]
    next_field = (index + 1) & 0xFF
    found = index == 0
    start = 0
    length = 0
    commas = 0
    for position, char in enumerate(sentence):
        if char == ",":
            commas += 1
            if commas == index:
                start = position + 1
                found = True
            elif commas == next_field:
                complete = True
                break
        elif found:
            length += 1
    else:
        complete = found and length != 0

    if not complete:
        return None
    length = min(length, max_length - 1)
    return sentence[start:start + length]


def process_vtg(sentence: str) -> float | None:
    """Decode a VTG sentence and return ground speed in knots, or None.

    The knots field is preferred; the km/h field is used when it is missing.
    """
    knots = extract_field(sentence, 5)
    if knots is not None:
        return _leading_float(knots)
    kmh = extract_field(sentence, 7)
    if kmh is not None:
        return _leading_float(kmh) * KNOTS_PER_KMH
    return None