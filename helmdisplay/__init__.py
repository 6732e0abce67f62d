"""Serial queueing, NMEA and PVCI decoding, passcode entry and viewer logic for a marine helm display."""

__version__ = "0.1.0"

__all__ = [
    "canlog",
    "nmea",
    "passcode",
    "pvci",
    "uart",
    "viewers",
]