"""Passcode entry guarding the calibration and system option screens."""

from __future__ import annotations

from enum import IntEnum

CALIBRATION_CODE = "1123"


class PasscodeTarget(IntEnum):
    """Screen the passcode unlocks; the value is that screen's number."""

    CALIBRATION = 4
    SYSTEM_OPTIONS = 3


class PasscodeEntry:
    """Collects digits one key press at a time and checks them against a code."""

    def __init__(self, secret: str = CALIBRATION_CODE) -> None:
        if not secret or not secret.isdigit():
            raise ValueError("passcode must be a non-empty string of digits")
        self._secret = secret
        self._digits: list[str] = []

    @property
    def entered(self) -> str:
        return "".join(self._digits)

    def __len__(self) -> int:
        return len(self._digits)

    def press(self, digit: int | str) -> int:
        """Add a digit and return the slot it went into.

        A press after a full code starts a fresh entry.
        """
        text = str(digit)
        if len(text) != 1 or not text.isdigit():
            raise ValueError(f"not a single digit: {digit!r}")
        if len(self._digits) == len(self._secret):
            self.clear()
        self._digits.append(text)
        return len(self._digits) - 1

    def clear(self) -> None:
        """Forget every digit entered so far."""
        self._digits.clear()

    def is_unlocked(self) -> bool:
        """True when the digits entered match the code."""
        return self.entered == self._secret

    def destination(self, target: PasscodeTarget) -> PasscodeTarget | None:
        """The screen to go to once unlocked, or None while still locked."""
        target = PasscodeTarget(target)
        return target if self.is_unlocked() else None