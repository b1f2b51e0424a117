"""
errors.py - Typed Failures for the Bidi Steganography Codec

Every failure the codec can produce is caused by caller-supplied data, so
each one is a ValueError subclass carrying enough structured detail to point
at the offending input. Nothing here is retryable: fix the input instead.

Hierarchy:
    SteganoError (ValueError)
        CapacityExceeded      - hidden message longer than the carrier's gaps
        InvalidCodepoint      - integer outside the Unicode scalar range
        InvalidDigitSequence  - empty or malformed base-3 digit string
        InvalidCharacter      - foreign control character found in text
        InvalidAlphabet       - unusable alphabet override
"""

from typing import Any, Dict, Optional


class SteganoError(ValueError):
    """Base class for all codec failures."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return self.message


class CapacityExceeded(SteganoError):
    """
    The hidden message needs more gaps than the carrier provides.

    Attributes:
        required: Number of gaps the hidden message needs (its length)
        available: Number of gaps in the carrier (len(carrier) - 1, or 0)
    """

    def __init__(self, required: int, available: int):
        super().__init__(
            f"Hidden message needs {required} gap(s) but carrier only has {available}",
            {"required": required, "available": available},
        )
        self.required = required
        self.available = available


class InvalidCodepoint(SteganoError):
    """An integer is not a Unicode scalar value (negative, too large, or a surrogate)."""

    def __init__(self, value: int, index: Optional[int] = None):
        where = f" at index {index}" if index is not None else ""
        super().__init__(
            f"Invalid Unicode scalar value {value:#x}{where}",
            {"value": value, "index": index},
        )
        self.value = value
        self.index = index


class InvalidDigitSequence(SteganoError):
    """A ternary digit string is empty or contains a symbol outside {0, 1, 2}."""

    def __init__(self, digits: Any, reason: str):
        super().__init__(f"Invalid ternary digit sequence {digits!r}: {reason}", {"digits": digits})
        self.digits = digits
        self.reason = reason


class InvalidCharacter(SteganoError):
    """
    A character cannot appear where it was found.

    Raised by the decoder for bidi formatting characters that are not part
    of the alphabet, and by the encoder for carriers that already contain
    control characters (those would not survive a round trip).

    Attributes:
        char: The offending character
        position: Index of the character in the scanned string, if known
    """

    def __init__(self, char: str, position: Optional[int] = None, reason: str = ""):
        label = f"U+{ord(char):04X}" if len(char) == 1 else repr(char)
        where = f" at position {position}" if position is not None else ""
        message = f"Invalid character {label}{where}"
        if reason:
            message += f": {reason}"
        super().__init__(message, {"char": char, "position": position})
        self.char = char
        self.position = position


class InvalidAlphabet(SteganoError):
    """An alphabet override does not consist of three distinct invisible characters."""

    def __init__(self, chars: Any, reason: str):
        super().__init__(f"Invalid alphabet {chars!r}: {reason}", {"chars": chars})
        self.chars = chars
        self.reason = reason
