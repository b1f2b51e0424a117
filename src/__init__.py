"""
bidi-stegano: Invisible Ternary Steganography with Bidi Marks

This package hides an arbitrary Unicode message inside visible text. Each
hidden character is written, as base-3 digits, into a gap between two
carrier characters using three invisible bidirectional marks. The result
displays exactly like the carrier and decodes back to (carrier, hidden).

Core Components:
    - alphabet: The three control characters and their digit mapping
    - ternary: Codepoint <-> base-3 conversion
    - interleaver: Splices encoded slots into carrier gaps
    - extractor: Scans interleaved text back into carrier and message
    - validator: Capacity, carrier and decode-side character checks
    - stegano_core: Engine facade and module-level encode/decode

Example:
    >>> from bidi_stegano import encode, decode
    >>> text = encode("VISIBLE", "HIDDEN")
    >>> decode(text)
    DecodeResult(carrier='VISIBLE', hidden='HIDDEN')

License: MIT
"""

__version__ = "1.0.0"

from .alphabet import BIDI_FORMAT_CHARS, DEFAULT_ALPHABET, BidiAlphabet
from .errors import (
    CapacityExceeded,
    InvalidAlphabet,
    InvalidCharacter,
    InvalidCodepoint,
    InvalidDigitSequence,
    SteganoError,
)
from .extractor import DecodeResult, Slot
from .stegano_core import BidiSteganoEngine, EncodeResult, decode, encode
from .ternary import from_ternary, to_ternary

__all__ = [
    "BIDI_FORMAT_CHARS",
    "DEFAULT_ALPHABET",
    "BidiAlphabet",
    "BidiSteganoEngine",
    "CapacityExceeded",
    "DecodeResult",
    "EncodeResult",
    "InvalidAlphabet",
    "InvalidCharacter",
    "InvalidCodepoint",
    "InvalidDigitSequence",
    "Slot",
    "SteganoError",
    "decode",
    "encode",
    "from_ternary",
    "to_ternary",
]
