"""
stegano_core.py - Bidi-Mark Ternary Steganography Engine

This module ties the codec together: it hides an arbitrary Unicode message
inside a visible carrier string by writing each hidden character, as base-3
digits, into the gap between two carrier characters. The digits are
invisible bidirectional marks, so the result displays exactly like the
carrier.

Encoding Scheme:
    LEFT-TO-RIGHT MARK (U+200E) → ternary '0'
    RIGHT-TO-LEFT MARK (U+200F) → ternary '1'
    ARABIC LETTER MARK (U+061C) → ternary '2'

    "VISIBLE" + "HIDDEN"  →  V[H]I[I]S[D]I[D]B[E]L[N]E

    where [H] is the run for ord("H") = 72 = 2200₃, i.e. ALM ALM LRM LRM.

Capacity:
    A carrier of N characters has N - 1 gaps and can hold up to N - 1 hidden
    characters. No header or terminator is spent: the visible characters
    delimit the runs.

Security Note:
    This is concealment, not encryption. Anyone who knows the alphabet can
    read the message, and any process that strips or normalises format
    characters destroys it.
"""

import hashlib
from dataclasses import dataclass
from typing import List, Optional

try:
    from .alphabet import DEFAULT_ALPHABET, BidiAlphabet
    from .extractor import DecodeResult, Slot, extract, scan_slots
    from .interleaver import interleave
    from .validator import gap_count
except ImportError:
    from alphabet import DEFAULT_ALPHABET, BidiAlphabet
    from extractor import DecodeResult, Slot, extract, scan_slots
    from interleaver import interleave
    from validator import gap_count


# ═══════════════════════════════════════════════════════════════════════════════
# DATA CLASSES FOR STRUCTURED RESULTS
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class EncodeResult:
    """
    Result of embedding a hidden message into a carrier.

    Attributes:
        text: The interleaved text (carrier plus invisible runs)
        gaps_used: Number of gaps holding a run (the hidden message length)
        capacity: Number of gaps the carrier offers
        invisible_length: Number of control characters added
        checksum: SHA-256 prefix of the hidden message (for integrity checks)
    """

    text: str
    gaps_used: int
    capacity: int
    invisible_length: int
    checksum: str

    def __len__(self) -> int:
        """Returns the length of the interleaved text."""
        return len(self.text)


def hidden_checksum(hidden: str) -> str:
    """First 16 hex digits of the SHA-256 of the UTF-8 encoded message."""
    return hashlib.sha256(hidden.encode("utf-8")).hexdigest()[:16]


# ═══════════════════════════════════════════════════════════════════════════════
# MAIN STEGANOGRAPHY ENGINE
# ═══════════════════════════════════════════════════════════════════════════════


class BidiSteganoEngine:
    """
    Core engine for bidi-mark steganographic encoding and decoding.

    Example:
        >>> engine = BidiSteganoEngine()
        >>> text = engine.encode("VISIBLE", "HIDDEN")
        >>> print(text)  # Looks identical to "VISIBLE"
        VISIBLE
        >>> engine.decode(text)
        DecodeResult(carrier='VISIBLE', hidden='HIDDEN')

    Thread Safety:
        This class is stateless and thread-safe. The alphabet is immutable
        and all methods are pure functions of their arguments.
    """

    def __init__(self, alphabet: Optional[BidiAlphabet] = None):
        """
        Initialize the steganography engine.

        Args:
            alphabet: Optional custom alphabet. Uses DEFAULT_ALPHABET if None.
        """
        self._alphabet = alphabet or DEFAULT_ALPHABET

    @property
    def alphabet(self) -> BidiAlphabet:
        return self._alphabet

    # ─────────────────────────────────────────────────────────────────────────
    # ENCODING: Carrier + Hidden → Interleaved Text
    # ─────────────────────────────────────────────────────────────────────────

    def encode(self, carrier: str, hidden: str) -> str:
        """
        Hide a message inside a carrier string.

        Args:
            carrier: The visible text that will carry the hidden message.
            hidden: The message to hide; at most len(carrier) - 1 characters.

        Returns:
            The interleaved text.

        Raises:
            CapacityExceeded: If hidden does not fit into the carrier's gaps.
            InvalidCharacter: If the carrier already contains control characters,
                or a format character that would sit between two filled gaps.
            InvalidCodepoint: If either string contains a lone surrogate.
        """
        return interleave(carrier, hidden, self._alphabet)

    def embed(self, carrier: str, hidden: str) -> EncodeResult:
        """
        Encode and report how the carrier's capacity was used.

        Example:
            >>> result = BidiSteganoEngine().embed("VISIBLE", "HIDDEN")
            >>> result.gaps_used, result.capacity
            (6, 6)
        """
        text = self.encode(carrier, hidden)
        return EncodeResult(
            text=text,
            gaps_used=len(hidden),
            capacity=gap_count(carrier),
            invisible_length=len(text) - len(carrier),
            checksum=hidden_checksum(hidden),
        )

    # ─────────────────────────────────────────────────────────────────────────
    # DECODING: Interleaved Text → Carrier + Hidden
    # ─────────────────────────────────────────────────────────────────────────

    def decode(self, text: str) -> DecodeResult:
        """
        Recover the carrier and hidden message from interleaved text.

        Text without any control characters decodes to itself with an empty
        hidden message.

        Raises:
            InvalidCharacter: If the text contains a bidi formatting character
                that is not part of this engine's alphabet, or a format
                character that splits a run.
            InvalidCodepoint: If a run decodes to a value outside the Unicode
                scalar range.
        """
        return extract(text, self._alphabet)

    def slots(self, text: str) -> List[Slot]:
        """List the decoded runs of interleaved text with their gap indices."""
        return scan_slots(text, self._alphabet)

    # ─────────────────────────────────────────────────────────────────────────
    # UTILITY
    # ─────────────────────────────────────────────────────────────────────────

    def capacity(self, carrier: str) -> int:
        """Maximum hidden message length the carrier can hold."""
        return gap_count(carrier)

    def has_hidden(self, text: str) -> bool:
        """
        Quick check if text contains any alphabet control characters.

        This does not validate or decode anything; use decode() for that.
        """
        return self._alphabet.contains_controls(text)

    def strip(self, text: str) -> str:
        """
        Remove all alphabet control characters from text.

        Unlike decode(), this never fails: foreign bidi characters are kept.
        Note that stripping destroys the hidden message.
        """
        return "".join(c for c in text if not self._alphabet.is_control(c))


# ═══════════════════════════════════════════════════════════════════════════════
# MODULE-LEVEL API
# ═══════════════════════════════════════════════════════════════════════════════

_DEFAULT_ENGINE = BidiSteganoEngine()


def _engine_for(alphabet: Optional[BidiAlphabet]) -> BidiSteganoEngine:
    if alphabet is None:
        return _DEFAULT_ENGINE
    return BidiSteganoEngine(alphabet)


def encode(carrier: str, hidden: str, alphabet: Optional[BidiAlphabet] = None) -> str:
    """Hide ``hidden`` in the gaps of ``carrier``. See BidiSteganoEngine.encode."""
    return _engine_for(alphabet).encode(carrier, hidden)


def decode(text: str, alphabet: Optional[BidiAlphabet] = None) -> DecodeResult:
    """Recover (carrier, hidden) from interleaved text. See BidiSteganoEngine.decode."""
    return _engine_for(alphabet).decode(text)
