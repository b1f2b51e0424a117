"""
alphabet.py - Invisible Ternary Alphabet

This module defines the fixed bijection between three invisible Unicode
control characters and the ternary digit symbols "0", "1" and "2". Every
hidden character is written into a carrier gap as a run of these three
characters, one per base-3 digit.

Default Mapping:
    LEFT-TO-RIGHT MARK  (U+200E) → '0'
    RIGHT-TO-LEFT MARK  (U+200F) → '1'
    ARABIC LETTER MARK  (U+061C) → '2'

The three bidi *marks* are used rather than embeddings or isolates because
a mark is a zero-width character that opens no directional scope: an
unmatched LRE or RLI would change how the rest of the carrier is displayed,
a stray LRM does not.

Any other set of three distinct format (category Cf) characters may be used
instead, as long as the carrier never contains them.
"""

import unicodedata
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterable, Optional, Tuple, Union

try:
    from .errors import InvalidAlphabet, InvalidDigitSequence
except ImportError:
    from errors import InvalidAlphabet, InvalidDigitSequence

# ═══════════════════════════════════════════════════════════════════════════════
# UNICODE BIDIRECTIONAL FORMATTING CHARACTERS
# ═══════════════════════════════════════════════════════════════════════════════

LEFT_TO_RIGHT_MARK = "\u200e"
RIGHT_TO_LEFT_MARK = "\u200f"
ARABIC_LETTER_MARK = "\u061c"

# Every character with an explicit bidi formatting role (UAX #9, Table 1).
BIDI_FORMAT_CHARS: FrozenSet[str] = frozenset(
    {
        "\u061c",  # ARABIC LETTER MARK
        "\u200e",  # LEFT-TO-RIGHT MARK
        "\u200f",  # RIGHT-TO-LEFT MARK
        "\u202a",  # LEFT-TO-RIGHT EMBEDDING
        "\u202b",  # RIGHT-TO-LEFT EMBEDDING
        "\u202c",  # POP DIRECTIONAL FORMATTING
        "\u202d",  # LEFT-TO-RIGHT OVERRIDE
        "\u202e",  # RIGHT-TO-LEFT OVERRIDE
        "\u2066",  # LEFT-TO-RIGHT ISOLATE
        "\u2067",  # RIGHT-TO-LEFT ISOLATE
        "\u2068",  # FIRST STRONG ISOLATE
        "\u2069",  # POP DIRECTIONAL ISOLATE
    }
)

DIGITS: Tuple[str, str, str] = ("0", "1", "2")


# ═══════════════════════════════════════════════════════════════════════════════
# ALPHABET MAPPING
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class BidiAlphabet:
    """
    Immutable two-way lookup between control characters and ternary digits.

    ``chars[d]`` is the control character written for digit ``d``. The
    reverse table is built once at construction time, so both directions
    are plain dictionary lookups.

    Attributes:
        chars: The three control characters, in digit order 0, 1, 2
        foreign_controls: Bidi formatting characters that are *not* in this
            alphabet; the decoder rejects them instead of treating them as
            carrier text.

    Example:
        >>> alphabet = BidiAlphabet()
        >>> alphabet.symbol_to_char("2") == ARABIC_LETTER_MARK
        True
        >>> alphabet.char_to_symbol("x") is None
        True
    """

    chars: Tuple[str, str, str] = (LEFT_TO_RIGHT_MARK, RIGHT_TO_LEFT_MARK, ARABIC_LETTER_MARK)
    foreign_controls: FrozenSet[str] = field(init=False, repr=False, compare=False)
    _to_symbol: Dict[str, str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        chars = tuple(self.chars)
        if len(chars) != 3:
            raise InvalidAlphabet(self.chars, f"expected exactly 3 characters, got {len(chars)}")
        for char in chars:
            if not isinstance(char, str) or len(char) != 1:
                raise InvalidAlphabet(self.chars, f"{char!r} is not a single character")
            if unicodedata.category(char) != "Cf":
                raise InvalidAlphabet(
                    self.chars, f"U+{ord(char):04X} is not an invisible format character"
                )
        if len(set(chars)) != 3:
            raise InvalidAlphabet(self.chars, "characters must be mutually distinct")

        # frozen dataclass: derived fields are set through object.__setattr__
        object.__setattr__(self, "chars", chars)
        object.__setattr__(self, "_to_symbol", dict(zip(chars, DIGITS)))
        object.__setattr__(self, "foreign_controls", BIDI_FORMAT_CHARS - frozenset(chars))

    @classmethod
    def from_chars(cls, chars: Iterable[str]) -> "BidiAlphabet":
        """Build an alphabet from any iterable of three characters (e.g. a 3-char string)."""
        return cls(tuple(chars))

    # ─────────────────────────────────────────────────────────────────────────
    # LOOKUPS
    # ─────────────────────────────────────────────────────────────────────────

    def symbol_to_char(self, digit: Union[str, int]) -> str:
        """
        Map a ternary digit to its control character.

        Args:
            digit: "0", "1" or "2" (the ints 0, 1 and 2 are accepted too)

        Raises:
            InvalidDigitSequence: For any other symbol.
        """
        if isinstance(digit, int) and not isinstance(digit, bool) and 0 <= digit <= 2:
            return self.chars[digit]
        if isinstance(digit, str) and digit in DIGITS:
            return self.chars[int(digit)]
        raise InvalidDigitSequence(digit, "symbol is not a ternary digit")

    def char_to_symbol(self, char: str) -> Optional[str]:
        """Return the digit for a control character, or None if it is not in the alphabet."""
        return self._to_symbol.get(char)

    def is_control(self, char: str) -> bool:
        """Check if a character belongs to this alphabet."""
        return char in self._to_symbol

    def is_foreign_control(self, char: str) -> bool:
        """Check if a character is a bidi formatting character outside this alphabet."""
        return char in self.foreign_controls

    def contains_controls(self, text: str) -> bool:
        """Quick check if text contains any character of this alphabet."""
        return any(c in self._to_symbol for c in text)


DEFAULT_ALPHABET = BidiAlphabet()
