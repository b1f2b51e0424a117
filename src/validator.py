"""
validator.py - Input Contract Checks

Classifies codec inputs and raises the typed failures from errors.py. The
encode-side checks run before any output is produced, so encode either fully
succeeds or fails without partial results. The decoder calls check_gap_char
for every character that is not part of the alphabet. No check modifies its
input.
"""

import logging
import unicodedata

try:
    from .alphabet import BidiAlphabet
    from .errors import CapacityExceeded, InvalidCharacter, InvalidCodepoint
    from .ternary import SURROGATE_MAX, SURROGATE_MIN
except ImportError:
    from alphabet import BidiAlphabet
    from errors import CapacityExceeded, InvalidCharacter, InvalidCodepoint
    from ternary import SURROGATE_MAX, SURROGATE_MIN

logger = logging.getLogger(__name__)


def gap_count(carrier: str) -> int:
    """Number of gaps between adjacent carrier characters (0 for an empty carrier)."""
    return max(len(carrier) - 1, 0)


def check_capacity(carrier: str, hidden: str) -> None:
    """Raise CapacityExceeded if hidden has more characters than carrier has gaps."""
    available = gap_count(carrier)
    if len(hidden) > available:
        logger.debug("Capacity check failed: %d required, %d available", len(hidden), available)
        raise CapacityExceeded(len(hidden), available)


def _check_scalar_values(text: str) -> None:
    for index, char in enumerate(text):
        if SURROGATE_MIN <= ord(char) <= SURROGATE_MAX:
            raise InvalidCodepoint(ord(char), index)


def check_hidden(hidden: str) -> None:
    """Raise InvalidCodepoint if the hidden message holds a lone surrogate."""
    _check_scalar_values(hidden)


def is_format_char(char: str) -> bool:
    """Check if a character is an invisible format character (category Cf)."""
    return unicodedata.category(char) == "Cf"


def _run_resumes(text: str, start: int, alphabet: BidiAlphabet) -> bool:
    # skip further format characters; the run resumes if an alphabet member follows
    index = start
    while (
        index < len(text)
        and is_format_char(text[index])
        and not alphabet.is_control(text[index])
    ):
        index += 1
    return index < len(text) and alphabet.is_control(text[index])


def check_gap_char(text: str, position: int, alphabet: BidiAlphabet, in_gap: bool) -> None:
    """
    Classify a non-alphabet character met by the decoder.

    Bidi formatting characters outside the alphabet are rejected wherever
    they appear. Any other format character is rejected when it sits inside
    a run, i.e. right after alphabet characters and followed (possibly via
    more format characters) by another alphabet member. Left in place it
    would split one encoded slot into two hidden characters.

    Args:
        text: The text being scanned
        position: Index of the character to classify
        alphabet: The alphabet the text was encoded with
        in_gap: True if the scan is inside a run of alphabet characters

    Raises:
        InvalidCharacter: If the character cannot be carrier text.
    """
    char = text[position]
    if alphabet.is_foreign_control(char):
        logger.debug("Rejecting U+%04X at position %d", ord(char), position)
        raise InvalidCharacter(
            char, position, "bidi formatting character is not part of the alphabet"
        )
    if in_gap and is_format_char(char) and _run_resumes(text, position + 1, alphabet):
        logger.debug("Rejecting U+%04X inside a run at position %d", ord(char), position)
        raise InvalidCharacter(char, position, "format character splits an encoded slot")


def check_carrier(carrier: str, alphabet: BidiAlphabet, gaps_used: int = 0) -> None:
    """
    Make sure a carrier survives a round trip.

    A carrier that already contains alphabet characters would have them read
    back as hidden data, and one containing other bidi formatting characters
    would be rejected by the decoder, so both are refused up front. Other
    format characters (ZWJ, ZWSP, soft hyphen, ...) are fine unless they
    would end up between two filled gaps, where the decoder cannot tell them
    from a corrupted slot: carrier index i is enclosed by gaps i - 1 and i,
    both filled when 1 <= i < gaps_used.

    Args:
        carrier: The visible text
        alphabet: The alphabet used for encoding
        gaps_used: Number of gaps that will hold a slot (the hidden length)

    Raises:
        InvalidCharacter: For alphabet members, foreign bidi controls, or
            format characters enclosed by two filled gaps.
        InvalidCodepoint: For lone surrogates.
    """
    for position, char in enumerate(carrier):
        if alphabet.is_control(char):
            raise InvalidCharacter(char, position, "carrier contains an alphabet character")
        if alphabet.is_foreign_control(char):
            raise InvalidCharacter(char, position, "carrier contains a bidi formatting character")
        if 1 <= position < gaps_used and is_format_char(char):
            raise InvalidCharacter(
                char, position, "format character would sit between two encoded slots"
            )
    _check_scalar_values(carrier)


def validate_encode_inputs(carrier: str, hidden: str, alphabet: BidiAlphabet) -> None:
    """Run every pre-encode check: types, capacity, carrier, hidden message."""
    if not isinstance(carrier, str):
        raise TypeError(f"carrier must be a str, not {type(carrier).__name__}")
    if not isinstance(hidden, str):
        raise TypeError(f"hidden must be a str, not {type(hidden).__name__}")
    check_capacity(carrier, hidden)
    check_carrier(carrier, alphabet, len(hidden))
    check_hidden(hidden)
