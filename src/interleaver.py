"""
interleaver.py - Hidden Message Encoder

Splices one encoded slot per hidden character into the gaps of a carrier:

    carrier:  V   I   S   I   B   L   E
    gaps:       0   1   2   3   4   5
    hidden:     H   I   D   D   E   N

Gap i receives the ternary digits of ord(hidden[i]), each digit written as
its alphabet control character. Gaps past the end of the hidden message
stay empty. Visible carrier characters delimit the slots, so no separator
or length header is needed.
"""

import logging
from typing import List

try:
    from .alphabet import BidiAlphabet
    from .ternary import to_ternary
    from .validator import validate_encode_inputs
except ImportError:
    from alphabet import BidiAlphabet
    from ternary import to_ternary
    from validator import validate_encode_inputs

logger = logging.getLogger(__name__)


def encode_slot(char: str, alphabet: BidiAlphabet) -> str:
    """Render one hidden character as its run of invisible control characters."""
    return "".join(alphabet.symbol_to_char(digit) for digit in to_ternary(ord(char)))


def interleave(carrier: str, hidden: str, alphabet: BidiAlphabet) -> str:
    """
    Hide a message in the gaps of a carrier string.

    Args:
        carrier: Visible text; needs at least len(hidden) + 1 characters
            unless hidden is empty.
        hidden: The message to conceal, one character per gap.
        alphabet: Control characters to encode digits with.

    Returns:
        The carrier with encoded slots spliced in (the carrier itself when
        hidden is empty).

    Raises:
        CapacityExceeded: If hidden is longer than the carrier has gaps.
        InvalidCharacter: If the carrier already contains control characters.
        InvalidCodepoint: If either string holds a lone surrogate.
    """
    validate_encode_inputs(carrier, hidden, alphabet)

    parts: List[str] = []
    for index, visible in enumerate(carrier):
        parts.append(visible)
        if index < len(hidden):
            parts.append(encode_slot(hidden[index], alphabet))

    text = "".join(parts)
    logger.debug(
        "Interleaved %d hidden char(s) into %d-char carrier (%d invisible chars added)",
        len(hidden),
        len(carrier),
        len(text) - len(carrier),
    )
    return text
