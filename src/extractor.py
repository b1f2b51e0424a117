"""
extractor.py - Hidden Message Decoder

Recovers (carrier, hidden) from interleaved text with a single left-to-right
scan. The scan is a two-state machine:

    VISIBLE  - the last character was carrier text
    GAP      - inside a run of alphabet control characters

Every alphabet character extends the current run with its digit. The next
visible character (or the end of the text) closes the run, and a non-empty
run is parsed as one ternary number, i.e. one hidden character. Gaps with no
run produce nothing, so the hidden message comes out in gap order with empty
gaps skipped.

A bidi formatting character that is not in the alphabet is never passed
through as carrier text nor silently dropped: the scan stops with
InvalidCharacter and reports where it was found. The same happens to any
other format character (ZWSP, WORD JOINER, BOM, soft hyphen) found inside a
run, since keeping it would split one slot into two hidden characters.
Outside runs such characters are ordinary carrier text.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Tuple

try:
    from .alphabet import BidiAlphabet
    from .errors import InvalidCodepoint
    from .ternary import from_ternary
    from .validator import check_gap_char
except ImportError:
    from alphabet import BidiAlphabet
    from errors import InvalidCodepoint
    from ternary import from_ternary
    from validator import check_gap_char

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════════════
# DATA CLASSES FOR STRUCTURED RESULTS
# ═══════════════════════════════════════════════════════════════════════════════


class ScanState(Enum):
    """States of the decoder's scan."""

    VISIBLE = "visible"
    GAP = "gap"


@dataclass(frozen=True)
class Slot:
    """
    One decoded run of control characters.

    Attributes:
        gap_index: Gap the run occupied; gap i sits after carrier character i.
            A run before the first visible character has gap_index -1.
        position: Index in the scanned text of the run's first control character
        digits: The run's ternary digits, most significant first
        char: The hidden character the digits decode to
    """

    gap_index: int
    position: int
    digits: str
    char: str

    @property
    def codepoint(self) -> int:
        return ord(self.char)

    def __len__(self) -> int:
        """Returns the number of invisible characters in the run."""
        return len(self.digits)


@dataclass(frozen=True)
class DecodeResult:
    """
    Carrier and hidden message recovered from interleaved text.

    Unpacks like a pair: ``carrier, hidden = extract(text, alphabet)``.
    """

    carrier: str
    hidden: str

    def __iter__(self) -> Iterator[str]:
        return iter((self.carrier, self.hidden))


# ═══════════════════════════════════════════════════════════════════════════════
# SCANNER
# ═══════════════════════════════════════════════════════════════════════════════


def _close_run(digits: List[str], position: int, gap_index: int) -> Slot:
    run = "".join(digits)
    try:
        value = from_ternary(run)
    except InvalidCodepoint as exc:
        raise InvalidCodepoint(exc.value, position) from exc
    return Slot(gap_index=gap_index, position=position, digits=run, char=chr(value))


def _scan(text: str, alphabet: BidiAlphabet) -> Tuple[str, List[Slot]]:
    carrier: List[str] = []
    slots: List[Slot] = []
    digits: List[str] = []
    run_start = 0
    state = ScanState.VISIBLE

    for position, char in enumerate(text):
        symbol = alphabet.char_to_symbol(char)

        if symbol is not None:
            if state is ScanState.VISIBLE:
                state = ScanState.GAP
                run_start = position
                digits = []
            digits.append(symbol)
            continue

        check_gap_char(text, position, alphabet, state is ScanState.GAP)

        if state is ScanState.GAP:
            slots.append(_close_run(digits, run_start, len(carrier) - 1))
            state = ScanState.VISIBLE
        carrier.append(char)

    if state is ScanState.GAP:
        slots.append(_close_run(digits, run_start, len(carrier) - 1))

    return "".join(carrier), slots


def scan_slots(text: str, alphabet: BidiAlphabet) -> List[Slot]:
    """
    List every non-empty run in interleaved text, in gap order.

    Useful for tooling that needs to tell which gap held which run: a run
    for U+0000 is one control character, an empty gap is none, and the
    gap_index of each Slot says exactly where it was found.

    Raises:
        InvalidCharacter: For bidi formatting characters outside the alphabet
            and format characters that split a run.
        InvalidCodepoint: For runs that do not decode to a scalar value.
    """
    _, slots = _scan(text, alphabet)
    return slots


def extract(text: str, alphabet: BidiAlphabet) -> DecodeResult:
    """
    Split interleaved text back into its carrier and hidden message.

    Args:
        text: Output of interleave(), or any string (plain text decodes to
            itself with an empty hidden message).
        alphabet: The alphabet the text was encoded with.

    Returns:
        DecodeResult with the visible carrier and the hidden message.

    Raises:
        TypeError: If text is not a str.
        InvalidCharacter: For bidi formatting characters outside the alphabet
            and format characters that split a run.
        InvalidCodepoint: For runs that do not decode to a scalar value.
    """
    if not isinstance(text, str):
        raise TypeError(f"text must be a str, not {type(text).__name__}")

    carrier, slots = _scan(text, alphabet)
    hidden = "".join(slot.char for slot in slots)
    logger.debug(
        "Extracted %d hidden char(s) from %d-char carrier", len(hidden), len(carrier)
    )
    return DecodeResult(carrier=carrier, hidden=hidden)
