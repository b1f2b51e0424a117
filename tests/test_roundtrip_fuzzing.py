"""
Property Tests for the Bidi Steganography Codec

Fuzzes the codec with hypothesis to check round-tripping, determinism and
the exact capacity boundary over arbitrary Unicode input, including astral
characters and control characters inside the hidden message.
"""

import sys
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

import hypothesis.strategies as st
import pytest
from hypothesis import Verbosity, assume, given, settings

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from alphabet import DEFAULT_ALPHABET
from errors import CapacityExceeded, InvalidCharacter
from extractor import DecodeResult
from stegano_core import _DEFAULT_ENGINE, BidiSteganoEngine, decode, encode
from ternary import MAX_SCALAR_VALUE, from_ternary, to_ternary


# Hypothesis strategies for fuzz testing
scalar_values = st.integers(min_value=0, max_value=MAX_SCALAR_VALUE).filter(
    lambda n: not 0xD800 <= n <= 0xDFFF
)
hidden_chars = st.characters(exclude_categories=["Cs"])
# format characters (which include every bidi control) may not sit between filled gaps
carrier_chars = st.characters(exclude_categories=["Cs", "Cf"])
carriers = st.text(alphabet=carrier_chars, min_size=1, max_size=64)
foreign_controls = st.sampled_from(sorted(DEFAULT_ALPHABET.foreign_controls))

ENGINE = BidiSteganoEngine()


@st.composite
def carrier_and_hidden(draw):
    """A carrier plus a hidden message that fits into its gaps."""
    carrier = draw(carriers)
    hidden = draw(st.text(alphabet=hidden_chars, max_size=len(carrier) - 1))
    return carrier, hidden


class TestCodecFuzzing:
    """Fuzz tests for encode/decode."""

    @given(scalar=scalar_values)
    @settings(verbosity=Verbosity.quiet, max_examples=300)
    def test_ternary_roundtrip_fuzz(self, scalar):
        digits = to_ternary(scalar)
        assert set(digits) <= {"0", "1", "2"}
        assert digits == "0" or not digits.startswith("0")
        assert from_ternary(digits) == scalar

    @given(pair=carrier_and_hidden())
    @settings(verbosity=Verbosity.quiet, max_examples=200)
    def test_roundtrip_fuzz(self, pair):
        carrier, hidden = pair
        text = ENGINE.encode(carrier, hidden)
        assert ENGINE.decode(text) == DecodeResult(carrier=carrier, hidden=hidden)

    @given(pair=carrier_and_hidden())
    @settings(verbosity=Verbosity.quiet, max_examples=100)
    def test_determinism_fuzz(self, pair):
        carrier, hidden = pair
        assert ENGINE.encode(carrier, hidden) == ENGINE.encode(carrier, hidden)

    @given(pair=carrier_and_hidden())
    @settings(verbosity=Verbosity.quiet, max_examples=100)
    def test_strip_recovers_carrier_fuzz(self, pair):
        carrier, hidden = pair
        assert ENGINE.strip(ENGINE.encode(carrier, hidden)) == carrier

    @given(carrier=carriers)
    @settings(verbosity=Verbosity.quiet, max_examples=100)
    def test_capacity_boundary_fuzz(self, carrier):
        fits = "x" * (len(carrier) - 1)
        ENGINE.encode(carrier, fits)

        with pytest.raises(CapacityExceeded):
            ENGINE.encode(carrier, fits + "x")

    @given(pair=carrier_and_hidden(), control=foreign_controls, data=st.data())
    @settings(verbosity=Verbosity.quiet, max_examples=100)
    def test_foreign_control_rejected_fuzz(self, pair, control, data):
        carrier, hidden = pair
        assume(len(carrier) >= 2)
        text = ENGINE.encode(carrier, hidden)
        index = data.draw(st.integers(min_value=1, max_value=len(text) - 1))
        corrupted = text[:index] + control + text[index:]

        with pytest.raises(InvalidCharacter) as exc_info:
            ENGINE.decode(corrupted)
        assert exc_info.value.position == index


class TestConcurrentUse:
    """The shared default engine is safe to call from many threads."""

    def _roundtrip(self, pair):
        carrier, hidden = pair
        return decode(encode(carrier, hidden))

    def test_shared_engine_threaded_roundtrip(self):
        pairs = [(f"carrier number {i} \U0001F30D", f"msg{i}") for i in range(64)]

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(self._roundtrip, pairs))

        assert results == [DecodeResult(carrier=c, hidden=h) for c, h in pairs]

    def test_shared_engine_is_used_by_module_functions(self):
        carrier, hidden = "shared engine", "ok"
        assert encode(carrier, hidden) == _DEFAULT_ENGINE.encode(carrier, hidden)
