#!/usr/bin/env python3
"""
Tempering and conversion tests.

The conversion functions are pure, so the interval edges can be tested
directly with the extreme words 0 and 2^64-1.
"""

import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from mt19937_64.constants import MASK64
from mt19937_64.tempering import (
    temper,
    untemper,
    to_real_closed,
    to_real_half_open,
    to_real_open,
)

SAMPLE_WORDS = [
    0, 1, 2, MASK64, MASK64 - 1, 1 << 63, (1 << 63) - 1,
    0xAAAAAAAAAAAAAAAA, 0x5555555555555555, 0x0123456789ABCDEF,
    0xFEDCBA9876543210, 0xDEADBEEFCAFEBABE, 987654321,
]


class TestTemper:
    """Tempering is a bijection on 64-bit words."""

    def test_zero_is_fixed_point(self):
        assert temper(0) == 0

    @pytest.mark.parametrize("word", SAMPLE_WORDS)
    def test_output_stays_64_bit(self, word):
        assert 0 <= temper(word) <= MASK64

    @pytest.mark.parametrize("word", SAMPLE_WORDS)
    def test_untemper_inverts_temper(self, word):
        assert untemper(temper(word)) == word

    @pytest.mark.parametrize("word", SAMPLE_WORDS)
    def test_temper_inverts_untemper(self, word):
        assert temper(untemper(word)) == word

    def test_single_bit_words_are_distinct(self):
        """No two single-bit inputs collide."""
        outputs = {temper(1 << b) for b in range(64)}
        assert len(outputs) == 64

    def test_step_by_step(self):
        """Shift/mask sequence written out for one word."""
        x = 0x0123456789ABCDEF
        y = x ^ (x >> 26)
        y ^= (y << 17) & 0x599CFCBFCA660000
        y ^= (y << 33) & 0xFFFAAFFE00000000
        y ^= y >> 39
        assert temper(x) == y


class TestRealConversions:
    """Interval edges of the three real conversions."""

    def test_closed_endpoints(self):
        """0 maps to 0.0 and the maximum word to exactly 1.0."""
        assert to_real_closed(0) == 0.0
        assert to_real_closed(MASK64) == 1.0

    def test_half_open_excludes_one(self):
        """The maximum word stays one ulp below 1.0."""
        assert to_real_half_open(0) == 0.0
        assert to_real_half_open(MASK64) < 1.0
        assert to_real_half_open(MASK64) == 1.0 - 2.0 ** -53

    def test_open_excludes_both_ends(self):
        """Neither 0.0 nor 1.0 is reachable."""
        assert to_real_open(0) == 2.0 ** -53
        assert to_real_open(MASK64) == 1.0 - 2.0 ** -53
        assert 0.0 < to_real_open(0) < to_real_open(MASK64) < 1.0

    def test_open_ignores_low_12_bits(self):
        """Only the top 52 bits contribute."""
        base = 0x0123456789ABC000
        assert to_real_open(base) == to_real_open(base | 0xFFF)

    @pytest.mark.parametrize("word", SAMPLE_WORDS)
    def test_ordering_between_variants(self, word):
        """The half-open scale is never above the closed one."""
        assert to_real_half_open(word) <= to_real_closed(word)

    def test_closed_half_open_differ_only_at_rounding(self):
        word = 1 << 63
        assert to_real_closed(word) == 0.5
        assert to_real_half_open(word) == pytest.approx(0.5, rel=1e-15)
