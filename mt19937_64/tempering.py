"""
Tempering and word -> float conversions for MT19937-64.

All functions here are pure: they take a 64-bit word and never touch
generator state.
"""

from .constants import (
    MASK64,
    TEMPER_U, TEMPER_S, TEMPER_T, TEMPER_L,
    MASK_B, MASK_C,
    REAL_CLOSED_SCALE, REAL_HALF_OPEN_SCALE, REAL_OPEN_SCALE,
)

WORD_BITS = 64


def temper(x: int) -> int:
    """Apply the output tempering permutation to a raw state word."""
    x &= MASK64
    x ^= x >> TEMPER_U
    x ^= (x << TEMPER_S) & MASK_B
    x ^= (x << TEMPER_T) & MASK_C
    x ^= x >> TEMPER_L
    return x


def _unshift_right_xor(y: int, shift: int) -> int:
    x = 0
    for i in range(WORD_BITS - 1, -1, -1):
        yi = (y >> i) & 1
        x_high = (x >> (i + shift)) & 1 if (i + shift) < WORD_BITS else 0
        x |= (yi ^ x_high) << i
    return x


def _unshift_left_xor_mask(y: int, shift: int, mask: int) -> int:
    x = 0
    for i in range(WORD_BITS):
        yi = (y >> i) & 1
        x_low = (x >> (i - shift)) & 1 if (i - shift) >= 0 else 0
        mi = (mask >> i) & 1
        x |= (yi ^ (x_low & mi)) << i
    return x


def untemper(y: int) -> int:
    """Invert :func:`temper`: ``untemper(temper(x)) == x`` for every u64."""
    y &= MASK64
    y = _unshift_right_xor(y, TEMPER_L)
    y = _unshift_left_xor_mask(y, TEMPER_T, MASK_C)
    y = _unshift_left_xor_mask(y, TEMPER_S, MASK_B)
    y = _unshift_right_xor(y, TEMPER_U)
    return y


# ============================================================================
# REAL CONVERSIONS
# ============================================================================

def to_real_closed(x: int) -> float:
    """Map a word onto [0.0, 1.0]; 2^64-1 maps to exactly 1.0."""
    return REAL_CLOSED_SCALE * float(x)


def to_real_half_open(x: int) -> float:
    """Map a word onto [0.0, 1.0); 2^64-1 stays strictly below 1.0."""
    return REAL_HALF_OPEN_SCALE * float(x)


def to_real_open(x: int) -> float:
    """Map the top 52 bits of a word onto (0.0, 1.0), centred by +0.5."""
    return REAL_OPEN_SCALE * ((x >> 12) + 0.5)
