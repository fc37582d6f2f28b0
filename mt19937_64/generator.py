"""
MT19937-64 Generator
====================

64-bit Mersenne Twister with a five-term recurrence (taps at 63, 151
and 224 over a 312-word state), as published by T. Nishimura
(20200129 revision). Period 2^19937-1.

State Store, Seeding, Twist and Output functions live on one class
because they share the same mutable state vector and cursor.

Usage:
    gen = MT19937_64()
    gen.seed(0)
    gen.next_uint64()        # 16251341166099279528
    gen.next_real_open()     # float in (0.0, 1.0)
"""

import logging
from collections.abc import Mapping

import numpy as np

from .constants import (
    NN, M0, M1, M2, UNSEEDED, MASK64,
    MATRIX_A, UMASK, LMASK,
    SEED_MULTIPLIER, SEED_INCREMENT, SEED_HIGH_MASK, SEED_POSITION_STEP,
    DEFAULT_SEED,
)
from .state import GeneratorState
from .tempering import temper, to_real_closed, to_real_half_open, to_real_open

logger = logging.getLogger(__name__)


# ============================================================================
# TWIST (vectorised, range-split)
# ============================================================================

_UMASK = np.uint64(UMASK)
_LMASK = np.uint64(LMASK)
_ONE = np.uint64(1)
_MAG01 = np.array([0, MATRIX_A], dtype=np.uint64)

# (start, stop, tap0, tap1, tap2): within each block every tap either
# points ahead of the block (old words) or into an earlier block (new words).
_TWIST_BLOCKS = (
    (0, NN - M2, M0, M1, M2),
    (NN - M2, NN - M1, M0, M1, M2 - NN),
    (NN - M1, NN - M0, M0, M1 - NN, M2 - NN),
    (NN - M0, NN - 1, M0 - NN, M1 - NN, M2 - NN),
)


def _twist(mt: np.ndarray) -> None:
    """Regenerate all NN words of ``mt`` in place."""
    for lo, hi, t0, t1, t2 in _TWIST_BLOCKS:
        x = (mt[lo:hi] & _UMASK) | (mt[lo + 1:hi + 1] & _LMASK)
        mt[lo:hi] = ((x >> _ONE) ^ _MAG01[(x & _ONE).astype(np.intp)]
                     ^ mt[lo + t0:hi + t0]
                     ^ mt[lo + t1:hi + t1]
                     ^ mt[lo + t2:hi + t2])

    # last word wraps onto the freshly updated mt[0]
    x = (mt[NN - 1] & _UMASK) | (mt[0] & _LMASK)
    mt[NN - 1] = ((x >> _ONE) ^ _MAG01[int(x & _ONE)]
                  ^ mt[M0 - 1] ^ mt[M1 - 1] ^ mt[M2 - 1])


def _seed_words(value: int) -> np.ndarray:
    words = []
    scratch = value
    for i in range(NN):
        scratch = (SEED_MULTIPLIER * scratch + SEED_INCREMENT) & MASK64
        high = scratch & SEED_HIGH_MASK
        scratch = (SEED_MULTIPLIER * scratch + SEED_INCREMENT) & MASK64
        low = scratch >> 32
        words.append(((high | low) + SEED_POSITION_STEP * (i + 1)) & MASK64)
    return np.array(words, dtype=np.uint64)


# ============================================================================
# GENERATOR
# ============================================================================

class MT19937_64:
    """
    Five-term 64-bit Mersenne Twister.

    A new instance is unseeded; the first draw seeds it with
    DEFAULT_SEED (987654321), exactly as if ``seed(987654321)`` had been
    called.

    Not thread-safe: the state vector and cursor are mutated by every
    draw. Give each thread its own instance (see ``copy()``) or serialise
    access externally.
    """

    def __init__(self):
        self._mt = np.zeros(NN, dtype=np.uint64)
        self._mti = UNSEEDED

    def __repr__(self):
        if not self.is_seeded:
            return "MT19937_64(unseeded)"
        return f"MT19937_64(cursor={self._mti})"

    @property
    def cursor(self) -> int:
        return self._mti

    @property
    def is_seeded(self) -> bool:
        return self._mti != UNSEEDED

    # ------------------------------------------------------------------
    # Seeding / twist
    # ------------------------------------------------------------------

    def seed(self, value: int) -> None:
        """
        Fill the state vector from a 64-bit seed and reset the cursor.

        Any ``int`` is accepted and reduced modulo 2^64.
        """
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise TypeError(f"seed must be an integer, got {type(value).__name__}")
        value = int(value) & MASK64
        self._mt = _seed_words(value)
        self._mti = 0
        logger.debug(f"Seeded MT19937-64 with {value}")

    def advance(self) -> None:
        """Run one twist over the whole state vector and reset the cursor."""
        if self._mti == UNSEEDED:
            self.seed(DEFAULT_SEED)
        _twist(self._mt)
        self._mti = 0
        logger.debug("State vector advanced")

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def fetch_word(self) -> int:
        """Next tempered 64-bit word; every output function draws exactly one."""
        if self._mti >= NN:
            if self._mti == UNSEEDED:
                logger.debug(f"Unseeded generator, using default seed {DEFAULT_SEED}")
                self.seed(DEFAULT_SEED)
            else:
                self.advance()
        x = int(self._mt[self._mti])
        self._mti += 1
        return temper(x)

    def next_uint64(self) -> int:
        """Uniform integer on [0, 2^64-1]."""
        return self.fetch_word()

    def next_real_closed(self) -> float:
        """Uniform float on [0.0, 1.0]."""
        return to_real_closed(self.fetch_word())

    def next_real_half_open(self) -> float:
        """Uniform float on [0.0, 1.0)."""
        return to_real_half_open(self.fetch_word())

    def next_real_open(self) -> float:
        """Uniform float on (0.0, 1.0), 52 bits of resolution."""
        return to_real_open(self.fetch_word())

    # ------------------------------------------------------------------
    # State export / import (extension)
    # ------------------------------------------------------------------

    def getstate(self) -> GeneratorState:
        """Snapshot of the state vector and cursor."""
        return GeneratorState(words=self._mt.tolist(), cursor=self._mti)

    def setstate(self, state) -> None:
        """Restore a snapshot taken by :meth:`getstate` (or an equivalent mapping)."""
        if isinstance(state, Mapping):
            state = GeneratorState.model_validate(dict(state))
        elif not isinstance(state, GeneratorState):
            raise TypeError(f"expected GeneratorState or mapping, got {type(state).__name__}")
        self._mt = np.array(state.words, dtype=np.uint64)
        self._mti = state.cursor
        logger.debug(f"State restored (cursor={state.cursor})")

    @classmethod
    def from_state(cls, state) -> "MT19937_64":
        gen = cls()
        gen.setstate(state)
        return gen

    def copy(self) -> "MT19937_64":
        """Independent generator that continues the same stream."""
        gen = type(self)()
        gen._mt = self._mt.copy()
        gen._mti = self._mti
        return gen
