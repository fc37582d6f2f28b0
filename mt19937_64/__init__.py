"""
MT19937-64 - Five-term 64-bit Mersenne Twister
==============================================

Deterministic PRNG over a 312-word state with taps at 63/151/224,
period 2^19937-1 (T. Nishimura, "Tables of 64-bit Mersenne Twisters",
ACM TOMACS 10 (2000), 20200129 revision).

Usage:
    from mt19937_64 import MT19937_64

    gen = MT19937_64()
    gen.seed(0)
    gen.next_uint64()          # [0, 2^64-1]
    gen.next_real_closed()     # [0.0, 1.0]
    gen.next_real_half_open()  # [0.0, 1.0)
    gen.next_real_open()       # (0.0, 1.0)

Components:
    - constants: algorithm parameters
    - tempering: temper/untemper and word -> float conversions
    - generator: MT19937_64 (state, seeding, twist, output)
    - state: GeneratorState snapshot model (export/import extension)
    - reconstruct: recover a state from 312 aligned outputs
    - registry: output kinds and the batch CPU reference
    - conformance: reference vectors and verify_conformance()
"""

from .constants import NN, M0, M1, M2, DEFAULT_SEED
from .generator import MT19937_64
from .state import GeneratorState
from .tempering import temper, untemper, to_real_closed, to_real_half_open, to_real_open
from .reconstruct import recover_state
from .registry import (
    OUTPUT_REGISTRY,
    PRNG_INFO,
    list_output_kinds,
    get_output_info,
    mt19937_64_cpu,
)
from .conformance import REFERENCE_VECTORS, verify_conformance

__version__ = "1.0.0"
__all__ = [
    'NN', 'M0', 'M1', 'M2', 'DEFAULT_SEED',
    'MT19937_64',
    'GeneratorState',
    'temper',
    'untemper',
    'to_real_closed',
    'to_real_half_open',
    'to_real_open',
    'recover_state',
    'OUTPUT_REGISTRY',
    'PRNG_INFO',
    'list_output_kinds',
    'get_output_info',
    'mt19937_64_cpu',
    'REFERENCE_VECTORS',
    'verify_conformance',
]
