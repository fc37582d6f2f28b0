"""
MT19937-64 Output Registry
==========================

Names every output kind the generator offers and provides the batch
CPU reference used by scripts and the command line.

Usage:
    from mt19937_64.registry import mt19937_64_cpu, list_output_kinds

    mt19937_64_cpu(0, 5)                          # first five uint64 values
    mt19937_64_cpu(0, 5, skip=10, kind='real_open')
"""

from typing import List, Dict, Any, Union

from .constants import NN, M0, M1, M2, DEFAULT_SEED
from .generator import MT19937_64


# ============================================================================
# OUTPUT KINDS
# ============================================================================

OUTPUT_REGISTRY: Dict[str, Dict[str, Any]] = {
    'uint64': {
        'method': 'next_uint64',
        'description': 'Tempered 64-bit word',
        'range': '[0, 2^64-1]',
        'value_type': int,
    },
    'real_closed': {
        'method': 'next_real_closed',
        'description': 'Double on the closed unit interval',
        'range': '[0.0, 1.0]',
        'value_type': float,
    },
    'real_half_open': {
        'method': 'next_real_half_open',
        'description': 'Double on the half-open unit interval',
        'range': '[0.0, 1.0)',
        'value_type': float,
    },
    'real_open': {
        'method': 'next_real_open',
        'description': 'Double on the open unit interval (52-bit mantissa)',
        'range': '(0.0, 1.0)',
        'value_type': float,
    },
}

PRNG_INFO: Dict[str, Any] = {
    'name': 'mt19937_64',
    'description': 'Five-term 64-bit Mersenne Twister (Nishimura, 20200129)',
    'seed_type': 'uint64',
    'state_size': NN * 8,  # 312 * 8 bytes
    'taps': (M0, M1, M2),
    'period_exponent': 19937,
    'default_seed': DEFAULT_SEED,
}


def list_output_kinds() -> List[str]:
    """List all output kinds"""
    return list(OUTPUT_REGISTRY.keys())


def get_output_info(kind: str) -> Dict[str, Any]:
    """Get registry entry for an output kind"""
    if kind not in OUTPUT_REGISTRY:
        raise ValueError(f"Unknown output kind: {kind}. Available: {list_output_kinds()}")
    return OUTPUT_REGISTRY[kind]


# ============================================================================
# CPU REFERENCE
# ============================================================================

def mt19937_64_cpu(seed: int, n: int, skip: int = 0,
                   kind: str = 'uint64') -> List[Union[int, float]]:
    """
    MT19937-64 CPU reference.

    Seeds a fresh generator, discards ``skip`` words, then returns the
    next ``n`` values of the requested kind.
    """
    if n < 0 or skip < 0:
        raise ValueError(f"n and skip must be non-negative (n={n}, skip={skip})")
    draw_name = get_output_info(kind)['method']

    gen = MT19937_64()
    gen.seed(seed)
    for _ in range(skip):
        gen.fetch_word()

    draw = getattr(gen, draw_name)
    outputs = []
    for _ in range(n):
        outputs.append(draw())

    return outputs
