"""
MT19937-64 state reconstruction.

Given NN consecutive ``next_uint64`` outputs that start at a generation
boundary (right after seeding or right after a twist), untempering each
output recovers the raw state vector. A generator restored from the
result continues the original stream.
"""

import logging
from typing import Sequence

from .constants import NN, MASK64
from .state import GeneratorState
from .tempering import untemper

logger = logging.getLogger(__name__)


def recover_state(outputs: Sequence[int]) -> GeneratorState:
    """
    Rebuild the generator state from NN aligned outputs.

    The returned state has cursor NN, so the next draw twists and yields
    the value the original generator would have produced after them.
    """
    if len(outputs) != NN:
        raise ValueError(f"Need exactly {NN} consecutive outputs, got {len(outputs)}")
    if any((not isinstance(x, int)) or x < 0 or x > MASK64 for x in outputs):
        raise ValueError("Outputs must be unsigned 64-bit integers")

    words = [untemper(x) for x in outputs]
    logger.debug(f"Recovered {len(words)} state words")
    return GeneratorState(words=words, cursor=NN)
