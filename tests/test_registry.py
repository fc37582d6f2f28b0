#!/usr/bin/env python3
"""
Registry, batch reference and conformance tests.
"""

import sys
import copy
from pathlib import Path
from unittest.mock import patch

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from mt19937_64 import (
    MT19937_64,
    OUTPUT_REGISTRY,
    PRNG_INFO,
    REFERENCE_VECTORS,
    get_output_info,
    list_output_kinds,
    mt19937_64_cpu,
    verify_conformance,
)
from mt19937_64.constants import NN


class TestRegistry:
    """Output kinds resolve to generator methods."""

    def test_kinds(self):
        assert list_output_kinds() == ['uint64', 'real_closed', 'real_half_open', 'real_open']

    @pytest.mark.parametrize("kind", list(OUTPUT_REGISTRY))
    def test_method_exists(self, kind):
        assert callable(getattr(MT19937_64(), get_output_info(kind)['method']))

    def test_unknown_kind(self):
        with pytest.raises(ValueError, match="Available"):
            get_output_info('uint32')

    def test_prng_info(self):
        assert PRNG_INFO['state_size'] == 2496
        assert PRNG_INFO['taps'] == (63, 151, 224)


class TestCpuReference:
    """mt19937_64_cpu mirrors the single-value API."""

    def test_first_values(self):
        assert mt19937_64_cpu(0, 3) == REFERENCE_VECTORS[0]['uint64'][:3]

    def test_skip(self):
        assert mt19937_64_cpu(0, 5, skip=5) == REFERENCE_VECTORS[0]['uint64'][5:10]

    def test_skip_counts_words_for_real_kinds(self):
        full = mt19937_64_cpu(5489, 5, kind='real_open')
        assert mt19937_64_cpu(5489, 3, skip=2, kind='real_open') == full[2:]

    def test_zero_count(self):
        assert mt19937_64_cpu(0, 0) == []

    @pytest.mark.parametrize("n,skip", [(-1, 0), (1, -1)])
    def test_negative_rejected(self, n, skip):
        with pytest.raises(ValueError):
            mt19937_64_cpu(0, n, skip=skip)

    def test_unknown_kind(self):
        with pytest.raises(ValueError):
            mt19937_64_cpu(0, 1, kind='gaussian')

    def test_value_types(self):
        for kind in list_output_kinds():
            expected = get_output_info(kind)['value_type']
            assert all(isinstance(v, expected) for v in mt19937_64_cpu(1, 5, kind=kind))


class TestConformance:
    """Pinned vectors from the reference C implementation."""

    @pytest.mark.parametrize("seed", sorted(REFERENCE_VECTORS))
    def test_uint64(self, seed):
        expected = REFERENCE_VECTORS[seed]['uint64']
        assert mt19937_64_cpu(seed, len(expected)) == expected

    @pytest.mark.parametrize("seed", sorted(REFERENCE_VECTORS))
    @pytest.mark.parametrize("kind", ['real_closed', 'real_half_open', 'real_open'])
    def test_reals(self, seed, kind):
        expected = REFERENCE_VECTORS[seed][kind]
        assert mt19937_64_cpu(seed, len(expected), kind=kind) == expected

    @pytest.mark.parametrize("seed", sorted(REFERENCE_VECTORS))
    def test_after_first_twist(self, seed):
        expected = REFERENCE_VECTORS[seed]['after_first_twist']
        assert mt19937_64_cpu(seed, len(expected), skip=NN) == expected

    def test_verify_conformance_passes(self):
        report = verify_conformance()
        assert report['passed'] is True
        assert len(report['checks']) == 6 * len(REFERENCE_VECTORS)

    def test_verify_subset(self):
        report = verify_conformance(seeds=[0])
        assert report['passed']
        assert {c['seed'] for c in report['checks']} == {0}

    def test_verify_unknown_seed(self):
        with pytest.raises(ValueError, match="No reference vectors"):
            verify_conformance(seeds=[1])

    def test_verify_detects_mismatch(self):
        tampered = copy.deepcopy(REFERENCE_VECTORS[0])
        tampered['uint64'][0] ^= 1
        with patch.dict(REFERENCE_VECTORS, {0: tampered}):
            report = verify_conformance(seeds=[0])
        assert report['passed'] is False
        failed = [c for c in report['checks'] if not c['match']]
        assert [c['check'] for c in failed] == ['uint64']
