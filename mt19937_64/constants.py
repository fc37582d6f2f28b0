"""
MT19937-64 Constants
====================

Fixed parameters of the five-term 64-bit Mersenne Twister
(Nishimura, 20200129 revision). Changing any of these silently yields a
different stream; the conformance vectors in ``conformance.py`` pin them.
"""

# ============================================================================
# STATE GEOMETRY
# ============================================================================

NN = 312          # words in the state vector
M0 = 63           # tap offsets
M1 = 151
M2 = 224

UNSEEDED = NN + 1  # cursor sentinel: seed with DEFAULT_SEED on next use

MASK64 = 0xFFFFFFFFFFFFFFFF

# ============================================================================
# RECURRENCE
# ============================================================================

MATRIX_A = 0xB3815B624FC82E2F
UMASK = 0xFFFFFFFF80000000   # bits 63..31
LMASK = 0x7FFFFFFF           # bits 30..0

# ============================================================================
# TEMPERING
# ============================================================================

TEMPER_U = 26
TEMPER_S = 17
TEMPER_T = 33
TEMPER_L = 39
MASK_B = 0x599CFCBFCA660000
MASK_C = 0xFFFAAFFE00000000

# ============================================================================
# SEEDING
# ============================================================================

SEED_MULTIPLIER = 9797719289936477
SEED_INCREMENT = 1234567
SEED_HIGH_MASK = 0xFFFFFFFF00000000
SEED_POSITION_STEP = 789
DEFAULT_SEED = 987654321

# ============================================================================
# REAL CONVERSIONS
# ============================================================================

REAL_CLOSED_SCALE = 5.421010862427522170e-20     # 2^-64, max word -> 1.0
REAL_HALF_OPEN_SCALE = 5.421010862427521568e-20  # one ulp below 2^-64
REAL_OPEN_SCALE = 2.220446049250313081e-16       # 2^-52
