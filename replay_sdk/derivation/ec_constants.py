"""
Constants for the edwards25519 curve.
"""

# Field prime p = 2^255 - 19
ED25519_P = 2 ** 255 - 19

# Edwards curve constant d = -121665 / 121666 (mod p)
ED25519_D = (-121665 * pow(121666, ED25519_P - 2, ED25519_P)) % ED25519_P

# Compressed points carry the sign of x in the top bit of the last byte
ED25519_SIGN_MASK = 1 << 255

# Public keys and program addresses are 32 bytes
PUBKEY_LENGTH = 32

# Runtime limits for program-derived address seeds
MAX_SEEDS = 16
MAX_SEED_LENGTH = 32

# Domain separator appended to every program-derived address hash input
PDA_MARKER = b"ProgramDerivedAddress"
