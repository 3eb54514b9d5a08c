"""
Point checks on the edwards25519 curve.
"""
from replay_sdk.derivation.ec_constants import ED25519_P, ED25519_D, ED25519_SIGN_MASK, PUBKEY_LENGTH


def is_on_curve(data: bytes) -> bool:
    """
    Check whether 32 bytes decompress to a point on edwards25519.

    The y coordinate is read little-endian with the sign bit masked off and
    reduced mod p, matching the decompression used by the address runtime.
    Bytes decompress iff x^2 = (y^2 - 1) / (d*y^2 + 1) has a solution.

    Args:
        data: Candidate compressed point

    Returns:
        True if the bytes are a valid compressed point, False otherwise

    Raises:
        ValueError: If data is not exactly 32 bytes
    """
    if len(data) != PUBKEY_LENGTH:
        raise ValueError(f"Expected {PUBKEY_LENGTH} bytes, got {len(data)}")

    p = ED25519_P
    y = (int.from_bytes(data, "little") & (ED25519_SIGN_MASK - 1)) % p
    yy = y * y % p
    u = (yy - 1) % p
    # d is a non-square so v is never zero
    v = (ED25519_D * yy + 1) % p

    x2 = u * pow(v, p - 2, p) % p
    if x2 == 0:
        return True
    # Euler's criterion
    return pow(x2, (p - 1) // 2, p) == 1
