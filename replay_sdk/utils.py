"""
Utility functions for the Replay SDK.
"""
import base58
from web3 import Web3

from .derivation.ec_constants import PUBKEY_LENGTH

# Type byte prepended to a preimage before hashing it into a receipt leaf
LEAF_PREFIX = b"\x00"

# Receipt leaf hashes are truncated to this many bytes
LEAF_HASH_LENGTH = 20

_BASE58_CHARS = frozenset(base58.BITCOIN_ALPHABET.decode("ascii"))


def keccak256(data: bytes) -> bytes:
    """
    Compute the Keccak-256 digest of raw bytes.

    Args:
        data: Bytes to hash

    Returns:
        32-byte digest
    """
    return bytes(Web3.keccak(primitive=bytes(data)))


def leaf_hash(preimage: bytes) -> bytes:
    """
    Hash a preimage into the 20-byte receipt leaf used as a derivation seed.

    Args:
        preimage: Raw preimage bytes

    Returns:
        First 20 bytes of keccak256(0x00 || preimage)
    """
    return keccak256(LEAF_PREFIX + preimage)[:LEAF_HASH_LENGTH]


def decode_pubkey(value: str) -> bytes:
    """
    Decode a base58 public key.

    Args:
        value: Base58-encoded key

    Returns:
        32 raw key bytes

    Raises:
        ValueError: If the string is not base58 or does not decode to 32 bytes
    """
    if not isinstance(value, str) or not value:
        raise ValueError("Public key must be a non-empty string")
    # b58decode strips surrounding whitespace, so check the alphabet first
    invalid = set(value) - _BASE58_CHARS
    if invalid:
        raise ValueError(f"Public key contains non-base58 characters: {sorted(invalid)!r}")
    decoded = base58.b58decode(value)
    if len(decoded) != PUBKEY_LENGTH:
        raise ValueError(
            f"Public key must decode to {PUBKEY_LENGTH} bytes, got {len(decoded)}"
        )
    return decoded
