"""
Program-derived address computation.

A program-derived address is the SHA-256 hash of the seeds, the owning
program id and a fixed marker, searched over a one-byte bump seed until the
result falls off the edwards25519 curve. Off-curve addresses have no private
key, so only the owning program can sign for them.
"""
import hashlib
import logging
from typing import Sequence

from replay_sdk.derivation.curve import is_on_curve
from replay_sdk.derivation.ec_constants import MAX_SEEDS, MAX_SEED_LENGTH, PDA_MARKER, PUBKEY_LENGTH
from replay_sdk.exceptions import NoValidBumpError, OnCurveError, SeedLengthError
from replay_sdk.models import DerivedAddress

logger = logging.getLogger(__name__)


def _check_seeds(seeds: Sequence[bytes], program_id: bytes) -> None:
    if len(program_id) != PUBKEY_LENGTH:
        raise SeedLengthError(
            f"Program id must be {PUBKEY_LENGTH} bytes, got {len(program_id)}"
        )
    if len(seeds) > MAX_SEEDS:
        raise SeedLengthError(f"At most {MAX_SEEDS} seeds allowed, got {len(seeds)}")
    for index, seed in enumerate(seeds):
        if len(seed) > MAX_SEED_LENGTH:
            raise SeedLengthError(
                f"Seed {index} is {len(seed)} bytes, maximum is {MAX_SEED_LENGTH}"
            )


def create_program_address(seeds: Sequence[bytes], program_id: bytes) -> bytes:
    """
    Hash seeds and program id into a single candidate address.

    Args:
        seeds: Ordered seeds, including the bump seed if one is used
        program_id: 32-byte id of the owning program

    Returns:
        32-byte program-derived address

    Raises:
        SeedLengthError: If the seeds or program id violate the runtime limits
        OnCurveError: If the resulting hash is a valid curve point
    """
    _check_seeds(seeds, program_id)

    hasher = hashlib.sha256()
    for seed in seeds:
        hasher.update(bytes(seed))
    hasher.update(bytes(program_id))
    hasher.update(PDA_MARKER)
    address = hasher.digest()

    if is_on_curve(address):
        raise OnCurveError("Derived address lies on the ed25519 curve")
    return address


def find_program_address(seeds: Sequence[bytes], program_id: bytes) -> DerivedAddress:
    """
    Find the off-curve address with the highest bump seed.

    Bumps are tried from 255 down to 0 and the first off-curve result wins.

    Args:
        seeds: Ordered seeds, without the bump
        program_id: 32-byte id of the owning program

    Returns:
        DerivedAddress holding the address and its bump

    Raises:
        SeedLengthError: If the seeds plus bump violate the runtime limits
        NoValidBumpError: If every bump yields an on-curve address
    """
    seeds = [bytes(seed) for seed in seeds]
    _check_seeds(seeds + [b"\xff"], program_id)

    for bump in range(255, -1, -1):
        try:
            address = create_program_address(seeds + [bytes([bump])], program_id)
        except OnCurveError:
            continue
        logger.debug("Found program address with bump %d after %d attempts", bump, 256 - bump)
        return DerivedAddress(address=address, bump=bump)

    raise NoValidBumpError("Unable to find a viable program address bump seed")
