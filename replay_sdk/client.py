"""
ReplayClient - resolves identities to receipt and token account addresses.
"""
import logging
from typing import Optional, Union

from .config import Deployment, DeploymentConfig
from .derivation import find_program_address
from .ecosystems import chain_code, classify
from .exceptions import InvalidAddressError
from .models import DerivedAddress, ResolvedIdentity
from .preimage import FlatFileSource, PreimageSource
from .utils import decode_pubkey, leaf_hash

# First seed of every receipt address
RECEIPT_SEED = b"receipt"


def calc_replay_address(preimage: bytes, receipt_program_id: bytes) -> DerivedAddress:
    """
    Derive the receipt address backed by a preimage.

    Args:
        preimage: Raw preimage bytes
        receipt_program_id: 32-byte id of the receipt program

    Returns:
        DerivedAddress of the receipt account
    """
    return find_program_address([RECEIPT_SEED, leaf_hash(preimage)], receipt_program_id)


def calc_token_account(
    owner: bytes,
    mint: bytes,
    token_program_id: bytes,
    ata_program_id: bytes
) -> DerivedAddress:
    """
    Derive the associated token account of an owner for a mint.

    Args:
        owner: 32-byte wallet key
        mint: 32-byte mint id
        token_program_id: 32-byte token program id
        ata_program_id: 32-byte associated token account program id

    Returns:
        DerivedAddress of the token account
    """
    return find_program_address([owner, token_program_id, mint], ata_program_id)


class ReplayClient:
    """
    Client for resolving receipt (replay) addresses.

    The client composes three steps:
    1. Classifying the identity into a canonical address and ecosystem
    2. Fetching the identity's preimage from the flat-file store
    3. Deriving the receipt address from the preimage

    Token account derivation uses only the deployment constants and never
    touches the network.
    """

    def __init__(
        self,
        deployment: Optional[Union[str, Deployment]] = None,
        source: Optional[PreimageSource] = None,
        flat_file_url: Optional[str] = None,
        timeout: int = 10,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize the ReplayClient

        Args:
            deployment: Deployment name or object (defaults to the configured default)
            source: Custom preimage source (defaults to a FlatFileSource)
            flat_file_url: Base URL override for the default source
            timeout: Timeout for HTTP requests in seconds
            logger: Optional logger instance to use for debug/info logging

        Raises:
            ConfigError: If the deployment is unknown or invalid
            ValueError: If the flat-file URL doesn't use https
        """
        if isinstance(deployment, Deployment):
            if flat_file_url:
                deployment = deployment.model_copy(update={"flat_file_url": flat_file_url.rstrip('/')})
            self.deployment = deployment
        else:
            self.deployment = DeploymentConfig.get_deployment(deployment, flat_file_url=flat_file_url)

        self.logger = logger or logging.getLogger(__name__)
        self.source = source or FlatFileSource(
            self.deployment.flat_file_url,
            timeout=timeout,
            logger=self.logger
        )

    def resolve(self, identity: str, hint: Optional[str] = None) -> ResolvedIdentity:
        """
        Classify an identity string.

        Raises:
            InvalidAddressError: If the identity matches no supported format
            AmbiguousAddressError: If a Sui/Aptos address has no usable hint
        """
        resolved = classify(identity, hint)
        self.logger.debug("Address: %s (%s)", resolved.address, resolved.ecosystem.value)
        return resolved

    def fetch_preimage(self, resolved: ResolvedIdentity) -> bytes:
        """
        Fetch the preimage for a resolved identity.

        Raises:
            FetchError: If the flat file can't be retrieved or parsed
        """
        code = chain_code(resolved.ecosystem, self.deployment.chain_codes)
        return self.source.fetch(resolved.address, code)

    def replay_address(self, identity: str, hint: Optional[str] = None) -> DerivedAddress:
        """
        Resolve an identity all the way to its receipt address.

        Args:
            identity: Discord id, chain address or wallet key
            hint: Optional ecosystem hint ("s" for Sui, "a" for Aptos)

        Returns:
            DerivedAddress of the receipt account

        Raises:
            InvalidAddressError: If the identity matches no supported format
            AmbiguousAddressError: If a Sui/Aptos address has no usable hint
            FetchError: If the preimage can't be retrieved
            NoValidBumpError: If no off-curve address exists
        """
        resolved = self.resolve(identity, hint)
        preimage = self.fetch_preimage(resolved)
        address = calc_replay_address(preimage, self.deployment.receipt_program_bytes)
        self.logger.debug("Replay address %s (bump %d)", address, address.bump)
        return address

    def token_account(self, owner: Union[str, bytes]) -> DerivedAddress:
        """
        Derive the associated token account of a wallet for the deployment's mint.

        Args:
            owner: Wallet key, base58 string or 32 raw bytes

        Returns:
            DerivedAddress of the token account

        Raises:
            InvalidAddressError: If the owner is not a valid 32-byte key
        """
        if isinstance(owner, str):
            try:
                owner = decode_pubkey(owner)
            except ValueError as e:
                raise InvalidAddressError(f"Invalid wallet address: '{owner}': {e}", address=owner) from e
        elif len(owner) != 32:
            raise InvalidAddressError(f"Wallet key must be 32 bytes, got {len(owner)}")

        return calc_token_account(
            bytes(owner),
            self.deployment.mint_bytes,
            self.deployment.token_program_bytes,
            self.deployment.ata_program_bytes
        )

    def close(self) -> None:
        """Release the preimage source's resources, if it holds any"""
        close = getattr(self.source, "close", None)
        if callable(close):
            close()

    def __enter__(self) -> "ReplayClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
