"""
Exceptions for the Replay SDK.
"""
from typing import Optional, Sequence


class ReplayError(Exception):
    """Base exception for all Replay SDK errors."""
    pass


class InvalidAddressError(ReplayError, ValueError):
    """Raised when an identity matches no supported address format."""

    def __init__(self, message: str, address: Optional[str] = None):
        self.address = address
        super().__init__(message)


class AmbiguousAddressError(ReplayError, ValueError):
    """Raised when an address is valid for more than one ecosystem."""

    def __init__(self, message: str, address: str, candidates: Sequence[str]):
        self.address = address
        self.candidates = tuple(candidates)
        super().__init__(message)


class FetchError(ReplayError):
    """Raised when the preimage cannot be retrieved from the flat-file store."""

    def __init__(self, message: str, url: Optional[str] = None, status_code: Optional[int] = None):
        self.url = url
        self.status_code = status_code
        super().__init__(message)


class NoValidBumpError(ReplayError):
    """Raised when no bump seed yields an off-curve program address."""
    pass


class OnCurveError(NoValidBumpError):
    """Raised when a single derivation attempt lands on the ed25519 curve."""
    pass


class ConfigError(ReplayError):
    """Raised for invalid or missing deployment configuration."""
    pass


class SeedLengthError(ConfigError):
    """Raised when derivation seeds exceed the protocol limits."""
    pass
