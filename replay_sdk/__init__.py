"""
Replay SDK - resolve identities to receipt and token account addresses.
"""
from .version import __version__
from .client import ReplayClient, calc_replay_address, calc_token_account
from .config import Deployment, DeploymentConfig
from .derivation import create_program_address, find_program_address, is_on_curve
from .ecosystems import chain_code, classify
from .exceptions import (
    ReplayError, InvalidAddressError, AmbiguousAddressError, FetchError,
    NoValidBumpError, OnCurveError, ConfigError, SeedLengthError
)
from .models import DerivedAddress, Ecosystem, FlatFile, ResolvedIdentity
from .preimage import FlatFileSource, PreimageSource

__all__ = [
    "ReplayClient",
    "calc_replay_address",
    "calc_token_account",
    "Deployment",
    "DeploymentConfig",
    "create_program_address",
    "find_program_address",
    "is_on_curve",
    "chain_code",
    "classify",
    "ReplayError",
    "InvalidAddressError",
    "AmbiguousAddressError",
    "FetchError",
    "NoValidBumpError",
    "OnCurveError",
    "ConfigError",
    "SeedLengthError",
    "DerivedAddress",
    "Ecosystem",
    "FlatFile",
    "ResolvedIdentity",
    "FlatFileSource",
    "PreimageSource",
    "__version__",
]
