"""
Identity classification.

Maps a user-supplied identity (Discord id, chain address or wallet key) to
its canonical address and ecosystem. Rules are checked in order and the first
match wins: several formats share prefixes and lengths, so the order matters.
"""
import re
import string
from typing import Dict, Optional

from .exceptions import AmbiguousAddressError, ConfigError, InvalidAddressError
from .models import DEFAULT_CHAIN_CODES, Ecosystem, ResolvedIdentity
from .utils import decode_pubkey

# Bech32 human-readable prefixes, checked before anything else
BECH32_PREFIXES = (
    ("osmo1", Ecosystem.OSMOSIS),
    ("terra1", Ecosystem.TERRA),
    ("inj1", Ecosystem.INJECTIVE),
)

EVM_ADDRESS_LENGTH = 42
MOVE_ADDRESS_LENGTH = 66

DISCORD_ID_RE = re.compile(r"[0-9]{5,20}")
ALGORAND_ADDRESS_RE = re.compile(r"[A-Z2-7]{58}")

_HEX_DIGITS = frozenset(string.hexdigits)


def _is_hex(value: str) -> bool:
    return all(c in _HEX_DIGITS for c in value)


def _resolve_move_address(addr: str, hint: Optional[str]) -> ResolvedIdentity:
    # Sui and Aptos share the 32-byte 0x format; only the hint can tell them apart
    if hint:
        folded = hint.lower()
        if "sui".startswith(folded):
            return ResolvedIdentity(address=addr, ecosystem=Ecosystem.SUI)
        if "aptos".startswith(folded):
            return ResolvedIdentity(address=addr, ecosystem=Ecosystem.APTOS)

    raise AmbiguousAddressError(
        "Can't automatically distinguish Sui and Aptos addresses.\n"
        "specify via '<addr> s' or '<addr> a' argument",
        address=addr,
        candidates=(Ecosystem.SUI.value, Ecosystem.APTOS.value),
    )


def classify(addr: str, hint: Optional[str] = None) -> ResolvedIdentity:
    """
    Classify an identity string.

    Args:
        addr: Raw identity as supplied by the user
        hint: Optional ecosystem hint; only used to tell Sui ("s", "sui") from
              Aptos ("a", "aptos") and ignored otherwise

    Returns:
        ResolvedIdentity with the canonical address and ecosystem

    Raises:
        InvalidAddressError: If the string matches no supported format
        AmbiguousAddressError: If a 32-byte hex address comes without a
                               usable hint
    """
    if not isinstance(addr, str):
        raise InvalidAddressError(f"Invalid address: {addr!r}", address=None)

    for prefix, ecosystem in BECH32_PREFIXES:
        if addr.startswith(prefix):
            return ResolvedIdentity(address=addr, ecosystem=ecosystem)

    if addr.startswith("0x"):
        digits = addr[2:]
        if _is_hex(digits):
            if len(addr) == EVM_ADDRESS_LENGTH:
                return ResolvedIdentity(address=addr.lower(), ecosystem=Ecosystem.ETHEREUM)
            if len(addr) == MOVE_ADDRESS_LENGTH:
                return _resolve_move_address(addr, hint)
        raise InvalidAddressError(f"Invalid hex address: {addr}", address=addr)

    if DISCORD_ID_RE.fullmatch(addr):
        return ResolvedIdentity(address=addr, ecosystem=Ecosystem.DISCORD)

    if ALGORAND_ADDRESS_RE.fullmatch(addr):
        return ResolvedIdentity(address=addr, ecosystem=Ecosystem.ALGORAND)

    try:
        decode_pubkey(addr)
    except ValueError:
        raise InvalidAddressError(f"Invalid address: '{addr}'", address=addr)
    return ResolvedIdentity(address=addr, ecosystem=Ecosystem.SOLANA)


def chain_code(ecosystem: Ecosystem, table: Optional[Dict[Ecosystem, int]] = None) -> int:
    """
    Look up the flat-file chain code for an ecosystem.

    Args:
        ecosystem: Ecosystem to look up
        table: Optional chain-code table (defaults to the built-in one)

    Returns:
        Numeric chain code
    """
    codes = table if table is not None else DEFAULT_CHAIN_CODES
    try:
        return codes[Ecosystem(ecosystem)]
    except KeyError:
        raise ConfigError(f"No chain code configured for {ecosystem}")
