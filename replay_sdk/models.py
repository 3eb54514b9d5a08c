"""
Data models for the Replay SDK.
"""
from enum import Enum
from typing import Dict, Any

import base58
from pydantic import BaseModel, ConfigDict, Field, field_validator


class Ecosystem(str, Enum):
    """Address namespaces an identity can belong to"""
    DISCORD = "Discord"
    SOLANA = "Solana"
    ETHEREUM = "Ethereum"
    SUI = "Sui"
    APTOS = "Aptos"
    OSMOSIS = "Osmosis"
    TERRA = "Terra"
    INJECTIVE = "Injective"
    ALGORAND = "Algorand"


# Chain codes used by the flat-file store to key preimages
DEFAULT_CHAIN_CODES: Dict[Ecosystem, int] = {
    Ecosystem.DISCORD: 14443,
    Ecosystem.SOLANA: 1,
    Ecosystem.ETHEREUM: 2,
    Ecosystem.SUI: 21,
    Ecosystem.APTOS: 22,
    Ecosystem.OSMOSIS: 20,
    Ecosystem.TERRA: 3,
    Ecosystem.INJECTIVE: 19,
    Ecosystem.ALGORAND: 8,
}


class ResolvedIdentity(BaseModel):
    """Canonical address together with the ecosystem it belongs to"""
    model_config = ConfigDict(frozen=True)

    address: str
    ecosystem: Ecosystem


class DerivedAddress(BaseModel):
    """Program-derived address and the bump seed that produced it"""
    model_config = ConfigDict(frozen=True)

    address: bytes = Field(..., min_length=32, max_length=32)
    bump: int = Field(..., ge=0, le=255)

    def to_base58(self) -> str:
        return base58.b58encode(self.address).decode("ascii")

    def __str__(self) -> str:
        return self.to_base58()


class FlatFile(BaseModel):
    """JSON document served by the preimage endpoint"""
    model_config = ConfigDict(extra="allow")

    preimage: str

    @field_validator("preimage")
    @classmethod
    def check_hex(cls, value: str) -> str:
        digits = value[2:] if value[:2].lower() == "0x" else value
        try:
            bytes.fromhex(digits)
        except ValueError:
            raise ValueError(f"preimage is not valid hex: {value[:16]!r}")
        return value

    def preimage_bytes(self) -> bytes:
        """
        Decode the preimage hex string.

        Returns:
            Raw preimage bytes, with any leading 0x marker removed
        """
        value = self.preimage
        if value[:2].lower() == "0x":
            value = value[2:]
        return bytes.fromhex(value)

    def extra_fields(self) -> Dict[str, Any]:
        return dict(self.model_extra or {})
