"""
Deployment configuration for the Replay SDK.

Program ids, the token mint and the flat-file endpoint differ per
deployment, so none of them are hard-coded in the derivation logic. The
packaged deployments.json provides the defaults and any value can be
overridden through environment variables.
"""
import json
import os
import logging
import importlib.resources
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .exceptions import ConfigError
from .models import DEFAULT_CHAIN_CODES, Ecosystem
from .utils import decode_pubkey

logger = logging.getLogger(__name__)

DEFAULT_DEPLOYMENT = "mainnet"

# Environment variable suffix for each overridable field
ENV_OVERRIDES = {
    "flat_file_url": "FLATFILE_URL",
    "receipt_program_id": "RECEIPT_PROGRAM_ID",
    "mint": "MINT",
    "token_program_id": "TOKEN_PROGRAM_ID",
    "ata_program_id": "ATA_PROGRAM_ID",
}


class Deployment(BaseModel):
    """Constants for one deployment of the receipt program"""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = DEFAULT_DEPLOYMENT
    flat_file_url: str = Field(..., alias="flatFileUrl")
    receipt_program_id: str = Field(..., alias="receiptProgramId")
    mint: str
    token_program_id: str = Field(..., alias="tokenProgramId")
    ata_program_id: str = Field(..., alias="ataProgramId")
    chain_codes: Dict[Ecosystem, int] = Field(
        default_factory=lambda: dict(DEFAULT_CHAIN_CODES), alias="chainCodes"
    )

    @field_validator("receipt_program_id", "mint", "token_program_id", "ata_program_id")
    @classmethod
    def check_pubkey(cls, value: str) -> str:
        decode_pubkey(value)
        return value

    @field_validator("flat_file_url")
    @classmethod
    def strip_slash(cls, value: str) -> str:
        if not value:
            raise ValueError("flat_file_url must not be empty")
        return value.rstrip("/")

    @property
    def receipt_program_bytes(self) -> bytes:
        return decode_pubkey(self.receipt_program_id)

    @property
    def mint_bytes(self) -> bytes:
        return decode_pubkey(self.mint)

    @property
    def token_program_bytes(self) -> bytes:
        return decode_pubkey(self.token_program_id)

    @property
    def ata_program_bytes(self) -> bytes:
        return decode_pubkey(self.ata_program_id)


class DeploymentConfig:
    """
    Loads deployment definitions.

    Definitions are read once from the packaged deployments.json and cached
    at class level.
    """

    _deployments_cache: Optional[Dict[str, Dict[str, Any]]] = None

    @classmethod
    def load_deployments(cls) -> Dict[str, Dict[str, Any]]:
        """
        Load all deployment definitions.

        Returns:
            Mapping of deployment name to its raw definition

        Raises:
            ConfigError: If the packaged file is missing or malformed
        """
        if cls._deployments_cache is not None:
            return cls._deployments_cache

        try:
            resource = importlib.resources.files("replay_sdk").joinpath("deployments.json")
            with resource.open("r", encoding="utf-8") as f:
                cls._deployments_cache = json.load(f)
        except (OSError, ValueError) as e:
            raise ConfigError(f"Failed to load deployments.json: {e}") from e

        logger.debug("Loaded %d deployment definitions", len(cls._deployments_cache))
        return cls._deployments_cache

    @staticmethod
    def _env_prefix(name: str) -> str:
        return name.upper().replace("-", "_")

    @classmethod
    def default_name(cls) -> str:
        """Deployment selected by REPLAY_DEPLOYMENT, or mainnet"""
        return os.environ.get("REPLAY_DEPLOYMENT") or DEFAULT_DEPLOYMENT

    @classmethod
    def get_deployment(cls, name: Optional[str] = None, **overrides: Any) -> Deployment:
        """
        Get a deployment with environment and keyword overrides applied.

        Keyword overrides win over environment variables, which win over the
        packaged definition.

        Args:
            name: Deployment name (defaults to default_name())
            **overrides: Field values to use instead of the configured ones

        Returns:
            Validated Deployment

        Raises:
            ConfigError: If the deployment is unknown or a value is invalid
        """
        name = name or cls.default_name()
        deployments = cls.load_deployments()
        if name not in deployments:
            available = ", ".join(sorted(deployments))
            raise ConfigError(f"Unknown deployment '{name}'. Available deployments: {available}")

        data: Dict[str, Any] = dict(deployments[name])
        data["name"] = name

        prefix = cls._env_prefix(name)
        for field, suffix in ENV_OVERRIDES.items():
            env_value = os.environ.get(f"{prefix}_{suffix}")
            if env_value:
                logger.debug("Using %s_%s from environment", prefix, suffix)
                data.pop(Deployment.model_fields[field].alias or field, None)
                data[field] = env_value

        for field, value in overrides.items():
            if value is None:
                continue
            if field not in Deployment.model_fields:
                raise ConfigError(f"Unknown deployment setting '{field}'")
            data.pop(Deployment.model_fields[field].alias or field, None)
            data[field] = value

        try:
            return Deployment.model_validate(data)
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration for deployment '{name}': {e}") from e

    @classmethod
    def get_flat_file_url(cls, name: Optional[str] = None, override: Optional[str] = None) -> str:
        """
        Get the flat-file base URL for a deployment.

        Args:
            name: Deployment name
            override: URL to use instead of the configured one

        Returns:
            Base URL without trailing slash
        """
        return cls.get_deployment(name, flat_file_url=override).flat_file_url
