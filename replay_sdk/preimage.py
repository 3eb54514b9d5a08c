"""
Preimage retrieval from the flat-file store.

The store serves one JSON document per identity at
``<base-url>/<address>_<chain-code>.json`` whose ``preimage`` field holds the
hex-encoded secret backing that identity's receipt.
"""
import logging
import urllib.parse
from typing import Optional, Protocol

import requests
from pydantic import ValidationError

from .exceptions import FetchError
from .models import FlatFile


class PreimageSource(Protocol):
    """Protocol for anything that can supply a preimage"""

    def fetch(self, address: str, chain_code: int) -> bytes:
        """Return the preimage for a canonical address and chain code"""
        ...


class FlatFileSource:
    """
    Fetches preimages over HTTP from the flat-file store.

    Each fetch is a single GET request; failures are not retried.
    """

    def __init__(
        self,
        base_url: str,
        timeout: int = 10,
        session: Optional[requests.Session] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize the source

        Args:
            base_url: Base URL of the flat-file store
            timeout: Timeout for HTTP requests in seconds
            session: Optional requests session to reuse
            logger: Optional logger instance

        Raises:
            ValueError: If the URL doesn't use https (unless it's localhost/127.0.0.1)
        """
        parsed = urllib.parse.urlparse(base_url)
        host = parsed.netloc.split(':')[0]
        is_local = host in ('localhost', '127.0.0.1')
        if parsed.scheme != 'https' and not is_local:
            raise ValueError(f"base_url must use https:// for security (got: {parsed.scheme}://)")

        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = session or requests.Session()
        self.logger = logger or logging.getLogger(__name__)

    def url_for(self, address: str, chain_code: int) -> str:
        """Build the flat-file URL for an identity"""
        return f"{self.base_url}/{address}_{chain_code}.json"

    def fetch_flat_file(self, address: str, chain_code: int) -> FlatFile:
        """
        Fetch and validate the flat file for an identity.

        Args:
            address: Canonical address
            chain_code: Flat-file chain code of the address's ecosystem

        Returns:
            Parsed FlatFile

        Raises:
            FetchError: On network errors, non-2xx status or a malformed body
        """
        url = self.url_for(address, chain_code)
        self.logger.info("Fetching flat file %s", url)

        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            self.logger.error("Flat file request failed: %s", e)
            raise FetchError(f"Fetching flatfile failed: {e}", url=url) from e

        if not response.ok:
            self.logger.error("Flat file request returned status %s", response.status_code)
            raise FetchError(
                f"Fetching flatfile failed with status: {response.status_code}",
                url=url,
                status_code=response.status_code
            )

        try:
            body = response.json()
        except ValueError as e:
            self.logger.error("Flat file at %s is not valid JSON: %s", url, e)
            raise FetchError(f"Invalid JSON in flatfile: {e}", url=url, status_code=response.status_code) from e

        if not isinstance(body, dict):
            self.logger.error("Flat file at %s is a JSON %s, not an object", url, type(body).__name__)
            raise FetchError(
                f"Flatfile must be a JSON object, got {type(body).__name__}",
                url=url,
                status_code=response.status_code
            )

        try:
            return FlatFile.model_validate(body)
        except ValidationError as e:
            self.logger.error("Malformed flat file at %s: %s", url, e)
            raise FetchError(f"Malformed flatfile: {e}", url=url, status_code=response.status_code) from e

    def fetch(self, address: str, chain_code: int) -> bytes:
        """
        Fetch the preimage for an identity.

        Returns:
            Raw preimage bytes

        Raises:
            FetchError: If retrieval or decoding fails
        """
        preimage = self.fetch_flat_file(address, chain_code).preimage_bytes()
        self.logger.debug("Received %d byte preimage", len(preimage))
        return preimage

    def close(self) -> None:
        self.session.close()
