"""
Shuffle Dev API Client

Thin client for the node's REST interface: transaction submission and the
account queries needed to pick a sequence number and read resources. Every
call is a single attempt; there is no retry or backoff.
"""

from __future__ import annotations
import json
import logging
from typing import Any, Dict, List, Optional, Union
from urllib.parse import urljoin

import requests

from .runtime.address import AccountAddress
from .runtime.errors import (
    AccountNotFoundError,
    NetworkError,
    ResponseDecodeError,
    SubmissionError,
)

BCS_SIGNED_TRANSACTION = "application/vnd.bcs+signed_transaction"
DIEM_ACCOUNT_TYPE = "0x1::DiemAccount::DiemAccount"


def _address_literal(address: Union[str, AccountAddress]) -> str:
    if isinstance(address, AccountAddress):
        return address.to_hex_literal()
    return AccountAddress.from_hex(address).to_hex_literal()


class DevApiClient:
    """
    Client for the Shuffle dev API.

    Owns a requests.Session unless one is passed in; close it with close()
    or use the client as a context manager. An injected session is left open
    for its owner to close.
    """

    def __init__(self, node_url: str, timeout: Optional[float] = None,
                 session: Optional[requests.Session] = None, debug: bool = False):
        """
        Initialize the dev API client.

        Args:
            node_url: Base URL of the node, e.g. http://127.0.0.1:8081
            timeout: Per-request timeout in seconds; None waits indefinitely
            session: Session to use instead of a new one
            debug: Set the shuffle_message.api_client logger to DEBUG. The
                level is process-wide and stays set for later clients.
        """
        self.node_url = node_url if node_url.endswith("/") else node_url + "/"
        self.timeout = timeout
        self._owns_session = session is None
        self._session = requests.Session() if session is None else session

        self.logger = logging.getLogger(__name__)
        if debug:
            self.logger.setLevel(logging.DEBUG)

    def url(self, path: str) -> str:
        """Resolve path against the node URL."""
        return urljoin(self.node_url, path.lstrip("/"))

    def _request(self, method: str, path: str, **kwargs) -> Any:
        """
        Send one request and return the decoded JSON body.

        Raises:
            NetworkError: On transport failures
            SubmissionError: On HTTP status >= 400
            ResponseDecodeError: If the body is not JSON
        """
        url = self.url(path)
        self.logger.debug("%s %s", method, url)

        try:
            response = self._session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.exceptions.RequestException as e:
            raise NetworkError(f"Network error: {e}", details={"url": url}, cause=e) from e

        self.logger.debug("%s %s -> %s", method, url, response.status_code)

        if response.status_code >= 400:
            try:
                body = response.json()
            except ValueError:
                body = response.text
            raise SubmissionError(
                f"HTTP {response.status_code} from {url}",
                status_code=response.status_code,
                body=body,
            )

        try:
            return response.json()
        except ValueError as e:
            raise ResponseDecodeError(
                f"Response from {url} is not JSON",
                details={"url": url, "status_code": response.status_code},
                cause=e,
            ) from e

    def post_transactions(self, txn_bytes: bytes) -> Any:
        """
        Submit a BCS-encoded signed transaction.

        Args:
            txn_bytes: Wire bytes of the SignedTransaction

        Returns:
            The node's JSON response
        """
        headers = {
            "Accept": BCS_SIGNED_TRANSACTION,
            "Content-Type": BCS_SIGNED_TRANSACTION,
        }
        self.logger.debug("Submitting %d byte signed transaction", len(txn_bytes))
        return self._request("POST", "/transactions", data=txn_bytes, headers=headers)

    def get_transaction_by_hash(self, txn_hash: str) -> Dict[str, Any]:
        """Fetch a transaction by its hash."""
        return self._request("GET", f"/transactions/{txn_hash}")

    def get_account_resources(self, address: Union[str, AccountAddress]) -> List[Dict[str, Any]]:
        """Fetch every resource stored under address."""
        return self._request("GET", f"/accounts/{_address_literal(address)}/resources")

    def get_account_transactions(self, address: Union[str, AccountAddress],
                                 start: int = 0, limit: int = 10) -> List[Dict[str, Any]]:
        """Fetch transactions sent by address, starting at sequence number start."""
        params = {"start": str(start), "limit": str(limit)}
        return self._request("GET", f"/accounts/{_address_literal(address)}/transactions",
                             params=params)

    def get_account_sequence_number(self, address: Union[str, AccountAddress]) -> int:
        """
        Read the account's current sequence number from its DiemAccount resource.

        Raises:
            AccountNotFoundError: If the account has no DiemAccount resource
        """
        resources = self.get_account_resources(address)
        return parse_sequence_number(resources, address)

    def close(self) -> None:
        """Close the session if this client created it."""
        if self._owns_session:
            self._session.close()

    def __enter__(self) -> DevApiClient:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


def _is_diem_account(type_field: Any) -> bool:
    # Older nodes render the type as a string, newer ones as a struct tag object
    if isinstance(type_field, dict):
        return (type_field.get("module"), type_field.get("name")) == ("DiemAccount", "DiemAccount")
    return type_field == DIEM_ACCOUNT_TYPE


def parse_sequence_number(resources: List[Dict[str, Any]],
                          address: Union[str, AccountAddress] = "") -> int:
    """Extract value.sequence_number from the DiemAccount resource."""
    for resource in resources:
        if _is_diem_account(resource.get("type")):
            try:
                return int(resource["value"]["sequence_number"])
            except (KeyError, TypeError, ValueError) as e:
                raise AccountNotFoundError(
                    "Invalid sequence number in DiemAccount resource",
                    details={"resource": json.dumps(resource, default=str)},
                    cause=e,
                ) from e
    raise AccountNotFoundError(
        f"No {DIEM_ACCOUNT_TYPE} resource for account {address}",
        details={"address": str(address)},
    )
