"""walletd JSON-RPC client."""

import logging
from typing import Any, Optional, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from walletd_rpc.config import WalletdSettings, get_settings
from walletd_rpc.exceptions import (
    WalletdDecodeError,
    WalletdHTTPStatusError,
    WalletdNoAddressError,
    WalletdTransportError,
    raise_for_rpc_error,
)
from walletd_rpc.types import (
    AddressesResult,
    Balance,
    BalanceResult,
    RPCRequest,
    RPCResponse,
    SendTransactionResult,
    SpendKeys,
    SpendKeysResult,
    Status,
    StatusResult,
    TransactionsResult,
    Transfer,
    ViewKeyResult,
    from_minor_units,
    to_minor_units,
)

logger = logging.getLogger(__name__)

ResultT = TypeVar("ResultT", bound=BaseModel)


class WalletdClient:
    """Client for the walletd JSON-RPC API.

    Every operation issues exactly one blocking POST. Operations accept an
    optional ``password`` that overrides the configured RPC password for that
    call only.

    Args:
        rpc_password: RPC password sent with every request
        rpc_url: Full URL of the JSON-RPC endpoint
        timeout: Request timeout in seconds
        settings: Settings to fall back on for anything not given explicitly
    """

    def __init__(
        self,
        rpc_password: Optional[str] = None,
        rpc_url: Optional[str] = None,
        timeout: Optional[float] = None,
        settings: Optional[WalletdSettings] = None,
    ) -> None:
        settings = settings or get_settings()
        self.rpc_password = rpc_password if rpc_password is not None else settings.RPC_PASSWORD
        self.rpc_url = rpc_url or settings.RPC_URL
        self.timeout = timeout if timeout is not None else settings.TIMEOUT
        self.request_id = settings.REQUEST_ID
        self._client = httpx.Client(
            timeout=self.timeout,
            headers={"Content-Type": "application/json"},
        )

    def __enter__(self) -> "WalletdClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def call(
        self,
        method: str,
        params: Optional[dict[str, Any]] = None,
        password: Optional[str] = None,
    ) -> Optional[dict[str, Any]]:
        """Issue one JSON-RPC call and return the raw ``result`` object.

        Args:
            method: walletd RPC method name
            params: Method parameters
            password: RPC password, defaults to the configured one

        Returns:
            The ``result`` mapping, or None when walletd sent none

        Raises:
            WalletdTransportError: If the request failed or got a non-2xx status
            WalletdDecodeError: If the body is not a JSON-RPC envelope
            WalletdRPCError: If walletd returned an error envelope
        """
        request = RPCRequest(
            id=self.request_id,
            password=self.rpc_password if password is None else password,
            method=method,
            params=params or {},
        )
        logger.debug("walletd request: method=%s", method)

        try:
            response = self._client.request(
                method="POST",
                url=self.rpc_url,
                json=request.model_dump(),
            )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning("walletd %s request failed: %s", method, e)
            raise WalletdTransportError(
                message=f"request failed: {e}",
                method=method,
            ) from e

        if not 200 <= response.status_code < 300:
            logger.warning("walletd %s returned HTTP %s", method, response.status_code)
            raise WalletdHTTPStatusError(
                message=f"walletd responded with HTTP {response.status_code}",
                status_code=response.status_code,
                method=method,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise WalletdDecodeError(
                message=f"response is not valid JSON: {e}",
                method=method,
            ) from e

        if not isinstance(data, dict):
            raise WalletdDecodeError(
                message=f"expected a JSON object, got {type(data).__name__}",
                method=method,
            )

        try:
            envelope = RPCResponse.model_validate(data)
        except ValidationError as e:
            raise WalletdDecodeError(
                message="malformed response envelope",
                method=method,
                details={"errors": e.errors(include_url=False)},
            ) from e

        if envelope.error is not None:
            logger.warning("walletd %s returned error: %s", method, envelope.error.message)
            raise_for_rpc_error(method, envelope.error.model_dump())

        return envelope.result

    def _decode(
        self,
        method: str,
        model: type[ResultT],
        result: Optional[dict[str, Any]],
    ) -> ResultT:
        if result is None:
            raise WalletdDecodeError(message="response has no result", method=method)
        try:
            return model.model_validate(result)
        except ValidationError as e:
            raise WalletdDecodeError(
                message=f"unexpected {method} result",
                method=method,
                details={"errors": e.errors(include_url=False)},
            ) from e

    def get_balance(self, password: Optional[str] = None) -> Balance:
        """Get the available and locked balance of the wallet.

        Returns:
            Balance in major units; total is available + locked
        """
        result = self.call("getBalance", password=password)
        data = self._decode("getBalance", BalanceResult, result)

        available = from_minor_units(data.available_balance)
        locked = from_minor_units(data.locked_amount)
        return Balance(available=available, locked=locked, total=available + locked)

    def get_address(self, password: Optional[str] = None) -> str:
        """Get the primary address of the wallet.

        Raises:
            WalletdNoAddressError: If the wallet reports no address
        """
        result = self.call("getAddresses", password=password)
        data = self._decode("getAddresses", AddressesResult, result)

        if not data.addresses:
            raise WalletdNoAddressError()
        return data.addresses[0]

    def list_transactions(
        self,
        block_count: int,
        first_block_index: int,
        addresses: list[str],
        password: Optional[str] = None,
    ) -> list[Transfer]:
        """List the wallet's transactions in a block range.

        Args:
            block_count: Number of blocks to scan
            first_block_index: Index of the first block to scan
            addresses: Restrict to these wallet addresses
            password: RPC password override

        Returns:
            Transfers in walletd order; empty when walletd has nothing new
        """
        params: dict[str, Any] = {
            "blockCount": block_count,
            "firstBlockIndex": first_block_index,
            "addresses": addresses,
        }
        result = self.call("getTransactions", params=params, password=password)

        # walletd answers with a null result when there are no new transactions
        if result is None:
            return []

        data = self._decode("getTransactions", TransactionsResult, result)
        try:
            return [
                Transfer.from_raw(tx, block_count)
                for block in data.items
                for tx in block.transactions
            ]
        except (OverflowError, OSError, ValueError) as e:
            # out-of-range timestamps fail in datetime.fromtimestamp
            raise WalletdDecodeError(
                message=f"unexpected getTransactions entry: {e}",
                method="getTransactions",
            ) from e

    def get_status(self, password: Optional[str] = None) -> Status:
        """Get walletd's connection and sync status."""
        result = self.call("getStatus", password=password)
        logger.debug("walletd status: %s", result)
        data = self._decode("getStatus", StatusResult, result)

        return Status(
            block_count=data.block_count,
            known_block_count=data.known_block_count,
            peer_count=data.peer_count,
        )

    def send_transaction(
        self,
        recipient_address: str,
        amount: float,
        payment_id: str,
        fee: float,
        mixin_count: int,
        password: Optional[str] = None,
    ) -> str:
        """Send funds to a single recipient.

        Args:
            recipient_address: Destination address
            amount: Amount in major units
            payment_id: Payment ID, may be empty
            fee: Fee in major units
            mixin_count: Anonymity level
            password: RPC password override

        Returns:
            Hash of the submitted transaction

        Raises:
            WalletdRPCError: If walletd rejected the transaction
        """
        params: dict[str, Any] = {
            "fee": to_minor_units(fee),
            "paymentId": payment_id,
            "anonymity": mixin_count,
            "transfers": [
                {"amount": to_minor_units(amount), "address": recipient_address},
            ],
        }
        result = self.call("sendTransaction", params=params, password=password)
        data = self._decode("sendTransaction", SendTransactionResult, result)
        return data.transaction_hash

    def get_view_key(self, password: Optional[str] = None) -> str:
        """Get the private view key of the wallet."""
        result = self.call("getViewKey", password=password)
        return self._decode("getViewKey", ViewKeyResult, result).view_secret_key

    def get_spend_keys(self, address: str, password: Optional[str] = None) -> SpendKeys:
        """Get the secret and public spend keys of one wallet address."""
        result = self.call("getSpendKeys", params={"address": address}, password=password)
        data = self._decode("getSpendKeys", SpendKeysResult, result)

        return SpendKeys(
            spend_secret_key=data.spend_secret_key,
            spend_public_key=data.spend_public_key,
        )

    def save_wallet(self, password: Optional[str] = None) -> None:
        """Ask walletd to persist the wallet and its sync state."""
        self.call("save", password=password)
