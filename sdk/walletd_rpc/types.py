"""Type definitions for the walletd RPC client.

walletd speaks in minor units (hundredths of a coin); everything handed to or
returned from :class:`~walletd_rpc.client.WalletdClient` is in major units.
The conversion helpers below are the only place that scaling happens.
"""

from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr

MINOR_UNITS_PER_COIN = 100


def to_minor_units(amount: float) -> int:
    """Convert a major-unit amount to walletd minor units, truncating."""
    return int(amount * MINOR_UNITS_PER_COIN)


def from_minor_units(value: int) -> float:
    """Convert walletd minor units to a major-unit amount."""
    return value / MINOR_UNITS_PER_COIN


# ==================== Wire envelope ====================


class RPCRequest(BaseModel):
    """JSON-RPC request envelope sent to walletd."""

    jsonrpc: str = "2.0"
    id: int = 0
    password: str
    method: str
    params: dict[str, Any] = Field(default_factory=dict)


class RPCErrorBody(BaseModel):
    """Error object of a failed walletd call."""

    model_config = ConfigDict(extra="allow")

    message: str
    code: Optional[int] = None


class RPCResponse(BaseModel):
    """JSON-RPC response envelope; exactly one of result/error is expected."""

    model_config = ConfigDict(extra="allow")

    result: Optional[dict[str, Any]] = None
    error: Optional[RPCErrorBody] = None


# ==================== Per-method results ====================


class _WalletdResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class BalanceResult(_WalletdResult):
    """Result of getBalance, in minor units."""

    available_balance: StrictInt = Field(alias="availableBalance")
    locked_amount: StrictInt = Field(alias="lockedAmount")


class AddressesResult(_WalletdResult):
    """Result of getAddresses."""

    addresses: list[StrictStr]


class RawTransaction(_WalletdResult):
    """One transaction entry of getTransactions, as walletd reports it."""

    payment_id: StrictStr = Field(alias="paymentId")
    transaction_hash: StrictStr = Field(alias="transactionHash")
    timestamp: StrictInt
    amount: StrictInt  # minor units, negative for outgoing
    fee: StrictInt  # minor units
    block_index: StrictInt = Field(alias="blockIndex")


class TransactionBlock(_WalletdResult):
    """Transactions of a single block."""

    transactions: list[RawTransaction] = Field(default_factory=list)


class TransactionsResult(_WalletdResult):
    """Result of getTransactions."""

    items: list[TransactionBlock]


class StatusResult(_WalletdResult):
    """Result of getStatus."""

    block_count: StrictInt = Field(alias="blockCount")
    known_block_count: StrictInt = Field(alias="knownBlockCount")
    peer_count: StrictInt = Field(alias="peerCount")


class SendTransactionResult(_WalletdResult):
    """Result of sendTransaction."""

    transaction_hash: StrictStr = Field(alias="transactionHash")


class ViewKeyResult(_WalletdResult):
    """Result of getViewKey."""

    view_secret_key: StrictStr = Field(alias="viewSecretKey")


class SpendKeysResult(_WalletdResult):
    """Result of getSpendKeys."""

    spend_secret_key: StrictStr = Field(alias="spendSecretKey")
    spend_public_key: StrictStr = Field(alias="spendPublicKey")


# ==================== Caller-facing records ====================


class Balance(BaseModel):
    """Wallet balance in major units."""

    available: float
    locked: float
    total: float


class Status(BaseModel):
    """walletd synchronization status."""

    block_count: int
    known_block_count: int
    peer_count: int


class SpendKeys(BaseModel):
    """Spend key pair of one wallet address."""

    spend_secret_key: str
    spend_public_key: str


class Transfer(BaseModel):
    """A transaction as seen by the wallet, amounts in major units."""

    payment_id: str
    transaction_hash: str
    timestamp: datetime
    amount: float
    fee: float
    block: int
    confirmations: int
    is_incoming: bool

    @classmethod
    def from_raw(cls, raw: RawTransaction, block_count: int) -> "Transfer":
        """Build a Transfer from a walletd entry.

        Args:
            raw: Decoded transaction entry
            block_count: The blockCount the transactions were queried with

        Returns:
            Transfer with confirmations and direction filled in
        """
        amount = from_minor_units(raw.amount)
        return cls(
            payment_id=raw.payment_id,
            transaction_hash=raw.transaction_hash,
            timestamp=datetime.fromtimestamp(raw.timestamp, tz=timezone.utc),
            amount=amount,
            fee=from_minor_units(raw.fee),
            block=raw.block_index,
            confirmations=block_count - raw.block_index + 1,
            is_incoming=amount >= 0,
        )
