"""walletd RPC - Python client for the TurtleCoin walletd JSON-RPC API."""

from walletd_rpc.client import WalletdClient
from walletd_rpc.config import WalletdSettings, get_settings
from walletd_rpc.exceptions import (
    WalletdDecodeError,
    WalletdError,
    WalletdHTTPStatusError,
    WalletdNoAddressError,
    WalletdRPCError,
    WalletdTransportError,
)
from walletd_rpc.types import (
    Balance,
    SpendKeys,
    Status,
    Transfer,
    from_minor_units,
    to_minor_units,
)

__version__ = "0.1.0"

__all__ = [
    # Client
    "WalletdClient",
    # Config
    "WalletdSettings",
    "get_settings",
    # Exceptions
    "WalletdError",
    "WalletdTransportError",
    "WalletdHTTPStatusError",
    "WalletdDecodeError",
    "WalletdNoAddressError",
    "WalletdRPCError",
    # Types
    "Balance",
    "Status",
    "SpendKeys",
    "Transfer",
    "to_minor_units",
    "from_minor_units",
]
