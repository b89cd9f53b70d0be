"""Exception classes for the walletd RPC client."""

from typing import Any, Optional


class WalletdError(Exception):
    """Base exception for all walletd RPC client errors."""

    kind = "ERROR"

    def __init__(
        self,
        message: str,
        method: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.method = method
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        return f"[{self.method or 'walletd'}] {self.kind}: {self.message}"


class WalletdTransportError(WalletdError):
    """Raised when the request could not be sent or no response was received."""

    kind = "REQUEST_FAILED"


class WalletdHTTPStatusError(WalletdTransportError):
    """Raised when walletd answers with a non-2xx HTTP status."""

    kind = "HTTP_STATUS"

    def __init__(
        self,
        message: str,
        status_code: int,
        method: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.status_code = status_code
        super().__init__(message=message, method=method, details=details)


class WalletdDecodeError(WalletdError):
    """Raised when a response is not JSON or does not have the expected shape."""

    kind = "DECODE_ERROR"


class WalletdNoAddressError(WalletdDecodeError):
    """Raised when walletd reports a wallet without any address."""

    def __init__(
        self,
        message: str = "walletd returned an empty address list",
        method: Optional[str] = "getAddresses",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message=message, method=method, details=details)


class WalletdRPCError(WalletdError):
    """Raised when walletd returns an error envelope instead of a result."""

    kind = "RPC_ERROR"

    def __init__(
        self,
        message: str,
        code: Optional[int] = None,
        method: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.code = code
        super().__init__(message=message, method=method, details=details)


def raise_for_rpc_error(method: str, error_data: dict[str, Any]) -> None:
    """Raise a WalletdRPCError built from a walletd error envelope."""
    message = error_data.get("message", "Unknown error")
    code = error_data.get("code")
    details = {k: v for k, v in error_data.items() if k not in ("message", "code")}

    raise WalletdRPCError(message=message, code=code, method=method, details=details)
