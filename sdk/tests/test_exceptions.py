"""Tests for exception classes and error envelope mapping."""

import pytest

from walletd_rpc.exceptions import (
    WalletdDecodeError,
    WalletdError,
    WalletdHTTPStatusError,
    WalletdNoAddressError,
    WalletdRPCError,
    WalletdTransportError,
    raise_for_rpc_error,
)


def test_transport_error():
    """Test WalletdTransportError carries method and message."""
    exc = WalletdTransportError(message="request failed: connection refused", method="getStatus")
    assert isinstance(exc, WalletdError)
    assert exc.method == "getStatus"
    assert exc.message == "request failed: connection refused"
    assert exc.details == {}


def test_http_status_error_is_transport_error():
    """Test non-2xx responses are reported as transport errors with a status code."""
    exc = WalletdHTTPStatusError(message="walletd responded with HTTP 401", status_code=401)
    assert isinstance(exc, WalletdTransportError)
    assert exc.status_code == 401


def test_no_address_error_defaults():
    """Test WalletdNoAddressError is a decode error with a fixed default."""
    exc = WalletdNoAddressError()
    assert isinstance(exc, WalletdDecodeError)
    assert exc.method == "getAddresses"
    assert exc.message == "walletd returned an empty address list"


def test_error_kinds_are_distinct():
    """Test callers can tell transport, decode and daemon errors apart."""
    transport = WalletdTransportError(message="down")
    decode = WalletdDecodeError(message="bad json")
    rpc = WalletdRPCError(message="Wrong amount")

    assert not isinstance(transport, (WalletdDecodeError, WalletdRPCError))
    assert not isinstance(decode, (WalletdTransportError, WalletdRPCError))
    assert not isinstance(rpc, (WalletdTransportError, WalletdDecodeError))


def test_raise_for_rpc_error_keeps_message_and_code():
    """Test raise_for_rpc_error maps the daemon envelope exactly."""
    with pytest.raises(WalletdRPCError) as exc_info:
        raise_for_rpc_error(
            "sendTransaction",
            {"code": -32000, "message": "Wrong amount", "data": {"application_code": 7}},
        )
    assert exc_info.value.message == "Wrong amount"
    assert exc_info.value.code == -32000
    assert exc_info.value.method == "sendTransaction"
    assert exc_info.value.details == {"data": {"application_code": 7}}


def test_raise_for_rpc_error_keeps_empty_message():
    """Test an empty daemon message is passed through unchanged."""
    with pytest.raises(WalletdRPCError) as exc_info:
        raise_for_rpc_error("save", {"message": ""})
    assert exc_info.value.message == ""
    assert exc_info.value.code is None


def test_raise_for_rpc_error_without_message():
    """Test raise_for_rpc_error falls back to a generic message."""
    with pytest.raises(WalletdRPCError) as exc_info:
        raise_for_rpc_error("save", {"code": -1})
    assert exc_info.value.message == "Unknown error"
    assert exc_info.value.code == -1


def test_exception_str_representation():
    """Test exception string representation."""
    exc = WalletdRPCError(message="Wrong amount", method="sendTransaction")
    assert str(exc) == "[sendTransaction] RPC_ERROR: Wrong amount"

    exc = WalletdDecodeError(message="response has no result")
    assert str(exc) == "[walletd] DECODE_ERROR: response has no result"
