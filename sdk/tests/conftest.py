"""Test configuration and fixtures for walletd client tests."""

from typing import Any, Callable, Iterator
from unittest.mock import MagicMock, patch

import httpx
import pytest

from walletd_rpc import WalletdClient, WalletdSettings


@pytest.fixture
def rpc_password() -> str:
    """Return a test RPC password."""
    return "walletd_test_password"


@pytest.fixture
def rpc_url() -> str:
    """Return a test walletd endpoint."""
    return "http://walletd.test:8070/json_rpc"


@pytest.fixture
def settings(rpc_password: str, rpc_url: str) -> WalletdSettings:
    """Return settings isolated from the environment and any .env file."""
    return WalletdSettings(
        _env_file=None,
        RPC_URL=rpc_url,
        RPC_PASSWORD=rpc_password,
        TIMEOUT=5.0,
    )


@pytest.fixture
def client(settings: WalletdSettings) -> Iterator[WalletdClient]:
    """Return a client configured from the test settings."""
    with WalletdClient(settings=settings) as walletd:
        yield walletd


def _make_response(body: Any, status_code: int = 200) -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = body
    return response


@pytest.fixture
def make_response() -> Callable[..., MagicMock]:
    """Return a factory for mocked httpx responses carrying a decoded JSON body."""
    return _make_response


@pytest.fixture
def mock_request() -> Iterator[MagicMock]:
    """Patch httpx.Client.request for the duration of a test."""
    with patch.object(httpx.Client, "request") as mocked:
        yield mocked
