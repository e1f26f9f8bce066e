"""Shared fakes for the transport layer. No network access."""

from __future__ import annotations

import threading
from typing import Any, Mapping, Optional, Sequence

import pytest

from nameminter.chain.transport import Coin, ExecuteResult, Fee

MINTER_ADDRESS = "stars1mintercontract0000000000000000000000000000000000000000"
WHITELIST_ADDRESS = "stars1whitelistcontract00000000000000000000000000000000000000"
SENDER = "stars1sender000000000000000000000000000000"


class FakeQueryConnection:
    """Read-only connection answering from a tag -> response table."""

    def __init__(self, responses: Optional[dict[str, Any]] = None) -> None:
        self.responses = dict(responses or {})
        self.errors: dict[str, Exception] = {}
        self.calls: list[tuple[str, Mapping[str, Any]]] = []
        self._lock = threading.Lock()

    def query_contract_smart(self, address: str, query_msg: Mapping[str, Any]) -> Any:
        with self._lock:
            self.calls.append((address, query_msg))
        tag = next(iter(query_msg))
        if tag in self.errors:
            raise self.errors.pop(tag)
        return self.responses.get(tag)


class FakeSigningConnection(FakeQueryConnection):
    """Signing connection that records each execute and returns a fresh result."""

    def __init__(self, responses: Optional[dict[str, Any]] = None) -> None:
        super().__init__(responses)
        self.executed: list[tuple[Any, ...]] = []
        self.execute_error: Optional[Exception] = None

    def execute(
        self,
        sender: str,
        contract_address: str,
        msg: Mapping[str, Any],
        fee: Fee,
        memo: Optional[str] = None,
        funds: Optional[Sequence[Coin]] = None,
    ) -> ExecuteResult:
        if self.execute_error is not None:
            error, self.execute_error = self.execute_error, None
            raise error
        self.executed.append((sender, contract_address, msg, fee, memo, funds))
        return ExecuteResult(
            tx_hash=f"{len(self.executed):064X}",
            height=1000 + len(self.executed),
            gas_wanted=200_000,
            gas_used=150_000,
        )


@pytest.fixture()
def query_connection() -> FakeQueryConnection:
    return FakeQueryConnection(
        {
            "admin": {"admin": SENDER},
            "whitelists": [WHITELIST_ADDRESS],
            "collection": "stars1namecollection",
            "params": {
                "min_name_length": 3,
                "max_name_length": 63,
                "base_price": "100000000",
                "fair_burn_percent": "0.5",
            },
            "config": {"public_mint_start_time": "1672531200000000000"},
        }
    )


@pytest.fixture()
def signing_connection(query_connection: FakeQueryConnection) -> FakeSigningConnection:
    return FakeSigningConnection(query_connection.responses)
