"""
Transport contracts the contract clients are written against.

A read-only connection only needs query_contract_smart. A signing
connection adds execute, and owns signing, gas estimation, sequence
numbers and broadcasting. Clients never look inside either one.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal, Mapping, Optional, Protocol, Sequence, TypedDict, Union


class Coin(TypedDict):
    denom: str
    amount: str


class StdFee(TypedDict, total=False):
    amount: list[Coin]
    gas: str
    granter: str
    payer: str


AUTO: Literal["auto"] = "auto"

# A number is a gas-estimate multiplier; "auto" lets the transport decide.
Fee = Union[int, float, StdFee, Literal["auto"]]


@dataclass(frozen=True)
class ExecuteResult:
    """Outcome of a broadcast transaction accepted by the chain."""

    tx_hash: str
    height: int
    gas_wanted: int
    gas_used: int
    events: tuple[Mapping[str, Any], ...] = field(default_factory=tuple)
    logs: tuple[Mapping[str, Any], ...] = field(default_factory=tuple)


class ReadOnlyTransport(Protocol):
    def query_contract_smart(self, address: str, query_msg: Mapping[str, Any]) -> Any: ...


class SigningTransport(ReadOnlyTransport, Protocol):
    def execute(
        self,
        sender: str,
        contract_address: str,
        msg: Mapping[str, Any],
        fee: Fee,
        memo: Optional[str] = None,
        funds: Optional[Sequence[Coin]] = None,
    ) -> ExecuteResult: ...
