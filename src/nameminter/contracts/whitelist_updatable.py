"""
Client for the whitelist-updatable contract.

A name-minter gates early minting on one or more of these whitelists. Each
whitelist holds a set of addresses, a mint count per address, and a
per-address mint limit enforced by the minter.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Optional, Sequence

from ..chain.transport import AUTO, Coin, ExecuteResult, Fee, ReadOnlyTransport, SigningTransport
from ..schema.types import (
    AddressCountResponse,
    IncludesAddressResponse,
    MintCountResponse,
    WhitelistConfig,
)
from .messages import ContractMsg

logger = logging.getLogger(__name__)


# ============ Query Messages ============


class WhitelistUpdatableQueryMsg(ContractMsg):
    schema_file = "whitelist-updatable/query_msg.json"


@dataclass(frozen=True)
class ConfigQuery(WhitelistUpdatableQueryMsg, tag="config"):
    pass


@dataclass(frozen=True)
class IncludesAddressQuery(WhitelistUpdatableQueryMsg, tag="includes_address"):
    address: str


@dataclass(frozen=True)
class MintCountQuery(WhitelistUpdatableQueryMsg, tag="mint_count"):
    address: str


@dataclass(frozen=True)
class AddressCountQuery(WhitelistUpdatableQueryMsg, tag="address_count"):
    pass


# ============ Execute Messages ============


class WhitelistUpdatableExecuteMsg(ContractMsg):
    schema_file = "whitelist-updatable/execute_msg.json"


@dataclass(frozen=True)
class UpdateAdmin(WhitelistUpdatableExecuteMsg, tag="update_admin"):
    new_admin: str


@dataclass(frozen=True)
class AddAddresses(WhitelistUpdatableExecuteMsg, tag="add_addresses"):
    # Duplicates are dropped by the contract
    addresses: list[str]


@dataclass(frozen=True)
class RemoveAddresses(WhitelistUpdatableExecuteMsg, tag="remove_addresses"):
    addresses: list[str]


@dataclass(frozen=True)
class ProcessAddress(WhitelistUpdatableExecuteMsg, tag="process_address"):
    address: str


@dataclass(frozen=True)
class UpdatePerAddressLimit(WhitelistUpdatableExecuteMsg, tag="update_per_address_limit"):
    limit: int


@dataclass(frozen=True)
class Purge(WhitelistUpdatableExecuteMsg, tag="purge"):
    pass


# ============ Clients ============


@dataclass(frozen=True)
class WhitelistUpdatableQueryClient:
    client: ReadOnlyTransport
    contract_address: str

    def _query(self, msg: WhitelistUpdatableQueryMsg) -> Any:
        logger.debug("query %s on %s", msg.tag, self.contract_address)
        return self.client.query_contract_smart(self.contract_address, msg.to_wire())

    def config(self) -> WhitelistConfig:
        return self._query(ConfigQuery())

    def includes_address(self, address: str) -> IncludesAddressResponse:
        return self._query(IncludesAddressQuery(address=address))

    def mint_count(self, address: str) -> MintCountResponse:
        return self._query(MintCountQuery(address=address))

    def address_count(self) -> AddressCountResponse:
        return self._query(AddressCountQuery())


@dataclass(frozen=True)
class WhitelistUpdatableClient:
    client: SigningTransport
    sender: str
    contract_address: str
    query_client: WhitelistUpdatableQueryClient = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "query_client",
            WhitelistUpdatableQueryClient(self.client, self.contract_address),
        )

    def config(self) -> WhitelistConfig:
        return self.query_client.config()

    def includes_address(self, address: str) -> IncludesAddressResponse:
        return self.query_client.includes_address(address)

    def mint_count(self, address: str) -> MintCountResponse:
        return self.query_client.mint_count(address)

    def address_count(self) -> AddressCountResponse:
        return self.query_client.address_count()

    def _execute(
        self,
        msg: WhitelistUpdatableExecuteMsg,
        fee: Fee,
        memo: Optional[str],
        funds: Optional[Sequence[Coin]],
    ) -> ExecuteResult:
        logger.debug("execute %s on %s from %s", msg.tag, self.contract_address, self.sender)
        return self.client.execute(
            self.sender, self.contract_address, msg.to_wire(), fee, memo, funds
        )

    def update_admin(
        self,
        new_admin: str,
        *,
        fee: Fee = AUTO,
        memo: Optional[str] = None,
        funds: Optional[Sequence[Coin]] = None,
    ) -> ExecuteResult:
        return self._execute(UpdateAdmin(new_admin=new_admin), fee, memo, funds)

    def add_addresses(
        self,
        addresses: list[str],
        *,
        fee: Fee = AUTO,
        memo: Optional[str] = None,
        funds: Optional[Sequence[Coin]] = None,
    ) -> ExecuteResult:
        return self._execute(AddAddresses(addresses=addresses), fee, memo, funds)

    def remove_addresses(
        self,
        addresses: list[str],
        *,
        fee: Fee = AUTO,
        memo: Optional[str] = None,
        funds: Optional[Sequence[Coin]] = None,
    ) -> ExecuteResult:
        return self._execute(RemoveAddresses(addresses=addresses), fee, memo, funds)

    def process_address(
        self,
        address: str,
        *,
        fee: Fee = AUTO,
        memo: Optional[str] = None,
        funds: Optional[Sequence[Coin]] = None,
    ) -> ExecuteResult:
        """Count one mint against an address. Admin only; fails if the address is absent."""
        return self._execute(ProcessAddress(address=address), fee, memo, funds)

    def update_per_address_limit(
        self,
        limit: int,
        *,
        fee: Fee = AUTO,
        memo: Optional[str] = None,
        funds: Optional[Sequence[Coin]] = None,
    ) -> ExecuteResult:
        return self._execute(UpdatePerAddressLimit(limit=limit), fee, memo, funds)

    def purge(
        self,
        *,
        fee: Fee = AUTO,
        memo: Optional[str] = None,
        funds: Optional[Sequence[Coin]] = None,
    ) -> ExecuteResult:
        """Remove every address from the whitelist."""
        return self._execute(Purge(), fee, memo, funds)
