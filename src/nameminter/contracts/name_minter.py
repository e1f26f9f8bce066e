"""
Client for the Stargaze Names name-minter contract.

NameMinterQueryClient wraps a read-only connection. NameMinterClient wraps a
signing connection plus the sender address, and answers reads through a
NameMinterQueryClient it builds over the same connection.

Every method sends exactly one message and returns whatever the connection
returns. Errors raised by the connection reach the caller untouched.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Optional, Sequence

from ..chain.lcd import LcdClient
from ..chain.transport import AUTO, Coin, ExecuteResult, Fee, ReadOnlyTransport, SigningTransport
from ..config import get_contract_address
from ..schema.types import (
    AdminResponse,
    CollectionResponse,
    Config,
    ConfigResponse,
    ParamsResponse,
    WhitelistsResponse,
)
from .messages import UNSET, ContractMsg
from .whitelist_updatable import WhitelistUpdatableQueryClient

logger = logging.getLogger(__name__)


# ============ Query Messages ============


class NameMinterQueryMsg(ContractMsg):
    schema_file = "name-minter/query_msg.json"


@dataclass(frozen=True)
class AdminQuery(NameMinterQueryMsg, tag="admin"):
    pass


@dataclass(frozen=True)
class WhitelistsQuery(NameMinterQueryMsg, tag="whitelists"):
    pass


@dataclass(frozen=True)
class CollectionQuery(NameMinterQueryMsg, tag="collection"):
    pass


@dataclass(frozen=True)
class ParamsQuery(NameMinterQueryMsg, tag="params"):
    pass


@dataclass(frozen=True)
class ConfigQuery(NameMinterQueryMsg, tag="config"):
    pass


# ============ Execute Messages ============


class NameMinterExecuteMsg(ContractMsg):
    schema_file = "name-minter/execute_msg.json"


@dataclass(frozen=True)
class MintAndList(NameMinterExecuteMsg, tag="mint_and_list"):
    name: str


@dataclass(frozen=True)
class UpdateAdmin(NameMinterExecuteMsg, tag="update_admin"):
    # Left unset, the contract clears the admin
    admin: Optional[str] = UNSET


@dataclass(frozen=True)
class Pause(NameMinterExecuteMsg, tag="pause"):
    pause: bool


@dataclass(frozen=True)
class AddWhitelist(NameMinterExecuteMsg, tag="add_whitelist"):
    address: str


@dataclass(frozen=True)
class RemoveWhitelist(NameMinterExecuteMsg, tag="remove_whitelist"):
    address: str


@dataclass(frozen=True)
class UpdateConfig(NameMinterExecuteMsg, tag="update_config"):
    config: Config


# ============ Clients ============


@dataclass(frozen=True)
class NameMinterQueryClient:
    client: ReadOnlyTransport
    contract_address: str

    def _query(self, msg: NameMinterQueryMsg) -> Any:
        logger.debug("query %s on %s", msg.tag, self.contract_address)
        return self.client.query_contract_smart(self.contract_address, msg.to_wire())

    def admin(self) -> AdminResponse:
        return self._query(AdminQuery())

    def whitelists(self) -> WhitelistsResponse:
        return self._query(WhitelistsQuery())

    def collection(self) -> CollectionResponse:
        return self._query(CollectionQuery())

    def params(self) -> ParamsResponse:
        return self._query(ParamsQuery())

    def config(self) -> ConfigResponse:
        return self._query(ConfigQuery())

    def whitelist_clients(self) -> list[WhitelistUpdatableQueryClient]:
        """Bind a whitelist query client to each whitelist the minter uses."""
        return [
            WhitelistUpdatableQueryClient(self.client, address)
            for address in self.whitelists()
        ]


@dataclass(frozen=True)
class NameMinterClient:
    client: SigningTransport
    sender: str
    contract_address: str
    query_client: NameMinterQueryClient = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "query_client", NameMinterQueryClient(self.client, self.contract_address)
        )

    # ---- reads ----

    def admin(self) -> AdminResponse:
        return self.query_client.admin()

    def whitelists(self) -> WhitelistsResponse:
        return self.query_client.whitelists()

    def collection(self) -> CollectionResponse:
        return self.query_client.collection()

    def params(self) -> ParamsResponse:
        return self.query_client.params()

    def config(self) -> ConfigResponse:
        return self.query_client.config()

    def whitelist_clients(self) -> list[WhitelistUpdatableQueryClient]:
        return self.query_client.whitelist_clients()

    # ---- writes ----

    def _execute(
        self,
        msg: NameMinterExecuteMsg,
        fee: Fee,
        memo: Optional[str],
        funds: Optional[Sequence[Coin]],
    ) -> ExecuteResult:
        logger.debug("execute %s on %s from %s", msg.tag, self.contract_address, self.sender)
        return self.client.execute(
            self.sender, self.contract_address, msg.to_wire(), fee, memo, funds
        )

    def mint_and_list(
        self,
        name: str,
        *,
        fee: Fee = AUTO,
        memo: Optional[str] = None,
        funds: Optional[Sequence[Coin]] = None,
    ) -> ExecuteResult:
        """Mint a name and list it on the name marketplace. Attach the price as funds."""
        return self._execute(MintAndList(name=name), fee, memo, funds)

    def update_admin(
        self,
        admin: Optional[str] = UNSET,
        *,
        fee: Fee = AUTO,
        memo: Optional[str] = None,
        funds: Optional[Sequence[Coin]] = None,
    ) -> ExecuteResult:
        """Change the admin. Called without an address, clears it."""
        return self._execute(UpdateAdmin(admin=admin), fee, memo, funds)

    def pause(
        self,
        pause: bool,
        *,
        fee: Fee = AUTO,
        memo: Optional[str] = None,
        funds: Optional[Sequence[Coin]] = None,
    ) -> ExecuteResult:
        return self._execute(Pause(pause=pause), fee, memo, funds)

    def add_whitelist(
        self,
        address: str,
        *,
        fee: Fee = AUTO,
        memo: Optional[str] = None,
        funds: Optional[Sequence[Coin]] = None,
    ) -> ExecuteResult:
        return self._execute(AddWhitelist(address=address), fee, memo, funds)

    def remove_whitelist(
        self,
        address: str,
        *,
        fee: Fee = AUTO,
        memo: Optional[str] = None,
        funds: Optional[Sequence[Coin]] = None,
    ) -> ExecuteResult:
        return self._execute(RemoveWhitelist(address=address), fee, memo, funds)

    def update_config(
        self,
        config: Config,
        *,
        fee: Fee = AUTO,
        memo: Optional[str] = None,
        funds: Optional[Sequence[Coin]] = None,
    ) -> ExecuteResult:
        return self._execute(UpdateConfig(config=config), fee, memo, funds)


def connect(
    contract_address: Optional[str] = None,
    lcd_url: Optional[str] = None,
) -> NameMinterQueryClient:
    """
    Build a read-only client over the LCD.

    Args:
        contract_address: name-minter address (default: NAME_MINTER_ADDRESS)
        lcd_url: LCD endpoint (default: STARGAZE_LCD_URL or mainnet)
    """
    return NameMinterQueryClient(
        LcdClient(lcd_url=lcd_url),
        contract_address or get_contract_address(),
    )
