__all__ = [
    # name-minter
    "NameMinterClient",
    "NameMinterQueryClient",
    "NameMinterExecuteMsg",
    "NameMinterQueryMsg",
    "connect",
    # whitelist-updatable
    "WhitelistUpdatableClient",
    "WhitelistUpdatableQueryClient",
    "WhitelistUpdatableExecuteMsg",
    "WhitelistUpdatableQueryMsg",
    # Messages
    "ContractMsg",
    "UNSET",
    # Transport
    "AUTO",
    "Coin",
    "ExecuteResult",
    "Fee",
    "LcdClient",
    "LcdError",
    "ReadOnlyTransport",
    "SigningTransport",
    "StdFee",
    # Schema
    "SchemaRegistry",
    "SchemaValidationError",
    "validate_message",
]

from .chain.lcd import LcdClient, LcdError
from .chain.transport import AUTO, Coin, ExecuteResult, Fee, ReadOnlyTransport, SigningTransport, StdFee
from .contracts.messages import UNSET, ContractMsg
from .contracts.name_minter import (
    NameMinterClient,
    NameMinterExecuteMsg,
    NameMinterQueryClient,
    NameMinterQueryMsg,
    connect,
)
from .contracts.whitelist_updatable import (
    WhitelistUpdatableClient,
    WhitelistUpdatableExecuteMsg,
    WhitelistUpdatableQueryClient,
    WhitelistUpdatableQueryMsg,
)
from .schema.registry import SchemaRegistry, SchemaValidationError, validate_message
