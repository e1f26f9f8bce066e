"""
Contracts - Typed clients for the Stargaze Names contracts.

- messages:            closed tagged-union message base
- name_minter:         name-minter query/execute clients
- whitelist_updatable: whitelist-updatable query/execute clients
"""

from .messages import UNSET, ContractMsg
from .name_minter import (
    NameMinterClient,
    NameMinterExecuteMsg,
    NameMinterQueryClient,
    NameMinterQueryMsg,
    connect,
)
from .whitelist_updatable import (
    WhitelistUpdatableClient,
    WhitelistUpdatableExecuteMsg,
    WhitelistUpdatableQueryClient,
    WhitelistUpdatableQueryMsg,
)

__all__ = [
    "UNSET",
    "ContractMsg",
    "NameMinterClient",
    "NameMinterExecuteMsg",
    "NameMinterQueryClient",
    "NameMinterQueryMsg",
    "WhitelistUpdatableClient",
    "WhitelistUpdatableExecuteMsg",
    "WhitelistUpdatableQueryClient",
    "WhitelistUpdatableQueryMsg",
    "connect",
]
