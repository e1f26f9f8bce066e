"""
Shapes of the contracts' JSON messages and responses.

These are annotations only. Clients pass responses through exactly as the
connection decoded them and never check them against these types.
"""

from __future__ import annotations

from typing import Optional, TypedDict

# CosmWasm serializes 128/64-bit integers, decimals and timestamps as strings.
Uint128 = str
Uint64 = str
Decimal = str
Timestamp = Uint64  # nanoseconds since the Unix epoch
Addr = str


# ============ name-minter ============


class Config(TypedDict):
    public_mint_start_time: Timestamp


class SudoParams(TypedDict):
    min_name_length: int
    max_name_length: int
    base_price: Uint128
    fair_burn_percent: Decimal


class AdminResponse(TypedDict):
    admin: Optional[str]


WhitelistsResponse = list[Addr]
CollectionResponse = Addr
ParamsResponse = SudoParams
ConfigResponse = Config


# ============ whitelist-updatable ============

# The contract source leaves query unimplemented; these follow its stored state.


class WhitelistConfig(TypedDict):
    admin: Addr
    per_address_limit: int


IncludesAddressResponse = bool
MintCountResponse = int
AddressCountResponse = int


__all__ = [
    "Addr",
    "AddressCountResponse",
    "AdminResponse",
    "CollectionResponse",
    "Config",
    "ConfigResponse",
    "Decimal",
    "IncludesAddressResponse",
    "MintCountResponse",
    "ParamsResponse",
    "SudoParams",
    "Timestamp",
    "Uint128",
    "Uint64",
    "WhitelistConfig",
    "WhitelistsResponse",
]
