from .registry import SCHEMA_ROOT, SchemaRegistry, SchemaValidationError, validate_message
from .types import (
    AdminResponse,
    CollectionResponse,
    Config,
    ConfigResponse,
    ParamsResponse,
    SudoParams,
    WhitelistConfig,
    WhitelistsResponse,
)

__all__ = [
    "SCHEMA_ROOT",
    "AdminResponse",
    "CollectionResponse",
    "Config",
    "ConfigResponse",
    "ParamsResponse",
    "SchemaRegistry",
    "SchemaValidationError",
    "SudoParams",
    "WhitelistConfig",
    "WhitelistsResponse",
    "validate_message",
]
