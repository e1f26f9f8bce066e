"""
Chain - Connection layer for nameminter.

Provides the transport protocols the contract clients depend on and an
httpx-based LCD client for read-only smart queries.

Signing connections are supplied by the caller; this package never holds keys.
"""

from .lcd import LcdClient, LcdError, encode_query, get_contract_info, query_contract_smart
from .transport import AUTO, Coin, ExecuteResult, Fee, ReadOnlyTransport, SigningTransport, StdFee

__all__ = [
    "AUTO",
    "Coin",
    "ExecuteResult",
    "Fee",
    "LcdClient",
    "LcdError",
    "ReadOnlyTransport",
    "SigningTransport",
    "StdFee",
    "encode_query",
    "get_contract_info",
    "query_contract_smart",
]
