"""
LCD (REST) client for CosmWasm smart queries.

Uses httpx against the Cosmos SDK gRPC-gateway routes. Read-only: supports
smart queries and contract metadata lookups. Nothing here signs.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional
from urllib.parse import quote

import httpx

from ..config import get_lcd_url, get_timeout
from ..utils import base64_encode, compact_json

logger = logging.getLogger(__name__)


class LcdError(RuntimeError):
    """Error response from the LCD gateway (contract errors included)."""

    def __init__(
        self,
        message: str,
        status_code: int,
        code: Optional[int] = None,
    ) -> None:
        super().__init__(f"LCD error {status_code}: {message}")
        self.message = message
        self.status_code = status_code
        self.code = code

    @classmethod
    def from_response(cls, response: httpx.Response) -> "LcdError":
        try:
            body = response.json()
        except ValueError:
            return cls(response.text or response.reason_phrase, response.status_code)

        if not isinstance(body, dict):
            return cls(str(body), response.status_code)
        return cls(
            str(body.get("message", body)),
            response.status_code,
            code=body.get("code"),
        )


def encode_query(query_msg: Mapping[str, Any]) -> str:
    """
    Encode a query message as an LCD path segment.

    Compact JSON, base64, then percent-encoded ('+', '/' and '=' are not
    safe inside a path segment).
    """
    return quote(base64_encode(compact_json(query_msg)), safe="")


def _rest_get(
    path: str,
    lcd_url: Optional[str] = None,
    timeout: Optional[float] = None,
    transport: Optional[httpx.BaseTransport] = None,
) -> dict[str, Any]:
    """
    Make a GET request against the LCD.

    Args:
        path: Route below the LCD root (leading slash)
        lcd_url: LCD endpoint URL
        timeout: Request timeout in seconds
        transport: Optional httpx transport (tests pass httpx.MockTransport)

    Returns:
        Decoded JSON body

    Raises:
        LcdError: On a non-2xx response or a body that is not a JSON object
        httpx.TransportError: On connection failure or timeout
    """
    url = (lcd_url or get_lcd_url()).rstrip("/") + path
    logger.debug("GET %s", url)

    if timeout is None:
        timeout = get_timeout()

    with httpx.Client(timeout=timeout, transport=transport) as client:
        response = client.get(url)

    if response.is_error:
        error = LcdError.from_response(response)
        logger.warning("LCD request failed: %s", error)
        raise error

    body = response.json()
    if not isinstance(body, dict):
        raise LcdError(f"expected a JSON object, got: {body!r}", response.status_code)
    return body


def query_contract_smart(
    contract_address: str,
    query_msg: Mapping[str, Any],
    lcd_url: Optional[str] = None,
    timeout: Optional[float] = None,
    transport: Optional[httpx.BaseTransport] = None,
) -> Any:
    """
    Run a smart query against a contract.

    Args:
        contract_address: bech32 contract address
        query_msg: Single-key query message, e.g. {"config": {}}

    Returns:
        The contract's JSON response (the gateway's "data" field)
    """
    path = f"/cosmwasm/wasm/v1/contract/{contract_address}/smart/{encode_query(query_msg)}"
    body = _rest_get(path, lcd_url=lcd_url, timeout=timeout, transport=transport)

    if "data" not in body:
        raise LcdError("response has no 'data' field", 200)
    return body["data"]


def get_contract_info(
    contract_address: str,
    lcd_url: Optional[str] = None,
    timeout: Optional[float] = None,
    transport: Optional[httpx.BaseTransport] = None,
) -> dict[str, Any]:
    """
    Get contract metadata (code_id, creator, admin, label).

    Args:
        contract_address: bech32 contract address

    Returns:
        The contract_info object
    """
    body = _rest_get(
        f"/cosmwasm/wasm/v1/contract/{contract_address}",
        lcd_url=lcd_url,
        timeout=timeout,
        transport=transport,
    )

    if "contract_info" not in body:
        raise LcdError("response has no 'contract_info' field", 200)
    return body["contract_info"]


@dataclass(frozen=True)
class LcdClient:
    """Read-only connection usable by every query client in this package."""

    lcd_url: Optional[str] = None
    timeout: Optional[float] = None
    transport: Optional[httpx.BaseTransport] = None

    def query_contract_smart(self, address: str, query_msg: Mapping[str, Any]) -> Any:
        return query_contract_smart(
            address,
            query_msg,
            lcd_url=self.lcd_url,
            timeout=self.timeout,
            transport=self.transport,
        )

    def get_contract_info(self, address: str) -> dict[str, Any]:
        return get_contract_info(
            address,
            lcd_url=self.lcd_url,
            timeout=self.timeout,
            transport=self.transport,
        )
