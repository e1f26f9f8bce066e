"""
LCD client tests using httpx.MockTransport.

No network: every request is answered by an in-process handler.
"""

from __future__ import annotations

import json
import logging
from unittest.mock import patch

import httpx
import pytest

from conftest import MINTER_ADDRESS
from nameminter.chain.lcd import LcdClient, LcdError, encode_query, get_contract_info, query_contract_smart
from nameminter.contracts.name_minter import NameMinterQueryClient
from nameminter.utils import base64_decode

LCD_URL = "https://lcd.test"


def _decode_smart_path(request: httpx.Request) -> tuple[str, dict]:
    prefix = "/cosmwasm/wasm/v1/contract/"
    path = request.url.path
    assert path.startswith(prefix)
    address, encoded = path[len(prefix):].split("/smart/", 1)
    return address, json.loads(base64_decode(encoded))


class TestEncodeQuery:
    def test_compact_base64(self) -> None:
        assert encode_query({"admin": {}}) == "eyJhZG1pbiI6e319"

    def test_path_unsafe_characters_are_escaped(self) -> None:
        # "??>>" puts '/' and '+' into the base64 text
        encoded = encode_query({"includes_address": {"address": "??>>"}})
        assert encoded == "eyJpbmNsdWRlc19hZGRyZXNzIjp7ImFkZHJlc3MiOiI%2FPz4%2BIn19"


class TestQueryContractSmart:
    def test_returns_data_field(self) -> None:
        seen: list[tuple[str, dict]] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(_decode_smart_path(request))
            return httpx.Response(200, json={"data": {"admin": "stars1admin"}})

        result = query_contract_smart(
            MINTER_ADDRESS,
            {"admin": {}},
            lcd_url=LCD_URL,
            transport=httpx.MockTransport(handler),
        )

        assert result == {"admin": "stars1admin"}
        assert seen == [(MINTER_ADDRESS, {"admin": {}})]

    def test_uses_configured_url(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("STARGAZE_LCD_URL", "https://env-lcd.test/")
        hosts: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            hosts.append(request.url.host)
            return httpx.Response(200, json={"data": None})

        assert query_contract_smart(MINTER_ADDRESS, {"config": {}}, transport=httpx.MockTransport(handler)) is None
        assert hosts == ["env-lcd.test"]

    def test_contract_error(self, caplog: pytest.LogCaptureFixture) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                500,
                json={
                    "code": 2,
                    "message": "rpc error: code = Unknown desc = Generic error: Unauthorized",
                    "details": [],
                },
            )

        with caplog.at_level(logging.WARNING, logger="nameminter.chain.lcd"):
            with pytest.raises(LcdError) as excinfo:
                query_contract_smart(
                    MINTER_ADDRESS, {"admin": {}}, lcd_url=LCD_URL, transport=httpx.MockTransport(handler)
                )

        assert excinfo.value.status_code == 500
        assert excinfo.value.code == 2
        assert "Unauthorized" in excinfo.value.message
        assert "LCD request failed" in caplog.text

    def test_non_json_error_body(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(502, text="Bad Gateway")

        with pytest.raises(LcdError) as excinfo:
            query_contract_smart(MINTER_ADDRESS, {"admin": {}}, lcd_url=LCD_URL, transport=httpx.MockTransport(handler))

        assert excinfo.value.status_code == 502
        assert excinfo.value.code is None
        assert excinfo.value.message == "Bad Gateway"

    def test_missing_data_field(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"result": {}})

        with pytest.raises(LcdError, match="no 'data' field"):
            query_contract_smart(MINTER_ADDRESS, {"admin": {}}, lcd_url=LCD_URL, transport=httpx.MockTransport(handler))

    def test_undecodable_body(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="not json")

        with pytest.raises(ValueError):
            query_contract_smart(MINTER_ADDRESS, {"admin": {}}, lcd_url=LCD_URL, transport=httpx.MockTransport(handler))

    def test_connection_error_propagates(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(httpx.ConnectError):
            query_contract_smart(MINTER_ADDRESS, {"admin": {}}, lcd_url=LCD_URL, transport=httpx.MockTransport(handler))

    @pytest.mark.parametrize("body", ["metadata", ["data"], 7])
    def test_non_object_body(self, body: object) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json=body)

        with pytest.raises(LcdError, match="expected a JSON object") as excinfo:
            query_contract_smart(MINTER_ADDRESS, {"admin": {}}, lcd_url=LCD_URL, transport=httpx.MockTransport(handler))
        assert excinfo.value.status_code == 200


class TestTimeout:
    """An explicit timeout is used as given; only None falls back to config."""

    def _handler(self, request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"data": {}})

    def test_explicit_zero_timeout_is_kept(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("STARGAZE_LCD_TIMEOUT", "9")
        with patch("nameminter.chain.lcd.httpx.Client", wraps=httpx.Client) as client_cls:
            query_contract_smart(
                MINTER_ADDRESS,
                {"admin": {}},
                lcd_url=LCD_URL,
                timeout=0.0,
                transport=httpx.MockTransport(self._handler),
            )
        assert client_cls.call_args.kwargs["timeout"] == 0.0

    def test_unset_timeout_uses_config(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("STARGAZE_LCD_TIMEOUT", "9")
        with patch("nameminter.chain.lcd.httpx.Client", wraps=httpx.Client) as client_cls:
            query_contract_smart(
                MINTER_ADDRESS, {"admin": {}}, lcd_url=LCD_URL, transport=httpx.MockTransport(self._handler)
            )
        assert client_cls.call_args.kwargs["timeout"] == 9.0


class TestContractInfo:
    def test_missing_contract_info_field(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"address": MINTER_ADDRESS})

        with pytest.raises(LcdError, match="no 'contract_info' field"):
            get_contract_info(MINTER_ADDRESS, lcd_url=LCD_URL, transport=httpx.MockTransport(handler))

    def test_non_object_body(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json="metadata")

        with pytest.raises(LcdError, match="expected a JSON object"):
            get_contract_info(MINTER_ADDRESS, lcd_url=LCD_URL, transport=httpx.MockTransport(handler))

    def test_returns_contract_info(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path == f"/cosmwasm/wasm/v1/contract/{MINTER_ADDRESS}"
            return httpx.Response(
                200,
                json={
                    "address": MINTER_ADDRESS,
                    "contract_info": {"code_id": "42", "creator": "stars1creator", "label": "name-minter"},
                },
            )

        client = LcdClient(lcd_url=LCD_URL, transport=httpx.MockTransport(handler))
        assert client.get_contract_info(MINTER_ADDRESS)["label"] == "name-minter"
        assert get_contract_info(MINTER_ADDRESS, lcd_url=LCD_URL, transport=httpx.MockTransport(handler))["code_id"] == "42"


class TestLcdClientWithContractClient:
    """The LCD client plugs straight into the query client."""

    def test_end_to_end_params(self) -> None:
        params = {"min_name_length": 3, "max_name_length": 63, "base_price": "100000000", "fair_burn_percent": "0.5"}

        def handler(request: httpx.Request) -> httpx.Response:
            address, msg = _decode_smart_path(request)
            assert address == MINTER_ADDRESS
            return httpx.Response(200, json={"data": params if msg == {"params": {}} else None})

        minter = NameMinterQueryClient(LcdClient(lcd_url=LCD_URL, transport=httpx.MockTransport(handler)), MINTER_ADDRESS)
        assert minter.params() == params

    def test_lcd_error_reaches_caller_unwrapped(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(400, json={"code": 3, "message": "unknown variant `bogus`"})

        minter = NameMinterQueryClient(LcdClient(lcd_url=LCD_URL, transport=httpx.MockTransport(handler)), MINTER_ADDRESS)
        with pytest.raises(LcdError) as excinfo:
            minter.admin()
        assert excinfo.value.code == 3
