"""Tests for the HTTP transport layer."""

from __future__ import annotations

import httpx
import pytest
import respx

from f1ergast._http import AsyncTransport, SyncTransport
from f1ergast.exceptions import (
    ErgastAPIError,
    ErgastConnectionError,
    ErgastResponseError,
    ErgastTimeoutError,
)
from tests.conftest import UPSTREAM


class TestSyncTransport:
    @respx.mock
    def test_get_success(self) -> None:
        respx.get(f"{UPSTREAM}/drivers.json").mock(
            return_value=httpx.Response(200, json={"MRData": {"total": "0"}})
        )
        transport = SyncTransport(base_url=UPSTREAM)
        result = transport.get("/drivers.json")
        assert result == {"MRData": {"total": "0"}}
        transport.close()

    @respx.mock
    def test_get_with_params(self) -> None:
        route = respx.get(f"{UPSTREAM}/seasons.json").mock(
            return_value=httpx.Response(200, json={})
        )
        transport = SyncTransport(base_url=UPSTREAM)
        transport.get("/seasons.json", [("limit", "100"), ("offset", "10")])
        assert route.called
        params = route.calls.last.request.url.params
        assert params["limit"] == "100"
        assert params["offset"] == "10"
        transport.close()

    @respx.mock
    def test_get_404(self) -> None:
        respx.get(f"{UPSTREAM}/drivers.json").mock(
            return_value=httpx.Response(404, text="Not Found")
        )
        transport = SyncTransport(base_url=UPSTREAM)
        with pytest.raises(ErgastAPIError) as exc_info:
            transport.get("/drivers.json")
        assert exc_info.value.status_code == 404
        assert exc_info.value.message == "Not Found"
        transport.close()

    @respx.mock
    def test_error_body_message(self) -> None:
        respx.get(f"{UPSTREAM}/2023/races.json").mock(
            return_value=httpx.Response(500, json={"error": "upstream down"})
        )
        transport = SyncTransport(base_url=UPSTREAM)
        with pytest.raises(ErgastAPIError) as exc_info:
            transport.get("/2023/races.json")
        assert exc_info.value.status_code == 500
        assert exc_info.value.message == "upstream down"
        transport.close()

    @respx.mock
    def test_invalid_json(self) -> None:
        respx.get(f"{UPSTREAM}/drivers.json").mock(
            return_value=httpx.Response(200, text="<html>oops</html>")
        )
        transport = SyncTransport(base_url=UPSTREAM)
        with pytest.raises(ErgastResponseError):
            transport.get("/drivers.json")
        transport.close()

    @respx.mock
    def test_non_object_json(self) -> None:
        respx.get(f"{UPSTREAM}/drivers.json").mock(
            return_value=httpx.Response(200, json=[1, 2, 3])
        )
        transport = SyncTransport(base_url=UPSTREAM)
        with pytest.raises(ErgastResponseError, match="list"):
            transport.get("/drivers.json")
        transport.close()

    @respx.mock
    def test_connection_error(self) -> None:
        respx.get(f"{UPSTREAM}/drivers.json").mock(side_effect=httpx.ConnectError("fail"))
        transport = SyncTransport(base_url=UPSTREAM)
        with pytest.raises(ErgastConnectionError):
            transport.get("/drivers.json")
        transport.close()

    @respx.mock
    def test_timeout_error(self) -> None:
        respx.get(f"{UPSTREAM}/drivers.json").mock(side_effect=httpx.ReadTimeout("timeout"))
        transport = SyncTransport(base_url=UPSTREAM)
        with pytest.raises(ErgastTimeoutError):
            transport.get("/drivers.json")
        transport.close()

    @respx.mock
    @pytest.mark.parametrize(
        "error",
        [httpx.ReadError("connection reset"), httpx.RemoteProtocolError("bad frame"), httpx.WriteError("broken pipe")],
    )
    def test_other_transport_errors(self, error) -> None:
        respx.get(f"{UPSTREAM}/drivers.json").mock(side_effect=error)
        transport = SyncTransport(base_url=UPSTREAM)
        with pytest.raises(ErgastConnectionError, match=str(error)):
            transport.get("/drivers.json")
        transport.close()


class TestAsyncTransport:
    @respx.mock
    @pytest.mark.asyncio
    async def test_get_success(self) -> None:
        respx.get(f"{UPSTREAM}/2023.json").mock(
            return_value=httpx.Response(200, json={"MRData": {}})
        )
        transport = AsyncTransport(base_url=UPSTREAM)
        result = await transport.get("2023.json")
        assert result == {"MRData": {}}
        await transport.close()

    @respx.mock
    @pytest.mark.asyncio
    async def test_get_500(self) -> None:
        respx.get(f"{UPSTREAM}/2023.json").mock(
            return_value=httpx.Response(500, text="Internal Server Error")
        )
        transport = AsyncTransport(base_url=UPSTREAM)
        with pytest.raises(ErgastAPIError) as exc_info:
            await transport.get("2023.json")
        assert exc_info.value.status_code == 500
        assert str(exc_info.value) == "HTTP 500: Internal Server Error"
        await transport.close()

    @respx.mock
    @pytest.mark.asyncio
    async def test_connection_error(self) -> None:
        respx.get(f"{UPSTREAM}/2023.json").mock(side_effect=httpx.ConnectError("fail"))
        transport = AsyncTransport(base_url=UPSTREAM)
        with pytest.raises(ErgastConnectionError):
            await transport.get("2023.json")
        await transport.close()

    @respx.mock
    @pytest.mark.asyncio
    async def test_timeout_error(self) -> None:
        respx.get(f"{UPSTREAM}/2023.json").mock(side_effect=httpx.ReadTimeout("timeout"))
        transport = AsyncTransport(base_url=UPSTREAM)
        with pytest.raises(ErgastTimeoutError):
            await transport.get("2023.json")
        await transport.close()

    @respx.mock
    @pytest.mark.asyncio
    async def test_read_error(self) -> None:
        respx.get(f"{UPSTREAM}/2023.json").mock(side_effect=httpx.ReadError("connection reset"))
        transport = AsyncTransport(base_url=UPSTREAM)
        with pytest.raises(ErgastConnectionError, match="connection reset"):
            await transport.get("2023.json")
        await transport.close()
