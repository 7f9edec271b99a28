import asyncio

import httpx
import pytest
import respx

from arty import APIError, ArtifactoryClient
from arty._http.iter_coroutine import iter_coroutine

BASE = "https://art.example.com/artifactory"


def test_returns_value_of_finished_coroutine() -> None:
    async def version() -> dict[str, str]:
        return {"version": "7.77.3"}

    assert iter_coroutine(version()) == {"version": "7.77.3"}


def test_closes_coroutine_after_running() -> None:
    cleanup: list[str] = []

    async def release() -> None:
        try:
            return None
        finally:
            cleanup.append("released")

    iter_coroutine(release())

    assert cleanup == ["released"]


def test_propagates_api_errors_from_blocking_transport(mock_env_clear) -> None:
    """A sync facade call runs its shared coroutine in one step, errors included."""
    with respx.mock(base_url=BASE) as mock:
        mock.get("/api/system/ping").mock(return_value=httpx.Response(503))
        with ArtifactoryClient(BASE) as client:
            coro = client._call("GET", "/api/system/ping", into=str)
            with pytest.raises(APIError) as exc_info:
                iter_coroutine(coro)

    assert exc_info.value.status_code == 503


def test_rejects_coroutine_that_needs_an_event_loop() -> None:
    cleanup: list[str] = []

    async def waits() -> None:
        try:
            await asyncio.sleep(0)
        finally:
            cleanup.append("closed")

    with pytest.raises(RuntimeError, match="cannot run without an event loop"):
        iter_coroutine(waits())

    assert cleanup == ["closed"]
