"""Shared fixtures: fake wallets-list server and injected environments."""

from __future__ import annotations

import asyncio

import httpx
import pytest

from tonconnect_wallets import InjectedProvider, WalletsListManager

SOURCE = "https://wallets.test/wallets.json"


def sse_wallet(name: str = "A", **extra) -> dict:
    data = {
        "name": name,
        "image": "i",
        "about_url": "a",
        "bridge": [{"type": "sse", "url": "u"}],
        "universal_url": "uu",
    }
    data.update(extra)
    return data


def js_wallet(name: str = "B", key: str = "k", **extra) -> dict:
    data = {
        "name": name,
        "image": "i",
        "about_url": "a",
        "bridge": [{"type": "js", "key": key}],
    }
    data.update(extra)
    return data


def injected_entry(name: str, *, wallet_browser: bool = False, **info) -> dict:
    wallet_info = {"name": name, "image": f"{name}-img", "about_url": f"{name}-about"}
    wallet_info.update(info)
    return {"tonconnect": {"isWalletBrowser": wallet_browser, "walletInfo": wallet_info}}


class FakeWalletsServer:
    """Serves a json payload and counts requests; `gate` lets a test hold responses."""

    def __init__(self, payload=None, status_code: int = 200, text: str | None = None):
        self.payload = payload if payload is not None else []
        self.status_code = status_code
        self.text = text
        self.requests: list[httpx.Request] = []
        self.gate: asyncio.Event | None = None

    async def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.gate is not None:
            await self.gate.wait()
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text)
        return httpx.Response(self.status_code, json=self.payload)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))


@pytest.fixture
def server() -> FakeWalletsServer:
    return FakeWalletsServer()


@pytest.fixture
def make_manager(server):
    def _make(environment: dict | None = None) -> WalletsListManager:
        return WalletsListManager(
            SOURCE,
            injected_provider=InjectedProvider(environment),
            http_client=server.client(),
        )
    return _make
