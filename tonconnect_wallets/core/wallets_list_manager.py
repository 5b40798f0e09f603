from __future__ import annotations

import asyncio
from typing import Optional

import httpx

from ..dto import WalletInfoDTO, WalletsListAdapter
from ..enums import CacheState
from ..models import WalletInfo, is_wallet_info_currently_embedded
from .config import settings
from .errors import FetchWalletsError
from .injected_provider import InjectedProvider, InjectedWalletsProvider
from .logger import logger


class WalletsListManager:
    """
    Resolves the list of wallets a dApp can offer:
    remote wallets-list json merged with wallets injected into the environment.

    The first successful result is kept, as an immutable tuple, for the lifetime of the manager.
    Concurrent callers share one in-flight fetch; a failed fetch resets the cache
    so the next call starts over.
    """
    def __init__(
        self,
        wallets_list_source: Optional[str] = None,
        *,
        injected_provider: Optional[InjectedWalletsProvider] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.wallets_list_source = wallets_list_source or settings.wallets_list_source
        self.injected_provider: InjectedWalletsProvider = injected_provider or InjectedProvider()
        self._http_client = http_client

        self._state = CacheState.empty
        self._pending: Optional[asyncio.Task] = None
        self._wallets: Optional[tuple[WalletInfo, ...]] = None

    @property
    def cache_state(self) -> CacheState:
        return self._state

    async def get_wallets(self) -> tuple[WalletInfo, ...]:
        if self._state is CacheState.ready:
            return self._wallets

        if self._state is CacheState.empty:
            self._pending = asyncio.ensure_future(self._resolve_wallets_list())
            self._state = CacheState.pending

        # shield: a cancelled caller must not cancel the fetch other callers wait on
        return await asyncio.shield(self._pending)

    async def get_embedded_wallet(self) -> Optional[WalletInfo]:
        wallets = await self.get_wallets()
        embedded = [w for w in wallets if is_wallet_info_currently_embedded(w)]

        if len(embedded) != 1:
            if embedded:
                logger.debug(f"Ambiguous embedded wallet: {[w.name for w in embedded]}")
            return None

        return embedded[0]

    async def _resolve_wallets_list(self) -> tuple[WalletInfo, ...]:
        try:
            wallets = tuple(await self._fetch_wallets_list())
        except asyncio.CancelledError:
            self._state = CacheState.empty
            self._pending = None
            raise
        except Exception as e:
            self._state = CacheState.empty
            self._pending = None
            logger.error(f"Failed to fetch wallets list from {self.wallets_list_source}: {e!r}")
            raise FetchWalletsError(str(e) or type(e).__name__, cause=e) from e

        self._wallets = wallets
        self._state = CacheState.ready
        self._pending = None
        logger.info(f"Wallets list resolved: {len(wallets)} wallets")
        return wallets

    async def _fetch_wallets_list(self) -> list[WalletInfo]:
        logger.debug(f"Fetching wallets list from {self.wallets_list_source}")
        if self._http_client is not None:
            response = await self._http_client.get(self.wallets_list_source)
        else:
            async with httpx.AsyncClient(timeout=settings.wallets_list_timeout) as client:
                response = await client.get(self.wallets_list_source)
        response.raise_for_status()

        wallets_list = WalletsListAdapter.validate_python(response.json())
        currently_injected = self.injected_provider.get_currently_injected_wallets()

        return self._merge_wallets_lists(
            self._wallet_config_dto_list_to_wallet_config_list(wallets_list),
            currently_injected,
        )

    def _wallet_config_dto_list_to_wallet_config_list(self, dtos: list[WalletInfoDTO]) -> list[WalletInfo]:
        return [WalletInfo.from_dto(dto, self.injected_provider) for dto in dtos]

    @staticmethod
    def _merge_wallets_lists(remote: list[WalletInfo], injected: list[WalletInfo]) -> list[WalletInfo]:
        """Union by name; for a name in both lists the injected wallet fields win."""
        names = dict.fromkeys(wallet.name for wallet in remote + injected)
        result: list[WalletInfo] = []
        for name in names:
            remote_item = next((w for w in remote if w.name == name), None)
            injected_item = next((w for w in injected if w.name == name), None)
            if remote_item and injected_item:
                result.append(remote_item.merged_with(injected_item))
            else:
                result.append(remote_item or injected_item)
        return result
