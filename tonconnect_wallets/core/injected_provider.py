from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional, Protocol

from pydantic import ValidationError

from ..dto import InjectedWalletInfoDTO
from ..models import InjectableBridge, WalletInfo
from .constants import TONCONNECT_BRIDGE_ATTR
from .logger import logger


class InjectedWalletsProvider(Protocol):
    def get_currently_injected_wallets(self) -> list[WalletInfo]: ...

    def is_wallet_injected(self, js_bridge_key: str) -> bool: ...

    def is_inside_wallet_browser(self, js_bridge_key: str) -> bool: ...


class InjectedProvider:
    """
    Looks up wallets injected into the host environment.

    `environment` plays the role of the page globals: a mapping of bridge key ->
    injected object. A wallet is injected when its object is a mapping with a
    `tonconnect` entry:

        {"tonkeeper": {"tonconnect": {"isWalletBrowser": False,
                                      "walletInfo": {"name": ..., "image": ..., "about_url": ...}}}}

    No environment means no injected wallets.
    """
    def __init__(self, environment: Optional[Mapping[str, Any]] = None):
        self.environment: Mapping[str, Any] = environment if environment is not None else {}

    def _get_bridge(self, js_bridge_key: str) -> Optional[Mapping[str, Any]]:
        wallet = self.environment.get(js_bridge_key)
        if not isinstance(wallet, Mapping) or TONCONNECT_BRIDGE_ATTR not in wallet:
            return None
        bridge = wallet[TONCONNECT_BRIDGE_ATTR]
        return bridge if isinstance(bridge, Mapping) else {}

    def is_wallet_injected(self, js_bridge_key: str) -> bool:
        return self._get_bridge(js_bridge_key) is not None

    def is_inside_wallet_browser(self, js_bridge_key: str) -> bool:
        bridge = self._get_bridge(js_bridge_key)
        if bridge is None:
            return False
        return bool(bridge.get("isWalletBrowser", False))

    def get_currently_injected_wallets(self) -> list[WalletInfo]:
        try:
            wallets: list[WalletInfo] = []
            for js_bridge_key in list(self.environment):
                bridge = self._get_bridge(js_bridge_key)
                if bridge is None or not isinstance(bridge.get("walletInfo"), Mapping):
                    continue
                try:
                    info = InjectedWalletInfoDTO.model_validate(bridge["walletInfo"])
                except ValidationError:
                    continue
                wallets.append(WalletInfo(
                    name=info.name,
                    image_url=info.image,
                    about_url=info.about_url,
                    tondns=info.tondns,
                    injectable=InjectableBridge(
                        js_bridge_key=js_bridge_key,
                        injected=True,
                        embedded=bool(bridge.get("isWalletBrowser", False)),
                    ),
                ))
            return wallets
        except Exception as e:
            logger.error(f"Failed to collect injected wallets: {e}")
            return []
