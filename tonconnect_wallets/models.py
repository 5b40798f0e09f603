from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import TYPE_CHECKING, Optional

from .dto import WalletInfoDTO
from .enums import BridgeType

if TYPE_CHECKING:
    from .core.injected_provider import InjectedWalletsProvider


@dataclass(frozen=True)
class RemoteBridge:
    bridge_url: str
    universal_link: str
    deep_link: Optional[str] = None


@dataclass(frozen=True)
class InjectableBridge:
    js_bridge_key: str
    injected: bool
    embedded: bool


@dataclass(frozen=True)
class WalletInfo:
    """
    Normalized wallet description.
    `remote` is set for wallets reachable through an http bridge, `injectable`
    for wallets with an in-page js bridge. Both may be set; a wallet listing only
    unknown bridge types has neither.
    """
    name: str
    image_url: str
    about_url: str
    tondns: Optional[str] = None
    remote: Optional[RemoteBridge] = None
    injectable: Optional[InjectableBridge] = None

    @classmethod
    def from_dto(cls, dto: WalletInfoDTO, injected_provider: "InjectedWalletsProvider") -> "WalletInfo":
        remote: Optional[RemoteBridge] = None
        injectable: Optional[InjectableBridge] = None

        for bridge in dto.bridge:
            if bridge.type == BridgeType.sse.value:
                remote = RemoteBridge(
                    bridge_url=bridge.url,
                    universal_link=dto.universal_url,
                    deep_link=dto.deepLink,
                )
            if bridge.type == BridgeType.js.value:
                injectable = InjectableBridge(
                    js_bridge_key=bridge.key,
                    injected=injected_provider.is_wallet_injected(bridge.key),
                    embedded=injected_provider.is_inside_wallet_browser(bridge.key),
                )

        return cls(
            name=dto.name,
            image_url=dto.image,
            about_url=dto.about_url,
            tondns=dto.tondns,
            remote=remote,
            injectable=injectable,
        )

    def merged_with(self, other: "WalletInfo") -> "WalletInfo":
        """Overlay `other` on top of self: its non-None fields win."""
        changes = {
            f.name: getattr(other, f.name)
            for f in fields(other)
            if getattr(other, f.name) is not None
        }
        return replace(self, **changes)


def is_wallet_info_remote(wallet: WalletInfo) -> bool:
    return wallet.remote is not None


def is_wallet_info_injectable(wallet: WalletInfo) -> bool:
    return wallet.injectable is not None


def is_wallet_info_currently_injected(wallet: WalletInfo) -> bool:
    return wallet.injectable is not None and wallet.injectable.injected


def is_wallet_info_currently_embedded(wallet: WalletInfo) -> bool:
    return wallet.injectable is not None and wallet.injectable.embedded
