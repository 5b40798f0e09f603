from .core.errors import FetchWalletsError, TonConnectError
from .core.injected_provider import InjectedProvider, InjectedWalletsProvider
from .core.wallets_list_manager import WalletsListManager
from .enums import BridgeType, CacheState
from .models import (
    InjectableBridge,
    RemoteBridge,
    WalletInfo,
    is_wallet_info_currently_embedded,
    is_wallet_info_currently_injected,
    is_wallet_info_injectable,
    is_wallet_info_remote,
)

__all__ = [
    "BridgeType",
    "CacheState",
    "FetchWalletsError",
    "InjectableBridge",
    "InjectedProvider",
    "InjectedWalletsProvider",
    "RemoteBridge",
    "TonConnectError",
    "WalletInfo",
    "WalletsListManager",
    "is_wallet_info_currently_embedded",
    "is_wallet_info_currently_injected",
    "is_wallet_info_injectable",
    "is_wallet_info_remote",
]
