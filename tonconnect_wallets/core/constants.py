DEFAULT_WALLETS_LIST_SOURCE = "https://raw.githubusercontent.com/ton-connect/wallets-list/main/wallets.json"
DEFAULT_WALLETS_LIST_TIMEOUT = 10.0

SDK_ERROR_PREFIX = "[TON_CONNECT_SDK_ERROR]"

TONCONNECT_BRIDGE_ATTR = "tonconnect"
