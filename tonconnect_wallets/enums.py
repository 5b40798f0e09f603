from enum import Enum


class BridgeType(str, Enum):
    sse = "sse"
    js = "js"


class CacheState(str, Enum):
    empty = "empty"
    pending = "pending"
    ready = "ready"
