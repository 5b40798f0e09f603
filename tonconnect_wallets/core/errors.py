from __future__ import annotations

from typing import Optional

from .constants import SDK_ERROR_PREFIX


class TonConnectError(Exception):
    """Base error of the wallets list resolver. Message gets the SDK prefix."""

    def __init__(self, message: str = "", *, cause: Optional[BaseException] = None):
        self.cause = cause
        prefix = f"{SDK_ERROR_PREFIX} {type(self).__name__}"
        super().__init__(f"{prefix}: {message}" if message else prefix)


class FetchWalletsError(TonConnectError):
    """
    Wallets list could not be fetched or had a wrong format.
    The original exception is kept in `cause` (and chained as __cause__).
    """
