import typing

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, model_validator

from .enums import BridgeType

NonEmptyStr = typing.Annotated[str, Field(min_length=1)]


def _non_empty_str(value: typing.Any) -> bool:
    return isinstance(value, str) and bool(value)


class BridgeDTO(BaseModel):
    """
    One entry of the wallet `bridge` list.
    `sse` entries carry `url`, `js` entries carry `key`; other types carry nothing we use.
    """
    model_config = ConfigDict(extra="ignore")

    type: typing.Any
    url: typing.Any = None
    key: typing.Any = None

    @model_validator(mode="after")
    def check_type_fields(self):
        if self.type == BridgeType.sse.value and not _non_empty_str(self.url):
            raise ValueError("sse bridge must have a non-empty url")
        if self.type == BridgeType.js.value and not _non_empty_str(self.key):
            raise ValueError("js bridge must have a non-empty key")
        return self


class WalletInfoDTO(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: NonEmptyStr
    image: NonEmptyStr
    about_url: NonEmptyStr
    tondns: typing.Any = None
    universal_url: typing.Any = None
    deepLink: typing.Any = None
    bridge: typing.Annotated[list[BridgeDTO], Field(min_length=1)]

    @model_validator(mode="after")
    def check_universal_url(self):
        has_sse = any(item.type == BridgeType.sse.value for item in self.bridge)
        if has_sse and not _non_empty_str(self.universal_url):
            raise ValueError("wallet with sse bridge must have a non-empty universal_url")
        return self


class InjectedWalletInfoDTO(BaseModel):
    """`walletInfo` published by an injected wallet next to its bridge object."""
    model_config = ConfigDict(extra="ignore")

    name: NonEmptyStr
    image: NonEmptyStr
    about_url: NonEmptyStr
    tondns: typing.Optional[str] = None


WalletsListAdapter = TypeAdapter(list[WalletInfoDTO])
