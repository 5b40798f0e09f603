"""Unit tests for InjectedProvider environment lookups."""

from tonconnect_wallets import InjectedProvider

from .conftest import injected_entry


def test_empty_environment():
    provider = InjectedProvider()
    assert provider.get_currently_injected_wallets() == []
    assert provider.is_wallet_injected("k") is False
    assert provider.is_inside_wallet_browser("k") is False


def test_is_wallet_injected_requires_tonconnect_entry():
    provider = InjectedProvider({
        "good": {"tonconnect": {}},
        "no_bridge": {"something": 1},
        "scalar": "tonconnect",
    })
    assert provider.is_wallet_injected("good") is True
    assert provider.is_wallet_injected("no_bridge") is False
    assert provider.is_wallet_injected("scalar") is False
    assert provider.is_wallet_injected("missing") is False


def test_is_inside_wallet_browser():
    provider = InjectedProvider({
        "host": injected_entry("Host", wallet_browser=True),
        "ext": injected_entry("Ext"),
    })
    assert provider.is_inside_wallet_browser("host") is True
    assert provider.is_inside_wallet_browser("ext") is False
    assert provider.is_inside_wallet_browser("missing") is False


def test_currently_injected_wallets_need_wallet_info():
    provider = InjectedProvider({
        "host": injected_entry("Host", wallet_browser=True, tondns="host.ton"),
        "bare": {"tonconnect": {"isWalletBrowser": True}},
        "broken": {"tonconnect": {"walletInfo": {"name": "Broken"}}},
        "unrelated": 42,
    })

    wallets = provider.get_currently_injected_wallets()

    assert len(wallets) == 1
    wallet = wallets[0]
    assert wallet.name == "Host"
    assert wallet.image_url == "Host-img"
    assert wallet.about_url == "Host-about"
    assert wallet.tondns == "host.ton"
    assert wallet.remote is None
    assert wallet.injectable.js_bridge_key == "host"
    assert wallet.injectable.injected is True
    assert wallet.injectable.embedded is True


class _ExplodingEnvironment(dict):
    def __iter__(self):
        raise RuntimeError("environment is gone")


def test_currently_injected_wallets_swallow_scan_failure():
    provider = InjectedProvider(_ExplodingEnvironment())
    assert provider.get_currently_injected_wallets() == []
