import pytest

from etherscan_accounts.config import DEFAULT_BASE_URL, load_config, resolve_chain_id

ENV_VARS = (
    "ETHERSCAN_API_KEY",
    "ETHERSCAN_BASE_URL",
    "NETWORK",
    "CHAIN_ID",
    "REQUEST_TIMEOUT",
    "REQUEST_RETRIES",
    "REQUEST_BACKOFF_SECONDS",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_api_key_is_required() -> None:
    with pytest.raises(ValueError, match="ETHERSCAN_API_KEY"):
        load_config()


def test_defaults(monkeypatch) -> None:
    monkeypatch.setenv("ETHERSCAN_API_KEY", "KEY")
    config = load_config()
    assert config.api_key == "KEY"
    assert config.base_url == DEFAULT_BASE_URL
    assert config.network == "mainnet"
    assert config.chain_id == "1"
    assert config.request_timeout == 10
    assert config.max_retries == 3
    assert config.backoff_seconds == 0.5
    assert config.log_level == "WARNING"


def test_overrides(monkeypatch) -> None:
    monkeypatch.setenv("ETHERSCAN_API_KEY", "KEY")
    monkeypatch.setenv("ETHERSCAN_BASE_URL", "https://example.test/api/")
    monkeypatch.setenv("NETWORK", "Sepolia")
    monkeypatch.setenv("REQUEST_RETRIES", "5")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    config = load_config()
    assert config.base_url == "https://example.test/api"
    assert config.network == "sepolia"
    assert config.chain_id == "11155111"
    assert config.max_retries == 5
    assert config.log_level == "DEBUG"


def test_chain_id_override_wins(monkeypatch) -> None:
    monkeypatch.setenv("ETHERSCAN_API_KEY", "KEY")
    monkeypatch.setenv("NETWORK", "somechain")
    monkeypatch.setenv("CHAIN_ID", "424242")
    assert load_config().chain_id == "424242"


def test_unknown_network_without_override_fails(monkeypatch) -> None:
    monkeypatch.setenv("ETHERSCAN_API_KEY", "KEY")
    monkeypatch.setenv("NETWORK", "somechain")
    with pytest.raises(ValueError, match="Unknown network"):
        load_config()


def test_resolve_chain_id() -> None:
    assert resolve_chain_id("eth") == "1"
    assert resolve_chain_id(" 8453 ") == "8453"
    assert resolve_chain_id("mainnet", "5") == "5"
