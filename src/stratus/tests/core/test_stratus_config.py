import json

import pytest
from pydantic import ValidationError

from stratus.core.config import (
    CONFIG_FILENAME,
    ConfigStore,
    HostConfig,
    StratusConfig,
    StratusSettings,
    default_config,
)
from stratus.core.errors import ConfigurationReadError, ConfigurationWriteError


def test_store_round_trip(config_store, test_config):
    assert config_store.exists()
    assert config_store.path().name == CONFIG_FILENAME

    loaded = config_store.load()
    assert loaded == test_config
    assert loaded.hosts["s3*.amazonaws.com"].access_key_id == "testing"


def test_store_missing(empty_store):
    assert empty_store.exists() is False

    with pytest.raises(ConfigurationReadError) as exc_info:
        empty_store.load()
    assert exc_info.value.path == str(empty_store.path())


def test_store_corrupt_json(empty_store):
    empty_store.config_dir.mkdir(parents=True)
    empty_store.path().write_text("{not json", encoding="utf-8")

    with pytest.raises(ConfigurationReadError) as exc_info:
        empty_store.load()

    assert isinstance(exc_info.value.__cause__, ValidationError)


def test_store_rejects_unknown_version(empty_store):
    empty_store.config_dir.mkdir(parents=True)
    empty_store.path().write_text(
        json.dumps({"version": "0.9", "aliases": {}, "hosts": {}}), encoding="utf-8"
    )

    with pytest.raises(ConfigurationReadError):
        empty_store.load()


def test_store_save_failure(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("a file, not a directory")

    with pytest.raises(ConfigurationWriteError):
        ConfigStore(blocker / "nested").save(default_config())


@pytest.mark.parametrize(
    "aliases",
    [
        {"9lives": "https://example.com"},
        {"x": "https://example.com"},
        {"https": "https://example.com"},
        {"files": "ftp://example.com"},
        {"nohost": "https://"},
    ],
)
def test_invalid_aliases_rejected(aliases):
    with pytest.raises(ValidationError):
        StratusConfig(aliases=aliases)


def test_host_config_credentials():
    assert HostConfig().is_anonymous
    assert HostConfig().has_valid_credentials
    assert HostConfig(access_key_id="a", secret_access_key="b").has_valid_credentials
    assert not HostConfig(access_key_id="a").has_valid_credentials


def test_default_config_is_valid():
    config = default_config()

    assert config.aliases["s3"] == "https://s3.amazonaws.com"
    assert "localhost:*" in config.hosts
    assert all(host.is_anonymous for host in config.hosts.values())


def test_settings_from_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("STRATUS_CONFIG_DIR", str(tmp_path / "custom"))

    assert StratusSettings().config_dir == tmp_path / "custom"
    assert ConfigStore().path() == tmp_path / "custom" / CONFIG_FILENAME


def test_store_invalid_utf8(empty_store):
    empty_store.config_dir.mkdir(parents=True)
    empty_store.path().write_bytes(b"\xff\xfe{garbage")

    with pytest.raises(ConfigurationReadError) as exc_info:
        empty_store.load()

    assert exc_info.value.path == str(empty_store.path())
    assert exc_info.value.__cause__ is not None
