"""Tests for StoreConfig."""

import pytest
from pydantic import ValidationError

from lumen_store import StoreConfig
from lumen_store.config import DEFAULT_PATH


def test_defaults():
    config = StoreConfig()
    assert config.driver == "file"
    assert config.parameters == DEFAULT_PATH
    assert not config.atomic


def test_parse():
    config = StoreConfig.parse("file:/var/lib/lumen/data.yml")
    assert config.driver == "file"
    assert config.parameters == "/var/lib/lumen/data.yml"


def test_parse_keeps_colons_in_parameters():
    config = StoreConfig.parse("file:C:/Users/me/data.yml")
    assert config.driver == "file"
    assert config.parameters == "C:/Users/me/data.yml"


def test_parse_overrides():
    assert StoreConfig.parse("file:/tmp/x", atomic=True).atomic


@pytest.mark.parametrize("spec", ["file", "", ":/tmp/x"])
def test_parse_rejects_malformed(spec):
    with pytest.raises(ValueError):
        StoreConfig.parse(spec)


def test_empty_driver_rejected():
    with pytest.raises(ValidationError):
        StoreConfig(driver="")


def test_from_env():
    config = StoreConfig.from_env({"LUMEN_STORE": "memory:scratch"})
    assert config.driver == "memory"
    assert config.parameters == "scratch"


def test_from_env_defaults_when_unset():
    assert StoreConfig.from_env({}) == StoreConfig()


def test_str_round_trips():
    config = StoreConfig.parse("file:/tmp/data.yml")
    assert StoreConfig.parse(str(config)) == config
