"""Shared pytest fixtures for basehat tests."""

import pytest

from basehat import config
from basehat.models import ProjectConfig

# Hardhat's first default development account
HARDHAT_PRIVATE_KEY = "0xac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80"
HARDHAT_ADDRESS = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"


@pytest.fixture
def private_key() -> str:
    return HARDHAT_PRIVATE_KEY


@pytest.fixture
def deployer_address() -> str:
    return HARDHAT_ADDRESS


@pytest.fixture
def config_with_key(monkeypatch) -> ProjectConfig:
    """Replace the loaded configuration with one that has a deployer key."""
    loaded = config.load_config({"PRIVATE_KEY": HARDHAT_PRIVATE_KEY})
    monkeypatch.setattr(config, "CONFIG", loaded)
    return loaded


@pytest.fixture
def config_without_key(monkeypatch) -> ProjectConfig:
    """Replace the loaded configuration with one that has no deployer key."""
    loaded = config.load_config({})
    monkeypatch.setattr(config, "CONFIG", loaded)
    return loaded
