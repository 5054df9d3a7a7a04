#!/usr/bin/env python3
"""
Configuration module for basehat.
Declares the compiler version and the networks contracts are deployed to.
The deployer private key and RPC endpoints come from environment variables,
with fallback to the public Base endpoints.
"""

import os
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional

from dotenv import load_dotenv

from basehat.exceptions import NetworkNotFoundError
from basehat.models import NetworkConfig, ProjectConfig
from basehat.utils import mask_secret

# Load environment variables from .env file if it exists
load_dotenv()

SOLIDITY_VERSION = "0.8.20"

PRIVATE_KEY_ENV = "PRIVATE_KEY"

LOCAL_NETWORK = "hardhat"

# Network definitions: name -> (chain id, RPC override variable, default RPC)
# The local simulated chain has no endpoint and never carries credentials.
NETWORK_DEFINITIONS: Dict[str, Dict[str, Any]] = {
    LOCAL_NETWORK: {
        "chain_id": 31337,
    },
    "base": {
        "chain_id": 8453,
        "rpc_env": "BASE_MAINNET_RPC",
        "rpc_default": "https://mainnet.base.org",
    },
    "baseSepolia": {
        "chain_id": 84532,
        "rpc_env": "BASE_SEPOLIA_RPC",
        "rpc_default": "https://sepolia.base.org",
    },
}

DISPLAY_NAMES: Dict[str, str] = {
    LOCAL_NETWORK: "Hardhat (local)",
    "base": "Base",
    "baseSepolia": "Base Sepolia",
}


def get_env(key: str, default: str, environ: Optional[Mapping[str, str]] = None) -> str:
    """Get environment variable with fallback to default."""
    if environ is None:
        environ = os.environ
    return environ.get(key) or default


def get_private_key(environ: Optional[Mapping[str, str]] = None) -> Optional[str]:
    """
    Get the deployer private key from the environment.

    An unset, empty or whitespace-only variable counts as no key, and
    surrounding whitespace is stripped from a present one. A bare truthiness
    check would keep "  " as a key and pass padded keys through; padding
    from .env files is dropped here instead.

    Args:
        environ: Mapping to read from (defaults to os.environ)

    Returns:
        Stripped private key string, or None if not set
    """
    private_key = get_env(PRIVATE_KEY_ENV, "", environ).strip()
    return private_key or None


def load_config(environ: Optional[Mapping[str, str]] = None) -> ProjectConfig:
    """
    Build the project configuration.

    PRIVATE_KEY is read once here; it is attached to every remote network.
    The key is not validated at this point.

    Args:
        environ: Mapping to read from (defaults to os.environ)

    Returns:
        Read-only ProjectConfig
    """
    private_key = get_private_key(environ)
    accounts = (private_key,) if private_key else ()

    networks: Dict[str, NetworkConfig] = {}
    for name, definition in NETWORK_DEFINITIONS.items():
        if "rpc_env" not in definition:
            networks[name] = NetworkConfig(name=name, chain_id=definition["chain_id"])
            continue
        networks[name] = NetworkConfig(
            name=name,
            chain_id=definition["chain_id"],
            url=get_env(definition["rpc_env"], definition["rpc_default"], environ),
            accounts=accounts,
        )

    return ProjectConfig(solidity=SOLIDITY_VERSION, networks=MappingProxyType(networks))


# Loaded once per process
CONFIG: ProjectConfig = load_config()


def to_dict(config: Optional[ProjectConfig] = None, reveal_secrets: bool = False) -> Dict[str, Any]:
    """
    Render the configuration in the shape the deploy toolchain reads.

    Args:
        config: Configuration to render (defaults to CONFIG)
        reveal_secrets: Include raw private keys instead of masked ones

    Returns:
        Dictionary with "solidity" and "networks" keys, plus "masked": True
        when private keys were replaced by masked placeholders
    """
    if config is None:
        config = CONFIG

    networks: Dict[str, Dict[str, Any]] = {}
    for name, network in config.networks.items():
        if network.is_local:
            networks[name] = {"chainId": network.chain_id}
            continue
        accounts = list(network.accounts)
        if not reveal_secrets:
            accounts = [mask_secret(account) for account in accounts]
        networks[name] = {
            "url": network.url,
            "chainId": network.chain_id,
            "accounts": accounts,
        }

    rendered: Dict[str, Any] = {"solidity": config.solidity, "networks": networks}
    # Placeholder keys cannot sign
    if not reveal_secrets and any(network.accounts for network in config.networks.values()):
        rendered["masked"] = True
    return rendered


def get_network(network: str, config: Optional[ProjectConfig] = None) -> NetworkConfig:
    """
    Get the configuration of a network.

    Raises:
        NetworkNotFoundError: If the network is not configured
    """
    if config is None:
        config = CONFIG
    try:
        return config.networks[network]
    except KeyError:
        raise NetworkNotFoundError(
            f"Network '{network}' is not configured. "
            f"Available networks: {', '.join(config.networks)}"
        ) from None


def get_rpc_endpoint(network: str) -> Optional[str]:
    """
    Get RPC endpoint for a given network.

    Returns:
        RPC endpoint URL as string, or None for the local network or an unknown name
    """
    if network not in CONFIG.networks:
        return None
    return CONFIG.networks[network].url


def get_chain_id(network: str) -> int:
    """Get the chain id of a network."""
    return get_network(network).chain_id


def get_accounts(network: str) -> List[str]:
    """Get the signing credentials configured for a network."""
    return list(get_network(network).accounts)


def get_solidity_version() -> str:
    """Get the Solidity compiler version."""
    return CONFIG.solidity


def get_network_display_name(network: str) -> str:
    """Get a human readable network name."""
    return DISPLAY_NAMES.get(network, network)


def list_networks() -> list[str]:
    """List all available network names."""
    return list(CONFIG.networks.keys())


def list_remote_networks() -> list[str]:
    """List networks that have an RPC endpoint."""
    return [name for name, network in CONFIG.networks.items() if not network.is_local]


def has_deployer_key() -> bool:
    """True when PRIVATE_KEY was set at load time."""
    return any(network.accounts for network in CONFIG.networks.values())
