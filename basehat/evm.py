"""EVM network operations for the configured deployment targets."""

from typing import Any, Dict, Optional
from eth_account import Account
from eth_keys import keys
from eth_keys.exceptions import ValidationError
from web3 import Web3

from basehat import config
from basehat.exceptions import ChainIdMismatchError, InvalidPrivateKeyError
from basehat.models import DeployerAccount

PRIVATE_KEY_BYTES = 32

# Every configured chain pays gas in ETH
NATIVE_TOKEN_SYMBOL = "ETH"


class EVMClient:
    """EVM client bound to one configured network."""

    def __init__(self, network: str):
        """
        Initialize EVM client for a configured network.

        Args:
            network: Network name (e.g., "base", "baseSepolia")

        Raises:
            NetworkNotFoundError: If the network is not configured
            ValueError: If the network has no RPC endpoint
            ConnectionError: If the RPC endpoint is unreachable
        """
        self.network_config = config.get_network(network)
        self.network = self.network_config.name

        if self.network_config.is_local:
            raise ValueError(
                f"Network '{self.network}' has no RPC endpoint; "
                "it only exists inside the deploy toolchain's process"
            )

        self.rpc_endpoint = self.network_config.url
        self.w3 = self._connect_web3()

    def _connect_web3(self) -> Web3:
        """Return a connected Web3 instance or raise if unreachable."""
        w3 = Web3(Web3.HTTPProvider(self.rpc_endpoint))

        if not w3.is_connected():
            raise ConnectionError(f"Failed to connect to RPC endpoint: {self.rpc_endpoint}")

        return w3

    def get_chain_id(self) -> int:
        """Chain id reported by the endpoint."""
        return int(self.w3.eth.chain_id)

    def verify_chain_id(self) -> int:
        """
        Check that the endpoint serves the configured chain.

        Returns:
            The chain id reported by the endpoint

        Raises:
            ChainIdMismatchError: If it differs from the configured chain id
        """
        chain_id = self.get_chain_id()
        if chain_id != self.network_config.chain_id:
            raise ChainIdMismatchError(
                f"{self.rpc_endpoint} reports chain id {chain_id}, "
                f"but '{self.network}' is configured with {self.network_config.chain_id}"
            )
        return chain_id

    def get_balance(self, address: str) -> Dict[str, Any]:
        """
        Get the native coin balance of an address.

        Returns:
            Dictionary with address, balance_wei, balance (in ether) and symbol
        """
        checksum_address = Web3.to_checksum_address(address)
        balance_wei = int(self.w3.eth.get_balance(checksum_address))
        return {
            "address": checksum_address,
            "balance_wei": balance_wei,
            "balance": Web3.from_wei(balance_wei, "ether"),
            "symbol": NATIVE_TOKEN_SYMBOL,
        }


def derive_address_from_private_key(privkey_str: str) -> Dict[str, str]:
    """
    Derive address from EVM private key.

    Raises:
        InvalidPrivateKeyError: If the key is not 32 bytes of hex
    """
    privkey_str = privkey_str.strip()
    # Remove 0x prefix if present
    if privkey_str.startswith("0x"):
        privkey_str = privkey_str[2:]

    try:
        private_key_bytes = bytes.fromhex(privkey_str)
    except ValueError:
        raise InvalidPrivateKeyError("Private key must be hex encoded.") from None

    if len(private_key_bytes) != PRIVATE_KEY_BYTES:
        raise InvalidPrivateKeyError("Private key must be 32 bytes (64 hex characters).")

    try:
        private_key_obj = keys.PrivateKey(private_key_bytes)
        account = Account.from_key(private_key_bytes)
    except (ValueError, ValidationError) as e:
        raise InvalidPrivateKeyError(f"Invalid secp256k1 private key: {e}") from e

    return {
        "private_key": privkey_str,
        "public_key": private_key_obj.public_key.to_hex(),
        "address": account.address,
    }


def get_deployer_account(network: str) -> Optional[DeployerAccount]:
    """
    Get the account that deploys to a network.

    Returns:
        DeployerAccount, or None when the network has no credential

    Raises:
        NetworkNotFoundError: If the network is not configured
        InvalidPrivateKeyError: If the configured key is malformed
    """
    accounts = config.get_accounts(network)
    if not accounts:
        return None

    address_info = derive_address_from_private_key(accounts[0])
    return DeployerAccount(
        network=network,
        address=address_info["address"],
        public_key=address_info["public_key"],
    )
