"""Data models for basehat."""

from dataclasses import dataclass, field
from typing import Mapping, Optional, Tuple


@dataclass(frozen=True)
class NetworkConfig:
    """A network the project can deploy to."""
    name: str
    chain_id: int
    url: Optional[str] = None
    accounts: Tuple[str, ...] = ()

    @property
    def is_local(self) -> bool:
        """True for the simulated chain, which has no remote endpoint."""
        return self.url is None


@dataclass(frozen=True)
class ProjectConfig:
    """Compiler version and deployment networks."""
    solidity: str
    networks: Mapping[str, NetworkConfig] = field(default_factory=dict)


@dataclass(frozen=True)
class DeployerAccount:
    """Public identity behind a configured credential."""
    network: str
    address: str
    public_key: str
