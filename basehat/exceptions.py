"""Custom exception classes for basehat."""


class ConfigError(Exception):
    """Base exception for configuration errors."""

    pass


class NetworkNotFoundError(ConfigError, ValueError):
    """Raised when a network name is not configured."""

    pass


class InvalidPrivateKeyError(ConfigError, ValueError):
    """Raised when a private key is not 32 bytes of hex."""

    pass


class ChainIdMismatchError(ConfigError, ValueError):
    """Raised when an endpoint reports a different chain than configured."""

    pass
