"""
basehat: deployment configuration for Solidity projects on Base
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("basehat")
except PackageNotFoundError:
    __version__ = None
