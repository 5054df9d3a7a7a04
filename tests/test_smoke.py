#!/usr/bin/env python3
"""Smoke tests for basehat to verify basic functionality."""

import sys
import os

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def test_imports():
    """Test that all modules can be imported."""
    from basehat import cli, config, evm, exceptions, models, utils  # noqa: F401


def test_cli_initialization():
    """Test that CLI can be initialized."""
    from basehat.cli import BasehatCLI
    cli = BasehatCLI()
    assert hasattr(cli, 'actions')
    assert hasattr(cli, 'run')
    assert "0" in cli.actions


def test_evm_functions():
    """Test that EVM functions are callable."""
    from basehat import evm
    assert callable(evm.derive_address_from_private_key)
    assert callable(evm.get_deployer_account)
    assert evm.NATIVE_TOKEN_SYMBOL == "ETH"


def test_utils_functions():
    """Test that utility functions are callable."""
    from basehat import utils
    assert callable(utils.print_banner)
    assert callable(utils.error)
    assert callable(utils.warn)
    assert callable(utils.info)
    assert callable(utils.success)
    assert callable(utils.result)
    assert callable(utils.mask_secret)


def test_config():
    """Test that config module is accessible."""
    from basehat import config
    assert hasattr(config, 'CONFIG')
    assert config.get_solidity_version() == "0.8.20"
    assert callable(config.load_config)
    assert callable(config.get_rpc_endpoint)
    assert callable(config.to_dict)


def test_entry_point():
    """Test that the main entry point can be imported."""
    from basehat.cli import main, run
    assert callable(main)
    assert callable(run)


def run_all_tests():
    """Run all smoke tests."""
    print("=" * 60)
    print("Running basehat Smoke Tests")
    print("=" * 60)
    print()

    tests = [
        test_imports,
        test_cli_initialization,
        test_evm_functions,
        test_utils_functions,
        test_config,
        test_entry_point,
    ]

    results = []
    for test in tests:
        try:
            test()
            print(f"✓ {test.__name__}")
            results.append(True)
        except Exception as e:
            print(f"✗ Test {test.__name__} failed with exception: {e}")
            results.append(False)

    print()
    print("=" * 60)
    passed = sum(results)
    total = len(results)
    print(f"Results: {passed}/{total} tests passed")
    print("=" * 60)

    if all(results):
        print("✓ All smoke tests passed!")
        return 0
    else:
        print("✗ Some smoke tests failed!")
        return 1


if __name__ == "__main__":
    sys.exit(run_all_tests())
