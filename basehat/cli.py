"""Main CLI interface for basehat."""

from __future__ import annotations

import argparse
import json
import sys
from typing import Callable, Dict, List, Tuple

from basehat import config, evm, models, utils
from basehat.exceptions import ConfigError


def export_config(reveal_secrets: bool = False) -> str:
    """Serialize the loaded configuration as JSON."""
    return json.dumps(config.to_dict(reveal_secrets=reveal_secrets), indent=2)


class BasehatCLI:
    """Main CLI class for basehat."""

    def __init__(self) -> None:
        self.actions: Dict[str, Tuple[str, Callable[[], None]]] = {
            "1": ("Show project configuration", self.show_project_config),
            "2": ("Show network details", self.show_network_details),
            "3": ("Show deployer account", self.show_deployer_account),
            "4": ("Check network connection", self.check_network),
            "5": ("Export configuration (JSON)", self.export),
            "0": ("Exit", self.exit_program),
        }
        self.should_exit = False

    def run(self) -> None:
        """Run the CLI main loop."""
        utils.print_banner()

        if not config.has_deployer_key():
            print()
            utils.warn(
                f"{config.PRIVATE_KEY_ENV} is not set; remote networks have no deployer account."
            )

        while not self.should_exit:
            try:
                choice = self.prompt_main_menu()
                action = self.actions.get(choice)
                if action:
                    label, callback = action
                    utils.section_header(label)
                    try:
                        callback()
                    except KeyboardInterrupt:
                        utils.section_footer("Cancelled. Returning to main menu.")
                    except EOFError:
                        utils.section_footer("Received EOF. Exiting basehat.")
                        self.should_exit = True
                else:
                    utils.warn(f"Unknown choice: {choice!r}")
            except KeyboardInterrupt:
                utils.section_footer("Interrupted. Returning to main menu.")
            except EOFError:
                print("\nGoodbye!")
                break

    def prompt_main_menu(self) -> str:
        """Prompt for main menu choice."""
        menu_items = {key: label for key, (label, _) in self.actions.items()}
        utils.print_menu("basehat Main Menu", menu_items)
        return input("Choose an option: ").strip()

    def prompt_choice(self, title: str, options: List[str]) -> str:
        """Prompt user to choose from a list of options."""
        options_map = {str(index): option for index, option in enumerate(options, start=1)}
        reverse_map = {option.lower(): option for option in options}

        while True:
            utils.print_menu(title, list(options_map.items()))
            choice = input("Choose an option: ").strip()
            if not choice:
                continue
            if choice in options_map:
                return options_map[choice]
            normalized = choice.lower()
            if normalized in reverse_map:
                return reverse_map[normalized]
            utils.warn(f"Invalid choice: {choice!r}. Please try again.")

    def prompt_confirm(self, prompt: str, default: bool = False) -> bool:
        """Prompt user for yes/no confirmation."""
        user_input = input(prompt).strip().lower()
        if not user_input:
            return default
        return user_input in ["y", "yes"]

    def show_project_config(self) -> None:
        """Show compiler version and a one-line summary per network."""
        print()
        print(f"{utils.bold('Solidity:')} {config.get_solidity_version()}")
        print()
        for name in config.list_networks():
            network = config.get_network(name)
            endpoint = network.url or "in-process"
            credentials = len(network.accounts)
            print(
                f"{utils.bold(name)}  chain {network.chain_id}  {endpoint}  "
                f"({credentials} account{'s' if credentials != 1 else ''})"
            )

    def show_network_details(self) -> None:
        """Show the full configuration of one network."""
        network = self.prompt_choice("Select network", config.list_networks())
        self.print_network(config.get_network(network))

    def show_deployer_account(self) -> None:
        """Show the address that deploys to a remote network."""
        network = self.prompt_choice("Select network", config.list_remote_networks())
        try:
            account = evm.get_deployer_account(network)
        except ConfigError as e:
            utils.error(str(e))
            return

        if account is None:
            utils.warn(f"No deployer account configured. Set {config.PRIVATE_KEY_ENV} to add one.")
            return
        self.print_account(account)

    def check_network(self) -> None:
        """Connect to a remote network, verify its chain id and show the deployer balance."""
        network = self.prompt_choice("Select network", config.list_remote_networks())
        display_name = config.get_network_display_name(network)
        utils.info(f"Connecting to {display_name} at {config.get_rpc_endpoint(network)}...")

        try:
            client = evm.EVMClient(network)
            chain_id = client.verify_chain_id()
        except Exception as e:
            utils.error(f"Failed to reach {display_name}: {e}")
            return
        utils.success(f"Connected to {display_name} (chain id {chain_id})")

        try:
            account = evm.get_deployer_account(network)
        except ConfigError as e:
            utils.error(str(e))
            return
        if account is None:
            return

        try:
            balance = client.get_balance(account.address)
        except Exception as e:
            utils.warn(f"Failed to fetch deployer balance on {display_name}: {e}")
            return
        utils.result(f"Deployer {balance['address']}: {balance['balance']} {balance['symbol']}")
        if balance["balance_wei"] == 0:
            utils.warn("Deployer account has no funds for gas.")

    def export(self) -> None:
        """Print the configuration as JSON, optionally with raw keys."""
        reveal = False
        if config.has_deployer_key():
            reveal = self.prompt_confirm("Include raw private keys? (y/N): ")
        print()
        print(export_config(reveal_secrets=reveal))

    def print_network(self, network: models.NetworkConfig) -> None:
        """Print network configuration."""
        print()
        print(f"[{config.get_network_display_name(network.name)}] Network Configuration")
        fields = [
            ("Name", network.name),
            ("Chain ID", str(network.chain_id)),
            ("RPC", network.url or "in-process (no endpoint)"),
        ]
        if network.is_local:
            fields.append(("Accounts", "none (local chain)"))
        elif network.accounts:
            fields.extend(("Account", utils.mask_secret(account)) for account in network.accounts)
        else:
            fields.append(("Accounts", f"none ({config.PRIVATE_KEY_ENV} not set)"))
        utils.print_fields(fields)

    def print_account(self, account: models.DeployerAccount) -> None:
        """Print deployer account information."""
        print()
        print(f"[{config.get_network_display_name(account.network)}] Deployer Account")
        utils.print_fields([
            ("Public key", account.public_key),
            ("Address", utils.bold_cyan(account.address)),
        ])

    def exit_program(self) -> None:
        """Exit the program."""
        print("\nExiting basehat. Goodbye!")
        self.should_exit = True


def build_parser() -> argparse.ArgumentParser:
    """Command line flags shared by the entry points."""
    parser = argparse.ArgumentParser(description="basehat CLI")
    parser.add_argument(
        "--export",
        action="store_true",
        help="Print the configuration as JSON and exit"
    )
    parser.add_argument(
        "--reveal-secrets",
        action="store_true",
        help="Include raw private keys in the export"
    )
    return parser


def main(export: bool = False, reveal_secrets: bool = False) -> int:
    """Main entry point."""
    if export:
        print(export_config(reveal_secrets=reveal_secrets))
        return 0

    cli = BasehatCLI()
    cli.run()
    return 0


def run(argv: List[str] | None = None) -> int:
    """Console script entry point."""
    args = build_parser().parse_args(argv)
    if args.reveal_secrets and not args.export:
        print("Error: --reveal-secrets only applies with --export")
        return 1
    return main(export=args.export, reveal_secrets=args.reveal_secrets)


if __name__ == "__main__":
    sys.exit(run())
