#!/usr/bin/env python3
"""
AGC - Main Entry Point

Command line for the Amazon Genomics CLI account commands.
"""

import argparse
import sys
from typing import List, Optional
from dotenv import load_dotenv

from cli.account_activate import build_account_activate_command
from logger.logging_config import setup_logging
from logger.log_wrapper import get_logger
from configuration import CLI_NAME

load_dotenv(override=True)

logger = get_logger("main", __name__)


def build_parser() -> argparse.ArgumentParser:
    """
    Build the top level parser with its global flags and commands.

    Returns:
        argparse.ArgumentParser: Parser for the whole command line
    """
    parser = argparse.ArgumentParser(
        prog=CLI_NAME,
        description="Amazon Genomics CLI - run genomics workflows on AWS",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Examples:
  {CLI_NAME} account activate
  {CLI_NAME} account activate --bucket my-custom-bucket --vpc my-vpc-id
  {CLI_NAME} --profile dev --verbose account activate
        """
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Display verbose diagnostic information",
        default=False
    )

    parser.add_argument(
        "--profile",
        type=str,
        default=None,
        help="Use the specified AWS named profile"
    )

    parser.add_argument(
        "--log-dir",
        type=str,
        default=None,
        help="Also write a detailed log file to this directory"
    )

    commands = parser.add_subparsers(dest="command", metavar="<command>")
    commands.required = True

    account_parser = commands.add_parser(
        "account",
        help="Commands for AWS account setup.",
        description="Commands for AWS account setup.\nAGC requires an account to be activated before use."
    )
    account_commands = account_parser.add_subparsers(dest="account_command", metavar="<command>")
    account_commands.required = True
    build_account_activate_command(account_commands)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Parse the command line and run the selected command.

    Args:
        argv: Command line arguments, defaults to sys.argv[1:]

    Returns:
        int: Process exit code
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(verbose=args.verbose, log_dir=args.log_dir)

    try:
        args.func(args)
    except Exception as e:
        logger.error(str(e))
        return 1

    return 0


def cli_main() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    cli_main()
