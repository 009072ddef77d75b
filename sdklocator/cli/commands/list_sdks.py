"""
List command implementation.

Discovers installed SDKs from a working directory and prints them newest first.
"""

import logging

from sdklocator.cli.utils import load_cli_config, print_records
from sdklocator.locator.sdk_locator import SdkLocator

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the list command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 if at least one SDK was found, 1 otherwise)
    """
    config = load_cli_config(args)
    locator = SdkLocator(config)

    if args.latest:
        latest = locator.find_latest(args.working_dir)
        records = [latest] if latest else []
    else:
        records = locator.find_instances(args.working_dir)

    if not records:
        logger.error(f"No .NET SDK found from {args.working_dir}")
        if args.json:
            print_records([], as_json=True)
        return 1

    print_records(records, as_json=args.json)
    return 0
