"""
Show command implementation.

Validates a single, already-known SDK directory.
"""

import logging
from pathlib import Path

from sdklocator.cli.utils import load_cli_config, print_records
from sdklocator.locator.sdk_locator import SdkLocator

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the show command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 if the directory is a valid SDK, 1 otherwise)
    """
    config = load_cli_config(args)
    locator = SdkLocator(config)

    record = locator.get_instance(Path.cwd(), args.path)
    if record is None:
        logger.error(f"Not a valid SDK installation: {args.path}")
        if args.json:
            print_records([], as_json=True)
        return 1

    print_records([record], as_json=args.json)
    return 0
