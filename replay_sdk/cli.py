"""
Command-line interface for the Replay SDK.
"""
import sys
import logging
import argparse
from typing import List, Optional

from .client import ReplayClient
from .exceptions import ReplayError
from .version import __version__

USAGE = """Usage:
replay-cli <identity> [ecosystem]
  prints the replay address for the given identity
  - ecosystem must be a or s for Aptos or Sui, otherwise ignored

replay-cli ata <wallet>
  prints the associated W token address for the given wallet
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="replay-cli",
        description="Resolve identities to receipt (replay) and token account addresses.",
        usage="%(prog)s [options] <identity> [ecosystem] | %(prog)s [options] ata <wallet>"
    )
    parser.add_argument(
        "identity",
        nargs="?",
        help="Discord id, chain address or wallet key, or 'ata'"
    )
    parser.add_argument(
        "extra",
        nargs="?",
        help="Ecosystem hint (s/a), or the wallet when the first argument is 'ata'"
    )
    parser.add_argument(
        "--deployment",
        help="Deployment to use (default: $REPLAY_DEPLOYMENT or mainnet)"
    )
    parser.add_argument(
        "--base-url",
        help="Flat-file store URL override"
    )
    parser.add_argument(
        "--timeout",
        type=int,
        default=10,
        help="HTTP timeout in seconds"
    )
    parser.add_argument(
        "--debug",
        help="Enable debug output",
        action="store_true"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the CLI.

    Args:
        argv: Arguments without the program name (defaults to sys.argv[1:])

    Returns:
        Process exit code
    """
    args = build_parser().parse_args(argv)

    if args.debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(name)s %(levelname)s %(message)s",
            stream=sys.stderr
        )

    if args.identity is None:
        print(USAGE)
        return 0

    try:
        with ReplayClient(
            deployment=args.deployment,
            flat_file_url=args.base_url,
            timeout=args.timeout
        ) as client:
            if args.identity == "ata" and args.extra is not None:
                print(f"ATA: {client.token_account(args.extra)}")
            else:
                print(f"ReplayAddress: {client.replay_address(args.identity, args.extra)}")
    except (ReplayError, ValueError) as e:
        print("failed with error:", file=sys.stderr)
        print(str(e), file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
