"""
eosvalidate.cli - Command-line interface.

Checks a single value against one catalog rule:

    eosvalidate eos_name eosio.token
    eosvalidate --field ids hex_slice ab cd
    eosvalidate --list
"""

import argparse
import json
import sys
from typing import List, Optional, TextIO

from eosvalidate import __version__
from eosvalidate.core.config.config import Config
from eosvalidate.core.exceptions import RuleNotFoundError, ValidationError
from eosvalidate.core.logging.logger import LogContext, get_logger, setup_logging
from eosvalidate.validation.registry import DEPRECATED_TAGS, check, iter_tags

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_USAGE = 2

# Tags whose value is a list of strings rather than a single string
LIST_VALUE_TAGS = {"hex_slice", "hex_rows"}


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="eosvalidate",
        description="Check a value against an EOS field validation rule",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  eosvalidate eos_name eosio.token          # OK
  eosvalidate eos_block_num 12a             # invalid, exit status 1
  eosvalidate --field ids hex_slice ab cd   # list rules take several values
  eosvalidate --list                        # show available rule tags
""",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--list", action="store_true", help="List rule tags and exit")
    parser.add_argument(
        "--field",
        default="value",
        help="Field name used in error messages (default: value)",
    )
    parser.add_argument(
        "--message",
        default="",
        help="Custom error message replacing the rule's default",
    )
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    parser.add_argument("tag", nargs="?", help="Rule tag, e.g. eos_name")
    parser.add_argument("values", nargs="*", help="Value(s) to check")
    return parser


def list_tags(out: TextIO) -> int:
    for tag in iter_tags():
        if tag in DEPRECATED_TAGS:
            print(f"{tag} (deprecated, use {DEPRECATED_TAGS[tag]})", file=out)
        else:
            print(tag, file=out)
    return EXIT_OK


def run_check(args: argparse.Namespace, out: TextIO) -> int:
    if args.tag in LIST_VALUE_TAGS:
        value = list(args.values)
    elif len(args.values) == 1:
        value = args.values[0]
    else:
        print(
            f"Error: rule {args.tag} takes exactly one value, got {len(args.values)}",
            file=sys.stderr,
        )
        return EXIT_USAGE

    with LogContext(field=args.field, rule=args.tag, operation="cli.check"):
        try:
            check(args.tag, args.field, value, message=args.message)
        except ValidationError as exc:
            if args.json:
                print(json.dumps({"valid": False, "error": exc.to_dict()}), file=out)
            else:
                print(exc.message, file=out)
            return EXIT_INVALID

    if args.json:
        print(json.dumps({"valid": True}), file=out)
    else:
        print("OK", file=out)
    return EXIT_OK


def main(argv: Optional[List[str]] = None, out: Optional[TextIO] = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])
        out: Stream for results (defaults to sys.stdout)

    Returns:
        Exit code (0 valid, 1 invalid, 2 usage error)
    """
    out = out or sys.stdout
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging()
    logger.debug("CLI started", extra={"config": Config.get_config_summary()})

    if args.list:
        return list_tags(out)

    if not args.tag:
        parser.print_help(file=sys.stderr)
        return EXIT_USAGE

    try:
        return run_check(args, out)
    except RuleNotFoundError as exc:
        print(f"Error: {exc.message}", file=sys.stderr)
        return EXIT_USAGE


if __name__ == "__main__":
    sys.exit(main())
