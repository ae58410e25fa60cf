"""Main CLI entry point for string_util."""

import argparse
import logging
import sys

from string_util import __version__
from string_util.cli.commands import compare, names, sort, table


def main(argv=None):
    """Main CLI entry point with subcommands."""
    parser = argparse.ArgumentParser(
        prog="string-util",
        description="Natural sorting and string formatting helpers",
        epilog="Use 'string-util <command> --help' for command-specific help",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # string-util sort [file]
    sort_parser = subparsers.add_parser(
        "sort",
        help="Sort lines in natural order",
        description="Sort lines so embedded numbers order by value (file2 before file10)",
    )
    sort_parser.add_argument("file", nargs="?", help="Input file (default: stdin)")
    sort_parser.add_argument(
        "-r",
        "--reverse",
        action="store_true",
        help="Sort in descending order",
    )

    # string-util compare <left> <right>
    compare_parser = subparsers.add_parser(
        "compare",
        help="Compare two strings in natural order",
        description="Print less, equal or greater",
    )
    compare_parser.add_argument("left", help="First string")
    compare_parser.add_argument("right", help="Second string")

    # string-util names
    names_parser = subparsers.add_parser(
        "names",
        help="Generate random names",
        description="Generate pronounceable names from random syllables",
    )
    names_parser.add_argument(
        "-n",
        "--count",
        type=int,
        default=1,
        help="Number of names to generate",
    )
    names_parser.add_argument(
        "--syllables",
        type=int,
        default=None,
        help="Syllables per name (default: random 2-3)",
    )
    names_parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducible output",
    )

    # string-util table [file]
    table_parser = subparsers.add_parser(
        "table",
        help="Render delimited rows as a text table",
        description="Read delimited rows and print them as a separator-joined table",
    )
    table_parser.add_argument("file", nargs="?", help="Input file (default: stdin)")
    table_parser.add_argument(
        "-d",
        "--delimiter",
        default=None,
        help="Input field delimiter (default: ',')",
    )
    table_parser.add_argument(
        "-s",
        "--separator",
        default=None,
        help="Output cell separator (default: tab)",
    )
    table_parser.add_argument(
        "--headers",
        action="store_true",
        help="Add a 'Column N' header line",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Dispatch to appropriate command
    if args.command == "sort":
        return sort.sort_command(args)
    elif args.command == "compare":
        return compare.compare_command(args)
    elif args.command == "names":
        return names.names_command(args)
    elif args.command == "table":
        return table.table_command(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
