"""
Command line entry point for initree.

Usage:
    python -m initree /path/to/file.ini
    python -m initree /path/to/file.ini --get section.key
    python -m initree /path/to/file.ini --dump
    python -m initree --help
"""

import argparse
import sys

from . import __version__
from .ini import (
    IniError,
    IniFileError,
    IniLookupError,
    IniSyntaxError,
    ReaderConfig,
    ReaderFlags,
    Section,
    dumps,
    load_file,
)
from .ini.lookups import lookup
from .logging import LogConfig, get_logger, setup_logging


logger = get_logger("main")


def print_summary(root: Section) -> None:
    """Print an overview of a parsed document."""
    sections = list(root.walk())[1:]
    print(f"Root keys: {len(root.keys)}")
    print(f"Sections: {len(sections)}")
    for section in sections:
        print(f"  [{section.name}] {len(section.keys)} keys")
    print("\nDocument is valid!")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="initree",
        description="Parse hierarchical INI files with section inheritance and lookups",
    )

    parser.add_argument("config", help="Path to the INI file")

    parser.add_argument(
        "--get",
        metavar="PATH",
        help="Print the value at a dotted path (section.key; .key for root keys)",
    )

    parser.add_argument(
        "--dump",
        action="store_true",
        help="Print the parsed document re-serialized",
    )

    parser.add_argument(
        "--no-lookups",
        action="store_true",
        help="Do not resolve %%path%% references",
    )

    parser.add_argument(
        "--no-escapes",
        action="store_true",
        help="Do not process escape sequences in quoted values",
    )

    parser.add_argument(
        "--encoding",
        metavar="NAME",
        help="Input encoding (default: utf-8, detected on failure)",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging (INFO level)",
    )

    parser.add_argument(
        "-d", "--debug",
        action="store_true",
        help="Enable debug logging (DEBUG level)",
    )

    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Quiet mode (only errors)",
    )

    parser.add_argument(
        "--log-file",
        metavar="PATH",
        help="Write logs to file",
    )

    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    log_config = LogConfig()

    if args.debug:
        log_config.console_level = "debug"
    elif args.verbose:
        log_config.console_level = "info"
    elif args.quiet:
        log_config.console_level = "error"
    else:
        log_config.console_level = "warning"

    if args.no_color:
        log_config.console_colors = False

    if args.log_file:
        log_config.file_enabled = True
        log_config.file_path = args.log_file

    setup_logging(log_config)

    config = ReaderConfig()
    if args.no_escapes:
        config = config.without(ReaderFlags.PROCESS_ESCAPES)

    try:
        root = load_file(
            args.config,
            encoding=args.encoding,
            lookups=not args.no_lookups,
            config=config,
        )
        logger.info(f"Parsed {args.config}")

        if args.get:
            # Paths are relative to the root either way
            print(lookup(root, args.get.lstrip(".")))
        elif args.dump:
            sys.stdout.write(dumps(root, config))
        else:
            print_summary(root)
        return 0

    except IniSyntaxError as e:
        print(f"Syntax error: {e}", file=sys.stderr)
        return 1
    except IniLookupError as e:
        print(f"Lookup error: {e}", file=sys.stderr)
        return 1
    except IniFileError as e:
        print(f"File error: {e}", file=sys.stderr)
        return 1
    except IniError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
