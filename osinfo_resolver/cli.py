"""
Command-line interface for the osinfo resolver.
"""

import argparse
import sys
from typing import List, Optional

from .config import OUTPUT_FORMATS, load_config, get_default_config_path
from .exceptions import (ConfigurationError, FactsParseError, InsufficientDataError,
                         ReportGenerationError)
from .facts import FactsLoader
from .logging_config import get_logger, setup_logging
from .models import OsFacts
from .reporting import get_reporter
from .resolver import BatchResolver, IdentifierResolver
from .version import get_full_name_with_version

logger = get_logger('cli')

EXIT_OK = 0
EXIT_INSUFFICIENT_DATA = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='osinfo-resolver',
        description='Resolve inspected OS facts to canonical osinfo IDs.',
        epilog='Examples:\n'
               '  osinfo-resolver --type linux --distro ubuntu --major 22 --minor 4\n'
               '  osinfo-resolver facts.yaml --format json -o report.json',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument('facts_files', nargs='*', metavar='FACTS_FILE',
                        help='JSON or YAML facts documents to resolve')

    inline = parser.add_argument_group('inline facts (resolve a single installation)')
    inline.add_argument('--type', dest='os_type', help='OS family, e.g. linux, windows, freebsd')
    inline.add_argument('--distro', help='Distribution name, e.g. fedora, sles, msdos')
    inline.add_argument('--major', type=int, default=0, help='Major version (default: 0)')
    inline.add_argument('--minor', type=int, default=0, help='Minor version (default: 0)')
    inline.add_argument('--product-name', help='Windows product name')
    inline.add_argument('--product-variant', help='Windows product variant, e.g. Client or Server')
    inline.add_argument('--build-id', help='Windows build number')

    output = parser.add_argument_group('output')
    output.add_argument('-f', '--format', choices=OUTPUT_FORMATS, help='Report format for facts files')
    output.add_argument('-o', '--output', help='Write the report to this path')

    general = parser.add_argument_group('general')
    general.add_argument('-c', '--config', help='YAML configuration file')
    general.add_argument('--strict', action='store_true',
                         help='Stop at the first fact set with insufficient data')
    general.add_argument('--log-level', help='Logging level (DEBUG, INFO, WARNING, ERROR)')
    general.add_argument('--log-file', help='Also write a debug log to this file')
    general.add_argument('-v', '--verbose', action='store_true', help='Verbose log format')
    general.add_argument('--version', action='version', version=get_full_name_with_version())
    return parser


def _is_inline(args: argparse.Namespace) -> bool:
    return any(value is not None for value in (
        args.os_type, args.distro, args.product_name, args.product_variant, args.build_id))


def _resolve_inline(args: argparse.Namespace) -> int:
    facts = OsFacts(
        os_type=args.os_type,
        distro=args.distro,
        major=args.major,
        minor=args.minor,
        product_name=args.product_name,
        product_variant=args.product_variant,
        build_id=args.build_id,
    )
    try:
        osinfo_id = IdentifierResolver().resolve(facts)
    except InsufficientDataError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_INSUFFICIENT_DATA
    print(osinfo_id)
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.major < 0 or args.minor < 0:
        parser.error("--major and --minor must be non-negative")

    try:
        config = load_config(args.config or get_default_config_path())
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return EXIT_USAGE

    setup_logging(level=args.log_level or config.logging.level,
                  log_file=args.log_file or config.logging.log_file,
                  verbose=args.verbose or config.logging.verbose)
    logger.debug(f"Command line arguments: {args}")

    if _is_inline(args):
        if args.facts_files:
            parser.error("facts files cannot be combined with inline facts")
        return _resolve_inline(args)

    if not args.facts_files:
        parser.error("either facts files or inline facts (--type/--distro...) are required")

    format_name = args.format or config.output.default_format
    if format_name == 'excel' and not args.output:
        parser.error("--output is required for the excel format")

    loader = FactsLoader()
    facts = []
    for file_path in args.facts_files:
        try:
            facts.extend(loader.load(file_path))
        except (FileNotFoundError, FactsParseError) as e:
            print(f"Error: {e}", file=sys.stderr)
            return EXIT_USAGE

    on_insufficient_data = 'error' if args.strict else config.resolver.on_insufficient_data
    batch = BatchResolver(on_insufficient_data=on_insufficient_data)
    try:
        report = batch.resolve_all(facts, source_files=args.facts_files)
    except InsufficientDataError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_INSUFFICIENT_DATA

    reporter = get_reporter(format_name, config.output)
    try:
        content = reporter.generate_report(report, args.output)
    except ReportGenerationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_USAGE

    if not args.output or format_name == 'excel':
        print(content)

    return EXIT_INSUFFICIENT_DATA if report.has_insufficient_data else EXIT_OK


if __name__ == '__main__':
    sys.exit(main())
