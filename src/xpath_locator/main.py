"""
Locator CLI Entry Point

Resolves frame-aware XPaths against saved HTML pages and prints the XPaths
built by the attribute predicate generators.

Usage:
    xpath-locator resolve page.html '//iframe[@name="editor"]/content://p'
    xpath-locator resolve page.html '//a' --json
    xpath-locator build class button --variant c --context //div
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from lxml import etree

from xpath_locator.config import ResolverConfig, configure_logging
from xpath_locator.errors import XPathEvaluationError
from xpath_locator.hosts.lxml_host import HtmlDocument, LxmlHost, file_loader
from xpath_locator.locators import ATTRIBUTE_FUNCTIONS, VARIANT_NAMES, make_attribute_function
from xpath_locator.records import MatchRecord
from xpath_locator.resolver import CollectingReporter, FrameAwareResolver
from xpath_locator.tui import (
    LocatorConsole,
    get_console,
    print_diagnostics,
    print_error,
    print_expression,
    print_matches,
)

EXIT_MATCHED = 0
EXIT_NO_MATCH = 1
EXIT_ERROR = 2


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="xpath-locator",
        description="Resolve frame-aware XPath locators and build attribute predicates",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    xpath-locator resolve page.html '//iframe/content://h1'
    xpath-locator resolve page.html 'id("main")//a' --json
    xpath-locator build id submit --variant i
        """,
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Show debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    resolve_parser = subparsers.add_parser("resolve", help="Resolve an XPath against an HTML file")
    resolve_parser.add_argument("file", help="HTML file; frame src paths are read relative to it")
    resolve_parser.add_argument("xpath", help="XPath, optionally with '/content:' frame annotations")
    resolve_parser.add_argument(
        "--json",
        action="store_true",
        help="Print matches as JSON instead of a table",
    )
    resolve_parser.add_argument(
        "--max-depth",
        type=int,
        default=None,
        help="Maximum number of frame hops (default: XPATH_MAX_FRAME_DEPTH or 32)",
    )

    build_parser = subparsers.add_parser("build", help="Print an attribute predicate XPath")
    build_parser.add_argument(
        "key",
        help=f"Attribute shortcut ({', '.join(ATTRIBUTE_FUNCTIONS)}) or a raw key such as @data-test",
    )
    build_parser.add_argument("value", nargs="?", default=None, help="Value to match (omit for existence)")
    build_parser.add_argument(
        "--variant",
        choices=VARIANT_NAMES,
        default="plain",
        help="i: ignore case, c: contains, n: negate, or a combination (default: plain)",
    )
    build_parser.add_argument("--context", default=None, help="Context path (default: //*)")

    return parser.parse_args(argv)


def run_resolve(
    file: str,
    xpath: str,
    *,
    as_json: bool = False,
    max_depth: Optional[int] = None,
    console: Optional[LocatorConsole] = None,
) -> int:
    """
    Resolve an XPath against an HTML file and print the matches.

    Returns:
        Exit status: 0 if anything matched, 1 if nothing, 2 on error
    """
    console = console or get_console()
    path = Path(file)
    if not path.is_file():
        print_error(f"File not found: {file}", error_type="Input", console=console)
        return EXIT_ERROR

    # pydantic's ValidationError is a ValueError
    try:
        config = ResolverConfig.from_env()
        if max_depth is not None:
            config = ResolverConfig(max_frame_depth=max_depth, ambient_global=config.ambient_global)
    except ValueError as e:
        print_error(f"Invalid resolver configuration: {e}", error_type="Input", console=console)
        return EXIT_ERROR

    try:
        document = HtmlDocument.from_file(path)
    except (OSError, etree.ParserError) as e:
        print_error(f"Cannot read {file}: {e}", error_type="Input", console=console)
        return EXIT_ERROR

    reporter = CollectingReporter()
    resolver = FrameAwareResolver(
        LxmlHost(loader=file_loader(path.parent)),
        reporter=reporter,
        config=config,
    )

    try:
        matches = resolver.resolve(xpath, document)
        records = [MatchRecord.from_node(index, node) for index, node in enumerate(matches, start=1)]
    except XPathEvaluationError as e:
        print_error(str(e), error_type="XPath", console=console)
        return EXIT_ERROR

    if as_json:
        sys.stdout.write(json.dumps([record.model_dump() for record in records], indent=2) + "\n")
        for message in reporter.messages:
            sys.stderr.write(f"{message}\n")
    else:
        print_matches(records, xpath=xpath, console=console)
        print_diagnostics(reporter.messages, console=console)

    return EXIT_MATCHED if records else EXIT_NO_MATCH


def run_build(
    key: str,
    value: Optional[str],
    *,
    variant: str = "plain",
    context: Optional[str] = None,
    console: Optional[LocatorConsole] = None,
) -> int:
    """
    Print the XPath an attribute predicate generator builds.

    Returns:
        Exit status: 0 on success, 2 if the variant needs a missing value
    """
    console = console or get_console()
    generators = ATTRIBUTE_FUNCTIONS.get(key) or make_attribute_function(key)

    try:
        expression = getattr(generators, variant)(value, context)
    except ValueError as e:
        print_error(str(e), error_type="Input", console=console)
        return EXIT_ERROR

    print_expression(expression, console=console)
    return EXIT_MATCHED


def main(argv: Optional[Sequence[str]] = None, console: Optional[LocatorConsole] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    configure_logging(level=logging.DEBUG if args.verbose else None, verbose=args.verbose)

    if args.command == "resolve":
        return run_resolve(
            args.file,
            args.xpath,
            as_json=args.json,
            max_depth=args.max_depth,
            console=console,
        )
    return run_build(
        args.key,
        args.value,
        variant=args.variant,
        context=args.context,
        console=console,
    )


if __name__ == "__main__":
    sys.exit(main())
