"""suffixdex CLI entry point.

Usage: uv run suffixdex [command]
"""
import argparse
import json
import logging
import sys
from pathlib import Path

from suffixdex.config import Settings
from suffixdex.rules.source import SuffixListError


def _add_cache_argument(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--cache-file", type=Path, default=None,
        help="Suffix list cache file (default: $SUFFIXDEX_CACHE_FILE or "
             "~/.cache/suffixdex/public_suffix_list.dat)",
    )


def _add_parse_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "parse",
        help="Split URLs or hostnames into subdomain, root and suffix.",
    )
    p.add_argument("inputs", nargs="+", metavar="URL")
    _add_cache_argument(p)
    p.add_argument(
        "--refresh", action="store_true",
        help="Download the suffix list even if a cached copy exists.",
    )
    p.add_argument(
        "--include-private", action="store_true", default=None,
        help="Treat private-section rules (blogspot.com, ...) as suffixes.",
    )
    p.add_argument(
        "--implicit-rule", action="store_true",
        help="Treat an unknown rightmost label as a suffix.",
    )
    p.add_argument(
        "--no-validate", action="store_true",
        help="Inputs are bare hostnames; skip scheme/port/path stripping.",
    )
    p.add_argument(
        "--no-strip", action="store_true",
        help="Keep a trailing .html on inputs.",
    )
    p.add_argument(
        "--json", action="store_true",
        help="Print one JSON object per input.",
    )


def _add_update_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "update",
        help="Download the suffix list and rewrite the cache.",
    )
    _add_cache_argument(p)


def _run_parse(args: argparse.Namespace) -> None:
    from suffixdex.extract.extractor import Extractor

    options = dict(
        validate=not args.no_validate,
        strip_html=not args.no_strip,
        implicit_rule=args.implicit_rule,
    )
    if args.include_private is not None:
        options["include_private"] = args.include_private

    extractor = Extractor.from_cache(args.cache_file, refresh=args.refresh, **options)
    for url in args.inputs:
        result = extractor.parse(url)
        if args.json:
            print(json.dumps(dict(input=url, **result.to_dict()), ensure_ascii=False))
        else:
            print(f"{result.subdomain}\t{result.root}\t{result.suffix}")


def _run_update(args: argparse.Namespace) -> None:
    from suffixdex.rules.parser import count_rules
    from suffixdex.rules.source import load_suffix_list

    settings = Settings.from_env()
    cache_file = args.cache_file or settings.cache_file
    text = load_suffix_list(
        cache_file,
        refresh=True,
        urls=settings.suffix_list_urls,
        timeout=settings.timeout,
    )
    print(f"{count_rules(text)} rules written to {cache_file}")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="suffixdex",
        description="Split hostnames on the Public Suffix List.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Log debug output to stderr.",
    )
    subparsers = parser.add_subparsers(dest="command")

    _add_parse_parser(subparsers)
    _add_update_parser(subparsers)

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s:%(name)s:%(message)s",
    )
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    try:
        if args.command == "parse":
            _run_parse(args)
        elif args.command == "update":
            _run_update(args)
    except SuffixListError as exc:
        print(f"suffixdex: {exc}", file=sys.stderr)
        sys.exit(1)
