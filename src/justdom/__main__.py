#!/usr/bin/env python3
"""Command-line interface for JustDOM."""

from __future__ import annotations

import argparse
import logging
import sys
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import NoReturn

from . import JustDOM, predicates
from .iteration import child_nodes_include_template, default_child_nodes
from .walking import query_all


def _get_version() -> str:
    try:
        return version("justdom")
    except PackageNotFoundError:  # pragma: no cover
        return "dev"


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="justdom",
        description="Parse HTML5 and print the elements matching every given filter.",
        epilog=(
            "Examples:\n"
            "  justdom page.html --tag a --attr href\n"
            "  curl -s https://example.com | justdom - --class nav --format text\n"
            "  justdom page.html --tag td --include-templates --first\n"
            "\n"
            "If you don't have the 'justdom' command available, use:\n"
            "  python -m justdom ...\n"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "path",
        nargs="?",
        help="HTML file to parse, or '-' to read from stdin",
    )
    parser.add_argument(
        "--tag",
        help="Match elements with this tag name (case-insensitive)",
    )
    parser.add_argument(
        "--class",
        dest="class_name",
        help="Match elements whose class list contains this name",
    )
    parser.add_argument(
        "--attr",
        action="append",
        default=[],
        metavar="NAME[=VALUE]",
        help="Match elements carrying attribute NAME, optionally equal to VALUE (repeatable)",
    )
    parser.add_argument(
        "--format",
        choices=["html", "text"],
        default="html",
        help="Output format (default: html)",
    )
    parser.add_argument(
        "--first",
        action="store_true",
        help="Only output the first matching element",
    )
    parser.add_argument(
        "--normalize",
        action="store_true",
        help="Merge adjacent text nodes before querying",
    )
    parser.add_argument(
        "--include-templates",
        action="store_true",
        help="Also search inside <template> contents",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log tree operations to stderr",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"justdom {_get_version()}",
    )

    args = parser.parse_args(argv)

    if not args.path:
        parser.print_help(sys.stderr)
        raise SystemExit(1)

    return args


def _read_html(path: str) -> str:
    if path == "-":
        return sys.stdin.read()

    return Path(path).read_text()


def _build_predicate(args: argparse.Namespace) -> predicates.Predicate:
    rules: list[predicates.Predicate] = []
    if args.tag:
        rules.append(predicates.has_tag_name(args.tag))
    if args.class_name:
        rules.append(predicates.has_class(args.class_name))
    for option in args.attr:
        name, sep, value = option.partition("=")
        if sep:
            rules.append(predicates.has_attr_value(name, value))
        else:
            rules.append(predicates.has_attr(name))
    return predicates.AND(*rules)


def main() -> NoReturn | None:
    args = _parse_args(sys.argv[1:])
    if args.debug:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)

    html = _read_html(args.path)
    doc = JustDOM(html)
    if args.normalize:
        doc.root.normalize()

    get_child_nodes = child_nodes_include_template if args.include_templates else default_child_nodes
    nodes = query_all(doc.root, _build_predicate(args), get_child_nodes=get_child_nodes)

    if not nodes:
        raise SystemExit(1)

    if args.first:
        nodes = [nodes[0]]

    if args.format == "html":
        outputs = [node.to_html() for node in nodes]
    else:
        outputs = [node.to_text() for node in nodes]
    sys.stdout.write("\n".join(outputs))
    sys.stdout.write("\n")
    return None


if __name__ == "__main__":
    main()
