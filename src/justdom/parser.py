"""Parse HTML into JustDOM trees with html5lib."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import html5lib
from html5lib.constants import E

from .context import FragmentContext
from .errors import ParseError, StrictModeError
from .treebuilder import TreeBuilder

if TYPE_CHECKING:
    from .node import SimpleDomNode
    from .predicates import Predicate

logger = logging.getLogger(__name__)


def _convert_error(error: tuple[Any, str, dict[str, Any] | None]) -> ParseError:
    position, code, datavars = error
    line, column = position if position else (None, None)
    template = E.get(code, code)
    try:
        message = template % (datavars or {})
    except (KeyError, TypeError, ValueError):
        message = template
    return ParseError(code, line=line, column=column, message=message)


class JustDOM:
    """A parsed document (or fragment) plus the diagnostics gathered while parsing it."""

    __slots__ = ("encoding", "errors", "fragment_context", "root")

    encoding: str | None
    errors: list[ParseError]
    fragment_context: FragmentContext | None
    root: SimpleDomNode

    def __init__(
        self,
        html: str | bytes | bytearray | memoryview | None,
        *,
        collect_errors: bool = False,
        encoding: str | None = None,
        fragment_context: FragmentContext | None = None,
        strict: bool = False,
    ) -> None:
        self.fragment_context = fragment_context
        self.encoding = None

        source: str | bytes
        if isinstance(html, (bytes, bytearray, memoryview)):
            source = bytes(html)
        elif html is not None:
            source = str(html)
        else:
            source = ""

        parser = html5lib.HTMLParser(tree=TreeBuilder)
        # html5lib refuses encoding hints for text input
        options: dict[str, Any] = {}
        if isinstance(source, bytes) and encoding:
            options["transport_encoding"] = encoding

        if fragment_context is not None:
            self.root = parser.parseFragment(source, container=fragment_context.tag_name, **options)
        else:
            self.root = parser.parse(source, **options)

        if isinstance(source, bytes):
            self.encoding = parser.documentEncoding

        # Enable error collection if strict mode is on
        should_collect = collect_errors or strict
        self.errors = [_convert_error(error) for error in parser.errors] if should_collect else []
        if parser.errors:
            logger.debug("Parser reported %d errors", len(parser.errors))

        # In strict mode, raise on first error
        if strict and self.errors:
            raise StrictModeError(self.errors[0])

    def query(self, predicate: Predicate) -> Any | None:
        """Return the first matching element. Delegates to root.query()."""
        return self.root.query(predicate)

    def query_all(self, predicate: Predicate) -> list[Any]:
        """Return every matching element. Delegates to root.query_all()."""
        return self.root.query_all(predicate)

    def to_html(self, pretty: bool = False, indent_size: int = 2) -> str:
        """Serialize the document to HTML. Delegates to root.to_html()."""
        return self.root.to_html(indent=0, indent_size=indent_size, pretty=pretty)

    def to_text(self, separator: str = " ", strip: bool = True) -> str:
        """Return the document's concatenated text.

        Delegates to `root.to_text(separator=..., strip=...)`.
        """
        return self.root.to_text(separator=separator, strip=strip)


def parse(html: str | bytes | None, **options: Any) -> SimpleDomNode:
    """Parse a complete document and return its `#document` node."""
    return JustDOM(html, **options).root


def parse_fragment(html: str | bytes | None, context: str = "div", **options: Any) -> SimpleDomNode:
    """Parse `html` as the contents of a `context` element; returns a `#document-fragment`."""
    return JustDOM(html, fragment_context=FragmentContext(context), **options).root
