# Composable node matchers for JustDOM
# A predicate is any callable taking a node and returning a bool

from __future__ import annotations

import re
from collections.abc import Callable
from typing import Any

from .constants import ASCII_WHITESPACE
from .iteration import ancestors
from .util import get_attribute, get_direct_text, get_text_content, has_attribute

Predicate = Callable[[Any], bool]

_WHITESPACE_RE = re.compile(f"[{re.escape(ASCII_WHITESPACE)}]+")


def is_document(node: Any) -> bool:
    return node.name == "#document"


def is_document_fragment(node: Any) -> bool:
    return node.name == "#document-fragment"


def is_element(node: Any) -> bool:
    name: str = node.name
    return not name.startswith("#") and name != "!doctype"


def is_text_node(node: Any) -> bool:
    return node.name == "#text"


def is_comment_node(node: Any) -> bool:
    return node.name == "#comment"


def AND(*predicates: Predicate) -> Predicate:  # noqa: N802
    """AND a group of predicates; stops at the first one that fails."""

    def predicate(node: Any) -> bool:
        return all(rule(node) for rule in predicates)

    return predicate


def OR(*predicates: Predicate) -> Predicate:  # noqa: N802
    """OR a group of predicates; stops at the first one that succeeds."""

    def predicate(node: Any) -> bool:
        return any(rule(node) for rule in predicates)

    return predicate


def NOT(predicate_fn: Predicate) -> Predicate:  # noqa: N802
    """Negate an individual predicate, or a group made with AND or OR."""

    def predicate(node: Any) -> bool:
        return not predicate_fn(node)

    return predicate


def parent_matches(predicate_fn: Predicate) -> Predicate:
    """Match any node that has a strict ancestor matching `predicate_fn`."""

    def predicate(node: Any) -> bool:
        walk = ancestors(node)
        next(walk)  # the node itself
        return any(predicate_fn(ancestor) for ancestor in walk)

    return predicate


def has_tag_name(name: str) -> Predicate:
    """Match elements named `name`; HTML tag names are case-insensitive."""
    lowered = name.lower()

    def predicate(node: Any) -> bool:
        if not is_element(node):
            return False
        return bool(node.name.lower() == lowered)

    return predicate


def has_matching_tag_name(regex: re.Pattern[str] | str) -> Predicate:
    """
    Match elements whose lower-cased tag name is found by `regex`.

    Args:
        regex: A compiled pattern or a pattern string. The pattern is searched,
            not anchored: use `^` and `$` for a full match.
    """
    pattern = re.compile(regex) if isinstance(regex, str) else regex

    def predicate(node: Any) -> bool:
        if not is_element(node):
            return False
        return pattern.search(node.name.lower()) is not None

    return predicate


def has_attr(attr: str) -> Predicate:
    def predicate(node: Any) -> bool:
        return has_attribute(node, attr)

    return predicate


def has_attr_value(attr: str, value: str) -> Predicate:
    def predicate(node: Any) -> bool:
        return get_attribute(node, attr) == value

    return predicate


def has_space_separated_attr_value(attr: str, value: str) -> Predicate:
    """Match when `value` is one of the whitespace-separated words of `attr`."""

    def predicate(node: Any) -> bool:
        attr_value = get_attribute(node, attr)
        if not attr_value:
            return False
        return value in _WHITESPACE_RE.split(attr_value.strip(ASCII_WHITESPACE))

    return predicate


def has_class(name: str) -> Predicate:
    return has_space_separated_attr_value("class", name)


def has_direct_text_value(value: str) -> Predicate:
    """
    Match text nodes and comments whose own value is `value`, and containers
    whose direct text children concatenate to `value`.

    Text inside descendant elements does not count.
    """

    def predicate(node: Any) -> bool:
        return get_direct_text(node) == value

    return predicate


def has_text_content_value(value: str) -> Predicate:
    """
    Match nodes whose full text content (every descendant text node) equals
    `value`.

    Note: query_all with this predicate may return a text node and every
    ancestor whose only text is that node.
    """

    def predicate(node: Any) -> bool:
        return get_text_content(node) == value

    return predicate


has_text_value = has_direct_text_value
