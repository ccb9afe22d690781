"""Attribute and text accessors shared by predicates and node methods."""

from __future__ import annotations

from typing import Any

from .iteration import depth_first


def _find_attribute_name(node: Any, name: str) -> str | None:
    # Attribute names match case-insensitively; stored names keep their case.
    attrs: dict[str, str | None] | None = getattr(node, "attrs", None)
    if not attrs:
        return None
    if name in attrs:
        return name
    lowered = name.lower()
    for key in attrs:
        if key.lower() == lowered:
            return key
    return None


def has_attribute(node: Any, name: str) -> bool:
    """Return True iff `node` carries attribute `name`."""
    return _find_attribute_name(node, name) is not None


def get_attribute(node: Any, name: str) -> str | None:
    """Return the value of attribute `name`, or None when absent."""
    key = _find_attribute_name(node, name)
    if key is None:
        return None
    value: str | None = node.attrs[key]
    return value


def set_attribute(node: Any, name: str, value: str | None) -> None:
    """Set attribute `name`, reusing the stored spelling of an existing name."""
    key = _find_attribute_name(node, name)
    node.attrs[name if key is None else key] = value


def remove_attribute(node: Any, name: str) -> None:
    key = _find_attribute_name(node, name)
    if key is not None:
        del node.attrs[key]


def get_direct_text(node: Any) -> str:
    """Concatenate the text children of `node`, not descending further.

    Text nodes and comments return their own value.
    """
    name: str = node.name
    if name == "#text" or name == "#comment":
        return node.data or ""
    children: list[Any] | None = node.children
    if not children:
        return ""
    return "".join(child.data or "" for child in children if child.name == "#text")


def get_text_content(node: Any) -> str:
    """Return the text value of a node, like the DOM's `textContent`.

    Comments and text nodes return their own data; containers return the
    concatenation of every descendant text node, in document order.
    """
    name: str = node.name
    if name == "#text" or name == "#comment":
        return node.data or ""
    return "".join(descendant.data or "" for descendant in depth_first(node) if descendant.name == "#text")


def set_text_content(node: Any, value: str) -> None:
    """Set the text value of a node, like assigning the DOM's `textContent`.

    Containers have all children replaced by a single text node.
    """
    from .modification import append, remove
    from .node import TextNode

    name: str = node.name
    if name == "#text" or name == "#comment":
        node.data = value
        return
    for child in list(node.children):
        remove(child)
    append(node, TextNode(value))
