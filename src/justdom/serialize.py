"""HTML serialization utilities for JustDOM nodes."""

from __future__ import annotations

# ruff: noqa: PERF401

from typing import Any

from .constants import RAWTEXT_ELEMENTS, VOID_ELEMENTS


def _escape_text(text: str | None) -> str:
    if not text:
        return ""
    return str(text).replace("&", "&amp;").replace("\xa0", "&nbsp;").replace("<", "&lt;").replace(">", "&gt;")


def _choose_attr_quote(value: str | None) -> str:
    if value is None:
        return '"'
    value = str(value)
    if '"' in value and "'" not in value:
        return "'"
    return '"'


def _escape_attr_value(value: str | None, quote_char: str) -> str:
    if value is None:
        return ""
    value = str(value)
    value = value.replace("&", "&amp;").replace("\xa0", "&nbsp;")
    if quote_char == '"':
        return value.replace('"', "&quot;")
    return value.replace("'", "&#39;")


def serialize_start_tag(name: str, attrs: dict[str, str | None] | None) -> str:
    attrs = attrs or {}
    parts: list[str] = ["<", name]
    if attrs:
        for key, value in attrs.items():
            if value is None:
                parts.extend([" ", key])
            else:
                quote = _choose_attr_quote(value)
                escaped = _escape_attr_value(value, quote)
                parts.extend([" ", key, "=", quote, escaped, quote])
    parts.append(">")
    return "".join(parts)


def serialize_end_tag(name: str) -> str:
    return f"</{name}>"


def _child_list(node: Any) -> list[Any]:
    # Template bodies are serialized from their content fragment.
    content = getattr(node, "template_content", None)
    if content is not None:
        children: list[Any] = content.children or []
        return children
    return node.children or []


def serialize(node: Any) -> str:
    """Serialize the children of `node` (its inner HTML) without formatting."""
    return "".join(_node_to_html(child, 0, 0, False, _is_rawtext(node)) for child in _child_list(node))


def to_html(node: Any, indent: int = 0, indent_size: int = 2, *, pretty: bool = False) -> str:
    """Convert node to HTML string.

    With `pretty=False` (the default) the output round-trips through the
    parser; `pretty=True` indents nested elements and strips text.
    """
    if node.name == "#document":
        # Document root - just render children
        parts: list[str] = []
        for child in node.children or []:
            child_html = _node_to_html(child, indent, indent_size, pretty)
            if child_html or not pretty:
                parts.append(child_html)
        return "\n".join(parts) if pretty else "".join(parts)
    return _node_to_html(node, indent, indent_size, pretty)


def _is_rawtext(node: Any) -> bool:
    return node.name in RAWTEXT_ELEMENTS and node.namespace in {None, "html"}


def _node_to_html(
    node: Any,
    indent: int = 0,
    indent_size: int = 2,
    pretty: bool = False,
    in_rawtext: bool = False,
) -> str:
    """Helper to convert a node to HTML."""
    prefix = " " * (indent * indent_size) if pretty else ""
    newline = "\n" if pretty else ""
    name: str = node.name

    # Text node
    if name == "#text":
        text: str | None = node.data
        if in_rawtext:
            return f"{prefix}{text}" if text else ""
        if pretty:
            text = text.strip() if text else ""
            if text:
                return f"{prefix}{_escape_text(text)}"
            return ""
        return _escape_text(text) if text else ""

    # Comment node
    if name == "#comment":
        return f"{prefix}<!--{node.data or ''}-->"

    # Doctype
    if name == "!doctype":
        return f"{prefix}<!DOCTYPE {node.data or 'html'}>"

    # Document fragment
    if name == "#document-fragment":
        parts: list[str] = []
        for child in node.children or []:
            child_html = _node_to_html(child, indent, indent_size, pretty)
            if child_html:
                parts.append(child_html)
        return newline.join(parts) if pretty else "".join(parts)

    # Element node
    attrs: dict[str, str | None] = node.attrs or {}

    # Build opening tag
    open_tag = serialize_start_tag(name, attrs)

    # Void elements
    if name in VOID_ELEMENTS:
        return f"{prefix}{open_tag}"

    # Elements with children
    children = _child_list(node)
    if not children:
        return f"{prefix}{open_tag}{serialize_end_tag(name)}"

    rawtext = _is_rawtext(node)

    # Check if all children are text-only (inline rendering)
    all_text = all(c.name == "#text" for c in children)

    if (all_text and pretty) or not pretty:
        inner = "".join(_node_to_html(child, 0, 0, False, rawtext) for child in children)
        return f"{prefix}{open_tag}{inner}{serialize_end_tag(name)}"

    # Render with child indentation
    parts = [f"{prefix}{open_tag}"]
    for child in children:
        child_html = _node_to_html(child, indent + 1, indent_size, pretty, rawtext)
        if child_html:
            parts.append(child_html)
    parts.append(f"{prefix}{serialize_end_tag(name)}")
    return newline.join(parts)
