"""Factories for building detached nodes by hand."""

from __future__ import annotations

from .node import ElementNode, SimpleDomNode, TemplateNode, TextNode


def text(value: str) -> TextNode:
    return TextNode(value)


def comment(data: str) -> SimpleDomNode:
    return SimpleDomNode("#comment", data=data)


def element(tag_name: str, namespace: str = "html") -> ElementNode:
    """Create an element with no attributes and no children.

    An HTML `template` gets an empty `template_content` fragment.
    """
    if tag_name == "template" and namespace == "html":
        return TemplateNode(tag_name, None, None, namespace)
    return ElementNode(tag_name, {}, namespace)


def fragment() -> SimpleDomNode:
    return SimpleDomNode("#document-fragment")


def document() -> SimpleDomNode:
    return SimpleDomNode("#document")
