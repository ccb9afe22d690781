from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .errors import TreeInconsistencyError
from .iteration import child_nodes_include_template, depth_first
from .modification import append, clone_node, insert_before, normalize, remove, replace
from .predicates import is_text_node
from .serialize import to_html
from .util import get_attribute, has_attribute, remove_attribute, set_attribute
from .walking import query, query_all

if TYPE_CHECKING:
    from .predicates import Predicate


def _to_text(node: Any, separator: str, strip: bool) -> str:
    parts: list[str] = []
    for descendant in depth_first(node, child_nodes_include_template):
        if not is_text_node(descendant):
            continue
        data: str | None = descendant.data
        if not data:
            continue
        if strip:
            data = data.strip()
            if not data:
                continue
        parts.append(data)
    return separator.join(parts)


class SimpleDomNode:
    """Documents, document fragments, comments and doctypes.

    Comments and doctypes carry their payload in `data` and have no children
    list (`children is None`), which is distinct from an empty one.
    """

    __slots__ = ("attrs", "children", "data", "name", "namespace", "parent")

    name: str
    parent: SimpleDomNode | ElementNode | TemplateNode | None
    attrs: dict[str, str | None] | None
    children: list[Any] | None
    data: str | None
    namespace: str | None

    def __init__(
        self,
        name: str,
        attrs: dict[str, str | None] | None = None,
        data: str | None = None,
        namespace: str | None = None,
    ) -> None:
        self.name = name
        self.parent = None
        self.data = data

        if name.startswith("#") or name == "!doctype":
            self.namespace = namespace
            if name == "#comment" or name == "!doctype":
                self.children = None
                self.attrs = None
            else:
                self.children = []
                self.attrs = attrs if attrs is not None else {}
        else:
            self.namespace = namespace or "html"
            self.children = []
            self.attrs = attrs if attrs is not None else {}

    def __repr__(self) -> str:
        if self.children is None:
            return f"<{type(self).__name__} {self.name} {self.data!r}>"
        return f"<{type(self).__name__} {self.name} children={len(self.children)}>"

    def append_child(self, node: Any) -> None:
        """Append `node` (or a fragment's children) as the last child."""
        append(self, node)

    def insert_before(self, node: Any, reference_node: Any | None) -> None:
        """
        Insert a node before a reference node.

        Args:
            node: The node to insert
            reference_node: The node to insert before. If None, append to end.

        Raises:
            TreeInconsistencyError: If reference_node is not a child of this node
            HierarchyRequestError: If this node cannot have children
        """
        insert_before(self, reference_node, node)

    def replace_child(self, new_node: Any, old_node: Any) -> Any:
        """
        Replace a child node with a new node.

        Args:
            new_node: The new node to insert
            old_node: The child node to replace

        Returns:
            The replaced node (old_node)

        Raises:
            TreeInconsistencyError: If old_node is not a child of this node
        """
        if old_node.parent is not self:
            raise TreeInconsistencyError("reference-not-a-child", old_node)
        return replace(old_node, new_node)

    def remove_child(self, node: Any) -> Any:
        """Detach a child of this node and return it."""
        if node.parent is not self:
            raise TreeInconsistencyError("reference-not-a-child", node)
        remove(node)
        return node

    def remove(self) -> None:
        """Detach this node from its parent. No-op on a parentless node."""
        remove(self)

    def has_child_nodes(self) -> bool:
        """Return True if this node has children."""
        return bool(self.children)

    def clone_node(self, deep: bool = False) -> SimpleDomNode:
        """
        Clone this node.

        Args:
            deep: If True, the whole subtree is copied.

        Returns:
            A new parentless node.
        """
        if deep:
            result: SimpleDomNode = clone_node(self)
            return result
        return SimpleDomNode(
            self.name,
            self.attrs.copy() if self.attrs else None,
            self.data,
            self.namespace,
        )

    def query(self, predicate: Predicate) -> Any | None:
        """Return the first element in this subtree matching `predicate`."""
        return query(self, predicate)

    def query_all(self, predicate: Predicate) -> list[Any]:
        """Return every element in this subtree matching `predicate`."""
        return query_all(self, predicate)

    def normalize(self) -> None:
        """Merge adjacent text node children throughout this subtree."""
        normalize(self)

    @property
    def text(self) -> str:
        """Return the node's own text value.

        For comments this is the comment data. For other nodes this is an
        empty string. Use `to_text()` to get the text of descendants.
        """
        if self.name == "#comment":
            return self.data or ""
        return ""

    def to_text(self, separator: str = " ", strip: bool = True) -> str:
        """Return the concatenated text of this node's descendants.

        - `separator` controls how text nodes are joined (default: a single space).
        - `strip=True` strips each text node and drops empty segments.

        Template element contents are included.
        """
        return _to_text(self, separator, strip)

    def to_html(self, indent: int = 0, indent_size: int = 2, pretty: bool = False) -> str:
        """Convert node to HTML string."""
        return to_html(self, indent, indent_size, pretty=pretty)


class ElementNode(SimpleDomNode):
    __slots__ = ("template_content",)

    template_content: SimpleDomNode | None
    children: list[Any]
    attrs: dict[str, str | None]

    def __init__(self, name: str, attrs: dict[str, str | None] | None, namespace: str | None) -> None:
        self.name = name
        self.parent = None
        self.data = None
        self.namespace = namespace
        self.children = []
        self.attrs = attrs if attrs is not None else {}
        self.template_content = None

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name} attrs={self.attrs!r} children={len(self.children)}>"

    def get_attribute(self, name: str) -> str | None:
        return get_attribute(self, name)

    def has_attribute(self, name: str) -> bool:
        return has_attribute(self, name)

    def set_attribute(self, name: str, value: str | None) -> None:
        set_attribute(self, name, value)

    def remove_attribute(self, name: str) -> None:
        remove_attribute(self, name)

    def clone_node(self, deep: bool = False) -> ElementNode:
        if deep:
            result: ElementNode = clone_node(self)
            return result
        return ElementNode(self.name, self.attrs.copy() if self.attrs else {}, self.namespace)


class TemplateNode(ElementNode):
    """An HTML `<template>`; its parsed children live in `template_content`."""

    __slots__ = ()

    def __init__(
        self,
        name: str,
        attrs: dict[str, str | None] | None = None,
        data: str | None = None,  # noqa: ARG002
        namespace: str | None = None,
    ) -> None:
        super().__init__(name, attrs, namespace)
        if self.namespace == "html":
            self.template_content = SimpleDomNode("#document-fragment")
        else:
            self.template_content = None

    def clone_node(self, deep: bool = False) -> TemplateNode:
        if deep:
            result: TemplateNode = clone_node(self)
            return result
        return TemplateNode(
            self.name,
            self.attrs.copy() if self.attrs else {},
            None,
            self.namespace,
        )


class TextNode:
    __slots__ = ("data", "name", "namespace", "parent")

    data: str | None
    name: str
    namespace: None
    parent: SimpleDomNode | ElementNode | TemplateNode | None

    # Leaf: no children list at all
    children: None = None
    attrs: None = None

    def __init__(self, data: str | None) -> None:
        self.data = data
        self.parent = None
        self.name = "#text"
        self.namespace = None

    def __repr__(self) -> str:
        return f"<TextNode {(self.data or '')[:30]!r}>"

    @property
    def text(self) -> str:
        """Return the text content of this node."""
        return self.data or ""

    def to_text(self, separator: str = " ", strip: bool = True) -> str:  # noqa: ARG002
        # Parameters are accepted for API consistency; they don't affect leaf nodes.
        if self.data is None:
            return ""
        if strip:
            return self.data.strip()
        return self.data

    def to_html(self, indent: int = 0, indent_size: int = 2, pretty: bool = False) -> str:
        return to_html(self, indent, indent_size, pretty=pretty)

    def remove(self) -> None:
        remove(self)

    def has_child_nodes(self) -> bool:
        """Return False for TextNode."""
        return False

    def clone_node(self, deep: bool = False) -> TextNode:  # noqa: ARG002
        return TextNode(self.data)
