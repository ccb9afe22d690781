"""An html5lib tree builder that produces JustDOM nodes.

html5lib drives tree construction through adapter objects; each adapter
wraps one JustDOM node and forwards structural changes to the mutation
functions, so parsed trees satisfy the same invariants as edited ones.
"""

from __future__ import annotations

from typing import Any

from html5lib.constants import namespaces
from html5lib.treebuilders import base

from .constants import NAMESPACE_PREFIXES
from .modification import append, insert_before, remove
from .node import ElementNode, SimpleDomNode, TemplateNode, TextNode
from .predicates import is_text_node


def _attribute_name(key: Any) -> str:
    # Adjusted foreign attributes arrive as (prefix, local name, namespace).
    if isinstance(key, tuple):
        prefix, local = key[0], key[1]
        return f"{prefix}:{local}" if prefix else str(local)
    return str(key)


class NodeAdapter(base.Node):
    """Presents a JustDOM node through html5lib's tree builder interface."""

    def __init__(self, node: Any, builder: TreeBuilder, namespace: str | None = None) -> None:
        # base.Node.__init__ is not called: it would reset the wrapped node's attributes.
        self.node = node
        self.builder = builder
        self.name = node.name
        self.namespace = namespace
        self.value = None
        self.childNodes = []
        self._flags = []
        builder.register(node, self)

    @property
    def parent(self) -> NodeAdapter | None:
        parent = self.node.parent
        if parent is None:
            return None
        return self.builder.adapter_for(parent)

    @parent.setter
    def parent(self, value: NodeAdapter | None) -> None:
        # Derived from the wrapped node's back-reference.
        pass

    @property
    def attributes(self) -> dict[str, str | None]:
        attrs: dict[str, str | None] | None = self.node.attrs
        return attrs if attrs is not None else {}

    @attributes.setter
    def attributes(self, attributes: dict[Any, str | None]) -> None:
        if self.node.attrs is None:
            return
        self.node.attrs = {_attribute_name(key): value for key, value in attributes.items()}

    @property
    def nameTuple(self) -> tuple[str, str]:  # noqa: N802
        return (self.namespace or namespaces["html"], self.name)

    @property
    def container(self) -> Any:
        # Template children are parsed into the template's content fragment.
        content = getattr(self.node, "template_content", None)
        return content if content is not None else self.node

    def appendChild(self, node: NodeAdapter) -> None:  # noqa: N802
        append(self.container, node.node)

    def insertText(self, data: str, insertBefore: NodeAdapter | None = None) -> None:  # noqa: N802, N803
        container = self.container
        children: list[Any] = container.children
        if insertBefore is None:
            if children and is_text_node(children[-1]):
                children[-1].data += data
            else:
                append(container, TextNode(data))
            return

        index = children.index(insertBefore.node)
        if index > 0 and is_text_node(children[index - 1]):
            children[index - 1].data += data
        else:
            insert_before(container, insertBefore.node, TextNode(data))

    def insertBefore(self, node: NodeAdapter, refNode: NodeAdapter) -> None:  # noqa: N802, N803
        insert_before(self.container, refNode.node, node.node)

    def removeChild(self, node: NodeAdapter) -> None:  # noqa: N802
        if node.node.parent is self.container:
            remove(node.node)

    def reparentChildren(self, newParent: NodeAdapter) -> None:  # noqa: N802, N803
        target = newParent.container
        for child in list(self.container.children):
            append(target, child)
        self.childNodes = []

    def cloneNode(self) -> NodeAdapter:  # noqa: N802
        clone = self.builder.elementClass(self.name, self.namespace)
        clone.attributes = dict(self.attributes)
        return clone

    def hasContent(self) -> bool:  # noqa: N802
        return bool(self.container.children)


class TreeBuilder(base.TreeBuilder):
    """Build JustDOM trees; pass the class as html5lib's `tree` argument."""

    _adapters: dict[int, NodeAdapter]

    def reset(self) -> None:
        self._adapters = {}
        super().reset()

    def register(self, node: Any, adapter: NodeAdapter) -> None:
        self._adapters[id(node)] = adapter
        content = getattr(node, "template_content", None)
        if content is not None:
            self._adapters[id(content)] = adapter

    def adapter_for(self, node: Any) -> NodeAdapter | None:
        return self._adapters.get(id(node))

    def documentClass(self) -> NodeAdapter:  # noqa: N802
        return NodeAdapter(SimpleDomNode("#document"), self)

    def doctypeClass(self, name: str | None, publicId: str | None, systemId: str | None) -> NodeAdapter:  # noqa: N802, N803, ARG002
        return NodeAdapter(SimpleDomNode("!doctype", data=name), self)

    def elementClass(self, name: str, namespace: str | None = None) -> NodeAdapter:  # noqa: N802
        prefix = NAMESPACE_PREFIXES.get(namespace, namespace) if namespace else "html"
        node: ElementNode
        if name == "template" and prefix == "html":
            node = TemplateNode(name, None, None, prefix)
        else:
            node = ElementNode(name, {}, prefix)
        return NodeAdapter(node, self, namespace)

    def commentClass(self, data: str) -> NodeAdapter:  # noqa: N802
        return NodeAdapter(SimpleDomNode("#comment", data=data), self)

    def fragmentClass(self) -> NodeAdapter:  # noqa: N802
        return NodeAdapter(SimpleDomNode("#document-fragment"), self)

    def getDocument(self) -> SimpleDomNode:  # noqa: N802
        document: SimpleDomNode = self.document.node
        return document

    def getFragment(self) -> SimpleDomNode:  # noqa: N802
        fragment: SimpleDomNode = base.TreeBuilder.getFragment(self).node
        return fragment
