"""Lazy traversals over a node tree.

Every traversal is a generator: calling it again starts from scratch, and a
consumer that stops pulling simply abandons it. The tree must be acyclic and
must not be mutated while a traversal over it is still being consumed.

Traversals use explicit stacks rather than recursive generators, so the
depth of a tree is not limited by the interpreter's recursion limit.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any

from .errors import TreeInconsistencyError

# Maps a node to its ordered children, or None when it has no children list
GetChildNodes = Callable[[Any], list[Any] | None]


def default_child_nodes(node: Any) -> list[Any] | None:
    """Return the node's own children; template contents stay opaque."""
    children: list[Any] | None = node.children
    return children


def child_nodes_include_template(node: Any) -> list[Any] | None:
    """Like `default_child_nodes`, but a template yields its content's children."""
    content = getattr(node, "template_content", None)
    if content is not None and node.name == "template":
        children: list[Any] | None = content.children
        return children
    return default_child_nodes(node)


_EXHAUSTED = object()


def _reversed_children(node: Any, get_child_nodes: GetChildNodes) -> Iterator[Any]:
    child_nodes = get_child_nodes(node)
    if not child_nodes:
        return iter(())
    return reversed(child_nodes)


def depth_first(node: Any, get_child_nodes: GetChildNodes = default_child_nodes) -> Iterator[Any]:
    """
    Iterate over `node` and all of its descendants in document order.

    Yields `node` first, then each child's subtree in child order (preorder).
    """
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        child_nodes = get_child_nodes(current)
        if child_nodes:
            stack.extend(reversed(child_nodes))


def depth_first_reversed(node: Any, get_child_nodes: GetChildNodes = default_child_nodes) -> Iterator[Any]:
    """
    Iterate over the subtree of `node` in reverse-postorder.

    Each child's subtree is yielded in reverse child order, and `node` itself
    comes last. The result is exactly `depth_first(node)` backwards.
    """
    stack: list[tuple[Any, Iterator[Any]]] = [(node, _reversed_children(node, get_child_nodes))]
    while stack:
        current, pending = stack[-1]
        child = next(pending, _EXHAUSTED)
        if child is _EXHAUSTED:
            stack.pop()
            yield current
        else:
            stack.append((child, _reversed_children(child, get_child_nodes)))


def depth_first_including_templates(node: Any) -> Iterator[Any]:
    """Like `depth_first`, but descends into the bodies of `<template>`s."""
    return depth_first(node, child_nodes_include_template)


def ancestors(node: Any) -> Iterator[Any]:
    """Yield `node` and then each of its ancestors up to the root."""
    current: Any | None = node
    while current is not None:
        yield current
        current = current.parent


def previous_siblings(node: Any) -> Iterator[Any]:
    """
    Yield each node with the same parent as `node` that comes before it.

    Siblings are yielded nearest first. A parentless node has none.

    Raises:
        TreeInconsistencyError: If the parent does not list `node` as a child
    """
    parent = node.parent
    if parent is None:
        return
    siblings: list[Any] | None = parent.children
    if siblings is None:
        raise TreeInconsistencyError("parent-missing-children", node)
    try:
        index = siblings.index(node)
    except ValueError:
        raise TreeInconsistencyError("parent-missing-child", node) from None
    for i in range(index - 1, -1, -1):
        yield siblings[i]


def prior(node: Any) -> Iterator[Any]:
    """
    Yield every node that precedes `node` in document order, nearest first.

    For each level: the subtrees of earlier siblings (reverse-postorder,
    nearest sibling first), then the parent, then the parent's own priors.
    """
    current = node
    while True:
        for sibling in previous_siblings(current):
            yield from depth_first_reversed(sibling)
        parent = current.parent
        if parent is None:
            return
        yield parent
        current = parent


def prior_including_node(node: Any) -> Iterator[Any]:
    yield node
    yield from prior(node)


def tree_map(
    node: Any,
    mapfn: Callable[[Any], Iterable[Any]],
    get_child_nodes: GetChildNodes = default_child_nodes,
) -> Iterator[Any]:
    """
    Apply `mapfn` to `node` and the tree below it, yielding a flattened
    stream of results in depth-first visitation order.
    """
    for descendant in depth_first(node, get_child_nodes):
        yield from mapfn(descendant)
