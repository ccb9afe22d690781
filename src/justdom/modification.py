"""Structural edits that keep parent back-references consistent.

Every insertion funnels through `insert_node`. Inserting a document fragment
moves its children into the target and leaves the fragment empty; inserting
any other node first detaches it from its current parent, so each node has
at most one owner at all times.
"""

from __future__ import annotations

import copy
import logging
from typing import Any

from .errors import HierarchyRequestError, TreeInconsistencyError
from .iteration import ancestors
from .predicates import is_document, is_document_fragment, is_element, is_text_node

logger = logging.getLogger(__name__)


def _children_of(parent: Any) -> list[Any]:
    children: list[Any] | None = parent.children
    if children is None:
        raise HierarchyRequestError("node-cannot-have-children", parent)
    return children


def _index_in_parent(node: Any) -> int:
    parent = node.parent
    siblings: list[Any] | None = parent.children
    if siblings is None:
        raise TreeInconsistencyError("parent-missing-children", node)
    try:
        return siblings.index(node)
    except ValueError:
        raise TreeInconsistencyError("parent-missing-child", node) from None


def _take_fragment_children(fragment: Any) -> list[Any]:
    # The fragment is consumed: its children move to the new parent.
    moved: list[Any] = fragment.children
    fragment.children = []
    if moved:
        logger.debug("Splicing %d fragment children", len(moved))
    return moved


def insert_node(parent: Any, index: int, new_node: Any | None, replace: bool = False) -> Any | None:
    """
    Insert `new_node` into `parent` at `index`, optionally replacing the
    child currently at `index`.

    If `new_node` is a document fragment its children are inserted instead,
    and the fragment is left empty. Any other node is detached from its
    current parent first.

    Returns:
        The replaced child when `replace` is set, otherwise None

    Raises:
        HierarchyRequestError: If `parent` cannot have children, `index` is
            out of range, or `new_node` is `parent` or one of its ancestors
    """
    children = _children_of(parent)
    limit = len(children) - 1 if replace else len(children)
    if index < 0 or index > limit:
        raise HierarchyRequestError("index-out-of-range", parent)

    removed = children[index] if replace else None
    if replace and new_node is removed:
        return removed

    # Remember the neighbour to insert before; detaching new_node may shift indices.
    reference = children[index] if index < len(children) else None
    if reference is not None and reference is new_node:
        reference = children[index + 1] if index + 1 < len(children) else None

    new_nodes: list[Any] = []
    if new_node is not None:
        if any(ancestor is new_node for ancestor in ancestors(parent)):
            raise HierarchyRequestError("insert-into-descendant", new_node)
        if is_document_fragment(new_node):
            new_nodes = _take_fragment_children(new_node)
        else:
            if new_node.parent is not None:
                logger.debug("Detaching %r from %r before insertion", new_node, new_node.parent)
                remove(new_node)
            new_nodes = [new_node]

    position = len(children) if reference is None else children.index(reference)
    children[position : position + (1 if replace else 0)] = new_nodes

    for node in new_nodes:
        node.parent = parent

    if removed is not None:
        removed.parent = None
    return removed


def insert_before(parent: Any, reference_node: Any | None, new_node: Any) -> None:
    """
    Insert `new_node` into `parent` before `reference_node`.

    A None reference appends to the end.

    Raises:
        TreeInconsistencyError: If `reference_node` is not a child of `parent`
    """
    children = _children_of(parent)
    if reference_node is None:
        insert_node(parent, len(children), new_node)
        return
    if reference_node.parent is not parent:
        raise TreeInconsistencyError("reference-not-a-child", reference_node)
    insert_node(parent, _index_in_parent(reference_node), new_node)


def append(parent: Any, new_node: Any) -> None:
    insert_node(parent, len(_children_of(parent)), new_node)


def replace(old_node: Any, new_node: Any) -> Any:
    """
    Put `new_node` where `old_node` is, detaching `old_node`.

    Returns:
        `old_node`, now parentless

    Raises:
        HierarchyRequestError: If `old_node` has no parent
        TreeInconsistencyError: If the parent does not list `old_node`
    """
    parent = old_node.parent
    if parent is None:
        raise HierarchyRequestError("replace-detached-node", old_node)
    insert_node(parent, _index_in_parent(old_node), new_node, replace=True)
    return old_node


def remove(node: Any) -> None:
    """
    Detach `node` from its parent. Removing a parentless node does nothing.

    Raises:
        TreeInconsistencyError: If the parent does not list `node`
    """
    parent = node.parent
    if parent is None:
        return
    index = _index_in_parent(node)
    del parent.children[index]
    node.parent = None


def clone_node(node: Any) -> Any:
    """
    Deep-copy the subtree rooted at `node`.

    The parent back-reference is not followed: the copy is a fully
    independent, parentless subtree.
    """
    parent = node.parent
    node.parent = None
    try:
        return copy.deepcopy(node)
    finally:
        node.parent = parent


def _collapse_text_range(parent: Any, start: int, end: int) -> None:
    """Merge the text children `start..end` (inclusive) into the first one."""
    children: list[Any] = parent.children
    run = children[start : end + 1]
    text = "".join(node.data or "" for node in run)
    if len(run) > 1:
        logger.debug("Merging %d adjacent text nodes in %s", len(run), parent.name)

    keep = run[0] if text else None
    for node in run:
        if node is not keep:
            node.parent = None
    children[start : end + 1] = [keep] if keep is not None else []
    if keep is not None:
        keep.data = text


def normalize(node: Any) -> None:
    """
    Normalize the text inside an element, document or fragment.

    Every run of adjacent text children becomes one text node holding their
    concatenation, and empty text nodes are dropped. Descendants are
    normalized first. Equivalent to `Node.normalize()` in the browser;
    normalizing twice changes nothing.
    """
    if not (is_element(node) or is_document(node) or is_document_fragment(node)):
        return
    children: list[Any] = node.children
    range_end = -1
    for i in range(len(children) - 1, -1, -1):
        child = children[i]
        if is_text_node(child):
            if range_end == -1:
                range_end = i
            if i == 0:
                # collapse leading text nodes
                _collapse_text_range(node, 0, range_end)
        else:
            normalize(child)
            # collapse the range after this node
            if range_end > -1:
                _collapse_text_range(node, i + 1, range_end)
                range_end = -1
