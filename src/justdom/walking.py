"""Search a node tree with predicates.

The `node_walk*` functions consider every kind of node. `query` and
`query_all` only return elements, while still walking through text,
comment and container nodes.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any

from . import iteration
from .iteration import GetChildNodes, default_child_nodes
from .predicates import AND, is_element

if TYPE_CHECKING:
    from .predicates import Predicate


def _find(nodes: Iterable[Any], predicate: Predicate) -> Any | None:
    for node in nodes:
        if predicate(node):
            return node
    return None


def _filter(nodes: Iterable[Any], predicate: Predicate, matches: list[Any] | None) -> list[Any]:
    if matches is None:
        matches = []
    for node in nodes:
        if predicate(node):
            matches.append(node)
    return matches


def tree_map(
    node: Any,
    mapfn: Callable[[Any], Iterable[Any]],
    get_child_nodes: GetChildNodes = default_child_nodes,
) -> list[Any]:
    """
    Apply `mapfn` to `node` and the tree below `node`, returning a flattened
    list of results.
    """
    return list(iteration.tree_map(node, mapfn, get_child_nodes))


def node_walk(
    node: Any,
    predicate: Predicate,
    get_child_nodes: GetChildNodes = default_child_nodes,
) -> Any | None:
    """
    Walk the tree down from `node`, applying the `predicate` function.

    Returns:
        The first node in depth-first order (`node` included) that matches,
        or None
    """
    return _find(iteration.depth_first(node, get_child_nodes), predicate)


def node_walk_all(
    node: Any,
    predicate: Predicate,
    matches: list[Any] | None = None,
    get_child_nodes: GetChildNodes = default_child_nodes,
) -> list[Any]:
    """
    Walk the tree down from `node`, applying the `predicate` function.

    All matching nodes from `node` to the leaves are returned in depth-first
    order. When `matches` is given, results are appended to it and it is
    returned, so callers can accumulate across several walks.
    """
    return _filter(iteration.depth_first(node, get_child_nodes), predicate, matches)


def node_walk_prior(node: Any, predicate: Predicate) -> Any | None:
    """
    Equivalent to `node_walk`, but only considers `node`, its ancestors, and
    the nodes that come before it in the document.

    Nodes are searched in reverse document order, starting from `node`.
    """
    return _find(iteration.prior_including_node(node), predicate)


def node_walk_all_prior(node: Any, predicate: Predicate, matches: list[Any] | None = None) -> list[Any]:
    """
    Equivalent to `node_walk_all`, but only returns nodes that are either
    `node`, its ancestors, or earlier cousins/siblings in the document.

    Nodes are returned in reverse document order, starting from `node`.
    """
    return _filter(iteration.prior_including_node(node), predicate, matches)


def node_walk_ancestors(node: Any, predicate: Predicate) -> Any | None:
    """
    Walk the tree up from the parent of `node` to the root, returning the
    first ancestor that matches `predicate`.
    """
    walk = iteration.ancestors(node)
    next(walk)
    return _find(walk, predicate)


def query(
    node: Any,
    predicate: Predicate,
    get_child_nodes: GetChildNodes = default_child_nodes,
) -> Any | None:
    """Equivalent to `node_walk`, but only matches elements."""
    return node_walk(node, AND(is_element, predicate), get_child_nodes)


def query_all(
    node: Any,
    predicate: Predicate,
    matches: list[Any] | None = None,
    get_child_nodes: GetChildNodes = default_child_nodes,
) -> list[Any]:
    """Equivalent to `node_walk_all`, but only matches elements."""
    return node_walk_all(node, AND(is_element, predicate), matches, get_child_nodes)


def query_prior(node: Any, predicate: Predicate) -> Any | None:
    """Equivalent to `node_walk_prior`, but only matches elements."""
    return node_walk_prior(node, AND(is_element, predicate))


def query_all_prior(node: Any, predicate: Predicate, matches: list[Any] | None = None) -> list[Any]:
    """Equivalent to `node_walk_all_prior`, but only matches elements."""
    return node_walk_all_prior(node, AND(is_element, predicate), matches)
