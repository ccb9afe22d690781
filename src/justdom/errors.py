"""Centralized error types and messages for tree operations and parsing.

Tree errors signal a broken structural invariant or a misuse of the mutation
API. They are raised immediately and are never retried: no operation in this
package performs I/O, so every failure is deterministic.
"""

from __future__ import annotations

from typing import Any


def generate_error_message(code: str, node_name: str | None = None) -> str:
    """Generate human-readable error message from error code.

    Args:
        code: The error code string (kebab-case format)
        node_name: Optional node name to include in the message for context

    Returns:
        Human-readable error message string
    """
    messages = {
        # ================================================================
        # TREE INCONSISTENCIES
        # ================================================================
        "parent-missing-children": f"Inconsistent tree: parent of {node_name} does not have children",
        "parent-missing-child": f"Inconsistent tree: parent does not know about child {node_name}",
        "reference-not-a-child": f"Reference node {node_name} is not a child of this node",
        # ================================================================
        # PRECONDITION VIOLATIONS
        # ================================================================
        "node-cannot-have-children": f"Node {node_name} cannot have children",
        "replace-detached-node": f"Cannot replace {node_name}: it has no parent",
        "insert-into-descendant": f"Inserting {node_name} would make it its own ancestor",
        "index-out-of-range": f"Insertion index is out of range for {node_name}",
    }

    # Return message or fall back to the code itself if not found
    return messages.get(code, code)


class TreeError(ValueError):
    """Base class for structural errors raised by tree operations."""

    code: str
    node: Any

    def __init__(self, code: str, node: Any = None, message: str | None = None) -> None:
        self.code = code
        self.node = node
        name = getattr(node, "name", None) if node is not None else None
        super().__init__(message or generate_error_message(code, name))


class TreeInconsistencyError(TreeError):
    """Raised when a node's back-reference disagrees with its container.

    This means an invariant was violated upstream; the operation is aborted
    and nothing is partially applied.
    """


class HierarchyRequestError(TreeError):
    """Raised when a mutation is requested on an invalid target."""


class ParseError:
    """Represents a parse error reported by the HTML parser."""

    __slots__ = ("code", "column", "line", "message")

    code: str
    line: int | None
    column: int | None
    message: str

    __hash__ = None  # type: ignore[assignment]  # Unhashable since we define __eq__

    def __init__(
        self,
        code: str,
        line: int | None = None,
        column: int | None = None,
        message: str | None = None,
    ) -> None:
        self.code = code
        self.line = line
        self.column = column
        self.message = message or code

    def __repr__(self) -> str:
        if self.line is not None and self.column is not None:
            return f"ParseError({self.code!r}, line={self.line}, column={self.column})"
        return f"ParseError({self.code!r})"

    def __str__(self) -> str:
        if self.line is not None and self.column is not None:
            if self.message != self.code:
                return f"({self.line},{self.column}): {self.code} - {self.message}"
            return f"({self.line},{self.column}): {self.code}"
        if self.message != self.code:
            return f"{self.code} - {self.message}"
        return self.code

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParseError):
            return NotImplemented
        return self.code == other.code and self.line == other.line and self.column == other.column


class StrictModeError(SyntaxError):
    """Raised when strict parsing encounters a parse error."""

    error: ParseError

    def __init__(self, error: ParseError) -> None:
        self.error = error
        super().__init__(str(error))
        self.filename = "<html>"
        self.lineno = error.line
        self.offset = error.column
