"""Cyclomatic complexity (McCabe, extended with short-circuit operators)."""

from __future__ import annotations

from ..nodes import NodeKind, SyntaxNode
from ..walker import iter_nodes

CONTROL_FLOW_KINDS = frozenset(
    {
        NodeKind.IF_STATEMENT,
        NodeKind.FOR_STATEMENT,
        NodeKind.FOR_IN_STATEMENT,
        NodeKind.FOR_OF_STATEMENT,
        NodeKind.WHILE_STATEMENT,
        NodeKind.DO_WHILE_STATEMENT,
        NodeKind.CATCH_CLAUSE,
        NodeKind.CONDITIONAL_EXPRESSION,
        NodeKind.TRY_STATEMENT,
        NodeKind.THROW_STATEMENT,
    }
)

LOGICAL_OPERATORS = frozenset({"&&", "||", "??"})


def is_branch_point(node: SyntaxNode) -> bool:
    """True if `node` adds one independent path through the code."""
    if node.kind in CONTROL_FLOW_KINDS:
        return True
    if node.kind is NodeKind.SWITCH_CASE:
        # `default:` has a null test
        return node.child("test") is not None
    if node.kind is NodeKind.LOGICAL_EXPRESSION:
        return node.operator in LOGICAL_OPERATORS
    return False


def cyclomatic_complexity(node: SyntaxNode) -> int:
    """Complexity of the whole subtree rooted at `node`.

    Starts at 1 and adds one per branch point. Nested functions inside the
    subtree are included; pass a function body to measure it in isolation.
    """
    return 1 + sum(1 for n in iter_nodes(node) if is_branch_point(n))
