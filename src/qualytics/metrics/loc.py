"""Logical lines of code.

A logical line is one executable or declarative node, independent of how
many physical lines it spans. Comments, blank lines and braces never reach
the tree so they are never counted.
"""

from __future__ import annotations

from typing import Optional, Set

from ..nodes import NodeKind, SyntaxNode
from ..walker import iter_nodes

COUNTABLE_KINDS = frozenset(
    {
        # Statements
        NodeKind.EXPRESSION_STATEMENT,
        NodeKind.RETURN_STATEMENT,
        NodeKind.THROW_STATEMENT,
        NodeKind.BREAK_STATEMENT,
        NodeKind.CONTINUE_STATEMENT,
        NodeKind.DEBUGGER_STATEMENT,
        NodeKind.FOR_STATEMENT,
        NodeKind.FOR_IN_STATEMENT,
        NodeKind.FOR_OF_STATEMENT,
        NodeKind.WHILE_STATEMENT,
        NodeKind.DO_WHILE_STATEMENT,
        NodeKind.IF_STATEMENT,
        NodeKind.SWITCH_STATEMENT,
        NodeKind.SWITCH_CASE,
        NodeKind.TRY_STATEMENT,
        NodeKind.WITH_STATEMENT,
        # Declarations
        NodeKind.VARIABLE_DECLARATION,
        NodeKind.FUNCTION_DECLARATION,
        NodeKind.CLASS_DECLARATION,
        NodeKind.TS_INTERFACE_DECLARATION,
        NodeKind.TS_TYPE_ALIAS_DECLARATION,
        NodeKind.TS_ENUM_DECLARATION,
        # Modules
        NodeKind.IMPORT_DECLARATION,
        NodeKind.EXPORT_NAMED_DECLARATION,
        NodeKind.EXPORT_DEFAULT_DECLARATION,
        NodeKind.EXPORT_ALL_DECLARATION,
        # Class members
        NodeKind.PROPERTY_DEFINITION,
        NodeKind.TS_PARAMETER_PROPERTY,
    }
)


def is_countable(node: SyntaxNode) -> bool:
    return node.kind in COUNTABLE_KINDS


def count_logical_lines(node: SyntaxNode, seen: Optional[Set[int]] = None) -> int:
    """Count countable nodes in the subtree rooted at `node`.

    `seen` holds ids of nodes already counted during the current pass. Pass
    the same set to successive calls to count overlapping subtrees only
    once; it is updated in place.
    """
    if seen is None:
        seen = set()
    loc = 0
    for n in iter_nodes(node):
        if n.node_id in seen:
            continue
        seen.add(n.node_id)
        if is_countable(n):
            loc += 1
    return loc
