"""Pre-order traversal over SyntaxNode trees.

Uses an explicit stack rather than recursion so deeply nested trees (long
else-if chains, minified bundles) do not hit the interpreter recursion
limit.
"""

from __future__ import annotations

from typing import Callable, Iterator

from .nodes import SyntaxNode

Visitor = Callable[[SyntaxNode], None]


def iter_nodes(root: SyntaxNode) -> Iterator[SyntaxNode]:
    """Yield `root` and every descendant, depth-first pre-order.

    Children are produced in field-declaration order, list fields in list
    order. Every occurrence of a node in a child field is yielded.
    """
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        children = list(node.iter_children())
        stack.extend(reversed(children))


def walk(root: SyntaxNode, visit: Visitor) -> None:
    """Call `visit` on every node of the tree rooted at `root`, pre-order."""
    for node in iter_nodes(root):
        visit(node)
