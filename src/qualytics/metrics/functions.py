"""Discovery and per-unit metrics for function-like code.

A unit is a function declaration, function expression, arrow function or
class method. A method definition and the function expression holding its
body are one logical unit: it is reported once, as a method spanning the
whole definition, and the inner function node is never reported again.
De-duplication is by node identity, never by structural equality.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import List, Optional

from ..logging_config import get_logger
from ..nodes import FUNCTION_KINDS, NodeKind, ParentIndex, SyntaxNode, identifier_name
from ..walker import iter_nodes
from .complexity import cyclomatic_complexity
from .halstead import halstead_volume
from .loc import count_logical_lines
from .maintainability import maintainability_index
from .models import FunctionKind, FunctionUnit, MetricsRecord

logger = get_logger(__name__)

ANONYMOUS = "<anonymous>"
ARROW = "<arrow>"
COMPUTED = "<computed>"


@dataclass
class _Candidate:
    """A discovered unit whose metrics have not been computed yet."""

    order: int
    name: str
    kind: FunctionKind
    start_line: int
    end_line: int
    function: SyntaxNode


def _method_key_name(method: SyntaxNode) -> str:
    return identifier_name(method.child("key")) or COMPUTED


def function_name(node: SyntaxNode, parents: ParentIndex) -> str:
    """Display name for a function-like node, with placeholder fallbacks."""
    if node.kind is NodeKind.FUNCTION_DECLARATION:
        return identifier_name(node.child("id")) or ANONYMOUS

    if node.kind is NodeKind.METHOD_DEFINITION:
        return _method_key_name(node)

    parent = parents.parent_of(node)
    if parent is not None:
        if parent.kind is NodeKind.VARIABLE_DECLARATOR:
            bound = identifier_name(parent.child("id"))
            if bound is not None:
                return bound
        if parent.kind is NodeKind.METHOD_DEFINITION:
            return _method_key_name(parent)

    return ARROW if node.kind is NodeKind.ARROW_FUNCTION_EXPRESSION else ANONYMOUS


def function_kind(node: SyntaxNode) -> FunctionKind:
    if node.kind is NodeKind.METHOD_DEFINITION:
        return FunctionKind.METHOD
    if node.kind is NodeKind.ARROW_FUNCTION_EXPRESSION:
        return FunctionKind.ARROW
    return FunctionKind.FUNCTION


def function_metrics(body: Optional[SyntaxNode]) -> MetricsRecord:
    """Metrics for a single function body.

    An expression body (``x => x * 2``) is an implicit return and counts as
    one logical line. A missing body (overload signature) gets the base
    record.
    """
    if body is None:
        complexity, volume, loc = 1, 0.0, 0
    else:
        complexity = cyclomatic_complexity(body)
        volume = halstead_volume(body)
        loc = count_logical_lines(body)
        if body.kind is not NodeKind.BLOCK_STATEMENT:
            loc += 1

    return MetricsRecord.build(
        loc=loc,
        complexity=complexity,
        maintainability=maintainability_index(volume, complexity, loc),
        methods=1,
    )


def _discover(root: SyntaxNode, parents: ParentIndex) -> List[_Candidate]:
    candidates: List[_Candidate] = []
    processed: set[int] = set()

    for node in iter_nodes(root):
        if node.span is None or node.node_id in processed:
            continue

        if node.kind is NodeKind.METHOD_DEFINITION:
            function = node.child("value")
            processed.add(node.node_id)
            if function is not None:
                processed.add(function.node_id)
        elif node.kind in FUNCTION_KINDS:
            function = node
            processed.add(node.node_id)
        else:
            continue

        candidates.append(
            _Candidate(
                order=len(candidates),
                name=function_name(node, parents),
                kind=function_kind(node),
                start_line=node.span.start_line,
                end_line=node.span.end_line,
                function=function,
            )
        )

    return candidates


def _body_of(function: Optional[SyntaxNode]) -> Optional[SyntaxNode]:
    return function.child("body") if function is not None else None


def _to_unit(candidate: _Candidate) -> FunctionUnit:
    return FunctionUnit(
        name=candidate.name,
        kind=candidate.kind,
        start_line=candidate.start_line,
        end_line=candidate.end_line,
        metrics=function_metrics(_body_of(candidate.function)),
    )


def analyze_functions(
    root: SyntaxNode,
    parents: Optional[ParentIndex] = None,
    workers: Optional[int] = None,
) -> List[FunctionUnit]:
    """Discover every function-like unit under `root` and measure it.

    Args:
        root: Tree (or subtree) to search
        parents: Parent lookup for name inference; built from `root` if omitted
        workers: Compute per-unit metrics on this many threads when > 1

    Returns:
        Units ordered by start line; equal start lines keep discovery order
    """
    if parents is None:
        parents = ParentIndex.build(root)

    candidates = _discover(root, parents)
    logger.debug(f"Discovered {len(candidates)} function-like units")

    if workers is not None and workers > 1 and len(candidates) > 1:
        with ThreadPoolExecutor(max_workers=workers) as executor:
            units = list(executor.map(_to_unit, candidates))
    else:
        units = [_to_unit(c) for c in candidates]

    order = sorted(range(len(units)), key=lambda i: (units[i].start_line, candidates[i].order))
    return [units[i] for i in order]
