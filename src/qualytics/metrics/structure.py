"""Class counting and inheritance depth.

Every named class or interface is a type node with edges to the identifiers
it extends or implements. Depth is the length of the longest chain ending
at a type, counting the type itself (a type with no parents has depth 1).
Parents that are not declared in the tree (imported or global types) count
as depth 1.

Depths are resolved by relaxing edges until a pass changes nothing. On an
acyclic graph this converges within one pass per distinct name plus a final
quiet pass; anything slower can only be a cycle (``class A extends A``,
mutually extending interfaces), which is reported as InheritanceCycleError
instead of looping.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set, Tuple

from ..exceptions import InheritanceCycleError
from ..logging_config import get_logger
from ..nodes import NodeKind, SyntaxNode, identifier_name
from ..walker import iter_nodes

logger = get_logger(__name__)

CLASS_KINDS = frozenset({NodeKind.CLASS_DECLARATION, NodeKind.CLASS_EXPRESSION})
TYPE_KINDS = CLASS_KINDS | {NodeKind.TS_INTERFACE_DECLARATION}


@dataclass
class TypeNode:
    """A named class or interface and the names it inherits from."""

    name: str
    parent_names: Set[str] = field(default_factory=set)


@dataclass(frozen=True)
class StructureSummary:
    """Class count and inheritance depths for one tree."""

    class_count: int
    max_inheritance_depth: int
    depths: Dict[str, int] = field(default_factory=dict)


def _heritage_names(nodes: List[SyntaxNode]) -> List[str]:
    """Identifier names behind `implements` / `extends` clause entries."""
    names = []
    for clause in nodes:
        name = identifier_name(clause.child("expression"))
        if name is not None:
            names.append(name)
    return names


def type_node_for(node: SyntaxNode) -> Optional[TypeNode]:
    """Build the TypeNode for a named class/interface declaration, else None."""
    if node.kind not in TYPE_KINDS:
        return None
    name = identifier_name(node.child("id"))
    if name is None:
        return None

    type_node = TypeNode(name=name)
    if node.kind in CLASS_KINDS:
        superclass = identifier_name(node.child("superClass"))
        if superclass is not None:
            type_node.parent_names.add(superclass)
        type_node.parent_names.update(_heritage_names(node.child_list("implements")))
    else:
        type_node.parent_names.update(_heritage_names(node.child_list("extends")))
    return type_node


def count_classes(node: SyntaxNode) -> int:
    return sum(1 for n in iter_nodes(node) if n.kind is NodeKind.CLASS_DECLARATION)


def resolve_depths(
    type_nodes: List[TypeNode], max_passes: Optional[int] = None
) -> Dict[str, int]:
    """Longest-chain depth per declared type name, by fixed-point relaxation.

    Raises:
        InheritanceCycleError: if depths are still changing after the pass bound
    """
    depth: Dict[str, int] = {tn.name: 1 for tn in type_nodes}
    edges: List[Tuple[str, str]] = sorted(
        {(tn.name, parent) for tn in type_nodes for parent in tn.parent_names}
    )

    if max_passes is None:
        distinct = set(depth)
        distinct.update(parent for _, parent in edges)
        max_passes = len(distinct) + 1

    passes = 0
    while True:
        changed: Set[str] = set()
        for child, parent in edges:
            candidate = depth.get(parent, 1) + 1
            if candidate > depth[child]:
                depth[child] = candidate
                changed.add(child)
        passes += 1
        if not changed:
            break
        if passes >= max_passes:
            raise InheritanceCycleError(changed, passes)

    logger.debug(f"Resolved {len(depth)} type depths in {passes} passes")
    return depth


def inheritance_depths(node: SyntaxNode, max_passes: Optional[int] = None) -> Dict[str, int]:
    """Depth per named class/interface declared under `node`."""
    type_nodes = [tn for tn in map(type_node_for, iter_nodes(node)) if tn is not None]
    return resolve_depths(_merge_by_name(type_nodes), max_passes)


def _merge_by_name(type_nodes: List[TypeNode]) -> List[TypeNode]:
    # Same-named declarations (merged interfaces, overloads) share one node
    merged: Dict[str, TypeNode] = {}
    for tn in type_nodes:
        merged.setdefault(tn.name, TypeNode(name=tn.name)).parent_names.update(tn.parent_names)
    return list(merged.values())


def analyze_structure(node: SyntaxNode, max_passes: Optional[int] = None) -> StructureSummary:
    """Count classes and resolve the maximum inheritance depth in one walk."""
    class_count = 0
    type_nodes: List[TypeNode] = []
    for n in iter_nodes(node):
        if n.kind is NodeKind.CLASS_DECLARATION:
            class_count += 1
        type_node = type_node_for(n)
        if type_node is not None:
            type_nodes.append(type_node)

    depths = resolve_depths(_merge_by_name(type_nodes), max_passes)
    return StructureSummary(
        class_count=class_count,
        max_inheritance_depth=max(depths.values(), default=0),
        depths=depths,
    )
