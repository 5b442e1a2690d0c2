"""Language-neutral syntax tree model.

A SyntaxNode carries a kind tag, an optional line span, its child fields in
declaration order and a bag of scalar attributes (identifier names,
operator tokens, literal values). Nodes compare and hash by identity: two
structurally equal subtrees are still two distinct units of code.

Parent links are not stored on nodes. The tree builder produces a
ParentIndex, a node-id keyed lookup, for the few consumers that need to look
upward (function name inference).
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional, Union


class NodeKind(str, Enum):
    """Closed set of node categories understood by the metrics engine.

    Values are the ESTree / typescript-estree type tags. Anything else maps
    to OTHER and keeps its raw tag on the node.
    """

    PROGRAM = "Program"

    # Statements
    BLOCK_STATEMENT = "BlockStatement"
    EXPRESSION_STATEMENT = "ExpressionStatement"
    EMPTY_STATEMENT = "EmptyStatement"
    RETURN_STATEMENT = "ReturnStatement"
    THROW_STATEMENT = "ThrowStatement"
    BREAK_STATEMENT = "BreakStatement"
    CONTINUE_STATEMENT = "ContinueStatement"
    DEBUGGER_STATEMENT = "DebuggerStatement"
    LABELED_STATEMENT = "LabeledStatement"
    WITH_STATEMENT = "WithStatement"
    IF_STATEMENT = "IfStatement"
    SWITCH_STATEMENT = "SwitchStatement"
    SWITCH_CASE = "SwitchCase"
    TRY_STATEMENT = "TryStatement"
    CATCH_CLAUSE = "CatchClause"
    FOR_STATEMENT = "ForStatement"
    FOR_IN_STATEMENT = "ForInStatement"
    FOR_OF_STATEMENT = "ForOfStatement"
    WHILE_STATEMENT = "WhileStatement"
    DO_WHILE_STATEMENT = "DoWhileStatement"

    # Declarations
    VARIABLE_DECLARATION = "VariableDeclaration"
    VARIABLE_DECLARATOR = "VariableDeclarator"
    FUNCTION_DECLARATION = "FunctionDeclaration"
    CLASS_DECLARATION = "ClassDeclaration"
    CLASS_BODY = "ClassBody"
    METHOD_DEFINITION = "MethodDefinition"
    PROPERTY_DEFINITION = "PropertyDefinition"
    IMPORT_DECLARATION = "ImportDeclaration"
    EXPORT_NAMED_DECLARATION = "ExportNamedDeclaration"
    EXPORT_DEFAULT_DECLARATION = "ExportDefaultDeclaration"
    EXPORT_ALL_DECLARATION = "ExportAllDeclaration"

    # TypeScript declarations
    TS_INTERFACE_DECLARATION = "TSInterfaceDeclaration"
    TS_INTERFACE_BODY = "TSInterfaceBody"
    TS_INTERFACE_HERITAGE = "TSInterfaceHeritage"
    TS_CLASS_IMPLEMENTS = "TSClassImplements"
    TS_TYPE_ALIAS_DECLARATION = "TSTypeAliasDeclaration"
    TS_ENUM_DECLARATION = "TSEnumDeclaration"
    TS_PARAMETER_PROPERTY = "TSParameterProperty"

    # Expressions
    IDENTIFIER = "Identifier"
    PRIVATE_IDENTIFIER = "PrivateIdentifier"
    LITERAL = "Literal"
    TEMPLATE_LITERAL = "TemplateLiteral"
    THIS_EXPRESSION = "ThisExpression"
    BINARY_EXPRESSION = "BinaryExpression"
    LOGICAL_EXPRESSION = "LogicalExpression"
    ASSIGNMENT_EXPRESSION = "AssignmentExpression"
    UPDATE_EXPRESSION = "UpdateExpression"
    UNARY_EXPRESSION = "UnaryExpression"
    CONDITIONAL_EXPRESSION = "ConditionalExpression"
    CALL_EXPRESSION = "CallExpression"
    NEW_EXPRESSION = "NewExpression"
    MEMBER_EXPRESSION = "MemberExpression"
    ARRAY_EXPRESSION = "ArrayExpression"
    OBJECT_EXPRESSION = "ObjectExpression"
    PROPERTY = "Property"
    SEQUENCE_EXPRESSION = "SequenceExpression"
    AWAIT_EXPRESSION = "AwaitExpression"
    FUNCTION_EXPRESSION = "FunctionExpression"
    ARROW_FUNCTION_EXPRESSION = "ArrowFunctionExpression"
    CLASS_EXPRESSION = "ClassExpression"

    OTHER = "Other"

    @classmethod
    def from_tag(cls, tag: str) -> "NodeKind":
        """Map a raw type tag onto the enumeration (unknown tags -> OTHER)."""
        try:
            return cls(tag)
        except ValueError:
            return cls.OTHER


FUNCTION_KINDS = frozenset(
    {
        NodeKind.FUNCTION_DECLARATION,
        NodeKind.FUNCTION_EXPRESSION,
        NodeKind.ARROW_FUNCTION_EXPRESSION,
    }
)

ChildValue = Union["SyntaxNode", List["SyntaxNode"], None]

_node_ids = itertools.count(1)


@dataclass(frozen=True)
class Span:
    """Inclusive 1-indexed line range of a node in its source file."""

    start_line: int
    end_line: int

    def __post_init__(self) -> None:
        if self.start_line < 1 or self.end_line < self.start_line:
            raise ValueError(
                f"Invalid span: {self.start_line}-{self.end_line}"
            )


@dataclass(eq=False)
class SyntaxNode:
    """A node in a parsed syntax tree.

    Attributes:
        kind: Node category
        span: Source line range, None for synthetic nodes
        fields: Child fields in declaration order. Each value is a node, a
            list of nodes, or None for an absent optional child.
        attrs: Scalar properties (name, operator, value, kind, computed...)
        tag: Raw type tag as produced by the parser
        node_id: Stable identity assigned at construction
    """

    kind: NodeKind
    span: Optional[Span] = None
    fields: Dict[str, ChildValue] = field(default_factory=dict)
    attrs: Dict[str, Any] = field(default_factory=dict)
    tag: str = ""
    node_id: int = field(default_factory=lambda: next(_node_ids))

    def __post_init__(self) -> None:
        if not self.tag:
            self.tag = self.kind.value

    def __repr__(self) -> str:
        lines = f"{self.span.start_line}-{self.span.end_line}" if self.span else "?"
        return f"SyntaxNode({self.tag}#{self.node_id} @ {lines})"

    def child(self, name: str) -> Optional["SyntaxNode"]:
        """Return a single-node child field, or None."""
        value = self.fields.get(name)
        return value if isinstance(value, SyntaxNode) else None

    def child_list(self, name: str) -> List["SyntaxNode"]:
        """Return a list-valued child field (empty when absent)."""
        value = self.fields.get(name)
        if isinstance(value, list):
            return value
        return []

    def iter_children(self) -> Iterator["SyntaxNode"]:
        """Yield direct children in field-declaration order."""
        for value in self.fields.values():
            if isinstance(value, SyntaxNode):
                yield value
            elif isinstance(value, list):
                for item in value:
                    if isinstance(item, SyntaxNode):
                        yield item

    def get(self, attr: str, default: Any = None) -> Any:
        return self.attrs.get(attr, default)

    @property
    def name(self) -> Optional[str]:
        return self.attrs.get("name")

    @property
    def operator(self) -> Optional[str]:
        return self.attrs.get("operator")

    @property
    def start_line(self) -> Optional[int]:
        return self.span.start_line if self.span else None

    @property
    def end_line(self) -> Optional[int]:
        return self.span.end_line if self.span else None


def identifier_name(node: Optional[SyntaxNode]) -> Optional[str]:
    """Name of `node` when it is a plain Identifier, else None."""
    if node is not None and node.kind is NodeKind.IDENTIFIER:
        return node.name
    return None


class ParentIndex:
    """Non-owning child -> parent lookup keyed by node id."""

    def __init__(self) -> None:
        self._parents: Dict[int, SyntaxNode] = {}

    @classmethod
    def build(cls, root: SyntaxNode) -> "ParentIndex":
        index = cls()
        stack = [root]
        while stack:
            node = stack.pop()
            for child in node.iter_children():
                index._parents[child.node_id] = node
                stack.append(child)
        return index

    def parent_of(self, node: SyntaxNode) -> Optional[SyntaxNode]:
        return self._parents.get(node.node_id)

    def __len__(self) -> int:
        return len(self._parents)

    def __contains__(self, node: object) -> bool:
        return isinstance(node, SyntaxNode) and node.node_id in self._parents


@dataclass
class SyntaxTree:
    """A root node together with its parent index."""

    root: SyntaxNode
    parents: ParentIndex = field(default_factory=ParentIndex)

    @classmethod
    def from_root(cls, root: SyntaxNode) -> "SyntaxTree":
        return cls(root=root, parents=ParentIndex.build(root))
