"""Halstead vocabulary and volume.

Operators are expression operator tokens, direct calls (keyed by callee
name), the conditional operator and `new`. Operands are identifiers,
literal values and plain member-access property names.

    vocabulary n = n1 + n2     (distinct operators + distinct operands)
    length     N = N1 + N2     (total operators + total operands)
    volume     V = N * log2(n)
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Set, Union

from ..nodes import NodeKind, SyntaxNode, identifier_name
from ..walker import iter_nodes

OPERATOR_EXPRESSION_KINDS = frozenset(
    {
        NodeKind.BINARY_EXPRESSION,
        NodeKind.LOGICAL_EXPRESSION,
        NodeKind.ASSIGNMENT_EXPRESSION,
        NodeKind.UPDATE_EXPRESSION,
        NodeKind.UNARY_EXPRESSION,
    }
)


@dataclass
class HalsteadCounts:
    """Operator/operand accumulator. One instance per calculation."""

    operators: Set[str] = field(default_factory=set)
    operands: Set[str] = field(default_factory=set)
    operator_count: int = 0
    operand_count: int = 0

    def add_operator(self, token: str) -> None:
        self.operators.add(token)
        self.operator_count += 1

    def add_operand(self, token: str) -> None:
        self.operands.add(token)
        self.operand_count += 1

    @property
    def vocabulary(self) -> int:
        return len(self.operators) + len(self.operands)

    @property
    def length(self) -> int:
        return self.operator_count + self.operand_count

    @property
    def volume(self) -> float:
        vocabulary = self.vocabulary
        if vocabulary == 0:
            return 0.0
        return self.length * math.log2(vocabulary)


def number_text(value: Union[int, float]) -> str:
    """Spell a number the way JavaScript's ``String(n)`` does.

    Digits are the shortest round-trip form (``repr``). Magnitudes of at
    least 1e21 or below 1e-6 switch to exponent form such as ``1e+21`` and
    ``1.5e-7``; everything else is positional with no trailing ``.0``.
    """
    if isinstance(value, int) and abs(value) < 10**21:
        return str(value)
    try:
        value = float(value)
    except OverflowError:
        value = math.inf if value > 0 else -math.inf
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    _, digit_tuple, exponent = Decimal(repr(abs(value))).normalize().as_tuple()
    digits = "".join(map(str, digit_tuple))
    k = len(digits)
    # value = 0.digits * 10**n
    n = exponent + k

    if k <= n <= 21:
        text = digits + "0" * (n - k)
    elif 0 < n <= 21:
        text = f"{digits[:n]}.{digits[n:]}"
    elif -6 < n <= 0:
        text = "0." + "0" * -n + digits
    else:
        e = n - 1
        mantissa = digits if k == 1 else f"{digits[0]}.{digits[1:]}"
        text = f"{mantissa}e{'+' if e >= 0 else '-'}{abs(e)}"
    return sign + text



def literal_text(value: Any) -> str:
    """String form of a literal value, spelled the way JavaScript prints it."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return number_text(value)
    return str(value)


def _record(node: SyntaxNode, counts: HalsteadCounts) -> None:
    kind = node.kind
    if kind in OPERATOR_EXPRESSION_KINDS:
        counts.add_operator(node.operator or "")
    elif kind is NodeKind.IDENTIFIER:
        counts.add_operand(node.name or "")
    elif kind is NodeKind.LITERAL:
        counts.add_operand(literal_text(node.get("value")))
    elif kind is NodeKind.MEMBER_EXPRESSION:
        prop = identifier_name(node.child("property"))
        if prop is not None:
            counts.add_operand(prop)
    elif kind is NodeKind.CALL_EXPRESSION:
        callee = identifier_name(node.child("callee"))
        if callee is not None:
            counts.add_operator(f"{callee}()")
    elif kind is NodeKind.CONDITIONAL_EXPRESSION:
        counts.add_operator("?:")
    elif kind is NodeKind.NEW_EXPRESSION:
        counts.add_operator("new")


def gather_halstead(node: SyntaxNode) -> HalsteadCounts:
    """Collect operator/operand counts for the subtree rooted at `node`."""
    counts = HalsteadCounts()
    for n in iter_nodes(node):
        _record(n, counts)
    return counts


def halstead_volume(node: SyntaxNode) -> float:
    return gather_halstead(node).volume
