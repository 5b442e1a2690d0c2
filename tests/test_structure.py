"""Tests for qualytics.metrics.structure."""

import pytest

from qualytics.exceptions import InheritanceCycleError
from qualytics.metrics.structure import (
    TypeNode,
    analyze_structure,
    count_classes,
    inheritance_depths,
    resolve_depths,
)

from builders import cls, interface, program, tree, var


def structure(*decls):
    return analyze_structure(tree(program(*decls)).root)


class TestClassCount:
    """Declared classes."""

    def test_no_classes(self):
        summary = structure(var("x"))
        assert summary.class_count == 0
        assert summary.max_inheritance_depth == 0

    def test_counts_declarations(self):
        assert structure(cls("A"), cls("B")).class_count == 2

    def test_interfaces_not_counted(self):
        assert structure(cls("A"), interface("I")).class_count == 1

    def test_count_classes_helper(self):
        assert count_classes(tree(program(cls("A"), cls("B"), cls("C"))).root) == 3


class TestInheritanceDepth:
    """Longest extends/implements chain."""

    def test_standalone_class(self):
        summary = structure(cls("A"))
        assert summary.depths == {"A": 1}
        assert summary.max_inheritance_depth == 1

    def test_linear_chain(self):
        summary = structure(
            cls("A", superclass="B"),
            cls("B", superclass="C"),
            cls("C", superclass="D"),
            cls("D"),
        )
        assert summary.depths == {"A": 4, "B": 3, "C": 2, "D": 1}
        assert summary.max_inheritance_depth == 4

    def test_declaration_order_irrelevant(self):
        summary = structure(cls("D"), cls("C", superclass="D"), cls("B", superclass="C"), cls("A", superclass="B"))
        assert summary.depths["A"] == 4

    def test_multiple_interface_inheritance(self):
        summary = structure(interface("A"), interface("B"), interface("C", extends=["A", "B"]))
        assert summary.depths["C"] == 2

    def test_implements_contributes(self):
        summary = structure(
            interface("Base"),
            interface("Repo", extends=["Base"]),
            cls("SqlRepo", implements=["Repo"]),
        )
        assert summary.depths["SqlRepo"] == 3

    def test_longest_of_several_parents(self):
        summary = structure(
            cls("Root"),
            cls("Mid", superclass="Root"),
            interface("Flat"),
            cls("Leaf", superclass="Mid", implements=["Flat"]),
        )
        assert summary.depths["Leaf"] == 3

    def test_external_parent_counts_as_depth_one(self):
        summary = structure(cls("Widget", superclass="Component"))
        assert summary.depths == {"Widget": 2}

    def test_named_class_expression(self):
        summary = structure(var("Impl", cls("Impl", superclass="Base", expression=True)), cls("Base"))
        assert summary.depths["Impl"] == 2
        assert summary.class_count == 1

    def test_anonymous_class_ignored(self):
        summary = structure(cls(None, superclass="Base"))
        assert summary.depths == {}
        assert summary.max_inheritance_depth == 0

    def test_inheritance_depths_helper(self):
        root = tree(program(cls("A", superclass="B"), cls("B"))).root
        assert inheritance_depths(root) == {"A": 2, "B": 1}


class TestCycles:
    """Cyclic type graphs terminate with an error."""

    def test_self_extension(self):
        with pytest.raises(InheritanceCycleError) as exc:
            structure(cls("A", superclass="A"))
        assert exc.value.type_names == ["A"]

    def test_mutual_extension(self):
        with pytest.raises(InheritanceCycleError) as exc:
            structure(interface("A", extends=["B"]), interface("B", extends=["A"]))
        assert set(exc.value.type_names) == {"A", "B"}

    def test_cycle_error_message(self):
        with pytest.raises(InheritanceCycleError, match="did not converge"):
            resolve_depths([TypeNode("X", {"Y"}), TypeNode("Y", {"X"})])

    def test_explicit_pass_bound(self):
        chain = [TypeNode("A", {"B"}), TypeNode("B", {"C"}), TypeNode("C", {"D"}), TypeNode("D")]
        with pytest.raises(InheritanceCycleError):
            resolve_depths(chain, max_passes=1)

    def test_long_chain_converges_within_default_bound(self):
        names = [f"T{i}" for i in range(50)]
        chain = [TypeNode(name, {names[i + 1]}) for i, name in enumerate(names[:-1])]
        chain.append(TypeNode(names[-1]))
        depths = resolve_depths(chain)
        assert depths["T0"] == 50
