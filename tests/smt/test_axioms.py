"""
Tests for the fixed axiom templates.
"""

import re

from hypothesis import given
from hypothesis import strategies as st

from burdens.smt.axioms import (
    reflexivity, anti_symmetry, transitivity,
    upper_bound, least_upper_bound,
    ORDER_AXIOMS, JOIN_AXIOMS,
)


names = st.from_regex(r"[A-Za-z][A-Za-z0-9_]{0,7}", fullmatch=True)


def bound_variables(axiom):
    """Names bound by the axiom's forall."""
    binder = re.search(r"\(forall \(((?:\(\w+ \w+\) ?)+)\)", axiom).group(1)
    return re.findall(r"\((\w+) \w+\)", binder)


class TestTemplates:
    def test_reflexivity(self):
        assert reflexivity("Sign", "leq") == (
            "(define-fun reflexivity () Bool (forall ((x Sign)) (leq x x)))"
        )

    def test_anti_symmetry(self):
        assert anti_symmetry("Sign", "leq") == (
            "(define-fun anti-symmetri () Bool (forall ((x Sign) (y Sign)) "
            "(=> (and (leq x y) (leq y x)) (= x y))))"
        )

    def test_transitivity(self):
        assert transitivity("Sign", "leq") == (
            "(define-fun transitivity () Bool (forall ((x Sign) (y Sign) (z Sign)) "
            "(=> (and (leq x y) (leq y z)) (leq x z))))"
        )

    def test_upper_bound(self):
        assert upper_bound("Sign", "leq", "join") == (
            "(define-fun upper-bound () Bool (forall ((x Sign) (y Sign) (z Sign)) "
            "(=> (join x y z) (and (leq x z) (leq y z)))))"
        )

    def test_least_upper_bound(self):
        assert least_upper_bound("Sign", "leq", "join") == (
            "(define-fun least-upper-bound () Bool (forall ((x Sign) (y Sign) (z Sign) (w Sign)) "
            "(=> (and (join x y z) (leq x w) (leq y w)) (leq z w))))"
        )

    def test_comments_are_smt_comments(self):
        for _, comment in ORDER_AXIOMS + JOIN_AXIOMS:
            assert comment.startswith(";; ")


class TestTemplateProperties:

    @given(names, names)
    def test_pure(self, sort, leq):
        for template, _ in ORDER_AXIOMS:
            assert template(sort, leq) == template(sort, leq)

    @given(names, names)
    def test_balanced(self, sort, leq):
        for template, _ in ORDER_AXIOMS:
            text = template(sort, leq)
            assert text.count("(") == text.count(")")

    @given(names, names)
    def test_quantifier_arity(self, sort, leq):
        assert bound_variables(reflexivity(sort, leq)) == ["x"]
        assert bound_variables(anti_symmetry(sort, leq)) == ["x", "y"]
        assert bound_variables(transitivity(sort, leq)) == ["x", "y", "z"]

    @given(names, names)
    def test_only_names_vary(self, sort, leq):
        text = transitivity(sort, leq)
        canonical = transitivity("S", "R")
        assert text == canonical.replace("(R ", f"({leq} ").replace(" S)", f" {sort})")
