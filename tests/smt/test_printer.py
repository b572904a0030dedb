"""
Tests for SMT-LIB rendering.

Every declaration prints as one balanced S-expression, and the layout of
disjunctions is fixed: one disjunct per line, four spaces per level.
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from burdens.smt.formula import (
    SmtTrue, SmtFalse, SmtVariable, SmtConstructor0, SmtConstructor,
    Equality, Conjunction, Disjunction, Implication,
    TRUE, FALSE, FORMULA_TYPES, DECLARATION_TYPES,
    Datatype, Relation2, Relation3, free_variables,
)
from burdens.smt.printer import fmt_formula, fmt_declaration


def parse_sexp(text):
    """Parse one S-expression into nested lists. Raises ValueError if malformed."""
    tokens = text.replace("(", " ( ").replace(")", " ) ").split()
    pos = 0

    def read():
        nonlocal pos
        if pos >= len(tokens):
            raise ValueError("unexpected end of input")
        tok = tokens[pos]
        pos += 1
        if tok == "(":
            items = []
            while pos < len(tokens) and tokens[pos] != ")":
                items.append(read())
            if pos >= len(tokens):
                raise ValueError("unbalanced '('")
            pos += 1
            return items
        if tok == ")":
            raise ValueError("unbalanced ')'")
        return tok

    expr = read()
    if pos != len(tokens):
        raise ValueError("trailing tokens")
    return expr


# ── Generators ──────────────────────────────────────────────────────────────

names = st.from_regex(r"[A-Za-z][A-Za-z0-9_]{0,5}", fullmatch=True)

atoms = st.one_of(
    st.just(TRUE), st.just(FALSE),
    names.map(SmtVariable), names.map(SmtConstructor0),
)


def _compound(children):
    tuples = st.lists(children, max_size=4).map(tuple)
    return st.one_of(
        st.builds(Equality, children, children),
        tuples.map(Conjunction),
        tuples.map(Disjunction),
        st.builds(Implication, children, children),
        st.builds(SmtConstructor, names, tuples),
    )


formulas = st.recursive(atoms, _compound, max_leaves=12)

declarations = st.one_of(
    st.builds(Datatype, names, st.lists(names, min_size=1, max_size=5).map(tuple)),
    st.builds(Relation2, names, names, names, names, formulas),
    st.builds(Relation3, names, names, names, names, names, formulas),
)


# ── Unit tests ───────────────────────────────────────────────────────────────

class TestAtoms:
    def test_constants(self):
        assert fmt_formula(TRUE) == "true"
        assert fmt_formula(FALSE) == "false"

    def test_names(self):
        assert fmt_formula(SmtVariable("x0")) == "x0"
        assert fmt_formula(SmtConstructor0("Bot")) == "Bot"


class TestCompound:
    def test_equality(self):
        assert fmt_formula(Equality(SmtVariable("x0"), SmtConstructor0("Bot"))) == "(= x0 Bot)"

    def test_conjunction_is_inline(self):
        f = Conjunction((
            Equality(SmtVariable("x0"), SmtConstructor0("Bot")),
            Equality(SmtVariable("y0"), SmtConstructor0("Top")),
        ))
        assert fmt_formula(f) == "(and (= x0 Bot) (= y0 Top))"

    def test_disjunction_one_per_line(self):
        f = Disjunction((TRUE, Conjunction((Equality(SmtVariable("a"), SmtVariable("b")),))))
        assert fmt_formula(f, 1) == "(or\n        true\n        (and (= a b)))"

    def test_nested_disjunction_indents_deeper(self):
        f = Disjunction((Disjunction((TRUE, FALSE)),))
        assert fmt_formula(f) == "(or\n    (or\n        true\n        false))"

    def test_empty_conjunction_is_true(self):
        assert fmt_formula(Conjunction(())) == "true"

    def test_empty_disjunction_is_false(self):
        assert fmt_formula(Disjunction(())) == "false"

    def test_implication(self):
        f = Implication(SmtVariable("p"), SmtVariable("q"))
        assert fmt_formula(f) == "(=> p q)"

    def test_constructor_application(self):
        f = SmtConstructor("Pair", (SmtConstructor0("Bot"), SmtVariable("x")))
        assert fmt_formula(f) == "(Pair Bot x)"
        assert fmt_formula(SmtConstructor("Unit")) == "Unit"

    def test_unknown_formula_rejected(self):
        with pytest.raises(TypeError):
            fmt_formula("x0")


class TestDeclarations:
    def test_datatype(self):
        d = Datatype("Sign", ("Top", "Pos", "Neg", "Zero", "Bot"))
        assert fmt_declaration(d) == "(declare-datatypes () ((Sign Top, Pos, Neg, Zero, Bot)))"

    def test_relation2(self):
        body = Disjunction((
            Conjunction((Equality(SmtVariable("x0"), SmtConstructor0("Bot")),
                         Equality(SmtVariable("y0"), SmtConstructor0("Top")))),
            TRUE,
        ))
        d = Relation2("leq", "Sign", "x0", "y0", body)
        assert fmt_declaration(d) == (
            "(define-fun leq ((x0 Sign) (y0 Sign)) Bool\n"
            "    (or\n"
            "        (and (= x0 Bot) (= y0 Top))\n"
            "        true))"
        )

    def test_relation3_lists_three_parameters(self):
        d = Relation3("join", "Sign", "x0", "y0", "z0", Disjunction((TRUE,)))
        assert fmt_declaration(d) == (
            "(define-fun join ((x0 Sign) (y0 Sign) (z0 Sign)) Bool\n"
            "    (or\n"
            "        true))"
        )

    def test_unknown_declaration_rejected(self):
        with pytest.raises(TypeError):
            fmt_declaration(TRUE)


# ── Exhaustiveness ───────────────────────────────────────────────────────────

SAMPLE_FORMULAS = {
    SmtTrue: TRUE,
    SmtFalse: FALSE,
    SmtVariable: SmtVariable("x"),
    SmtConstructor0: SmtConstructor0("C"),
    SmtConstructor: SmtConstructor("F", (SmtVariable("x"),)),
    Equality: Equality(SmtVariable("x"), SmtConstructor0("C")),
    Conjunction: Conjunction((TRUE,)),
    Disjunction: Disjunction((TRUE,)),
    Implication: Implication(TRUE, SmtVariable("x")),
}

SAMPLE_DECLARATIONS = {
    Datatype: Datatype("S", ("A",)),
    Relation2: Relation2("r", "S", "a", "b", TRUE),
    Relation3: Relation3("r", "S", "a", "b", "c", TRUE),
}


@pytest.mark.parametrize("formula_type", FORMULA_TYPES)
def test_every_formula_variant_prints(formula_type):
    f = SAMPLE_FORMULAS[formula_type]
    assert fmt_formula(f)
    assert isinstance(free_variables(f), set)


@pytest.mark.parametrize("declaration_type", DECLARATION_TYPES)
def test_every_declaration_variant_prints(declaration_type):
    assert fmt_declaration(SAMPLE_DECLARATIONS[declaration_type])


# ── Property-based tests ─────────────────────────────────────────────────────

class TestPrinterProperties:

    @given(declarations)
    def test_declaration_is_one_sexp(self, d):
        expr = parse_sexp(fmt_declaration(d))
        assert isinstance(expr, list)
        assert expr[0] in ("declare-datatypes", "define-fun")

    @given(formulas)
    def test_formula_parens_balance(self, f):
        text = fmt_formula(f)
        assert text.count("(") == text.count(")")

    @given(formulas)
    def test_printing_is_deterministic(self, f):
        assert fmt_formula(f, 1) == fmt_formula(f, 1)
