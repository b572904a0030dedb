"""
Render formulas and declarations as SMT-LIB text.

Purely structural: the output depends on nothing but the tree.
Disjunctions are the only multi-line construct; each disjunct goes on its
own line, one INDENT deeper than the enclosing level.
"""

from .formula import (
    SmtTrue, SmtFalse, SmtVariable, SmtConstructor0, SmtConstructor,
    Equality, Conjunction, Disjunction, Implication,
    Datatype, Relation2, Relation3,
)

INDENT = "    "


def fmt_formula(f, indent: int = 0) -> str:
    if isinstance(f, SmtTrue):
        return "true"
    if isinstance(f, SmtFalse):
        return "false"
    if isinstance(f, (SmtVariable, SmtConstructor0)):
        return f.name
    if isinstance(f, SmtConstructor):
        if not f.args:
            return f.name
        return f"({f.name} " + " ".join(fmt_formula(a, indent) for a in f.args) + ")"
    if isinstance(f, Equality):
        return f"(= {fmt_formula(f.lhs, indent)} {fmt_formula(f.rhs, indent)})"
    if isinstance(f, Conjunction):
        if not f.formulas:
            return "true"
        return "(and " + " ".join(fmt_formula(g, indent) for g in f.formulas) + ")"
    if isinstance(f, Disjunction):
        if not f.formulas:
            return "false"
        pad = "\n" + INDENT * (indent + 1)
        return "(or" + pad + pad.join(fmt_formula(g, indent + 1) for g in f.formulas) + ")"
    if isinstance(f, Implication):
        return f"(=> {fmt_formula(f.antecedent, indent)} {fmt_formula(f.consequent, indent)})"
    raise TypeError(f"Unknown formula: {f!r}")


def fmt_params(sort: str, *names) -> str:
    """((x0 Sort) (y0 Sort) ...)"""
    return "(" + " ".join(f"({n} {sort})" for n in names) + ")"


def fmt_declaration(d) -> str:
    if isinstance(d, Datatype):
        return f"(declare-datatypes () (({d.name} " + ", ".join(d.variants) + ")))"
    if isinstance(d, Relation2):
        params = fmt_params(d.sort, d.var1, d.var2)
        return f"(define-fun {d.name} {params} Bool\n{INDENT}{fmt_formula(d.formula, 1)})"
    if isinstance(d, Relation3):
        params = fmt_params(d.sort, d.var1, d.var2, d.var3)
        return f"(define-fun {d.name} {params} Bool\n{INDENT}{fmt_formula(d.formula, 1)})"
    raise TypeError(f"Unknown declaration: {d!r}")
