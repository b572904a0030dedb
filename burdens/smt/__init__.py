from .formula import (
    SmtTrue, SmtFalse, SmtVariable, SmtConstructor0, SmtConstructor,
    Equality, Conjunction, Disjunction, Implication,
    TRUE, FALSE, FORMULA_TYPES, free_variables,
    Datatype, Relation2, Relation3, DECLARATION_TYPES,
)
from .printer import fmt_formula, fmt_declaration
from .axioms import (
    reflexivity, anti_symmetry, transitivity,
    upper_bound, least_upper_bound,
    ORDER_AXIOMS, JOIN_AXIOMS,
)

__all__ = [
    "SmtTrue", "SmtFalse", "SmtVariable", "SmtConstructor0", "SmtConstructor",
    "Equality", "Conjunction", "Disjunction", "Implication",
    "TRUE", "FALSE", "FORMULA_TYPES", "free_variables",
    "Datatype", "Relation2", "Relation3", "DECLARATION_TYPES",
    "fmt_formula", "fmt_declaration",
    "reflexivity", "anti_symmetry", "transitivity",
    "upper_bound", "least_upper_bound",
    "ORDER_AXIOMS", "JOIN_AXIOMS",
]
