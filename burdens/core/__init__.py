from .program import (
    Bool, Variable, Constructor0, TERM_TYPES,
    BoolType, Constructor0Type, ConstructorType, VariantType, TYPE_TYPES,
    Predicate, Clause, Lattice, Program,
    enum_type, fact, rule,
)
from .unification import walk, apply_substitution, unify_terms, unify_predicates

__all__ = [
    "Bool", "Variable", "Constructor0", "TERM_TYPES",
    "BoolType", "Constructor0Type", "ConstructorType", "VariantType", "TYPE_TYPES",
    "Predicate", "Clause", "Lattice", "Program",
    "enum_type", "fact", "rule",
    "walk", "apply_substitution", "unify_terms", "unify_predicates",
]
