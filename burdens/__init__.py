"""
Burdens: proof obligations for user-declared lattices.

Given a program whose lattices define their order and join by logic
clauses, emit SMT-LIB declarations and axioms whose validity shows that
each order is a partial order and that each relation means what its
clauses say. Discharging them is left to an external solver.

Usage:
    python -m burdens --domain sign
    python -m burdens --domain parity --join-axioms
    python -m burdens --load program.json --out burdens.smt2
"""

__version__ = "0.1.0"

from .core.program import (
    Bool, Variable, Constructor0,
    BoolType, Constructor0Type, ConstructorType, VariantType,
    Predicate, Clause, Lattice, Program,
)
from .core.unification import unify_terms, unify_predicates
from .synthesis import (
    MalformedLatticeDomain, as_formula, equalities,
    relation2, relation3, datatype,
)
from .smt.printer import fmt_formula, fmt_declaration
from .smt.axioms import reflexivity, anti_symmetry, transitivity
from .verifier import (
    proof_burdens, format_report, print_proof_burdens, write_proof_burdens,
)

__all__ = [
    "Bool", "Variable", "Constructor0",
    "BoolType", "Constructor0Type", "ConstructorType", "VariantType",
    "Predicate", "Clause", "Lattice", "Program",
    "unify_terms", "unify_predicates",
    "MalformedLatticeDomain", "as_formula", "equalities",
    "relation2", "relation3", "datatype",
    "fmt_formula", "fmt_declaration",
    "reflexivity", "anti_symmetry", "transitivity",
    "proof_burdens", "format_report", "print_proof_burdens", "write_proof_burdens",
]
