"""
Clause-driven synthesis of relation definitions.

For a relation p, every clause whose head is p becomes one disjunct:

    fact   -> unify the call pattern p(x0, y0[, z0]) with the head and
              turn the substitution into a conjunction of equalities
    rule   -> true (rule bodies are not translated; the relation is
              left unconstrained for that case)
    no unifier -> true

The disjunction of those cases, in clause order, is the body of the
define-fun for p.
"""

from .core.program import (
    Bool, Variable, Constructor0,
    Constructor0Type, VariantType,
    Predicate, Program,
)
from .core.unification import apply_substitution, unify_predicates
from .smt.formula import (
    TRUE, FALSE, SmtVariable, SmtConstructor0,
    Equality, Conjunction, Disjunction,
    Datatype, Relation2, Relation3,
    free_variables,
)

# Formal parameter names of every synthesized define-fun. Fixed, not fresh:
# each define-fun binds its own.
X, Y, Z = "x0", "y0", "z0"


class MalformedLatticeDomain(ValueError):
    """A lattice domain that is not an enumeration of nullary constructors."""

    def __init__(self, lattice: str, domain):
        self.lattice = lattice
        self.domain = domain
        super().__init__(
            f"Lattice {lattice!r} has a domain that is not a finite enumeration "
            f"of nullary constructors: {domain!r}"
        )


def as_formula(term, sub: dict):
    """The formula for `term` once every binding in `sub` is applied."""
    term = apply_substitution(sub, term)
    if isinstance(term, Bool):
        return TRUE if term.value else FALSE
    if isinstance(term, Variable):
        return SmtVariable(term.name)
    if isinstance(term, Constructor0):
        return SmtConstructor0(term.name)
    raise TypeError(f"Unknown term: {term!r}")


def equalities(bound: set, sub: dict) -> Conjunction:
    """
    One equality per binding, in binding order.

    An equality whose right side still mentions a variable that is neither
    a formal parameter nor bound by `sub` is left out, so the conjunction
    can be weaker than the clause.
    """
    eqs = []
    for name, term in sub.items():
        eq = Equality(SmtVariable(name), as_formula(term, sub))
        if any(v not in bound and v not in sub for v in free_variables(eq)):
            continue  # free variable leaked from the clause
        eqs.append(eq)
    return Conjunction(tuple(eqs))


def clause_formula(clause, sub, bound: set):
    if sub is None:
        return TRUE
    if not clause.is_fact:
        return TRUE  # TODO: translate rule bodies
    return equalities(bound, sub)


def relation2(program: Program, sort: str, name: str) -> Relation2:
    """define-fun for the 2-ary relation `name` (the lattice order)."""
    pattern = Predicate(name, (Variable(X), Variable(Y)))
    cases = []
    for clause in program.clauses_for(name):
        sub = unify_predicates(clause.head, pattern)
        cases.append(clause_formula(clause, sub, {X, Y}))
    return Relation2(name, sort, X, Y, Disjunction(tuple(cases)))


def relation3(program: Program, sort: str, name: str) -> Relation3:
    """define-fun for the 3-ary relation `name` (the lattice join)."""
    pattern = Predicate(name, (Variable(X), Variable(Y), Variable(Z)))
    cases = []
    for clause in program.clauses_for(name):
        sub = unify_predicates(pattern, clause.head)
        cases.append(clause_formula(clause, sub, {X, Y, Z}))
    return Relation3(name, sort, X, Y, Z, Disjunction(tuple(cases)))


def datatype(name: str, domain) -> Datatype:
    """
    Datatype declaration for an enumerated lattice domain.

    Raises MalformedLatticeDomain unless `domain` is a non-empty VariantType
    whose alternatives are all nullary constructors.
    """
    if not isinstance(domain, VariantType) or not domain.alternatives:
        raise MalformedLatticeDomain(name, domain)
    if not all(isinstance(alt, Constructor0Type) for alt in domain.alternatives):
        raise MalformedLatticeDomain(name, domain)
    return Datatype(name, tuple(alt.name for alt in domain.alternatives))
