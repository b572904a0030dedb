"""
SMT-LIB formulas and declarations.

Formulas are immutable trees compared structurally. Build new trees
bottom-up; never patch one in place.

Implication and the n-ary constructor are part of the vocabulary but the
clause synthesizer does not produce them yet.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class SmtTrue:
    pass


@dataclass(frozen=True)
class SmtFalse:
    pass


@dataclass(frozen=True)
class SmtVariable:
    name: str


@dataclass(frozen=True)
class SmtConstructor0:
    name: str


@dataclass(frozen=True)
class SmtConstructor:
    """A constructor applied to argument formulas."""
    name: str
    args: tuple = ()


@dataclass(frozen=True)
class Equality:
    lhs: object
    rhs: object


@dataclass(frozen=True)
class Conjunction:
    formulas: tuple = ()


@dataclass(frozen=True)
class Disjunction:
    formulas: tuple = ()


@dataclass(frozen=True)
class Implication:
    antecedent: object
    consequent: object


TRUE = SmtTrue()
FALSE = SmtFalse()

FORMULA_TYPES = (
    SmtTrue, SmtFalse, SmtVariable, SmtConstructor0, SmtConstructor,
    Equality, Conjunction, Disjunction, Implication,
)


def free_variables(f) -> set:
    """Names of every variable mentioned anywhere in f."""
    if isinstance(f, (SmtTrue, SmtFalse, SmtConstructor0)):
        return set()
    if isinstance(f, SmtVariable):
        return {f.name}
    if isinstance(f, SmtConstructor):
        return set().union(*(free_variables(a) for a in f.args))
    if isinstance(f, Equality):
        return free_variables(f.lhs) | free_variables(f.rhs)
    if isinstance(f, (Conjunction, Disjunction)):
        return set().union(*(free_variables(g) for g in f.formulas))
    if isinstance(f, Implication):
        return free_variables(f.antecedent) | free_variables(f.consequent)
    raise TypeError(f"Unknown formula: {f!r}")


# --- Declarations ---

@dataclass(frozen=True)
class Datatype:
    """An enumerated sort: (declare-datatypes () ((Sort V1, V2, ...)))."""
    name: str
    variants: tuple = ()


@dataclass(frozen=True)
class Relation2:
    """A 2-ary boolean function over one sort."""
    name: str
    sort: str
    var1: str
    var2: str
    formula: object


@dataclass(frozen=True)
class Relation3:
    """A 3-ary boolean function over one sort."""
    name: str
    sort: str
    var1: str
    var2: str
    var3: str
    formula: object


DECLARATION_TYPES = (Datatype, Relation2, Relation3)
