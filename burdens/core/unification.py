"""
Syntactic unification over the flat term language.

Terms are booleans, variables and nullary constructors (see program.py).
There are no compound terms, so there is no occurs check: a variable can
only ever be bound to a literal, a constructor or another variable.

Substitutions are plain dicts {variable name: Term}. They are never
mutated; every binding returns a fresh dict, and insertion order is the
order bindings were made, which keeps downstream output reproducible.

Unification failure is not an error: it is reported as None.
"""

from .program import Bool, Variable, Constructor0, Predicate


def walk(term, sub: dict):
    """Follow variable bindings until an unbound variable or a non-variable."""
    while isinstance(term, Variable) and term.name in sub:
        term = sub[term.name]
    return term


def apply_substitution(sub: dict, term):
    """Apply a substitution to a single term. Follows chains."""
    if isinstance(term, Variable):
        if term.name in sub:
            return apply_substitution(sub, sub[term.name])
    return term


def unify_terms(t1, t2, sub=None):
    """
    Unify two terms under substitution sub.

    Returns the updated substitution dict, or None if unification fails.

    A bound variable on either side is replaced by its binding and the
    attempt repeats. An unbound variable on the left is bound first, so the
    argument order decides which names end up as keys.
    """
    if sub is None:
        sub = {}

    if isinstance(t1, Variable):
        if t1.name in sub:
            return unify_terms(sub[t1.name], t2, sub)
        if walk(t2, sub) == t1:
            return sub
        sub = dict(sub)
        sub[t1.name] = t2
        return sub

    if isinstance(t2, Variable):
        if t2.name in sub:
            return unify_terms(t1, sub[t2.name], sub)
        sub = dict(sub)
        sub[t2.name] = t1
        return sub

    if isinstance(t1, Bool) and isinstance(t2, Bool):
        return sub if t1.value == t2.value else None

    if isinstance(t1, Constructor0) and isinstance(t2, Constructor0):
        return sub if t1.name == t2.name else None

    if isinstance(t1, (Bool, Constructor0)) and isinstance(t2, (Bool, Constructor0)):
        return None  # literal against constructor

    raise TypeError(f"Cannot unify {t1!r} with {t2!r}")


def unify_predicates(p1: Predicate, p2: Predicate, sub=None):
    """
    Unify two predicates argument by argument, left to right.
    Same name and arity required. Returns substitution or None.
    """
    if p1.name != p2.name:
        return None
    if len(p1.args) != len(p2.args):
        return None
    if sub is None:
        sub = {}
    for a1, a2 in zip(p1.args, p2.args):
        sub = unify_terms(a1, a2, sub)
        if sub is None:
            return None
    return sub
