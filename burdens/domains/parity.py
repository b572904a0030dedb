"""
Domain: the parity lattice.

Top over Odd and Even over Bot. Reflexivity and the bounds are ground
facts; the order is closed under a transitivity rule, whose case is left
unconstrained. Join is ground throughout.
"""

from ..core.program import (
    Variable, Constructor0, Predicate, Lattice, Program,
    enum_type, fact, rule,
)

PARITY_DOMAIN = enum_type("Top", "Odd", "Even", "Bot")

LEQ = "parity_leq"
JOIN = "parity_join"

TOP, ODD, EVEN, BOT = (Constructor0(n) for n in ("Top", "Odd", "Even", "Bot"))
x, y, z = Variable("x"), Variable("y"), Variable("z")

PARITY_LEQ = [
    fact(LEQ, BOT, BOT),
    fact(LEQ, ODD, ODD),
    fact(LEQ, EVEN, EVEN),
    fact(LEQ, TOP, TOP),
    fact(LEQ, BOT, ODD),
    fact(LEQ, BOT, EVEN),
    fact(LEQ, ODD, TOP),
    fact(LEQ, EVEN, TOP),
    rule(Predicate(LEQ, (x, z)), Predicate(LEQ, (x, y)), Predicate(LEQ, (y, z))),
]

ELEMENTS = [BOT, ODD, EVEN, TOP]


def parity_join(a, b):
    if a == b:
        return a
    if a == BOT:
        return b
    if b == BOT:
        return a
    return TOP


PARITY_JOIN = [fact(JOIN, a, b, parity_join(a, b)) for a in ELEMENTS for b in ELEMENTS]


def make_parity_program() -> Program:
    lattice = Lattice("Parity", PARITY_DOMAIN, LEQ, JOIN)
    return Program({lattice.name: lattice}, tuple(PARITY_LEQ + PARITY_JOIN))
