"""
Domain: constant propagation over a small set of integers.

              Top
          /    |    \\
      Zero    One    Two
          \\    |    /
              Bot

Reflexivity comes from a rule over an element predicate, so its case is
unconstrained. Join uses variable-carrying facts; join(x, x, x) binds
every parameter to the clause's own x, which is left free, so the whole
case collapses to `true`.
"""

from ..core.program import (
    Variable, Constructor0, Predicate, Lattice, Program,
    enum_type, fact, rule,
)

CONSTANT_DOMAIN = enum_type("Top", "Zero", "One", "Two", "Bot")

LEQ = "constant_leq"
JOIN = "constant_join"
ELEM = "constant_elem"

TOP, ZERO, ONE, TWO, BOT = (Constructor0(n) for n in ("Top", "Zero", "One", "Two", "Bot"))
CONSTANTS = [ZERO, ONE, TWO]
x = Variable("x")

CONSTANT_ELEM = [fact(ELEM, c) for c in [BOT] + CONSTANTS + [TOP]]

CONSTANT_LEQ = (
    [fact(LEQ, BOT, c) for c in CONSTANTS + [TOP]]
    + [fact(LEQ, c, TOP) for c in CONSTANTS]
    + [rule(Predicate(LEQ, (x, x)), Predicate(ELEM, (x,)))]
)

CONSTANT_JOIN = [
    fact(JOIN, BOT, x, x),
    fact(JOIN, x, BOT, x),
    fact(JOIN, x, x, x),
    fact(JOIN, TOP, x, TOP),
    fact(JOIN, x, TOP, TOP),
] + [fact(JOIN, a, b, TOP) for a in CONSTANTS for b in CONSTANTS if a != b]


def make_constant_program() -> Program:
    lattice = Lattice("Constant", CONSTANT_DOMAIN, LEQ, JOIN)
    return Program({lattice.name: lattice},
                   tuple(CONSTANT_ELEM + CONSTANT_LEQ + CONSTANT_JOIN))
