"""
Domain: the sign lattice.

         Top
       /  |  \\
    Neg  Zero  Pos
       \\  |  /
         Bot

The order is given entirely by ground facts, so its define-fun is exact.
Join mixes ground facts, facts with variables (Bot and Top absorb) and one
commutativity rule, which contributes an unconstrained `true` case.
"""

from ..core.program import (
    Variable, Constructor0, Predicate, Lattice, Program,
    enum_type, fact, rule,
)

SIGN_DOMAIN = enum_type("Top", "Neg", "Zero", "Pos", "Bot")

LEQ = "sign_leq"
JOIN = "sign_join"

TOP, NEG, ZERO, POS, BOT = (Constructor0(n) for n in ("Top", "Neg", "Zero", "Pos", "Bot"))
x, y, z = Variable("x"), Variable("y"), Variable("z")

SIGN_LEQ = [
    fact(LEQ, BOT, BOT),
    fact(LEQ, BOT, NEG),
    fact(LEQ, BOT, ZERO),
    fact(LEQ, BOT, POS),
    fact(LEQ, BOT, TOP),
    fact(LEQ, NEG, NEG),
    fact(LEQ, NEG, TOP),
    fact(LEQ, ZERO, ZERO),
    fact(LEQ, ZERO, TOP),
    fact(LEQ, POS, POS),
    fact(LEQ, POS, TOP),
    fact(LEQ, TOP, TOP),
]

SIGN_JOIN = [
    fact(JOIN, BOT, x, x),
    fact(JOIN, x, BOT, x),
    fact(JOIN, TOP, x, TOP),
    fact(JOIN, x, TOP, TOP),
    fact(JOIN, NEG, NEG, NEG),
    fact(JOIN, ZERO, ZERO, ZERO),
    fact(JOIN, POS, POS, POS),
    fact(JOIN, NEG, ZERO, TOP),
    fact(JOIN, NEG, POS, TOP),
    fact(JOIN, ZERO, POS, TOP),
    rule(Predicate(JOIN, (x, y, z)), Predicate(JOIN, (y, x, z))),
]


def make_sign_program() -> Program:
    lattice = Lattice("Sign", SIGN_DOMAIN, LEQ, JOIN)
    return Program({lattice.name: lattice}, tuple(SIGN_LEQ + SIGN_JOIN))
