"""
Domain registry.

Each domain is a dict describing a bundled example program:
    make_program:  () -> Program
    description:   str
"""

from ..core.program import Program
from .sign import make_sign_program
from .parity import make_parity_program
from .constant import make_constant_program


def make_analysis_program() -> Program:
    """Sign and Parity declared side by side in one program."""
    sign = make_sign_program()
    parity = make_parity_program()
    return Program(
        {**sign.lattices, **parity.lattices},
        sign.clauses + parity.clauses,
    )


DOMAINS = {
    "sign": {
        "make_program": make_sign_program,
        "description":  "Sign lattice: Top, Neg, Zero, Pos, Bot",
    },
    "parity": {
        "make_program": make_parity_program,
        "description":  "Parity lattice: Top, Odd, Even, Bot",
    },
    "constant": {
        "make_program": make_constant_program,
        "description":  "Constant propagation lattice: Top, Zero, One, Two, Bot",
    },
    "analysis": {
        "make_program": make_analysis_program,
        "description":  "Sign and Parity lattices in one program",
    },
}


def make_program(domain: str) -> Program:
    if domain not in DOMAINS:
        raise ValueError(
            f"Unknown domain: {domain!r}. "
            f"Choose from: {list(DOMAINS.keys())}"
        )
    return DOMAINS[domain]["make_program"]()
