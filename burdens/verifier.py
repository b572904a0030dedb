"""
Proof burdens for every lattice in a program.

For each lattice, in declaration order:
    datatype for its domain
    define-fun for leq (from leq's clauses)
    define-fun for join (from join's clauses)
    reflexivity, anti-symmetry, transitivity of leq
    [upper-bound, least-upper-bound of join, when join_axioms=True]

proof_burdens() only builds text. Printing and file output live in the
report helpers below.
"""

from pathlib import Path

from .core.program import Program, Lattice
from .smt.printer import fmt_declaration
from .smt.axioms import ORDER_AXIOMS, JOIN_AXIOMS
from .synthesis import datatype, relation2, relation3


def lattice_declarations(program: Program, lattice: Lattice) -> list:
    """Rendered datatype, leq and join declarations for one lattice."""
    return [
        fmt_declaration(datatype(lattice.name, lattice.domain)),
        fmt_declaration(relation2(program, lattice.name, lattice.leq)),
        fmt_declaration(relation3(program, lattice.name, lattice.join)),
    ]


def lattice_axioms(lattice: Lattice, join_axioms: bool = False) -> list:
    """(comment, axiom) pairs for one lattice."""
    axioms = [(comment, template(lattice.name, lattice.leq))
              for template, comment in ORDER_AXIOMS]
    if join_axioms:
        axioms += [(comment, template(lattice.name, lattice.leq, lattice.join))
                   for template, comment in JOIN_AXIOMS]
    return axioms


def proof_burdens(program: Program, join_axioms: bool = False) -> list:
    """
    Every proof burden of the program as SMT-LIB text, in output order.

    Raises MalformedLatticeDomain if some lattice's domain is not an
    enumeration; nothing is produced for the program in that case.
    """
    burdens = []
    for lattice in program.lattices.values():
        burdens += lattice_declarations(program, lattice)
        burdens += [axiom for _, axiom in lattice_axioms(lattice, join_axioms)]
    return burdens


def format_report(program: Program, join_axioms: bool = False) -> str:
    """The proof burdens laid out for reading, with separators and comments."""
    lines = ["Proof Burdens"]
    for lattice in program.lattices.values():
        lines.append("~~~~~~~~")
        for text in lattice_declarations(program, lattice):
            lines.append(text)
            lines.append("")
        lines.append("~~~~~~~~")
        for comment, axiom in lattice_axioms(lattice, join_axioms):
            lines.append(comment)
            lines.append(axiom)
            lines.append("")
    return "\n".join(lines)


def print_proof_burdens(program: Program, join_axioms: bool = False):
    """Pretty-print the proof burdens, closed by a summary banner."""
    print(format_report(program, join_axioms))
    burdens = proof_burdens(program, join_axioms)
    print(f"{'='*60}")
    print(f"  {len(burdens)} proof burdens for {len(program.lattices)} lattice(s).")
    print("  Discharge them with an SMT solver to certify each lattice.")
    print(f"{'='*60}")


def write_proof_burdens(program: Program, path, join_axioms: bool = False,
                        verbose: bool = False) -> Path:
    """Write the proof burdens to `path`, one blank line apart. Returns the path."""
    burdens = proof_burdens(program, join_axioms)
    out_path = Path(path)
    out_path.write_text("\n\n".join(burdens) + "\n", encoding="utf-8")
    if verbose:
        print(f"{len(burdens)} proof burdens for {len(program.lattices)} lattice(s) "
              f"written to {out_path}")
    return out_path
