"""
CLI entry point. Run as: python -m burdens --domain <name>
"""

import argparse
import sys

from .core.program import Program
from .domains import DOMAINS, make_program
from .synthesis import MalformedLatticeDomain
from .verifier import print_proof_burdens, write_proof_burdens


def main(argv=None):
    parser = argparse.ArgumentParser(description="Lattice proof burden generator")
    parser.add_argument(
        "--domain",
        choices=list(DOMAINS.keys()),
        default="sign",
        help="Which bundled program to verify",
    )
    parser.add_argument("--load",  type=str, default=None, help="Load program from JSON file")
    parser.add_argument("--save",  type=str, default=None, help="Save program to JSON file")
    parser.add_argument("--out",   type=str, default=None, help="Write proof burdens to file")
    parser.add_argument("--join-axioms", action="store_true",
                        help="Also emit upper-bound axioms for each join")
    parser.add_argument("--quiet", action="store_true", help="Less output")
    args = parser.parse_args(argv)

    # --- Load or build program ---
    if args.load:
        try:
            program = Program.load(args.load)
        except ValueError as e:
            print(f"error: cannot load {args.load}: {e}", file=sys.stderr)
            return 1
        if not args.quiet:
            print(f"Loaded program from {args.load} "
                  f"({len(program.lattices)} lattices, {len(program.clauses)} clauses)")
    else:
        program = make_program(args.domain)
        if not args.quiet:
            print(f"Domain: {args.domain}")
            print(f"  {DOMAINS[args.domain]['description']}")

    if args.save:
        program.save(args.save)
        if not args.quiet:
            print(f"Program saved to {args.save}")

    try:
        if args.out:
            write_proof_burdens(program, args.out, join_axioms=args.join_axioms,
                                verbose=not args.quiet)
        else:
            print_proof_burdens(program, join_axioms=args.join_axioms)
    except MalformedLatticeDomain as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
