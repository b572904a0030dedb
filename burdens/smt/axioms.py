"""
Order axioms as fixed SMT-LIB templates.

Each template is a pure function of a sort name and relation name(s); none
of them looks at the program's clauses. The bound variable names x, y, z
(and w) are part of the templates and never vary.

    reflexivity:        ∀x. x ⊑ x
    anti-symmetry:      ∀x, y. x ⊑ y ∧ y ⊑ x ⇒ x = y
    transitivity:       ∀x, y, z. x ⊑ y ∧ y ⊑ z ⇒ x ⊑ z
    upper-bound:        ∀x, y, z. x ⊔ y = z ⇒ x ⊑ z ∧ y ⊑ z
    least-upper-bound:  ∀x, y, z, w. x ⊔ y = z ∧ x ⊑ w ∧ y ⊑ w ⇒ z ⊑ w
"""


def forall(sort: str, *names) -> str:
    """(forall ((x Sort) (y Sort) ...)"""
    return "(forall (" + " ".join(f"({n} {sort})" for n in names) + ")"


def reflexivity(sort: str, leq: str) -> str:
    return f"(define-fun reflexivity () Bool {forall(sort, 'x')} ({leq} x x)))"


def anti_symmetry(sort: str, leq: str) -> str:
    return (
        f"(define-fun anti-symmetri () Bool {forall(sort, 'x', 'y')} "
        f"(=> (and ({leq} x y) ({leq} y x)) (= x y))))"
    )


def transitivity(sort: str, leq: str) -> str:
    return (
        f"(define-fun transitivity () Bool {forall(sort, 'x', 'y', 'z')} "
        f"(=> (and ({leq} x y) ({leq} y z)) ({leq} x z))))"
    )


def upper_bound(sort: str, leq: str, join: str) -> str:
    return (
        f"(define-fun upper-bound () Bool {forall(sort, 'x', 'y', 'z')} "
        f"(=> ({join} x y z) (and ({leq} x z) ({leq} y z)))))"
    )


def least_upper_bound(sort: str, leq: str, join: str) -> str:
    return (
        f"(define-fun least-upper-bound () Bool {forall(sort, 'x', 'y', 'z', 'w')} "
        f"(=> (and ({join} x y z) ({leq} x w) ({leq} y w)) ({leq} z w))))"
    )


# (template, comment line printed above it in the report)
ORDER_AXIOMS = [
    (reflexivity, ";; Reflexivity: ∀x. x ⊑ x"),
    (anti_symmetry, ";; Anti-symmetri: ∀x, y. x ⊑ y ∧ x ⊒ y ⇒ x = y"),
    (transitivity, ";; Transitivity: ∀x, y, z. x ⊑ y ∧ y ⊑ z ⇒ x ⊑ z."),
]

JOIN_AXIOMS = [
    (upper_bound, ";; Upper bound: ∀x, y, z. x ⊔ y = z ⇒ x ⊑ z ∧ y ⊑ z"),
    (least_upper_bound, ";; Least upper bound: ∀x, y, z, w. x ⊔ y = z ∧ x ⊑ w ∧ y ⊑ w ⇒ z ⊑ w"),
]
