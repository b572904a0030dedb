"""
Core data structures: terms, predicates, clauses, lattices, programs.

These are the inputs of the whole system. A Program arrives fully built
from an external loader and is never mutated here.

Terms:
    Bool(True)          -> boolean literal
    Variable("x")       -> logic variable, unbound unless a substitution says otherwise
    Constructor0("Bot") -> nullary constructor, a value of an enumerated domain

    Predicate("leq", (Constructor0("Bot"), Variable("x")))  ->  leq(Bot, x)

    A Clause is a head predicate plus a (possibly empty) body of atoms.
    An empty body makes the clause a fact.

Domain types:
    VariantType((Constructor0Type("Top"), Constructor0Type("Bot")))
    is the only shape a lattice domain may take.
"""

from dataclasses import dataclass, field
import json


# --- Terms ---

@dataclass(frozen=True)
class Bool:
    """A boolean literal."""
    value: bool

    def __repr__(self):
        return "true" if self.value else "false"


@dataclass(frozen=True)
class Variable:
    """A logic variable."""
    name: str

    def __repr__(self):
        return self.name


@dataclass(frozen=True)
class Constructor0:
    """A nullary constructor: one value of an enumerated domain."""
    name: str

    def __repr__(self):
        return self.name


TERM_TYPES = (Bool, Variable, Constructor0)


# --- Domain types ---

@dataclass(frozen=True)
class BoolType:
    pass


@dataclass(frozen=True)
class Constructor0Type:
    name: str


@dataclass(frozen=True)
class ConstructorType:
    """A constructor carrying fields. Never valid inside a lattice domain."""
    name: str
    fields: tuple = ()


@dataclass(frozen=True)
class VariantType:
    """A sum of alternatives, in declared order."""
    alternatives: tuple = ()


TYPE_TYPES = (BoolType, Constructor0Type, ConstructorType, VariantType)


# --- Program ---

@dataclass(frozen=True)
class Predicate:
    name: str
    args: tuple = ()

    @property
    def arity(self):
        return len(self.args)

    def __repr__(self):
        return f"{self.name}({', '.join(repr(a) for a in self.args)})"


@dataclass(frozen=True)
class Clause:
    """
    head :- body.

    Facts have an empty body; everything else is a rule.
    """
    head: Predicate
    body: tuple = ()

    @property
    def is_fact(self):
        return len(self.body) == 0

    def __repr__(self):
        if self.is_fact:
            return f"{self.head!r}."
        return f"{self.head!r} :- {', '.join(repr(b) for b in self.body)}."


@dataclass(frozen=True)
class Lattice:
    """A declared lattice: a finite domain, its order and its join."""
    name: str
    domain: object
    leq: str
    join: str


@dataclass
class Program:
    """
    A parsed program: lattices by name (declaration order kept) and
    clauses in source order.
    """
    lattices: dict = field(default_factory=dict)
    clauses: tuple = ()

    def clauses_for(self, name: str) -> list:
        """Clauses whose head is the predicate `name`, in program order."""
        return [c for c in self.clauses if c.head.name == name]

    def to_dict(self):
        return {
            "lattices": [
                {"name": lat.name, "domain": serialize_type(lat.domain),
                 "leq": lat.leq, "join": lat.join}
                for lat in self.lattices.values()
            ],
            "clauses": [
                {"head": serialize_predicate(c.head),
                 "body": [serialize_predicate(p) for p in c.body]}
                for c in self.clauses
            ],
        }

    @classmethod
    def from_dict(cls, d):
        try:
            lattices = {}
            for data in d.get("lattices", []):
                lattices[data["name"]] = Lattice(
                    data["name"], deserialize_type(data["domain"]),
                    data["leq"], data["join"],
                )
            clauses = tuple(
                Clause(deserialize_predicate(data["head"]),
                       tuple(deserialize_predicate(p) for p in data.get("body", [])))
                for data in d.get("clauses", [])
            )
        except KeyError as e:
            raise ValueError(f"Missing field in program description: {e.args[0]!r}") from e
        return cls(lattices, clauses)

    def save(self, path="program.json"):
        with open(path, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load(cls, path="program.json"):
        with open(path, encoding="utf-8") as f:
            return cls.from_dict(json.load(f))


# --- JSON encoding ---
# Terms:  {"bool": true} | {"var": "x"} | {"tag": "Bot"}
# Types:  {"bool": null} | {"tag": "Bot"} | {"tag": "Cst", "fields": [...]}
#         | {"variant": [...]}

def serialize_term(t):
    if isinstance(t, Bool):
        return {"bool": t.value}
    if isinstance(t, Variable):
        return {"var": t.name}
    if isinstance(t, Constructor0):
        return {"tag": t.name}
    raise TypeError(f"Unknown term: {t!r}")


def deserialize_term(data):
    if "bool" in data:
        return Bool(bool(data["bool"]))
    if "var" in data:
        return Variable(data["var"])
    if "tag" in data:
        return Constructor0(data["tag"])
    raise ValueError(f"Unknown term encoding: {data!r}")


def serialize_predicate(p: Predicate):
    return {"name": p.name, "args": [serialize_term(a) for a in p.args]}


def deserialize_predicate(data) -> Predicate:
    return Predicate(data["name"], tuple(deserialize_term(a) for a in data.get("args", [])))


def serialize_type(t):
    if isinstance(t, BoolType):
        return {"bool": None}
    if isinstance(t, Constructor0Type):
        return {"tag": t.name}
    if isinstance(t, ConstructorType):
        return {"tag": t.name, "fields": [serialize_type(f) for f in t.fields]}
    if isinstance(t, VariantType):
        return {"variant": [serialize_type(a) for a in t.alternatives]}
    raise TypeError(f"Unknown type: {t!r}")


def deserialize_type(data):
    if "variant" in data:
        return VariantType(tuple(deserialize_type(a) for a in data["variant"]))
    if "tag" in data:
        if "fields" in data:
            return ConstructorType(data["tag"], tuple(deserialize_type(f) for f in data["fields"]))
        return Constructor0Type(data["tag"])
    if "bool" in data:
        return BoolType()
    raise ValueError(f"Unknown type encoding: {data!r}")


# --- Construction helpers ---

def enum_type(*names) -> VariantType:
    """VariantType of nullary constructors, in the given order."""
    return VariantType(tuple(Constructor0Type(n) for n in names))


def fact(name: str, *args) -> Clause:
    return Clause(Predicate(name, tuple(args)))


def rule(head: Predicate, *body) -> Clause:
    return Clause(head, tuple(body))
