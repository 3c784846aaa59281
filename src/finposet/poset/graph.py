"""
Poset encoded as a directed graph of the full order relation.
"""

import logging
from typing import Dict, Iterable, Set

from ..exceptions import MalformedRelation
from .base import Poset
from .metadata import Known, KnownAbsent, MetaData

logger = logging.getLogger(__name__)

Graph = Dict[int, Set[int]]


def check_graph(g: Graph) -> None:
    """
    Check that ``g`` maps every element to the set of elements above it,
    itself included, and that the relation is a partial order.

    Raises:
        MalformedRelation: Naming the first violation found
    """
    for i, above in g.items():
        unknown = above - g.keys()
        if unknown:
            raise MalformedRelation(f"Element {i} is related to unknown elements {sorted(unknown)}.")
        if i not in above:
            raise MalformedRelation(f"Relation is not reflexive: {i} <= {i} does not hold.")
    for i, above in g.items():
        for j in above:
            if j == i:
                continue
            if i in g[j]:
                raise MalformedRelation(f"Relation is not antisymmetric: {i} <= {j} and {j} <= {i}.")
            missing = g[j] - above
            if missing:
                k = min(missing)
                raise MalformedRelation(f"Relation is not transitive: {i} <= {j} <= {k} but not {i} <= {k}.")


class PosetG(Poset):
    """
    A poset stored as a mapping ``g`` from each element to the set of all
    elements greater than or equal to it, the element itself included.
    """

    def __init__(self, g: Graph, validate: bool = True):
        g = {int(i): set(above) for i, above in g.items()}
        if validate:
            try:
                check_graph(g)
            except MalformedRelation as e:
                logger.warning("Rejected graph payload: %s", e)
                raise
        self.g = g
        self._elements = self._universe_of(g)
        self.md = MetaData(len(g))

    def leq(self, x: int, y: int) -> bool:
        self._check_element(x)
        self._check_element(y)
        return y in self.g[x]

    def find_bot(self) -> None:
        # g[i] holds i itself, so the bottom reaches all n elements
        found = [i for i in self._elements if len(self.g[i]) == self.md.n]
        self.md.bot = Known(found[0]) if found else KnownAbsent

    def find_minimals(self) -> None:
        above_something = set()
        for i, above in self.g.items():
            above_something.update(above - {i})
        self.md.minimals = frozenset(i for i in self._elements if i not in above_something)

    def find_maximals(self) -> None:
        self.md.maximals = frozenset(i for i in self._elements if len(self.g[i]) == 1)

    def op(self) -> "PosetG":
        below: Graph = {i: set() for i in self._elements}
        for i, above in self.g.items():
            for j in above:
                below[j].add(i)
        return PosetG(below, validate=False)

    def _adjoin_bot_payload(self, new: int) -> None:
        self.g[new] = set(self._elements) | {new}

    def _adjoin_top_payload(self, new: int) -> None:
        for above in self.g.values():
            above.add(new)
        self.g[new] = {new}

    def sub(self, selector: Iterable[int]) -> "PosetG":
        selector = self._check_selector(selector)
        return PosetG({i: self.g[i] & selector for i in selector}, validate=False)

    @classmethod
    def new_chain(cls, n: int) -> "PosetG":
        return cls({i: set(range(i, n)) for i in range(n)}, validate=False)

    @classmethod
    def new_antichain(cls, n: int) -> "PosetG":
        return cls({i: {i} for i in range(n)}, validate=False)

    def __eq__(self, other) -> bool:
        if not isinstance(other, PosetG):
            return NotImplemented
        return self.g == other.g

    def __repr__(self) -> str:
        body = ", ".join(f"{i}: {sorted(self.g[i])}" for i in self._elements)
        return f"PosetG(n={self.md.n}, g={{{body}}})"
