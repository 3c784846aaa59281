"""
Poset encoded as its Hasse diagram (the covering relation).
"""

import logging
from collections import deque
from typing import Dict, Iterable, Set

from ..exceptions import MalformedRelation
from .base import Poset
from .metadata import Known, KnownAbsent, MetaData

logger = logging.getLogger(__name__)

Covers = Dict[int, Set[int]]


class PosetH(Poset):
    """
    A poset stored as a mapping ``h`` from each element to the elements that
    cover it. The mapping is neither reflexive nor transitive; queries that
    need the full order walk the cover edges breadth first.

    Only cheap checks run at construction time (known elements, no
    self-loops). A cycle in the cover edges is reported as
    ``MalformedRelation`` when the closure is computed.
    """

    def __init__(self, h: Covers, validate: bool = True):
        h = {int(i): set(up) for i, up in h.items()}
        if validate:
            try:
                self._check_covers(h)
            except MalformedRelation as e:
                logger.warning("Rejected cover payload: %s", e)
                raise
        self.h = h
        self._elements = self._universe_of(h)
        self.md = MetaData(len(h))

    @staticmethod
    def _check_covers(h: Covers) -> None:
        for i, up in h.items():
            unknown = up - h.keys()
            if unknown:
                raise MalformedRelation(f"Element {i} is covered by unknown elements {sorted(unknown)}.")
            if i in up:
                raise MalformedRelation(f"Element {i} cannot cover itself.")

    # ------------------------------------------------------------------
    # Reachability
    # ------------------------------------------------------------------
    def reachable(self, x: int) -> Set[int]:
        """All elements y with x <= y: x itself plus everything reachable along cover edges."""
        self._check_element(x)
        seen = {x}
        queue = deque([x])
        while queue:
            i = queue.popleft()
            for j in self.h[i]:
                if j not in seen:
                    seen.add(j)
                    queue.append(j)
        return seen

    def closure(self) -> Dict[int, Set[int]]:
        """
        The reflexive-transitive closure as a graph mapping.

        Raises:
            MalformedRelation: If the cover edges contain a cycle
        """
        g = {i: self.reachable(i) for i in self._elements}
        for i, above in g.items():
            for j in above:
                if j != i and i in g[j]:
                    raise MalformedRelation(f"Cover edges contain a cycle through {i} and {j}.")
        return g

    def _covered(self) -> Set[int]:
        covered = set()
        for up in self.h.values():
            covered.update(up)
        return covered

    # ------------------------------------------------------------------
    # Contract
    # ------------------------------------------------------------------
    def leq(self, x: int, y: int) -> bool:
        self._check_element(y)
        if x == y:
            self._check_element(x)
            return True
        return y in self.reachable(x)

    def find_bot(self) -> None:
        self.find_minimals()
        bot = KnownAbsent
        if len(self.md.minimals) == 1:
            candidate = next(iter(self.md.minimals))
            if len(self.reachable(candidate)) == self.md.n:
                bot = Known(candidate)
        self.md.bot = bot

    def find_minimals(self) -> None:
        # in a finite poset, x is minimal iff nothing is covered by x from below
        covered = self._covered()
        self.md.minimals = frozenset(i for i in self._elements if i not in covered)

    def find_maximals(self) -> None:
        self.md.maximals = frozenset(i for i in self._elements if not self.h[i])

    def op(self) -> "PosetH":
        down: Covers = {i: set() for i in self._elements}
        for i, up in self.h.items():
            for j in up:
                down[j].add(i)
        return PosetH(down, validate=False)

    def _adjoin_bot_payload(self, new: int) -> None:
        covered = self._covered()
        self.h[new] = {i for i in self._elements if i not in covered}

    def _adjoin_top_payload(self, new: int) -> None:
        for up in self.h.values():
            if not up:
                up.add(new)
        self.h[new] = set()

    def sub(self, selector: Iterable[int]) -> "PosetH":
        """
        Induced sub-poset. Covers are recomputed from the restricted closure:
        x and y may become a covering pair once the elements between them are
        left out.
        """
        from ..utils.conversion_utils import ConversionUtils

        selector = self._check_selector(selector)
        restricted = {i: self.reachable(i) & selector for i in selector}
        return PosetH(ConversionUtils.cover_sets(restricted), validate=False)

    @classmethod
    def new_chain(cls, n: int) -> "PosetH":
        return cls({i: ({i + 1} if i + 1 < n else set()) for i in range(n)}, validate=False)

    @classmethod
    def new_antichain(cls, n: int) -> "PosetH":
        return cls({i: set() for i in range(n)}, validate=False)

    def __eq__(self, other) -> bool:
        if not isinstance(other, PosetH):
            return NotImplemented
        return self.h == other.h

    def __repr__(self) -> str:
        body = ", ".join(f"{i}: {sorted(self.h[i])}" for i in self._elements)
        return f"PosetH(n={self.md.n}, h={{{body}}})"
