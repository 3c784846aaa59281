"""
Poset encoded as a boolean matrix.
"""

import logging
from typing import Iterable, Optional, Sequence

import numpy as np

from ..exceptions import MalformedRelation
from ..utils.basic_utils import BasicUtils
from .base import Poset
from .metadata import Known, KnownAbsent, MetaData

logger = logging.getLogger(__name__)


class PosetM(Poset):
    """
    A poset whose relation is an n x n boolean numpy array ``m``, where
    ``m[i, j]`` holds iff the i-th element is <= the j-th element.

    Rows and columns follow the ascending order of the universe.
    """

    def __init__(self, m, elements: Optional[Sequence[int]] = None, validate: bool = True):
        """
        Args:
            m: Square matrix (nested sequences or numpy array) of the relation
            elements: Ascending element identifiers for the rows, ``range(n)`` by default
            validate: Check reflexivity, antisymmetry and transitivity

        Raises:
            MalformedRelation: If the matrix is not a partial order
        """
        m = BasicUtils.as_bool_matrix(m)
        n = m.shape[0]
        if elements is None:
            elements = range(n)
        else:
            elements = self._checked_universe(elements, n)
        if validate:
            try:
                BasicUtils.check_partial_order(m)
            except MalformedRelation as e:
                logger.warning("Rejected matrix payload: %s", e)
                raise
        self.m = m
        self._elements = elements
        self._index = BasicUtils.positions(elements)
        self.md = MetaData(n)

    @classmethod
    def _checked_universe(cls, elements: Iterable[int], n: int) -> Sequence[int]:
        elements = list(elements)
        if len(elements) != n:
            raise MalformedRelation(f"{len(elements)} element identifiers given for a {n} x {n} matrix.")
        if elements != sorted(set(elements)):
            raise MalformedRelation("Element identifiers must be distinct and ascending.")
        return cls._universe_of(elements)

    def leq(self, x: int, y: int) -> bool:
        self._check_element(x)
        self._check_element(y)
        return bool(self.m[self._index[x], self._index[y]])

    def find_bot(self) -> None:
        rows = np.where(np.all(self.m, axis=1))[0]
        self.md.bot = Known(self._elements[int(rows[0])]) if len(rows) else KnownAbsent

    def find_minimals(self) -> None:
        # only the diagonal is set in the column
        cols = np.where(np.sum(self.m, axis=0) == 1)[0]
        self.md.minimals = frozenset(self._elements[int(j)] for j in cols)

    def find_maximals(self) -> None:
        rows = np.where(np.sum(self.m, axis=1) == 1)[0]
        self.md.maximals = frozenset(self._elements[int(i)] for i in rows)

    def op(self) -> "PosetM":
        return PosetM(self.m.T.copy(), self._elements, validate=False)

    def _adjoin_bot_payload(self, new: int) -> None:
        n = self.md.n
        m = np.zeros((n + 1, n + 1), dtype=bool)
        m[:n, :n] = self.m
        m[n, :] = True
        self.m = m
        self._index[new] = n

    def _adjoin_top_payload(self, new: int) -> None:
        n = self.md.n
        m = np.zeros((n + 1, n + 1), dtype=bool)
        m[:n, :n] = self.m
        m[:, n] = True
        self.m = m
        self._index[new] = n

    def sub(self, selector: Iterable[int]) -> "PosetM":
        selector = sorted(self._check_selector(selector))
        rows = [self._index[x] for x in selector]
        return PosetM(BasicUtils.restrict_partial_order(self.m, rows), selector, validate=False)

    @classmethod
    def new_chain(cls, n: int) -> "PosetM":
        return cls(np.triu(np.ones((n, n), dtype=bool)), validate=False)

    @classmethod
    def new_antichain(cls, n: int) -> "PosetM":
        return cls(np.eye(n, dtype=bool), validate=False)

    def relation_matrix(self) -> np.ndarray:
        return self.m.copy()

    def __eq__(self, other) -> bool:
        if not isinstance(other, PosetM):
            return NotImplemented
        return tuple(self._elements) == tuple(other._elements) and bool(np.array_equal(self.m, other.m))

    def __repr__(self) -> str:
        rows = ["".join("1" if v else "0" for v in row) for row in self.m]
        return f"PosetM(n={self.md.n}, elements={list(self._elements)}, m={rows})"
