"""
The operation contract shared by every poset representation.

A poset lives on a finite universe of integer elements, ``range(n)`` for a
freshly built poset. Sub-posets keep the identifiers of the elements they
retain, so the universe of a sub-poset is an arbitrary ascending sequence.
"""

import abc
from typing import FrozenSet, Iterable, List, Sequence, Tuple

import numpy as np

from ..exceptions import IndexOutOfRange, NotComputed
from ..utils.basic_utils import BasicUtils
from .metadata import Known, MetaData, Presence, presence_from


class Poset(abc.ABC):
    """
    Abstract base class for the Matrix, Graph and Hasse representations.

    Subclasses implement the relation-specific algorithms; everything derived
    from them (top, corolla, linear extensions, ...) is written once here.
    """

    md: MetaData
    _elements: Sequence[int]

    # ------------------------------------------------------------------
    # Universe
    # ------------------------------------------------------------------
    def elements(self) -> Sequence[int]:
        """All elements in ascending order. The sequence can be iterated repeatedly."""
        return self._elements

    def __len__(self) -> int:
        return self.md.n

    def _check_element(self, x) -> None:
        if x not in self._elements:
            raise IndexOutOfRange(x, self.md.n)

    def _check_selector(self, selector: Iterable[int]) -> FrozenSet[int]:
        selector = frozenset(selector)
        for x in selector:
            self._check_element(x)
        return selector

    def _next_element(self) -> int:
        """Identifier of an element adjoined to this poset."""
        return max(self._elements) + 1 if self.md.n else 0

    @staticmethod
    def _grow(elements: Sequence[int], new: int) -> Sequence[int]:
        if isinstance(elements, range) and new == len(elements):
            return range(new + 1)
        return tuple(elements) + (new,)

    @staticmethod
    def _universe_of(selector: Iterable[int]) -> Sequence[int]:
        ordered = tuple(sorted(selector))
        if ordered == tuple(range(len(ordered))):
            return range(len(ordered))
        return ordered

    # ------------------------------------------------------------------
    # Relation queries
    # ------------------------------------------------------------------
    @abc.abstractmethod
    def leq(self, x: int, y: int) -> bool:
        """True iff x <= y."""

    @abc.abstractmethod
    def find_bot(self) -> None:
        """Record the bottom element, or its absence, in the metadata."""

    @abc.abstractmethod
    def find_minimals(self) -> None:
        """Record the set of minimal elements in the metadata."""

    @abc.abstractmethod
    def find_maximals(self) -> None:
        """Record the set of maximal elements in the metadata."""

    def find_top(self) -> None:
        """
        Record the top element, or its absence, in the metadata.

        The top is derived from the maximal elements: it exists iff there is
        exactly one of them.
        """
        self.find_maximals()
        self.md.top = presence_from(self.md.maximals)

    # ------------------------------------------------------------------
    # Constructions and mutations
    # ------------------------------------------------------------------
    @abc.abstractmethod
    def op(self) -> "Poset":
        """Return the dual poset."""

    @abc.abstractmethod
    def _adjoin_bot_payload(self, new: int) -> None:
        """Add ``new`` below every element of the payload."""

    @abc.abstractmethod
    def _adjoin_top_payload(self, new: int) -> None:
        """Add ``new`` above every element of the payload."""

    def adjoin_bot(self) -> None:
        """Extend the poset in place with a new bottom element."""
        new = self._next_element()
        empty = self.md.n == 0
        self._adjoin_bot_payload(new)
        self._elements = self._grow(self._elements, new)
        self.md.n += 1
        self.md.bot = Known(new)
        self.md.minimals = frozenset([new])
        if empty:
            self.md.top = Known(new)
            self.md.maximals = frozenset([new])

    def adjoin_top(self) -> None:
        """Extend the poset in place with a new top element."""
        new = self._next_element()
        empty = self.md.n == 0
        self._adjoin_top_payload(new)
        self._elements = self._grow(self._elements, new)
        self.md.n += 1
        self.md.top = Known(new)
        self.md.maximals = frozenset([new])
        if empty:
            self.md.bot = Known(new)
            self.md.minimals = frozenset([new])

    @abc.abstractmethod
    def sub(self, selector: Iterable[int]) -> "Poset":
        """Return the sub-poset induced on ``selector``, keeping element identifiers."""

    @classmethod
    @abc.abstractmethod
    def new_chain(cls, n: int) -> "Poset":
        """Create the chain 0 < 1 < ... < n-1."""

    @classmethod
    @abc.abstractmethod
    def new_antichain(cls, n: int) -> "Poset":
        """Create n pairwise incomparable elements."""

    @classmethod
    def new_corolla(cls, n: int) -> "Poset":
        """Create a corolla: n incomparable leaves above one root."""
        c = cls.new_antichain(n)
        c.adjoin_bot()
        return c

    # ------------------------------------------------------------------
    # Metadata accessors
    # ------------------------------------------------------------------
    def _read(self, field: str):
        value = getattr(self.md, field)
        if value is None:
            raise NotComputed(field)
        return value

    def top(self) -> Presence:
        return self._read('top')

    def bot(self) -> Presence:
        return self._read('bot')

    def minimals(self) -> FrozenSet[int]:
        return self._read('minimals')

    def maximals(self) -> FrozenSet[int]:
        return self._read('maximals')

    # ------------------------------------------------------------------
    # Derived analysis
    # ------------------------------------------------------------------
    def relation_matrix(self) -> np.ndarray:
        """The full order relation as a boolean matrix in universe order."""
        n = self.md.n
        m = np.zeros((n, n), dtype=bool)
        for i, x in enumerate(self._elements):
            for j, y in enumerate(self._elements):
                m[i, j] = self.leq(x, y)
        return m

    def same_relation(self, other: "Poset") -> bool:
        """True iff both posets have the same universe and order, whatever their representations."""
        if tuple(self._elements) != tuple(other.elements()):
            return False
        return bool(np.array_equal(self.relation_matrix(), other.relation_matrix()))

    def covers(self) -> List[Tuple[int, int]]:
        """Covering pairs (x, y), meaning y covers x, in ascending order."""
        reduction = BasicUtils.transitive_reduction(self.relation_matrix())
        return [(self._elements[int(i)], self._elements[int(j)]) for i, j in np.argwhere(reduction)]

    def is_chain(self) -> bool:
        return BasicUtils.is_total_order(self.relation_matrix())

    def is_antichain(self) -> bool:
        return self.covers() == []

    def linear_extension(self) -> List[int]:
        """One ordering of all elements compatible with the partial order."""
        return [self._elements[i] for i in BasicUtils.topological_sort(self.relation_matrix())]

    def count_linear_extensions(self) -> int:
        return BasicUtils.nle(self.relation_matrix())

    # ------------------------------------------------------------------
    # Conversions
    # ------------------------------------------------------------------
    def to_matrix(self):
        from ..utils.conversion_utils import ConversionUtils
        return ConversionUtils.convert(self, 'matrix')

    def to_graph(self):
        from ..utils.conversion_utils import ConversionUtils
        return ConversionUtils.convert(self, 'graph')

    def to_hasse(self):
        from ..utils.conversion_utils import ConversionUtils
        return ConversionUtils.convert(self, 'hasse')

    def to_networkx(self):
        from ..utils.conversion_utils import ConversionUtils
        return ConversionUtils.to_networkx(self)
