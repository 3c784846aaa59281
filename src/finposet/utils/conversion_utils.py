"""
Utility functions for converting between the representations of a poset.

The six directed conversions commute: converting a poset from one
representation to another and back yields the same relation.
"""

import logging
from typing import Dict, Set

import networkx as nx
import numpy as np

from ..poset.base import Poset
from ..poset.graph import PosetG
from ..poset.hasse import PosetH
from ..poset.matrix import PosetM

logger = logging.getLogger(__name__)

REPRESENTATIONS = {'matrix': PosetM, 'graph': PosetG, 'hasse': PosetH}


class ConversionUtils:
    """
    Utility class for converting posets between the matrix, graph and Hasse
    representations. Converted posets start with fresh metadata.
    """

    @staticmethod
    def matrix_to_graph(p: PosetM) -> PosetG:
        """g(i) = { j : M[i, j] }"""
        elements = p.elements()
        g = {x: {elements[int(j)] for j in np.where(p.m[row])[0]} for row, x in enumerate(elements)}
        logger.debug("matrix -> graph on %d elements", p.md.n)
        return PosetG(g, validate=False)

    @staticmethod
    def graph_to_matrix(p: PosetG) -> PosetM:
        """M[i, j] = (j in g(i))"""
        elements = p.elements()
        n = p.md.n
        m = np.zeros((n, n), dtype=bool)
        for row, x in enumerate(elements):
            for col, y in enumerate(elements):
                m[row, col] = y in p.g[x]
        logger.debug("graph -> matrix on %d elements", n)
        return PosetM(m, elements, validate=False)

    @staticmethod
    def cover_sets(g: Dict[int, Set[int]]) -> Dict[int, Set[int]]:
        """
        Transitive reduction of a reflexive, transitive graph mapping.

        j covers i iff j is in g[i], j != i, and no k in g[i] other than i
        and j has j in g[k].

        Parameters:
        - g: Mapping from each element to all elements above it, itself included.

        Returns:
        - h: Mapping from each element to the elements covering it.
        """
        h = {}
        for i, above in g.items():
            strict = above - {i}
            h[i] = {
                j for j in strict
                if not any(j in g[k] for k in strict if k != j)
            }
        return h

    @staticmethod
    def graph_to_hasse(p: PosetG) -> PosetH:
        logger.debug("graph -> hasse on %d elements", p.md.n)
        return PosetH(ConversionUtils.cover_sets(p.g), validate=False)

    @staticmethod
    def hasse_to_graph(p: PosetH) -> PosetG:
        """
        Reflexive-transitive closure of the cover edges.

        Raises:
        - MalformedRelation if the cover edges contain a cycle.
        """
        logger.debug("hasse -> graph on %d elements", p.md.n)
        return PosetG(p.closure(), validate=False)

    @staticmethod
    def matrix_to_hasse(p: PosetM) -> PosetH:
        return ConversionUtils.graph_to_hasse(ConversionUtils.matrix_to_graph(p))

    @staticmethod
    def hasse_to_matrix(p: PosetH) -> PosetM:
        return ConversionUtils.graph_to_matrix(ConversionUtils.hasse_to_graph(p))

    @staticmethod
    def copy(p: Poset) -> Poset:
        """A copy of `p` in its own representation, sharing no payload."""
        if isinstance(p, PosetM):
            return PosetM(p.m, p.elements(), validate=False)
        if isinstance(p, PosetG):
            return PosetG(p.g, validate=False)
        return PosetH(p.h, validate=False)

    @staticmethod
    def convert(p: Poset, target: str) -> Poset:
        """
        Convert a poset to the representation named by `target`.

        Parameters:
        - p: Poset in any representation.
        - target: One of 'matrix', 'graph', 'hasse'.

        Returns:
        - A new, independently owned poset with fresh metadata, also when `p`
          already has the target representation.
        """
        if target not in REPRESENTATIONS:
            raise ValueError(f"Invalid representation: {target}. Valid options are {sorted(REPRESENTATIONS)}.")
        if isinstance(p, REPRESENTATIONS[target]):
            return ConversionUtils.copy(p)
        source = next(name for name, cls in REPRESENTATIONS.items() if isinstance(p, cls))
        return getattr(ConversionUtils, f"{source}_to_{target}")(p)

    @staticmethod
    def to_networkx(p: Poset) -> nx.DiGraph:
        """
        The Hasse diagram of a poset as a NetworkX DiGraph with an edge x -> y
        whenever y covers x.
        """
        G = nx.DiGraph()
        G.add_nodes_from(p.elements())
        if isinstance(p, PosetH):
            G.add_edges_from((i, j) for i, up in p.h.items() for j in up)
        else:
            G.add_edges_from(p.covers())
        return G
