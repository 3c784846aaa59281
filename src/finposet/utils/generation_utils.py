"""
Utility functions for generating random posets.
"""

import logging
import random
import itertools
from typing import Optional

import networkx as nx
import numpy as np

from ..poset.base import Poset
from ..poset.matrix import PosetM
from .basic_utils import BasicUtils
from .conversion_utils import ConversionUtils

logger = logging.getLogger(__name__)


class GenerationUtils:
    """
    Utility class for generating random partial orders.
    """

    @staticmethod
    def generate_random_dag(n: int, edge_probability: float = 0.5,
                            rng: Optional[random.Random] = None) -> nx.DiGraph:
        """
        Generates a random directed acyclic graph with `n` nodes.

        Each pair (u, v) with u < v receives the edge u -> v with probability
        `edge_probability`, so every edge points to a larger index and no
        cycle can appear.

        Parameters:
        - n: Number of nodes.
        - edge_probability: Probability of keeping each candidate edge.
        - rng: Random number generator (the module-level one if None).

        Returns:
        - h: A NetworkX DiGraph on nodes 0..n-1.
        """
        if not 0.0 <= edge_probability <= 1.0:
            raise ValueError(f"edge_probability must lie in [0, 1], got {edge_probability}")
        rng = rng or random
        h = nx.DiGraph()
        h.add_nodes_from(range(n))
        for u, v in itertools.combinations(range(n), 2):
            if rng.random() < edge_probability:
                h.add_edge(u, v)
        return h

    @staticmethod
    def generate_random_poset(n: int, edge_probability: float = 0.5, seed: Optional[int] = None,
                              representation: str = 'matrix') -> Poset:
        """
        Generates a random poset on {0, ..., n-1} as the reflexive-transitive
        closure of a random DAG.

        Parameters:
        - n: Number of elements.
        - edge_probability: Edge probability of the underlying DAG.
        - seed: Seed for reproducible output.
        - representation: One of 'matrix', 'graph', 'hasse'.

        Returns:
        - A poset in the requested representation.
        """
        rng = random.Random(seed)
        dag = GenerationUtils.generate_random_dag(n, edge_probability, rng)
        adj = nx.to_numpy_array(dag, nodelist=list(range(n)), dtype=bool) if n else np.zeros((0, 0), dtype=bool)
        closure = BasicUtils.transitive_closure(adj)
        logger.debug("Generated random poset: n=%d, %d DAG edges, %d relations",
                     n, dag.number_of_edges(), int(closure.sum()))
        return ConversionUtils.convert(PosetM(closure, validate=False), representation)
