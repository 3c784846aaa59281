"""
Basic utility functions for partial order relations stored as boolean matrices.
"""

import os
import logging
import yaml
import numpy as np
from typing import List, Dict, Any, Sequence
from functools import lru_cache

from ..exceptions import MalformedRelation

logger = logging.getLogger(__name__)

DEFAULT_LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s: %(message)s"


def get_project_root() -> str:
    """Get the absolute path to the project root directory."""
    return os.path.dirname(os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))


def load_config(config_path: str) -> Dict[str, Any]:
    """
    Load configuration from YAML file.

    Args:
        config_path: Path to configuration file (relative to project root or absolute)

    Returns:
        Dictionary containing configuration

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If config file is invalid
    """
    if not os.path.isabs(config_path):
        config_path = os.path.join(get_project_root(), config_path)
    try:
        with open(config_path, 'r') as f:
            return yaml.safe_load(f) or {}
    except FileNotFoundError:
        raise FileNotFoundError(f"Configuration file not found at: {config_path}")
    except yaml.YAMLError as e:
        raise yaml.YAMLError(f"Error parsing YAML file: {str(e)}")


def configure_logging(config: Dict[str, Any]) -> None:
    """Apply the ``logging`` section of a configuration dictionary to the package logger."""
    section = config.get('logging', {}) or {}
    level = section.get('level', 'WARNING')
    if isinstance(level, str):
        level = level.upper()
    package_logger = logging.getLogger('finposet')
    package_logger.setLevel(level)
    if not package_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(section.get('format', DEFAULT_LOG_FORMAT)))
        package_logger.addHandler(handler)


class BasicUtils:
    """
    Utility class for basic operations on partial orders.

    Relations are n x n boolean numpy arrays where ``h[i, j]`` means i <= j
    (or, for strict / covering relations, i < j).
    """

    @staticmethod
    def as_bool_matrix(m) -> np.ndarray:
        """
        Coerce nested sequences or an array into a square boolean matrix.

        Raises:
            MalformedRelation: If the input is not square
        """
        arr = np.asarray(m, dtype=bool)
        if arr.ndim == 1 and arr.size == 0:
            return np.zeros((0, 0), dtype=bool)
        if arr.ndim != 2 or arr.shape[0] != arr.shape[1]:
            raise MalformedRelation(f"Relation matrix must be square, got shape {arr.shape}.")
        return arr.copy()

    @staticmethod
    def check_partial_order(h: np.ndarray) -> None:
        """
        Check that a matrix is reflexive, antisymmetric and transitive.

        Raises:
            MalformedRelation: Naming the first property that fails and a witness
        """
        n = h.shape[0]
        diagonal = np.diag(h)
        if not np.all(diagonal):
            i = int(np.where(~diagonal)[0][0])
            raise MalformedRelation(f"Relation is not reflexive: {i} <= {i} does not hold.")

        both = h & h.T & ~np.eye(n, dtype=bool)
        if np.any(both):
            i, j = (int(x) for x in np.argwhere(both)[0])
            raise MalformedRelation(f"Relation is not antisymmetric: {i} <= {j} and {j} <= {i}.")

        composed = BasicUtils.compose(h, h)
        missing = composed & ~h
        if np.any(missing):
            i, k = (int(x) for x in np.argwhere(missing)[0])
            raise MalformedRelation(f"Relation is not transitive: {i} <= {k} is implied but missing.")

    @staticmethod
    def is_valid_partial_order(h: np.ndarray) -> bool:
        """
        Check if a matrix represents a valid (reflexive) partial order.

        Parameters:
        -----------
        h : np.ndarray
            Boolean matrix to check

        Returns:
        --------
        bool
            True if the matrix represents a valid partial order
        """
        try:
            BasicUtils.check_partial_order(h)
        except MalformedRelation:
            return False
        return True

    @staticmethod
    def compose(a: np.ndarray, b: np.ndarray) -> np.ndarray:
        """Boolean matrix product: result[i, k] iff a[i, j] and b[j, k] for some j."""
        return (a.astype(np.int64) @ b.astype(np.int64)) > 0

    @staticmethod
    def transitive_closure(adj_matrix: np.ndarray) -> np.ndarray:
        """
        Computes the reflexive-transitive closure of a relation.

        Parameters:
        - adj_matrix: An n x n boolean array of the relation.

        Returns:
        - closure: An n x n boolean array of the smallest reflexive and transitive relation containing it.
        """
        n = adj_matrix.shape[0]
        closure = adj_matrix.astype(bool) | np.eye(n, dtype=bool)
        # Floyd-Warshall, one intermediate element at a time
        for k in range(n):
            closure |= np.outer(closure[:, k], closure[k, :])
        return closure

    @staticmethod
    def transitive_reduction(h: np.ndarray) -> np.ndarray:
        """
        Compute the covering relation of a partial order matrix.

        Parameters:
        -----------
        h : np.ndarray
            Boolean matrix of a reflexive partial order

        Returns:
        --------
        np.ndarray
            Matrix with [i, j] set iff j covers i
        """
        n = h.shape[0]
        strict = h & ~np.eye(n, dtype=bool)
        return strict & ~BasicUtils.compose(strict, strict)

    @staticmethod
    def restrict_partial_order(h: np.ndarray, subset: List[int]) -> np.ndarray:
        """
        Restrict the partial order matrix `h` to the given `subset` of row positions.
        """
        return h[np.ix_(subset, subset)]

    @staticmethod
    def is_total_order(h: np.ndarray) -> bool:
        """Check if every pair of elements of a partial order is comparable."""
        return bool(np.all(h | h.T))

    @staticmethod
    def topological_sort(h: np.ndarray) -> List[int]:
        """
        Returns one linear extension, as row positions, of the order in `h`.

        Raises:
        - MalformedRelation if the strict part of the relation has a cycle.
        """
        n = h.shape[0]
        strict = h & ~np.eye(n, dtype=bool)
        in_degree = np.sum(strict, axis=0)

        # start with elements that have no strict predecessors
        queue = [i for i in range(n) if in_degree[i] == 0]
        ordering = []
        while queue:
            node = queue.pop(0)
            ordering.append(node)
            for v in np.where(strict[node])[0]:
                in_degree[v] -= 1
                if in_degree[v] == 0:
                    queue.append(int(v))

        if len(ordering) != n:
            raise MalformedRelation("The relation contains a cycle.")
        return ordering

    @staticmethod
    @lru_cache(maxsize=1000)
    def _nle_cached(h_tuple: tuple, n: int) -> int:
        """
        Cached count of linear extensions of a strict order given as a flat tuple.
        """
        if n <= 1:
            return 1
        h = np.array(h_tuple, dtype=bool).reshape(n, n)

        # Minimal elements have no incoming edges
        in_degree = np.sum(h, axis=0)
        minimal_elements = np.where(in_degree == 0)[0]

        total = 0
        for min_elem in minimal_elements:
            mask = np.ones(n, dtype=bool)
            mask[min_elem] = False
            sub_h = h[mask][:, mask]
            total += BasicUtils._nle_cached(tuple(sub_h.flatten().tolist()), n - 1)
        return total

    @staticmethod
    def nle(h: np.ndarray) -> int:
        """
        Count the number of linear extensions of a partial order with caching.

        Parameters:
        -----------
        h : np.ndarray
            Boolean matrix of the (reflexive or strict) partial order

        Returns:
        --------
        int
            Number of linear extensions
        """
        n = h.shape[0]
        strict = h & ~np.eye(n, dtype=bool)
        return BasicUtils._nle_cached(tuple(strict.flatten().tolist()), n)

    @staticmethod
    def positions(elements: Sequence[int]) -> Dict[int, int]:
        """Map each element of an ordered universe to its row position."""
        return {e: pos for pos, e in enumerate(elements)}
