import os, sys

import matplotlib
matplotlib.use("Agg")

import numpy as np
import pytest

# Ensure `src/` is importable
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
SRC = os.path.join(ROOT, "src")
if SRC not in sys.path:
    sys.path.insert(0, SRC)

from finposet import PosetM, PosetG, PosetH, ConversionUtils
from finposet.utils.basic_utils import BasicUtils


REPRESENTATIONS = [PosetM, PosetG, PosetH]
NAMES = {PosetM: "matrix", PosetG: "graph", PosetH: "hasse"}


def from_pairs(cls, n, pairs):
    """Build a poset of class `cls` on range(n) from generating pairs x <= y."""
    adj = np.zeros((n, n), dtype=bool)
    for x, y in pairs:
        adj[x, y] = True
    closure = BasicUtils.transitive_closure(adj)
    return ConversionUtils.convert(PosetM(closure), NAMES[cls])


@pytest.fixture(params=REPRESENTATIONS, ids=lambda cls: cls.__name__)
def poset_cls(request):
    return request.param


@pytest.fixture
def make_poset():
    return from_pairs


@pytest.fixture
def vee(poset_cls):
    # 0 <= 1, 0 <= 2, 1 and 2 incomparable
    return from_pairs(poset_cls, 3, [(0, 1), (0, 2)])


@pytest.fixture
def diamond(poset_cls):
    # 0 < 1, 2 < 3
    return from_pairs(poset_cls, 4, [(0, 1), (0, 2), (1, 3), (2, 3)])
