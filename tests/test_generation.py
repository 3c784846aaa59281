import random

import networkx as nx
import pytest

from finposet import GenerationUtils, PosetM, PosetG, PosetH
from finposet.data.data_generator import generate_data, generate_from_file, summarize
from finposet.utils.basic_utils import BasicUtils


@pytest.mark.parametrize("n", [0, 1, 6, 12])
def test_random_dag_is_acyclic(n):
    dag = GenerationUtils.generate_random_dag(n, 0.5, random.Random(n))
    assert dag.number_of_nodes() == n
    assert nx.is_directed_acyclic_graph(dag)
    assert all(u < v for u, v in dag.edges)


def test_random_dag_extreme_probabilities():
    assert GenerationUtils.generate_random_dag(5, 0.0).number_of_edges() == 0
    assert GenerationUtils.generate_random_dag(5, 1.0).number_of_edges() == 10


def test_random_dag_rejects_bad_probability():
    with pytest.raises(ValueError):
        GenerationUtils.generate_random_dag(3, 1.5)


@pytest.mark.parametrize("representation, cls", [("matrix", PosetM), ("graph", PosetG), ("hasse", PosetH)])
def test_random_poset_representation(representation, cls):
    p = GenerationUtils.generate_random_poset(6, 0.5, seed=3, representation=representation)
    assert isinstance(p, cls)
    assert p.md.n == 6
    assert BasicUtils.is_valid_partial_order(p.relation_matrix())


def test_random_poset_is_reproducible():
    a = GenerationUtils.generate_random_poset(8, 0.3, seed=11)
    b = GenerationUtils.generate_random_poset(8, 0.3, seed=11)
    assert a == b


def test_full_probability_gives_a_chain():
    p = GenerationUtils.generate_random_poset(5, 1.0, seed=0)
    assert p == PosetM.new_chain(5)


def test_summarize_vee():
    vee = PosetG({0: {0, 1, 2}, 1: {1}, 2: {2}})
    summary = summarize(vee)
    assert summary == {
        'representation': 'PosetG',
        'n': 3,
        'covers': [[0, 1], [0, 2]],
        'minimals': [0],
        'maximals': [1, 2],
        'bot': 0,
        'top': None,
        'linear_extensions': 2,
    }


def test_generate_data_from_config():
    config = {'generation': {'n': 5, 'edge_probability': 0.5, 'seed': 7, 'representation': 'graph'}}
    data = generate_data(config)
    assert isinstance(data['poset'], PosetG)
    assert data['summary']['n'] == 5
    assert data['parameters']['seed'] == 7
    assert data['summary']['linear_extensions'] >= 1


def test_generate_from_shipped_config():
    data = generate_from_file()
    assert isinstance(data['poset'], PosetH)
    assert data['summary']['n'] == 8
