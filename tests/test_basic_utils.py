import logging

import numpy as np
import pytest
import yaml

from finposet import MalformedRelation
from finposet.utils.basic_utils import BasicUtils, load_config, configure_logging


def test_transitive_closure_of_a_path():
    adj = np.array([
        [0, 1, 0],
        [0, 0, 1],
        [0, 0, 0],
    ], dtype=bool)
    closure = BasicUtils.transitive_closure(adj)
    assert np.array_equal(closure, np.triu(np.ones((3, 3), dtype=bool)))


def test_transitive_reduction_of_a_chain():
    reduction = BasicUtils.transitive_reduction(np.triu(np.ones((4, 4), dtype=bool)))
    expected = np.zeros((4, 4), dtype=bool)
    for i in range(3):
        expected[i, i + 1] = True
    assert np.array_equal(reduction, expected)


def test_closure_and_reduction_are_inverse():
    adj = np.zeros((5, 5), dtype=bool)
    for i, j in [(0, 1), (0, 2), (1, 3), (2, 3), (3, 4)]:
        adj[i, j] = True
    closure = BasicUtils.transitive_closure(adj)
    assert np.array_equal(BasicUtils.transitive_reduction(closure), adj)
    assert BasicUtils.is_valid_partial_order(closure)


def test_is_valid_partial_order_rejects_cycles():
    h = np.ones((2, 2), dtype=bool)
    assert not BasicUtils.is_valid_partial_order(h)
    with pytest.raises(MalformedRelation, match="antisymmetric"):
        BasicUtils.check_partial_order(h)


def test_as_bool_matrix_handles_empty_input():
    assert BasicUtils.as_bool_matrix([]).shape == (0, 0)


def test_restrict_partial_order():
    h = np.triu(np.ones((4, 4), dtype=bool))
    sub = BasicUtils.restrict_partial_order(h, [0, 3])
    assert np.array_equal(sub, np.array([[True, True], [False, True]]))


def test_is_total_order():
    assert BasicUtils.is_total_order(np.triu(np.ones((3, 3), dtype=bool)))
    assert not BasicUtils.is_total_order(np.eye(3, dtype=bool))


def test_topological_sort_and_cycles():
    h = np.array([
        [1, 0, 0],
        [1, 1, 0],
        [1, 1, 1],
    ], dtype=bool)
    assert BasicUtils.topological_sort(h) == [2, 1, 0]
    with pytest.raises(MalformedRelation, match="cycle"):
        BasicUtils.topological_sort(np.ones((2, 2), dtype=bool))


@pytest.mark.parametrize("n, expected", [(0, 1), (1, 1), (3, 6), (4, 24)])
def test_nle_of_antichains(n, expected):
    assert BasicUtils.nle(np.eye(n, dtype=bool)) == expected


def test_nle_of_chain_and_vee():
    assert BasicUtils.nle(np.triu(np.ones((5, 5), dtype=bool))) == 1
    vee = np.array([[1, 1, 1], [0, 1, 0], [0, 0, 1]], dtype=bool)
    assert BasicUtils.nle(vee) == 2


def test_load_config(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(yaml.safe_dump({"generation": {"n": 3}}))
    assert load_config(str(path)) == {"generation": {"n": 3}}


def test_load_config_relative_to_project_root():
    config = load_config("config/finposet_config.yaml")
    assert "generation" in config
    assert "logging" in config


def test_load_config_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "missing.yaml"))


def test_configure_logging_sets_package_level():
    configure_logging({"logging": {"level": "debug"}})
    assert logging.getLogger("finposet").level == logging.DEBUG
    configure_logging({})
    assert logging.getLogger("finposet").level == logging.WARNING


def test_as_bool_matrix_rejects_empty_non_square_input():
    with pytest.raises(MalformedRelation, match="square"):
        BasicUtils.as_bool_matrix(np.zeros((3, 0), dtype=bool))
