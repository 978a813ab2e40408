import random

import pytest

from contestsolvers.blue_red_tree import can_transform, main

SAMPLE_YES_SMALL = (3, [(1, 2), (2, 3)], [(1, 3), (3, 2)])
SAMPLE_YES_PATH = (
    5,
    [(1, 2), (2, 3), (3, 4), (4, 5)],
    [(3, 4), (2, 4), (1, 4), (1, 5)],
)
SAMPLE_NO = (
    6,
    [(1, 2), (3, 5), (4, 6), (1, 6), (5, 1)],
    [(5, 3), (1, 4), (2, 6), (4, 3), (5, 6)],
)


def _tokens(case):
    n, blue, red = case
    out = [str(n)]
    for u, v in list(blue) + list(red):
        out += [str(u), str(v)]
    return out


@pytest.mark.parametrize(
    "case, expected",
    [(SAMPLE_YES_SMALL, "YES"), (SAMPLE_YES_PATH, "YES"), (SAMPLE_NO, "NO")],
)
def test_main_samples(case, expected, capsys):
    assert main(_tokens(case)) == 0
    assert capsys.readouterr().out.strip() == expected


def test_identical_trees_are_transformable():
    blue = [(1, 2), (1, 3), (3, 4), (3, 5), (5, 6)]
    assert can_transform(6, blue, list(blue)) is True


def test_single_vertex():
    assert can_transform(1, [], []) is True


def test_duplicated_red_edge_fails():
    assert can_transform(3, [(1, 2), (2, 3)], [(1, 2), (1, 2)]) is False


@pytest.mark.parametrize("case", [SAMPLE_YES_SMALL, SAMPLE_YES_PATH, SAMPLE_NO])
def test_relabelling_vertices_keeps_answer(case):
    n, blue, red = case
    rng = random.Random(7)
    labels = list(range(1, n + 1))
    rng.shuffle(labels)
    relabel = dict(zip(range(1, n + 1), labels))
    new_blue = [(relabel[u], relabel[v]) for u, v in blue]
    new_red = [(relabel[v], relabel[u]) for u, v in reversed(red)]
    assert can_transform(n, new_blue, new_red) == can_transform(n, blue, red)


def test_wrong_red_edge_count():
    with pytest.raises(ValueError):
        can_transform(3, [(1, 2), (2, 3)], [(1, 2)])


def test_vertex_out_of_range():
    with pytest.raises(ValueError):
        can_transform(3, [(1, 2), (2, 4)], [(1, 2), (2, 3)])


def test_blue_edges_not_a_tree():
    with pytest.raises(ValueError):
        can_transform(4, [(1, 2), (2, 1), (3, 4)], [(1, 2), (2, 3), (3, 4)])