import random

import pytest

from contestsolvers.zero_one_tree import (
    inversions_by_merging,
    inversions_by_union,
    main,
)


def test_sample():
    parents = [1, 1, 2, 3, 3]
    values = [0, 1, 1, 0, 0, 0]
    assert inversions_by_union(parents, values) == 4
    assert inversions_by_merging(parents, values) == 4


def test_single_node():
    assert inversions_by_union([], [1]) == 0
    assert inversions_by_merging([], [0]) == 0


def test_all_zero_has_no_inversions():
    parents = [1, 2, 2, 1]
    assert inversions_by_union(parents, [0] * 5) == 0
    assert inversions_by_merging(parents, [0] * 5) == 0


@pytest.mark.parametrize("seed", range(30))
def test_methods_agree(seed):
    rng = random.Random(seed)
    n = rng.randint(1, 40)
    parents = [rng.randint(1, i - 1) for i in range(2, n + 1)]
    values = [rng.randint(0, 1) for _ in range(n)]
    assert inversions_by_union(parents, values) == inversions_by_merging(parents, values)


def test_bad_parent_count():
    with pytest.raises(ValueError):
        inversions_by_union([1, 1], [0, 1])


def test_main(capsys):
    main(["6", "1", "1", "2", "3", "3", "0", "1", "1", "0", "0", "0"])
    assert capsys.readouterr().out.strip() == "4"