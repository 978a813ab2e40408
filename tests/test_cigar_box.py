from itertools import permutations

import pytest

from contestsolvers.cigar_box import MOD, count_sequences, main


@pytest.mark.parametrize("n, moves", [(2, 1), (3, 2), (4, 1), (3, 3), (4, 2)])
def test_counts_over_all_permutations_cover_every_sequence(n, moves):
    total = sum(count_sequences(p, moves) for p in permutations(range(1, n + 1)))
    assert total % MOD == pow(2 * n, moves, MOD)


def test_zero_moves_only_identity():
    assert count_sequences([1, 2, 3, 4], 0) == 1
    assert count_sequences([2, 1, 3, 4], 0) == 0


@pytest.mark.parametrize("moves", [0, 1, 5, 10])
def test_single_element(moves):
    assert count_sequences([1], moves) == pow(2, moves, MOD)


def test_result_is_reduced():
    result = count_sequences(list(range(1, 8)), 40)
    assert 0 <= result < MOD


def test_negative_moves_rejected():
    with pytest.raises(ValueError):
        count_sequences([1, 2], -1)


def test_main_matches_function(capsys):
    assert main(["3", "2", "2", "1", "3"]) == 0
    assert capsys.readouterr().out.strip() == str(count_sequences([2, 1, 3], 2))