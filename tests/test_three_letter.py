import random

import pytest

from contestsolvers.three_letter import main, min_operations


def test_equal_strings_cost_nothing():
    assert min_operations("ABCCBA", "ABCCBA") == 0


def test_empty():
    assert min_operations("", "") == 0


def test_single_letter():
    assert min_operations("A", "B") == 1


@pytest.mark.parametrize("seed", range(20))
def test_nonnegative_and_zero_on_self(seed):
    rng = random.Random(seed)
    s = "".join(rng.choice("ABC") for _ in range(rng.randint(1, 15)))
    t = "".join(rng.choice("ABC") for _ in range(len(s)))
    assert min_operations(s, t) >= 0
    assert min_operations(s, s) == 0


def test_length_mismatch():
    with pytest.raises(ValueError):
        min_operations("AB", "A")


def test_bad_letter():
    with pytest.raises(ValueError):
        min_operations("AD", "AB")


def test_main(capsys):
    main(["3", "ABC", "ABC"])
    assert capsys.readouterr().out.strip() == "0"