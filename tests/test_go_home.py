import pytest

from contestsolvers.go_home import main, total_distance


def test_sample():
    assert total_distance(2, [1, 3, 4], [3, 4, 2]) == 4


def test_all_to_the_right():
    positions = [5, 8, 12]
    assert total_distance(2, positions, [1, 1, 1]) == positions[-1] - 2


def test_all_to_the_left():
    positions = [1, 3, 6]
    assert total_distance(10, positions, [4, 2, 9]) == 10 - positions[0]


def test_does_not_mutate_input():
    people = [3, 4, 2]
    total_distance(2, [1, 3, 4], people)
    assert people == [3, 4, 2]


def test_length_mismatch():
    with pytest.raises(ValueError):
        total_distance(2, [1, 3], [1])


def test_main(capsys):
    main(["3", "2", "1", "3", "3", "4", "4", "2"])
    assert capsys.readouterr().out.strip() == "4"