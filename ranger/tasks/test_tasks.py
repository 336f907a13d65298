import pytest

from ranger.domain import U8, I8, INT
from ranger.tasks.values import parse_values
from ranger.tasks.format import format_values
from ranger.tasks.contains import contains
from ranger.tasks.verify import verify, insertion_orders


def test_parse_values():
    assert parse_values([]) == []
    assert parse_values(["5", "7", "6"]) == [5, 7, 6]
    assert parse_values(["1..3", "-2"]) == [1, 2, 3, -2]
    assert parse_values(["4,1..2", " 9 "]) == [4, 1, 2, 9]
    assert parse_values(["-3..-1"]) == [-3, -2, -1]


@pytest.mark.parametrize("arg", ["x", "1..", "3..1", "1.5"])
def test_parse_values_rejects(arg):
    with pytest.raises(ValueError):
        parse_values([arg])


def test_format_values():
    assert format_values([5, 7, 6], INT) == "5-7"
    assert format_values([254, 255, 0], U8) == "0,254-255"


def test_contains(capsys):
    assert contains(2, [1, 2, 3], INT)
    assert not contains(5, [1, 2, 3], INT)
    out = capsys.readouterr().out
    assert "2 is in {1-3}" in out
    assert "5 is not in {1-3}" in out


def test_insertion_orders():
    orders = insertion_orders([3, 1, 2], rounds=4, seed=1)
    assert [name for name, _ in orders[:3]] == ["given", "ascending", "descending"]
    assert orders[1][1] == [1, 2, 3]
    assert orders[2][1] == [3, 2, 1]
    assert len(orders) == 7
    assert all(sorted(order) == [1, 2, 3] for _, order in orders)
    assert insertion_orders([3, 1, 2], rounds=4, seed=1) == orders


def test_verify(capsys):
    values = [-128, -127, -126, -1, 0, 1, 2, 4, 6, 7, 8, 125, 126, 127]
    assert verify(values, I8, rounds=25, seed=3)
    assert "-128--126,-1-2,4,6-8,125-127" in capsys.readouterr().out


def test_verify_empty():
    assert verify([], U8, rounds=3)
