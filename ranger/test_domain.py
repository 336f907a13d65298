import pytest

from ranger.domain import IntDomain, get_domain, U8, I8, U64, I64, INT


def test_named_domain_bounds():
    assert (U8.min_value, U8.max_value) == (0, 255)
    assert (I8.min_value, I8.max_value) == (-128, 127)
    assert (U64.min_value, U64.max_value) == (0, 2 ** 64 - 1)
    assert (I64.min_value, I64.max_value) == (-2 ** 63, 2 ** 63 - 1)
    assert (INT.min_value, INT.max_value) == (None, None)


def test_successor_saturates_at_max():
    assert U8.succ(254) == 255
    assert U8.succ(255) == 255
    assert I8.succ(127) == 127
    assert I8.succ(-1) == 0


def test_predecessor_saturates_at_min():
    assert U8.pred(1) == 0
    assert U8.pred(0) == 0
    assert I8.pred(-128) == -128


def test_unbounded_never_saturates():
    big = 2 ** 100
    assert INT.succ(big) == big + 1
    assert INT.pred(-big) == -big - 1


def test_membership():
    assert 0 in U8
    assert 255 in U8
    assert 256 not in U8
    assert -1 not in U8
    assert "1" not in U8
    assert True not in INT
    assert 2 ** 200 in INT


def test_check():
    assert I8.check(-128) == -128
    with pytest.raises(ValueError):
        I8.check(128)
    with pytest.raises(TypeError):
        I8.check(1.0)
    with pytest.raises(TypeError):
        INT.check(False)


def test_get_domain():
    assert get_domain("u8") is U8
    assert get_domain(" I8 ") is I8
    assert get_domain("int") is INT
    with pytest.raises(ValueError):
        get_domain("u7")


def test_invalid_domain():
    with pytest.raises(ValueError):
        IntDomain("broken", 5, 4)
