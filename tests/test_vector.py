import pytest

from pacworld.vector import Vec2


def test_add_then_subtract_round_trip():
    a = Vec2(1.5, -2.0)
    b = Vec2(3.0, 4.25)
    assert (a + b) - b == a


def test_negation_is_inverse():
    a = Vec2(3.0, -7.0)
    assert -(-a) == a
    assert not (a + (-a))


def test_multiply_matches_repeated_addition():
    a = Vec2(2.5, -1.0)
    assert a * 2 == a + a


def test_scalar_division_undoes_multiplication():
    a = Vec2(3.0, 5.0)
    assert (a * 4) / 4 == a


def test_componentwise_division_by_ones():
    a = Vec2(6.0, -8.0)
    assert a / Vec2(1.0, 1.0) == a


def test_scalar_subtraction():
    a = Vec2(3.0, 5.0)
    assert (a - 1.5) + Vec2(1.5, 1.5) == a


def test_truthiness():
    assert not Vec2(0, 0)
    assert not Vec2()
    assert Vec2(0, 1)
    assert Vec2(-1, 0)


def test_abs():
    assert Vec2(-3.0, 4.0).abs() == Vec2(3.0, 4.0)
    assert Vec2(-3.0, -4.0).abs() == Vec2(3.0, 4.0)


def test_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Vec2(1.0, 1.0) / 0


def test_unsupported_operand():
    with pytest.raises(TypeError):
        Vec2(1.0, 1.0) + 1