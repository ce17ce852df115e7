import pytest

from sumcalc.math_ops import add, sum


@pytest.mark.acceptance
def test_sum_one_plus_two() -> None:
    assert sum(1, 2) == 3


@pytest.mark.acceptance
def test_sum_negative_one_plus_one() -> None:
    assert sum(-1, 1) == 0


@pytest.mark.acceptance
def test_sum_zero_plus_zero() -> None:
    assert sum(0, 0) == 0


@pytest.mark.acceptance
def test_sum_ten_plus_fifteen() -> None:
    assert sum(10, 15) == 25


def test_sum_is_add() -> None:
    assert sum is add


@pytest.mark.property
@pytest.mark.parametrize("a,b", [(1, 2), (-7, 3), (2.5, -0.5), (0, 99)])
def test_sum_is_commutative(a, b) -> None:
    assert sum(a, b) == sum(b, a)


@pytest.mark.property
@pytest.mark.parametrize("a", [0, 1, -1, 10**30, 3.25])
def test_zero_is_identity(a) -> None:
    assert sum(a, 0) == a
