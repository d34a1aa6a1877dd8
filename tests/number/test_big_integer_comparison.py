import itertools

import pytest
from gmpy2 import mpz

from biginteger import BigInteger, ParseError

SAMPLES = [-(10**30), -7, -1, 0, 1, 7, 10**30]


@pytest.fixture
def seven():
    """Fixture for the value 7."""
    return BigInteger.from_value(7)


def test_compare_signs(seven):
    """Test that compare returns -1, 0 and 1."""
    assert seven.compare(8) == -1
    assert seven.compare(7) == 0
    assert seven.compare(6) == 1


@pytest.mark.parametrize("a, b", list(itertools.product(SAMPLES, repeat=2)))
def test_compare_is_antisymmetric(a, b):
    """Test compare(a, b) == -compare(b, a) and equal() agrees with compare()."""
    lhs = BigInteger.from_value(a)
    rhs = BigInteger.from_value(b)
    assert lhs.compare(rhs) == -rhs.compare(lhs)
    assert lhs.equal(rhs) == (lhs.compare(rhs) == 0)


def test_relational_operations(seven):
    """Test the relations derived from compare."""
    assert seven.less_than(8)
    assert not seven.less_than(7)
    assert seven.less_than_equal(7)
    assert seven.equal(7)
    assert seven.greater_than(6)
    assert not seven.greater_than(7)
    assert seven.greater_than_equal(7)


def test_operands_are_coerced(seven):
    """Test that BigInteger, str, int and mpz right-hand sides all work."""
    assert seven.equal(BigInteger.from_value(7))
    assert seven.equal("7")
    assert seven.equal(7)
    assert seven.equal(mpz(7))


def test_non_numeric_operand_raises_parse_error(seven):
    """Test that a non-numeric string operand is rejected."""
    with pytest.raises(ParseError):
        seven.compare("seven")


def test_between_inclusive(seven):
    """Test the closed interval."""
    assert seven.between(7, 9)
    assert seven.between(5, 7)
    assert seven.between("1", "100")
    assert not seven.between(8, 9)


def test_between_exclusive(seven):
    """Test that exclusive bounds reject both endpoints."""
    assert seven.between(6, 8, exclusive=True)
    assert not seven.between(7, 9, exclusive=True)
    assert not seven.between(5, 7, exclusive=True)


def test_rich_comparisons(seven):
    """Test Python operators against BigInteger, int and mpz."""
    assert seven == 7
    assert 7 == seven
    assert seven == mpz(7)
    assert seven != 8
    assert seven < 8
    assert seven <= BigInteger.from_value(7)
    assert seven > -1
    assert seven >= 7
    assert 6 < seven
    assert sorted([BigInteger.from_value(3), 1, BigInteger.from_value(2)]) == [1, 2, 3]


def test_rich_comparison_with_string_is_not_equal(seven):
    """Test that operators do not parse strings."""
    assert seven != "7"
    with pytest.raises(TypeError):
        seven < "8"
