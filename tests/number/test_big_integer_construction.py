import pytest
from gmpy2 import mpz

from biginteger import BigInteger, DomainError, ParseError


def test_from_decimal_string():
    """Test that a long decimal literal survives construction and printing."""
    literal = "123456789012345678901234567890"
    assert BigInteger.from_value(literal).to_string() == literal


def test_from_negative_decimal_string():
    """Test that a leading minus sign is parsed."""
    assert BigInteger.from_value("-42").to_string() == "-42"


@pytest.mark.parametrize(
    "value, base, expected",
    [
        ("ff", 16, 255),
        ("FF", 16, 255),
        ("777", 8, 511),
        ("1010", 2, 10),
        ("0x1f", 0, 31),
        ("0b101", 0, 5),
        ("z", 36, 35),
        ("Z", 62, 35),
        ("z", 62, 61),
        ("010", 0, 10),
    ],
)
def test_from_string_in_base(value, base, expected):
    """Test parsing in explicit bases and with prefix auto-detection."""
    assert BigInteger.from_value(value, base).to_int() == expected


@pytest.mark.parametrize(
    "value",
    ["", "   ", "12a", "1.5", "abc", "--1", "--5", "+-1", "12 34", "1_000", "5 -", "-", "0x1f"],
)
def test_non_numeric_string_raises_parse_error(value):
    """Test that non-numeric strings raise ParseError."""
    with pytest.raises(ParseError):
        BigInteger.from_value(value)


@pytest.mark.parametrize("value, expected", [("+7", 7), ("  42\n", 42), ("-0", 0)])
def test_sign_and_surrounding_whitespace(value, expected):
    """Test that one leading sign and outer whitespace are accepted."""
    assert BigInteger.from_value(value).to_int() == expected


@pytest.mark.parametrize(
    "value, base, expected",
    [("-0x1f", 0, -31), ("0x1f", 16, 31), ("0b101", 2, 5), ("0o17", 8, 15)],
)
def test_prefix_in_matching_base(value, base, expected):
    """Test that a radix prefix is accepted in base 0 and in its own base."""
    assert BigInteger.from_value(value, base).to_int() == expected


@pytest.mark.parametrize("value, base", [("0x1f", 8), ("0b1", 10), ("0x", 16), ("1 0", 2)])
def test_malformed_string_in_base_raises_parse_error(value, base):
    """Test that prefixes for another radix and inner whitespace are rejected."""
    with pytest.raises(ParseError):
        BigInteger.from_value(value, base)


def test_string_operand_is_parsed_strictly():
    """Test that string operands of arithmetic methods get the same checks."""
    with pytest.raises(ParseError):
        BigInteger.from_value(1).add("1 0")
    with pytest.raises(ParseError):
        BigInteger.from_value(1).compare("1_0")


def test_digit_outside_base_raises_parse_error():
    """Test that a digit that is valid in base 10 is rejected in base 2."""
    with pytest.raises(ParseError):
        BigInteger.from_value("102", 2)


@pytest.mark.parametrize("base", [1, -2, 63])
def test_invalid_base_raises_parse_error(base):
    """Test that bases outside 0 and 2..62 are rejected."""
    with pytest.raises(ParseError, match="Base must be"):
        BigInteger.from_value("10", base)


def test_parse_error_is_value_error():
    """Test that ParseError can be handled as a ValueError."""
    with pytest.raises(ValueError):
        BigInteger.from_value("not a number")


def test_from_native_int_ignores_base():
    """Test that integers are taken literally whatever the base."""
    assert BigInteger.from_value(42, 16).to_int() == 42
    assert BigInteger.from_value(-7).to_int() == -7


def test_from_mpz_and_big_integer():
    """Test construction from an engine value and from another BigInteger."""
    value = BigInteger.from_value(mpz(10) ** 40)
    assert BigInteger.from_value(value) == value
    assert value.to_string() == "1" + "0" * 40


def test_unsupported_type_raises_type_error():
    """Test that floats have no registered conversion."""
    with pytest.raises(TypeError):
        BigInteger.from_value(1.5)


def test_of_coerces_operands():
    """Test that of() accepts every coercible operand type."""
    assert BigInteger.of("12") == 12
    assert BigInteger.of(12) == 12
    assert BigInteger.of(mpz(12)) == 12
    assert BigInteger.of(BigInteger.of(12)) == 12


def test_of_returns_big_integer_unchanged():
    """Test that of() does not rewrap a BigInteger."""
    value = BigInteger.from_value(12)
    assert BigInteger.of(value) is value
    assert BigInteger.of(BigInteger.one()) is BigInteger.one()


def test_from_buffer_little_endian_by_default():
    """Test that the default byte order reverses the buffer first."""
    assert BigInteger.from_buffer(b"\x01\x02").to_int() == 0x0201


def test_from_buffer_big_endian():
    """Test reading a buffer without reversing it."""
    assert BigInteger.from_buffer(b"\x01\x02", reverse=False).to_int() == 0x0102


def test_from_buffer_leading_zero_bytes():
    """Test that leading zero bytes do not change the value."""
    assert BigInteger.from_buffer(b"\x00\x00\x05", reverse=False).to_int() == 5


def test_from_buffer_accepts_bytearray():
    """Test that mutable buffers are accepted."""
    assert BigInteger.from_buffer(bytearray(b"\xff"), reverse=False).to_int() == 255


@pytest.mark.parametrize("reverse", [True, False])
def test_from_empty_buffer_is_zero(reverse):
    """Test that an empty buffer yields zero."""
    assert BigInteger.from_buffer(b"", reverse).equal(0)


def test_zero_and_one_are_cached():
    """Test that the singletons are created once and keep their values."""
    assert BigInteger.zero() is BigInteger.zero()
    assert BigInteger.one() is BigInteger.one()
    assert BigInteger.zero().to_string() == "0"
    assert BigInteger.one().to_string() == "1"


def test_factorial():
    """Test the uncached factorial."""
    assert BigInteger.factorial(0).to_int() == 1
    assert BigInteger.factorial(20).to_int() == 2432902008176640000
    assert BigInteger.factorial(30).to_string() == "265252859812191058636308480000000"


def test_factorial_of_negative_raises_domain_error():
    """Test that negative factorials are rejected."""
    with pytest.raises(DomainError):
        BigInteger.factorial(-1)
