"""Grade-school decimal string multiplication."""
import numpy as np
import pytest

from generate_dataset import random_digit_string
from shared_lib.num_multiplication import multiply_decimal_strings, reverse_digits
from shared_lib.utils import MalformedInputError


class TestConcreteProducts:

    @pytest.mark.parametrize("s1,s2,expected", [
        ("99", "99", "9801"),
        ("0", "12345", "0"),
        ("123456789", "987654321", "121932631112635269"),
        ("1", "1", "1"),
        ("9", "9", "81"),
        ("2", "5", "10"),
        ("999999999999", "999999999999", "999999999998000000000001"),
    ])
    def test_known_values(self, s1, s2, expected):
        assert multiply_decimal_strings(s1, s2) == expected

    def test_zero_operand(self):
        for s in ["0", "000", "7", "1000", "98765432109876543210"]:
            assert multiply_decimal_strings("0", s) == "0"
            assert multiply_decimal_strings(s, "0000") == "0"

    def test_leading_zeros_stripped(self):
        assert multiply_decimal_strings("0012", "003") == "36"
        assert multiply_decimal_strings("000", "000") == "0"

    def test_trailing_zeros_kept(self):
        assert multiply_decimal_strings("1200", "300") == "360000"

    def test_carry_collapse(self):
        # 10 * 10 has 3 digits, shorter than len(s1) + len(s2)
        assert multiply_decimal_strings("10", "10") == "100"
        assert multiply_decimal_strings("5", "2") == "10"

    def test_reverse_digits(self):
        assert reverse_digits("1230") == [0, 3, 2, 1]


class TestAgainstBigInt:

    def test_random_matches_int_product(self):
        rng = np.random.default_rng(1234)
        for _ in range(50):
            s1 = random_digit_string(int(rng.integers(1, 60)), rng=rng)
            s2 = random_digit_string(int(rng.integers(1, 60)), rng=rng)
            assert multiply_decimal_strings(s1, s2) == str(int(s1) * int(s2))

    def test_commutative(self):
        rng = np.random.default_rng(7)
        for _ in range(20):
            s1 = random_digit_string(int(rng.integers(1, 40)), rng=rng)
            s2 = random_digit_string(int(rng.integers(1, 40)), rng=rng)
            assert multiply_decimal_strings(s1, s2) == multiply_decimal_strings(s2, s1)

    def test_all_nines_long(self):
        s = "9" * 300
        assert multiply_decimal_strings(s, s) == str(int(s) * int(s))

    def test_lopsided_lengths(self):
        s1 = random_digit_string(500, rng=np.random.default_rng(3))
        assert multiply_decimal_strings(s1, "7") == str(int(s1) * 7)


class TestMalformedInput:

    @pytest.mark.parametrize("s1,s2", [
        ("", "1"),
        ("1", ""),
        ("12a", "3"),
        ("-5", "3"),
        ("1.5", "2"),
        (" 1", "2"),
        ("١", "2"),  # non-ASCII digit
    ])
    def test_rejected(self, s1, s2):
        with pytest.raises(MalformedInputError):
            multiply_decimal_strings(s1, s2)

    def test_non_string_rejected(self):
        with pytest.raises(MalformedInputError):
            multiply_decimal_strings(12, "3")

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            multiply_decimal_strings("x", "1")
