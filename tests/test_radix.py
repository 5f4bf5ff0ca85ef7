"""
Tests for radix decoding of share values.
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from shamir_recover.radix import decode, encode, digit_value, MIN_BASE, MAX_BASE
from shamir_recover.precision import INT64, UINT64, IntegerRange
from shamir_recover.errors import EmptyValue, InvalidBase, InvalidDigit, NumericOverflow


ALL_BASES = range(MIN_BASE, MAX_BASE + 1)


def test_known_values():
    """Test the worked examples."""
    print("Testing known values...", end=" ")
    assert decode("111", 2) == 7
    assert decode("213", 4) == 2 * 16 + 1 * 4 + 3 == 39
    assert decode("4", 10) == 4
    assert decode("12", 10) == 12
    assert decode("ff", 16) == 255
    assert decode("0", 7) == 0
    assert decode("000101", 2) == 5
    print("PASS")


def test_matches_positional_notation():
    """Test decode agrees with positional evaluation in every base."""
    print("Testing positional notation (all bases)...", end=" ")
    samples = ["1", "10", "101", "1234567890abcdef", "fedcba9876543210" * 3]
    for base in ALL_BASES:
        for sample in samples:
            digits = "".join(c for c in sample if digit_value(c) < base) or "0"
            expected = 0
            for c in digits:
                expected = expected * base + int(c, 16)
            assert decode(digits, base) == expected
            assert decode(digits, base) == int(digits, base)
    print("PASS")


def test_case_insensitive():
    print("Testing case-insensitive letters...", end=" ")
    assert decode("ABCDEF", 16) == decode("abcdef", 16) == 0xABCDEF
    assert decode("aEd7015A346d63", 15) == decode("aed7015a346d63", 15)
    print("PASS")


def test_invalid_digit():
    """Test digits at or above the base are rejected."""
    print("Testing invalid digits...", end=" ")
    for digits, base, bad in [
        ("2", 2, "2"),
        ("102", 2, "2"),
        ("9", 8, "9"),
        ("a", 10, "a"),
        ("g", 16, "g"),
        ("G", 16, "G"),
        ("z", 16, "z"),
        ("-1", 10, "-"),
        (" 1", 10, " "),
        ("1.5", 10, "."),
        ("١", 10, "١"),
    ]:
        try:
            decode(digits, base)
            raise AssertionError(f"{digits!r} in base {base} should have raised")
        except InvalidDigit as e:
            assert e.char == bad
            assert e.base == base
            assert str(base) in str(e)
    print("PASS")


def test_invalid_base():
    print("Testing invalid bases...", end=" ")
    for base in [-2, 0, 1, 17, 36, True, "10", 2.0]:
        try:
            decode("1", base)
            raise AssertionError(f"base {base!r} should have raised")
        except InvalidBase as e:
            assert e.base == base
    print("PASS")


def test_empty_value():
    print("Testing empty value...", end=" ")
    try:
        decode("", 10)
        raise AssertionError("empty string should have raised")
    except EmptyValue:
        pass
    print("PASS")


def test_overflow_every_base():
    """Test the 64-bit limit is enforced exactly, in every base."""
    print("Testing 64-bit overflow (all bases)...", end=" ")
    for base in ALL_BASES:
        at_limit = encode(INT64.max, base)
        assert decode(at_limit, base, INT64) == INT64.max

        past_limit = encode(INT64.max + 1, base)
        try:
            decode(past_limit, base, INT64)
            raise AssertionError(f"base {base} should have overflowed")
        except NumericOverflow as e:
            assert e.base == base

        # Unbounded decoding never overflows
        assert decode(past_limit, base) == INT64.max + 1
    print("PASS")


def test_overflow_other_widths():
    print("Testing overflow at other widths...", end=" ")
    assert decode("f" * 16, 16, UINT64) == UINT64.max
    try:
        decode("1" + "0" * 16, 16, UINT64)
        raise AssertionError("should have overflowed uint64")
    except NumericOverflow:
        pass

    int8 = IntegerRange(bits=8)
    assert decode("127", 10, int8) == 127
    try:
        decode("128", 10, int8)
        raise AssertionError("should have overflowed int8")
    except NumericOverflow:
        pass

    # Leading zeros never count towards overflow
    assert decode("0" * 200 + "7f", 16, int8) == 127
    print("PASS")


def test_encode():
    print("Testing encode...", end=" ")
    assert encode(0, 2) == "0"
    assert encode(39, 4) == "213"
    assert encode(255, 16) == "ff"
    try:
        encode(-1, 10)
        raise AssertionError("negative should have raised")
    except ValueError:
        pass
    print("PASS")


def main():
    print("=" * 50)
    print("  Radix Decoding Tests")
    print("=" * 50)
    print()

    tests = [
        test_known_values,
        test_matches_positional_notation,
        test_case_insensitive,
        test_invalid_digit,
        test_invalid_base,
        test_empty_value,
        test_overflow_every_base,
        test_overflow_other_widths,
        test_encode,
    ]

    passed = 0
    failed = 0

    for test in tests:
        try:
            test()
            passed += 1
        except Exception as e:
            print(f"FAIL: {e}")
            import traceback
            traceback.print_exc()
            failed += 1

    print()
    print(f"Results: {passed} passed, {failed} failed")
    return failed == 0


if __name__ == "__main__":
    success = main()
    sys.exit(0 if success else 1)
