from decimal import Decimal
from groupstake.utils.amount import to_wei, from_wei, from_wei_rounded, big_int_mean


def test_to_wei_parses_decimal_input():
    assert to_wei("1") == 10**18
    assert to_wei("0.5") == 5 * 10**17
    assert to_wei(2) == 2 * 10**18
    assert to_wei(0.1) == 10**17
    assert to_wei(Decimal("1.25")) == 125 * 10**16
    assert to_wei(" 3 ") == 3 * 10**18


def test_to_wei_truncates_extra_precision():
    assert to_wei("0.0000000000000000019") == 1
    assert to_wei("1.5", decimals=0) == 1


def test_to_wei_rejects_garbage():
    assert to_wei("") is None
    assert to_wei("abc") is None
    assert to_wei(None) is None
    assert to_wei("NaN") is None
    assert to_wei("Infinity") is None
    assert to_wei(True) is None
    assert to_wei("1e999999") is None
    assert to_wei("-1e999999") is None


def test_to_wei_keeps_large_values_exact():
    big = "123456789012345678901234.123456789012345678"
    assert to_wei(big) == 123456789012345678901234123456789012345678


def test_from_wei():
    assert from_wei(15 * 10**17) == Decimal("1.5")
    assert from_wei(None) == Decimal(0)
    assert from_wei_rounded(1999 * 10**15, display_decimals=2) == Decimal("1.99")
    assert from_wei_rounded(96 * 10**22, 22, 0) == Decimal("96")


def test_big_int_mean():
    assert big_int_mean([]) == 0
    assert big_int_mean([1, 2]) == 1
    assert big_int_mean([10**30, 3 * 10**30]) == 2 * 10**30
