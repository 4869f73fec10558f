import pytest

from property_formatter.modules.price_extractor import (
    PriceSequence,
    extract_price,
    format_amount,
    match_deposit_months,
)


@pytest.mark.parametrize(
    "line, expected",
    [
        ("Rent 25K", 25_000),
        ("1.5 Lac", 150_000),
        ("3 Lacs", 300_000),
        ("Price 95 L", 9_500_000),
        ("2 Cr", 20_000_000),
        ("1.5 C r", 15_000_000),
        ("18000 Rs", 18_000),
        ("Rent 25000", 25_000),
        ("Deposit: 50,000", 50_000),
        ("Rs. 18,000 per month", 18_000),
        ("Price 95,00,000", 9_500_000),
    ],
)
def test_extract_price_units(line, expected):
    assert extract_price(line) == expected


@pytest.mark.parametrize("line", ["2 BHK", "Deposit 2 Months", "Carpet area 950 sq.ft", "Price on call", ""])
def test_lines_without_price(line):
    assert extract_price(line) is None


def test_format_amount_drops_float_noise():
    assert format_amount(1.1 * 10_000_000) == "11000000"
    assert format_amount(25_000.0) == "25000"
    assert format_amount(1.5) == "1.5"


def test_deposit_months():
    assert match_deposit_months("Deposit 2 Months") == "2 Month"
    assert match_deposit_months("3month deposit") == "3month"
    assert match_deposit_months("no deposit") is None


def test_first_price_is_rent_second_is_deposit_for_rentals():
    seq = PriceSequence(is_rental=True)
    for amount in (25_000, 50_000, 60_000):
        seq.add_price(amount)
    assert seq.price == "25000"
    assert seq.deposit == "50000"
    assert seq.deposit_locked
    assert seq.prices == [25_000, 50_000, 60_000]


def test_resale_never_gets_a_deposit():
    seq = PriceSequence(is_rental=False)
    seq.add_price(9_500_000)
    seq.add_price(9_000_000)
    assert seq.price == "9500000"
    assert seq.deposit is None


def test_price_not_listed_only_before_numeric_prices():
    seq = PriceSequence(is_rental=True)
    assert seq.price_not_listed("Price on call")
    assert not seq.price_not_listed("Call for rent")
    assert seq.price == "Price on call"

    seq = PriceSequence(is_rental=True)
    seq.add_price(25_000)
    assert not seq.price_not_listed("Price on call")
    assert seq.price == "25000"


def test_month_deposit_needs_exactly_one_price():
    seq = PriceSequence(is_rental=True)
    assert not seq.deposit_months("2 Month")
    seq.add_price(25_000)
    assert seq.deposit_months("2 Month")
    assert seq.deposit == "2 Month"
    seq.add_price(40_000)
    assert seq.deposit == "2 Month"


def test_locked_deposit_keeps_price_phrase():
    seq = PriceSequence(is_rental=True)
    seq.price_not_listed("Rent on request")
    seq.lock_deposit("2 Month")
    seq.add_price(30_000)
    assert seq.price == "Rent on request"
    assert seq.deposit == "2 Month"
