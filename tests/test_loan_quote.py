from decimal import Decimal

import pytest

from common_utils import InsufficientOffersError
from loan_quote import Quote, build_quote
from offer_allocator import Tranche
from quote_formatter import format_quote, format_rate, format_currency, print_formatted_quote


def test_build_quote_for_reference_market(reference_market):
    quote = build_quote(reference_market, "2000")

    assert quote.requested_amount == Decimal("2000")
    assert quote.rate == Decimal("0.072")
    assert quote.monthly_repayment == Decimal("61.93725")
    assert quote.total_repayment == Decimal("2229.74")
    assert sum(tranche.amount for tranche in quote.tranches) == Decimal("2000")
    assert quote.tranches[0] == Tranche(Decimal("0.069"), Decimal("480"))


def test_build_quote_above_capacity_raises(reference_market):
    with pytest.raises(InsufficientOffersError):
        build_quote(reference_market, "2400")


def test_format_quote():
    quote = Quote(Decimal("2000"), Decimal("0.072"), Decimal("61.93725"), Decimal("2229.74"))

    assert format_quote(quote) == (
        "Requested amount: £2000\n"
        "Rate: 7.2%\n"
        "Monthly repayment: £61.93\n"
        "Total repayment: £2229.74"
    )
    assert str(quote) == format_quote(quote)


def test_print_formatted_quote(reference_market, capsys):
    print_formatted_quote(build_quote(reference_market, "1000"))

    assert capsys.readouterr().out == (
        "Requested amount: £1000\n"
        "Rate: 7.0%\n"
        "Monthly repayment: £30.88\n"
        "Total repayment: £1111.70\n"
    )


@pytest.mark.parametrize("rate, expected", [
    ("0.072", "7.2"),
    ("0.0759", "7.5"),
    ("0.070", "7.0"),
    ("0.104", "10.4"),
])
def test_rate_is_floored_to_one_decimal(rate, expected):
    assert format_rate(Decimal(rate)) == expected


@pytest.mark.parametrize("amount, expected", [
    ("61.93725", "61.93"),
    ("30.88999", "30.88"),
    ("1111.7", "1111.70"),
    ("50", "50.00"),
])
def test_currency_is_floored_to_pence(amount, expected):
    assert format_currency(Decimal(amount)) == expected
