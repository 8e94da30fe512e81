"""Tests for request parsing and PaymentSchedule."""

import pytest

from mortgage.request import MortgageRequest, PaymentSchedule, parse_number, parse_request


def test_parse_request_numbers_and_strings() -> None:
    """Numeric fields accept JSON numbers and numeric strings alike."""
    request = parse_request(
        {
            "propertyPrice": "300000",
            "downPayment": 42000,
            "annualInterestRate": " 4.19 ",
            "amortizationPeriod": "25",
            "paymentSchedule": "m",
        }
    )
    assert request == MortgageRequest(
        property_price=300000.0,
        down_payment=42000.0,
        annual_interest_rate=4.19,
        amortization_period_years=25.0,
        payment_schedule="m",
    )


def test_parse_request_missing_fields_are_none() -> None:
    """An empty body parses to a request with every field missing."""
    request = parse_request({})
    assert request.property_price is None
    assert request.down_payment is None
    assert request.annual_interest_rate is None
    assert request.amortization_period_years is None
    assert request.payment_schedule is None


@pytest.mark.parametrize(
    "raw",
    ["invalid", "", "   ", "12abc", "1_000", "nan", "inf", "Infinity", True, [1], {"a": 1}, float("nan")],
)
def test_parse_number_rejects_non_numbers(raw) -> None:
    """Anything that is not a finite plain number parses to None."""
    assert parse_number(raw) is None


@pytest.mark.parametrize(
    "raw, expected",
    [("1e3", 1000.0), ("-5", -5.0), (".5", 0.5), ("5.", 5.0), ("+7", 7.0), (0, 0.0), (2.5, 2.5)],
)
def test_parse_number_accepts_plain_literals(raw, expected) -> None:
    """Signs, fractions and exponents are accepted."""
    assert parse_number(raw) == expected


def test_parse_schedule_keeps_raw_code() -> None:
    """Unknown codes are kept for the validator; empty ones become None."""
    assert parse_request({"paymentSchedule": "weekly"}).payment_schedule == "weekly"
    assert parse_request({"paymentSchedule": ""}).payment_schedule is None
    assert parse_request({"paymentSchedule": 5}).payment_schedule == "5"


def test_request_is_immutable() -> None:
    """MortgageRequest is a frozen value."""
    request = parse_request({"propertyPrice": 1})
    with pytest.raises(AttributeError):
        request.property_price = 2  # type: ignore[misc]


def test_schedule_periods() -> None:
    """Accelerated bi-weekly pays 26 times a year but amortizes on the monthly basis."""
    assert PaymentSchedule.MONTHLY.payments_per_year == 12
    assert PaymentSchedule.BI_WEEKLY.payments_per_year == 26
    assert PaymentSchedule.ACCELERATED_BI_WEEKLY.payments_per_year == 26
    assert PaymentSchedule.MONTHLY.base_periods_per_year == 12
    assert PaymentSchedule.BI_WEEKLY.base_periods_per_year == 26
    assert PaymentSchedule.ACCELERATED_BI_WEEKLY.base_periods_per_year == 12
    assert PaymentSchedule("abw") is PaymentSchedule.ACCELERATED_BI_WEEKLY


def test_parse_number_integer_too_large_for_float() -> None:
    """Integers beyond float range parse to None instead of raising."""
    assert parse_number(10**400) is None
    assert parse_number("1" + "0" * 400) is None
    assert parse_request({"propertyPrice": 10**400}).property_price is None
