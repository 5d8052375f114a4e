"""Unit tests for domain value objects."""

import pytest

from app.domain.value_objects.apr import APR
from app.domain.value_objects.loan_term_months import ALLOWED_TERMS, LoanTermMonths
from app.domain.value_objects.money import Money


def test_money_arithmetic():
    """Test Money addition, subtraction, multiplication and division."""
    principal = Money(50000.0)

    assert (principal + Money(8975.0)).amount == 58975.0
    assert (Money(72954.0) - principal).amount == 22954.0
    assert (principal * 0.5).amount == 25000.0
    assert (principal / 4).amount == 12500.0


def test_money_comparison():
    """Test Money ordering."""
    assert Money(58975.0) < Money(72954.0)
    assert Money(100.0) <= Money(100.0)
    assert not Money(100.0) < Money(100.0)


def test_money_negative_amount_raises_error():
    """Test that negative money amounts are rejected."""
    with pytest.raises(ValueError, match="cannot be negative"):
        Money(-1.0)


def test_money_division_by_zero_raises_error():
    """Test that dividing money by zero is rejected."""
    with pytest.raises(ValueError, match="divide by zero"):
        Money(100.0) / 0


def test_apr_monthly_rate():
    """Test APR monthly rate is the nominal annual rate over twelve."""
    assert APR(rate=0.16).monthly_rate == 0.16 / 12


def test_apr_as_percentage():
    """Test APR percentage has no binary floating point residue."""
    assert APR(rate=0.0359).as_percentage == 3.59
    assert APR(rate=0.16).as_percentage == 16.0


@pytest.mark.parametrize("rate", [-0.01, 1.5])
def test_apr_out_of_bounds_raises_error(rate):
    """Test that APR rates outside 0-100% are rejected."""
    with pytest.raises(ValueError, match="between 0 and 1"):
        APR(rate=rate)


@pytest.mark.parametrize("months", ALLOWED_TERMS)
def test_loan_term_allowed_values(months):
    """Test every offered term is accepted."""
    term = LoanTermMonths(months=months)
    assert term.months == months
    assert term.years == months / 12


def test_loan_term_years():
    """Test loan term conversion to years."""
    assert LoanTermMonths(months=60).years == 5
    assert LoanTermMonths(months=84).years == 7


@pytest.mark.parametrize("months", [12, 30, 61, 96])
def test_loan_term_not_offered_raises_error(months):
    """Test that terms outside the offered plans are rejected."""
    with pytest.raises(ValueError, match="24, 36, 48, 60, 72, or 84"):
        LoanTermMonths(months=months)


def test_loan_term_non_positive_raises_error():
    """Test that zero or negative terms are rejected."""
    with pytest.raises(ValueError, match="must be positive"):
        LoanTermMonths(months=0)
