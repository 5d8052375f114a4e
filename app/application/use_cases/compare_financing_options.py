"""Compare financing options use case."""

import math
from typing import Optional

from app.application.dtos.financing import (
    CalculatorOptions,
    ComparisonResult,
    FinancingOption,
    RecommendedOption,
    TermOption,
)
from app.application.use_cases.user_messages_es import UserMessagesES
from app.domain.errors import (
    InternalComputationError,
    InvalidTerm,
    MissingField,
    PrincipalOutOfRange,
)
from app.domain.value_objects.apr import APR
from app.domain.value_objects.loan_term_months import ALLOWED_TERMS, LoanTermMonths
from app.domain.value_objects.money import Money


class CompareFinancingOptions:
    """Use case comparing a flat-rate plan against an amortized bank loan."""

    # Flat rate charged on the full principal for every year of the term
    FLAT_RATE_APR = APR(rate=0.0359)
    # Nominal annual rate of the bank loan
    BANK_APR = APR(rate=0.16)

    MIN_PRINCIPAL = 14000.0
    MAX_PRINCIPAL = 90000.0
    PRINCIPAL_STEP = 1000.0
    DEFAULT_PRINCIPAL = 50000.0
    DEFAULT_TERM_MONTHS = 60

    def compare(
        self,
        principal: Optional[float],
        term_months: Optional[float],
    ) -> ComparisonResult:
        """
        Compare both financing options for a principal and term.

        Args:
            principal: Amount financed
            term_months: Number of monthly payments

        Returns:
            Comparison of option A (flat-rate plan) and option B (bank loan)

        Raises:
            MissingField: If principal or term is missing or zero
            PrincipalOutOfRange: If principal is outside the financeable range
            InvalidTerm: If term is not an offered plan length
            InternalComputationError: If the computation fails unexpectedly
        """
        self._validate(principal, term_months)

        try:
            amount = Money(float(principal))
            term = LoanTermMonths(months=int(term_months))

            option_a = self._flat_rate_option(amount, term)
            option_b = self._bank_loan_option(amount, term)

            # Strict comparison: a tie recommends the bank loan
            if option_a.total_amount < option_b.total_amount:
                recommended = RecommendedOption.A
            else:
                recommended = RecommendedOption.B

            result = ComparisonResult(
                option_a=option_a,
                option_b=option_b,
                monthly_payment_delta=option_b.monthly_payment - option_a.monthly_payment,
                total_cost_delta=option_b.financing_cost - option_a.financing_cost,
                total_savings=option_b.total_amount - option_a.total_amount,
                recommended_option=recommended,
                principal=amount.amount,
                term_months=term.months,
            )
        except Exception as err:
            raise InternalComputationError(UserMessagesES.CALCULATION_FAILED) from err

        if not all(math.isfinite(value) for value in _numeric_fields(result)):
            raise InternalComputationError(UserMessagesES.CALCULATION_FAILED)

        return result

    def calculator_options(self) -> CalculatorOptions:
        """
        Get the bounds and defaults of the calculator form.

        Returns:
            Calculator form parameters
        """
        return CalculatorOptions(
            min_principal=self.MIN_PRINCIPAL,
            max_principal=self.MAX_PRINCIPAL,
            principal_step=self.PRINCIPAL_STEP,
            default_principal=self.DEFAULT_PRINCIPAL,
            allowed_terms=[
                TermOption(months=months, label=UserMessagesES.term_label(months))
                for months in ALLOWED_TERMS
            ],
            default_term_months=self.DEFAULT_TERM_MONTHS,
        )

    def _validate(self, principal: Optional[float], term_months: Optional[float]) -> None:
        """Validate inputs in order; the first failing rule wins."""
        if _is_blank(principal) or _is_blank(term_months):
            raise MissingField(UserMessagesES.MISSING_FIELDS)

        if principal < self.MIN_PRINCIPAL or principal > self.MAX_PRINCIPAL:
            raise PrincipalOutOfRange(
                UserMessagesES.principal_out_of_range(self.MIN_PRINCIPAL, self.MAX_PRINCIPAL)
            )

        if term_months not in ALLOWED_TERMS:
            raise InvalidTerm(UserMessagesES.invalid_term(ALLOWED_TERMS))

    def _flat_rate_option(self, principal: Money, term: LoanTermMonths) -> FinancingOption:
        """
        Flat-rate plan: interest is charged once on the full principal.

        financing_cost = P * rate * years
        monthly_payment = (P + financing_cost) / n
        """
        financing_cost = principal * self.FLAT_RATE_APR.rate * term.years
        total_amount = principal + financing_cost
        monthly_payment = total_amount / term.months

        return FinancingOption(
            monthly_payment=monthly_payment.amount,
            total_amount=total_amount.amount,
            financing_cost=financing_cost.amount,
            annual_rate=self.FLAT_RATE_APR.as_percentage,
            label=UserMessagesES.FLAT_RATE_PLAN_LABEL,
        )

    def _bank_loan_option(self, principal: Money, term: LoanTermMonths) -> FinancingOption:
        """Bank loan amortized with constant payments (French method)."""
        # M = P * [r(1+r)^n] / [(1+r)^n - 1]
        # Where:
        # M = monthly payment
        # P = principal
        # r = monthly interest rate
        # n = number of months
        monthly_rate = self.BANK_APR.monthly_rate
        growth_factor = (1 + monthly_rate) ** term.months
        monthly_payment = principal * (monthly_rate * growth_factor) / (growth_factor - 1)

        total_amount = monthly_payment * term.months
        financing_cost = total_amount - principal

        return FinancingOption(
            monthly_payment=monthly_payment.amount,
            total_amount=total_amount.amount,
            financing_cost=financing_cost.amount,
            annual_rate=self.BANK_APR.as_percentage,
            label=UserMessagesES.BANK_LOAN_LABEL,
        )


def _is_blank(value: Optional[float]) -> bool:
    """Check for a missing, zero or NaN input."""
    return value is None or value == 0 or math.isnan(value)


def _numeric_fields(result: ComparisonResult) -> list[float]:
    """Collect every computed amount of a comparison."""
    values = [
        result.monthly_payment_delta,
        result.total_cost_delta,
        result.total_savings,
    ]
    for option in (result.option_a, result.option_b):
        values.extend([option.monthly_payment, option.total_amount, option.financing_cost])
    return values
