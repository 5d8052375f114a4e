"""Financing comparison DTOs."""

from enum import Enum
from typing import Any, Optional

from pydantic import AliasChoices, Field

from app.application.dtos.base import DTO


class RecommendedOption(str, Enum):
    """Financing option with the lower total amount."""

    A = "A"
    B = "B"


class CalculationRequest(DTO):
    """Calculation request DTO.

    Fields are optional so that a missing value reaches the use case and is
    reported as a missing-field error. ``monto`` and ``meses`` are accepted
    for the form payloads that predate the English field names.
    """

    principal: Optional[float] = Field(
        default=None,
        validation_alias=AliasChoices("principal", "monto"),
    )
    term_months: Optional[float] = Field(
        default=None,
        validation_alias=AliasChoices("term_months", "meses"),
    )

    class Config:
        """Pydantic configuration."""

        json_schema_extra = {
            "example": {
                "principal": 50000,
                "term_months": 60,
            }
        }


class FinancingOption(DTO):
    """One financing projection."""

    monthly_payment: float
    total_amount: float
    financing_cost: float
    annual_rate: float
    label: str


class ComparisonResult(DTO):
    """Flat-rate plan (option A) against bank loan (option B)."""

    option_a: FinancingOption
    option_b: FinancingOption
    monthly_payment_delta: float
    total_cost_delta: float
    total_savings: float
    recommended_option: RecommendedOption
    principal: float
    term_months: int
    debug: Optional[dict[str, Any]] = None

    class Config:
        """Pydantic configuration."""

        json_schema_extra = {
            "example": {
                "option_a": {
                    "monthly_payment": 982.92,
                    "total_amount": 58975.0,
                    "financing_cost": 8975.0,
                    "annual_rate": 3.59,
                    "label": "Chevy Plan",
                },
                "option_b": {
                    "monthly_payment": 1215.90,
                    "total_amount": 72954.24,
                    "financing_cost": 22954.24,
                    "annual_rate": 16.0,
                    "label": "Crédito Bancario",
                },
                "monthly_payment_delta": 232.98,
                "total_cost_delta": 13979.24,
                "total_savings": 13979.24,
                "recommended_option": "A",
                "principal": 50000.0,
                "term_months": 60,
                "debug": None,
            }
        }


class TermOption(DTO):
    """Selectable loan term."""

    months: int
    label: str


class CalculatorOptions(DTO):
    """Parameters of the calculator form."""

    min_principal: float
    max_principal: float
    principal_step: float
    default_principal: float
    allowed_terms: list[TermOption]
    default_term_months: int


class ErrorResponse(DTO):
    """Error payload returned by the calculate endpoint."""

    error: str
    code: str
