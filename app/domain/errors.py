"""Financing comparison errors."""


class FinancingError(Exception):
    """Base class for financing comparison errors."""

    code = "financing_error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class FinancingValidationError(FinancingError):
    """Client input rejected before any computation runs."""

    code = "validation_error"


class MissingField(FinancingValidationError):
    """Principal or term is absent, null or zero."""

    code = "missing_field"


class PrincipalOutOfRange(FinancingValidationError):
    """Principal falls outside the financeable range."""

    code = "principal_out_of_range"


class InvalidTerm(FinancingValidationError):
    """Term is not one of the offered plan lengths."""

    code = "invalid_term"


class InternalComputationError(FinancingError):
    """Unexpected failure while computing the projections."""

    code = "internal_computation_error"
