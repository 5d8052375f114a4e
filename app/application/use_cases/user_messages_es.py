"""Spanish user-facing messages for the financing simulator."""


class UserMessagesES:
    """Centralized Spanish user-facing messages."""

    # Financing option labels
    FLAT_RATE_PLAN_LABEL = "Chevy Plan"
    BANK_LOAN_LABEL = "Crédito Bancario"

    # Validation errors
    MISSING_FIELDS = "Monto y meses son requeridos"

    @staticmethod
    def principal_out_of_range(min_principal: float, max_principal: float) -> str:
        """Generate out-of-range principal message."""
        return f"El monto debe estar entre ${min_principal:,.0f} y ${max_principal:,.0f}"

    @staticmethod
    def invalid_term(allowed_terms: tuple[int, ...]) -> str:
        """Generate invalid term message (e.g. '24, 36 o 48')."""
        terms = [str(term) for term in allowed_terms]
        return f"El plazo debe ser {', '.join(terms[:-1])} o {terms[-1]} meses"

    # Internal failure
    CALCULATION_FAILED = "Error al procesar el cálculo"

    # Calculator form
    @staticmethod
    def term_label(months: int) -> str:
        """Generate term option label, e.g. '60 meses (5 años)'."""
        years = months // 12
        unit = "año" if years == 1 else "años"
        return f"{months} meses ({years} {unit})"
