"""Dependency injection factory functions."""

from app.application.use_cases.compare_financing_options import CompareFinancingOptions


def create_compare_financing_options_use_case() -> CompareFinancingOptions:
    """
    Factory function to create CompareFinancingOptions.

    Returns:
        CompareFinancingOptions instance
    """
    return CompareFinancingOptions()
