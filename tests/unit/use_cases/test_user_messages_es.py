"""Unit tests for Spanish user-facing messages."""

from app.application.use_cases.user_messages_es import UserMessagesES


def test_principal_out_of_range_message():
    """Test principal range message uses thousands separators."""
    message = UserMessagesES.principal_out_of_range(14000, 90000)
    assert message == "El monto debe estar entre $14,000 y $90,000"


def test_invalid_term_message():
    """Test invalid term message lists every offered term."""
    message = UserMessagesES.invalid_term((24, 36, 48, 60, 72, 84))
    assert message == "El plazo debe ser 24, 36, 48, 60, 72 o 84 meses"


def test_term_label():
    """Test term labels show months and years."""
    assert UserMessagesES.term_label(24) == "24 meses (2 años)"
    assert UserMessagesES.term_label(84) == "84 meses (7 años)"
    assert UserMessagesES.term_label(12) == "12 meses (1 año)"
