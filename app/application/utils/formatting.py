from __future__ import annotations

from app.domain.entities.preferences import Preferences


def format_money(value: float, preferences: Preferences) -> str:
    """Two-decimal display rounding plus the tenant's currency symbol."""
    return f"{value:,.2f} {preferences.currency_symbol}"


def format_size_label(size_key: str) -> str:
    # "long-gmc" -> "Long Gmc"
    return size_key.replace("-", " ").title()
