from dataclasses import dataclass


@dataclass(frozen=True)
class Preferences:
    currency_symbol: str = "SAR"
    theme: str = "light"  # "light" | "dark"
