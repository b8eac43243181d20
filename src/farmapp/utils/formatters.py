"""
pt-BR display formatting.

Thousands separated by dots, decimals by a comma: 56789.5 -> "56.789,50".
"""


def format_number(value: float, decimal_places: int = 0) -> str:
    """Format a number with pt-BR separators."""
    text = f"{value:,.{decimal_places}f}"
    return text.replace(",", "_").replace(".", ",").replace("_", ".")


def format_currency(value: float) -> str:
    """Format a value in reais: ``R$ 1.234,56``."""
    return f"R$ {format_number(value, 2)}"


def format_percentage(value: float) -> str:
    """Format a percentage with two decimals: ``5,20%``."""
    return f"{format_number(value, 2)}%"
