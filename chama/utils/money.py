from chama.core.config import CURRENCY


def format_amount(amount: float) -> str:
    """1000 -> "KES 1,000", 1234.5 -> "KES 1,234.5"."""
    text = f"{amount:,.2f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return f"{CURRENCY} {text}"
