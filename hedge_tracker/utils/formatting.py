"""Display formatting for the API and CLI."""


def format_currency(value: float | None) -> str:
    """US dollar amount with two decimals, e.g. -$1,234.50. None renders N/A."""
    if value is None:
        return "N/A"
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.2f}"


def format_number(value: float | None, precision: int = 4) -> str:
    if value is None:
        return "N/A"
    return f"{value:,.{precision}f}"


def format_percent(value: float | None, precision: int = 1) -> str:
    if value is None:
        return "N/A"
    return f"{value:.{precision}f}%"


def format_compact(value: float) -> str:
    """Short volume label: 1.25M, 12.3K, 950."""
    if value >= 1_000_000:
        return f"{value / 1_000_000:.2f}M"
    if value >= 1_000:
        return f"{value / 1_000:.1f}K"
    return f"{value:.0f}"
