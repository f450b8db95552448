"""
Utility functions used across the project.
"""


def format_currency(amount: float) -> str:
    """Format a number as currency."""
    if amount < 0:
        return f"-${abs(amount):,.2f}"
    return f"${amount:,.2f}"


def format_percent(fraction: float) -> str:
    """Format a 0..1 fraction as a whole percent (e.g. 0.236 -> '24%')."""
    return f"{fraction * 100:.0f}%"


def print_header(title: str, char: str = "=", width: int = 60):
    """Print a formatted header."""
    print(char * width)
    print(title.center(width))
    print(char * width)


def print_section(title: str, char: str = "-", width: int = 40):
    """Print a section divider."""
    print(f"\n{title}")
    print(char * width)


def mask_identifier(identifier: int | str) -> str:
    """
    Mask an identifier to show only its last 4 characters.

    Args:
        identifier: Account number or national identifier (int or str)

    Returns:
        Masked string showing only last 4 characters (e.g., "###1234")

    Examples:
        >>> mask_identifier(4111111111111234)
        '###1234'
        >>> mask_identifier("123")
        '###123'
    """
    id_str = str(identifier)
    if len(id_str) <= 4:
        return f"###{id_str}"
    return f"###{id_str[-4:]}"
