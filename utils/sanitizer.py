"""
Input Sanitization Module

Cleans catalog records received through the JSON API before they reach
the database.
"""

import re

from constants import MAX_LENGTHS


def sanitize_product_name(name, max_length=MAX_LENGTHS['product_name']):
    """
    Sanitize a product name for safe storage and display.

    Args:
        name: The product name to sanitize
        max_length: Maximum allowed length (default 200)

    Returns:
        Sanitized product name, or 'Unnamed product' when nothing is left
    """
    if not name:
        return 'Unnamed product'

    if not isinstance(name, str):
        name = str(name)

    name = name.strip()

    # Remove control characters and null bytes
    name = re.sub(r'[\x00-\x1f\x7f-\x9f]', '', name)

    # Collapse multiple spaces
    name = re.sub(r'\s+', ' ', name)

    if len(name) > max_length:
        name = name[:max_length-3] + '...'

    if not name:
        return 'Unnamed product'

    return name


def sanitize_code(value, max_length):
    """Identifiers, SKUs and tags: printable, no spaces at the ends, truncated."""
    if value is None:
        return ''
    value = re.sub(r'[\x00-\x1f\x7f-\x9f]', '', str(value)).strip()
    return value[:max_length]
