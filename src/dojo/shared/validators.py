# src/dojo/shared/validators.py
"""
Input Validation Utilities

This module validates configuration values and command-line input before
they reach the domain.

Files that USE this module:
- dojo.config.settings (field validators)
- dojo.adapters.providers.open_er_api (URL check on construction)
- dojo.app (--amount argument)

Files that this module USES:
- None (pure utility functions)
"""
import math
import urllib.parse
from typing import Optional


def validate_url(url: str) -> bool:
    """
    Validate that a URL is absolute and uses http or https.

    Args:
        url: URL to validate

    Returns:
        True if valid, False otherwise
    """
    if not url or url.isspace():
        return False

    parsed = urllib.parse.urlparse(url)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def validate_numeric_input(value: str, min_val: Optional[float] = None,
                           max_val: Optional[float] = None) -> bool:
    """
    Validate numeric input string.

    Args:
        value: String value to validate
        min_val: Minimum allowed value
        max_val: Maximum allowed value

    Returns:
        True if valid, False otherwise
    """
    if not value:
        return False

    try:
        num_val = float(value)
    except ValueError:
        return False
    if math.isnan(num_val) or math.isinf(num_val):
        return False
    if min_val is not None and num_val < min_val:
        return False
    if max_val is not None and num_val > max_val:
        return False
    return True
