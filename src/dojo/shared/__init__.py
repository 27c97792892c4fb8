# src/dojo/shared/__init__.py
"""
Shared Utilities - Cross-cutting Concerns

This package contains shared utilities used across all layers:
- Validation
- Logging configuration
"""

from dojo.shared.validators import validate_numeric_input, validate_url

__all__ = [
    "validate_url",
    "validate_numeric_input",
]
