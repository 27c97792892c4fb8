# src/dojo/adapters/__init__.py
"""
Adapters Layer - External Interfaces

This package contains all adapters for external systems:
- Providers (exchange-rate sources)
- Formatting (output)
"""

__all__ = []
