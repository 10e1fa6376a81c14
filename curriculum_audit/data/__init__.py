"""
Data loading module.

This package turns curriculum and course documents into model objects.
"""

from .loader import DataLoader

__all__ = ["DataLoader"]
