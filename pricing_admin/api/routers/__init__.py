"""
API router modules
"""

from . import categories, custom_fields, marketplaces

__all__ = ["categories", "custom_fields", "marketplaces"]
