"""
Page services
Load, edit and save the data behind the console pages
"""

from pricing_admin.services.category_list import CategoryListService
from pricing_admin.services.marketplace_editor import MarketplaceEditor

__all__ = ["CategoryListService", "MarketplaceEditor"]
