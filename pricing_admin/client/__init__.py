"""
Admin backend REST client
"""

from pricing_admin.client.admin_client import AdminAPIClient, AdminAPIError

__all__ = ["AdminAPIClient", "AdminAPIError"]
