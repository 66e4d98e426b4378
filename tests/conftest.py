"""
Shared pytest fixtures
"""

import os
import sys
from pathlib import Path
from unittest.mock import AsyncMock

import pytest

# make the project root importable
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

os.environ.setdefault("ENV", "test")

from pricing_admin.client import AdminAPIClient  # noqa: E402
from pricing_admin.config import AdminAPIConfig  # noqa: E402
from pricing_admin.models.category import Category  # noqa: E402
from pricing_admin.models.custom_field import CustomFieldDefinition, CustomFieldValue  # noqa: E402

BASE_URL = "http://admin.test/api"


@pytest.fixture
def test_env(monkeypatch):
    """Test environment variables"""
    monkeypatch.setenv("ENV", "test")
    monkeypatch.setenv("DEBUG", "true")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("ADMIN_API_BASE_URL", BASE_URL + "/")
    monkeypatch.setenv("ADMIN_API_MAX_CONCURRENCY", "4")
    yield


@pytest.fixture
def api_config():
    return AdminAPIConfig(base_url=BASE_URL, token="test-token", timeout=5)


@pytest.fixture
async def admin_client(api_config):
    client = AdminAPIClient(api_config)
    yield client
    await client.close()


@pytest.fixture
def mock_client():
    """AdminAPIClient stand-in with async methods"""
    return AsyncMock(spec=AdminAPIClient)


@pytest.fixture
def sample_categories():
    """Root -> level-1 -> level-2 tree plus a second root branch"""
    return [
        Category(id=1, name="Apparel", parent_category_id=None, enabled=True),
        Category(id=2, name="Men", parent_category_id=1, enabled=True),
        Category(id=3, name="Shirts", parent_category_id=2, enabled=True),
        Category(id=4, name="Trousers", parent_category_id=2, enabled=True),
        Category(id=5, name="Women", parent_category_id=1, enabled=False),
        Category(id=6, name="Footwear", parent_category_id=None, enabled=True),
        Category(id=7, name="Sneakers", parent_category_id=6, enabled=True),
    ]


@pytest.fixture
def field_defs():
    names = ["Color", "Size", "Fabric", "Season", "Fit"]
    return [
        CustomFieldDefinition(id=index + 1, name=name, module="c", field_type="text", enabled=True)
        for index, name in enumerate(names)
    ]


@pytest.fixture
def make_value():
    """CustomFieldValue factory"""

    def factory(field_id: int, module_id: int, value: str = "x", module: str = "c") -> CustomFieldValue:
        return CustomFieldValue(custom_field_id=field_id, module=module, module_id=module_id, value=value)

    return factory
