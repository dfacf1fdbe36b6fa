"""Pytest configuration and fixtures

Provides shared row records, datasets and a renderer that does not depend on
DATATABLE_* environment variables.
"""

import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# Add project root to sys.path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from datatable.data import PageSlice, RowList
from datatable.logger import Logger
from datatable.rendering import TableRenderer
from datatable.validation import ActionSpec, TableOptions


# ============================================================================
# RECORDS AND DATASETS
# ============================================================================


def make_users(count: int):
    """Build ``count`` user dicts with ids starting at 1."""
    return [{"id": i, "name": f"user{i}", "email": f"user{i}@example.com"} for i in range(1, count + 1)]


@pytest.fixture
def users():
    """Three user records as plain dicts."""
    return [
        {"id": 1, "name": "alice", "email": "alice@example.com"},
        {"id": 2, "name": "bob", "email": "bob@example.com"},
        {"id": 3, "name": "carol", "email": "carol@example.com"},
    ]


@pytest.fixture
def unpaginated(users):
    """Unpaginated dataset over the three users."""
    return RowList(users)


@pytest.fixture
def paginated_factory():
    """Factory for a page of ``total`` generated users."""

    def _factory(page: int, per_page: int, total: int, links: str = '<ul class="pagination"></ul>'):
        return PageSlice.from_rows(make_users(total), page=page, page_size=per_page, links_markup=links)

    return _factory


# ============================================================================
# RENDERER
# ============================================================================


@pytest.fixture
def mock_logger():
    """Logger double that records calls."""
    return MagicMock(spec=Logger)


@pytest.fixture
def renderer(mock_logger):
    """Renderer with default options and a mock logger."""
    return TableRenderer(options=TableOptions(), logger=mock_logger)


@pytest.fixture
def edit_action():
    """Edit link with a single {id} placeholder."""
    return ActionSpec(label="Edit", href="/users/{id}/edit", attributes={"class": "btn"})
