"""
Global pytest configuration and fixtures for the property manager test suite.

This module puts the source tree on the import path and provides shared
apartment, repository and storage-client fixtures.
"""

import os
import sys
from pathlib import Path
from unittest.mock import AsyncMock, Mock

import pytest

# Test environment setup
os.environ["TESTING"] = "1"

# Import project modules for testing
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from property_manager.domain.entities.apartment import Apartment
from property_manager.domain.entities.renter import Renter
from property_manager.domain.entities.room import Room
from tests.utils.test_helpers import InMemoryRedis, MockHelpers


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers automatically."""
    for item in items:
        if "repository" in str(item.path):
            item.add_marker(pytest.mark.db)
        if "unit" in str(item.path):
            item.add_marker(pytest.mark.unit)


# =======================
# Domain Fixtures
# =======================

@pytest.fixture
def mixed_rooms():
    """One bedroom, a living room and a bathroom: area 328, cost 1640."""
    return [
        Room.create('bedroom', '10', '12'),
        Room.create('living room', '12', '12'),
        Room.create('bathroom', '8', '8'),
    ]


@pytest.fixture
def five_room_apartment():
    """Five 10x10 rooms, three of them bedrooms: total rent 2500."""
    apartment = Apartment.create('A1')
    for room_type in ['bedroom', 'living room', 'bathroom', 'bedroom', 'bedroom']:
        apartment.add_room(Room.create(room_type, '10', '10'))
    return apartment


@pytest.fixture
def renters():
    """Three renters with 1000 cash each."""
    return [
        Renter.create('bob', '35', 'm', 'social worker', cash=1000),
        Renter.create('jim', '19', 'm', 'movie star', cash=1000),
        Renter.create('sue', '27', 'f', 'coder', cash=1000),
    ]


# =======================
# Storage Fixtures
# =======================

@pytest.fixture
def fake_redis():
    """Dict-backed stand-in for a redis.asyncio client."""
    return InMemoryRedis()


@pytest.fixture
def mock_pool():
    """asyncpg pool mock handing out a single mocked connection."""
    return MockHelpers.create_mock_pool()


@pytest.fixture
def mock_apartment_repository():
    """Apartment repository mock with async methods."""
    repository = Mock()
    repository.save = AsyncMock(side_effect=lambda apartment: apartment)
    repository.get_by_id = AsyncMock(return_value=None)
    repository.delete = AsyncMock(return_value=True)
    repository.get_all = AsyncMock(return_value=[])
    repository.get_count = AsyncMock(return_value=0)
    return repository
