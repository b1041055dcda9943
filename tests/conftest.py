"""
Pytest configuration and fixtures.
"""

from datetime import datetime, timezone
from decimal import Decimal
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from src.application.interfaces.repositories import (
    MaintenanceScheduleRepositoryInterface,
    PropertyRepositoryInterface,
    VendorRepositoryInterface,
    WorkOrderRepositoryInterface,
)
from src.application.interfaces.services import TransactionServiceInterface
from src.config.settings import Settings
from src.domain.entities.property import Property
from src.domain.entities.technician import Technician
from src.domain.entities.unit import Unit
from src.domain.entities.vendor import Vendor
from src.domain.entities.work_order import WorkOrder
from src.domain.value_objects.address import Address
from src.domain.value_objects.money import Money
from src.domain.value_objects.property_type import PropertyType
from src.domain.value_objects.vendor_specialization import VendorSpecialization
from src.domain.value_objects.work_order_priority import WorkOrderPriority


@pytest.fixture(scope="session")
def test_settings():
    """Test settings configuration."""
    return Settings(
        ENVIRONMENT="test",
        LOG_LEVEL="DEBUG",
        COST_OVERRUN_THRESHOLD=0.20,
        DUE_SCHEDULE_BATCH_SIZE=10,
    )


@pytest.fixture
def sample_address():
    """Sample address for testing."""
    return Address(
        street="123 Test St", city="Test City", state="TX", postal_code="12345"
    )


@pytest.fixture
def sample_property(sample_address):
    """Sample multi-family property with one unit."""
    property_ = Property.create(
        name="Maple Court", address=sample_address, property_type=PropertyType.MULTI_FAMILY
    )
    property_.add_unit(
        Unit.create(property_.id, "1A", bedrooms=2, square_feet=Decimal("850"))
    )
    return property_


@pytest.fixture
def plumbing_vendor():
    """Active plumbing vendor with one technician."""
    vendor = Vendor(
        name="Pat Pipes",
        company_name="Pipes & Co",
        phone_number="555-0100",
        email="pat@pipes.example.com",
        specialization=VendorSpecialization.PLUMBING,
    )
    vendor.add_technician(
        Technician(
            vendor_id=vendor.id,
            name="Sam Wrench",
            phone_number="555-0101",
            email="sam@pipes.example.com",
        )
    )
    return vendor


@pytest.fixture
def electrical_vendor():
    """Active electrical vendor."""
    return Vendor(
        name="Erin Volt",
        company_name="Volt Electric",
        phone_number="555-0200",
        email="erin@volt.example.com",
        specialization=VendorSpecialization.ELECTRICAL,
    )


@pytest.fixture
def new_work_order():
    """Work order in New status with a 100 USD estimate."""
    work_order = WorkOrder.create(
        property_id=uuid4(),
        unit_id=None,
        description="Kitchen sink is leaking",
        priority=WorkOrderPriority.MEDIUM,
    )
    work_order.update_estimated_cost(Money(Decimal("100.00")))
    work_order.pull_domain_events()
    return work_order


@pytest.fixture
def scheduled_for():
    return datetime(2030, 6, 3, 9, 0, tzinfo=timezone.utc)


@pytest.fixture
def mock_work_order_repository():
    """Mock work order repository."""
    mock_repo = AsyncMock(spec=WorkOrderRepositoryInterface)

    mock_repo.get_by_id = AsyncMock()
    mock_repo.find_by_vendor = AsyncMock(return_value=[])
    mock_repo.find_by_status = AsyncMock(return_value=[])
    mock_repo.create = AsyncMock(side_effect=lambda work_order: work_order)
    mock_repo.update = AsyncMock(side_effect=lambda work_order: work_order)

    return mock_repo


@pytest.fixture
def mock_vendor_repository():
    """Mock vendor repository."""
    mock_repo = AsyncMock(spec=VendorRepositoryInterface)

    mock_repo.get_by_id = AsyncMock()
    mock_repo.find_active_by_specialization = AsyncMock(return_value=[])

    return mock_repo


@pytest.fixture
def mock_property_repository():
    """Mock property repository."""
    mock_repo = AsyncMock(spec=PropertyRepositoryInterface)
    mock_repo.get_by_id = AsyncMock()
    mock_repo.list_all = AsyncMock(return_value=[])
    return mock_repo


@pytest.fixture
def mock_schedule_repository():
    """Mock maintenance schedule repository."""
    mock_repo = AsyncMock(spec=MaintenanceScheduleRepositoryInterface)

    mock_repo.find_active = AsyncMock(return_value=[])
    mock_repo.update = AsyncMock(side_effect=lambda schedule: schedule)

    return mock_repo


@pytest.fixture
def mock_transaction_service():
    """Mock transaction service."""
    mock_service = AsyncMock(spec=TransactionServiceInterface)
    mock_service.commit = AsyncMock()
    mock_service.rollback = AsyncMock()
    return mock_service
