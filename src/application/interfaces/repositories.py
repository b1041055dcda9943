"""
Repository interfaces for dependency inversion.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities.maintenance_schedule import MaintenanceSchedule
from src.domain.entities.property import Property
from src.domain.entities.vendor import Vendor
from src.domain.entities.work_order import WorkOrder
from src.domain.value_objects.vendor_specialization import VendorSpecialization
from src.domain.value_objects.work_order_status import WorkOrderStatus


class WorkOrderRepositoryInterface(ABC):
    """Work order repository interface."""

    @abstractmethod
    async def create(self, work_order: WorkOrder) -> WorkOrder:
        """Create a new work order."""
        pass

    @abstractmethod
    async def get_by_id(self, work_order_id: UUID) -> Optional[WorkOrder]:
        """Get work order by ID."""
        pass

    @abstractmethod
    async def find_by_vendor(self, vendor_id: UUID) -> List[WorkOrder]:
        """Find work orders currently assigned to a vendor."""
        pass

    @abstractmethod
    async def find_by_status(
        self, status: WorkOrderStatus, limit: int = 50
    ) -> List[WorkOrder]:
        """Find work orders in the given status."""
        pass

    @abstractmethod
    async def update(self, work_order: WorkOrder) -> WorkOrder:
        """Update work order."""
        pass


class VendorRepositoryInterface(ABC):
    """Vendor repository interface."""

    @abstractmethod
    async def get_by_id(self, vendor_id: UUID) -> Optional[Vendor]:
        """Get vendor by ID, technicians included."""
        pass

    @abstractmethod
    async def find_active_by_specialization(
        self, specialization: VendorSpecialization
    ) -> List[Vendor]:
        """Find active vendors with the given specialization."""
        pass


class MaintenanceScheduleRepositoryInterface(ABC):
    """Maintenance schedule repository interface."""

    @abstractmethod
    async def find_active(self, limit: int = 100) -> List[MaintenanceSchedule]:
        """Find active schedules ordered by next scheduled date."""
        pass

    @abstractmethod
    async def update(self, schedule: MaintenanceSchedule) -> MaintenanceSchedule:
        """Update maintenance schedule."""
        pass


class PropertyRepositoryInterface(ABC):
    """Property repository interface."""

    @abstractmethod
    async def get_by_id(self, property_id: UUID) -> Optional[Property]:
        """Get property by ID, units included."""
        pass

    @abstractmethod
    async def list_all(self) -> List[Property]:
        """List all properties, units included."""
        pass
