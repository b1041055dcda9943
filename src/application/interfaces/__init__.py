"""
Application interfaces package.
"""

from .repositories import (
    MaintenanceScheduleRepositoryInterface,
    PropertyRepositoryInterface,
    VendorRepositoryInterface,
    WorkOrderRepositoryInterface,
)
from .services import TransactionServiceInterface

__all__ = [
    "MaintenanceScheduleRepositoryInterface",
    "PropertyRepositoryInterface",
    "TransactionServiceInterface",
    "VendorRepositoryInterface",
    "WorkOrderRepositoryInterface",
]
