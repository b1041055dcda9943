"""
Application layer package.

This package contains use cases, services, and interfaces that coordinate
the domain model with persistence and transaction boundaries.
"""

from .interfaces.repositories import (
    MaintenanceScheduleRepositoryInterface,
    PropertyRepositoryInterface,
    VendorRepositoryInterface,
    WorkOrderRepositoryInterface,
)
from .interfaces.services import TransactionServiceInterface
from .services.cost_overrun import CostOverrunPolicy, CostVariance
from .services.domain_events import drain_domain_events
from .services.transaction_scope import transaction_scope
from .use_cases.assign_work_order import AssignWorkOrderUseCase
from .use_cases.cancel_work_order import CancelWorkOrderUseCase
from .use_cases.complete_work_order import CompleteWorkOrderUseCase
from .use_cases.create_work_order import CreateWorkOrderUseCase
from .use_cases.list_properties import ListPropertiesUseCase
from .use_cases.process_due_schedules import ProcessDueSchedulesUseCase
from .use_cases.recommend_vendor import RecommendVendorUseCase
from .use_cases.review_work_orders import ReviewWorkOrdersUseCase
from .use_cases.start_work_order import StartWorkOrderUseCase

__all__ = [
    # Interfaces
    "MaintenanceScheduleRepositoryInterface",
    "PropertyRepositoryInterface",
    "TransactionServiceInterface",
    "VendorRepositoryInterface",
    "WorkOrderRepositoryInterface",
    # Services
    "CostOverrunPolicy",
    "CostVariance",
    "drain_domain_events",
    "transaction_scope",
    # Use Cases
    "AssignWorkOrderUseCase",
    "CancelWorkOrderUseCase",
    "CompleteWorkOrderUseCase",
    "CreateWorkOrderUseCase",
    "ListPropertiesUseCase",
    "ProcessDueSchedulesUseCase",
    "RecommendVendorUseCase",
    "ReviewWorkOrdersUseCase",
    "StartWorkOrderUseCase",
]
