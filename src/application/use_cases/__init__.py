"""
Use cases package.

This package contains the business logic use cases that orchestrate
the domain model, application services and repositories.
"""

from .assign_work_order import AssignWorkOrderRequest, AssignWorkOrderUseCase
from .cancel_work_order import CancelWorkOrderUseCase
from .complete_work_order import (
    CompleteWorkOrderRequest,
    CompleteWorkOrderResult,
    CompleteWorkOrderUseCase,
)
from .create_work_order import CreateWorkOrderRequest, CreateWorkOrderUseCase
from .list_properties import (
    ListPropertiesRequest,
    ListPropertiesUseCase,
    PropertySummary,
)
from .process_due_schedules import ProcessDueSchedulesUseCase
from .recommend_vendor import RecommendVendorUseCase, VendorRecommendation
from .review_work_orders import (
    ReviewWorkOrdersRequest,
    ReviewWorkOrdersUseCase,
    WorkOrderReviewItem,
)
from .start_work_order import StartWorkOrderUseCase

__all__ = [
    "AssignWorkOrderRequest",
    "AssignWorkOrderUseCase",
    "CancelWorkOrderUseCase",
    "CompleteWorkOrderRequest",
    "CompleteWorkOrderResult",
    "CompleteWorkOrderUseCase",
    "CreateWorkOrderRequest",
    "CreateWorkOrderUseCase",
    "ListPropertiesRequest",
    "ListPropertiesUseCase",
    "ProcessDueSchedulesUseCase",
    "PropertySummary",
    "RecommendVendorUseCase",
    "ReviewWorkOrdersRequest",
    "ReviewWorkOrdersUseCase",
    "StartWorkOrderUseCase",
    "VendorRecommendation",
    "WorkOrderReviewItem",
]
