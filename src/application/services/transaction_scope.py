"""
Transaction scope shared by the work order use cases.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from src.application.interfaces.services import TransactionServiceInterface
from src.config.logging import get_logger
from src.domain.exceptions.base import DomainError

logger = get_logger(__name__)


@asynccontextmanager
async def transaction_scope(
    transaction_service: TransactionServiceInterface, operation: str, **context
) -> AsyncIterator[None]:
    """
    Commit when the block finishes, rollback and re-raise when it fails.

    Args:
        transaction_service: Transaction boundary of the current use case
        operation: Short name of the operation, used in log events
        **context: Extra key-value pairs bound to failure log events

    Raises:
        Exception: Whatever the block or the commit raised
    """
    try:
        yield
        await transaction_service.commit()

    except DomainError as e:
        await transaction_service.rollback()
        logger.warning(
            "Operation rejected by business rules",
            operation=operation,
            error=str(e),
            error_type=type(e).__name__,
            **context,
        )
        raise

    except Exception as e:
        await transaction_service.rollback()
        logger.error(
            "Transaction rolled back due to error",
            operation=operation,
            error=str(e),
            exc_info=True,
            **context,
        )
        raise
