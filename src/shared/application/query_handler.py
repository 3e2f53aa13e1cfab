"""
Base Query Handler
Abstract base for all query handlers
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from shared.application.base_query import BaseQuery
from shared.infrastructure.observability.logger import get_logger

logger = get_logger(__name__)

TQuery = TypeVar("TQuery", bound=BaseQuery)
TResult = TypeVar("TResult")


class QueryHandler(ABC, Generic[TQuery, TResult]):
    """
    Abstract base class for query handlers.

    Query handlers execute read operations without modifying state.

    Type Parameters:
        TQuery: Query type this handler processes
        TResult: Return type of the handler
    """

    @abstractmethod
    async def handle(self, query: TQuery) -> TResult:
        """
        Handle the query and return result.

        Raises:
            NotFoundError: If requested resource not found
        """

    async def __call__(self, query: TQuery) -> TResult:
        query_name = query.__class__.__name__

        logger.debug("Executing query", query=query_name)

        try:
            result = await self.handle(query)
            logger.debug("Query executed successfully", query=query_name)
            return result
        except Exception as e:
            logger.warning("Query execution failed", query=query_name, error=str(e))
            raise
