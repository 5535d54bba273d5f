"""
Query result and status.
"""

import time
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Optional

from tmdb_gateway.core.endpoints.resolver import RequestTarget
from tmdb_gateway.core.exceptions import UpstreamError


class QueryStatus(str, Enum):
    UNINITIALIZED = "uninitialized"
    PENDING = "pending"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class QueryResult:
    """Outcome of a query: payload or error, plus its status."""

    target: RequestTarget
    status: QueryStatus
    data: Optional[Any] = None
    error: Optional[UpstreamError] = None
    from_cache: bool = False
    fetched_at: float = field(default_factory=time.time)

    @classmethod
    def success(cls, target: RequestTarget, data: Any) -> "QueryResult":
        return cls(target=target, status=QueryStatus.SUCCESS, data=data)

    @classmethod
    def failure(cls, target: RequestTarget, error: UpstreamError) -> "QueryResult":
        return cls(target=target, status=QueryStatus.ERROR, error=error)

    @classmethod
    def placeholder(cls, target: RequestTarget, status: QueryStatus) -> "QueryResult":
        return cls(target=target, status=status, fetched_at=0.0)

    @property
    def is_success(self) -> bool:
        return self.status is QueryStatus.SUCCESS

    @property
    def is_error(self) -> bool:
        return self.status is QueryStatus.ERROR

    @property
    def is_loading(self) -> bool:
        return self.status is QueryStatus.PENDING

    def cached(self) -> "QueryResult":
        """Copy of this result marked as served from cache."""
        return replace(self, from_cache=True)

    def unwrap(self) -> Any:
        """
        Return the payload, or re-raise the stored error.

        Raises:
            UpstreamError: if the query failed
            RuntimeError: if the query has not completed
        """
        if self.is_error:
            raise self.error
        if not self.is_success:
            raise RuntimeError(f"Query {self.target.endpoint} has not completed ({self.status.value})")
        return self.data
