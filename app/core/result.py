"""
Tagged result type returned by the query and relationship layers.

Nothing in those layers raises to its caller: backend rejections
(``postgrest.exceptions.APIError``) and unexpected runtime errors are both
normalized into a failed ``QueryResult`` carrying a ``QueryError``.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict


NOT_FOUND_CODE = "PGRST116"
UNIQUE_VIOLATION_CODE = "23505"
FOREIGN_KEY_VIOLATION_CODE = "23503"


class QueryError(Exception):
    def __init__(self, message: str, code: Optional[str] = None, action: Optional[str] = None):
        self.message = message
        self.code = code
        self.action = action
        super().__init__(f"{action}: {message}" if action else message)

    @classmethod
    def from_exception(cls, exc: Exception, action: Optional[str] = None) -> "QueryError":
        if isinstance(exc, QueryError):
            if action and not exc.action:
                return cls(exc.message, exc.code, action)
            return exc
        message = getattr(exc, "message", None) or str(exc) or exc.__class__.__name__
        return cls(message, getattr(exc, "code", None), action)

    @classmethod
    def not_found(cls, what: str, action: Optional[str] = None) -> "QueryError":
        return cls(f"{what} not found", NOT_FOUND_CODE, action)

    @property
    def is_not_found(self) -> bool:
        return self.code == NOT_FOUND_CODE

    @property
    def is_conflict(self) -> bool:
        return self.code in (UNIQUE_VIOLATION_CODE, FOREIGN_KEY_VIOLATION_CODE)


class QueryResult(BaseModel):
    """Either ``ok`` with ``data`` or not ok with ``error``."""

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    ok: bool
    data: Any = None
    error: Optional[QueryError] = None

    @classmethod
    def success(cls, data: Any = None) -> "QueryResult":
        return cls(ok=True, data=data)

    @classmethod
    def failure(cls, error: Exception, action: Optional[str] = None) -> "QueryResult":
        return cls(ok=False, error=QueryError.from_exception(error, action))

    def unwrap(self) -> Any:
        """Return data, raising the carried error on failure"""
        if not self.ok:
            raise self.error
        return self.data
