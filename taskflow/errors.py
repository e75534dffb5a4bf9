"""Error hierarchy for the TaskFlow API.

Every error carries a code, a category and the HTTP status it maps to.
Store functions never raise these for business-rule failures; they return
``None``/``False`` and the routers translate that outcome into the matching
error. Only storage failures propagate from the store layer.
"""

from enum import Enum
from typing import Optional


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    AUTHENTICATION = "authentication"
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    FORBIDDEN = "forbidden"
    CONFLICT = "conflict"
    DATABASE = "database"
    INTERNAL = "internal"


class TaskFlowError(Exception):
    """Base exception for all TaskFlow errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the REST error envelope."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
            }
        }


# ─── Domain errors (400-level) ──────────────────────────────────

class AuthenticationError(TaskFlowError):
    """No resolvable identity, or credentials did not match."""
    def __init__(self, message: str = "Not authenticated"):
        super().__init__(
            message, "UNAUTHENTICATED", ErrorCategory.AUTHENTICATION, 401,
        )


class NotFoundOrUnownedError(TaskFlowError):
    """Resource is missing or belongs to someone else; the two are not distinguished."""
    def __init__(self, resource_type: str, resource_id: Optional[int] = None):
        message = f"{resource_type} not found"
        if resource_id is not None:
            message = f"{resource_type} '{resource_id}' not found"
        super().__init__(
            message, "NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class DeniedError(TaskFlowError):
    """The caller may not attach a new resource to the given parent."""
    def __init__(self, parent_type: str, parent_id: int):
        super().__init__(
            f"You do not have permission to add to {parent_type.lower()} '{parent_id}'",
            "FORBIDDEN", ErrorCategory.FORBIDDEN, 403,
        )
        self.parent_type = parent_type
        self.parent_id = parent_id


class ConflictError(TaskFlowError):
    """A uniqueness rule was violated."""
    def __init__(self, message: str, code: str = "CONFLICT"):
        super().__init__(message, code, ErrorCategory.CONFLICT, 400)


# ─── Infrastructure errors (500-level) ──────────────────────────

class DatabaseError(TaskFlowError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE, 503,
        )
        self.operation = operation
